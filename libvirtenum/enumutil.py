"""Extensible enumerations for libvirt integer constants.

libvirt adds new members to its C enumerations in almost every release without
changing their storage type, so a client using this package may be handed a
value that did not exist when the tables in :mod:`libvirtenum.constants` were
written. Symbolic types are generated from a table of ``(raw, name)`` rows with
:func:`impl_enum`; :class:`ExtEnum` wraps a raw integer so that unrecognised
values stay representable and round-trip unchanged.
"""

import ctypes
import enum
import keyword
import logging
import numbers
import sys

from collections import namedtuple
from collections.abc import Mapping

from libvirtenum.error import EnumDeclarationError
from libvirtenum.error import UnknownEnumError

log = logging.getLogger(__name__)

Row = namedtuple('row', ['raw', 'name', 'requires', 'conditional'])


def conditional(raw, name, requires=None):
    """Declare a row that only exists in some libvirt releases.

    The row is kept only if ``requires`` (by default ``raw`` itself) names a
    constant present in the ``source`` passed to :func:`impl_enum`.
    """
    if requires is None:
        if not isinstance(raw, str):
            raise EnumDeclarationError('conditional row %r needs a constant name to test for' % name)
        requires = raw
    return Row(raw, name, requires, True)


def check_raw(raw_type, value):
    """Make sure ``value`` is a valid instance of the C integer ``raw_type``."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError('%s value must be an integer, not %s' % (raw_type.__name__, type(value).__name__))
    value = int(value)
    if raw_type(value).value != value:
        raise OverflowError('%s out of range for %s' % (value, raw_type.__name__))
    return value


class RawEnum(enum.Enum):
    """Base class of all generated enumerations.

    Member values are the raw libvirt constants. Subclasses are created by
    :func:`impl_enum`, which also sets ``raw_type``.
    """

    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_raw(cls, raw):
        """Return the member for ``raw`` or ``None`` if it is not declared."""
        raw = check_raw(cls.raw_type, raw)
        try:
            return cls(raw)
        except ValueError:
            return None

    def to_raw(self):
        return self.value

    @classmethod
    def ext(cls, raw):
        return ExtEnum.from_raw(cls, raw)


_RESERVED = frozenset(attr for klass in RawEnum.__mro__ for attr in vars(klass)) | {'raw_type'}


def _resolve(source, name):
    if isinstance(source, Mapping):
        return name in source, source.get(name)
    return hasattr(source, name), getattr(source, name, None)


def _build_rows(name, raw, match, source):
    rows = []
    for row in match:
        if not isinstance(row, Row):
            try:
                value, member = row
            except (TypeError, ValueError):
                raise EnumDeclarationError('%s: invalid row %r' % (name, row))
            row = Row(value, member, None, False)

        if not isinstance(row.name, str) or not row.name.isidentifier() or keyword.iskeyword(row.name):
            raise EnumDeclarationError('%s: invalid member name %r' % (name, row.name))
        if row.name.startswith('_') or row.name in _RESERVED:
            raise EnumDeclarationError('%s: reserved member name %r' % (name, row.name))

        if row.conditional or isinstance(row.raw, str):
            if source is None:
                raise EnumDeclarationError('%s: %s refers to a constant but no source was given' % (
                    name, row.name))

        if row.conditional:
            present, _ = _resolve(source, row.requires)
            if not present:
                log.debug('%s: %s not available, skipping %s', name, row.requires, row.name)
                continue

        value = row.raw
        if isinstance(value, str):
            present, value = _resolve(source, row.raw)
            if not present:
                raise EnumDeclarationError('%s: constant %s is not defined' % (name, row.raw))

        try:
            value = check_raw(raw, value)
        except (TypeError, OverflowError) as e:
            raise EnumDeclarationError('%s: bad constant for %s: %s' % (name, row.name, e))

        rows.append((row.name, value))

    if not rows:
        raise EnumDeclarationError('%s: no members declared' % name)

    seen = set()
    for member, _ in rows:
        if member in seen:
            raise EnumDeclarationError('%s: duplicate member name %s' % (name, member))
        seen.add(member)
    return rows


def impl_enum(name, raw, match, source=None, module=None):
    """Generate a :class:`RawEnum` subclass from a table of rows.

    :param name: Name of the generated type, also used to render unknown values.
    :param raw: ctypes integer type of the C enumeration, e.g. ``ctypes.c_int``.
    :param match: Ordered rows, either ``(raw, name)`` tuples or
        :func:`conditional` rows. ``raw`` is an integer or the name of a
        constant in ``source``.
    :param source: Module, object or mapping constant names are resolved in.
    :param module: Module the type is defined in (defaults to the caller's).
    """
    if not (isinstance(raw, type) and issubclass(raw, ctypes._SimpleCData)) or raw._type_ not in 'bBhHiIlLqQ':
        raise EnumDeclarationError('%s: raw type must be a ctypes integer type, not %r' % (name, raw))

    rows = _build_rows(name, raw, match, source)

    if module is None:
        module = sys._getframe(1).f_globals.get('__name__')

    cls = RawEnum(name, rows, module=module)
    cls.raw_type = raw
    return cls


class ExtEnum(object):
    """A libvirt enumeration value that is either known or unknown.

    Known values hold a member of a :class:`RawEnum` type, unknown values hold
    the raw integer libvirt returned. Instances are immutable.
    """

    __slots__ = ('_type', '_member', '_raw')

    def __init__(self, enum_type, member=None, raw=None):
        if not (isinstance(enum_type, type) and issubclass(enum_type, RawEnum)):
            raise TypeError('%r is not a RawEnum type' % (enum_type, ))
        if (member is None) == (raw is None):
            raise TypeError('ExtEnum needs exactly one of member and raw')
        if member is not None and not isinstance(member, enum_type):
            raise TypeError('%r is not a member of %s' % (member, enum_type.__name__))
        if raw is not None:
            raw = check_raw(enum_type.raw_type, raw)
            if enum_type.from_raw(raw) is not None:
                raise TypeError('%s is a known %s value' % (raw, enum_type.__name__))

        object.__setattr__(self, '_type', enum_type)
        object.__setattr__(self, '_member', member)
        object.__setattr__(self, '_raw', raw)

    @classmethod
    def from_raw(cls, enum_type, raw):
        member = enum_type.from_raw(raw)
        if member is None:
            return cls(enum_type, raw=raw)
        return cls(enum_type, member=member)

    @classmethod
    def from_enum(cls, member):
        return cls(type(member), member=member)

    @property
    def enum_type(self):
        return self._type

    def to_raw(self):
        if self._member is not None:
            return self._member.to_raw()
        return self._raw

    def unwrap(self):
        """Return the known member.

        Only use this where libvirt cannot return a value this version does not
        know about. An unknown value is a bug in the caller and raises
        ``AssertionError``.
        """
        if self._member is None:
            raise AssertionError('called unwrap() on an unknown %s value: %s' % (
                self._type.__name__, self._raw))
        return self._member

    def unwrap_or(self, default):
        if self._member is None:
            return default
        return self._member

    def is_known(self):
        return self._member is not None

    def is_unknown(self):
        return self._member is None

    def is_known_and(self, predicate):
        return self._member is not None and bool(predicate(self._member))

    def is_unknown_and(self, predicate):
        return self._member is None and bool(predicate(self._raw))

    def is_(self, candidate):
        return self._member is not None and self._member is candidate

    def is_any(self, candidates):
        return self._member is not None and any(self._member is c for c in candidates)

    def known(self):
        return self._member

    def unknown(self):
        return self._raw

    def to_known(self):
        """Return the known member or raise :class:`UnknownEnumError`."""
        if self._member is None:
            raise UnknownEnumError(self._raw, self._type)
        return self._member

    def __int__(self):
        return self.to_raw()

    def __index__(self):
        return self.to_raw()

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __reduce__(self):
        return (ExtEnum.from_raw, (self._type, self.to_raw()))

    def __eq__(self, other):
        if not isinstance(other, ExtEnum):
            return NotImplemented
        return (self._type, self._member, self._raw) == (other._type, other._member, other._raw)

    def __hash__(self):
        return hash((self._type, self._member, self._raw))

    def __str__(self):
        if self._member is not None:
            return str(self._member)
        return '%s(%s)' % (self._type.__name__, self._raw)

    def __repr__(self):
        if self._member is not None:
            return '<ExtEnum %s.%s>' % (self._type.__name__, self._member.name)
        return '<ExtEnum %s(%s)>' % (self._type.__name__, self._raw)
