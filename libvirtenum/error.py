class LibVirtEnumError(Exception):
    pass


class EnumDeclarationError(LibVirtEnumError):
    pass


class UnknownEnumError(LibVirtEnumError):
    """Raised when a caller demands a known value but libvirt returned a raw one.

    ``raw`` is the value that could not be resolved.
    """

    def __init__(self, raw, enum_type=None):
        self.raw = raw
        self.enum_type = enum_type
        if enum_type is None:
            msg = 'unknown enum value %s' % raw
        else:
            msg = 'unknown %s value %s' % (enum_type.__name__, raw)
        super(UnknownEnumError, self).__init__(msg)

    def __reduce__(self):
        return (type(self), (self.raw, self.enum_type))


class ConnectionError(LibVirtEnumError):
    pass


class ObjectLookupError(LibVirtEnumError):
    pass


class OperationError(LibVirtEnumError):
    pass


class DomainLookupError(ObjectLookupError):
    pass


class PoolLookupError(ObjectLookupError):
    pass


class VolumeLookupError(ObjectLookupError):
    pass


class NetworkLookupError(ObjectLookupError):
    pass
