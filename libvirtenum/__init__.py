from libvirtenum.enumutil import ExtEnum  # NOQA
from libvirtenum.enumutil import RawEnum  # NOQA
from libvirtenum.enumutil import conditional  # NOQA
from libvirtenum.enumutil import impl_enum  # NOQA
from libvirtenum.error import UnknownEnumError  # NOQA
