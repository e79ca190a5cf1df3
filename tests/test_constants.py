import pytest

libvirt = pytest.importorskip('libvirt')

from libvirtenum import constants  # NOQA: E402
from libvirtenum.constants import DomainState  # NOQA: E402
from libvirtenum.constants import ENUMS  # NOQA: E402
from libvirtenum.constants import SecretUsageType  # NOQA: E402
from libvirtenum.constants import StoragePoolState  # NOQA: E402
from libvirtenum.constants import StorageVolType  # NOQA: E402


@pytest.mark.parametrize('enum_type', list(ENUMS.values()), ids=list(ENUMS))
def test_tables_match_libvirt(enum_type):
    for member in enum_type:
        assert enum_type.from_raw(member.to_raw()) is member
        assert enum_type.ext(member.to_raw()).is_(member)
        assert str(member) == member.name.lower()


def test_domain_state():
    assert DomainState.RUNNING.to_raw() == libvirt.VIR_DOMAIN_RUNNING
    assert DomainState.from_raw(libvirt.VIR_DOMAIN_SHUTOFF) is DomainState.SHUTOFF
    assert str(DomainState.PMSUSPENDED) == 'pmsuspended'


def test_storage_pool_state():
    assert StoragePoolState.from_raw(libvirt.VIR_STORAGE_POOL_INACCESSIBLE) is StoragePoolState.INACCESSIBLE
    assert str(StoragePoolState.ext(1000)) == 'StoragePoolState(1000)'


def test_conditional_members_follow_libvirt():
    assert hasattr(StorageVolType, 'PLOOP') == hasattr(libvirt, 'VIR_STORAGE_VOL_PLOOP')
    assert hasattr(SecretUsageType, 'VTPM') == hasattr(libvirt, 'VIR_SECRET_USAGE_TYPE_VTPM')


def test_newer_values_stay_unknown():
    last = max(m.to_raw() for m in DomainState)
    value = DomainState.ext(last + 1)
    assert value.is_unknown()
    assert value.to_raw() == last + 1


def test_enum_names():
    for name, enum_type in ENUMS.items():
        assert getattr(constants, enum_type.__name__) is enum_type
