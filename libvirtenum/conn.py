import logging

from libvirtenum._libvirt import libvirt
from libvirtenum.constants import DomainState
from libvirtenum.constants import NetworkUpdateCommand
from libvirtenum.constants import NetworkUpdateSection
from libvirtenum.constants import SecretUsageType
from libvirtenum.constants import StoragePoolState
from libvirtenum.constants import StorageVolType
from libvirtenum.constants import StorageVolWipeAlgorithm
from libvirtenum.enumutil import ExtEnum
from libvirtenum.enumutil import RawEnum
from libvirtenum.error import ConnectionError
from libvirtenum.error import DomainLookupError
from libvirtenum.error import NetworkLookupError
from libvirtenum.error import OperationError
from libvirtenum.error import PoolLookupError
from libvirtenum.error import VolumeLookupError

log = logging.getLogger(__name__)


def raw_arg(enum_type, value):
    """Convert a member, ExtEnum or plain int of ``enum_type`` to the int passed to libvirt."""
    if isinstance(value, ExtEnum):
        if value.enum_type is not enum_type:
            raise TypeError('expected %s, got %r' % (enum_type.__name__, value))
        return value.to_raw()
    if isinstance(value, RawEnum):
        if not isinstance(value, enum_type):
            raise TypeError('expected %s, got %r' % (enum_type.__name__, value))
        return value.to_raw()
    return ExtEnum.from_raw(enum_type, value).to_raw()


class LibVirtConnection(object):
    def __init__(self, name=None, readonly=True, conn=None):
        if conn is None:
            try:
                if readonly:
                    conn = libvirt.openReadOnly(name)
                else:
                    conn = libvirt.open(name)
            except libvirt.libvirtError as e:
                raise ConnectionError('Failed to open connection to the hypervisor', e)
            if conn is None:
                raise ConnectionError('Failed to open connection to the hypervisor')
        self._conn = conn

    def getRawDomain(self, name):
        try:
            return self._conn.lookupByName(name)
        except libvirt.libvirtError as e:
            raise DomainLookupError("Error looking up domain", e)

    def getRawPool(self, name):
        try:
            return self._conn.storagePoolLookupByName(name)
        except libvirt.libvirtError as e:
            raise PoolLookupError("Error looking up storage pool", e)

    def getRawVolume(self, pool, name):
        pool = self.getRawPool(pool)
        try:
            return pool.storageVolLookupByName(name)
        except libvirt.libvirtError as e:
            raise VolumeLookupError("Error looking up storage volume", e)

    def getRawNetwork(self, name):
        try:
            return self._conn.networkLookupByName(name)
        except libvirt.libvirtError as e:
            raise NetworkLookupError("Error looking up network", e)

    def getDomainState(self, name):
        domain = self.getRawDomain(name)
        try:
            return DomainState.ext(domain.state()[0])
        except libvirt.libvirtError as e:
            raise OperationError("Error reading domain state", e)

    def getDomainStates(self):
        try:
            return {d.name(): DomainState.ext(d.state()[0]) for d in self._conn.listAllDomains()}
        except libvirt.libvirtError as e:
            raise OperationError("Error listing domains", e)

    def getPoolStates(self):
        try:
            return {p.name(): StoragePoolState.ext(p.info()[0]) for p in self._conn.listAllStoragePools()}
        except libvirt.libvirtError as e:
            raise OperationError("Error listing storage pools", e)

    def getVolumeTypes(self, pool):
        pool = self.getRawPool(pool)
        try:
            return {v.name(): StorageVolType.ext(v.info()[0]) for v in pool.listAllVolumes()}
        except libvirt.libvirtError as e:
            raise OperationError("Error listing storage volumes", e)

    def getSecretUsageTypes(self):
        try:
            return {s.UUIDString(): SecretUsageType.ext(s.usageType()) for s in self._conn.listAllSecrets()}
        except libvirt.libvirtError as e:
            raise OperationError("Error listing secrets", e)

    def updateNetwork(self, name, command, section, xml, index=-1, flags=0):
        command = raw_arg(NetworkUpdateCommand, command)
        section = raw_arg(NetworkUpdateSection, section)
        network = self.getRawNetwork(name)
        log.info('Update network %s (command %s, section %s)', name,
                 NetworkUpdateCommand.ext(command), NetworkUpdateSection.ext(section))
        try:
            network.update(command, section, index, xml, flags)
        except libvirt.libvirtError as e:
            raise OperationError("Error updating network", e)

    def wipeVolume(self, pool, volume, algorithm, flags=0):
        algorithm = raw_arg(StorageVolWipeAlgorithm, algorithm)
        vol = self.getRawVolume(pool, volume)
        log.info('Wipe volume %s in pool %s using %s', volume, pool, StorageVolWipeAlgorithm.ext(algorithm))
        try:
            vol.wipePattern(algorithm, flags)
        except libvirt.libvirtError as e:
            raise OperationError("Error wiping storage volume", e)
