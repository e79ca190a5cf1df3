import logging

from ctypes import c_int
from ctypes import c_uint

from libvirtenum._libvirt import LIBRARY_VERSION
from libvirtenum._libvirt import libvirt
from libvirtenum.enumutil import conditional
from libvirtenum.enumutil import impl_enum

log = logging.getLogger(__name__)
log.debug('Loading enumeration tables, libvirt version %s', LIBRARY_VERSION)

# NB: libvirt adds new values to these enums over time. The tables need
# libvirt-python 3.0.0 or later. Values added to an enum after it first appeared
# are declared conditional so the tables still build against releases that do
# not define them yet.

DomainState = impl_enum('DomainState', c_int, [
    ('VIR_DOMAIN_NOSTATE', 'NOSTATE'),
    ('VIR_DOMAIN_RUNNING', 'RUNNING'),
    ('VIR_DOMAIN_BLOCKED', 'BLOCKED'),
    ('VIR_DOMAIN_PAUSED', 'PAUSED'),
    ('VIR_DOMAIN_SHUTDOWN', 'SHUTDOWN'),
    ('VIR_DOMAIN_SHUTOFF', 'SHUTOFF'),
    ('VIR_DOMAIN_CRASHED', 'CRASHED'),
    ('VIR_DOMAIN_PMSUSPENDED', 'PMSUSPENDED'),
], source=libvirt)

StoragePoolState = impl_enum('StoragePoolState', c_int, [
    ('VIR_STORAGE_POOL_INACTIVE', 'INACTIVE'),
    ('VIR_STORAGE_POOL_BUILDING', 'BUILDING'),
    ('VIR_STORAGE_POOL_RUNNING', 'RUNNING'),
    ('VIR_STORAGE_POOL_DEGRADED', 'DEGRADED'),
    ('VIR_STORAGE_POOL_INACCESSIBLE', 'INACCESSIBLE'),
], source=libvirt)

StoragePoolEventType = impl_enum('StoragePoolEventType', c_int, [
    ('VIR_STORAGE_POOL_EVENT_DEFINED', 'DEFINED'),
    ('VIR_STORAGE_POOL_EVENT_UNDEFINED', 'UNDEFINED'),
    ('VIR_STORAGE_POOL_EVENT_STARTED', 'STARTED'),
    ('VIR_STORAGE_POOL_EVENT_STOPPED', 'STOPPED'),
    conditional('VIR_STORAGE_POOL_EVENT_CREATED', 'CREATED'),  # 3.8.0
    conditional('VIR_STORAGE_POOL_EVENT_DELETED', 'DELETED'),  # 3.8.0
], source=libvirt)

StorageVolType = impl_enum('StorageVolType', c_int, [
    ('VIR_STORAGE_VOL_FILE', 'FILE'),
    ('VIR_STORAGE_VOL_BLOCK', 'BLOCK'),
    ('VIR_STORAGE_VOL_DIR', 'DIR'),
    ('VIR_STORAGE_VOL_NETWORK', 'NETWORK'),
    conditional('VIR_STORAGE_VOL_NETDIR', 'NETDIR'),  # 1.2.0
    conditional('VIR_STORAGE_VOL_PLOOP', 'PLOOP'),  # 1.3.4
], source=libvirt)

StorageVolWipeAlgorithm = impl_enum('StorageVolWipeAlgorithm', c_uint, [
    ('VIR_STORAGE_VOL_WIPE_ALG_ZERO', 'ZERO'),
    ('VIR_STORAGE_VOL_WIPE_ALG_NNSA', 'NNSA'),
    ('VIR_STORAGE_VOL_WIPE_ALG_DOD', 'DOD'),
    ('VIR_STORAGE_VOL_WIPE_ALG_BSI', 'BSI'),
    ('VIR_STORAGE_VOL_WIPE_ALG_GUTMANN', 'GUTMANN'),
    ('VIR_STORAGE_VOL_WIPE_ALG_SCHNEIER', 'SCHNEIER'),
    ('VIR_STORAGE_VOL_WIPE_ALG_PFITZNER7', 'PFITZNER7'),
    ('VIR_STORAGE_VOL_WIPE_ALG_PFITZNER33', 'PFITZNER33'),
    ('VIR_STORAGE_VOL_WIPE_ALG_RANDOM', 'RANDOM'),
    conditional('VIR_STORAGE_VOL_WIPE_ALG_TRIM', 'TRIM'),  # 3.10.0
], source=libvirt)

NetworkUpdateCommand = impl_enum('NetworkUpdateCommand', c_uint, [
    ('VIR_NETWORK_UPDATE_COMMAND_NONE', 'NONE'),
    ('VIR_NETWORK_UPDATE_COMMAND_MODIFY', 'MODIFY'),
    ('VIR_NETWORK_UPDATE_COMMAND_DELETE', 'DELETE'),
    ('VIR_NETWORK_UPDATE_COMMAND_ADD_LAST', 'ADD_LAST'),
    ('VIR_NETWORK_UPDATE_COMMAND_ADD_FIRST', 'ADD_FIRST'),
], source=libvirt)

NetworkUpdateSection = impl_enum('NetworkUpdateSection', c_uint, [
    ('VIR_NETWORK_SECTION_NONE', 'NONE'),
    ('VIR_NETWORK_SECTION_BRIDGE', 'BRIDGE'),
    ('VIR_NETWORK_SECTION_DOMAIN', 'DOMAIN'),
    ('VIR_NETWORK_SECTION_IP', 'IP'),
    ('VIR_NETWORK_SECTION_IP_DHCP_HOST', 'IP_DHCP_HOST'),
    ('VIR_NETWORK_SECTION_IP_DHCP_RANGE', 'IP_DHCP_RANGE'),
    ('VIR_NETWORK_SECTION_FORWARD', 'FORWARD'),
    ('VIR_NETWORK_SECTION_FORWARD_INTERFACE', 'FORWARD_INTERFACE'),
    ('VIR_NETWORK_SECTION_FORWARD_PF', 'FORWARD_PF'),
    ('VIR_NETWORK_SECTION_PORTGROUP', 'PORTGROUP'),
    ('VIR_NETWORK_SECTION_DNS_HOST', 'DNS_HOST'),
    ('VIR_NETWORK_SECTION_DNS_TXT', 'DNS_TXT'),
    ('VIR_NETWORK_SECTION_DNS_SRV', 'DNS_SRV'),
], source=libvirt)

NetworkEventType = impl_enum('NetworkEventType', c_int, [
    ('VIR_NETWORK_EVENT_DEFINED', 'DEFINED'),
    ('VIR_NETWORK_EVENT_UNDEFINED', 'UNDEFINED'),
    ('VIR_NETWORK_EVENT_STARTED', 'STARTED'),
    ('VIR_NETWORK_EVENT_STOPPED', 'STOPPED'),
], source=libvirt)

NodeDeviceEventType = impl_enum('NodeDeviceEventType', c_int, [
    ('VIR_NODE_DEVICE_EVENT_CREATED', 'CREATED'),
    ('VIR_NODE_DEVICE_EVENT_DELETED', 'DELETED'),
    conditional('VIR_NODE_DEVICE_EVENT_DEFINED', 'DEFINED'),  # 7.3.0
    conditional('VIR_NODE_DEVICE_EVENT_UNDEFINED', 'UNDEFINED'),  # 7.3.0
], source=libvirt)

SecretUsageType = impl_enum('SecretUsageType', c_int, [
    ('VIR_SECRET_USAGE_TYPE_NONE', 'NONE'),
    ('VIR_SECRET_USAGE_TYPE_VOLUME', 'VOLUME'),
    ('VIR_SECRET_USAGE_TYPE_CEPH', 'CEPH'),
    ('VIR_SECRET_USAGE_TYPE_ISCSI', 'ISCSI'),
    conditional('VIR_SECRET_USAGE_TYPE_TLS', 'TLS'),  # 2.3.0
    conditional('VIR_SECRET_USAGE_TYPE_VTPM', 'VTPM'),  # 5.6.0
], source=libvirt)

SecretEventType = impl_enum('SecretEventType', c_int, [
    ('VIR_SECRET_EVENT_DEFINED', 'DEFINED'),
    ('VIR_SECRET_EVENT_UNDEFINED', 'UNDEFINED'),
], source=libvirt)

# names used on the command line
ENUMS = {
    'domain-state': DomainState,
    'storage-pool-state': StoragePoolState,
    'storage-pool-event': StoragePoolEventType,
    'storage-vol-type': StorageVolType,
    'storage-vol-wipe-algorithm': StorageVolWipeAlgorithm,
    'network-update-command': NetworkUpdateCommand,
    'network-update-section': NetworkUpdateSection,
    'network-event': NetworkEventType,
    'node-device-event': NodeDeviceEventType,
    'secret-usage-type': SecretUsageType,
    'secret-event': SecretEventType,
}
