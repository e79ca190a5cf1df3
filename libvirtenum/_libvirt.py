import libvirt  # noqa: F401

# libvirt-python only knows the constants of the libvirt it was built against.
# getVersion() reports the library actually loaded at runtime, which may be newer.
LIBRARY_VERSION = libvirt.getVersion()
