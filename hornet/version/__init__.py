from hornet.version.hornet_version import HORNET_VERSION, Version

__all__ = ["HORNET_VERSION", "Version"]
