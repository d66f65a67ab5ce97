"""Hornet - sequential, weighted browser-style benchmark suite runner."""

from hornet.version.hornet_version import HORNET_VERSION, Version

__version__ = str(HORNET_VERSION)
__version_info__ = HORNET_VERSION

__all__ = [
    "HORNET_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
