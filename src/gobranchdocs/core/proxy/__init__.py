"""Module proxy client subpackage."""

from gobranchdocs.core.proxy.abc import ModuleProxy, VersionInfo, parse_version_info
from gobranchdocs.core.proxy.real import RealModuleProxy

__all__ = [
    "ModuleProxy",
    "RealModuleProxy",
    "VersionInfo",
    "parse_version_info",
]
