"""Resolve a commit hash to the version the module proxy published for it."""

import logging

from gobranchdocs.core.proxy.abc import ModuleProxy

logger = logging.getLogger(__name__)


def resolve_version(proxy: ModuleProxy, base_url: str, module_path: str, revision: str) -> str:
    """Return the published version (tag or pseudo-version) for `revision`.

    A revision the proxy has never seen (e.g. an unpushed commit) raises
    VersionNotFound; there is no fallback to the latest version.
    """
    info = proxy.fetch_version_info(base_url, module_path, revision)
    logger.debug("%s@%s resolved to %s (time=%s)", module_path, revision, info.version, info.time)
    return info.version
