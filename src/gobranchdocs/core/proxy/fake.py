"""Fake module proxy for testing.

FakeModuleProxy is an in-memory implementation that accepts pre-configured
versions in its constructor and records every lookup.
"""

from gobranchdocs.core.errors import ResolverUnreachable, VersionNotFound
from gobranchdocs.core.proxy.abc import ModuleProxy, VersionInfo
from gobranchdocs.core.urls import build_info_url


class FakeModuleProxy(ModuleProxy):
    """In-memory fake implementation of the module proxy.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        versions: dict[tuple[str, str], VersionInfo] | None = None,
        unreachable: bool = False,
    ) -> None:
        """Create FakeModuleProxy with pre-configured state.

        Args:
            versions: Mapping of (module_path, revision) -> VersionInfo. Lookups
                for anything else raise VersionNotFound.
            unreachable: If True, every lookup raises ResolverUnreachable
        """
        self._versions = versions or {}
        self._unreachable = unreachable
        self._fetch_calls: list[tuple[str, str, str]] = []

    def fetch_version_info(self, base_url: str, module_path: str, revision: str) -> VersionInfo:
        url = build_info_url(base_url, module_path, revision)
        self._fetch_calls.append((base_url, module_path, revision))
        if self._unreachable:
            raise ResolverUnreachable(url, "connection refused")
        info = self._versions.get((module_path, revision))
        if info is None:
            raise VersionNotFound(url, "HTTP 404")
        return info

    @property
    def fetch_calls(self) -> list[tuple[str, str, str]]:
        """Get the list of (base_url, module_path, revision) lookups made.

        This property is for test assertions only.
        """
        return self._fetch_calls.copy()
