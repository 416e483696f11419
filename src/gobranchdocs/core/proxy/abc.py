"""Module proxy interface and `.info` response decoding.

Architecture:
- ModuleProxy: Abstract base class defining the interface
- RealModuleProxy: Production implementation using httpx
- FakeModuleProxy: In-memory implementation for tests
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass

from gobranchdocs.core.errors import VersionNotFound


@dataclass(frozen=True)
class VersionInfo:
    """Decoded body of `GET {proxy}/{module}/@v/{revision}.info`."""

    version: str
    time: str | None


class ModuleProxy(ABC):
    """Abstract interface for the Go module proxy."""

    @abstractmethod
    def fetch_version_info(self, base_url: str, module_path: str, revision: str) -> VersionInfo:
        """Fetch version metadata for one revision of a module.

        Makes a single attempt; there is no retry.

        Args:
            base_url: Proxy base URL (e.g. https://proxy.golang.org)
            module_path: Module path as declared in go.mod
            revision: Commit hash to look up

        Raises:
            URLConstructionFailed: If base_url is not a valid URL
            ResolverUnreachable: If the proxy cannot be contacted
            VersionNotFound: If the proxy returns a non-2xx status or an unusable body
        """
        ...


def parse_version_info(body: bytes, url: str) -> VersionInfo:
    """Decode a `.info` JSON body.

    Keys are matched case-insensitively; the proxy sends "Version" and "Time".

    Raises:
        VersionNotFound: If the body is not a JSON object with a non-empty
            string version
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise VersionNotFound(url, f"response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise VersionNotFound(url, f"expected a JSON object, got {type(data).__name__}")

    fields = {str(key).lower(): value for key, value in data.items()}
    version = fields.get("version")
    if not isinstance(version, str) or not version:
        raise VersionNotFound(url, "response has no version field")

    time = fields.get("time")
    return VersionInfo(version=version, time=time if isinstance(time, str) else None)
