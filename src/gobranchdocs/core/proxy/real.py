"""Production module proxy client using httpx."""

import logging

import httpx

from gobranchdocs.core.errors import ResolverUnreachable, VersionNotFound
from gobranchdocs.core.proxy.abc import ModuleProxy, VersionInfo, parse_version_info
from gobranchdocs.core.urls import build_info_url

logger = logging.getLogger(__name__)


class RealModuleProxy(ModuleProxy):
    """Production implementation issuing one plain GET per lookup.

    A client is opened per call and the response is streamed inside a `with`
    block, so the connection and body are released on every exit path.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create the client.

        Args:
            timeout: Seconds to wait for the proxy. None waits indefinitely.
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._timeout = timeout
        self._transport = transport

    def fetch_version_info(self, base_url: str, module_path: str, revision: str) -> VersionInfo:
        url = build_info_url(base_url, module_path, revision)
        logger.debug("fetching %s", url)

        try:
            with httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                with client.stream("GET", url) as response:
                    logger.debug("proxy responded %s for %s", response.status_code, url)
                    if not response.is_success:
                        detail = _describe_failure(response)
                        raise VersionNotFound(url, detail)
                    body = response.read()
        except httpx.TransportError as e:
            raise ResolverUnreachable(url, str(e) or type(e).__name__) from e

        return parse_version_info(body, url)


def _describe_failure(response: httpx.Response) -> str:
    detail = f"HTTP {response.status_code}"
    response.read()
    text = response.text.strip()
    if text:
        detail += f": {text.splitlines()[0]}"
    return detail
