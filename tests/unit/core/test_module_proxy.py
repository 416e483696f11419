"""Tests for RealModuleProxy against httpx.MockTransport, and .info decoding."""

import json

import httpx
import pytest

from gobranchdocs.core.errors import ResolverUnreachable, VersionNotFound
from gobranchdocs.core.proxy.abc import VersionInfo, parse_version_info
from gobranchdocs.core.proxy.fake import FakeModuleProxy
from gobranchdocs.core.proxy.real import RealModuleProxy
from gobranchdocs.core.version_resolver import resolve_version

INFO_BODY = {"Time": "2023-01-01T00:00:00Z", "Version": "v1.2.3"}


class TrackingStream(httpx.SyncByteStream):
    """Response body that records whether it was closed."""

    def __init__(self, body: bytes) -> None:
        self._body = body
        self.closed = False

    def __iter__(self):
        yield self._body

    def close(self) -> None:
        self.closed = True


def test_fetch_version_info_requests_info_path() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=INFO_BODY)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    info = proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "abcdef")

    assert info == VersionInfo(version="v1.2.3", time="2023-01-01T00:00:00Z")
    assert len(requests) == 1
    assert requests[0].method == "GET"
    assert requests[0].url.host == "proxy.golang.org"
    assert requests[0].url.path == "/example.com/mod/@v/abcdef.info"
    assert "authorization" not in requests[0].headers


def test_resolve_version_returns_version_string() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=INFO_BODY)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    version = resolve_version(proxy, "https://proxy.golang.org", "example.com/mod", "abcdef")

    assert version == "v1.2.3"


def test_proxy_base_path_prefix_is_kept() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json=INFO_BODY)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    proxy.fetch_version_info("https://goproxy.example.com/mirror", "example.com/mod", "abcdef")

    assert paths == ["/mirror/example.com/mod/@v/abcdef.info"]


def test_not_found_raises_version_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="not found: unknown revision abcdef\n")

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    with pytest.raises(VersionNotFound) as exc_info:
        proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "abcdef")

    assert exc_info.value.url == "https://proxy.golang.org/example.com/mod/@v/abcdef.info"
    assert "HTTP 404" in str(exc_info.value)
    assert "unknown revision abcdef" in str(exc_info.value)


def test_server_error_raises_version_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    with pytest.raises(VersionNotFound, match="HTTP 500"):
        proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "abcdef")


def test_connection_error_raises_resolver_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    with pytest.raises(ResolverUnreachable, match="connection refused") as exc_info:
        proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "abcdef")

    assert exc_info.value.url == "https://proxy.golang.org/example.com/mod/@v/abcdef.info"


def test_timeout_raises_resolver_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    proxy = RealModuleProxy(timeout=0.5, transport=httpx.MockTransport(handler))

    with pytest.raises(ResolverUnreachable):
        proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "abcdef")


def test_redirect_is_followed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "proxy.golang.org":
            return httpx.Response(
                302, headers={"Location": "https://mirror.example.com/example.com/mod/@v/a.info"}
            )
        return httpx.Response(200, json=INFO_BODY)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    info = proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "a")

    assert info.version == "v1.2.3"


def test_response_body_closed_after_success() -> None:
    stream = TrackingStream(json.dumps(INFO_BODY).encode())

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, stream=stream)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "abcdef")

    assert stream.closed


def test_response_body_closed_after_malformed_body() -> None:
    stream = TrackingStream(b"<html>not json</html>")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, stream=stream)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    with pytest.raises(VersionNotFound, match="not valid JSON"):
        proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "abcdef")

    assert stream.closed


def test_response_body_closed_after_error_status() -> None:
    stream = TrackingStream(b"gone")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(410, stream=stream)

    proxy = RealModuleProxy(transport=httpx.MockTransport(handler))

    with pytest.raises(VersionNotFound):
        proxy.fetch_version_info("https://proxy.golang.org", "example.com/mod", "abcdef")

    assert stream.closed


def test_parse_version_info_accepts_lower_case_keys() -> None:
    body = b'{"version": "v0.1.0", "time": "2024-05-01T10:00:00Z"}'

    assert parse_version_info(body, "u") == VersionInfo(
        version="v0.1.0", time="2024-05-01T10:00:00Z"
    )


def test_parse_version_info_time_is_optional() -> None:
    assert parse_version_info(b'{"Version": "v0.1.0"}', "u") == VersionInfo(
        version="v0.1.0", time=None
    )


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b'["v1.2.3"]',
        b'{"Time": "2023-01-01T00:00:00Z"}',
        b'{"Version": 123}',
        b'{"Version": ""}',
        b'{"Version": null}',
    ],
)
def test_parse_version_info_rejects_unusable_bodies(body: bytes) -> None:
    with pytest.raises(VersionNotFound) as exc_info:
        parse_version_info(body, "https://proxy.golang.org/example.com/mod/@v/abcdef.info")

    assert exc_info.value.url == "https://proxy.golang.org/example.com/mod/@v/abcdef.info"


def test_fake_module_proxy_records_calls() -> None:
    proxy = FakeModuleProxy(
        versions={("example.com/mod", "abcdef"): VersionInfo(version="v1.2.3", time=None)}
    )

    assert resolve_version(proxy, "https://p", "example.com/mod", "abcdef") == "v1.2.3"
    with pytest.raises(VersionNotFound):
        resolve_version(proxy, "https://p", "example.com/mod", "012345")

    assert proxy.fetch_calls == [
        ("https://p", "example.com/mod", "abcdef"),
        ("https://p", "example.com/mod", "012345"),
    ]
