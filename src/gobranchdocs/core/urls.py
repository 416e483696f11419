"""URL construction for the module proxy and the documentation site.

Paths are joined with POSIX path semantics (empty segments dropped, repeated
slashes collapsed, "." and ".." resolved) and then placed back into the base
URL. Module paths keep their slashes as path separators and are not
percent-encoded.
"""

import posixpath
from urllib.parse import SplitResult, urlsplit, urlunsplit

from gobranchdocs.core.errors import URLConstructionFailed
from gobranchdocs.core.gomod import escape_module_path


def join_url_path(*segments: str) -> str:
    """Join path segments and clean the result.

    Returns "" when every segment is empty.

    Example:
        >>> join_url_path("/docs/", "example.com//mod", "@v")
        '/docs/example.com/mod/@v'
    """
    parts = [segment for segment in segments if segment]
    if not parts:
        return ""
    joined = posixpath.normpath("/".join(parts))
    if joined.startswith("//"):
        joined = "/" + joined.lstrip("/")
    return joined


def parse_base_url(base_url: str) -> SplitResult:
    """Parse an absolute http(s)-style base URL.

    Raises:
        URLConstructionFailed: If the URL cannot be parsed or lacks a scheme or host
    """
    try:
        parts = urlsplit(base_url)
        # Accessing .port validates the netloc's port component.
        parts.port
    except ValueError as e:
        raise URLConstructionFailed(base_url, str(e)) from e

    if not parts.scheme:
        raise URLConstructionFailed(base_url, "missing scheme")
    if not parts.netloc:
        raise URLConstructionFailed(base_url, "missing host")
    return parts


def append_path(base_url: str, *segments: str) -> str:
    """Append path segments to the path of `base_url`, keeping any prefix."""
    parts = parse_base_url(base_url)
    path = join_url_path(parts.path, *segments)
    if not path.startswith("/"):
        path = "/" + path
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def build_info_url(proxy_url: str, module_path: str, revision: str) -> str:
    """Build `{proxy}/{module}/@v/{revision}.info` for the module proxy."""
    return append_path(proxy_url, escape_module_path(module_path), "@v", f"{revision}.info")


def build_docs_url(docs_url: str, module_path: str, version: str) -> str:
    """Build `{docs}/{module}@{version}` for the documentation site.

    Example:
        >>> build_docs_url("https://pkg.go.dev", "example.com/mod", "v1.2.3")
        'https://pkg.go.dev/example.com/mod@v1.2.3'
    """
    return append_path(docs_url, f"{module_path}@{version}")
