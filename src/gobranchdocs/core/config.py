"""Configuration data structures and loading.

Provides immutable configuration loaded from ~/.gobranchdocs/config.toml.
Every key is optional; command-line flags override the file.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DOCS_URL = "https://pkg.go.dev"
DEFAULT_PROXY_URL = "https://proxy.golang.org"


@dataclass(frozen=True)
class Config:
    """Immutable configuration data.

    Loaded once at CLI entry point and stored in GoBranchDocsContext.

    proxy_timeout is in seconds. None means the proxy request waits
    indefinitely; this is the default.
    """

    docs_url: str = DEFAULT_DOCS_URL
    proxy_url: str = DEFAULT_PROXY_URL
    proxy_timeout: float | None = None


def config_path() -> Path:
    """Get the path to the config file.

    Returns:
        Path to config file (for error messages and debugging)
    """
    return Path.home() / ".gobranchdocs" / "config.toml"


def load_config(path: Path | None = None) -> Config:
    """Load config from ~/.gobranchdocs/config.toml, or defaults if absent.

    Example config:
      pkg_go_dev_url = "https://pkg.go.dev"
      proxy_go_url = "https://goproxy.example.com"
      proxy_timeout = 30

    Args:
        path: Config file path (defaults to ~/.gobranchdocs/config.toml)

    Raises:
        ValueError: If the file cannot be read, is not valid TOML, or a key has
            the wrong type
    """
    cfg_path = path if path is not None else config_path()
    if not cfg_path.exists():
        return Config()

    try:
        content = cfg_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Could not read {cfg_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ValueError(f"{cfg_path} is not valid UTF-8: {e}") from e

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {cfg_path}: {e}") from e

    docs_url = data.get("pkg_go_dev_url", DEFAULT_DOCS_URL)
    if not isinstance(docs_url, str):
        raise ValueError(f"'pkg_go_dev_url' in {cfg_path} must be a string")

    proxy_url = data.get("proxy_go_url", DEFAULT_PROXY_URL)
    if not isinstance(proxy_url, str):
        raise ValueError(f"'proxy_go_url' in {cfg_path} must be a string")

    timeout = data.get("proxy_timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, int | float) or timeout <= 0:
            raise ValueError(f"'proxy_timeout' in {cfg_path} must be a positive number")
        timeout = float(timeout)

    return Config(docs_url=docs_url, proxy_url=proxy_url, proxy_timeout=timeout)
