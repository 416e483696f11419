"""Browser launcher subpackage."""

from gobranchdocs.core.browser.abc import Browser
from gobranchdocs.core.browser.real import RealBrowser

__all__ = [
    "Browser",
    "RealBrowser",
]
