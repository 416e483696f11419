"""Fake browser launcher for testing."""

from gobranchdocs.core.browser.abc import Browser
from gobranchdocs.core.errors import BrowserLaunchFailed


class FakeBrowser(Browser):
    """Records opened URLs instead of starting a browser.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, fail_with: str | None = None) -> None:
        """Create FakeBrowser.

        Args:
            fail_with: If set, open_url() raises BrowserLaunchFailed with this detail
        """
        self._fail_with = fail_with
        self._opened_urls: list[str] = []

    def open_url(self, url: str) -> None:
        if self._fail_with is not None:
            raise BrowserLaunchFailed(url, self._fail_with)
        self._opened_urls.append(url)

    @property
    def opened_urls(self) -> list[str]:
        """Get the list of URLs passed to open_url().

        This property is for test assertions only.
        """
        return self._opened_urls.copy()
