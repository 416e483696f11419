"""Production browser launcher using click.launch."""

import click

from gobranchdocs.core.browser.abc import Browser
from gobranchdocs.core.errors import BrowserLaunchFailed


class RealBrowser(Browser):
    """Opens URLs with the platform launcher (xdg-open, open, start)."""

    def open_url(self, url: str) -> None:
        exit_code = click.launch(url)
        if exit_code != 0:
            raise BrowserLaunchFailed(url, f"launcher exited with status {exit_code}")
