"""Browser launcher interface."""

from abc import ABC, abstractmethod


class Browser(ABC):
    """Abstract interface for opening a URL in the user's default browser."""

    @abstractmethod
    def open_url(self, url: str) -> None:
        """Open `url` without waiting for the browser to exit.

        Raises:
            BrowserLaunchFailed: If no browser could be started
        """
        ...
