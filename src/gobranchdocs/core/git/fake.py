"""Fake Git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from gobranchdocs.core.git.abc import FileStatus, Git


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        repo_root: Path | None = None,
        status: list[FileStatus] | None = None,
        status_error: str | None = None,
        revisions: list[str] | None = None,
        history_error: str | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            repo_root: Working tree root; paths at or below it are inside the repo.
                None simulates running outside any repository.
            status: Entries returned by get_status()
            status_error: If set, get_status() raises RuntimeError with this message
            revisions: Commit hashes, newest first. Empty simulates an unborn HEAD.
            history_error: If set, iterating the history raises RuntimeError after
                the configured revisions are exhausted
        """
        self._repo_root = repo_root
        self._status = status or []
        self._status_error = status_error
        self._revisions = revisions or []
        self._history_error = history_error
        self._history_opened = 0
        self._history_closed = 0
        self._revisions_read = 0

    def find_repository_root(self, start: Path) -> Path | None:
        if self._repo_root is None:
            return None
        if start == self._repo_root or self._repo_root in start.parents:
            return self._repo_root
        return None

    def get_status(self, repo_root: Path) -> list[FileStatus]:
        if self._status_error is not None:
            raise RuntimeError(self._status_error)
        return list(self._status)

    @contextmanager
    def iter_revisions(self, repo_root: Path) -> Iterator[Iterator[str]]:
        self._history_opened += 1
        try:
            yield self._generate_revisions()
        finally:
            self._history_closed += 1

    def _generate_revisions(self) -> Iterator[str]:
        for revision in self._revisions:
            self._revisions_read += 1
            yield revision
        if self._history_error is not None:
            raise RuntimeError(self._history_error)

    @property
    def history_opened(self) -> int:
        """Number of times iter_revisions() was entered.

        This property is for test assertions only.
        """
        return self._history_opened

    @property
    def history_closed(self) -> int:
        """Number of times iter_revisions() was exited, on any path.

        This property is for test assertions only.
        """
        return self._history_closed

    @property
    def revisions_read(self) -> int:
        """Number of hashes pulled from the history iterator.

        This property is for test assertions only.
        """
        return self._revisions_read
