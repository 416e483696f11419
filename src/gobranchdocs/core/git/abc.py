"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
repository inspector testable without a real repository.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileStatus:
    """One entry of `git status --porcelain`.

    `code` is the two-character XY status (e.g. " M", "??", "A ").
    """

    code: str
    path: str

    def __str__(self) -> str:
        return f"{self.code} {self.path}"


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def find_repository_root(self, start: Path) -> Path | None:
        """Walk up from `start` to the top of the enclosing working tree.

        Returns:
            The working tree root, or None if `start` is not inside a repository
            (or does not exist)
        """
        ...

    @abstractmethod
    def get_status(self, repo_root: Path) -> list[FileStatus]:
        """List modified, staged and untracked files of the working copy.

        Raises:
            RuntimeError: If the status cannot be enumerated
        """
        ...

    @abstractmethod
    def iter_revisions(self, repo_root: Path) -> AbstractContextManager[Iterator[str]]:
        """Open the revision history starting at HEAD, newest first.

        The returned context manager yields an iterator of commit hashes. Callers
        may stop iterating at any point; leaving the `with` block releases the
        underlying history reader whether or not it was exhausted.

        Iterating raises RuntimeError if the history cannot be read (for example
        when HEAD points at an unborn branch).
        """
        ...
