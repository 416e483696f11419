"""Resolve a working copy to the revision currently checked out."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from gobranchdocs.core.errors import NoRevisionHistory, RepositoryNotFound, StatusUnavailable
from gobranchdocs.core.git.abc import FileStatus, Git

logger = logging.getLogger(__name__)

# sha1 or sha256 object name
_REVISION_PATTERN = re.compile(r"[0-9a-f]{40}|[0-9a-f]{64}")


@dataclass(frozen=True)
class RepositoryState:
    """Snapshot of a working copy at the moment of inspection."""

    root: Path
    revision: str
    status: list[FileStatus]

    @property
    def is_clean(self) -> bool:
        return not self.status


def inspect_repository(git: Git, path: Path) -> RepositoryState:
    """Find the repository enclosing `path` and read its HEAD revision.

    The working-copy status is collected for display only; a dirty tree still
    resolves to HEAD. Only the first entry of the history is read.

    Args:
        git: Git backend
        path: Directory inside the working copy

    Returns:
        RepositoryState with the repository root, HEAD hash and status entries

    Raises:
        RepositoryNotFound: If no repository encloses `path`
        StatusUnavailable: If the working-copy status cannot be enumerated
        NoRevisionHistory: If HEAD has no commits or the history cannot be read
    """
    try:
        root = git.find_repository_root(path)
    except RuntimeError as e:
        raise RepositoryNotFound(path, str(e)) from e
    if root is None:
        raise RepositoryNotFound(path)
    logger.debug("repository root for %s: %s", path, root)

    try:
        status = git.get_status(root)
    except RuntimeError as e:
        raise StatusUnavailable(root, str(e)) from e

    try:
        with git.iter_revisions(root) as revisions:
            revision = next(revisions, None)
    except RuntimeError as e:
        raise NoRevisionHistory(root, str(e)) from e
    if revision is None:
        raise NoRevisionHistory(root)
    if not _REVISION_PATTERN.fullmatch(revision):
        raise NoRevisionHistory(root, f"unexpected revision {revision!r}")

    logger.debug("HEAD of %s is %s", root, revision)
    return RepositoryState(root=root, revision=revision, status=status)


def format_status(status: list[FileStatus]) -> str:
    """Render status entries the way `git status --short` lists them."""
    if not status:
        return "clean"
    return "\n".join(str(entry) for entry in status)
