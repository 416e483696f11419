"""Git operations subpackage.

This subpackage provides abstractions over the git operations the repository
inspector needs, with a fake for tests.
"""

from gobranchdocs.core.git.abc import FileStatus, Git
from gobranchdocs.core.git.real import RealGit

__all__ = [
    "FileStatus",
    "Git",
    "RealGit",
]
