"""Shared fixtures: real git repositories built in tmp_path."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass(frozen=True)
class GitRepoFixture:
    """A real git repository created with the git CLI."""

    root: Path

    def git(self, *args: str) -> str:
        result = subprocess.run(
            [
                "git",
                "-c",
                "user.email=test@example.com",
                "-c",
                "user.name=Test User",
                "-c",
                "commit.gpgsign=false",
                *args,
            ],
            cwd=self.root,
            check=True,
            capture_output=True,
            text=True,
        )
        return result.stdout.strip()

    def commit(self, files: dict[str, str], message: str) -> str:
        """Write `files`, commit them, and return the new HEAD hash."""
        for name, content in files.items():
            path = self.root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            self.git("add", name)
        self.git("commit", "-m", message)
        return self.git("rev-parse", "HEAD")


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepoFixture:
    """Initialize an empty repository (no commits) at tmp_path/repo."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    root = tmp_path / "repo"
    root.mkdir()
    repo = GitRepoFixture(root=root)
    repo.git("init")
    return repo
