"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import logging
import subprocess
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO

from gobranchdocs.core.git.abc import FileStatus, Git
from gobranchdocs.core.subprocess import format_command, run_subprocess_with_context

logger = logging.getLogger(__name__)

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def find_repository_root(self, start: Path) -> Path | None:
        """Walk up from `start` to the top of the enclosing working tree."""
        if not start.exists():
            return None

        cwd = start if start.is_dir() else start.parent
        result = run_subprocess_with_context(
            ["git", "rev-parse", "--show-toplevel"],
            operation_context="locate repository root",
            cwd=cwd,
            check=False,
        )
        if result.returncode != 0:
            logger.debug("git rev-parse failed in %s: %s", cwd, result.stderr.strip())
            return None

        toplevel = result.stdout.strip()
        if not toplevel:
            return None
        return Path(toplevel)

    def get_status(self, repo_root: Path) -> list[FileStatus]:
        """List modified, staged and untracked files of the working copy."""
        result = run_subprocess_with_context(
            ["git", "status", "--porcelain"],
            operation_context="get working-copy status",
            cwd=repo_root,
        )

        entries: list[FileStatus] = []
        for line in result.stdout.splitlines():
            if len(line) < 4:
                continue
            entries.append(FileStatus(code=line[:2], path=line[3:]))
        return entries

    @contextmanager
    def iter_revisions(self, repo_root: Path) -> Iterator[Iterator[str]]:
        """Stream `git log` hashes newest first.

        The git process is terminated and reaped when the `with` block exits,
        so reading only the first hash does not walk the whole history.
        """
        cmd = ["git", "log", "--no-show-signature", "--format=%H"]
        try:
            proc = subprocess.Popen(
                cmd,
                cwd=repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as e:
            error_msg = f"Command not found while trying to read revision history: {cmd[0]}"
            error_msg += f"\nFull command: {format_command(cmd)}"
            raise RuntimeError(error_msg) from e

        try:
            yield _read_revisions(proc, proc.stdout, proc.stderr, cmd)
        finally:
            if proc.poll() is None:
                proc.terminate()
            proc.communicate()
            logger.debug("git log exited with %s", proc.returncode)


def _read_revisions(
    proc: subprocess.Popen[str],
    stdout: IO[str] | None,
    stderr: IO[str] | None,
    cmd: list[str],
) -> Iterator[str]:
    if stdout is None or stderr is None:
        raise RuntimeError(f"Failed to read revision history\nCommand: {format_command(cmd)}")

    for line in stdout:
        revision = line.strip()
        if revision:
            yield revision

    error_output = stderr.read().strip()
    returncode = proc.wait()
    if returncode != 0:
        error_msg = "Failed to read revision history"
        error_msg += f"\nCommand: {format_command(cmd)}"
        error_msg += f"\nExit code: {returncode}"
        if error_output:
            error_msg += f"\nstderr: {error_output}"
        raise RuntimeError(error_msg)
