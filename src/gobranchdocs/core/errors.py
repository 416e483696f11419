"""Error taxonomy for the docs-resolution pipeline.

Every stage raises a subclass of GoBranchDocsError. Stages never print; the CLI
driver reports the message and exits with status 1.
"""

from pathlib import Path


class GoBranchDocsError(Exception):
    """Base class for all failures reported to the operator."""


class RepositoryNotFound(GoBranchDocsError):
    """No git repository is discoverable at or above the given path."""

    def __init__(self, path: Path, detail: str | None = None) -> None:
        self.path = path
        message = f"No git repository found at or above {path}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class StatusUnavailable(GoBranchDocsError):
    """The working-copy status could not be enumerated."""

    def __init__(self, repo_root: Path, detail: str) -> None:
        self.repo_root = repo_root
        super().__init__(f"Could not read working-copy status of {repo_root}: {detail}")


class NoRevisionHistory(GoBranchDocsError):
    """The repository has no commit reachable from HEAD."""

    def __init__(self, repo_root: Path, detail: str | None = None) -> None:
        self.repo_root = repo_root
        message = f"No commits reachable from HEAD in {repo_root}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ModuleFileNotFound(GoBranchDocsError):
    """The go.mod file is absent or unreadable."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"Could not read {path}: {detail}")


class ModuleDeclarationInvalid(GoBranchDocsError):
    """The module statement is missing or cannot be parsed."""

    def __init__(self, filename: str, detail: str, line: int | None = None) -> None:
        self.filename = filename
        self.line = line
        location = filename if line is None else f"{filename}:{line}"
        super().__init__(f"{location}: {detail}")


class ResolverUnreachable(GoBranchDocsError):
    """The module proxy could not be contacted."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Could not reach module proxy at {url}: {detail}")


class VersionNotFound(GoBranchDocsError):
    """The module proxy answered but returned no usable version."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"No version found at {url}: {detail}")


class URLConstructionFailed(GoBranchDocsError):
    """A supplied base URL is not a valid absolute URL."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Invalid base URL {url!r}: {detail}")


class BrowserLaunchFailed(GoBranchDocsError):
    """The browser could not be started."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Could not open browser for {url}: {detail}")
