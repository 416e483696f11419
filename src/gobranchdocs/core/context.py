"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gobranchdocs.core.browser.abc import Browser
from gobranchdocs.core.browser.real import RealBrowser
from gobranchdocs.core.config import Config, load_config
from gobranchdocs.core.git.abc import Git
from gobranchdocs.core.git.real import RealGit
from gobranchdocs.core.proxy.abc import ModuleProxy
from gobranchdocs.core.proxy.real import RealModuleProxy


@dataclass(frozen=True)
class GoBranchDocsContext:
    """Immutable context holding all dependencies for a run.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    proxy: ModuleProxy
    browser: Browser
    config: Config
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        git: Git | None = None,
        proxy: ModuleProxy | None = None,
        browser: Browser | None = None,
        config: Config | None = None,
        cwd: Path | None = None,
    ) -> "GoBranchDocsContext":
        """Create test context with fakes for any dependency not supplied.

        Example:
            >>> git = FakeGit(repo_root=Path("/repo"), revisions=["abc123"])
            >>> ctx = GoBranchDocsContext.for_test(git=git, cwd=Path("/repo"))
        """
        from gobranchdocs.core.browser.fake import FakeBrowser
        from gobranchdocs.core.git.fake import FakeGit
        from gobranchdocs.core.proxy.fake import FakeModuleProxy

        return GoBranchDocsContext(
            git=git if git is not None else FakeGit(),
            proxy=proxy if proxy is not None else FakeModuleProxy(),
            browser=browser if browser is not None else FakeBrowser(),
            config=config if config is not None else Config(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context(config: Config | None = None) -> GoBranchDocsContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        ValueError: If the config file is malformed
    """
    if config is None:
        config = load_config()

    return GoBranchDocsContext(
        git=RealGit(),
        proxy=RealModuleProxy(timeout=config.proxy_timeout),
        browser=RealBrowser(),
        config=config,
        cwd=Path.cwd(),
    )
