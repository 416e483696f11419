"""Command-line entry point: resolve the checked-out commit to its docs page."""

import logging
from pathlib import Path

import click

from gobranchdocs.cli.output import error_output, machine_output, user_output
from gobranchdocs.core.config import DEFAULT_DOCS_URL, DEFAULT_PROXY_URL
from gobranchdocs.core.context import GoBranchDocsContext, create_context
from gobranchdocs.core.errors import GoBranchDocsError
from gobranchdocs.core.gomod import read_module_path
from gobranchdocs.core.repo_inspector import format_status, inspect_repository
from gobranchdocs.core.urls import build_docs_url, build_info_url
from gobranchdocs.core.version_resolver import resolve_version

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command("gobranchdocs", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gobranchdocs")
@click.argument(
    "path",
    required=False,
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--pkg-go-dev-url",
    "docs_url",
    default=None,
    help=f"pkg.go.dev url (default: {DEFAULT_DOCS_URL})",
)
@click.option(
    "--proxy-go-url",
    "proxy_url",
    default=None,
    help=f"proxy.golang.org url (default: {DEFAULT_PROXY_URL})",
)
@click.option(
    "--dont-open-browser",
    is_flag=True,
    help="Print the URL without opening a browser.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show debug logging for each step.",
)
@click.pass_context
def cli(
    click_ctx: click.Context,
    path: Path,
    docs_url: str | None,
    proxy_url: str | None,
    dont_open_browser: bool,
    verbose: bool,
) -> None:
    """Open pkg.go.dev for the commit checked out at PATH (default: .).

    Reads HEAD of the enclosing git repository and the module path from
    PATH/go.mod, asks the module proxy which version corresponds to HEAD, and
    opens PKG_GO_DEV_URL/MODULE@VERSION. The URL is also printed to stdout.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        try:
            click_ctx.obj = create_context()
        except ValueError as e:
            error_output(str(e))
            raise SystemExit(1) from e

    ctx: GoBranchDocsContext = click_ctx.obj
    try:
        url = _resolve_and_report(
            ctx,
            path,
            docs_url=docs_url if docs_url is not None else ctx.config.docs_url,
            proxy_url=proxy_url if proxy_url is not None else ctx.config.proxy_url,
        )
        machine_output(url)
        if not dont_open_browser:
            ctx.browser.open_url(url)
    except GoBranchDocsError as e:
        error_output(str(e))
        raise SystemExit(1) from e


def _resolve_and_report(
    ctx: GoBranchDocsContext, path: Path, *, docs_url: str, proxy_url: str
) -> str:
    target = ctx.cwd / path.expanduser()

    state = inspect_repository(ctx.git, target)
    user_output(f"head hash: {state.revision}")
    user_output(f"status: {format_status(state.status)}")

    module_path = read_module_path(target)
    user_output(f"module name: {module_path}")

    user_output(f"fetching {build_info_url(proxy_url, module_path, state.revision)}")
    version = resolve_version(ctx.proxy, proxy_url, module_path, state.revision)
    user_output(f"version: {version}")

    return build_docs_url(docs_url, module_path, version)


def main() -> None:
    """CLI entry point used by the `gobranchdocs` console script."""
    cli()
