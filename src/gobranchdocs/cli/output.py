"""Output utilities for CLI commands with clear intent.

user_output goes to stderr so that machine_output on stdout stays clean for
shell capture (e.g. `xdg-open "$(gobranchdocs --dont-open-browser)"`).
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write a machine-readable result to stdout."""
    click.echo(message, nl=nl)


def error_output(message: str) -> None:
    """Write an error message with a red "Error: " prefix to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
