"""Output utilities for CLI commands with clear intent.

user_output goes to stderr and is meant for people; machine_output goes to
stdout and is meant for scripts (JSON, bare values).
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Print machine-readable output to stdout."""
    click.echo(message, nl=nl)
