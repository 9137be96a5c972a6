"""Output utilities for CLI commands.

Human-facing messages go to stderr so stdout stays clean for piping.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)
