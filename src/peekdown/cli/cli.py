import logging
import sys
from pathlib import Path

import click

from peekdown.cli.commands.register_cmd import register_cmd
from peekdown.cli.commands.status_cmd import status_cmd
from peekdown.cli.commands.unregister_cmd import unregister_cmd
from peekdown.core.context import create_context
from peekdown.core.launch import detect_launch_context
from peekdown.core.registration_launch import run_registration_launch
from peekdown.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="peekdown")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Manage the Peekdown Quick Look helper."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from None
    configure_logging(debug or ctx.obj.config.debug)


cli.add_command(register_cmd)
cli.add_command(status_cmd)
cli.add_command(unregister_cmd)


def main() -> None:
    """Entry point used by the `peekdown` console script and the app bundle.

    A Finder launch of a packaged macOS build runs the registration side
    launch and exits. Every other launch is handled by the click group.
    """
    launch = detect_launch_context(
        sys.argv[1:],
        executable=Path(sys.executable),
        frozen=bool(getattr(sys, "frozen", False)),
        platform=sys.platform,
        version=__version__,
    )

    if launch.should_register:
        try:
            ctx = create_context(quiet=True)
        except ValueError as e:
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from None
        configure_logging(ctx.config.debug)
        raise SystemExit(run_registration_launch(ctx, launch))

    cli()
