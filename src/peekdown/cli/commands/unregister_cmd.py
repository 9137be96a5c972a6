"""Command to remove the installed Quick Look helper."""

from pathlib import Path

import click

from peekdown.cli.core import resolve_host_bundle
from peekdown.core.context import PeekdownContext
from peekdown.core.registrar import unregister_helper


@click.command("unregister")
@click.option(
    "--app",
    "app_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Host application bundle (defaults to the running bundle).",
)
@click.pass_obj
def unregister_cmd(ctx: PeekdownContext, app_path: Path | None) -> None:
    """Unregister and delete the installed helper."""
    host = resolve_host_bundle(app_path)

    try:
        removed = unregister_helper(ctx, host)
    except OSError as e:
        ctx.feedback.error(f"Error: Could not remove helper: {e}")
        raise SystemExit(1) from None

    if not removed:
        ctx.feedback.info("No installed helper found")
        return
    for path in removed:
        ctx.feedback.success(f"✓ Removed {path}")
