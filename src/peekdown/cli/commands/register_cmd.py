"""Command to install and register the Quick Look helper on demand."""

import sys
from pathlib import Path

import click

from peekdown.cli.core import (
    ensure_host,
    ensure_host_in_applications,
    ensure_supported_platform,
    resolve_host_bundle,
)
from peekdown.core.context import PeekdownContext
from peekdown.core.registrar import RegistrationOutcome, register_helper


@click.command("register")
@click.option(
    "--app",
    "app_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Host application bundle (defaults to the running bundle).",
)
@click.option("--force", is_flag=True, help="Reinstall even if the registration is current.")
@click.pass_obj
def register_cmd(ctx: PeekdownContext, app_path: Path | None, force: bool) -> None:
    """Install the bundled helper and register its Quick Look extension."""
    ensure_supported_platform(sys.platform)
    host = ensure_host(resolve_host_bundle(app_path))
    ensure_host_in_applications(host)

    result = register_helper(ctx, host, force=force)

    if result.outcome is RegistrationOutcome.UP_TO_DATE:
        ctx.feedback.info(f"Helper registration is current ({result.helper_path})")
        return

    if result.outcome is RegistrationOutcome.REGISTERED:
        reasons = ", ".join(r.value for r in result.reasons)
        ctx.feedback.success(f"✓ Registered helper at {result.helper_path} ({reasons})")
        return

    ctx.feedback.error(f"Error: {result.message}")
    raise SystemExit(1)
