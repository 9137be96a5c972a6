"""Command to show the helper registration state."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from peekdown.cli.core import ensure_host, resolve_host_bundle
from peekdown.core.context import PeekdownContext
from peekdown.core.fingerprint import fingerprint
from peekdown.core.layout import helper_source_path, helper_target_path
from peekdown.core.registrar import (
    RegistrationStatus,
    StaleReason,
    check_staleness,
    registration_status,
)

_STATUS_STYLES = {
    RegistrationStatus.REGISTERED: "green",
    RegistrationStatus.STALE: "yellow",
    RegistrationStatus.UNREGISTERED: "red",
}


def _short(value: str | None) -> str:
    if value is None:
        return "-"
    # Two sha256 digests are too wide for a table; show the heads
    return ":".join(part[:12] for part in value.split(":"))


def _display(value: object | None) -> str:
    return "-" if value is None else str(value)


@click.command("status")
@click.option(
    "--app",
    "app_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Host application bundle (defaults to the running bundle).",
)
@click.pass_obj
def status_cmd(ctx: PeekdownContext, app_path: Path | None) -> None:
    """Show the recorded registration and whether it is still current."""
    host = ensure_host(resolve_host_bundle(app_path))

    source = helper_source_path(host.path)
    target = helper_target_path(host.path, ctx.config.helper_install_dir)
    state = ctx.state_store.load()
    source_fingerprint = fingerprint(source)

    reasons: tuple[StaleReason, ...] = ()
    if source_fingerprint is not None:
        reasons = check_staleness(
            state, host=host, target_path=target, source_fingerprint=source_fingerprint
        )
    status = registration_status(state, reasons)

    table = Table(show_header=True, header_style="bold")
    table.add_column("", style="bold")
    table.add_column("recorded")
    table.add_column("current")

    table.add_row("host path", _display(state and state.host_path), str(host.path))
    table.add_row("host version", _display(state and state.host_version), host.version)
    table.add_row("helper path", _display(state and state.helper_path), str(target))
    table.add_row(
        "fingerprint",
        _short(state.helper_fingerprint if state else None),
        _short(source_fingerprint),
    )
    table.add_row("registered at", _display(state and state.registered_at), "")

    console = Console(stderr=True)
    console.print(table)
    console.print(f"Status: [{_STATUS_STYLES[status]}]{status.value}[/]")
    if source_fingerprint is None:
        console.print(f"[red]Bundled helper is missing or incomplete: {source}[/]")
    for reason in reasons:
        console.print(f"  - {reason.value}", style="dim")
