"""Shared helpers for CLI commands."""

import sys
from pathlib import Path

import click

from peekdown.core.launch import SUPPORTED_PLATFORM, HostBundle, find_host_bundle
from peekdown.core.layout import is_in_trusted_location, trusted_application_dirs
from peekdown.version import __version__


def resolve_host_bundle(app_path: Path | None) -> HostBundle | None:
    """Find the host bundle for a command.

    An explicit --app path wins; otherwise a packaged build uses its own bundle.
    """
    if app_path is not None:
        return HostBundle(path=app_path.resolve(), version=__version__)
    if getattr(sys, "frozen", False):
        return find_host_bundle(Path(sys.executable), __version__)
    return None


def ensure_supported_platform(platform: str) -> None:
    """Exit with a styled error unless running on macOS."""
    if platform != SUPPORTED_PLATFORM:
        click.echo(
            click.style("Error: ", fg="red")
            + "Quick Look helper registration is only available on macOS",
            err=True,
        )
        raise SystemExit(1)


def ensure_host(host: HostBundle | None) -> HostBundle:
    """Exit with a styled error when no host bundle could be found."""
    if host is None:
        click.echo(
            click.style("Error: ", fg="red")
            + "Not running from an application bundle. Pass --app /path/to/Peekdown.app",
            err=True,
        )
        raise SystemExit(1)
    return host


def ensure_host_in_applications(host: HostBundle) -> None:
    """Exit with a styled error unless the host sits in an Applications directory."""
    if not is_in_trusted_location(host.path, trusted_application_dirs()):
        system_dir, user_dir = trusted_application_dirs()
        click.echo(
            click.style("Error: ", fg="red")
            + f"{host.path} is not in {system_dir} or {user_dir}. "
            + "Move the application there before registering the helper",
            err=True,
        )
        raise SystemExit(1)
