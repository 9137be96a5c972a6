"""Keep the host application inside a trusted Applications directory.

The extension subsystem only loads extensions from applications installed in
a standard Applications folder. When the host runs from anywhere else (a
Downloads folder, a mounted disk image), the user may copy it into place. The
copy is then launched and this process must exit without doing anything else.
"""

import logging
from enum import Enum
from pathlib import Path

from peekdown.core.context import PeekdownContext
from peekdown.core.launch import LaunchContext
from peekdown.core.layout import is_in_trusted_location, trusted_application_dirs
from peekdown.ops.dialogs.abc import RelocationChoice

logger = logging.getLogger(__name__)


class LocationOutcome(Enum):
    ALREADY_TRUSTED = "already-trusted"
    RELOCATED = "relocated"
    DECLINED = "declined"


class RelocationError(Exception):
    """Copying the host into an Applications directory failed."""


def ensure_trusted_location(
    ctx: PeekdownContext,
    launch: LaunchContext,
    *,
    trusted_dirs: tuple[Path, Path] | None = None,
) -> LocationOutcome:
    """Make sure the host lives in a trusted Applications directory.

    Args:
        ctx: Dependencies
        launch: Launch context for this process
        trusted_dirs: (system, user) directories; defaults to the standard pair

    Returns:
        ALREADY_TRUSTED when nothing needs doing, RELOCATED after a copy has been
        made and launched, DECLINED when the user cancelled or can't be asked.
        Callers must exit on anything but ALREADY_TRUSTED.

    Raises:
        RelocationError: If copying the host fails
    """
    host = launch.host
    if host is None:
        return LocationOutcome.ALREADY_TRUSTED

    system_dir, user_dir = trusted_dirs if trusted_dirs is not None else trusted_application_dirs()
    if is_in_trusted_location(host.path, (system_dir, user_dir)):
        return LocationOutcome.ALREADY_TRUSTED

    if not launch.is_interactive:
        return LocationOutcome.DECLINED

    choice = ctx.dialogs.choose_relocation(host.path, system_dir, user_dir)
    if choice is RelocationChoice.CANCEL:
        logger.debug("Relocation declined for %s", host.path)
        return LocationOutcome.DECLINED

    destination_dir = system_dir if choice is RelocationChoice.SYSTEM else user_dir
    destination = destination_dir / host.path.name
    try:
        ctx.installer.install(host.path, destination)
    except OSError as e:
        raise RelocationError(f"Could not copy {host.path.name} to {destination_dir}: {e}") from e

    # -n starts a fresh instance even though this one is still running
    ctx.launcher.dispatch(
        ["open", "-n", str(destination)], description=f"relaunch from {destination}"
    )
    ctx.feedback.info(f"Moved to {destination}")
    return LocationOutcome.RELOCATED
