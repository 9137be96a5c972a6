"""The registration side launch.

A Finder launch of a packaged build does not open a preview window. It checks
the host's location, brings the helper registration up to date, and exits.
"""

import logging

from peekdown.core.context import PeekdownContext
from peekdown.core.launch import LaunchContext
from peekdown.core.location import LocationOutcome, RelocationError, ensure_trusted_location
from peekdown.core.registrar import RegistrationOutcome, register_helper

logger = logging.getLogger(__name__)


def run_registration_launch(ctx: PeekdownContext, launch: LaunchContext) -> int:
    """Run location enforcement and registration for one launch.

    Args:
        ctx: Dependencies
        launch: Launch context; must have should_register set

    Returns:
        Process exit code. The caller always exits with it.
    """
    if not launch.should_register or launch.host is None:
        raise ValueError("Registration launch requires a packaged interactive macOS launch")

    try:
        location = ensure_trusted_location(ctx, launch)
    except RelocationError as e:
        ctx.feedback.error(f"Error: {e}")
        ctx.dialogs.show_error("Could not move application", str(e))
        return 1

    if location is not LocationOutcome.ALREADY_TRUSTED:
        return 0

    result = register_helper(ctx, launch.host)
    if result.outcome is RegistrationOutcome.REGISTERED:
        ctx.feedback.success(f"Registered Quick Look helper at {result.helper_path}")
    elif not result.ok:
        ctx.feedback.warning(f"Warning: {result.message}")
    return 0
