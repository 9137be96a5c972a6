"""Real detached dispatch using subprocess.Popen."""

import logging
import subprocess

from peekdown.ops.detached.abc import DetachedLauncher

logger = logging.getLogger(__name__)


class RealDetachedLauncher(DetachedLauncher):
    """Spawns commands in their own session with stdio detached.

    start_new_session keeps the child alive after the host process exits,
    which matters because the registration launch terminates right after
    dispatching.
    """

    def dispatch(self, cmd: list[str], description: str) -> None:
        logger.debug("Dispatching %s: %s", description, " ".join(cmd))
        try:
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            logger.debug("Could not dispatch %s: %s", description, e)
