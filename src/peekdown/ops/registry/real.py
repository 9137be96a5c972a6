"""Real extension registry using pluginkit, xattr and open."""

import logging
from pathlib import Path

from peekdown.core.subprocess import run_subprocess_with_context
from peekdown.ops.detached.abc import DetachedLauncher
from peekdown.ops.registry.abc import ExtensionRegistry

logger = logging.getLogger(__name__)

QUARANTINE_ATTRIBUTE = "com.apple.quarantine"

PLUGINKIT_TIMEOUT_SECONDS = 30


class RealExtensionRegistry(ExtensionRegistry):
    """Dispatches registry commands through a DetachedLauncher.

    Only remove_extension() waits for its command to finish.
    """

    def __init__(self, launcher: DetachedLauncher) -> None:
        self._launcher = launcher

    def clear_quarantine(self, bundle_path: Path) -> None:
        self._launcher.dispatch(
            ["xattr", "-dr", QUARANTINE_ATTRIBUTE, str(bundle_path)],
            description=f"clear quarantine on {bundle_path.name}",
        )

    def add_extension(self, extension_path: Path) -> None:
        self._launcher.dispatch(
            ["pluginkit", "-a", str(extension_path)],
            description=f"register extension {extension_path.name}",
        )

    def remove_extension(self, extension_path: Path) -> None:
        try:
            result = run_subprocess_with_context(
                ["pluginkit", "-r", str(extension_path)],
                operation_context=f"unregister extension {extension_path.name}",
                check=False,
                timeout=PLUGINKIT_TIMEOUT_SECONDS,
            )
        except RuntimeError as e:
            logger.warning("Could not unregister %s: %s", extension_path, e)
            return

        if result.returncode != 0:
            logger.warning(
                "pluginkit -r exited with %s for %s: %s",
                result.returncode,
                extension_path,
                result.stderr.strip(),
            )

    def launch_helper(self, bundle_path: Path) -> None:
        self._launcher.dispatch(
            ["open", "-g", str(bundle_path)],
            description=f"launch helper {bundle_path.name}",
        )
