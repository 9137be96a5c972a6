"""Real dialogs using osascript."""

import logging
from pathlib import Path

from peekdown.core.subprocess import run_subprocess_with_context
from peekdown.ops.dialogs.abc import Dialogs, RelocationChoice

logger = logging.getLogger(__name__)

BUTTON_RETURNED_PREFIX = "button returned:"


def _applescript_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _display_dir(path: Path) -> str:
    home = Path.home()
    if path.is_relative_to(home):
        return "~/" + str(path.relative_to(home))
    return str(path)


class RealDialogs(Dialogs):
    """Shows AppleScript dialogs through /usr/bin/osascript."""

    def choose_relocation(self, host_path: Path, system_dir: Path, user_dir: Path) -> RelocationChoice:
        system_label = _display_dir(system_dir)
        user_label = _display_dir(user_dir)
        prompt = (
            f"{host_path.stem} is running from {host_path.parent}.\n\n"
            "Quick Look only loads extensions from applications installed in an "
            "Applications folder. Move it now?"
        )
        buttons = ", ".join(_applescript_string(b) for b in ("Cancel", user_label, system_label))
        script = (
            f"display dialog {_applescript_string(prompt)} "
            f"buttons {{{buttons}}} "
            f"default button {_applescript_string(system_label)} "
            f'cancel button "Cancel" '
            f"with title {_applescript_string('Move ' + host_path.stem)} with icon caution"
        )

        result = run_subprocess_with_context(
            ["osascript", "-e", script],
            operation_context="show relocation dialog",
            check=False,
        )
        # Cancel makes osascript exit non-zero with error -128
        if result.returncode != 0:
            logger.debug("Relocation dialog dismissed: %s", result.stderr.strip())
            return RelocationChoice.CANCEL

        answer = result.stdout.strip()
        if answer.startswith(BUTTON_RETURNED_PREFIX):
            answer = answer[len(BUTTON_RETURNED_PREFIX) :]

        if answer == system_label:
            return RelocationChoice.SYSTEM
        if answer == user_label:
            return RelocationChoice.USER
        return RelocationChoice.CANCEL

    def show_error(self, title: str, message: str) -> None:
        script = (
            f"display alert {_applescript_string(title)} "
            f"message {_applescript_string(message)} as critical"
        )
        result = run_subprocess_with_context(
            ["osascript", "-e", script],
            operation_context="show error alert",
            check=False,
        )
        if result.returncode != 0:
            logger.debug("Error alert failed: %s", result.stderr.strip())
