"""Fake dialogs with a scripted relocation answer."""

from pathlib import Path

from peekdown.ops.dialogs.abc import Dialogs, RelocationChoice


class FakeDialogs(Dialogs):
    """Answers the relocation prompt with a fixed choice.

    Constructor Injection:
    - choice: answer returned by choose_relocation() (default: CANCEL)
    """

    def __init__(self, *, choice: RelocationChoice = RelocationChoice.CANCEL) -> None:
        self._choice = choice
        self._prompts: list[Path] = []
        self._errors: list[tuple[str, str]] = []

    @property
    def prompts(self) -> list[Path]:
        """Host paths the relocation prompt was shown for."""
        return self._prompts

    @property
    def errors(self) -> list[tuple[str, str]]:
        """(title, message) pairs passed to show_error()."""
        return self._errors

    def choose_relocation(self, host_path: Path, system_dir: Path, user_dir: Path) -> RelocationChoice:
        self._prompts.append(host_path)
        return self._choice

    def show_error(self, title: str, message: str) -> None:
        self._errors.append((title, message))
