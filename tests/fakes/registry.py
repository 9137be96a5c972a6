"""Fake extension registry that records requests."""

from pathlib import Path

from peekdown.ops.registry.abc import ExtensionRegistry


class FakeExtensionRegistry(ExtensionRegistry):
    """Records every registry request as an (operation, path) pair.

    Examples:
        >>> registry = FakeExtensionRegistry()
        >>> registry.add_extension(Path("/Applications/H.app/Contents/PlugIns/X.appex"))
        >>> assert registry.calls[0][0] == "add"
    """

    def __init__(self) -> None:
        self._calls: list[tuple[str, Path]] = []

    @property
    def calls(self) -> list[tuple[str, Path]]:
        """Recorded (operation, path) pairs. For test assertions only."""
        return self._calls

    def clear_quarantine(self, bundle_path: Path) -> None:
        self._calls.append(("clear_quarantine", bundle_path))

    def add_extension(self, extension_path: Path) -> None:
        self._calls.append(("add", extension_path))

    def remove_extension(self, extension_path: Path) -> None:
        self._calls.append(("remove", extension_path))

    def launch_helper(self, bundle_path: Path) -> None:
        self._calls.append(("launch", bundle_path))
