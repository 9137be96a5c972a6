"""Fake detached launcher that records dispatched commands."""

from peekdown.ops.detached.abc import DetachedLauncher


class FakeDetachedLauncher(DetachedLauncher):
    """Records commands instead of spawning them."""

    def __init__(self) -> None:
        self._dispatched: list[list[str]] = []

    @property
    def dispatched(self) -> list[list[str]]:
        return self._dispatched

    def dispatch(self, cmd: list[str], description: str) -> None:
        self._dispatched.append(cmd)
