"""Fake Time implementation for testing.

FakeTime returns a pinned instant so registration timestamps are predictable.
"""

from datetime import UTC, datetime

from peekdown.ops.time.abc import Time

DEFAULT_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


class FakeTime(Time):
    """Fake implementation that always reports the same instant.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, now: datetime = DEFAULT_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now
