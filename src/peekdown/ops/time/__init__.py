from peekdown.ops.time.abc import Time
from peekdown.ops.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
