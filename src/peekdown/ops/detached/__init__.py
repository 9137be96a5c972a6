from peekdown.ops.detached.abc import DetachedLauncher
from peekdown.ops.detached.real import RealDetachedLauncher

__all__ = [
    "DetachedLauncher",
    "RealDetachedLauncher",
]
