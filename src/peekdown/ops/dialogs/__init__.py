from peekdown.ops.dialogs.abc import Dialogs, RelocationChoice
from peekdown.ops.dialogs.real import RealDialogs

__all__ = [
    "Dialogs",
    "RealDialogs",
    "RelocationChoice",
]
