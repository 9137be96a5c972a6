"""Modal dialogs shown during a Finder launch.

A registration launch has no terminal attached, so anything the user must see
or answer goes through here instead of stderr.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path


class RelocationChoice(Enum):
    """Answer to the move-to-Applications prompt."""

    SYSTEM = "system"
    USER = "user"
    CANCEL = "cancel"


class Dialogs(ABC):
    """Abstract interface for blocking user dialogs."""

    @abstractmethod
    def choose_relocation(self, host_path: Path, system_dir: Path, user_dir: Path) -> RelocationChoice:
        """Ask where to move an application that lives outside Applications.

        Exactly three answers are possible: move to system_dir, move to
        user_dir, or cancel. Dismissing the dialog counts as cancel.

        Args:
            host_path: Current location of the application bundle
            system_dir: System-wide applications directory
            user_dir: Per-user applications directory

        Returns:
            The user's choice
        """
        ...

    @abstractmethod
    def show_error(self, title: str, message: str) -> None:
        """Show a blocking error alert.

        Args:
            title: Alert title
            message: Body text
        """
        ...
