"""OS extension registry interface.

Adding, quarantine clearing and launching are best-effort tasks (see
peekdown.ops.detached.abc): they are dispatched, their result is discarded,
and a failure simply leaves the extension inactive until a later launch
registers it again. The OS's own extension loader is the final arbiter of
whether the helper becomes active.

Removal is the exception. It blocks until the registry has answered, because
the bundle is deleted right after and the registry needs it on disk to
forget the extension.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ExtensionRegistry(ABC):
    """Abstract interface for handing helper bundles to the OS."""

    @abstractmethod
    def clear_quarantine(self, bundle_path: Path) -> None:
        """Strip quarantine markers that would block first execution.

        Args:
            bundle_path: Installed helper bundle
        """
        ...

    @abstractmethod
    def add_extension(self, extension_path: Path) -> None:
        """Ask the extension registry to register an extension bundle.

        Args:
            extension_path: The .appex bundle inside an installed helper
        """
        ...

    @abstractmethod
    def remove_extension(self, extension_path: Path) -> None:
        """Unregister an extension bundle and wait for the registry.

        Failures are logged, never raised; the bundle is deleted either way.

        Args:
            extension_path: The .appex bundle inside a helper being removed
        """
        ...

    @abstractmethod
    def launch_helper(self, bundle_path: Path) -> None:
        """Launch the helper in the background so it registers itself.

        Args:
            bundle_path: Installed helper bundle
        """
        ...
