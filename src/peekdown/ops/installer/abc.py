"""Bundle installer interface.

Installs are always full replaces: the target is removed before the source is
copied over it. Nothing here is crash-atomic. A copy that dies midway leaves a
partially written target, which the next launch detects through fingerprint
and signature checks and repairs by reinstalling.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class BundleInstaller(ABC):
    """Abstract interface for copying and removing application bundles.

    Real implementations touch the filesystem. Test implementations record
    calls so tests can assert that a no-op registration performed zero writes.
    """

    @abstractmethod
    def install(self, source: Path, target: Path) -> None:
        """Replace target with a recursive copy of source.

        Executable bits, symlinks and nested bundles are preserved.

        Args:
            source: Bundle directory to copy (must exist)
            target: Destination bundle path; removed first if present

        Raises:
            FileNotFoundError: If source doesn't exist
            OSError: If removal or copy fails
        """
        ...

    @abstractmethod
    def remove(self, path: Path) -> None:
        """Recursively delete a previously installed bundle.

        Removing a path that doesn't exist is a no-op.

        Args:
            path: Bundle directory to delete

        Raises:
            OSError: If deletion fails
        """
        ...
