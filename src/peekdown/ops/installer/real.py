"""Real bundle installer using shutil."""

import logging
import shutil
from pathlib import Path

from peekdown.ops.installer.abc import BundleInstaller

logger = logging.getLogger(__name__)


class RealBundleInstaller(BundleInstaller):
    """Copies bundles with shutil.copytree.

    Symlinks inside bundles (Versions/Current in frameworks) are copied as
    links, and copy2 carries mode bits so executables stay executable.
    """

    def install(self, source: Path, target: Path) -> None:
        if not source.is_dir():
            raise FileNotFoundError(f"Bundle not found: {source}")

        if target.exists() or target.is_symlink():
            logger.debug("Removing existing bundle at %s", target)
            self.remove(target)

        target.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Copying %s -> %s", source, target)
        shutil.copytree(source, target, symlinks=True)

    def remove(self, path: Path) -> None:
        if path.is_symlink() or path.is_file():
            path.unlink()
            return
        if not path.exists():
            return
        shutil.rmtree(path)
