"""Launch mode detection.

The launch context is computed exactly once at process start and passed to
everything that needs it. Nothing reads sys.argv or sys.executable later.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

SUPPORTED_PLATFORM = "darwin"

HELP_FLAGS = frozenset({"-h", "--help"})

# Finder adds a process serial number argument on older macOS releases
FINDER_PSN_PREFIX = "-psn_"


class LaunchMode(Enum):
    INTERACTIVE = "interactive"
    CLI = "cli"
    HELP = "help"


@dataclass(frozen=True)
class HostBundle:
    """The running application's own bundle.

    Attributes:
        path: Absolute path to the .app bundle root
        version: Version string of the running build
    """

    path: Path
    version: str


@dataclass(frozen=True)
class LaunchContext:
    """How this process was started.

    Attributes:
        mode: Interactive (Finder/Dock), CLI, or help request
        platform: sys.platform at startup
        host: Host bundle when running as a packaged build, otherwise None
    """

    mode: LaunchMode
    platform: str
    host: HostBundle | None

    @property
    def is_packaged(self) -> bool:
        return self.host is not None

    @property
    def is_interactive(self) -> bool:
        return self.mode is LaunchMode.INTERACTIVE

    @property
    def should_register(self) -> bool:
        """Whether this launch runs the registration side flow."""
        return self.is_packaged and self.platform == SUPPORTED_PLATFORM and self.is_interactive


def classify_arguments(args: Sequence[str]) -> LaunchMode:
    """Classify command-line arguments (excluding argv[0])."""
    if any(arg in HELP_FLAGS for arg in args):
        return LaunchMode.HELP
    remaining = [arg for arg in args if not arg.startswith(FINDER_PSN_PREFIX)]
    if not remaining:
        return LaunchMode.INTERACTIVE
    return LaunchMode.CLI


def find_host_bundle(executable: Path, version: str) -> HostBundle | None:
    """Locate the .app bundle containing executable.

    Expects the standard layout <Name>.app/Contents/MacOS/<executable>.
    """
    resolved = executable.resolve()
    for parent in resolved.parents:
        if parent.suffix == ".app":
            return HostBundle(path=parent, version=version)
    return None


def detect_launch_context(
    args: Sequence[str],
    *,
    executable: Path,
    frozen: bool,
    platform: str,
    version: str,
) -> LaunchContext:
    """Build the launch context for this process.

    Args:
        args: Command-line arguments without the program name
        executable: Path of the running executable (sys.executable)
        frozen: Whether this is a packaged build (sys.frozen)
        platform: Value of sys.platform
        version: Version of the running build

    Returns:
        LaunchContext; host is None for unpackaged runs
    """
    host = find_host_bundle(executable, version) if frozen else None
    return LaunchContext(mode=classify_arguments(args), platform=platform, host=host)
