"""Fixed bundle layout and well-known locations.

Relative paths are identical for the helper shipped inside the host's
resources and for the installed copy, so the same fingerprint and trust
checks apply to both.
"""

from pathlib import Path

APP_NAME = "Peekdown"

HELPER_BUNDLE_NAME = "Peekdown Helper.app"
HELPER_SOURCE_RELATIVE = Path("Contents") / "Resources" / HELPER_BUNDLE_NAME

HELPER_EXECUTABLE_RELATIVE = Path("Contents") / "MacOS" / "Peekdown Helper"
EXTENSION_BUNDLE_RELATIVE = Path("Contents") / "PlugIns" / "PeekdownQLExt.appex"
EXTENSION_EXECUTABLE_RELATIVE = EXTENSION_BUNDLE_RELATIVE / "Contents" / "MacOS" / "PeekdownQLExt"

# Quick Look preview extensions are only loaded when sandboxed
REQUIRED_ENTITLEMENT = "com.apple.security.app-sandbox"

SYSTEM_APPLICATIONS_DIR = Path("/Applications")

STATE_FILE_NAME = "registration.toml"
CONFIG_FILE_NAME = "config.toml"


def user_applications_dir() -> Path:
    return Path.home() / "Applications"


def trusted_application_dirs() -> tuple[Path, Path]:
    """Directories the extension subsystem loads extensions from."""
    return (SYSTEM_APPLICATIONS_DIR, user_applications_dir())


def is_in_trusted_location(path: Path, trusted_dirs: tuple[Path, ...]) -> bool:
    return any(path.is_relative_to(trusted_dir) for trusted_dir in trusted_dirs)


def app_support_dir() -> Path:
    """Per-user writable directory for Peekdown's own records."""
    return Path.home() / "Library" / "Application Support" / APP_NAME


def helper_source_path(host_path: Path) -> Path:
    return host_path / HELPER_SOURCE_RELATIVE


def helper_extension_path(helper_path: Path) -> Path:
    return helper_path / EXTENSION_BUNDLE_RELATIVE


def helper_target_path(host_path: Path, install_dir: Path | None) -> Path:
    """Where the live helper belongs for a host at host_path.

    Defaults to sitting next to the host, so moving the host moves the target.
    """
    base = install_dir if install_dir is not None else host_path.parent
    return base / HELPER_BUNDLE_NAME
