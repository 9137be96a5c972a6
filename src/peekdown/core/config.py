"""Peekdown configuration loading.

Provides immutable config data loaded from the app support directory.
Loaded once at the entry point and stored in PeekdownContext.
"""

import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from peekdown.core.layout import (
    CONFIG_FILE_NAME,
    SYSTEM_APPLICATIONS_DIR,
    app_support_dir,
    is_in_trusted_location,
    trusted_application_dirs,
    user_applications_dir,
)


@dataclass(frozen=True)
class PeekdownConfig:
    """Immutable configuration.

    Attributes:
        helper_install_dir: Where the helper is installed; None means next to
            the host application
        debug: Whether debug logging is enabled
    """

    helper_install_dir: Path | None
    debug: bool

    @staticmethod
    def defaults() -> "PeekdownConfig":
        return PeekdownConfig(helper_install_dir=None, debug=False)


class ConfigOps(ABC):
    """Abstract interface for config access."""

    @abstractmethod
    def load(self) -> PeekdownConfig:
        """Load config, falling back to defaults when no file exists.

        Raises:
            ValueError: If the config file exists but is malformed, or names a
                helper_install_dir outside the Applications directories
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages)."""
        ...


class FilesystemConfigOps(ConfigOps):
    """Production implementation reading config.toml from app support."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def load(self) -> PeekdownConfig:
        config_path = self.path()
        if not config_path.exists():
            return PeekdownConfig.defaults()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config at {config_path}: {e}") from e

        install_dir = data.get("helper_install_dir")
        if install_dir is not None and not isinstance(install_dir, str):
            raise ValueError(f"'helper_install_dir' must be a string in {config_path}")

        helper_install_dir = Path(install_dir).expanduser() if install_dir else None
        if helper_install_dir is not None and (
            ".." in helper_install_dir.parts
            or not is_in_trusted_location(helper_install_dir, trusted_application_dirs())
        ):
            raise ValueError(
                f"'helper_install_dir' in {config_path} must be inside "
                f"{SYSTEM_APPLICATIONS_DIR} or {user_applications_dir()}"
            )

        return PeekdownConfig(
            helper_install_dir=helper_install_dir,
            debug=bool(data.get("debug", False)),
        )

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return app_support_dir() / CONFIG_FILE_NAME
