"""Persisted record of the last successful helper registration."""

import logging
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import tomli_w

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationState:
    """Snapshot written after every successful registration.

    Fields are optional because older or hand-edited files may lack them. A
    missing field never matches the current value, so such a state is Stale.
    """

    registered_at: datetime | None
    host_path: Path | None
    helper_path: Path | None
    helper_fingerprint: str | None
    host_version: str | None


class RegistrationStore(ABC):
    """Abstract interface for loading and saving the registration record."""

    @abstractmethod
    def load(self) -> RegistrationState | None:
        """Load the last registration.

        Returns:
            The stored state, or None when absent, unreadable or corrupt. A
            corrupt record is indistinguishable from "never registered".
        """
        ...

    @abstractmethod
    def save(self, state: RegistrationState) -> None:
        """Overwrite the stored record with state.

        Raises:
            OSError: If the record cannot be written
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Delete the stored record, if any."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Location of the record (for messages and debugging)."""
        ...


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def _optional_path(data: dict[str, Any], key: str) -> Path | None:
    value = _optional_str(data, key)
    if value is None:
        return None
    return Path(value)


def _optional_datetime(data: dict[str, Any], key: str) -> datetime | None:
    value = data.get(key)
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def state_from_dict(data: dict[str, Any]) -> RegistrationState:
    """Build a RegistrationState from parsed TOML, tolerating bad fields."""
    return RegistrationState(
        registered_at=_optional_datetime(data, "registered_at"),
        host_path=_optional_path(data, "host_path"),
        helper_path=_optional_path(data, "helper_path"),
        helper_fingerprint=_optional_str(data, "helper_fingerprint"),
        host_version=_optional_str(data, "host_version"),
    )


def state_to_dict(state: RegistrationState) -> dict[str, Any]:
    # TOML has no null, so unset fields are simply omitted
    data: dict[str, Any] = {}
    if state.registered_at is not None:
        data["registered_at"] = state.registered_at
    if state.host_path is not None:
        data["host_path"] = str(state.host_path)
    if state.helper_path is not None:
        data["helper_path"] = str(state.helper_path)
    if state.helper_fingerprint is not None:
        data["helper_fingerprint"] = state.helper_fingerprint
    if state.host_version is not None:
        data["host_version"] = state.host_version
    return data


class FileRegistrationStore(RegistrationStore):
    """Production store backed by a TOML file in the app support directory."""

    def __init__(self, state_path: Path) -> None:
        self._state_path = state_path

    def load(self) -> RegistrationState | None:
        if not self._state_path.exists():
            return None

        try:
            with open(self._state_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            logger.debug("Ignoring unreadable registration record %s: %s", self._state_path, e)
            return None

        return state_from_dict(data)

    def save(self, state: RegistrationState) -> None:
        if not self._state_path.parent.exists():
            self._state_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self._state_path, "wb") as f:
            tomli_w.dump(state_to_dict(state), f)

    def clear(self) -> None:
        if self._state_path.exists():
            self._state_path.unlink()

    def path(self) -> Path:
        return self._state_path


class InMemoryRegistrationStore(RegistrationStore):
    """Test store that keeps the record in memory and tracks saves."""

    def __init__(self, state: RegistrationState | None = None) -> None:
        self._state = state
        self._saved_states: list[RegistrationState] = []
        self._clear_count = 0

    @property
    def saved_states(self) -> list[RegistrationState]:
        """States passed to save(), in order. For test assertions only."""
        return self._saved_states

    @property
    def clear_count(self) -> int:
        return self._clear_count

    def load(self) -> RegistrationState | None:
        return self._state

    def save(self, state: RegistrationState) -> None:
        self._state = state
        self._saved_states.append(state)

    def clear(self) -> None:
        self._state = None
        self._clear_count += 1

    def path(self) -> Path:
        return Path("/fake/peekdown/registration.toml")
