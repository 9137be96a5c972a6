"""Tests for keeping the host inside a trusted Applications directory."""

from pathlib import Path

import pytest

from peekdown.core.context import PeekdownContext
from peekdown.core.launch import HostBundle, LaunchContext, LaunchMode
from peekdown.core.layout import is_in_trusted_location
from peekdown.core.location import LocationOutcome, RelocationError, ensure_trusted_location
from peekdown.ops.dialogs.abc import RelocationChoice
from tests.fakes.detached import FakeDetachedLauncher
from tests.fakes.dialogs import FakeDialogs
from tests.fakes.installer import RecordingBundleInstaller
from tests.test_utils.bundles import HOST_EXECUTABLE_NAME, make_host_bundle


def _dirs(tmp_path: Path) -> tuple[Path, Path]:
    system_dir = tmp_path / "Applications"
    user_dir = tmp_path / "home" / "Applications"
    system_dir.mkdir(parents=True)
    user_dir.mkdir(parents=True)
    return system_dir, user_dir


def _launch(host: HostBundle, mode: LaunchMode = LaunchMode.INTERACTIVE) -> LaunchContext:
    return LaunchContext(mode=mode, platform="darwin", host=host)


def test_is_in_trusted_location() -> None:
    """Test direct and nested placement under trusted directories."""
    trusted = (Path("/Applications"), Path("/Users/me/Applications"))

    assert is_in_trusted_location(Path("/Applications/Peekdown.app"), trusted)
    assert is_in_trusted_location(Path("/Applications/Tools/Peekdown.app"), trusted)
    assert is_in_trusted_location(Path("/Users/me/Applications/Peekdown.app"), trusted)
    assert not is_in_trusted_location(Path("/Users/me/Downloads/Peekdown.app"), trusted)
    assert not is_in_trusted_location(Path("/ApplicationsOld/Peekdown.app"), trusted)


def test_trusted_host_is_left_alone(tmp_path: Path) -> None:
    """Test that no prompt is shown when already installed."""
    system_dir, user_dir = _dirs(tmp_path)
    host = make_host_bundle(system_dir)
    dialogs = FakeDialogs(choice=RelocationChoice.SYSTEM)
    ctx = PeekdownContext.for_test(dialogs=dialogs)

    outcome = ensure_trusted_location(ctx, _launch(host), trusted_dirs=(system_dir, user_dir))

    assert outcome is LocationOutcome.ALREADY_TRUSTED
    assert dialogs.prompts == []


def test_cancel_declines_without_touching_disk(tmp_path: Path) -> None:
    """Test that cancelling makes no filesystem changes and launches nothing."""
    system_dir, user_dir = _dirs(tmp_path)
    host = make_host_bundle(tmp_path / "Downloads")
    installer = RecordingBundleInstaller()
    launcher = FakeDetachedLauncher()
    dialogs = FakeDialogs(choice=RelocationChoice.CANCEL)
    ctx = PeekdownContext.for_test(installer=installer, launcher=launcher, dialogs=dialogs)

    outcome = ensure_trusted_location(ctx, _launch(host), trusted_dirs=(system_dir, user_dir))

    assert outcome is LocationOutcome.DECLINED
    assert dialogs.prompts == [host.path]
    assert installer.install_calls == []
    assert launcher.dispatched == []
    assert list(system_dir.iterdir()) == []
    assert list(user_dir.iterdir()) == []


@pytest.mark.parametrize(
    ("choice", "expected_index"),
    [(RelocationChoice.SYSTEM, 0), (RelocationChoice.USER, 1)],
)
def test_move_copies_host_and_relaunches(
    tmp_path: Path, choice: RelocationChoice, expected_index: int
) -> None:
    """Test that moving copies the bundle and starts the copy."""
    dirs = _dirs(tmp_path)
    host = make_host_bundle(tmp_path / "Downloads")
    launcher = FakeDetachedLauncher()
    ctx = PeekdownContext.for_test(launcher=launcher, dialogs=FakeDialogs(choice=choice))

    outcome = ensure_trusted_location(ctx, _launch(host), trusted_dirs=dirs)

    destination = dirs[expected_index] / "Peekdown.app"
    assert outcome is LocationOutcome.RELOCATED
    assert (destination / "Contents" / "MacOS" / HOST_EXECUTABLE_NAME).exists()
    assert launcher.dispatched == [["open", "-n", str(destination)]]
    assert host.path.exists()


def test_non_interactive_launch_is_never_prompted(tmp_path: Path) -> None:
    """Test that only interactive launches may ask the user."""
    system_dir, user_dir = _dirs(tmp_path)
    host = make_host_bundle(tmp_path / "Downloads")
    dialogs = FakeDialogs(choice=RelocationChoice.SYSTEM)
    ctx = PeekdownContext.for_test(dialogs=dialogs)

    outcome = ensure_trusted_location(
        ctx, _launch(host, LaunchMode.CLI), trusted_dirs=(system_dir, user_dir)
    )

    assert outcome is LocationOutcome.DECLINED
    assert dialogs.prompts == []


def test_copy_failure_raises_relocation_error(tmp_path: Path) -> None:
    """Test that a failed copy is surfaced and nothing is launched."""
    system_dir, user_dir = _dirs(tmp_path)
    host = make_host_bundle(tmp_path / "Downloads")
    launcher = FakeDetachedLauncher()
    ctx = PeekdownContext.for_test(
        installer=RecordingBundleInstaller(install_error=PermissionError("Permission denied")),
        launcher=launcher,
        dialogs=FakeDialogs(choice=RelocationChoice.SYSTEM),
    )

    with pytest.raises(RelocationError, match="Permission denied"):
        ensure_trusted_location(ctx, _launch(host), trusted_dirs=(system_dir, user_dir))

    assert launcher.dispatched == []
