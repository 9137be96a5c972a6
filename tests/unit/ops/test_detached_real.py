"""Tests for RealDetachedLauncher."""

import subprocess
from unittest.mock import patch

from peekdown.ops.detached.real import RealDetachedLauncher

POPEN = "peekdown.ops.detached.real.subprocess.Popen"


def test_dispatch_detaches_child() -> None:
    """Test that the child runs in its own session with no stdio."""
    with patch(POPEN) as mock_popen:
        RealDetachedLauncher().dispatch(["open", "-g", "/tmp/x.app"], description="launch")

    mock_popen.assert_called_once_with(
        ["open", "-g", "/tmp/x.app"],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )
    mock_popen.return_value.wait.assert_not_called()


def test_dispatch_failure_is_not_raised() -> None:
    """Test that a missing tool does not fail the caller."""
    with patch(POPEN, side_effect=FileNotFoundError("pluginkit")):
        RealDetachedLauncher().dispatch(["pluginkit", "-a", "x.appex"], description="register")
