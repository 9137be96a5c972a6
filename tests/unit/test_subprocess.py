"""Tests for subprocess wrapper with rich error context."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from peekdown.core.subprocess import run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("peekdown.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = "success output"
        mock_result.stderr = ""
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["codesign", "--verify", "/Applications/Peekdown.app"],
            operation_context="verify code signature",
            cwd=Path("/Applications"),
        )

        assert result == mock_result
        assert result.stdout == "success output"

        mock_run.assert_called_once_with(
            ["codesign", "--verify", "/Applications/Peekdown.app"],
            cwd=Path("/Applications"),
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
            timeout=None,
        )


def test_failure_with_stderr_includes_stderr_in_error() -> None:
    """Test that subprocess failure with stderr includes stderr in error message."""
    with patch("peekdown.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=1,
            cmd=["codesign", "--verify", "Peekdown.app"],
            stderr="Peekdown.app: code object is not signed at all",
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["codesign", "--verify", "Peekdown.app"],
                operation_context="verify code signature",
            )

        error_message = str(exc_info.value)
        assert "Failed to verify code signature" in error_message
        assert "Command: codesign --verify Peekdown.app" in error_message
        assert "Exit code: 1" in error_message
        assert "stderr: Peekdown.app: code object is not signed at all" in error_message


def test_failure_with_whitespace_stderr_omits_stderr_line() -> None:
    """Test that whitespace-only stderr is left out of the message."""
    with patch("peekdown.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=1,
            cmd=["command"],
            stderr="   \n  ",
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["command"], operation_context="run command")

        error_message = str(exc_info.value)
        assert "Exit code: 1" in error_message
        assert "stderr:" not in error_message


def test_exception_chaining_preserved() -> None:
    """Test that original CalledProcessError is preserved via exception chaining."""
    with patch("peekdown.core.subprocess.subprocess.run") as mock_run:
        original_error = subprocess.CalledProcessError(returncode=1, cmd=["xattr"])
        mock_run.side_effect = original_error

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["xattr"], operation_context="read attributes")

        assert exc_info.value.__cause__ is original_error


def test_timeout_becomes_runtime_error() -> None:
    """Test that a hung command is reported with its timeout."""
    with patch("peekdown.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd=["codesign"], timeout=60)

        with pytest.raises(RuntimeError, match="Timed out after 60s while trying to verify"):
            run_subprocess_with_context(
                ["codesign"], operation_context="verify", timeout=60
            )


def test_missing_binary_becomes_runtime_error() -> None:
    """Test that a missing executable names the command."""
    with patch("peekdown.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory")

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["osascript", "-e", "beep"], operation_context="show dialog"
            )

        assert "Command not found while trying to show dialog: osascript" in str(exc_info.value)


def test_parameter_pass_through() -> None:
    """Test that extra kwargs are passed through to subprocess.run."""
    with patch("peekdown.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = Mock(spec=subprocess.CompletedProcess, returncode=0)

        run_subprocess_with_context(
            ["echo", "test"],
            operation_context="echo test",
            timeout=30,
            env={"VAR": "value"},
        )

        call_kwargs = mock_run.call_args.kwargs
        assert call_kwargs["timeout"] == 30
        assert call_kwargs["env"] == {"VAR": "value"}


def test_check_false_behavior_no_exception() -> None:
    """Test that check=False prevents exception on non-zero exit."""
    with patch("peekdown.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 1
        mock_result.stderr = "some error"
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["command"],
            operation_context="run command",
            check=False,
        )

        assert result.returncode == 1
        assert mock_run.call_args.kwargs["check"] is False
