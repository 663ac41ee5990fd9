"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.

Usage:
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli_command(command: str, timeout: int = 30) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        command: The command to run (after 'python -m quizexam.cli')
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    env = dict(os.environ)
    # Nothing listens here; keeps network commands fast and deterministic
    env["QUIZEXAM_API__BASE_URL"] = "http://127.0.0.1:9"
    env["QUIZEXAM_API__TIMEOUT_SECONDS"] = "2"

    result = subprocess.run(
        f"{sys.executable} -m quizexam.cli {command}",
        shell=True,
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=timeout,
        env=env,
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        code, stdout, stderr = run_cli_command("--help")

        assert code == 0, f"Help failed: {stderr}"
        assert "quizexam" in stdout.lower()
        assert "exam" in stdout

    @pytest.mark.parametrize("command", ["exam", "banks", "show"])
    def test_command_help(self, command):
        code, stdout, stderr = run_cli_command(f"{command} --help")

        assert code == 0, f"{command} help failed: {stderr}"


class TestCLIErrors:
    """Commands fail cleanly when the service is unreachable."""

    def test_exam_unreachable_service(self):
        code, stdout, stderr = run_cli_command("exam 3")

        assert code == 1
        assert "Network error" in stdout

    def test_banks_unreachable_service(self):
        code, stdout, stderr = run_cli_command("banks")

        assert code == 1
        assert "Network error" in stdout
