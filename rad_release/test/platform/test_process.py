"""Tests for rad_release.platform.process module."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from rad_release.core.result import Err, Ok
from rad_release.platform.process import ProcessError, run, run_attached

PY = sys.executable


class TestProcessError:
    """Test ProcessError dataclass."""

    def test_str_short_command(self) -> None:
        error = ProcessError(command=("rad", "path"), returncode=1, stdout="", stderr="")
        assert str(error) == "rad path failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("ssh", "-i", "/keys/radicle", "release@files.radicle.xyz", "ln -snf a b"),
            returncode=255,
            stdout="",
            stderr="",
        )
        assert str(error) == "ssh -i /keys/radicle ... failed (exit 255)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    """Test run function."""

    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "print('hello')"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "hello" in result.value

    def test_cwd_defaults_to_current_directory(self) -> None:
        result = run([PY, "-c", "import os; print(os.getcwd())"])

        assert isinstance(result, Ok)
        assert Path(result.value.strip()) == Path.cwd()

    def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "import sys; sys.exit(42)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 42

    def test_captures_stderr(self, tmp_path: Path) -> None:
        result = run(
            [PY, "-c", "import sys; sys.stderr.write('fatal: no names found'); sys.exit(128)"],
            cwd=tmp_path,
        )

        assert isinstance(result, Err)
        assert "no names found" in result.error.stderr

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert len(result.error.stderr) > 0

    def test_uses_env(self, tmp_path: Path) -> None:
        env = os.environ.copy()
        env["SSH_LOGIN"] = "alice"

        result = run(
            [PY, "-c", "import os; print(os.environ.get('SSH_LOGIN', ''))"],
            cwd=tmp_path,
            env=env,
        )

        assert isinstance(result, Ok)
        assert "alice" in result.value

    def test_timeout(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "import time; time.sleep(10)"], cwd=tmp_path, timeout=0.1)

        assert isinstance(result, Err)
        assert "timed out" in result.error.stderr.lower()


class TestRunAttached:
    """Test run_attached function."""

    def test_success_returns_none(self, tmp_path: Path) -> None:
        result = run_attached([PY, "-c", "pass"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert result.value is None

    def test_failure_propagates_returncode(self, tmp_path: Path) -> None:
        result = run_attached([PY, "-c", "import sys; sys.exit(255)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 255
        assert result.error.stderr == ""

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run_attached(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
