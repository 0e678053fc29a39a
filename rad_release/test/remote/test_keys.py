"""Tests for rad_release.remote.keys module."""

from __future__ import annotations

from pathlib import Path

import pytest

from rad_release.core.result import Err, Ok, Result
from rad_release.platform.process import ProcessError
from rad_release.remote import keys


def _fake_run(result: Result[str, ProcessError], seen: list[list[str]]):
    def fake_run(
        cmd: list[str],
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Result[str, ProcessError]:
        seen.append(cmd)
        return result

    return fake_run


class TestResolveKeyPath:
    def test_appends_key_subpath(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[list[str]] = []
        monkeypatch.setattr(keys, "run", _fake_run(Ok("/home/alice/.radicle\n"), seen))

        result = keys.resolve_key_path()

        assert result == Ok(Path("/home/alice/.radicle/keys/radicle"))
        assert seen == [["rad", "path"]]

    def test_uses_last_line(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(keys, "run", _fake_run(Ok("notice\n/srv/rad\n"), []))

        assert keys.resolve_key_path() == Ok(Path("/srv/rad/keys/radicle"))

    def test_rad_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        error = ProcessError(("rad", "path"), 1, "", "rad: profile not found\n")
        monkeypatch.setattr(keys, "run", _fake_run(Err(error), []))

        result = keys.resolve_key_path()

        assert isinstance(result, Err)
        assert result.error.returncode == 1
        assert result.error.message == "rad path: rad: profile not found"

    def test_rad_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        error = ProcessError(("rad", "path"), -1, "", "")
        monkeypatch.setattr(keys, "run", _fake_run(Err(error), []))

        result = keys.resolve_key_path()

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert result.error.hint is not None
        assert "failed (exit -1)" in result.error.message

    def test_empty_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(keys, "run", _fake_run(Ok("\n"), []))

        result = keys.resolve_key_path()

        assert isinstance(result, Err)
        assert "printed no directory" in result.error.message
