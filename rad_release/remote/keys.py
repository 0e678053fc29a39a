"""Locate the private key used to sign in to the release server.

The key lives in the Radicle home, which only `rad path` knows for sure
(it honours RAD_HOME and the platform defaults).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rad_release.core.config import KEY_SUBPATH
from rad_release.core.result import Err, Ok, Result
from rad_release.platform.process import run

__all__ = ["KeyResolutionError", "resolve_key_path"]

_RAD_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class KeyResolutionError:
    """`rad path` failed or printed nothing usable."""

    message: str
    returncode: int = 1
    hint: str | None = "Is the `rad` CLI installed and on PATH?"


def resolve_key_path() -> Result[Path, KeyResolutionError]:
    """Return `<rad path>/keys/radicle`.

    The key file itself is not checked for existence.
    """
    result = run(["rad", "path"], timeout=_RAD_TIMEOUT_SECONDS).map_err(
        lambda e: KeyResolutionError(
            message=f"rad path: {e.stderr.strip() or e}",
            returncode=e.returncode,
        )
    )
    match result:
        case Err() as err:
            return err
        case Ok(stdout):
            lines = stdout.strip().splitlines()
            if not lines or not lines[-1].strip():
                return Err(KeyResolutionError(message="rad path: printed no directory"))
            return Ok(Path(lines[-1].strip()).joinpath(*KEY_SUBPATH))
