"""Remote commands on the release server over ssh."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

from rad_release.core.result import Result
from rad_release.platform.process import ProcessError, run_attached

__all__ = ["SshTarget", "symlink_command", "run_remote"]


@dataclass(frozen=True, slots=True)
class SshTarget:
    """A `user@host` destination and the identity used to reach it."""

    address: str
    key: Path

    def argv(self, remote_command: str) -> list[str]:
        """Full ssh invocation; the remote command is passed as one argument."""
        return ["ssh", "-i", str(self.key), self.address, remote_command]


def symlink_command(target: str, link: str) -> str:
    """Shell command replacing `link` with a symlink to `target`.

    `-n` makes ln replace an existing symlink to a directory instead of
    creating the new link inside it.
    """
    return f"ln -snf {shlex.quote(target)} {shlex.quote(link)}"


def run_remote(target: SshTarget, remote_command: str) -> Result[None, ProcessError]:
    """Run `remote_command` on the server, attached to the terminal."""
    return run_attached(target.argv(remote_command))
