"""Typed release configuration.

The release target is fixed except for the SSH login and address, which
can be overridden from the environment:

    SSH_LOGIN    remote user (default: release)
    SSH_ADDRESS  ssh destination (default: <SSH_LOGIN>@files.radicle.xyz)

Empty values are treated as unset.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

__all__ = [
    "ReleaseConfig",
    "DEFAULT_SSH_LOGIN",
    "SSH_HOST",
    "RELEASES_DIR",
    "LATEST_LINK",
    "KEY_SUBPATH",
]

DEFAULT_SSH_LOGIN = "release"
SSH_HOST = "files.radicle.xyz"

# Remote layout: one directory per version, plus the `latest` symlink.
RELEASES_DIR = "/mnt/radicle/files/releases"
LATEST_LINK = "latest"

# Private key location, relative to the directory printed by `rad path`.
KEY_SUBPATH = ("keys", "radicle")


def _default_address(login: str) -> str:
    return f"{login}@{SSH_HOST}"


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Where and as whom a release is published."""

    ssh_login: str = DEFAULT_SSH_LOGIN
    ssh_address: str = _default_address(DEFAULT_SSH_LOGIN)
    releases_dir: str = RELEASES_DIR

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ReleaseConfig:
        """Resolve config from environment variables (os.environ if None)."""
        source = os.environ if env is None else env
        login = source.get("SSH_LOGIN") or DEFAULT_SSH_LOGIN
        address = source.get("SSH_ADDRESS") or _default_address(login)
        return cls(ssh_login=login, ssh_address=address)

    def release_path(self, version: str) -> str:
        """Remote directory holding the artifacts of `version`.

        Plain concatenation: the result always starts with `releases_dir/`,
        whatever `version` contains (an absolute `/tmp/x` or a trailing `/`
        is kept verbatim).
        """
        return f"{self.releases_dir}/{version}"

    @property
    def latest_path(self) -> str:
        return f"{self.releases_dir}/{LATEST_LINK}"
