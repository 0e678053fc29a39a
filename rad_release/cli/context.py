from __future__ import annotations

from pathlib import Path

from rad_release.core.config import ReleaseConfig
from rad_release.git.repository import Repository
from rad_release.output.console import ConsoleProtocol
from rad_release.remote.keys import resolve_key_path
from rad_release.remote.ssh import run_remote
from rad_release.services.release import ReleaseService


def build_service(console: ConsoleProtocol, *, dry_run: bool) -> ReleaseService:
    """Wire the release flow to git, rad and ssh for the current directory."""
    return ReleaseService(
        config=ReleaseConfig.from_env(),
        console=console,
        exact_tag=Repository(Path.cwd()).exact_tag,
        resolve_key=resolve_key_path,
        run_remote=run_remote,
        dry_run=dry_run,
    )
