"""Release flow: confirm, check the tag, point `latest` at the version.

Every step either continues or ends the run with a typed outcome from
release_errors; nothing is retried. Rendering the outcome and choosing
the exit code is left to output/errors.py.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from rad_release.core.config import ReleaseConfig
from rad_release.core.result import Err, Ok, Result
from rad_release.git.repository import GitError
from rad_release.output.console import ConsoleProtocol
from rad_release.platform.process import ProcessError
from rad_release.remote.keys import KeyResolutionError
from rad_release.remote.ssh import SshTarget, symlink_command
from rad_release.services.release_errors import (
    DelegatedFailure,
    PreconditionFailed,
    ReleaseOutcome,
    Released,
    UsageError,
    UserAborted,
    ValidationError,
)

__all__ = ["ReleaseService", "TAG_PATTERN", "parse_arguments", "is_affirmative"]

TAG_PATTERN = "v*"

type TagQuery = Callable[[str], Result[str, GitError]]
type KeyResolver = Callable[[], Result[Path, KeyResolutionError]]
type RemoteRunner = Callable[[SshTarget, str], Result[None, ProcessError]]


def parse_arguments(args: Sequence[str]) -> Result[str, UsageError]:
    """Exactly one positional argument: the version."""
    if len(args) != 1:
        return Err(UsageError(argc=len(args)))
    return Ok(args[0])


def is_affirmative(answer: str) -> bool:
    """Anything starting with `y` or `Y` counts as yes."""
    return answer[:1] in ("y", "Y")


@dataclass(frozen=True, slots=True)
class ReleaseService:
    """Runs a single release with injectable collaborators.

    Attributes:
        config: Release target
        console: Prompt and progress output
        exact_tag: Tag query for HEAD (Repository.exact_tag in production)
        resolve_key: Private key lookup
        run_remote: Remote command runner
        dry_run: Print the ssh command instead of running it
    """

    config: ReleaseConfig
    console: ConsoleProtocol
    exact_tag: TagQuery
    resolve_key: KeyResolver
    run_remote: RemoteRunner
    dry_run: bool = False

    def run(self, version: str) -> ReleaseOutcome:
        if not version:
            return ValidationError(message="empty version number")

        answer = self._confirm(version)
        if answer is None or not is_affirmative(answer):
            return UserAborted(version=version, answer=answer)

        match self.exact_tag(TAG_PATTERN):
            case Err(e):
                return PreconditionFailed(
                    message="the current commit has no release tag; "
                    "release tags must start with 'v'",
                    detail=e.message,
                )
            case Ok(tag):
                pass

        expected = f"v{version}"
        if tag != expected:
            self.console.warning(f"HEAD is tagged '{tag}', expected '{expected}'")

        match self.resolve_key():
            case Err(key_error):
                return DelegatedFailure(
                    command="rad path",
                    returncode=key_error.returncode,
                    message=key_error.message,
                    hint=key_error.hint,
                )
            case Ok(key):
                target = SshTarget(address=self.config.ssh_address, key=key)

        remote_command = symlink_command(
            self.config.release_path(version), self.config.latest_path
        )

        if self.dry_run:
            self.console.info(f"dry-run: {shlex.join(target.argv(remote_command))}")
            return Released(version=version, tag=tag, remote_command=remote_command, dry_run=True)

        match self.run_remote(target, remote_command):
            case Err(e):
                return DelegatedFailure(
                    command="ssh",
                    returncode=e.returncode,
                    message=e.stderr.strip() or str(e),
                )
            case Ok(_):
                return Released(version=version, tag=tag, remote_command=remote_command)

    def _confirm(self, version: str) -> str | None:
        """Ask for confirmation; None when stdin is closed."""
        prompt = f"Release {version} to {self.config.ssh_address}? [y/N] "
        try:
            return self.console.input(prompt)
        except EOFError:
            return None
