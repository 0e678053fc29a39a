"""Git repository queries needed for a release.

Usage:
    repo = Repository(Path.cwd())

    match repo.exact_tag("v*"):
        case Ok(tag):
            print(f"HEAD is tagged {tag}")
        case Err(e):
            print(f"Not a release commit: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rad_release.core.result import Err, Ok, Result
from rad_release.platform.process import ProcessError
from rad_release.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git repository abstraction.

    Attributes:
        path: Any directory inside the working tree
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def exact_tag(self, match: str = "v*") -> Result[str, GitError]:
        """Get the tag that points exactly at HEAD.

        Runs `git describe --exact-match --match <match>`; a tag that is
        merely reachable from HEAD does not count.

        Args:
            match: Glob the tag name must match.

        Returns:
            Ok(tag) on success
            Err(GitError) if HEAD carries no matching tag or git fails
        """
        no_tag = f"no tag matching '{match}' on HEAD"
        result = self._run(["describe", "--exact-match", "--match", match]).map_err(
            lambda e: GitError(
                command="describe --exact-match",
                message=e.stderr.strip() or no_tag,
                returncode=e.returncode,
            )
        )
        match result:
            case Ok(stdout) if stdout.strip():
                return Ok(stdout.strip())
            case Ok(_):
                return Err(GitError(command="describe --exact-match", message=no_tag))
            case Err() as err:
                return err

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            ["git", "-C", str(self.path), *args], cwd=self.path, timeout=_GIT_TIMEOUT_SECONDS
        )
