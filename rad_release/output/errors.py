"""Outcome presentation utilities.

Centralized message formatting and exit code mapping for a release run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rad_release.core.errors import ErrorCode
from rad_release.output.console import Style
from rad_release.services.release_errors import (
    DelegatedFailure,
    PreconditionFailed,
    ReleaseOutcome,
    Released,
    UsageError,
    UserAborted,
    ValidationError,
)

if TYPE_CHECKING:
    from rad_release.output.console import ConsoleProtocol

__all__ = ["print_outcome", "outcome_exit_code"]


def print_outcome(outcome: ReleaseOutcome, console: ConsoleProtocol) -> None:
    """Print the final status of a release run."""
    match outcome:
        case UsageError(usage=usage):
            console.print(usage, err=True)
        case ValidationError(message=message):
            console.print(f"fatal: {message}", Style.ERROR, err=True)
        case UserAborted():
            console.print("Operation aborted.")
        case PreconditionFailed(message=message, detail=detail):
            console.print(f"fatal: {message}", Style.ERROR)
            if detail:
                console.print(detail, Style.DIM)
        case DelegatedFailure(command=command, returncode=rc, message=message, hint=hint):
            console.error(f"{command} failed (exit {rc}): {message}")
            if hint:
                console.print(f"hint: {hint}", Style.DIM, err=True)
        case Released():
            console.print("Done.", Style.SUCCESS)


def outcome_exit_code(outcome: ReleaseOutcome) -> int:
    """Get the process exit code for an outcome.

    A delegated command that ran and failed passes its own status through;
    one that never started maps to USER_ERROR.
    """
    match outcome:
        case Released():
            return int(ErrorCode.OK)
        case DelegatedFailure(returncode=rc) if rc > 0:
            return rc
        case _:
            return int(ErrorCode.USER_ERROR)
