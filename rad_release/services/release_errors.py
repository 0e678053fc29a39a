from __future__ import annotations

from dataclasses import dataclass

USAGE = "Usage: rad-release <version>"


@dataclass(frozen=True, slots=True)
class UsageError:
    argc: int
    usage: str = USAGE


@dataclass(frozen=True, slots=True)
class ValidationError:
    message: str


@dataclass(frozen=True, slots=True)
class UserAborted:
    version: str
    answer: str | None


@dataclass(frozen=True, slots=True)
class PreconditionFailed:
    message: str
    detail: str | None = None


@dataclass(frozen=True, slots=True)
class DelegatedFailure:
    command: str
    returncode: int
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class Released:
    version: str
    tag: str
    remote_command: str
    dry_run: bool = False


ReleaseFailure = UsageError | ValidationError | UserAborted | PreconditionFailed | DelegatedFailure

ReleaseOutcome = ReleaseFailure | Released
