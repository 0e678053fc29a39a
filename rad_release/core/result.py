"""Result type for explicit error handling.

Every fallible step of a release (running git, resolving the key, running
ssh) returns a Result instead of raising, so the release service can turn
each failure into a typed outcome in one place.

Usage:
    match repo.exact_tag("v*"):
        case Ok(tag):
            console.print(f"Tagged {tag}")
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value

    def unwrap_err(self) -> None:
        """Raises ValueError since this is Ok."""
        raise ValueError(f"called unwrap_err on Ok: {self.value}")

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        """Returns self unchanged (no error to map)."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def unwrap(self) -> None:
        """Raises ValueError with the error."""
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        """Returns the contained error."""
        return self.error

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Applies a function to the contained error.

        Used to translate a lower layer's error (ProcessError) into the
        caller's own error type.
        """
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
