"""Console output abstraction.

Services talk to a ConsoleProtocol instead of printing directly, so the
release flow can be driven by a scripted MockConsole in tests. Messages
can be routed to standard error with `err=True`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console input and output."""

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print, never interpreted as markup
            style: The style to apply
            err: Write to standard error instead of standard output
        """
        ...

    def error(self, message: str) -> None:
        """Print an `error:` prefixed message to standard error."""
        ...

    def warning(self, message: str) -> None:
        """Print a `warning:` prefixed message."""
        ...

    def info(self, message: str) -> None:
        """Print an `info:` prefixed message."""
        ...

    def input(self, prompt: str) -> str:
        """Show `prompt` and read one line.

        Raises:
            EOFError: Standard input is closed.
        """
        ...


class RichConsole:
    """Console implementation using Rich library."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console
        from rich.text import Text

        self._text = Text
        self._out = Console(highlight=False, emoji=False)
        self._err = Console(stderr=True, highlight=False, emoji=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        console = self._err if err else self._out
        rich_style = self._style_map.get(style, "") or None
        console.print(message, style=rich_style, markup=False, emoji=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self._prefixed(self._err, "error:", "red bold", message)

    def warning(self, message: str) -> None:
        self._prefixed(self._out, "warning:", "yellow", message)

    def info(self, message: str) -> None:
        self._prefixed(self._out, "info:", "cyan", message)

    def input(self, prompt: str) -> str:
        return self._out.input(prompt, markup=False, emoji=False)

    def _prefixed(self, console: Console, prefix: str, prefix_style: str, message: str) -> None:
        text = self._text(prefix, style=prefix_style)
        text.append(f" {message}")
        console.print(text, emoji=False, soft_wrap=True)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    err: bool = False


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


def _empty_answers() -> list[str]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing.

    `answers` are returned by input() in order; once exhausted, input()
    behaves like a closed stdin and raises EOFError.
    """

    answers: list[str] = field(default_factory=_empty_answers)
    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)
    prompts: list[str] = field(default_factory=_empty_answers)

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        self.outputs.append(OutputRecord(message, style, err))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR, True))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """All output messages, both streams, in order."""
        return [o.message for o in self.outputs]

    @property
    def stdout(self) -> list[str]:
        return [o.message for o in self.outputs if not o.err]

    @property
    def stderr(self) -> list[str]:
        return [o.message for o in self.outputs if o.err]

    @property
    def text(self) -> str:
        """All output as a single newline-separated string."""
        return "\n".join(self.messages)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
