"""Platform abstraction layer."""

from .process import (
    ProcessError,
    run,
    run_attached,
)

__all__ = [
    "ProcessError",
    "run",
    "run_attached",
]
