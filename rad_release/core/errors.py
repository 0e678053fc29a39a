"""Error codes for CLI exit status.

Every local failure of a release run (bad arguments, declined prompt,
missing tag) exits with USER_ERROR. Failures of delegated commands
propagate the command's own exit status instead, see output/errors.py.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the release command.

    These values are used as process exit codes and should remain stable.
    """

    OK = 0
    USER_ERROR = 1
