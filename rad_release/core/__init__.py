"""Core domain types and logic."""

from .config import ReleaseConfig
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ReleaseConfig",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
