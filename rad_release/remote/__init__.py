"""Release server access: key lookup and ssh commands."""

from .keys import KeyResolutionError, resolve_key_path
from .ssh import SshTarget, run_remote, symlink_command

__all__ = [
    # keys
    "KeyResolutionError",
    "resolve_key_path",
    # ssh
    "SshTarget",
    "run_remote",
    "symlink_command",
]
