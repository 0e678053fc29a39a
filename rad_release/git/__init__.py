"""Git operations module.

Usage:
    from rad_release.git import Repository

    repo = Repository(Path.cwd())
    match repo.exact_tag("v*"):
        case Ok(tag):
            print(f"Release tag: {tag}")
"""

from rad_release.git.repository import (
    GitError,
    Repository,
)

__all__ = [
    "GitError",
    "Repository",
]
