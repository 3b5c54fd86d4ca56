"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- InvalidRevisionError: Raised when a commit cannot be diffed against
- BranchNotFoundError: Raised when a remote branch does not exist
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class InvalidRevisionError(GitError):
    """Raised when a commit hash is invalid or not found."""

    pass


class BranchNotFoundError(GitError):
    """Raised when origin/<branch> does not exist."""

    pass
