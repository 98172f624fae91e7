"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- HistoryUnavailableError: Raised when the commit log cannot be read
- CommitFailedError: Raised when git refuses to create a commit
"""

from typing import Optional


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class HistoryUnavailableError(GitError):
    """Raised when git log cannot be run or exits with a non-zero status."""

    pass


class CommitFailedError(GitError):
    """Raised when git commit cannot be run or exits with a non-zero status.

    Attributes:
        returncode: Exit status of git, or None if git could not be launched.
    """

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode
