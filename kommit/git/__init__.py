"""Git access for kommit.

This package provides:
- exceptions: GitError, HistoryUnavailableError, CommitFailedError
- runner: _run_git_command, _run_git_passthrough
- client: GitClient
"""

# Exceptions
from kommit.git.exceptions import (
    CommitFailedError,
    GitError,
    HistoryUnavailableError,
)

# Runner utilities
from kommit.git.runner import (
    _run_git_command,
    _run_git_passthrough,
)

# Client
from kommit.git.client import GitClient


__all__ = [
    # Exceptions
    "GitError",
    "HistoryUnavailableError",
    "CommitFailedError",
    # Runner
    "_run_git_command",
    "_run_git_passthrough",
    # Client
    "GitClient",
]
