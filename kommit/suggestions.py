"""Completion candidates for commit types, scopes and messages.

Contains:
- unique: Remove duplicate strings
- suggest_types: Known commit types
- suggest_scopes: Scopes used in recent history
- suggest_messages: Messages of the latest commits

The history-based providers return an empty list when git history
cannot be read, so completion never fails.
"""

from typing import Iterable, Optional

from kommit.constants import (
    DEFAULT_MESSAGE_HISTORY_LIMIT,
    DEFAULT_SCOPE_HISTORY_LIMIT,
    DEFAULT_TYPES,
    NO_SCOPE,
)
from kommit.git import GitClient, HistoryUnavailableError
from kommit.history import get_recent_commits


def unique(items: Iterable[str]) -> list[str]:
    """Remove duplicates, keeping the first occurrence of each item.

    Callers must not depend on the order of the result.
    """
    return list(dict.fromkeys(items))


def suggest_types(types: Optional[list[str]] = None) -> list[str]:
    """Get commit type suggestions.

    Args:
        types: Configured types. Defaults to DEFAULT_TYPES.

    Returns:
        Commit types in their configured order.
    """
    if types is None:
        types = DEFAULT_TYPES
    return list(types)


def suggest_scopes(
    history_limit: int = DEFAULT_SCOPE_HISTORY_LIMIT,
    git: Optional[GitClient] = None,
) -> list[str]:
    """Get scope suggestions from recent history.

    The no-scope sentinel is always offered. Commits without a scope
    contribute the sentinel rather than an empty string.

    Args:
        history_limit: Number of parsed commits to look at.
        git: Git capability to read from. Defaults to the real git.

    Returns:
        Unique scopes, or an empty list if history is unavailable.
    """
    try:
        commits = get_recent_commits(history_limit, git=git)
    except HistoryUnavailableError:
        return []

    scopes = [NO_SCOPE]
    scopes.extend(commit.scope or NO_SCOPE for commit in commits)
    return unique(scopes)


def suggest_messages(
    history_limit: int = DEFAULT_MESSAGE_HISTORY_LIMIT,
    git: Optional[GitClient] = None,
) -> list[str]:
    """Get the messages of the latest commits, as written.

    Returns:
        Messages most recent first, or an empty list if history is unavailable.
    """
    try:
        commits = get_recent_commits(history_limit, git=git)
    except HistoryUnavailableError:
        return []
    return [commit.message for commit in commits]
