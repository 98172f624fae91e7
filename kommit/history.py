"""Reading recent commits from git history."""

from typing import Optional

from kommit.git import GitClient
from kommit.models import CommitRecord
from kommit.parser import parse_subjects


def get_recent_commits(limit: int, git: Optional[GitClient] = None) -> list[CommitRecord]:
    """Get the most recent commits whose subjects parse.

    Subjects that do not have the `head: message` shape are skipped and
    do not count towards the limit.

    Args:
        limit: Maximum number of records to return.
        git: Git capability to read from. Defaults to the real git.

    Returns:
        Up to `limit` records, most recent first. Fewer if the history is short.

    Raises:
        HistoryUnavailableError: If git log cannot be read.
    """
    if git is None:
        git = GitClient()

    records = parse_subjects(git.list_subjects())
    return records[:max(limit, 0)]
