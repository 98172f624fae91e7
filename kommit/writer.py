"""Creating commits from commit records."""

from typing import Optional

from kommit.git import GitClient
from kommit.models import CommitRecord


def render_subject(record: CommitRecord) -> str:
    """Render a record as a single-line conventional commit subject."""
    return record.render()


def create_commit(record: CommitRecord, git: Optional[GitClient] = None) -> str:
    """Commit staged changes with the record's subject as the message.

    Args:
        record: The commit to create.
        git: Git capability to commit with. Defaults to the real git.

    Returns:
        The subject line that was committed.

    Raises:
        CommitFailedError: If git fails (e.g., nothing staged, hook rejection).
    """
    if git is None:
        git = GitClient()

    subject = render_subject(record)
    git.commit(subject)
    return subject
