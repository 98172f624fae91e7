"""Git capability used by the history reader and the commit writer.

Code that needs git takes an optional GitClient so tests can hand in a
fake with the same two methods instead of a real repository.
"""

from kommit.git.exceptions import CommitFailedError, GitError, HistoryUnavailableError
from kommit.git.runner import _run_git_command, _run_git_passthrough


class GitClient:
    """Runs the git executable in the current working directory."""

    def list_subjects(self) -> list[str]:
        """List commit subjects, most recent first.

        Returns:
            One subject line per commit. Empty if git printed nothing.

        Raises:
            HistoryUnavailableError: If git cannot be run or exits non-zero
                (e.g., not inside a repository).
        """
        try:
            output = _run_git_command(["log", "--pretty=format:%s"])
        except GitError as e:
            raise HistoryUnavailableError(str(e)) from e
        if not output:
            return []
        return output.split("\n")

    def commit(self, message: str) -> None:
        """Create a commit with the given message.

        git's own output and error text go to the invoking process's streams.

        Raises:
            CommitFailedError: If git cannot be run or exits non-zero.
        """
        try:
            returncode = _run_git_passthrough(["commit", "-m", message])
        except GitError as e:
            raise CommitFailedError(str(e)) from e
        if returncode != 0:
            raise CommitFailedError(
                f"git commit exited with status {returncode}",
                returncode=returncode,
            )
