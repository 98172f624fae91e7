"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
- _run_git_passthrough: Run a git command attached to the caller's streams
"""

import subprocess

from kommit.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command, without the trailing newline.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.rstrip("\n")
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except OSError as e:
        raise GitError(f"Could not run git: {e}")


def _run_git_passthrough(args: list[str]) -> int:
    """Run a git command whose output goes straight to our stdout/stderr.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The exit status of git.

    Raises:
        GitError: If git cannot be launched.
    """
    try:
        result = subprocess.run(["git"] + args)
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except OSError as e:
        raise GitError(f"Could not run git: {e}")
    return result.returncode
