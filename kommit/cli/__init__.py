"""CLI entry point for kommit.

`kommit <type> <scope> <message...>` creates a commit; `kommit completion`
and `kommit config` are looked up in the command table by dispatch().
"""

from kommit.cli.commit import (
    commit_app,
    commit_command,
    complete_message,
    complete_scope,
    complete_type,
)
from kommit.cli.completion import Shell, completion_app, completion_command
from kommit.cli.config import config_app
from kommit.cli.app import build_command_table, dispatch, main


__all__ = [
    "commit_app",
    "commit_command",
    "complete_type",
    "complete_scope",
    "complete_message",
    "completion_app",
    "completion_command",
    "Shell",
    "config_app",
    "build_command_table",
    "dispatch",
    "main",
]
