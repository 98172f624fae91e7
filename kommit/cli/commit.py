"""CLI command for creating a conventional commit.

Also holds the completion callbacks for its three positional arguments.
"""

from typing import List

import typer
from pydantic import ValidationError

from kommit import __version__
from kommit.config import load_config_or_default
from kommit.constants import PROG_NAME
from kommit.git import CommitFailedError
from kommit.models import CommitRecord
from kommit.suggestions import suggest_messages, suggest_scopes, suggest_types
from kommit.writer import create_commit, render_subject


def _matching(candidates: list[str], incomplete: str) -> list[str]:
    return [c for c in candidates if c.startswith(incomplete)]


def complete_type(incomplete: str) -> list[str]:
    """Complete the commit type."""
    config = load_config_or_default()
    return _matching(suggest_types(config.types), incomplete)


def complete_scope(incomplete: str) -> list[str]:
    """Complete the scope from scopes used in recent history."""
    config = load_config_or_default()
    return _matching(suggest_scopes(config.scope_history_limit), incomplete)


def complete_message(ctx: typer.Context, incomplete: str) -> list[str]:
    """Complete the first word of the message with recent messages.

    Nothing is offered once the message has been started.
    """
    if ctx.params.get("message"):
        return []
    config = load_config_or_default()
    return _matching(suggest_messages(config.message_history_limit), incomplete)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


def _describe_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def commit_command(
    commit_type: str = typer.Argument(
        ...,
        metavar="TYPE",
        help="Commit type (feat, fix, chore, ...)",
        autocompletion=complete_type,
    ),
    scope: str = typer.Argument(
        ...,
        metavar="SCOPE",
        help="Commit scope, or '-' for none",
        autocompletion=complete_scope,
    ),
    message: List[str] = typer.Argument(
        ...,
        metavar="MESSAGE...",
        help="Commit message; remaining words are joined with spaces",
        autocompletion=complete_message,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Print the commit subject instead of committing",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Commit staged changes with a Conventional Commits subject.

    Options go before TYPE; everything after TYPE is taken literally.

    Example: kommit -n feat auth add login endpoint
    """
    try:
        record = CommitRecord(type=commit_type, scope=scope, message=" ".join(message))
    except ValidationError as e:
        typer.echo(f"Invalid commit: {_describe_validation_error(e)}", err=True)
        raise typer.Exit(1)

    if dry_run:
        typer.echo(render_subject(record))
        return

    try:
        create_commit(record)
    except CommitFailedError as e:
        typer.echo(f"Commit failed: {e}", err=True)
        raise typer.Exit(1)


commit_app = typer.Typer(
    name=PROG_NAME,
    help="kommit: Conventional Commits from the command line",
    add_completion=False,
)
commit_app.command(
    context_settings={"allow_interspersed_args": False},
)(commit_command)
