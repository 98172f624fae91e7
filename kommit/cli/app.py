"""Entry point: picks the app for the first argument and runs it.

The command table is built at startup and passed to dispatch() rather
than registered on a shared root command.
"""

import sys
from typing import Mapping, Sequence

import click
import typer

from kommit.constants import COMPLETE_VAR, PROG_NAME
from kommit.cli.commit import commit_app
from kommit.cli.completion import completion_app
from kommit.cli.config import config_app


def build_command_table() -> dict[str, typer.Typer]:
    """Map subcommand names to their apps."""
    return {
        "completion": completion_app,
        "config": config_app,
    }


def dispatch(
    argv: Sequence[str],
    table: Mapping[str, typer.Typer],
    default: typer.Typer,
    prog_name: str = PROG_NAME,
) -> int:
    """Run the app selected by the first argument.

    Arguments not naming a table entry go to the default app untouched.

    Args:
        argv: Command line arguments, without the program name.
        table: Subcommand name to app.
        default: App to run when no subcommand is named.
        prog_name: Program name shown in usage and help.

    Returns:
        Process exit code: 0 on success, 1 on any failure.
    """
    if argv and argv[0] in table:
        app = table[argv[0]]
        args = list(argv[1:])
        prog_name = f"{prog_name} {argv[0]}"
    else:
        app = default
        args = list(argv)

    command = typer.main.get_command(app)
    try:
        result = command.main(
            args=args,
            prog_name=prog_name,
            complete_var=COMPLETE_VAR,
            standalone_mode=False,
        )
    except click.ClickException as e:
        e.show()
        return 1
    except click.exceptions.Abort:
        typer.echo("Aborted!", err=True)
        return 1

    if isinstance(result, int):
        return 1 if result else 0
    return 0


def main() -> None:
    sys.exit(dispatch(sys.argv[1:], build_command_table(), commit_app))
