"""CLI command for printing shell completion scripts.

Completion never falls back to file names: the bash script is registered
without `-o default`, and the zsh class below answers with nothing instead
of `_files` when there are no candidates.
"""

from enum import Enum

import typer
from click.shell_completion import add_completion_class
from typer._completion_classes import ZshComplete as TyperZshComplete
from typer.completion import completion_init, get_completion_script

from kommit.constants import COMPLETE_VAR, PROG_NAME


class Shell(str, Enum):
    """Shells a completion script can be generated for."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POWERSHELL = "powershell"


class ZshComplete(TyperZshComplete):
    """typer's zsh completion, minus the `_files` fallback."""

    def complete(self) -> str:
        args, incomplete = self.get_completion_args()
        completions = self.get_completions(args, incomplete)
        if not completions:
            return ""
        candidates = "\n".join(self.format_completion(item) for item in completions)
        return f"_arguments '*: :(({candidates}))'"


def register_completion_classes() -> None:
    """Register typer's shell completion classes with click, then our zsh class."""
    completion_init()
    add_completion_class(ZshComplete, Shell.ZSH.value)


register_completion_classes()

completion_app = typer.Typer(
    name="completion",
    help="Generate a shell completion script",
    add_completion=False,
)


def _without_file_fallback(script: str, shell: Shell) -> str:
    if shell is Shell.BASH:
        return script.replace("complete -o default -F", "complete -F")
    return script


@completion_app.command("completion")
def completion_command(
    shell: Shell = typer.Argument(
        ...,
        help="Shell to generate the script for",
    ),
) -> None:
    """Print a shell completion script to stdout.

    To load completions in the current bash session:

        source <(kommit completion bash)
    """
    script = get_completion_script(
        prog_name=PROG_NAME,
        complete_var=COMPLETE_VAR,
        shell=shell.value,
    )
    typer.echo(_without_file_fallback(script, shell))
