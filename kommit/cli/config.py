"""CLI commands for kommit configuration."""

import typer

from kommit.config import (
    ConfigError,
    get_config_file_path,
    initialize_default_config,
    load_config,
)

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage kommit configuration in ~/.kommit/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        config = load_config()
    except ConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    config_file = get_config_file_path()
    source = str(config_file) if config_file.exists() else "built-in defaults"

    typer.echo(f"Current kommit configuration ({source}):")
    typer.echo()
    typer.echo(f"  Scope history limit: {config.scope_history_limit}")
    typer.echo(f"  Message history limit: {config.message_history_limit}")
    typer.echo()
    typer.echo("  Types:")
    for commit_type in config.types:
        typer.echo(f"    - {commit_type}")


@config_app.command("init")
def config_init() -> None:
    """Write a config file with the default values."""
    try:
        created = initialize_default_config()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    config_file = get_config_file_path()
    if created:
        typer.echo(f"Created {config_file}")
    else:
        typer.echo(f"Configuration already exists at {config_file}", err=True)
