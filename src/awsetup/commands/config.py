"""
AWSETUP Configuration Commands.

Sub-commands for inspecting and changing awsetup's own settings file.
"""

import toml
import typer

from awsetup.config import get_config_manager
from awsetup.helpers import ConfigError
from awsetup.ui import console, render_card, render_status

config_app = typer.Typer(help="Manage awsetup settings.")


@config_app.command("show")
def show_config():
    """Show the effective settings, including environment overrides."""
    config_manager = get_config_manager()
    try:
        config = config_manager.load()
    except ConfigError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)
    render_card(str(config_manager.config_file), toml.dumps(config.model_dump()).rstrip())


@config_app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Setting name, e.g. aws.default_region"),
    value: str = typer.Argument(..., help="New value"),
):
    """Change one setting and save it."""
    try:
        get_config_manager().set_value(key, value)
    except ConfigError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)
    render_status(f"{key} = {value}", "success")


@config_app.command("reset")
def reset_config(
    confirm: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
):
    """Restore the default settings."""
    if not confirm and not typer.confirm("Reset awsetup settings to defaults?"):
        console.print("Reset cancelled.")
        raise typer.Exit(0)
    try:
        get_config_manager().reset()
    except ConfigError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)
    render_status("Settings reset to defaults", "success")


@config_app.command("path")
def config_path():
    """Print the location of the settings file."""
    typer.echo(str(get_config_manager().config_file))
