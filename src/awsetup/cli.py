# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
AWSETUP Command Line Interface.

This module provides the main CLI interface for AWSETUP, a tool that walks
through configuring AWS CLI credentials for Terraform and writes example
Terraform provider files.

Running 'awsetup' without a command opens the interactive menu.

Main Commands:
    check: Check that the AWS CLI is installed
    configure: Configure the default profile ('aws configure')
    profile: Configure a named profile
    env: Write access keys to a sourceable .env.aws file
    sso: Configure an SSO profile ('aws configure sso')
    assume-role: Save temporary credentials of an IAM role
    show: Show the current AWS configuration
    terraform: Write example Terraform provider files
    config: Settings management (show, set, reset, path)
"""

from pathlib import Path
from typing import Optional

import typer

from awsetup import __version__
from awsetup.aws_utils import AwsCli
from awsetup.commands import (
    assume_role,
    check,
    config_app,
    configure,
    env,
    profile,
    run_menu,
    show,
    sso,
    terraform,
)
from awsetup.config import get_config_manager
from awsetup.helpers import ConfigError, configure_logging
from awsetup.models import SetupContext
from awsetup.prompts import InquirerPrompter


app = typer.Typer(help="Configure AWS CLI credentials for Terraform.")


def _version_callback(value: bool):
    if value:
        typer.echo(f"awsetup {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for generated files (default: from config)"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite credential files without asking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Configure AWS CLI credentials for Terraform."""
    configure_logging(verbose)

    if ctx.invoked_subcommand == "config":
        return

    try:
        config = get_config_manager().load()
    except ConfigError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    if force:
        config.output.confirm_overwrite = False

    ctx.obj = SetupContext(
        config=config,
        prompter=InquirerPrompter(),
        aws=AwsCli(config.cli.aws_cli_name),
        output_dir=output_dir or Path(config.output.directory),
    )

    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


# Register commands from modules
app.command()(check)
app.command()(configure)
app.command()(profile)
app.command()(env)
app.command()(sso)
app.command(name="assume-role")(assume_role)
app.command()(show)
app.command()(terraform)
app.add_typer(config_app, name="config")


if __name__ == "__main__":
    app()
