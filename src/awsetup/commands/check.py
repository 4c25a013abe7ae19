"""
AWSETUP AWS CLI Check Command.

Verifies that the AWS CLI is installed before anything else is attempted.
"""

import typer

from awsetup import aws_utils as aws
from awsetup.helpers import AwsCliError, AwsCliNotFoundError
from awsetup.models import SetupContext
from awsetup.ui import console, render_header, render_status

INSTALL_INSTRUCTIONS = {
    "macOS": "brew install awscli",
    "Linux": (
        "curl 'https://awscli.amazonaws.com/awscli-exe-linux-x86_64.zip' -o 'awscliv2.zip'"
        " && unzip awscliv2.zip && sudo ./aws/install"
    ),
    "Windows": "Download from https://aws.amazon.com/cli/",
}


def print_install_instructions() -> None:
    console.print("Install AWS CLI:")
    for platform_name, instruction in INSTALL_INSTRUCTIONS.items():
        console.print(f"  {platform_name}: {instruction}", markup=False, highlight=False, soft_wrap=True)


def run_check(setup: SetupContext) -> str:
    """
    Report the installed AWS CLI version.

    Returns:
        The version string printed by the AWS CLI

    Raises:
        typer.Exit: With status 1 when the AWS CLI is missing or broken
    """
    render_header("Checking AWS CLI Installation")
    try:
        version = aws.get_cli_version(setup.aws)
    except (AwsCliNotFoundError, AwsCliError) as e:
        render_status("AWS CLI is not installed", "error", footer=str(e))
        print_install_instructions()
        raise typer.Exit(1)

    render_status(f"AWS CLI is installed: {version}", "success")
    return version


def check(ctx: typer.Context):
    """Check that the AWS CLI is installed."""
    run_check(ctx.obj)
