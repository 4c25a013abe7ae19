"""
AWSETUP Show Configuration Command.

Prints what the AWS CLI currently resolves: its configuration table, the
caller identity, the configured profiles and the AWS_* environment.
Each query is independent; a failing one is reported and the rest still run.
"""

from typing import Mapping

import typer

from awsetup import aws_utils as aws
from awsetup.commands.configure import show_profiles
from awsetup.commands.common import AWS_CLI_FAILURES, report_cli_failure
from awsetup.helpers import mask_secret
from awsetup.models import SetupContext
from awsetup.ui import console, render_header, render_status

SECRET_VARIABLES = {"AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN"}


def aws_environment(environ: Mapping[str, str]) -> dict[str, str]:
    """Return the AWS_* variables of environ, with secret values masked."""
    return {
        name: mask_secret(value) if name in SECRET_VARIABLES else value
        for name, value in sorted(environ.items())
        if name.startswith("AWS_")
    }


def run_show_config(setup: SetupContext) -> None:
    render_header("Current AWS Configuration")

    console.print("Configuration list:")
    try:
        console.print(aws.describe_configuration(setup.aws), markup=False, highlight=False)
    except AWS_CLI_FAILURES as e:
        report_cli_failure("Unable to list configuration", e, level="warning")

    console.print("\nCaller identity:")
    identity = aws.verify_identity()
    if identity is None:
        render_status("Unable to get caller identity", "error")
    else:
        console.print(f"  UserId:  {identity.user_id}", markup=False)
        console.print(f"  Account: {identity.account}", markup=False)
        console.print(f"  Arn:     {identity.arn}", markup=False)

    console.print("\nAvailable profiles:")
    show_profiles(setup, empty_message="No profiles found")

    console.print("\nEnvironment variables:")
    variables = aws_environment(setup.environ)
    if not variables:
        console.print("No AWS environment variables set")
    for name, value in variables.items():
        console.print(f"  {name}={value}", markup=False, highlight=False)


def show(ctx: typer.Context):
    """Show the current AWS CLI configuration."""
    run_show_config(ctx.obj)
