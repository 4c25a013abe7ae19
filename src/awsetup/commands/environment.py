"""
AWSETUP Environment Variables Command.

Collects a static access key pair and writes it to a shell-sourceable file
that exports the variables Terraform's AWS provider reads.
"""

from pathlib import Path
from typing import Optional

import typer

from awsetup.commands.common import check_identity, may_overwrite
from awsetup.envfiles import STATIC_CREDENTIALS_HEADER, write_env_file
from awsetup.models import SetupContext, StaticCredentials
from awsetup.prompts import PromptRequest, is_access_key_id, is_region
from awsetup.ui import render_header, render_status


def run_environment_setup(setup: SetupContext) -> Optional[Path]:
    """
    Write access keys to the env file and verify them.

    The keys are checked by passing them to the identity check directly;
    the process environment is left untouched.

    Returns:
        Path of the written file, or None if nothing was written
    """
    render_header("Method 3: Environment Variables")
    default_region = setup.config.aws.default_region
    path = setup.output_path(setup.config.output.env_file)

    if not may_overwrite(setup, path):
        return None

    access_key = setup.prompter.ask(PromptRequest(
        name="access_key_id",
        message="Enter AWS Access Key ID:",
        validate=is_access_key_id,
        invalid_message="Access key IDs are 16 or more uppercase letters and digits",
    ))
    secret_key = setup.prompter.ask(PromptRequest(
        name="secret_access_key",
        message="Enter AWS Secret Access Key:",
        secret=True,
    ))
    region = setup.prompter.ask(PromptRequest(
        name="region",
        message=f"Enter AWS Region (default: {default_region}):",
        validate=is_region,
        invalid_message="Regions look like us-west-2",
    )) or default_region

    if not access_key or not secret_key:
        render_status("Access key ID and secret access key are required, skipping", "warning")
        return None

    credentials = StaticCredentials(access_key, secret_key)
    write_env_file(path, STATIC_CREDENTIALS_HEADER, credentials.as_environment(region))

    render_status(f"Environment file created: {path.name}", "success")
    render_status(f"To use: source {path.name}", "warning")

    check_identity("Environment variables", credentials=credentials, region=region)
    return path


def env(ctx: typer.Context):
    """Write AWS access keys to a sourceable env file."""
    run_environment_setup(ctx.obj)
