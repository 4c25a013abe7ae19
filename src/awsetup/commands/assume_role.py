"""
AWSETUP Assume Role Command.

Exchanges the caller's current credentials for temporary credentials of
another IAM role through 'aws sts assume-role' and saves them to a
shell-sourceable file.
"""

from pathlib import Path
from typing import Optional

import typer

from awsetup import aws_utils as aws
from awsetup.commands.common import AWS_CLI_FAILURES, check_identity, may_overwrite, report_cli_failure
from awsetup.envfiles import ASSUME_ROLE_HEADER, write_env_file
from awsetup.helpers import CredentialParseError
from awsetup.models import SetupContext
from awsetup.prompts import PromptRequest, is_role_arn, is_session_name
from awsetup.ui import console, render_header, render_status


def run_assume_role(setup: SetupContext) -> Optional[Path]:
    """
    Assume a role and write its temporary credentials.

    Returns:
        Path of the written file, or None if the role was not assumed
    """
    render_header("Method 5: Assume Role Configuration")

    role_arn = setup.prompter.ask(PromptRequest(
        name="role_arn",
        message="Enter Role ARN to assume:",
        validate=is_role_arn,
        invalid_message="Expected arn:aws:iam::<account-id>:role/<name>",
    ))
    session_name = setup.prompter.ask(PromptRequest(
        name="session_name",
        message="Enter session name:",
        validate=is_session_name,
        invalid_message="Session names are 2-64 characters of letters, digits and +=,.@_-",
    ))
    if not role_arn or not session_name:
        return None

    path = setup.output_path(setup.config.output.assume_role_file)
    if not may_overwrite(setup, path):
        return None

    console.print("Assuming role...")
    try:
        credentials = aws.assume_role(setup.aws, role_arn, session_name)
    except AWS_CLI_FAILURES + (CredentialParseError,) as e:
        report_cli_failure("Failed to assume role", e)
        return None

    region = setup.config.aws.assume_role_region
    write_env_file(path, ASSUME_ROLE_HEADER, credentials.as_environment(region))

    render_status(f"Temporary credentials saved to {path.name}", "success")
    render_status("These credentials are temporary and will expire", "warning")

    check_identity("Assumed role", credentials=credentials, region=region)
    return path


def assume_role(ctx: typer.Context):
    """Assume an IAM role and save its temporary credentials."""
    run_assume_role(ctx.obj)
