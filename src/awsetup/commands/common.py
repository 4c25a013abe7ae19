"""Steps shared by several setup commands."""

from pathlib import Path
from typing import Optional

from awsetup import aws_utils as aws
from awsetup.commands.check import print_install_instructions
from awsetup.helpers import AwsCliError, AwsCliNotFoundError
from awsetup.models import CallerIdentity, SetupContext, StaticCredentials
from awsetup.ui import console, render_status

AWS_CLI_FAILURES = (AwsCliError, AwsCliNotFoundError)


def check_identity(
    label: str,
    profile: Optional[str] = None,
    credentials: Optional[StaticCredentials] = None,
    region: Optional[str] = None,
) -> Optional[CallerIdentity]:
    """Run the identity check once and report '<label> test passed/failed'."""
    identity = aws.verify_identity(profile=profile, credentials=credentials, region=region)
    if identity is None:
        render_status(f"{label} test failed", "error")
    else:
        render_status(f"{label} test passed", "success")
        console.print(f"  Account: {identity.account}")
        console.print(f"  ARN:     {identity.arn}")
    return identity


def may_overwrite(setup: SetupContext, path: Path) -> bool:
    """Ask before replacing an existing credential file, unless configured not to."""
    if not path.exists() or not setup.config.output.confirm_overwrite:
        return True
    render_status(f"{path.name} already exists and may contain credentials", "warning")
    if setup.prompter.confirm(f"Overwrite {path}?", default=False):
        return True
    render_status(f"Keeping existing {path.name}", "info")
    return False


def report_cli_failure(message: str, error: Exception, level: str = "error") -> None:
    """Report a failed AWS CLI call; a missing executable also gets install guidance."""
    render_status(message, level, footer=str(error))
    if isinstance(error, AwsCliNotFoundError):
        print_install_instructions()