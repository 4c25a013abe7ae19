"""
AWSETUP Profile Configuration Commands.

Drives the AWS CLI's own interactive configuration: 'aws configure' for the
default or a named profile, and 'aws configure sso'. The AWS CLI owns the
credentials and config files; these commands only collect the profile name
and verify the result.
"""

import logging

import typer

from awsetup import aws_utils as aws
from awsetup.commands.common import AWS_CLI_FAILURES, check_identity, report_cli_failure
from awsetup.models import SetupContext
from awsetup.prompts import PromptRequest, is_profile_name
from awsetup.ui import console, render_header, render_status

logger = logging.getLogger(__name__)

PROFILE_NAME_INVALID = "Profile names cannot contain spaces or brackets"


def run_basic_configure(setup: SetupContext) -> bool:
    """Configure the default profile with 'aws configure'.

    Returns:
        True if the configuration was written and verified
    """
    render_header("Method 1: Basic AWS Configure")
    console.print("This will configure the default AWS profile")

    if not setup.prompter.confirm("Do you want to configure AWS CLI now?", default=False):
        console.print("Skipping basic configuration")
        return False

    try:
        aws.configure(setup.aws)
    except AWS_CLI_FAILURES as e:
        report_cli_failure("AWS CLI configuration failed", e)
        return False

    render_status("AWS CLI configured successfully", "success")
    return check_identity("Configuration", profile="default") is not None


def show_profiles(setup: SetupContext, empty_message: str = "No profiles configured yet") -> list[str]:
    """Print the configured profile names and return them."""
    try:
        profiles = aws.list_profiles(setup.aws)
    except AWS_CLI_FAILURES as e:
        logger.debug("Listing profiles failed: %s", e)
        profiles = []

    if not profiles:
        console.print(empty_message)
    for name in profiles:
        console.print(f"  {name}", markup=False)
    return profiles


def run_profile_configure(setup: SetupContext) -> bool:
    """Configure a named profile with 'aws configure --profile NAME'.

    Returns:
        True if the profile was written and verified
    """
    render_header("Method 2: Profile-based Configuration")
    console.print("Available profiles:")
    show_profiles(setup)

    profile = setup.prompter.ask(PromptRequest(
        name="profile",
        message="Enter profile name to configure (or press Enter to skip):",
        validate=is_profile_name,
        invalid_message=PROFILE_NAME_INVALID,
    ))
    if not profile:
        return False

    try:
        aws.configure(setup.aws, profile=profile)
    except AWS_CLI_FAILURES as e:
        report_cli_failure(f"Profile '{profile}' configuration failed", e)
        return False

    render_status(f"Profile '{profile}' configured", "success")
    return check_identity("Profile", profile=profile) is not None


def run_sso_setup(setup: SetupContext) -> bool:
    """Create an SSO profile with 'aws configure sso'.

    Returns:
        True if the profile was written and verified
    """
    render_header("Method 4: AWS SSO Configuration")

    if not setup.prompter.confirm("Do you want to configure AWS SSO?", default=False):
        return False

    profile = setup.prompter.ask(PromptRequest(
        name="sso_profile",
        message="Enter SSO profile name:",
        validate=is_profile_name,
        invalid_message=PROFILE_NAME_INVALID,
    ))
    if not profile:
        return False

    try:
        aws.configure_sso(setup.aws, profile)
    except AWS_CLI_FAILURES as e:
        report_cli_failure(f"SSO profile '{profile}' configuration failed", e)
        return False

    render_status(f"SSO profile '{profile}' configured", "success")
    render_status(f"To login: aws sso login --profile {profile}", "warning")
    return check_identity("SSO profile", profile=profile) is not None


def configure(ctx: typer.Context):
    """Configure the default AWS profile."""
    run_basic_configure(ctx.obj)


def profile(ctx: typer.Context):
    """Configure a named AWS profile."""
    run_profile_configure(ctx.obj)


def sso(ctx: typer.Context):
    """Configure an AWS SSO profile."""
    run_sso_setup(ctx.obj)
