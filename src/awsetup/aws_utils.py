# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
AWS utilities for AWSETUP.

This module wraps the pieces of the AWS CLI that awsetup drives (configure,
configure sso, configure list/list-profiles, sts assume-role) and the
identity check, which goes through boto3's STS client so that credentials can
be verified without touching the process environment.

Classes:
    AwsCli: Runs the AWS CLI executable and turns failures into exceptions

Functions:
    get_cli_version: Return the AWS CLI version string
    list_profiles: List configured AWS profiles
    describe_configuration: Return the output of 'aws configure list'
    configure: Run the interactive 'aws configure'
    configure_sso: Run the interactive 'aws configure sso'
    assume_role: Obtain temporary credentials for an IAM role
    parse_credential_fields: Split 'assume-role' text output into credentials
    verify_identity: Check credentials with STS GetCallerIdentity
"""

import logging
import subprocess
from typing import Mapping, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from awsetup.helpers import (
    AwsCliError,
    AwsCliNotFoundError,
    CredentialParseError,
    get_app_path,
)
from awsetup.models import CallerIdentity, StaticCredentials

logger = logging.getLogger(__name__)

ASSUME_ROLE_QUERY = "Credentials.[AccessKeyId,SecretAccessKey,SessionToken]"
DEFAULT_STS_REGION = "us-east-1"


class AwsCli:
    """Thin runner around the AWS CLI executable."""

    def __init__(self, exe_name: str = "aws"):
        self.exe_name = exe_name

    def path(self) -> str:
        return get_app_path(self.exe_name)

    def run(
        self,
        *args: str,
        interactive: bool = False,
        env: Optional[Mapping[str, str]] = None,
    ) -> subprocess.CompletedProcess:
        """
        Run the AWS CLI with the given arguments.

        Interactive commands inherit the terminal so the AWS CLI can ask its
        own questions; other commands have their output captured as text.

        Args:
            *args: Arguments passed to the AWS CLI
            interactive: Whether the command needs the user's terminal
            env: Environment for the child process (default: inherit)

        Returns:
            The completed process

        Raises:
            AwsCliNotFoundError: If the executable cannot be found or started
            AwsCliError: If the command exits with a non-zero status
        """
        display = [self.exe_name, *args]
        command = [self.path(), *args]
        logger.debug("Running %s", " ".join(display))

        try:
            if interactive:
                result = subprocess.run(command, env=env, check=False)
            else:
                result = subprocess.run(
                    command, env=env, capture_output=True, text=True, check=False
                )
        except OSError as e:
            raise AwsCliNotFoundError(f"Could not start {self.exe_name}: {e}") from e

        if result.returncode != 0:
            stderr = None if interactive else result.stderr
            logger.debug("%s exited with status %s", " ".join(display), result.returncode)
            raise AwsCliError(display, result.returncode, stderr)
        return result


def get_cli_version(cli: AwsCli) -> str:
    """Return the version banner printed by 'aws --version'."""
    result = cli.run("--version")
    # AWS CLI v1 prints its version on stderr
    return (result.stdout or result.stderr or "").strip()


def list_profiles(cli: AwsCli) -> list[str]:
    """Return the profile names known to the AWS CLI."""
    result = cli.run("configure", "list-profiles")
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def describe_configuration(cli: AwsCli) -> str:
    """Return the table printed by 'aws configure list'."""
    result = cli.run("configure", "list")
    return result.stdout.rstrip()


def configure(cli: AwsCli, profile: Optional[str] = None) -> None:
    """Run 'aws configure', for the default profile or the named one."""
    args = ["configure"]
    if profile:
        args += ["--profile", profile]
    cli.run(*args, interactive=True)


def configure_sso(cli: AwsCli, profile: str) -> None:
    """Run the interactive 'aws configure sso' wizard for a profile."""
    cli.run("configure", "sso", "--profile", profile, interactive=True)


def parse_credential_fields(output: str) -> StaticCredentials:
    """
    Split the text output of 'sts assume-role' into credentials.

    Args:
        output: Text printed by the AWS CLI for ASSUME_ROLE_QUERY

    Returns:
        Credentials built from the access key, secret key and session token

    Raises:
        CredentialParseError: If the output does not hold exactly three fields
    """
    fields = output.split()
    if len(fields) != 3:
        raise CredentialParseError(
            f"Expected 3 credential fields from assume-role, got {len(fields)}"
        )
    if any(f == "None" for f in fields):
        raise CredentialParseError("assume-role returned an empty credential field")
    access_key, secret_key, session_token = fields
    return StaticCredentials(access_key, secret_key, session_token)


def assume_role(cli: AwsCli, role_arn: str, session_name: str) -> StaticCredentials:
    """Call STS AssumeRole through the AWS CLI and return the temporary credentials."""
    result = cli.run(
        "sts", "assume-role",
        "--role-arn", role_arn,
        "--role-session-name", session_name,
        "--query", ASSUME_ROLE_QUERY,
        "--output", "text",
    )
    return parse_credential_fields(result.stdout)


def verify_identity(
    profile: Optional[str] = None,
    credentials: Optional[StaticCredentials] = None,
    region: Optional[str] = None,
) -> Optional[CallerIdentity]:
    """
    Check which identity a set of credentials resolves to.

    With neither profile nor credentials the default credential chain is
    used, as the AWS CLI would.

    Args:
        profile: AWS profile name to use
        credentials: Explicit credentials, used instead of a profile
        region: Region for the STS client

    Returns:
        The caller identity, or None if the credentials do not work
    """
    try:
        if credentials is not None:
            session = boto3.Session(
                aws_access_key_id=credentials.access_key_id,
                aws_secret_access_key=credentials.secret_access_key,
                aws_session_token=credentials.session_token,
                region_name=region,
            )
        else:
            session = boto3.Session(profile_name=profile, region_name=region)
        # STS is reachable from any region; fall back when the profile sets none
        sts = session.client("sts", region_name=session.region_name or DEFAULT_STS_REGION)
        ident = sts.get_caller_identity()
        return CallerIdentity(
            account=ident["Account"],
            arn=ident["Arn"],
            user_id=ident["UserId"],
        )
    except ClientError as e:
        error_code = e.response["Error"]["Code"]
        logger.debug("Identity check failed (%s): %s", error_code, e)
        return None
    except BotoCoreError as e:
        logger.debug("Identity check failed: %s", e)
        return None
