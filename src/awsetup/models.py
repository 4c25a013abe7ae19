"""Value types passed between the awsetup commands."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Optional

if TYPE_CHECKING:
    from awsetup.aws_utils import AwsCli
    from awsetup.config import AwsetupConfig
    from awsetup.prompts import Prompter


@dataclass(frozen=True)
class StaticCredentials:
    """An access key pair, optionally with the session token of temporary credentials."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)

    def as_environment(self, region: Optional[str] = None) -> dict[str, str]:
        """Return the credentials as the AWS_* variables the CLI and Terraform read."""
        variables = {
            "AWS_ACCESS_KEY_ID": self.access_key_id,
            "AWS_SECRET_ACCESS_KEY": self.secret_access_key,
        }
        if self.session_token:
            variables["AWS_SESSION_TOKEN"] = self.session_token
        if region:
            variables["AWS_DEFAULT_REGION"] = region
        return variables


@dataclass(frozen=True)
class CallerIdentity:
    account: str
    arn: str
    user_id: str


@dataclass
class SetupContext:
    """Everything a setup handler needs, passed explicitly instead of read from globals."""

    config: "AwsetupConfig"
    prompter: "Prompter"
    aws: "AwsCli"
    output_dir: Path
    environ: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))

    def output_path(self, filename: str) -> Path:
        return self.output_dir / filename
