# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
AWSETUP - AWS CLI credential setup helper for Terraform.

A Python CLI tool that walks through the common ways of giving the AWS CLI
(and therefore Terraform) credentials: static keys, named profiles, SSO and
STS AssumeRole. It can also write example Terraform provider blocks.
"""

__version__ = "0.1.0"


def main() -> None:
    from awsetup.cli import app

    app()
