"""Static Terraform provider examples written by the 'terraform' command."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PROVIDER_DEFAULT = """\
# Default provider - uses AWS CLI configuration
provider "aws" {
  region = var.aws_region
}
"""

PROVIDER_PROFILE = """\
# Profile-based provider
provider "aws" {
  profile = var.aws_profile
  region  = var.aws_region
}
"""

PROVIDER_ENV = """\
# Environment variables provider
provider "aws" {
  access_key = var.aws_access_key
  secret_key = var.aws_secret_key
  region     = var.aws_region
}
"""

PROVIDER_MULTIPLE = """\
# Multiple provider configuration
provider "aws" {
  alias  = "us-east-1"
  region = "us-east-1"
}

provider "aws" {
  alias   = "production"
  profile = "production"
  region  = "us-west-2"
}

provider "aws" {
  alias   = "staging"
  profile = "staging"
  region  = "us-west-1"
}
"""

PROVIDER_TEMPLATES = {
    "terraform-provider-default.tf": PROVIDER_DEFAULT,
    "terraform-provider-profile.tf": PROVIDER_PROFILE,
    "terraform-provider-env.tf": PROVIDER_ENV,
    "terraform-provider-multiple.tf": PROVIDER_MULTIPLE,
}


def write_provider_examples(output_dir: Path) -> list[Path]:
    """Write every provider example into output_dir, overwriting existing files."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, content in PROVIDER_TEMPLATES.items():
        path = output_dir / filename
        # newline="" keeps the files byte-identical on Windows too
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.debug("Wrote %s", path)
        written.append(path)
    return written
