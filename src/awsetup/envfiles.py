"""Writers for the shell-sourceable credential files (.env.aws, .env.assume-role)."""

import logging
import os
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

STATIC_CREDENTIALS_HEADER = "# AWS Configuration for Terraform"
ASSUME_ROLE_HEADER = "# Temporary credentials from assume role"

# Characters that keep their special meaning inside double quotes
_SHELL_SPECIAL = ('\\', '"', '$', '`')


def shell_quote(value: str) -> str:
    """Quote a value for a POSIX shell double-quoted assignment."""
    for ch in _SHELL_SPECIAL:
        value = value.replace(ch, '\\' + ch)
    return f'"{value}"'


def render_env_file(header: str, variables: Mapping[str, str]) -> str:
    """Render a comment header followed by one export line per variable."""
    lines = [header]
    lines.extend(f"export {name}={shell_quote(value)}" for name, value in variables.items())
    return "\n".join(lines) + "\n"


def write_env_file(path: Path, header: str, variables: Mapping[str, str]) -> Path:
    """
    Write an env file readable only by its owner, replacing any existing file.

    Args:
        path: File to write
        header: Comment line placed at the top
        variables: Variable names and values to export

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = render_env_file(header, variables)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as f:
        # O_CREAT only applies the mode to new files
        if hasattr(os, "fchmod"):
            os.fchmod(f.fileno(), 0o600)
        else:
            os.chmod(path, 0o600)
        f.write(content)

    logger.debug("Wrote %s (%d variables)", path, len(variables))
    return path
