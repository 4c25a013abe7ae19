"""
AWSETUP Shared Utility Functions.

This module contains the exception types and small utilities used across
multiple CLI commands and modules to avoid circular imports.
"""

import logging
import os
import shutil
from typing import Optional

from rich.logging import RichHandler


class AwsetupError(Exception):
    """Base class for errors raised by awsetup."""
    pass


class AwsCliNotFoundError(AwsetupError):
    """Raised when the AWS CLI executable cannot be found in system PATH."""
    pass


class AwsCliError(AwsetupError):
    """Raised when an AWS CLI invocation exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        self.stderr = (stderr or "").strip()
        message = f"'{' '.join(command)}' exited with status {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


class CredentialParseError(AwsetupError):
    """Raised when AWS CLI output does not contain the expected credential fields."""
    pass


class ConfigError(AwsetupError):
    """Raised when the awsetup configuration file cannot be read or updated."""
    pass


def get_app_path(exe_name: str = 'aws') -> str:
    """Find the full path to an executable in a cross-platform way.

    On Windows, prefers .cmd and .exe versions when multiple variants exist.

    Args:
        exe_name: Name of the executable to find

    Returns:
        Full path to the executable

    Raises:
        AwsCliNotFoundError: If executable is not found in PATH
        ValueError: If executable name is invalid
    """
    if not exe_name or not exe_name.strip():
        raise ValueError(f'Invalid executable name provided: {exe_name!r}')

    exe_path = shutil.which(exe_name)
    if exe_path is None:
        raise AwsCliNotFoundError(f'{exe_name} not found in system PATH. Please ensure it is installed and in your PATH.')

    if os.name == 'nt':
        for ext in ('.cmd', '.exe'):
            if not exe_name.lower().endswith(ext):
                preferred_path = shutil.which(exe_name + ext)
                if preferred_path:
                    return preferred_path

    return exe_path


def configure_logging(verbose: bool = False) -> None:
    """Route awsetup log records through Rich, at DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("awsetup")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_time=False, show_path=verbose, markup=False))
    logger.propagate = False


def mask_secret(value: str, visible: int = 4) -> str:
    """Return value with everything but the last few characters hidden."""
    if not value:
        return value
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
