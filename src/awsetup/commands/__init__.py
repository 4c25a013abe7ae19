"""
AWSETUP Commands Package.

This package contains all AWSETUP CLI commands organized as separate modules
for better maintainability and modularity.
"""

from .assume_role import assume_role
from .check import check
from .config import config_app
from .configure import configure, profile, sso
from .environment import env
from .menu import run_menu
from .show import show
from .terraform import terraform

__all__ = [
    "assume_role",
    "check",
    "config_app",
    "configure",
    "env",
    "profile",
    "run_menu",
    "show",
    "sso",
    "terraform",
]
