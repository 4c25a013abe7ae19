"""UI helper exports for the AWSETUP CLI."""

from .components import console, render_banner, render_card, render_header, render_status
from .theme import THEME, style, inquirer_style, prompt_toolkit_color

__all__ = [
    "console",
    "render_banner",
    "render_card",
    "render_header",
    "render_status",
    "THEME",
    "style",
    "inquirer_style",
    "prompt_toolkit_color",
]
