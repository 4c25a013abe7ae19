"""Color palette shared by the Rich output and the InquirerPy prompts."""

from InquirerPy import get_style

THEME = {
    "accent": "#4aa3df",
    "accent_alt": "#8fb8de",
    "text_primary": "#e6e6e6",
    "text_muted": "#8a8a8a",
    "border": "#5c5c5c",
    "success": "#3fb950",
    "warning": "#d29922",
    "error": "#f85149",
}


def style(name: str) -> str:
    """Return the color for a semantic style name."""
    return THEME.get(name, THEME["text_primary"])


def prompt_toolkit_color(name: str) -> str:
    return style(name)


def inquirer_style():
    """Build the InquirerPy style used by every prompt."""
    return get_style(
        {
            "questionmark": f"{prompt_toolkit_color('accent')} bold",
            "answermark": prompt_toolkit_color("accent"),
            "answer": prompt_toolkit_color("accent_alt"),
            "input": prompt_toolkit_color("text_primary"),
            "question": "bold",
            "instruction": prompt_toolkit_color("text_muted"),
            "validator": f"{prompt_toolkit_color('error')} bold",
        },
        style_override=False,
    )
