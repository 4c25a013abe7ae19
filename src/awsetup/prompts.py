"""
Prompt requests and the prompter that answers them.

Handlers describe what they need to ask as PromptRequest values and hand
them to a Prompter. The terminal prompter uses InquirerPy; anything with the
same three methods can stand in for it.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from InquirerPy import inquirer

from awsetup.ui.theme import inquirer_style

PROFILE_NAME_RE = re.compile(r"^[^\s\[\]]+$")
ROLE_ARN_RE = re.compile(r"^arn:aws[a-z-]*:iam::\d{12}:role/[\w+=,.@/-]+$")
SESSION_NAME_RE = re.compile(r"^[\w+=,.@-]{2,64}$")
REGION_RE = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d+$")
ACCESS_KEY_ID_RE = re.compile(r"^[A-Z0-9]{16,128}$")


def optional(pattern: re.Pattern) -> Callable[[str], bool]:
    """Build a predicate accepting an empty answer or one matching pattern."""
    def _validate(value: str) -> bool:
        value = value.strip()
        return not value or bool(pattern.match(value))
    return _validate


is_profile_name = optional(PROFILE_NAME_RE)
is_role_arn = optional(ROLE_ARN_RE)
is_session_name = optional(SESSION_NAME_RE)
is_region = optional(REGION_RE)
is_access_key_id = optional(ACCESS_KEY_ID_RE)


@dataclass(frozen=True)
class PromptRequest:
    """A single question for the user.

    An empty answer always means "skip", so validate must accept "".
    """

    name: str
    message: str
    secret: bool = False
    default: str = ""
    validate: Optional[Callable[[str], bool]] = None
    invalid_message: str = "Invalid input"


class Prompter(Protocol):
    def ask(self, request: PromptRequest) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...

    def pause(self, message: str = "Press Enter to continue...") -> None: ...


class InquirerPrompter:
    """Prompter backed by InquirerPy terminal prompts."""

    def __init__(self):
        self.style = inquirer_style()

    def ask(self, request: PromptRequest) -> str:
        prompt = inquirer.secret if request.secret else inquirer.text
        kwargs = dict(
            message=request.message,
            default=request.default,
            style=self.style,
        )
        if request.validate is not None:
            kwargs["validate"] = request.validate
            kwargs["invalid_message"] = request.invalid_message
        answer = prompt(**kwargs).execute()
        return (answer or "").strip()

    def confirm(self, message: str, default: bool = False) -> bool:
        return bool(inquirer.confirm(message=message, default=default, style=self.style).execute())

    def pause(self, message: str = "Press Enter to continue...") -> None:
        inquirer.text(message=message, qmark="", amark="", style=self.style).execute()
