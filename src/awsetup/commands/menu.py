"""
AWSETUP Interactive Menu.

The numbered menu shown when awsetup runs without a sub-command. Each entry
runs one setup handler; the loop repeats until the user picks Exit.
"""

from typing import Callable

from awsetup.commands.assume_role import run_assume_role
from awsetup.commands.check import run_check
from awsetup.commands.configure import run_basic_configure, run_profile_configure, run_sso_setup
from awsetup.commands.environment import run_environment_setup
from awsetup.commands.show import run_show_config
from awsetup.commands.terraform import run_terraform_examples
from awsetup.models import SetupContext
from awsetup.prompts import PromptRequest
from awsetup.ui import console, render_banner, render_header, render_status

MENU_TITLE = "AWS CLI Configuration for Terraform"
BANNER_BULLETS = (
    "Static keys, named profiles, SSO or AssumeRole",
    "Example Terraform provider files",
)

MENU_OPTIONS: dict[str, tuple[str, Callable[[SetupContext], object]]] = {
    "1": ("Check AWS CLI installation", run_check),
    "2": ("Basic AWS configure", run_basic_configure),
    "3": ("Profile-based configuration", run_profile_configure),
    "4": ("Environment variables setup", run_environment_setup),
    "5": ("AWS SSO setup", run_sso_setup),
    "6": ("Assume role setup", run_assume_role),
    "7": ("Show current configuration", run_show_config),
    "8": ("Create Terraform provider examples", run_terraform_examples),
}
EXIT_CHOICE = "9"


def render_menu() -> None:
    render_header(MENU_TITLE)
    for key, (label, _) in MENU_OPTIONS.items():
        console.print(f"{key}. {label}")
    console.print(f"{EXIT_CHOICE}. Exit")


def run_menu(setup: SetupContext) -> None:
    """
    Show the menu and dispatch choices until the user exits.

    Invalid choices are reported and the menu is shown again. A handler
    that raises typer.Exit (the AWS CLI check) ends the loop with its status.
    """
    choice_request = PromptRequest(name="choice", message=f"Choose an option (1-{EXIT_CHOICE}):")
    render_banner("awsetup", subtitle=MENU_TITLE, bullets=BANNER_BULLETS)
    try:
        while True:
            render_menu()
            choice = setup.prompter.ask(choice_request)

            if choice == EXIT_CHOICE:
                break

            option = MENU_OPTIONS.get(choice)
            if option is None:
                render_status("Invalid option", "error")
            else:
                _, handler = option
                try:
                    handler(setup)
                except OSError as e:
                    render_status(f"Could not write output: {e}", "error")

            console.print()
            setup.prompter.pause("Press Enter to continue...")
    except (KeyboardInterrupt, EOFError):
        console.print()

    console.print("Goodbye!")
