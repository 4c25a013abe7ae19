"""
AWSETUP Terraform Examples Command.

Writes example AWS provider blocks for the common credential setups.
"""

from pathlib import Path

import typer

from awsetup.models import SetupContext
from awsetup.templates import write_provider_examples
from awsetup.ui import console, render_header, render_status


def run_terraform_examples(setup: SetupContext) -> list[Path]:
    render_header("Creating Terraform Provider Examples")
    written = write_provider_examples(setup.output_dir)
    render_status("Terraform provider examples created", "success")
    for path in written:
        console.print(f"  {path}", markup=False, highlight=False)
    return written


def terraform(ctx: typer.Context):
    """Write example Terraform AWS provider files."""
    run_terraform_examples(ctx.obj)
