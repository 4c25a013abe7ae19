"""Reusable Rich components for the AWSETUP CLI."""

from typing import Iterable, Optional

from rich import box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from .theme import style


console = Console()


def render_banner(
    title: str,
    subtitle: Optional[str] = None,
    bullets: Optional[Iterable[str]] = None,
) -> Panel:
    """Render a welcome banner with optional bullet highlights."""
    pieces: list[Text] = [Text(title, style=f"bold {style('accent')}")]

    if subtitle:
        pieces.append(Text(subtitle, style=style("text_primary")))

    if bullets:
        for bullet in bullets:
            pieces.append(Text(f"• {bullet}", style=style("text_muted")))

    panel = Panel(
        Align.left(Group(*pieces)),
        box=box.ROUNDED,
        border_style=style("accent"),
        padding=(1, 2),
        width=min(console.size.width, 78),
    )
    console.print(panel)
    return panel


def render_header(title: str) -> Rule:
    """Render a section header, e.g. before each setup method."""
    rule = Rule(Text(title, style=f"bold {style('accent')}"), style=style("border"), align="left")
    console.print()
    console.print(rule)
    return rule


def render_card(
    title: Optional[str],
    body: str,
    footer: Optional[str] = None,
    border_style: Optional[str] = None,
) -> Panel:
    """Render a generic informational card."""
    text_parts = [Text(line, style=style("text_primary")) for line in body.splitlines()]
    group = Group(*text_parts) if text_parts else Text("", style=style("text_primary"))

    panel = Panel(
        Align.left(group),
        title=Text(title, style=f"bold {style('accent')}") if title else None,
        title_align="left",
        border_style=border_style or style("border"),
        box=box.ROUNDED,
        padding=(0, 1),
    )
    console.print(panel)

    if footer:
        console.print(Text(footer, style=style("text_muted")))

    return panel


def render_status(
    message: str,
    level: str = "info",
    footer: Optional[str] = None,
) -> Text:
    """Render a status line with semantic coloring."""
    icons = {
        "success": "✔",
        "warning": "!",
        "error": "✖",
        "info": "•",
    }
    styles = {
        "success": style("success"),
        "warning": style("warning"),
        "error": style("error"),
        "info": style("accent_alt"),
    }

    icon = icons.get(level, icons["info"])
    text_style = styles.get(level, styles["info"])
    status_text = Text(f"{icon} {message}", style=text_style)
    console.print(status_text)

    if footer:
        console.print(Text(footer, style=style("text_muted")))

    return status_text
