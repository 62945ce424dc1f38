"""Modal-style alerts rendered to the terminal."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

DEFAULT_DISMISS_ACTION = "Okay"


def build_alert(title: str | None, message: str | None, actions: list[str] | None = None) -> Panel:
    """
    Build an alert panel.

    A single dismissal action is shown when no actions are given.
    """
    actions = actions or [DEFAULT_DISMISS_ACTION]

    body = Text()
    if message:
        body.append(message)
        body.append("\n\n")
    body.append("  ".join(f"[ {action} ]" for action in actions), style="bold cyan")

    return Panel(
        body,
        title=f"[bold]{title}[/bold]" if title else None,
        border_style="red" if title and "error" in title.lower() else "yellow",
        expand=False,
    )


def show_alert(
    title: str | None,
    message: str | None,
    actions: list[str] | None = None,
    console: Console | None = None,
) -> Panel:
    """Print an alert and return the rendered panel."""
    panel = build_alert(title, message, actions)
    (console or Console()).print(panel)
    return panel
