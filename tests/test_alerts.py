"""Tests for terminal alerts."""

from rich.console import Console

from asleep_core.alerts import DEFAULT_DISMISS_ACTION, show_alert


def render(title, message, actions=None) -> str:
    console = Console(record=True, width=80)
    show_alert(title, message, actions, console=console)
    return console.export_text()


def test_default_dismiss_action():
    text = render("Error Querying Sleep Data", "Query failed")
    assert "Error Querying Sleep Data" in text
    assert "Query failed" in text
    assert f"[ {DEFAULT_DISMISS_ACTION} ]" in text


def test_custom_actions():
    text = render("Requesting Authorization", "Requesting authorization denied", ["Retry", "Cancel"])
    assert "[ Retry ]" in text
    assert "[ Cancel ]" in text
    assert DEFAULT_DISMISS_ACTION not in text


def test_no_title():
    text = render(None, "No sleep records available")
    assert "No sleep records available" in text
