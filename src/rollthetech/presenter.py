"""Render markup templates to the terminal."""

from rich.console import Console
from rich.text import Text


def render(template: str) -> Text:
    """Turn a markup template into styled text."""
    return Text.from_markup(template, emoji=False)


def present(console: Console, template: str = "") -> None:
    """Print a markup template as one line (a blank line if empty)."""
    console.print(render(template), soft_wrap=True)
