"""Rich console markup for taxonomy entries and categories."""

from rich.markup import escape


def format_lead(text: str) -> str:
    """Bold blue lead-in followed by the ': ' separator."""
    return f"[bold blue]{escape(text)}[/]: "


def format_description(text: str) -> str:
    """Italic white description."""
    return f"[italic white]{escape(text)}[/]"


def format_category(name: str) -> str:
    return f" → [bold italic]{escape(name)}[/]"
