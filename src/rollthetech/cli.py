"""CLI entry point for rollthetech."""

import sys

import click
from rich.console import Console

from .config import load_config
from .exceptions import ConfigError, RollTheTechError
from .fetcher import fetch_markdown
from .formatter import format_category
from .markdown import parse_markdown
from .presenter import present
from .selector import choose
from .taxonomy import extract_taxonomy


@click.command()
@click.option(
    "--fast", "-f",
    is_flag=True,
    default=False,
    help="Skip the dramatic pause and also show the chosen category",
)
@click.version_option("0.1.0", prog_name="rollthetech")
def main(fast):
    """Roll a random "build your own X" project.

    Downloads the build-your-own-x README, picks a random category and
    then a random project in it.

    Example: rollthetech --fast
    """
    try:
        config = load_config(fast=fast)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    console = Console()

    try:
        markdown = fetch_markdown(config.url)
        taxonomy = extract_taxonomy(parse_markdown(markdown))
        category, entry = choose(
            taxonomy,
            console=console,
            fast=config.fast,
            delay=config.spinner_delay,
        )
    except RollTheTechError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if config.fast:
        present(console, format_category(category))
        present(console)
    present(console, entry)
