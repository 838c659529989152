"""Random category/entry selection.

The draw (``roll_die``) is kept apart from the spinner so it stays a plain
function of the upper bound and the random source.
"""

import random
import time
from typing import Optional, Protocol

from rich.console import Console

from .exceptions import EmptyTaxonomyError
from .models import Taxonomy

_RNG = random.Random()


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def roll_die(n: int, rng: Optional[RandomSource] = None) -> int:
    """Roll a dn, returning an index in [0, n).

    e.g. roll_die(6) rolls a d6 (minus one).
    """
    _require_candidates(n)
    return (rng or _RNG).randrange(n)


def _require_candidates(n: int) -> None:
    if n <= 0:
        raise EmptyTaxonomyError("empty taxonomy, nothing to choose from")


def roll(
    n: int,
    message: str,
    *,
    console: Console,
    hide_spinner: bool = False,
    delay: float = 0.5,
    rng: Optional[RandomSource] = None,
) -> int:
    """Roll a dn, showing a short spinner first unless hidden."""
    _require_candidates(n)
    if not hide_spinner:
        with console.status(f"{message} (d{n})", spinner="dots"):
            time.sleep(delay)  # fake delay, just for fun
    return roll_die(n, rng)


def choose(
    taxonomy: Taxonomy,
    *,
    console: Console,
    fast: bool = False,
    delay: float = 0.5,
    rng: Optional[RandomSource] = None,
) -> tuple[str, str]:
    """Pick a category, then an entry within it.

    Returns:
        (category name, styled entry title)
    """
    categories = list(taxonomy)
    category = categories[
        roll(len(categories), "Deciding a category...", console=console,
             hide_spinner=fast, delay=delay, rng=rng)
    ]

    entries = taxonomy[category]
    if not entries:
        raise EmptyTaxonomyError(f"category {category!r} has no entries")
    entry = entries[
        roll(len(entries), "Deciding a project...", console=console,
             hide_spinner=fast, delay=delay, rng=rng)
    ]
    return category, entry
