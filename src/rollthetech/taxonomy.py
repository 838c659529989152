"""Extract the category -> entries taxonomy from the document's syntax tree.

The README is laid out as::

    #### Build your own `Category`

    * [**Language**: _Project title_](https://...)
    * ...

    ## Contribute

The scan walks the root's children once, tracking which category (if any)
list items currently belong to. Content from the ``Contribute`` heading
onward is not part of the catalogue.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .exceptions import ParseError
from .formatter import format_description, format_lead
from .models import (
    Emphasis,
    Heading,
    InlineCode,
    Link,
    List,
    ListItem,
    Node,
    Root,
    Strong,
    Taxonomy,
    Text,
)

BOUNDARY_PREFIX = "Contribute"
CATEGORY_PREFIX = "Build"


@dataclass(frozen=True)
class NoCategory:
    """No qualifying heading seen yet; lists are skipped."""


@dataclass(frozen=True)
class InCategory:
    """List items are appended to ``name``."""

    name: str


ScanState = Union[NoCategory, InCategory]


def extract_taxonomy(root: Root) -> Taxonomy:
    """Build the taxonomy from a parsed document.

    Raises:
        ParseError: the first time the tree deviates from the expected
            heading/list/link shape. No partial taxonomy is returned.
    """
    taxonomy: Taxonomy = {}
    state: ScanState = NoCategory()

    for node in _until_boundary(root.children):
        if isinstance(node, Heading) and node.depth == 4:
            state = _enter_heading(node, state, taxonomy)
        elif isinstance(node, List) and isinstance(state, InCategory) and state.name:
            taxonomy[state.name].extend(_entry_title(item) for item in node.children)

    return taxonomy


def _until_boundary(nodes: list[Node]) -> Iterator[Node]:
    for node in nodes:
        if _is_boundary(node):
            return
        yield node


def _is_boundary(node: Node) -> bool:
    if not (isinstance(node, Heading) and node.depth == 2):
        return False
    first = _first_child(node)
    return isinstance(first, Text) and first.value.startswith(BOUNDARY_PREFIX)


def _enter_heading(heading: Heading, state: ScanState, taxonomy: Taxonomy) -> ScanState:
    first = _first_child(heading)
    if not isinstance(first, Text):
        raise ParseError("expected direct text under a depth-4 heading")

    if not first.value.startswith(CATEGORY_PREFIX):
        return state

    code = heading.children[1] if len(heading.children) > 1 else None
    if not isinstance(code, InlineCode):
        raise ParseError("expected inline code in a depth-4 heading")

    taxonomy[code.value] = []
    return InCategory(code.value)


def _entry_title(item: Node) -> str:
    """Styled title for one list item: lead-in from **strong**, description from _em_."""
    link = _first_child(_first_child(item)) if isinstance(item, ListItem) else None
    if not isinstance(link, Link):
        raise ParseError("expected link for category item")

    parts = []
    for child in link.children:
        if isinstance(child, Strong):
            parts.append(format_lead(_nested_text(child, "strong")))
        elif isinstance(child, Emphasis):
            parts.append(format_description(_nested_text(child, "emphasis")))
    return "".join(parts)


def _nested_text(node: Node, kind: str) -> str:
    first = _first_child(node)
    if not isinstance(first, Text):
        raise ParseError(f"expected text inside {kind}")
    return first.value


def _first_child(node: Optional[Node]) -> Optional[Node]:
    if node is None or not node.children:
        return None
    return node.children[0]
