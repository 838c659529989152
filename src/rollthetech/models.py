"""Markdown syntax tree nodes consumed by the taxonomy extractor.

Only the node kinds the extractor reads get their own type. Everything
else a parser produces becomes an ``Unknown`` node carrying its kind name,
so a different markdown parser can be plugged in by emitting these types.
"""

from dataclasses import dataclass, field


@dataclass
class Node:
    """Base node with ordered children."""

    children: list["Node"] = field(default_factory=list)


@dataclass
class Root(Node):
    pass


@dataclass
class Heading(Node):
    depth: int = 1


@dataclass
class List(Node):
    ordered: bool = False


@dataclass
class ListItem(Node):
    pass


@dataclass
class Paragraph(Node):
    pass


@dataclass
class Link(Node):
    url: str = ""


@dataclass
class Text(Node):
    value: str = ""


@dataclass
class Emphasis(Node):
    pass


@dataclass
class Strong(Node):
    pass


@dataclass
class InlineCode(Node):
    value: str = ""


@dataclass
class Unknown(Node):
    kind: str = ""


# category name -> styled entry titles
Taxonomy = dict[str, list[str]]
