"""Parse markdown text into the syntax tree from models.py.

Uses markdown-it-py's CommonMark parser and converts its ``SyntaxTreeNode``
tree. markdown-it wraps the inline content of headings and paragraphs in an
``inline`` container; that container is flattened away so a heading's
children are its text, code and emphasis nodes directly.
"""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .models import (
    Emphasis,
    Heading,
    InlineCode,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Strong,
    Text,
    Unknown,
)


def parse_markdown(text: str) -> Root:
    """Parse a markdown document into a Root node."""
    tokens = MarkdownIt("commonmark").parse(text)
    tree = SyntaxTreeNode(tokens)
    return Root(children=_convert_children(tree))


def _convert_children(node: SyntaxTreeNode) -> list[Node]:
    children: list[Node] = []
    for child in node.children:
        if child.type == "inline":
            children.extend(_convert_children(child))
        elif child.type == "text" and not child.content:
            # delimiter leftovers next to ** and _
            continue
        else:
            children.append(_convert(child))
    return children


def _convert(node: SyntaxTreeNode) -> Node:
    kind = node.type
    children = _convert_children(node)

    if kind == "heading":
        return Heading(children=children, depth=int(node.tag[1:]))
    if kind in ("bullet_list", "ordered_list"):
        return List(children=children, ordered=kind == "ordered_list")
    if kind == "list_item":
        return ListItem(children=children)
    if kind == "paragraph":
        return Paragraph(children=children)
    if kind == "link":
        return Link(children=children, url=str(node.attrs.get("href", "")))
    if kind == "text":
        return Text(value=node.content)
    if kind == "em":
        return Emphasis(children=children)
    if kind == "strong":
        return Strong(children=children)
    if kind == "code_inline":
        return InlineCode(value=node.content)
    return Unknown(children=children, kind=kind)
