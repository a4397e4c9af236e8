#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy that the Markdown parser produces and
the JIRA renderer consumes. Each node represents a structural or inline
element of the source document.

The node hierarchy is designed to:
- Cover CommonMark plus the GitHub flavored extensions (tables,
  strikethrough, task lists, autolinks)
- Be immutable once built (all node classes are frozen dataclasses)
- Expose a uniform ``children`` tuple so a single walker can traverse any node

Node Kinds
----------
Every node class carries a ``kind`` drawn from the closed :class:`NodeKind`
enumeration. Renderers dispatch on ``kind`` rather than on the Python class.

Block-level nodes:
    - Document, Heading, Paragraph, TextBlock, FencedCodeBlock, CodeBlock
    - BlockQuote, List, ListItem, ThematicBreak, HTMLBlock
    - Table, TableHeader, TableRow, TableCell

Inline nodes:
    - Text, Emphasis, CodeSpan, Strikethrough
    - Link, AutoLink, Image, RawHTML, TaskCheckBox

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]


class NodeKind(Enum):
    """Closed enumeration of document tree node kinds."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    EMPHASIS = "emphasis"
    CODE_SPAN = "code_span"
    FENCED_CODE_BLOCK = "fenced_code_block"
    CODE_BLOCK = "code_block"
    LINK = "link"
    AUTOLINK = "autolink"
    IMAGE = "image"
    LIST = "list"
    LIST_ITEM = "list_item"
    THEMATIC_BREAK = "thematic_break"
    BLOCKQUOTE = "blockquote"
    HTML_BLOCK = "html_block"
    RAW_HTML = "raw_html"
    TEXT_BLOCK = "text_block"
    TABLE = "table"
    TABLE_HEADER = "table_header"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    STRIKETHROUGH = "strikethrough"
    TASK_CHECKBOX = "task_checkbox"


class Node(ABC):
    """Base class for all AST nodes.

    Subclasses are frozen dataclasses. They declare their own fields, always
    including ``children``; leaf nodes default it to an empty tuple.

    Attributes
    ----------
    kind : NodeKind
        Node kind tag, fixed per class
    children : tuple of Node
        Ordered child nodes

    """

    kind: ClassVar[NodeKind]
    children: tuple[Node, ...]


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (front matter fields, if parsed)

    """

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    children: tuple[Node, ...] = ()
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : tuple of Node, default = ()
        Inline nodes representing heading text

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph node containing inline content."""

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class TextBlock(Node):
    """Paragraph-like inline container used for the items of tight lists.

    Unlike :class:`Paragraph` it is never followed by a blank line.
    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT_BLOCK

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class FencedCodeBlock(Node):
    """Fenced code block with an optional info-string language.

    Parameters
    ----------
    content : str
        Code content, newline terminated lines, not parsed as markdown
    language : str, default = ""
        First word of the fence info string
    children : tuple of Node, default = ()
        Always empty

    """

    kind: ClassVar[NodeKind] = NodeKind.FENCED_CODE_BLOCK

    content: str
    language: str = ""
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class CodeBlock(Node):
    """Indented code block (no language)."""

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    content: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    kind: ClassVar[NodeKind] = NodeKind.BLOCKQUOTE

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    children : tuple of ListItem, default = ()
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether the list is tight (no blank lines between items)

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST

    ordered: bool
    children: tuple[Node, ...] = ()
    start: int = 1
    tight: bool = True


@dataclass(frozen=True)
class ListItem(Node):
    """List item node containing block content."""

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class ThematicBreak(Node):
    """Horizontal rule."""

    kind: ClassVar[NodeKind] = NodeKind.THEMATIC_BREAK

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class HTMLBlock(Node):
    """Raw HTML block, kept as source text."""

    kind: ClassVar[NodeKind] = NodeKind.HTML_BLOCK

    content: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Table(Node):
    """Table node (GFM extension).

    The first child is a :class:`TableHeader` when the table has a header
    row; the remaining children are :class:`TableRow` nodes.
    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class TableHeader(Node):
    """Header row of a table; its children are header cells."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_HEADER

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class TableRow(Node):
    """Body row of a table."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_ROW

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class TableCell(Node):
    """Table cell with inline content.

    Whether the cell is a header cell is decided by its parent row kind.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Inline content
    alignment : {'left', 'center', 'right'} or None, default = None
        Column alignment from the delimiter row

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_CELL

    children: tuple[Node, ...] = ()
    alignment: Optional[Alignment] = None


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Plain text run.

    Parameters
    ----------
    content : str
        Literal text
    soft_line_break : bool, default = False
        The run is followed by a soft line break
    hard_line_break : bool, default = False
        The run is followed by a hard line break

    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    content: str
    soft_line_break: bool = False
    hard_line_break: bool = False
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Emphasis(Node):
    """Emphasis node.

    Parameters
    ----------
    level : int
        1 for single delimiters (italic), 2 for double delimiters (bold)
    children : tuple of Node, default = ()
        Emphasized inline content

    """

    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS

    level: int
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Strikethrough(Node):
    """Strikethrough (GFM extension)."""

    kind: ClassVar[NodeKind] = NodeKind.STRIKETHROUGH

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class CodeSpan(Node):
    """Inline code span."""

    kind: ClassVar[NodeKind] = NodeKind.CODE_SPAN

    content: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Link(Node):
    """Inline or reference link.

    Parameters
    ----------
    destination : str
        Link target URL
    children : tuple of Node, default = ()
        Link text as inline nodes
    title : str or None, default = None
        Optional link title

    """

    kind: ClassVar[NodeKind] = NodeKind.LINK

    destination: str
    children: tuple[Node, ...] = ()
    title: Optional[str] = None


@dataclass(frozen=True)
class AutoLink(Node):
    """Autolink (``<https://...>``, ``<user@host>`` or a bare GFM URL)."""

    kind: ClassVar[NodeKind] = NodeKind.AUTOLINK

    url: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Image(Node):
    """Image node; the alt text is held in the children."""

    kind: ClassVar[NodeKind] = NodeKind.IMAGE

    destination: str
    children: tuple[Node, ...] = ()
    title: Optional[str] = None


@dataclass(frozen=True)
class RawHTML(Node):
    """Inline HTML tag as it appeared in the source."""

    kind: ClassVar[NodeKind] = NodeKind.RAW_HTML

    content: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class TaskCheckBox(Node):
    """Task list checkbox, placed before the item's text."""

    kind: ClassVar[NodeKind] = NodeKind.TASK_CHECKBOX

    checked: bool = False
    children: tuple[Node, ...] = ()


def get_node_children(node: Node) -> tuple[Node, ...]:
    """Get the child nodes of any node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    tuple of Node
        Child nodes (empty for leaves and for objects without children)

    """
    return tuple(getattr(node, "children", ()) or ())
