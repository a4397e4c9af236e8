#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/ast/__init__.py
"""Document tree used between the Markdown parser and the JIRA renderer.

Examples
--------
Build a small document by hand:

    >>> from md2jira.ast import Document, Heading, Text
    >>> doc = Document(children=(Heading(level=1, children=(Text(content="Title"),)),))

"""

from md2jira.ast.nodes import (
    AutoLink,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    FencedCodeBlock,
    Heading,
    HTMLBlock,
    Image,
    Link,
    List,
    ListItem,
    Node,
    NodeKind,
    Paragraph,
    RawHTML,
    Strikethrough,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    TaskCheckBox,
    Text,
    TextBlock,
    ThematicBreak,
    get_node_children,
)
from md2jira.ast.visitors import LEAF_KINDS, SELF_MANAGING_KINDS, TreeWalker

__all__ = [
    "AutoLink",
    "BlockQuote",
    "CodeBlock",
    "CodeSpan",
    "Document",
    "Emphasis",
    "FencedCodeBlock",
    "HTMLBlock",
    "Heading",
    "Image",
    "LEAF_KINDS",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeKind",
    "Paragraph",
    "RawHTML",
    "SELF_MANAGING_KINDS",
    "Strikethrough",
    "Table",
    "TableCell",
    "TableHeader",
    "TableRow",
    "TaskCheckBox",
    "Text",
    "TextBlock",
    "ThematicBreak",
    "TreeWalker",
    "get_node_children",
]
