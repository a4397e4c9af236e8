#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/renderers/jira.py
"""JIRA wiki markup rendering from the document tree.

This module provides the JiraRenderer class, which walks a document tree
depth-first and emits JIRA / Confluence text formatting notation. The
renderer keeps all per-document state (output buffer, list nesting, warnings)
in a :class:`RenderContext` created for each call, so a single renderer
instance can be shared.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, cast

from md2jira.ast import (
    AutoLink,
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
    Node,
    NodeKind,
    RawHTML,
    TaskCheckBox,
    Text,
    TreeWalker,
)
from md2jira.ast.visitors import Handler, is_last_child, parent_of
from md2jira.constants import HTML_BLOCK_WARNING
from md2jira.options.jira import JiraRendererOptions
from md2jira.renderers.base import BaseRenderer
from md2jira.utils.decorators import debug_timer
from md2jira.utils.html import downgrade_html
from md2jira.utils.languages import code_macro_language
from md2jira.utils.text import normalize_output

logger = logging.getLogger(__name__)

_EMPHASIS_MARKERS = {1: "_", 2: "*"}


@dataclass(frozen=True)
class ListContext:
    """One entry of the list nesting stack."""

    ordered: bool

    @property
    def marker(self) -> str:
        return "#" if self.ordered else "*"


@dataclass
class RenderContext:
    """Mutable state for a single render call.

    Parameters
    ----------
    output : list of str
        Append-only output buffer
    list_stack : list of ListContext
        Lists currently being traversed, outermost first
    tight_list : bool
        Whether the innermost list entered is tight; suppresses the blank line
        after paragraphs while inside a list
    in_blockquote : bool
        Whether traversal is inside a blockquote
    ancestors : list of Node
        Path from the root to the parent of the node being handled
    warnings : list of str
        Non-fatal conversion warnings, in emission order

    """

    output: list[str] = field(default_factory=list)
    list_stack: list[ListContext] = field(default_factory=list)
    tight_list: bool = False
    in_blockquote: bool = False
    ancestors: list[Node] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def write(self, text: str) -> None:
        self.output.append(text)

    def list_prefix(self) -> str:
        """Return the item prefix for the current nesting, e.g. ``"*#* "``."""
        return "".join(ctx.marker for ctx in self.list_stack) + " "


class JiraRenderer(TreeWalker[RenderContext], BaseRenderer):
    r"""Render the document tree to JIRA wiki markup.

    Parameters
    ----------
    options : JiraRendererOptions or None, default = None
        JIRA rendering options

    Examples
    --------
        >>> from md2jira.ast import Document, Paragraph, Text, Emphasis
        >>> doc = Document(children=(
        ...     Paragraph(children=(Emphasis(level=2, children=(Text("bold"),)),)),
        ... ))
        >>> JiraRenderer().render_to_string(doc)
        '*bold*'

    """

    def __init__(self, options: JiraRendererOptions | None = None):
        """Initialize the JIRA renderer with options."""
        BaseRenderer._validate_options_type(options, JiraRendererOptions, "jira")
        options = options or JiraRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JiraRendererOptions = options

    def handlers(self) -> Mapping[NodeKind, Handler]:
        """Return the emission rule for every node kind."""
        return {
            NodeKind.DOCUMENT: self._noop,
            NodeKind.HEADING: self._heading,
            NodeKind.PARAGRAPH: self._paragraph,
            NodeKind.TEXT_BLOCK: self._noop,
            NodeKind.TEXT: self._text,
            NodeKind.EMPHASIS: self._emphasis,
            NodeKind.STRIKETHROUGH: self._strikethrough,
            NodeKind.CODE_SPAN: self._code_span,
            NodeKind.FENCED_CODE_BLOCK: self._fenced_code_block,
            NodeKind.CODE_BLOCK: self._code_block,
            NodeKind.LINK: self._link,
            NodeKind.AUTOLINK: self._autolink,
            NodeKind.IMAGE: self._image,
            NodeKind.LIST: self._list,
            NodeKind.LIST_ITEM: self._list_item,
            NodeKind.THEMATIC_BREAK: self._thematic_break,
            NodeKind.BLOCKQUOTE: self._blockquote,
            NodeKind.HTML_BLOCK: self._html_block,
            NodeKind.RAW_HTML: self._raw_html,
            NodeKind.TABLE: self._newline_on_exit,
            NodeKind.TABLE_HEADER: self._newline_on_exit,
            NodeKind.TABLE_ROW: self._newline_on_exit,
            NodeKind.TABLE_CELL: self._table_cell,
            NodeKind.TASK_CHECKBOX: self._task_checkbox,
        }

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_to_result(self, doc: Document) -> tuple[str, list[str]]:
        """Render a document and collect warnings.

        Parameters
        ----------
        doc : Document
            Root of the document tree

        Returns
        -------
        tuple[str, list[str]]
            Normalized JIRA markup and the warnings raised while rendering

        """
        ctx = RenderContext()
        with debug_timer(logger, "Rendering (jira)"):
            self.walk(doc, ctx)
        return normalize_output("".join(ctx.output)), ctx.warnings

    def render_to_string(self, doc: Document) -> str:
        """Render a document to JIRA markup, discarding warnings."""
        text, _warnings = self.render_to_result(doc)
        return text

    # ------------------------------------------------------------------
    # Block rules
    # ------------------------------------------------------------------

    def _noop(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        pass

    def _newline_on_exit(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if not entering:
            ctx.write("\n")

    def _heading(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write(f"h{cast(Heading, node).level}. ")
        else:
            ctx.write("\n\n")

    def _paragraph(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if not entering and not (ctx.tight_list and ctx.list_stack):
            ctx.write("\n\n")

    def _thematic_break(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write("----\n\n")

    def _blockquote(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write("{quote}\n")
            ctx.in_blockquote = True
        else:
            ctx.write("{quote}\n\n")
            ctx.in_blockquote = any(a.kind is NodeKind.BLOCKQUOTE for a in ctx.ancestors)

    def _fenced_code_block(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if not entering:
            return
        block = cast(FencedCodeBlock, node)
        language = code_macro_language(block.language)
        ctx.write(f"{{code:{language}}}\n" if language else "{code}\n")
        self._write_code_body(block.content, ctx)

    def _code_block(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write("{code}\n")
            self._write_code_body(cast(CodeBlock, node).content, ctx)

    @staticmethod
    def _write_code_body(content: str, ctx: RenderContext) -> None:
        if content and not content.endswith("\n"):
            content += "\n"
        ctx.write(content)
        ctx.write("{code}\n\n")

    def _html_block(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if not entering:
            return
        content = cast(HTMLBlock, node).content
        if self.options.preserve_raw_html:
            ctx.write(content)
        else:
            logger.debug("Downgrading HTML block to JIRA markup")
            ctx.write(downgrade_html(content))
        if self.options.warn_on_unsupported:
            ctx.warnings.append(HTML_BLOCK_WARNING)

    def _table_cell(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        parent = parent_of(ctx)
        marker = "||" if parent is not None and parent.kind is NodeKind.TABLE_HEADER else "|"
        if entering or is_last_child(node, ctx):
            ctx.write(marker)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _list(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            if ctx.list_stack:
                ctx.write("\n")
            lst = cast(List, node)
            ctx.list_stack.append(ListContext(ordered=lst.ordered))
            ctx.tight_list = lst.tight
        else:
            ctx.list_stack.pop()
            if not ctx.list_stack:
                ctx.tight_list = False
                ctx.write("\n")

    def _list_item(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write(ctx.list_prefix())
        else:
            ctx.write("\n")

    def _task_checkbox(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write("(/) " if cast(TaskCheckBox, node).checked else "( ) ")

    # ------------------------------------------------------------------
    # Inline rules
    # ------------------------------------------------------------------

    def _text(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if not entering:
            return
        text = cast(Text, node)
        ctx.write(text.content)
        if text.hard_line_break:
            ctx.write("\\\\\n")
        elif text.soft_line_break:
            ctx.write("\n")

    def _emphasis(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        ctx.write(_EMPHASIS_MARKERS.get(cast(Emphasis, node).level, ""))

    def _strikethrough(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        ctx.write("-")

    def _code_span(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write(f"{{{{{cast(CodeSpan, node).content}}}}}")

    def _raw_html(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write(downgrade_html(cast(RawHTML, node).content))

    def _link(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if not entering:
            return
        link = cast(Link, node)
        text = _link_text(link.children)
        if not text or text == link.destination:
            ctx.write(f"[{link.destination}]")
        else:
            ctx.write(f"[{text}|{link.destination}]")

    def _autolink(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if entering:
            ctx.write(f"[{cast(AutoLink, node).url}]")

    def _image(self, node: Node, ctx: RenderContext, entering: bool) -> None:
        if not entering:
            return
        image = cast(Image, node)
        alt = "".join(child.content for child in image.children if isinstance(child, Text))
        ctx.write(f"!{image.destination}|alt={alt}!" if alt else f"!{image.destination}!")


def _link_text(nodes: tuple[Node, ...]) -> str:
    """Render link content with the restricted inline rule set.

    Only text, code spans and emphasis produce output; line breaks inside link
    text are dropped and any other node contributes its children.
    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(node.content)
        elif isinstance(node, CodeSpan):
            parts.append(f"{{{{{node.content}}}}}")
        elif isinstance(node, Emphasis):
            marker = _EMPHASIS_MARKERS.get(node.level, "")
            parts.append(f"{marker}{_link_text(node.children)}{marker}")
        else:
            parts.append(_link_text(node.children))
    return "".join(parts)
