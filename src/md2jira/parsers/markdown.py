#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/parsers/markdown.py
"""Markdown to AST converter.

This module builds the md2jira document tree from Markdown using the mistune
parser. mistune produces a token stream (lists of dicts); the converter maps
each token type onto a node class from :mod:`md2jira.ast.nodes`.

"""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from typing import Any, Callable

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from md2jira.ast import (
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
)
from md2jira.constants import DEPS_MARKDOWN
from md2jira.exceptions import ParsingError
from md2jira.options.markdown import MarkdownParserOptions
from md2jira.parsers.base import BaseParser, ParserInput
from md2jira.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

_FRONTMATTER_FENCES = {"---": "yaml", "+++": "toml"}


def _keep_escape(inline: Any, m: Any, state: Any) -> int:
    """Inline rule emitting backslash escapes as written.

    JIRA uses the same backslash escapes, so `\\*` must reach the output
    unchanged instead of becoming a live formatting marker.
    """
    state.append_token({"type": "text", "raw": m.group(0)})
    return m.end()


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to the md2jira document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")
        >>> [child.kind.value for child in doc.children]
        ['heading', 'paragraph']

    Without GFM tables:

        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> doc = MarkdownToAstConverter(options).parse("|a|b|\\n|-|-|")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: ParserInput) -> Document:
        """Parse Markdown input into a Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown input. A ``str`` is always Markdown text.

        Returns
        -------
        Document
            Root of the document tree; ``metadata`` holds parsed front matter

        Raises
        ------
        DependencyError
            If mistune is missing or too old
        ParsingError
            If mistune itself fails on the input

        """
        markdown_content = self._load_text_content(input_data)
        markdown_content, metadata = self._extract_frontmatter(markdown_content)

        import mistune

        markdown = mistune.create_markdown(plugins=self._plugins(), renderer=None)
        markdown.inline.register("escape", None, _keep_escape)

        with debug_timer(logger, "Parsing (markdown)"):
            try:
                tokens, _state = markdown.parse(markdown_content)
            except Exception as e:
                raise ParsingError(
                    f"mistune failed to parse the document: {e}", parsing_stage="tokenize", original_error=e
                ) from e
            children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        return Document(children=tuple(children), metadata=metadata)

    def _plugins(self) -> list[str]:
        """Return the mistune plugin names enabled by the options."""
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        if self.options.parse_autolinks:
            plugins.append("url")
        return plugins

    # ------------------------------------------------------------------
    # Front matter
    # ------------------------------------------------------------------

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Strip YAML (``---``) or TOML (``+++``) front matter from ``content``.

        Parameters
        ----------
        content : str
            Markdown content that may start with front matter

        Returns
        -------
        tuple[str, dict]
            Content without the front matter block, and the parsed mapping.
            Content is returned unchanged when front matter parsing is
            disabled, absent, unterminated or malformed.

        """
        if not self.options.parse_frontmatter:
            return content, {}

        lines = content.splitlines(keepends=True)
        if not lines:
            return content, {}

        fence = lines[0].strip()
        fmt = _FRONTMATTER_FENCES.get(fence)
        if fmt is None:
            return content, {}

        end_index = next((i for i in range(1, len(lines)) if lines[i].strip() == fence), -1)
        if end_index < 0:
            logger.debug("Unterminated front matter, treating it as content")
            return content, {}

        raw = "".join(lines[1:end_index])
        try:
            data = yaml.safe_load(raw) if fmt == "yaml" else tomllib.loads(raw)
        except (yaml.YAMLError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Ignoring malformed {fmt} front matter: {e}")
            return content, {}

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {fmt} front matter that is not a mapping")
            return content, {}

        return "".join(lines[end_index + 1 :]), data

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block-level mistune tokens into nodes."""
        nodes: list[Node] = []
        for token in tokens:
            nodes.extend(self._process_token(token))
        return nodes

    def _process_token(self, token: dict[str, Any]) -> list[Node]:
        """Process a single block-level token.

        Returns a list because some tokens produce nothing (blank lines) and
        unknown container tokens are replaced by their children.
        """
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            "block_text": self._process_block_text,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "list": self._process_list,
            "table": self._process_table,
            "thematic_break": lambda _token: ThematicBreak(),
            "block_html": lambda tok: HTMLBlock(content=tok.get("raw", "")),
        }

        handler = handler_map.get(token_type)
        if handler is not None:
            return [handler(token)]
        if token_type == "blank_line":
            return []

        logger.debug(f"Unhandled block token type: {token_type!r}")
        children = token.get("children")
        if isinstance(children, list):
            return self._process_tokens(children)
        if token.get("raw"):
            return [Paragraph(children=(Text(content=token["raw"]),))]
        return []

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token."""
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1)
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1
        return Heading(level=level, children=self._inline_children(token))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(children=self._inline_children(token))

    def _process_block_text(self, token: dict[str, Any]) -> TextBlock:
        # mistune uses block_text for the content of tight list items
        return TextBlock(children=self._inline_children(token))

    def _process_code_block(self, token: dict[str, Any]) -> FencedCodeBlock | CodeBlock:
        """Process code block token.

        Fenced blocks keep the first word of their info string as language;
        indented blocks never carry a language. Non-empty content always ends
        with a newline, whichever mistune release produced it.
        """
        content = token.get("raw", "")
        if content and not content.endswith("\n"):
            content += "\n"
        attrs = token.get("attrs") or {}
        info = (attrs.get("info") or "").strip()
        style = token.get("style")

        if style == "indent" or (style is None and not info):
            return CodeBlock(content=content)

        language = info.split(maxsplit=1)[0] if info else ""
        return FencedCodeBlock(content=content, language=language)

    def _process_block_quote(self, token: dict[str, Any]) -> BlockQuote:
        return BlockQuote(children=tuple(self._process_tokens(token.get("children") or [])))

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List node whose children are ListItem nodes

        """
        attrs = token.get("attrs") or {}
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = bool(token.get("tight", attrs.get("tight", True)))

        items = tuple(
            self._process_list_item(child) for child in token.get("children") or [] if isinstance(child, dict)
        )
        return List(ordered=ordered, children=items, start=start if isinstance(start, int) else 1, tight=tight)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process list item token, attaching a checkbox for task items.

        The checkbox becomes the first inline child of the item's first text
        block, or the item's first child when it does not start with text.
        """
        children = self._process_tokens(token.get("children") or [])

        attrs = token.get("attrs") or {}
        if token.get("type") == "task_list_item" or "checked" in attrs:
            checkbox = TaskCheckBox(checked=bool(attrs.get("checked", False)))
            first = children[0] if children else None
            if isinstance(first, (TextBlock, Paragraph)):
                children[0] = replace(first, children=(checkbox,) + first.children)
            else:
                children.insert(0, checkbox)

        return ListItem(children=tuple(children))

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        mistune nests header cells directly under ``table_head`` and body cells
        under ``table_body`` → ``table_row``; the tree mirrors that with a
        TableHeader followed by TableRow nodes.
        """
        rows: list[Node] = []

        for section in token.get("children") or []:
            section_type = section.get("type", "")
            if section_type == "table_head":
                rows.append(TableHeader(children=self._process_table_cells(section)))
            elif section_type == "table_body":
                for row_token in section.get("children") or []:
                    rows.append(TableRow(children=self._process_table_cells(row_token)))

        return Table(children=tuple(rows))

    def _process_table_cells(self, row_token: dict[str, Any]) -> tuple[TableCell, ...]:
        cells = []
        for cell_token in row_token.get("children") or []:
            if cell_token.get("type") != "table_cell":
                continue
            attrs = cell_token.get("attrs") or {}
            cells.append(TableCell(children=self._inline_children(cell_token), alignment=attrs.get("align")))
        return tuple(cells)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _inline_children(self, token: dict[str, Any]) -> tuple[Node, ...]:
        children = token.get("children")
        if not isinstance(children, list):
            return ()
        return tuple(self._process_inline_tokens(children))

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Line breaks are not nodes of their own: they are folded into the
        preceding Text node as ``soft_line_break`` / ``hard_line_break``. A
        break with no preceding Text gets an empty Text to carry it.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            token_type = token.get("type", "")
            if token_type in ("softbreak", "linebreak"):
                flag = "hard_line_break" if token_type == "linebreak" else "soft_line_break"
                last = nodes[-1] if nodes else None
                if isinstance(last, Text) and not (last.soft_line_break or last.hard_line_break):
                    nodes[-1] = replace(last, **{flag: True})
                else:
                    nodes.append(Text(content="", **{flag: True}))
                continue

            nodes.extend(self._process_inline_token(token))

        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> list[Node]:
        """Process a single inline token."""
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "text": self._handle_text_token,
            "emphasis": self._handle_emphasis_token,
            "strong": lambda tok: Emphasis(level=2, children=self._inline_children(tok)),
            "strikethrough": lambda tok: Strikethrough(children=self._inline_children(tok)),
            "codespan": lambda tok: CodeSpan(content=tok.get("raw", "")),
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "inline_html": lambda tok: RawHTML(content=tok.get("raw", "")),
        }

        handler = handler_map.get(token_type)
        if handler is not None:
            return [handler(token)]

        logger.debug(f"Unhandled inline token type: {token_type!r}")
        children = token.get("children")
        if isinstance(children, list):
            return self._process_inline_tokens(children)
        if token.get("raw"):
            return [Text(content=token["raw"])]
        return []

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token.

        mistune nests bold-italic (``***x***``) as emphasis around strong; the
        tree always carries it as strong around emphasis.
        """
        children = token.get("children") or []
        if len(children) == 1 and children[0].get("type") == "strong":
            inner = Emphasis(level=1, children=self._inline_children(children[0]))
            return Emphasis(level=2, children=(inner,))
        return Emphasis(level=1, children=self._inline_children(token))

    def _handle_link_token(self, token: dict[str, Any]) -> Link | AutoLink:
        """Handle link token.

        A link whose only content is its own URL (``<https://x>``, bare URLs,
        ``<user@example.com>``) becomes an AutoLink.
        """
        attrs = token.get("attrs") or {}
        url = attrs.get("url", "")
        raw_children = token.get("children") or []

        if len(raw_children) == 1 and raw_children[0].get("type") == "text":
            text = raw_children[0].get("raw", "")
            if text == url or f"mailto:{text}" == url:
                return AutoLink(url=url)

        return Link(destination=url, children=self._inline_children(token), title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text is kept as inline children."""
        attrs = token.get("attrs") or {}
        return Image(
            destination=attrs.get("url", ""),
            children=self._inline_children(token),
            title=attrs.get("title"),
        )


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to a document tree.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        Root of the document tree

    Examples
    --------
    >>> from md2jira.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
