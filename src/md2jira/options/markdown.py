#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2jira/options/markdown.py
"""Configuration options for Markdown parsing.

This module defines the options that control which GitHub flavored Markdown
extensions the mistune parser enables while building the document tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2jira.constants import (
    DEFAULT_PARSE_AUTOLINKS,
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PARSE_TASK_LISTS,
)
from md2jira.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognize GFM pipe tables.
    parse_strikethrough : bool, default True
        Recognize ``~~strikethrough~~``.
    parse_task_lists : bool, default True
        Recognize ``- [ ]`` / ``- [x]`` task list items.
    parse_autolinks : bool, default True
        Turn bare URLs into autolinks (GFM linkify).
    parse_frontmatter : bool, default False
        Strip YAML (``---``) or TOML (``+++``) front matter from the start of
        the document and keep it as document metadata instead of rendering it.

    Examples
    --------
    Plain CommonMark, no extensions:
        >>> options = MarkdownParserOptions(
        ...     parse_tables=False, parse_strikethrough=False,
        ...     parse_task_lists=False, parse_autolinks=False,
        ... )

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM tables", "cli_name": "no-tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~", "cli_name": "no-strikethrough", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={"help": "Parse task list checkboxes", "cli_name": "no-task-lists", "importance": "core"},
    )
    parse_autolinks: bool = field(
        default=DEFAULT_PARSE_AUTOLINKS,
        metadata={"help": "Turn bare URLs into links", "cli_name": "no-autolinks", "importance": "advanced"},
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={
            "help": "Strip YAML/TOML front matter instead of rendering it",
            "cli_name": "frontmatter",
            "importance": "advanced",
        },
    )
