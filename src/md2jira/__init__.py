"""md2jira - convert GitHub flavored Markdown to JIRA wiki markup.

md2jira parses Markdown with mistune into a small immutable document tree and
renders that tree as JIRA / Confluence "Text Formatting Notation": ``h1.``
headings, ``*bold*``, ``_italic_``, ``{code:lang}`` blocks, ``{quote}``
blocks, ``*``/``#`` nested lists, ``||header||`` tables and ``[text|url]``
links.

Requirements
------------
- Python 3.10+
- mistune 3.x

Examples
--------
Basic usage:

    >>> from md2jira import convert
    >>> convert("# Title\\n\\nSome `code`.")
    'h1. Title\\n\\nSome {{code}}.'

Collecting warnings:

    >>> from md2jira import JiraRendererOptions, convert_with_options
    >>> result = convert_with_options("<div>x</div>", JiraRendererOptions(warn_on_unsupported=True))
    >>> result.warnings
    ('HTML block found - converted with best effort',)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2jira requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2jira.api import (
    ConversionResult,
    Converter,
    convert,
    convert_file,
    convert_file_to_file,
    convert_with_options,
)
from md2jira.exceptions import (
    ConfigError,
    DependencyError,
    FileError,
    Md2JiraError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2jira.options import BaseParserOptions, BaseRendererOptions, JiraRendererOptions, MarkdownParserOptions
from md2jira.renderers.jira import JiraRenderer

__all__ = [
    "__version__",
    "convert",
    "convert_with_options",
    "convert_file",
    "convert_file_to_file",
    "Converter",
    "ConversionResult",
    "JiraRenderer",
    # Options
    "BaseParserOptions",
    "BaseRendererOptions",
    "JiraRendererOptions",
    "MarkdownParserOptions",
    # Exceptions
    "Md2JiraError",
    "ValidationError",
    "ConfigError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "DependencyError",
]
