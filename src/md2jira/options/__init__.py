"""Option records for the md2jira parser and renderer."""

from md2jira.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2jira.options.jira import JiraRendererOptions
from md2jira.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "JiraRendererOptions",
    "MarkdownParserOptions",
]
