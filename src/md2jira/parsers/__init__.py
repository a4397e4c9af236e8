"""Parsers producing the md2jira document tree."""

from md2jira.parsers.base import BaseParser
from md2jira.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
