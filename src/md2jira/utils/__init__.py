"""Utility helpers shared by the md2jira parser, renderer and CLI."""

from md2jira.utils.html import downgrade_html
from md2jira.utils.languages import code_macro_language, map_language
from md2jira.utils.text import normalize_output

__all__ = [
    "code_macro_language",
    "downgrade_html",
    "map_language",
    "normalize_output",
]
