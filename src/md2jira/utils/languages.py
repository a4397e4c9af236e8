#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/languages.py
"""Code fence language normalization.

Maps the informal language tags found on Markdown code fences (``js``,
``py``, ``yml`` ...) to the names JIRA's ``{code}`` macro understands. Tags
with no entry pass through unchanged; tags for prose formats map to
:data:`~md2jira.constants.NO_LANGUAGE`, meaning "no language attribute".
"""

from __future__ import annotations

from md2jira.constants import NO_LANGUAGE

LANGUAGE_MAP: dict[str, str] = {
    "js": "javascript",
    "javascript": "javascript",
    "ts": "typescript",
    "typescript": "typescript",
    "py": "python",
    "python": "python",
    "rb": "ruby",
    "ruby": "ruby",
    "sh": "bash",
    "bash": "bash",
    "shell": "bash",
    "json": "json",
    "xml": "xml",
    "html": "html",
    "css": "css",
    "sql": "sql",
    "java": "java",
    "go": "go",
    "golang": "go",
    "rust": "rust",
    "c": "cpp",
    "cpp": "cpp",
    "c++": "cpp",
    "yaml": "yaml",
    "yml": "yaml",
    "php": "php",
    "swift": "swift",
    "kotlin": "kotlin",
    "scala": "scala",
    "r": "r",
    "perl": "perl",
    "groovy": "groovy",
    "powershell": "powershell",
    "ps1": "powershell",
    "dockerfile": "dockerfile",
    "makefile": "makefile",
    "markdown": NO_LANGUAGE,
    "md": NO_LANGUAGE,
    "text": NO_LANGUAGE,
    "txt": NO_LANGUAGE,
    "plaintext": NO_LANGUAGE,
}


def map_language(language: str) -> str:
    """Return the JIRA code macro language for a fence language tag.

    Parameters
    ----------
    language : str
        Language tag as written on the fence (case and surrounding whitespace
        are ignored)

    Returns
    -------
    str
        Mapped language, the lower-cased tag itself when unknown, ``""`` for
        an empty tag, or ``"none"`` for prose formats

    Examples
    --------
    >>> map_language("JS")
    'javascript'
    >>> map_language("elixir")
    'elixir'
    >>> map_language("md")
    'none'

    """
    key = language.strip().lower()
    return LANGUAGE_MAP.get(key, key)


def code_macro_language(language: str) -> str | None:
    """Return the language to put on a ``{code}`` macro, or None for a bare macro."""
    mapped = map_language(language)
    if not mapped or mapped == NO_LANGUAGE:
        return None
    return mapped
