#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/text.py
"""Output clean-up applied once after rendering."""

from __future__ import annotations

import re

_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def normalize_output(text: str) -> str:
    """Collapse blank-line runs and trim whitespace.

    Trailing spaces and tabs are removed from every line, runs of three or
    more newlines become exactly two, and the whole result is stripped.
    Lines are trimmed before collapsing so that whitespace-only lines count
    as blank, which keeps the function idempotent.

    Parameters
    ----------
    text : str
        Raw renderer output

    Returns
    -------
    str
        Normalized text

    Examples
    --------
    >>> normalize_output("a\\n\\n\\n\\nb  \\n")
    'a\\n\\nb'

    """
    text = "\n".join(line.rstrip(" \t") for line in text.split("\n"))
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()
