#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/html.py
"""Best-effort conversion of inline HTML to JIRA markup.

Only a fixed set of common inline tags is recognized; everything else is
stripped down to its text. The substitution stages in :data:`HTML_STAGES` run
strictly in order: the final stage deletes every remaining tag, so it must
come after all tag-specific stages or their content would lose its wrapper
before being converted.
"""

from __future__ import annotations

import re

HTML_STAGES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<sup>([^<]*)</sup>"), r"^\1^"),
    (re.compile(r"<sub>([^<]*)</sub>"), r"~\1~"),
    (re.compile(r"<br\s*/?>"), r"\\\\"),
    (re.compile(r"<(?:strong|b)>([^<]*)</(?:strong|b)>"), r"*\1*"),
    (re.compile(r"<(?:em|i)>([^<]*)</(?:em|i)>"), r"_\1_"),
    (re.compile(r"<code>([^<]*)</code>"), r"{{\1}}"),
    (re.compile(r"<(?:del|s)>([^<]*)</(?:del|s)>"), r"-\1-"),
    (re.compile(r"<u>([^<]*)</u>"), r"+\1+"),
    # must stay last
    (re.compile(r"<[^>]+>"), ""),
)


def downgrade_html(html: str) -> str:
    """Convert common inline HTML tags to JIRA markup and strip the rest.

    Parameters
    ----------
    html : str
        Raw HTML fragment

    Returns
    -------
    str
        JIRA markup text

    Examples
    --------
    >>> downgrade_html("E = mc<sup>2</sup>")
    'E = mc^2^'
    >>> downgrade_html('<span class="x"><b>bold</b></span>')
    '*bold*'

    """
    for pattern, replacement in HTML_STAGES:
        html = pattern.sub(replacement, html)
    return html
