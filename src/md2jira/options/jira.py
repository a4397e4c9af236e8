#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2jira/options/jira.py
"""Configuration options for JIRA markup rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2jira.constants import DEFAULT_PRESERVE_RAW_HTML, DEFAULT_VERBOSE, DEFAULT_WARN_ON_UNSUPPORTED
from md2jira.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JiraRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-JIRA rendering.

    Parameters
    ----------
    preserve_raw_html : bool, default False
        Emit HTML blocks verbatim instead of downgrading them to JIRA markup.
        Inline HTML tags are always downgraded.
    warn_on_unsupported : bool, default False
        Record a warning for every construct converted on a best-effort basis.
    verbose : bool, default False
        Caller-facing flag (the CLI uses it to print warnings). Does not change
        the rendered output.

    Examples
    --------
    Collect warnings:
        >>> from md2jira import convert_with_options
        >>> options = JiraRendererOptions(warn_on_unsupported=True)
        >>> result = convert_with_options("<div>x</div>", options)
        >>> result.warnings
        ('HTML block found - converted with best effort',)

    """

    preserve_raw_html: bool = field(
        default=DEFAULT_PRESERVE_RAW_HTML,
        metadata={
            "help": "Keep HTML blocks verbatim instead of converting them",
            "cli_name": "preserve-html",
            "importance": "core",
        },
    )
    warn_on_unsupported: bool = field(
        default=DEFAULT_WARN_ON_UNSUPPORTED,
        metadata={"help": "Collect warnings for best-effort conversions", "importance": "core"},
    )
    verbose: bool = field(
        default=DEFAULT_VERBOSE,
        metadata={"help": "Caller-facing verbosity flag; output is unchanged", "importance": "advanced"},
    )
