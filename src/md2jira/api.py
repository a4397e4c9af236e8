#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/api.py
"""Public conversion API for md2jira.

Markdown is parsed into the md2jira document tree by
:class:`~md2jira.parsers.markdown.MarkdownToAstConverter` and rendered by
:class:`~md2jira.renderers.jira.JiraRenderer`. Conversion never fails on
document content; unsupported constructs are degraded and, when
``warn_on_unsupported`` is set, reported in :attr:`ConversionResult.warnings`.

Examples
--------
    >>> from md2jira import convert
    >>> convert("**bold** and *italic*")
    '*bold* and _italic_'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Union

from md2jira.exceptions import FileAccessError, FileNotFoundError, OutputWriteError
from md2jira.options.jira import JiraRendererOptions
from md2jira.options.markdown import MarkdownParserOptions
from md2jira.parsers.markdown import MarkdownToAstConverter
from md2jira.renderers.jira import JiraRenderer
from md2jira.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection
from md2jira.utils.io_utils import write_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a conversion.

    Parameters
    ----------
    output : str
        JIRA markup
    warnings : tuple of str
        Non-fatal warnings in the order they were raised

    """

    output: str
    warnings: tuple[str, ...] = ()


class Converter:
    """Reusable Markdown to JIRA converter.

    Parameters
    ----------
    options : JiraRendererOptions or None, default = None
        Rendering options
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parsing options

    Examples
    --------
        >>> converter = Converter(JiraRendererOptions(warn_on_unsupported=True))
        >>> text, warnings = converter.convert_with_warnings("<div>hi</div>")
        >>> text
        'hi'

    """

    def __init__(
        self,
        options: JiraRendererOptions | None = None,
        parser_options: MarkdownParserOptions | None = None,
    ):
        """Create the parser and renderer once for repeated conversions."""
        self.options = options or JiraRendererOptions()
        self.parser_options = parser_options or MarkdownParserOptions()
        self._parser = MarkdownToAstConverter(self.parser_options)
        self._renderer = JiraRenderer(self.options)

    def convert_to_result(self, markdown: str) -> ConversionResult:
        """Convert Markdown text, returning output and warnings together."""
        doc = self._parser.parse(markdown)
        output, warnings = self._renderer.render_to_result(doc)
        if warnings:
            logger.debug(f"Conversion produced {len(warnings)} warning(s)")
        return ConversionResult(output=output, warnings=tuple(warnings))

    def convert(self, markdown: str) -> str:
        """Convert Markdown text to JIRA markup, discarding warnings."""
        return self.convert_to_result(markdown).output

    def convert_with_warnings(self, markdown: str) -> tuple[str, list[str]]:
        """Convert Markdown text and return ``(output, warnings)``."""
        result = self.convert_to_result(markdown)
        return result.output, list(result.warnings)

    def convert_bytes(self, data: bytes) -> bytes:
        """Convert Markdown bytes to UTF-8 encoded JIRA markup.

        Input is decoded as UTF-8 (a byte order mark is skipped), falling back
        to Latin-1.
        """
        return self.convert(read_text_with_encoding_detection(data)).encode("utf-8")

    def convert_stream(self, reader: IO[bytes] | IO[str], writer: IO[bytes] | IO[str]) -> None:
        """Read Markdown from ``reader`` and write JIRA markup to ``writer``.

        Both streams may be text or binary.
        """
        write_content(self.convert(normalize_stream_to_text(reader)), writer)


def convert_with_options(
    markdown: str,
    options: JiraRendererOptions | None = None,
    parser_options: MarkdownParserOptions | None = None,
) -> ConversionResult:
    """Convert Markdown text with explicit options.

    Parameters
    ----------
    markdown : str
        Markdown source text
    options : JiraRendererOptions or None, default = None
        Rendering options
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parsing options

    Returns
    -------
    ConversionResult
        JIRA markup plus warnings

    """
    return Converter(options, parser_options).convert_to_result(markdown)


def convert(markdown: str) -> str:
    """Convert Markdown text to JIRA markup with default options.

    Warnings are discarded; use :func:`convert_with_options` to collect them.
    """
    return convert_with_options(markdown).output


def load_markdown_file(path: Union[str, Path]) -> str:
    """Read and decode a Markdown file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be read

    """
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(str(input_path))
    try:
        data = input_path.read_bytes()
    except OSError as e:
        raise FileAccessError(str(input_path), original_error=e) from e
    return read_text_with_encoding_detection(data)


def convert_file(
    path: Union[str, Path],
    options: JiraRendererOptions | None = None,
    parser_options: MarkdownParserOptions | None = None,
) -> str:
    """Read a Markdown file and return its JIRA markup.

    Parameters
    ----------
    path : str or Path
        Markdown file to read
    options : JiraRendererOptions or None, default = None
        Rendering options
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parsing options

    Returns
    -------
    str
        JIRA markup

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be read

    """
    return Converter(options, parser_options).convert(load_markdown_file(path))


def convert_file_to_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    options: JiraRendererOptions | None = None,
    parser_options: MarkdownParserOptions | None = None,
) -> None:
    """Convert a Markdown file and write the JIRA markup to another file.

    The output is written as UTF-8 exactly as rendered, without a trailing
    newline.

    Raises
    ------
    FileNotFoundError
        If the input file does not exist
    FileAccessError
        If the input file cannot be read
    OutputWriteError
        If the output file cannot be written

    """
    output = convert_file(input_path, options, parser_options)
    try:
        write_content(output, Path(output_path))
    except OSError as e:
        raise OutputWriteError(str(output_path), original_error=e) from e
    logger.info(f"Wrote JIRA markup to {output_path}")
