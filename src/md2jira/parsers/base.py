#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that turns source text into the
md2jira document tree consumed by the renderers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2jira.ast import Document
from md2jira.exceptions import InvalidOptionsError
from md2jira.options.base import BaseParserOptions
from md2jira.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method accepts:

    - str: Markdown text (a ``Path`` is required to read from a file)
    - Path: File path to read
    - IO[bytes] or IO[str]: File-like object
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input document into a document tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            The input document to parse

        Returns
        -------
        Document
            Root node of the parsed tree

        Raises
        ------
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load text from the supported input types.

        Strings are always treated as document text, never as file paths.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Input data to load

        Returns
        -------
        str
            Document text

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        if isinstance(input_data, Path):
            logger.debug(f"Reading markdown from {input_data}")
            return read_text_with_encoding_detection(input_data.read_bytes())
        return normalize_stream_to_text(input_data)
