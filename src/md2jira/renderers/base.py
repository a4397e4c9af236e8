#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all renderers inherit from.
A renderer turns the md2jira document tree into output text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from md2jira.ast import Document
from md2jira.exceptions import InvalidOptionsError
from md2jira.options.base import BaseRendererOptions
from md2jira.utils.io_utils import OutputDestination, write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class PlainRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"
        ...     def render(self, doc, output):
        ...         self.write_text_output(self.render_to_string(doc), output)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the document tree to a string.

        Parameters
        ----------
        doc : Document
            Root of the document tree

        Returns
        -------
        str
            Rendered document

        """

    def render(self, doc: Document, output: OutputDestination) -> None:
        """Render the document tree and write it to ``output``.

        Parameters
        ----------
        doc : Document
            Root of the document tree
        output : str, Path, IO[bytes], or IO[str]
            Output destination: a file path, or a text or binary stream

        Raises
        ------
        OSError
            If output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: OutputDestination) -> None:
        """Write text output to a file path or stream.

        Examples
        --------
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output("h1. Hello", buffer)
            >>> buffer.getvalue()
            b'h1. Hello'

        """
        write_content(text, output)
