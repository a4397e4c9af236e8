#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/io_utils.py
"""I/O utilities for writing rendered JIRA markup.

Output destinations may be a path, a text stream or a binary stream. Text is
always encoded as UTF-8 when it has to become bytes.

"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union, cast

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def is_binary_stream(output: IO[bytes] | IO[str]) -> bool:
    """Return True if a file-like object expects bytes rather than str."""
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: OutputDestination) -> None:
    """Write text content to a path or stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written as UTF-8, binary streams receive
        UTF-8 bytes, text streams receive the string unchanged.

    Raises
    ------
    TypeError
        If the output type is not supported
    OSError
        If the destination cannot be written

    Examples
    --------
        >>> from io import BytesIO
        >>> buffer = BytesIO()
        >>> write_content("h1. Title", buffer)
        >>> buffer.getvalue()
        b'h1. Title'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


__all__ = ["OutputDestination", "is_binary_stream", "write_content"]
