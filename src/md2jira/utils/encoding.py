#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/encoding.py
"""Character decoding helpers for Markdown input.

Markdown handed over as bytes (files, binary streams, stdin buffers) is
decoded with a short list of fallback encodings. ``latin-1`` accepts every
byte sequence, so decoding never fails.
"""

from __future__ import annotations

import logging
from typing import IO

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ["utf-8-sig", "latin-1"]


def read_text_with_encoding_detection(data: bytes, fallback_encodings: list[str] | None = None) -> str:
    """Decode binary data as text, trying encodings in order.

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : list[str] | None, default None
        Encodings to try in order. If None, uses ``['utf-8-sig', 'latin-1']``
        (UTF-8 with an optional byte order mark first).

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection("caf\\u00e9".encode("utf-8"))
    'café'

    """
    if fallback_encodings is None:
        fallback_encodings = DEFAULT_FALLBACK_ENCODINGS

    for encoding in fallback_encodings:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
            continue
        except LookupError as e:
            logger.debug(f"Unknown encoding {encoding}: {e}")
            continue
        logger.debug(f"Successfully decoded with encoding: {encoding}")
        return text

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def normalize_stream_to_text(stream: IO[bytes] | IO[str], fallback_encodings: list[str] | None = None) -> str:
    """Read a binary or text stream and return its content as text.

    Parameters
    ----------
    stream : IO[bytes] or IO[str]
        File-like object to read from

    fallback_encodings : list[str] or None, optional
        Encodings passed to :func:`read_text_with_encoding_detection` for
        binary streams

    Returns
    -------
    str
        Decoded text content from the stream

    Raises
    ------
    TypeError
        If stream.read() returns something other than bytes or str

    """
    content = stream.read()
    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content, fallback_encodings)
    if isinstance(content, str):
        return content
    raise TypeError(f"Stream read() returned {type(content).__name__}, expected bytes or str")
