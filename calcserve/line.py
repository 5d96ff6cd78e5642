"""Reading HTTP protocol lines from a binary stream."""

from __future__ import annotations

import logging
from typing import BinaryIO

logger = logging.getLogger(__name__)


def read_http_line(stream: BinaryIO) -> str | None:
    """Read one line from ``stream`` and return it without its line ending.

    Returns ``None`` if the stream ends before a newline is seen. An empty
    string means the line held only its terminator. Leading spaces are
    skipped, trailing spaces and carriage returns are removed, and the line
    may end with either CRLF or a bare LF.
    """
    buffer = bytearray()
    while True:
        ch = stream.read(1)
        if not ch:
            return None
        if not buffer and ch == b" ":
            continue
        if ch == b"\n":
            break
        buffer += ch
    line = bytes(buffer).rstrip(b"\r ").decode("latin-1")
    logger.debug("Read line: %r", line)
    return line