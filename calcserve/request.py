"""Parsing HTTP requests from a binary stream."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import BinaryIO

from .line import read_http_line

logger = logging.getLogger(__name__)

_ALLOWED_METHODS = frozenset({"GET", "POST"})
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class RequestError(ValueError):
    """Raised when a request cannot be read or is malformed."""


@dataclass
class Request:
    """An HTTP request as read from a client."""

    method: str
    path: str
    version: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes = b""

    def header(self, name: str) -> str | None:
        """Return the value of the first header called ``name``, if any."""
        lowered = name.lower()
        return next(
            (value for key, value in self.headers if key.lower() == lowered),
            None,
        )

    def describe(self) -> str:
        """Return a human-readable summary of the request."""
        lines = [
            "vvv Request vvv",
            f"Method: {self.method}",
            f"Path: {self.path}",
            f"Version: {self.version}",
        ]
        lines.extend(f"{key}: {value}" for key, value in self.headers)
        lines.append("^^^ Request ^^^")
        return "\n".join(lines) + "\n"


def read_headers(stream: BinaryIO) -> list[tuple[str, str]]:
    """Read header lines up to and including the blank line that ends them."""
    headers: list[tuple[str, str]] = []
    while True:
        line = read_http_line(stream)
        if line is None:
            raise RequestError("connection closed while reading headers")
        if not line:
            return headers
        key, colon, value = line.partition(":")
        if not colon or not key.strip():
            raise RequestError(f"malformed header line: {line!r}")
        headers.append((key.strip(), value.strip()))


def _parse_request_line(line: str) -> tuple[str, str, str]:
    parts = line.split()
    if len(parts) != 3 or line[-1].isspace():
        raise RequestError(f"failed to parse request line: {line!r}")
    method, path, version = parts
    if method not in _ALLOWED_METHODS:
        raise RequestError(f"invalid method: {method}")
    return method, path, version


def _read_body(stream: BinaryIO, content_length: str | None) -> bytes:
    if content_length is None:
        return b""
    match = _LEADING_INT.match(content_length)
    if match is None:
        raise RequestError(f"failed to parse content length: {content_length!r}")
    length = int(match.group(1))
    if length < 0:
        raise RequestError(f"negative content length: {length}")
    if length == 0:
        return b""
    body = stream.read(length)
    if len(body) != length:
        raise RequestError("failed to read body")
    return body


def read_request(stream: BinaryIO) -> Request | None:
    """Read one request from ``stream``.

    Blank lines before the request line are skipped. Returns ``None`` if the
    stream ends before a request line arrives; raises ``RequestError`` if
    the request is malformed or cut short.
    """
    while True:
        line = read_http_line(stream)
        if line is None:
            return None
        if line:
            break
    method, path, version = _parse_request_line(line)
    request = Request(method, path, version, read_headers(stream))
    request.body = _read_body(stream, request.header("Content-Length"))
    logger.debug("%s", request.describe())
    return request