"""HTTP responses and their wire form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

_REASONS = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
}


def http_code_to_string(code: int) -> str:
    """Return the reason phrase for a status code, or ``"Unknown"``."""
    return _REASONS.get(code, "Unknown")


@dataclass
class Response:
    """An HTTP response: status, version, headers and a byte body."""

    status_code: int = 0
    version: str = "HTTP/1.1"
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes = b""

    def add_header(self, key: str, value: str) -> None:
        """Set a header, replacing any earlier header of the same name."""
        lowered = key.lower()
        for position, (existing, _) in enumerate(self.headers):
            if existing.lower() == lowered:
                self.headers[position] = (key, value)
                return
        self.headers.append((key, value))

    def set_body(self, body: str | bytes) -> None:
        """Replace the body; text is encoded as UTF-8."""
        self.body = body.encode("utf-8") if isinstance(body, str) else bytes(body)

    def _head(self) -> str:
        status = (
            f"{self.version} {self.status_code} "
            f"{http_code_to_string(self.status_code)}\r\n"
        )
        fields = "".join(f"{key}: {value}\r\n" for key, value in self.headers)
        return status + fields + "\r\n"

    def to_bytes(self) -> bytes:
        """Return the full response as it is sent on the wire."""
        return self._head().encode("latin-1") + self.body

    def send(self, stream: BinaryIO) -> None:
        """Write the response to ``stream``; raises ``OSError`` on failure."""
        stream.write(self.to_bytes())
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()

    def describe(self) -> str:
        """Return a human-readable summary of the response."""
        lines = ["vvv Response vvv", f"{self.version} {self.status_code}"]
        lines.extend(f"{key}: {value}" for key, value in self.headers)
        lines.append("^^^ Response ^^^")
        return "\n".join(lines) + "\n"