"""The listening server and per-connection request loop."""

from __future__ import annotations

import getopt
import logging
import re
import socket
import sys
import threading

from .request import RequestError, read_request
from .router import route_request

logger = logging.getLogger(__name__)

DEFAULT_PORT = 80
MAX_CONNECTIONS = 5
USAGE = "Usage: calcserve [-p port]"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def handle_connection(sock: socket.socket) -> None:
    """Serve requests on ``sock`` until the client stops, then close it."""
    fileno = sock.fileno()
    logger.info("Handling connection on %d", fileno)
    with sock, sock.makefile("rb") as reader, sock.makefile("wb") as writer:
        while True:
            try:
                request = read_request(reader)
            except RequestError as error:
                logger.info("Dropping connection %d: %s", fileno, error)
                break
            if request is None:
                break
            response = route_request(request)
            if response is None:
                break
            try:
                response.send(writer)
            except OSError as error:
                logger.info("Send failed on connection %d: %s", fileno, error)
                break
    logger.info("done with connection %d", fileno)


def serve(port: int) -> None:
    """Listen on ``port`` and serve each connection on its own thread."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind(("", port))
        listener.listen(MAX_CONNECTIONS)
        print(f"Server listening on port {port}...", flush=True)
        while True:
            try:
                connection, _ = listener.accept()
            except OSError as error:
                logger.error("accept: %s", error)
                continue
            threading.Thread(
                target=handle_connection, args=(connection,), daemon=True
            ).start()


def parse_args(argv: list[str]) -> int:
    """Return the port selected by ``argv``; raise ``ValueError`` if invalid."""
    try:
        options, _ = getopt.getopt(list(argv), "p:")
    except getopt.GetoptError:
        raise ValueError(USAGE) from None
    port = DEFAULT_PORT
    for _, value in options:
        port = _atoi(value)
        if not 1 <= port <= 65535:
            raise ValueError(
                "Invalid port number. Port must be between 1 and 65535."
            )
    return port


def main(argv: list[str] | None = None) -> int:
    """Run the server from the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        port = parse_args(args)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    try:
        serve(port)
    except OSError as error:
        print(f"calcserve: {error}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0