"""Dispatch of requests to handlers, and the built-in handlers."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Callable

from .calc import calc_handler
from .request import Request
from .response import Response

Handler = Callable[[Request], Response]


@dataclass(frozen=True)
class Route:
    """A method and path pattern bound to a handler."""

    method: str
    path: str
    full_match: bool
    handler: Handler

    def matches(self, request: Request) -> bool:
        """Return whether this route accepts ``request``."""
        if self.method != request.method:
            return False
        if self.full_match:
            return request.path == self.path
        return request.path.startswith(self.path)


@dataclass(frozen=True)
class ContentType:
    """The media type served for a file extension."""

    extension: str
    content_type: str
    as_file: bool


CONTENT_TYPES = (
    ContentType(".html", "text/html", False),
    ContentType(".css", "text/css", False),
    ContentType(".js", "application/javascript", False),
    ContentType(".jpg", "image/jpeg", True),
    ContentType(".png", "image/png", True),
    ContentType(".gif", "image/gif", True),
    ContentType(".md", "text/markdown", True),
)

DEFAULT_CONTENT_TYPE = ContentType("", "text/plain", True)


def content_type_for_file(path: str) -> ContentType:
    """Return the content type for ``path`` from the text after its last dot."""
    dot = path.rfind(".")
    if dot < 0:
        return DEFAULT_CONTENT_TYPE
    extension = path[dot:]
    return next(
        (ct for ct in CONTENT_TYPES if ct.extension == extension),
        DEFAULT_CONTENT_TYPE,
    )


def stats_handler(request: Request) -> Response:
    """Serve the statistics page."""
    response = Response(status_code=200)
    response.set_body("Stats go here\n")
    return response


def bad_request_handler(request: Request) -> Response:
    """Answer with 400 Bad Request."""
    response = Response(status_code=400)
    response.set_body("Bad request\n")
    return response


def no_resource_handler(request: Request) -> Response:
    """Answer with 404 naming the requested path."""
    response = Response(status_code=404)
    response.set_body(f"Resource not found: {request.path}\n")
    return response


def internal_error(request: Request) -> Response:
    """Answer a failure while serving; reported as a missing resource."""
    response = Response(status_code=404)
    response.set_body(f"Resource not found: {request.path}\n")
    return response


def static_handler(request: Request) -> Response:
    """Serve a regular file relative to the working directory."""
    path = request.path
    if "../" in path or "/.." in path:
        return bad_request_handler(request)
    target = path[1:]
    try:
        info = os.stat(target)
    except (OSError, ValueError):
        return no_resource_handler(request)
    if not stat.S_ISREG(info.st_mode):
        return bad_request_handler(request)
    try:
        with open(target, "rb") as handle:
            data = handle.read()
    except OSError:
        return no_resource_handler(request)
    if len(data) != info.st_size:
        return internal_error(request)

    response = Response(body=data)
    response.add_header("Content-Length", str(len(data)))
    content_type = content_type_for_file(path)
    if content_type.as_file:
        slash = path.rfind("/")
        if slash < 0:
            return internal_error(request)
        response.add_header(
            "Content-Disposition", f'inline; filename="{path[slash + 1:]}"'
        )
    response.add_header("Content-Type", content_type.content_type)
    response.status_code = 200
    return response


ROUTES = (
    Route("GET", "/stats", True, stats_handler),
    Route("GET", "/static/", False, static_handler),
    Route("GET", "/calc/", False, calc_handler),
    Route("GET", "", False, no_resource_handler),
)


def route_request(request: Request) -> Response | None:
    """Run the first matching route's handler; ``None`` if no route matches."""
    return next(
        (route.handler(request) for route in ROUTES if route.matches(request)),
        None,
    )