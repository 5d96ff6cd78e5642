"""Integer arithmetic served under ``/calc/<operation>/<a>/<b>``."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Callable

from .request import Request
from .response import Response

_PREFIX = "/calc/"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_OPERAND = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


class CalcStatus(IntEnum):
    """Outcome of evaluating a calculation request."""

    OK = 0
    INVALID_OPERATION = 1
    INVALID_OPERAND = 2
    DIVISION_BY_ZERO = 3
    PATH_ERROR = 4


class _CalcError(Exception):
    def __init__(self, status: CalcStatus, http_status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.http_status = http_status
        self.message = message


def _wrap32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def _divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise _CalcError(CalcStatus.DIVISION_BY_ZERO, 400, "Division by zero\n")
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "add": lambda a, b: a + b,
    "multiply": lambda a, b: a * b,
    "subtract": lambda a, b: a - b,
    "divide": _divide,
}


def _parse_operand(text: str, position: int) -> int:
    error = _CalcError(
        CalcStatus.INVALID_OPERAND, 400, f"Invalid operand {position}\n"
    )
    if not _OPERAND.fullmatch(text):
        raise error
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise error
    return value


def _evaluate(path: str) -> int:
    if not path.startswith(_PREFIX):
        raise _CalcError(CalcStatus.PATH_ERROR, 404, "Resource not found\n")
    tokens = [token for token in path[len(_PREFIX):].split("/") if token]
    if len(tokens) < 3:
        raise _CalcError(
            CalcStatus.PATH_ERROR,
            400,
            "Malformed request: Missing operation or operands\n",
        )
    operation, first, second = tokens[:3]
    operand_1 = _parse_operand(first, 1)
    operand_2 = _parse_operand(second, 2)
    try:
        compute = _OPERATIONS[operation]
    except KeyError:
        raise _CalcError(
            CalcStatus.INVALID_OPERATION, 400, "Invalid operation\n"
        ) from None
    return _wrap32(compute(operand_1, operand_2))


def calc_handler(request: Request | None) -> Response:
    """Evaluate the calculation named by the request path."""
    response = Response()
    if request is None:
        response.status_code = 500
        response.set_body("Internal server error: Request is NULL\n")
        return response
    try:
        result = _evaluate(request.path)
    except _CalcError as error:
        response.status_code = error.http_status
        response.set_body(error.message)
        return response
    response.status_code = 200
    response.set_body(f"Result: {result}\n")
    return response