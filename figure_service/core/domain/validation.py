# figure_service/core/domain/validation.py
"""
Parsing of raw coordinate text into validated domain values.

Nothing outside this module should turn user text into integers: every
rejection is raised here as a ``CoordinateError`` subclass, before any
geometry runs.
"""

import re
from typing import Iterator

from figure_service.core.domain.exceptions import (
    BadFormatError,
    EmptyStringError,
    OneCoordError,
    OutOfRangeError,
    TooMuchCoordsError,
)
from figure_service.core.domain.models import COORD_MAX, COORD_MIN, Point

# ASCII digits only, optional sign, nothing else (no blanks, no "1_000").
_INTEGER_RE = re.compile(r"[+-]?(?P<digits>[0-9]+)")
_ASCII_WHITESPACE_RE = re.compile(r"[^ \t\n\f\r]+")

# Longer magnitudes are out of range without converting them at all.
_MAX_DIGITS = len(str(max(abs(COORD_MIN), abs(COORD_MAX))))


def parse_coord(token: str) -> int:
    """
    Parse one coordinate token.

    Raises:
        BadFormatError: the token is not a base-10 signed integer.
        OutOfRangeError: the integer lies outside [COORD_MIN, COORD_MAX].
    """
    match = _INTEGER_RE.fullmatch(token)
    if match is None:
        raise BadFormatError(token)

    digits = match.group("digits").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise OutOfRangeError(token)

    value = -int(digits) if token.startswith("-") else int(digits)
    if not COORD_MIN <= value <= COORD_MAX:
        raise OutOfRangeError(token)
    return value


def iter_tokens(line: str) -> Iterator[str]:
    """Yield the ASCII-whitespace separated tokens of ``line``."""
    for match in _ASCII_WHITESPACE_RE.finditer(line):
        yield match.group(0)


def parse_line(line: str) -> Point:
    """
    Parse a "<x> <y>" line into a Point.

    Tokens are consumed left to right and the first problem wins, so
    ``"abc"`` is a format error rather than a missing second coordinate.
    """
    tokens = iter_tokens(line)

    x_token = next(tokens, None)
    if x_token is None:
        raise EmptyStringError()
    x = parse_coord(x_token)

    y_token = next(tokens, None)
    if y_token is None:
        raise OneCoordError()
    y = parse_coord(y_token)

    extra = next(tokens, None)
    if extra is not None:
        raise TooMuchCoordsError(extra)

    return Point(x=x, y=y)


def parse_pair(x_token: str, y_token: str) -> Point:
    """Parse two separately delivered tokens (e.g. query parameters)."""
    return Point(x=parse_coord(x_token), y=parse_coord(y_token))
