# figure_service/core/domain/exceptions.py
from typing import Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Coordinate Input Errors ---

class CoordinateError(DomainError):
    """
    Raised when coordinate input is rejected before reaching the geometry.

    ``reason`` is the short, stable name of the failure; ``message`` is the
    rendered text returned to clients (``"error: <reason>"``).
    """
    reason: str = "bad format"

    def __init__(self, token: Optional[str] = None):
        self.token = token
        super().__init__(f"error: {self.reason}")

class BadFormatError(CoordinateError):
    """Raised when a token is not a base-10 signed integer, or the request shape is malformed."""
    reason = "bad format"

class OutOfRangeError(CoordinateError):
    """Raised when a coordinate parses but falls outside [-100, 100]."""
    reason = "out of range"

class EmptyStringError(CoordinateError):
    """Raised when no coordinate tokens are supplied."""
    reason = "empty string"

class OneCoordError(CoordinateError):
    """Raised when exactly one coordinate token is supplied."""
    reason = "one coord"

class TooMuchCoordsError(CoordinateError):
    """Raised when more than two coordinate tokens are supplied."""
    reason = "too much coords"
