"""Exception types raised by the hex coordinate API."""

from __future__ import annotations


class HexError(Exception):
    """Base class for hex coordinate errors."""


class InvalidRadiusError(HexError, ValueError):
    """Raised when a traversal distance or radius is out of bounds."""


class CoordinateOverflowError(HexError, OverflowError):
    """Raised when a coordinate exceeds the configured magnitude limit."""


class HexParseError(HexError, ValueError):
    """Raised when the text form of a hex cannot be parsed."""
