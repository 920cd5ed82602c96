"""Exceptions raised by the position model."""

from __future__ import annotations


class ChessModelError(ValueError):
    """Base class for structurally malformed input."""


class FenError(ChessModelError):
    """Raised when a FEN record (or one of its fields) cannot be decoded."""


class SquareParseError(ChessModelError):
    """Raised when an algebraic square name is malformed."""
