"""
Exceptions raised by the checkers engine.
"""
from __future__ import annotations


class CheckersError(Exception):
    """Base class for all engine errors."""


class FormatError(CheckersError, ValueError):
    """Coordinate or move text that does not match the expected notation."""


class RangeError(CheckersError, IndexError):
    """A board coordinate outside the 8x8 grid."""


class IllegalMoveError(CheckersError, ValueError):
    """A well-formed move that is not legal in the current position."""


__all__ = ["CheckersError", "FormatError", "RangeError", "IllegalMoveError"]
