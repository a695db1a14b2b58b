"""
Value types shared by the board, the rule engine and its collaborators.

This module provides:
- The two players and their fixed forward direction
- The closed cell variant (empty square or occupied square)
- Coordinate and Move values with their text notation ("3a", "3a-4b")
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from checkers.errors import FormatError

BOARD_ROWS = 8
BOARD_COLS = 8
FIRST_FILE = "a"

_COORDINATE_RE: re.Pattern = re.compile(r"([1-8])([a-h])")
_MOVE_RE: re.Pattern = re.compile(r"([1-8][a-h])-([1-8][a-h])")


class Player(Enum):
    """The two sides. The value is the display symbol."""

    WHITE = "O"
    BLACK = "X"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def direction(self) -> int:
        """Row increment of a forward step: WHITE moves down, BLACK moves up."""
        return 1 if self is Player.WHITE else -1

    def opponent(self) -> Player:
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    def __str__(self) -> str:
        return self.value


class CellColor(Enum):
    """Square colour. Pieces only ever stand on DARK squares."""

    DARK = "dark"
    LIGHT = "light"

    @property
    def symbol(self) -> str:
        return "_"

    @staticmethod
    def of(row: int, col: int) -> CellColor:
        return CellColor.DARK if (row + col) % 2 == 1 else CellColor.LIGHT


@dataclass(frozen=True)
class EmptyCell:
    color: CellColor

    @property
    def symbol(self) -> str:
        return self.color.symbol


@dataclass(frozen=True)
class OccupiedCell:
    player: Player

    @property
    def symbol(self) -> str:
        return self.player.symbol


Cell = Union[EmptyCell, OccupiedCell]


@dataclass(frozen=True, order=True)
class Coordinate:
    """A board square; row 0 is rank 8, col 0 is file a."""

    row: int
    col: int

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Parse notation such as ``"4g"`` or ``"1a"`` (rank digit, then file letter)."""
        match = _COORDINATE_RE.fullmatch(text)
        if match is None:
            raise FormatError(f"Invalid coordinate: {text!r}")
        rank, file = match.groups()
        return cls(BOARD_ROWS - int(rank), ord(file) - ord(FIRST_FILE))

    def __str__(self) -> str:
        return f"{BOARD_ROWS - self.row}{chr(ord(FIRST_FILE) + self.col)}"


@dataclass(frozen=True, order=True)
class Move:
    """A single step or jump of one piece."""

    source: Coordinate
    target: Coordinate

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse notation such as ``"3a-4b"``."""
        match = _MOVE_RE.fullmatch(text)
        if match is None:
            raise FormatError(f"Invalid move: {text!r}")
        return cls(Coordinate.parse(match.group(1)), Coordinate.parse(match.group(2)))

    @property
    def is_jump(self) -> bool:
        return abs(self.target.row - self.source.row) == 2

    def __str__(self) -> str:
        return f"{self.source}-{self.target}"


__all__ = [
    "BOARD_ROWS",
    "BOARD_COLS",
    "Player",
    "CellColor",
    "EmptyCell",
    "OccupiedCell",
    "Cell",
    "Coordinate",
    "Move",
]
