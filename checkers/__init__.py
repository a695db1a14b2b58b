"""Checkers package: forward-only draughts rules engine.

Usage examples:
    from checkers import CheckersLogic, Move
    game = CheckersLogic()
    game.move(Move.parse("3a-4b"))
"""
from __future__ import annotations

from .errors import CheckersError, FormatError, RangeError, IllegalMoveError
from .types import Player, CellColor, EmptyCell, OccupiedCell, Cell, Coordinate, Move
from .board import Board
from .moves import LegalMoves, MoveGenerator
from .engine import CheckersLogic
from .strategy import MoveStrategy, RandomMoveStrategy, CheckersComputerPlayer, get_move_strategy

__all__ = [
    # Errors
    "CheckersError",
    "FormatError",
    "RangeError",
    "IllegalMoveError",

    # Values
    "Player",
    "CellColor",
    "EmptyCell",
    "OccupiedCell",
    "Cell",
    "Coordinate",
    "Move",

    # Board and rules
    "Board",
    "LegalMoves",
    "MoveGenerator",
    "CheckersLogic",

    # Move selection
    "MoveStrategy",
    "RandomMoveStrategy",
    "CheckersComputerPlayer",
    "get_move_strategy",
]
