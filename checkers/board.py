"""
The 8x8 checkers board: cells, pieces and the canonical text dump.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence

from checkers.errors import FormatError, IllegalMoveError, RangeError
from checkers.types import (
    BOARD_COLS,
    BOARD_ROWS,
    Cell,
    CellColor,
    Coordinate,
    EmptyCell,
    OccupiedCell,
    Player,
)

# Rows holding each side's pieces in the opening position
WHITE_HOME_ROWS = range(0, 3)
BLACK_HOME_ROWS = range(5, 8)

FILE_FOOTER = "    a   b   c   d   e   f   g   h"

_SYMBOLS = {Player.WHITE.symbol: Player.WHITE, Player.BLACK.symbol: Player.BLACK}


def _empty_cell(row: int, col: int) -> EmptyCell:
    return EmptyCell(CellColor.of(row, col))


class Board:
    """Represents the game board, the cells, and the pieces on the board.

    A new board holds the opening layout: WHITE on the dark squares of rows 0-2,
    BLACK on the dark squares of rows 5-7.
    """

    def __init__(self) -> None:
        self._cells: List[List[Cell]] = [
            [_empty_cell(r, c) for c in range(BOARD_COLS)] for r in range(BOARD_ROWS)
        ]
        for r in range(BOARD_ROWS):
            for c in range(BOARD_COLS):
                if CellColor.of(r, c) is not CellColor.DARK:
                    continue
                if r in WHITE_HOME_ROWS:
                    self._cells[r][c] = OccupiedCell(Player.WHITE)
                elif r in BLACK_HOME_ROWS:
                    self._cells[r][c] = OccupiedCell(Player.BLACK)

    @classmethod
    def from_layout(cls, lines: Sequence[str]) -> Board:
        """Build a position from 8 rows of 8 symbols, rank 8 first.

        ``X`` and ``O`` are pieces, ``_`` (or ``.``) is an empty square.
        Whitespace and ``|`` separators inside a row are ignored.
        """
        rows = [line.replace(" ", "").replace("|", "") for line in lines]
        if len(rows) != BOARD_ROWS or any(len(row) != BOARD_COLS for row in rows):
            raise FormatError(f"Layout must be {BOARD_ROWS} rows of {BOARD_COLS} cells")

        board = cls()
        for r, row in enumerate(rows):
            for c, symbol in enumerate(row):
                if symbol in ("_", "."):
                    board._cells[r][c] = _empty_cell(r, c)
                elif symbol in _SYMBOLS:
                    if CellColor.of(r, c) is not CellColor.DARK:
                        raise FormatError(f"Piece on light square {Coordinate(r, c)}")
                    board._cells[r][c] = OccupiedCell(_SYMBOLS[symbol])
                else:
                    raise FormatError(f"Unknown cell symbol {symbol!r}")
        return board

    def is_valid_coordinate(self, row: int, col: int) -> bool:
        return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS

    def _check(self, row: int, col: int) -> None:
        if not self.is_valid_coordinate(row, col):
            raise RangeError(f"Coordinate ({row}, {col}) is off the board")

    def cell(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self._cells[row][col]

    def is_occupied_by_player(self, row: int, col: int, player: Player) -> bool:
        """Checks whether a given cell holds a piece of ``player``.

        Callers are expected to validate the coordinate first; an invalid one
        raises RangeError.
        """
        cell = self.cell(row, col)
        return isinstance(cell, OccupiedCell) and cell.player is player

    def is_empty(self, row: int, col: int) -> bool:
        return isinstance(self.cell(row, col), EmptyCell)

    def remove_piece(self, row: int, col: int) -> None:
        """Sets the given coordinate to an empty cell of its fixed colour."""
        self._check(row, col)
        self._cells[row][col] = _empty_cell(row, col)

    def move_piece(self, source: Coordinate, target: Coordinate) -> None:
        """Moves whatever stands on ``source`` to ``target``.

        Raises:
            RangeError: either coordinate is off the board.
            IllegalMoveError: ``target`` is not empty.
        """
        self._check(source.row, source.col)
        self._check(target.row, target.col)
        if not self.is_empty(target.row, target.col):
            raise IllegalMoveError(f"Destination {target} is occupied")

        self._cells[target.row][target.col] = self._cells[source.row][source.col]
        self.remove_piece(source.row, source.col)

    def get_symbol(self, row: int, col: int) -> str:
        return self.cell(row, col).symbol

    def get_rows(self) -> int:
        return len(self._cells)

    def get_cols(self) -> int:
        return len(self._cells[0])

    def pieces(self, player: Player) -> Iterator[Coordinate]:
        """Yield the squares holding ``player``'s pieces in row-major order."""
        for r in range(self.get_rows()):
            for c in range(self.get_cols()):
                if self.is_occupied_by_player(r, c, player):
                    yield Coordinate(r, c)

    def count_pieces(self, player: Player) -> int:
        return sum(1 for _ in self.pieces(player))

    def __str__(self) -> str:
        # 8 | _ | O | _ | O | _ | O | _ | O |
        lines = []
        for r, row in enumerate(self._cells):
            cells = "".join(f" {cell.symbol} |" for cell in row)
            lines.append(f"{BOARD_ROWS - r} |{cells}")
        lines.append(FILE_FOOTER)
        return "\n".join(lines) + "\n"


__all__ = ["Board", "FILE_FOOTER", "WHITE_HOME_ROWS", "BLACK_HOME_ROWS"]
