from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from checkers.board import Board
from checkers.types import Coordinate, Move, Player

# Column steps for the two forward diagonals: left, right
_COL_DIRS: Tuple[int, int] = (-1, 1)


@dataclass(frozen=True)
class LegalMoves:
    """Legal moves for one player in one position.

    ``capturing_pieces`` and ``moving_pieces`` are the pieces found able to jump
    or step; ``moving_pieces`` is only scanned when nothing can jump.
    """

    player: Player
    capturing_pieces: Tuple[Coordinate, ...]
    moving_pieces: Tuple[Coordinate, ...]
    moves: Tuple[Move, ...]

    @property
    def captures_forced(self) -> bool:
        return bool(self.capturing_pieces)

    def __len__(self) -> int:
        return len(self.moves)

    def __contains__(self, move: object) -> bool:
        return move in self.moves


def captured_square(move: Move, player: Player) -> Coordinate:
    """Square of the piece jumped over by ``move``."""
    dc = -1 if move.source.col > move.target.col else 1
    return Coordinate(move.source.row + player.direction, move.source.col + dc)


class MoveGenerator:
    """Generates legal moves on a board.

    Pieces only ever step or jump forward diagonally; a player's forward
    direction is fixed for the whole game. If any piece can capture, only
    captures are generated.
    """

    def __init__(self, board: Board) -> None:
        self.board = board

    def _has_enemy_piece(self, row: int, col: int, player: Player, dc: int) -> bool:
        r, c = row + player.direction, col + dc
        return self.board.is_valid_coordinate(r, c) and \
            self.board.is_occupied_by_player(r, c, player.opponent())

    def can_jump(self, row: int, col: int, player: Player, dc: int) -> bool:
        r, c = row + 2 * player.direction, col + 2 * dc
        return self.board.is_valid_coordinate(r, c) and self.board.is_empty(r, c) and \
            self._has_enemy_piece(row, col, player, dc)

    def can_step(self, row: int, col: int, player: Player, dc: int) -> bool:
        r, c = row + player.direction, col + dc
        return self.board.is_valid_coordinate(r, c) and self.board.is_empty(r, c)

    def can_capture(self, row: int, col: int, player: Player) -> bool:
        """True if ``player`` has a piece on (row, col) with a jump available."""
        if not self.board.is_occupied_by_player(row, col, player):
            return False
        return any(self.can_jump(row, col, player, dc) for dc in _COL_DIRS)

    def can_move(self, row: int, col: int, player: Player) -> bool:
        if not self.board.is_occupied_by_player(row, col, player):
            return False
        return any(self.can_step(row, col, player, dc) for dc in _COL_DIRS)

    def capturing_pieces(self, player: Player) -> List[Coordinate]:
        return [p for p in self.board.pieces(player) if self.can_capture(p.row, p.col, player)]

    def moving_pieces(self, player: Player) -> List[Coordinate]:
        return [p for p in self.board.pieces(player) if self.can_move(p.row, p.col, player)]

    def capture_moves(self, pieces: List[Coordinate], player: Player) -> List[Move]:
        moves: List[Move] = []
        for piece in pieces:
            for dc in _COL_DIRS:
                if self.can_jump(piece.row, piece.col, player, dc):
                    target = Coordinate(piece.row + 2 * player.direction, piece.col + 2 * dc)
                    moves.append(Move(piece, target))
        return moves

    def simple_moves(self, pieces: List[Coordinate], player: Player) -> List[Move]:
        moves: List[Move] = []
        for piece in pieces:
            for dc in _COL_DIRS:
                if self.can_step(piece.row, piece.col, player, dc):
                    moves.append(Move(piece, Coordinate(piece.row + player.direction, piece.col + dc)))
        return moves

    def legal_moves(self, player: Player) -> LegalMoves:
        jumpers = self.capturing_pieces(player)
        if jumpers:
            return LegalMoves(player, tuple(jumpers), (), tuple(self.capture_moves(jumpers, player)))
        movers = self.moving_pieces(player)
        return LegalMoves(player, (), tuple(movers), tuple(self.simple_moves(movers, player)))


__all__ = [
    "LegalMoves",
    "MoveGenerator",
    "captured_square",
]
