"""
Turn state machine for a game of forward-only checkers.

The engine owns a Board and the player to move. Legal moves are recomputed
from the board and the current player every time they are needed; nothing is
carried over between calls.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from checkers.board import Board
from checkers.errors import IllegalMoveError
from checkers.moves import LegalMoves, MoveGenerator, captured_square
from checkers.types import Move, Player

logger = logging.getLogger(__name__)


class CheckersLogic:
    """Holds the board and whose turn it is, and applies moves.

    A capture that lands on a square from which the same piece can capture
    again keeps the turn with the mover. Any other move passes the turn.
    """

    def __init__(self, starting_player: Player = Player.BLACK,
                 board: Optional[Board] = None) -> None:
        self._board = board if board is not None else Board()
        self._generator = MoveGenerator(self._board)
        self._current_player = starting_player

    def _calc_moves(self) -> LegalMoves:
        return self._generator.legal_moves(self._current_player)

    def _jump(self, move: Move) -> None:
        self._board.move_piece(move.source, move.target)
        taken = captured_square(move, self._current_player)
        self._board.remove_piece(taken.row, taken.col)
        logger.debug("%s captures at %s", self._current_player.name, taken)

    def _pass_turn(self) -> None:
        self._current_player = self._current_player.opponent()

    def is_move_valid(self, move: Move) -> bool:
        return move in self._calc_moves()

    def is_game_over(self) -> bool:
        """The game ends when the player to move has no legal move."""
        return len(self._calc_moves()) == 0

    def get_winner(self) -> Optional[Player]:
        if not self.is_game_over():
            return None
        return self._current_player.opponent()

    def move(self, move: Move) -> None:
        """Apply ``move`` for the current player.

        Jumps remove the captured piece. The turn passes unless the jumping
        piece can capture again from its landing square.

        Raises:
            IllegalMoveError: ``move`` is not legal; the game is left unchanged.
        """
        legal = self._calc_moves()
        if move not in legal:
            logger.debug("Rejected %s for %s", move, self._current_player.name)
            raise IllegalMoveError(f"Illegal move {move} for player {self._current_player}")

        player = self._current_player
        if legal.captures_forced:
            self._jump(move)
            if self._generator.can_capture(move.target.row, move.target.col, player):
                logger.debug("%s continues capturing from %s", player.name, move.target)
            else:
                self._pass_turn()
        else:
            self._board.move_piece(move.source, move.target)
            self._pass_turn()
        logger.debug("%s played %s", player.name, move)

    def legal_moves(self) -> List[Move]:
        return list(self._calc_moves().moves)

    def get_move_count(self) -> int:
        return len(self._calc_moves())

    def get_move(self, index: int) -> Move:
        """Return the ``index``-th legal move in generation order."""
        moves = self._calc_moves().moves
        if not 0 <= index < len(moves):
            raise IndexError(f"Move index {index} out of range [0, {len(moves)})")
        return moves[index]

    def get_current_player(self) -> Player:
        return self._current_player

    def get_current_player_string(self) -> str:
        return self._current_player.symbol

    def get_next_player_string(self) -> str:
        return self._current_player.opponent().symbol

    def get_board_string(self) -> str:
        return str(self._board)

    def get_symbol(self, row: int, col: int) -> str:
        return self._board.get_symbol(row, col)

    @property
    def board(self) -> Board:
        return self._board


__all__ = ["CheckersLogic"]
