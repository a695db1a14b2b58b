"""
Text console front end. Consumes only the engine's public surface.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from checkers.engine import CheckersLogic
from checkers.errors import FormatError
from checkers.strategy import CheckersComputerPlayer, MoveStrategy
from checkers.types import Move, Player

logger = logging.getLogger(__name__)

PLAYER_TURN_ANNOUNCEMENT = "Player {} - your turn.\n"
GAME_BEGIN_ANNOUNCEMENT = "Begin game. "
GAME_OVER_ANNOUNCEMENT = "Player {} has Won the Game!\n"
PROMPT_MOVE_MESSAGE = "Choose a cell position of piece to be moved and the new position (e.g., 3a-4b):\n"
PROMPT_PVP_PVE = "Enter 'P' if you want to play against another player; enter 'C' to play against computer.\n"
COMPUTER_MOVE_MESSAGE = "Computer plays {}\n"
LEGAL_MOVES_MESSAGE = "Legal moves: {}\n"
ERROR_INPUT = "ERROR: Invalid Input. Try Again.\n"
ERROR_MOVE = "ERROR: Invalid Move. Try Again.\n"
EXIT_COMMAND = "exit"


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class CheckersTextConsole:
    """Prompts and messages for a terminal game."""

    def __init__(self, input_fn: Callable[[], str] = input,
                 output_fn: Callable[[str], None] = _write_stdout) -> None:
        self._input = input_fn
        self._output = output_fn

    def print(self, text: str) -> None:
        self._output(text)

    def print_player_turn(self, player_name: str) -> None:
        self.print(PLAYER_TURN_ANNOUNCEMENT.format(player_name))

    def print_game_begin(self) -> None:
        self.print(GAME_BEGIN_ANNOUNCEMENT)

    def print_win(self, player_name: str) -> None:
        self.print(GAME_OVER_ANNOUNCEMENT.format(player_name))

    def print_input_error(self) -> None:
        self.print(ERROR_INPUT)

    def print_move_error(self) -> None:
        self.print(ERROR_MOVE)

    def prompt(self, text: str) -> str:
        self.print(text)
        return self._input().strip()

    def prompt_move(self) -> str:
        return self.prompt(PROMPT_MOVE_MESSAGE)

    def prompt_pvp(self) -> str:
        return self.prompt(PROMPT_PVP_PVE)


def _prompt_pve(console: CheckersTextConsole) -> bool:
    while True:
        answer = console.prompt_pvp().lower()
        if answer == "c":
            return True
        if answer == "p":
            return False
        console.print_input_error()


def _prompt_move(engine: CheckersLogic, console: CheckersTextConsole) -> Optional[Move]:
    # None means the user asked to quit
    while True:
        text = console.prompt_move()
        if text == EXIT_COMMAND:
            return None
        try:
            move = Move.parse(text)
        except FormatError:
            console.print_input_error()
            continue
        if not engine.is_move_valid(move):
            console.print_move_error()
            continue
        return move


def run_game(engine: CheckersLogic, console: CheckersTextConsole,
             vs_computer: Optional[bool] = None,
             strategy: Optional[MoveStrategy] = None,
             computer_side: Player = Player.WHITE,
             show_legal_moves: bool = False) -> Optional[Player]:
    """Play until the game is over and return the winner.

    ``vs_computer=None`` asks the user whether to play the computer.
    Returns None if the user typed ``exit``.
    """
    computer: Optional[CheckersComputerPlayer] = None
    first_loop = True

    while not engine.is_game_over():
        console.print(engine.get_board_string())
        if first_loop:
            console.print_game_begin()
            if vs_computer is None:
                vs_computer = _prompt_pve(console)
            if vs_computer:
                computer = CheckersComputerPlayer(engine, strategy)
            first_loop = False

        console.print_player_turn(engine.get_current_player_string())
        if computer is not None and engine.get_current_player() is computer_side:
            move = computer.calculate_move()
            console.print(COMPUTER_MOVE_MESSAGE.format(move))
        else:
            if show_legal_moves:
                console.print(LEGAL_MOVES_MESSAGE.format(", ".join(str(m) for m in engine.legal_moves())))
            move = _prompt_move(engine, console)
            if move is None:
                logger.info("Game abandoned by %s", engine.get_current_player().name)
                return None

        engine.move(move)

    console.print(engine.get_board_string())
    winner = engine.get_winner()
    logger.info("Game over: %s has no legal moves", engine.get_current_player().name)
    console.print_win(engine.get_next_player_string())
    return winner


__all__ = ["CheckersTextConsole", "run_game"]
