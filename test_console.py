from checkers.board import Board
from checkers.console import (
    ERROR_INPUT,
    ERROR_MOVE,
    CheckersTextConsole,
    run_game,
)
from checkers.engine import CheckersLogic
from checkers.strategy import RandomMoveStrategy
from checkers.types import Player

# Helpers

def scripted_console(*answers):
    replies = iter(answers)
    output = []
    console = CheckersTextConsole(input_fn=lambda: next(replies), output_fn=output.append)
    return console, output


def test_bad_input_is_reprompted_until_exit():
    game = CheckersLogic()
    console, output = scripted_console("x", "p", "10z", "4a-5b", "3a-4b", "exit")

    assert run_game(game, console) is None
    assert output.count(ERROR_INPUT) == 2
    assert output.count(ERROR_MOVE) == 1
    assert "Begin game. " in output
    assert "Player O - your turn.\n" in output
    assert game.get_current_player() is Player.WHITE


def test_two_player_game_to_the_end():
    board = Board.from_layout([
        "________",
        "________",
        "________",
        "____O___",
        "________",
        "__O_____",
        "_X______",
        "________",
    ])
    game = CheckersLogic(board=board)
    console, output = scripted_console(" 2b-4d ", "4d-6f")

    assert run_game(game, console, vs_computer=False) is Player.BLACK
    assert output.count("Player X - your turn.\n") == 2
    assert output[-1] == "Player X has Won the Game!\n"


def test_game_over_is_logged_once_by_the_loop(caplog):
    board = Board.from_layout([
        "________",
        "________",
        "________",
        "____O___",
        "________",
        "__O_____",
        "_X______",
        "________",
    ])
    game = CheckersLogic(board=board)
    console, _ = scripted_console("2b-4d", "4d-6f")

    with caplog.at_level("INFO"):
        run_game(game, console, vs_computer=False)
    over = [r for r in caplog.records if "Game over" in r.getMessage()]
    assert [r.name for r in over] == ["checkers.console"]
    assert over[0].getMessage() == "Game over: WHITE has no legal moves"


def test_computer_plays_its_side():
    board = Board.from_layout([
        "________",
        "________",
        "_O______",
        "__X_____",
        "________",
        "________",
        "________",
        "________",
    ])
    game = CheckersLogic(Player.WHITE, board=board)
    console, output = scripted_console()

    winner = run_game(game, console, vs_computer=True, strategy=RandomMoveStrategy(seed=0))
    assert winner is Player.WHITE
    assert "Computer plays 6b-4d\n" in output
    assert output[-1] == "Player O has Won the Game!\n"


def test_legal_moves_are_listed_on_request():
    game = CheckersLogic()
    console, output = scripted_console("exit")
    run_game(game, console, vs_computer=False, show_legal_moves=True)
    assert "Legal moves: 3a-4b, 3c-4b, 3c-4d, 3e-4d, 3e-4f, 3g-4f, 3g-4h\n" in output
