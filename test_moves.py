import pytest

from checkers.board import Board
from checkers.moves import MoveGenerator, captured_square
from checkers.types import Coordinate, Move, Player

# Helpers

def make_board(*rows):
    """Board from the given top rows; remaining rows are empty."""
    lines = list(rows) + ["________"] * (8 - len(rows))
    return Board.from_layout(lines)


def moves_as_text(moves):
    return [str(m) for m in moves]


def moves_for(board, player):
    return list(MoveGenerator(board).legal_moves(player).moves)


def test_simple_moves_initial_position():
    board = Board()
    legal = MoveGenerator(board).legal_moves(Player.BLACK)
    assert not legal.captures_forced
    assert len(legal) == 7
    assert moves_as_text(legal.moves) == [
        "3a-4b", "3c-4b", "3c-4d", "3e-4d", "3e-4f", "3g-4f", "3g-4h",
    ]


def test_white_moves_down_the_board():
    legal = moves_for(Board(), Player.WHITE)
    assert len(legal) == 7
    assert all(m.target.row == m.source.row + 1 for m in legal)


def test_captures_are_forced():
    board = make_board(
        "________",
        "________",
        "________",
        "________",
        "________",
        "__O_____",
        "_X______",
        "______X_",
    )
    legal = MoveGenerator(board).legal_moves(Player.BLACK)
    assert legal.captures_forced
    assert legal.capturing_pieces == (Coordinate(6, 1),)
    assert moves_as_text(legal.moves) == ["2b-4d"]
    assert Move.parse("1g-2f") not in legal
    assert Move.parse("2b-4d") in legal


def test_piece_can_capture_both_ways():
    board = make_board(
        "________",
        "________",
        "________",
        "________",
        "________",
        "O_O_____",
        "_X______",
    )
    assert moves_as_text(moves_for(board, Player.BLACK)) == ["2b-4d"]

    board = make_board(
        "________",
        "________",
        "________",
        "________",
        "________",
        "__O_O___",
        "___X____",
    )
    assert moves_as_text(moves_for(board, Player.BLACK)) == ["2d-4b", "2d-4f"]


def test_capture_needs_empty_landing_square():
    board = make_board(
        "________",
        "________",
        "________",
        "________",
        "___O____",
        "__O_____",
        "_X______",
    )
    legal = MoveGenerator(board).legal_moves(Player.BLACK)
    assert not legal.captures_forced
    assert moves_as_text(legal.moves) == ["2b-3a"]


def test_capture_needs_on_board_landing_square():
    board = make_board(
        "_O_O____",
        "__X_____",
    )
    legal = MoveGenerator(board).legal_moves(Player.BLACK)
    assert not legal.captures_forced
    assert len(legal) == 0


def test_no_backward_moves_or_promotion():
    # BLACK on the far rank and WHITE on the near rank are stuck for good
    board = make_board(
        "_X______",
        "________",
        "________",
        "________",
        "________",
        "________",
        "________",
        "O_______",
    )
    assert moves_for(board, Player.BLACK) == []
    assert moves_for(board, Player.WHITE) == []


def test_no_backward_capture():
    board = make_board(
        "________",
        "________",
        "________",
        "________",
        "________",
        "________",
        "_X______",
        "O_______",
    )
    assert moves_as_text(moves_for(board, Player.BLACK)) == ["2b-3a", "2b-3c"]
    assert moves_for(board, Player.WHITE) == []


def test_edge_column_has_one_step():
    board = make_board(
        "________",
        "________",
        "________",
        "________",
        "________",
        "________",
        "_______X",
    )
    assert moves_as_text(moves_for(board, Player.BLACK)) == ["2h-3g"]


@pytest.mark.parametrize("move, player, expected", [
    ("2b-4d", Player.BLACK, Coordinate(5, 2)),
    ("2d-4b", Player.BLACK, Coordinate(5, 2)),
    ("7c-5e", Player.WHITE, Coordinate(2, 3)),
    ("7c-5a", Player.WHITE, Coordinate(2, 1)),
])
def test_captured_square(move, player, expected):
    assert captured_square(Move.parse(move), player) == expected


def test_package_exports_resolve():
    import checkers
    import checkers.moves

    assert all(hasattr(checkers, name) for name in checkers.__all__)
    assert set(checkers.moves.__all__) == {"LegalMoves", "MoveGenerator", "captured_square"}
