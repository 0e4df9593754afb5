"""
Tests for move validation and parsing of typed coordinates.
"""

import pytest

from tictactoe.game_state import Board, Geometry, Mark
from tictactoe.move_validator import MoveError, MoveValidator, format_coords


@pytest.fixture
def validator():
    return MoveValidator()


@pytest.mark.parametrize(
    "text, geometry, expected",
    [
        ("2 3", Geometry.PLANAR, (1, 2)),
        ("  1,1 ", Geometry.PLANAR, (0, 0)),
        ("1, 2, 3", Geometry.CUBIC, (0, 1, 2)),
        ("3 3 3", Geometry.CUBIC, (2, 2, 2)),
        ("4 4", Geometry.PLANAR, (3, 3)),   # range is checked later
    ],
)
def test_parse_coordinates(validator, text, geometry, expected):
    result = validator.parse_coordinates(text, geometry)

    assert result.is_valid
    assert result.coords == expected
    assert result.error is None


@pytest.mark.parametrize(
    "text, geometry",
    [
        ("abc", Geometry.PLANAR),
        ("1 x", Geometry.PLANAR),
        ("", Geometry.PLANAR),
        ("1", Geometry.PLANAR),
        ("1 2", Geometry.CUBIC),
        ("1 2 3", Geometry.PLANAR),
        ("1.5 2", Geometry.PLANAR),
    ],
)
def test_parse_rejects_malformed_input(validator, text, geometry):
    result = validator.parse_coordinates(text, geometry)

    assert not result.is_valid
    assert result.error == MoveError.MALFORMED_INPUT
    assert result.coords is None
    assert result.error_message.startswith("Invalid input!")


def test_validate_free_cell(validator, planar_board):
    result = validator.validate_move(planar_board, (2, 0))

    assert result.is_valid
    assert result.coords == (2, 0)


def test_validate_occupied_cell(validator):
    board = Board.from_rows(["...", ".O.", "..."])

    result = validator.validate_move(board, (1, 1))

    assert not result.is_valid
    assert result.error == MoveError.INVALID_COORDINATE
    assert "already taken by O" in result.error_message
    assert "(2, 2)" in result.error_message


@pytest.mark.parametrize("coords", [(3, 3), (-1, 0), (0, 0, 0), ("a", 1)])
def test_validate_off_board(validator, planar_board, coords):
    result = validator.validate_move(planar_board, coords)

    assert not result.is_valid
    assert result.error == MoveError.INVALID_COORDINATE
    assert "off the board" in result.error_message


def test_validate_after_game_over(validator, planar_board):
    result = validator.validate_move(planar_board, (0, 0), game_over=True)

    assert not result.is_valid
    assert result.error_message == "Game is already over!"


def test_valid_moves_follow_scan_order(validator, cubic_board):
    cubic_board.apply_move((0, 0, 0), Mark.X)

    moves = validator.get_valid_moves(cubic_board)

    assert len(moves) == 26
    assert moves[0] == (0, 0, 1)
    assert validator.get_valid_moves(cubic_board, game_over=True) == []


def test_format_coords_is_one_based():
    assert format_coords((0, 2)) == "(1, 3)"
    assert format_coords((2, 0, 1)) == "(3, 1, 2)"
