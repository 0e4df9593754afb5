"""
Tests for the game session: turn order, results, AI turns and reset.
"""

import random

import pytest

from tictactoe.config import Difficulty, GameConfig, GameMode
from tictactoe.game_session import GameSession
from tictactoe.game_state import Board, Geometry, Mark
from tictactoe.move_validator import MoveError
from tictactoe.win_checker import OutcomeKind


@pytest.fixture
def two_player():
    config = GameConfig(
        mode=GameMode.TWO_PLAYER,
        player_one_name="Alice",
        player_two_name="Bob",
    )
    return GameSession(config, random.Random(0))


def _play(session, moves):
    for coords in moves:
        result = session.submit_move(coords)
        assert result.is_valid, result.error_message


def test_x_moves_first_and_turns_alternate(two_player):
    assert two_player.current_mark == Mark.X
    assert not two_player.is_ai_turn

    _play(two_player, [(1, 1)])
    assert two_player.current_mark == Mark.O

    _play(two_player, [(0, 0)])
    assert two_player.current_mark == Mark.X
    assert [move.mark for move in two_player.moves] == [Mark.X, Mark.O]
    assert two_player.last_move.coords == (0, 0)
    assert two_player.last_move.move_number == 2


def test_win_ends_the_game(two_player):
    _play(two_player, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

    assert two_player.is_game_over
    assert two_player.outcome.kind == OutcomeKind.WIN
    assert two_player.outcome.winner == Mark.X
    assert two_player.winner_name() == "Alice"
    # The winner stays the current mark
    assert two_player.current_mark == Mark.X
    assert two_player.valid_moves() == []


def test_moves_after_game_over_are_rejected(two_player):
    _play(two_player, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

    result = two_player.submit_move((2, 2))

    assert not result.is_valid
    assert result.error_message == "Game is already over!"
    assert two_player.board.get((2, 2)) == Mark.EMPTY


def test_draw(two_player):
    _play(two_player, [
        (0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
        (1, 2), (2, 1), (2, 0), (2, 2),
    ])

    assert two_player.outcome.kind == OutcomeKind.DRAW
    assert two_player.winner_name() is None
    assert two_player.board.move_count == 9


def test_invalid_move_changes_nothing(two_player):
    _play(two_player, [(1, 1)])
    before = two_player.board.copy()

    occupied = two_player.submit_move((1, 1))
    off_board = two_player.submit_move((5, 0))

    assert occupied.error == MoveError.INVALID_COORDINATE
    assert off_board.error == MoveError.INVALID_COORDINATE
    assert two_player.board == before
    assert two_player.current_mark == Mark.O
    assert len(two_player.moves) == 1


def test_ai_answers_in_single_player():
    session = GameSession(GameConfig(difficulty=Difficulty.HARD), random.Random(0))

    _play(session, [(1, 1)])
    assert session.is_ai_turn

    move = session.play_ai_turn()

    assert move == (0, 0)
    assert session.board.get((0, 0)) == Mark.O
    assert session.current_mark == Mark.X
    assert not session.is_ai_turn


def test_play_ai_turn_out_of_turn_does_nothing():
    session = GameSession(GameConfig(difficulty=Difficulty.HARD), random.Random(0))

    assert session.play_ai_turn() is None
    assert session.board.move_count == 0


def test_ai_first_takes_x():
    config = GameConfig(difficulty=Difficulty.HARD, ai_first=True, player_one_name="Kim")
    session = GameSession(config, random.Random(0))

    assert session.is_ai_turn
    assert session.play_ai_turn() == (1, 1)
    assert session.board.get((1, 1)) == Mark.X
    assert config.human_mark == Mark.O
    assert config.name_for(Mark.O) == "Kim"
    assert config.name_for(Mark.X) == "AI"


def test_reset_keeps_config(two_player):
    config = two_player.config
    _play(two_player, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

    two_player.reset()

    assert two_player.config is config
    assert two_player.board == Board()
    assert two_player.moves == []
    assert two_player.current_mark == Mark.X
    assert not two_player.is_game_over


def test_cube_session():
    config = GameConfig(geometry=Geometry.CUBIC, mode=GameMode.TWO_PLAYER)
    session = GameSession(config)

    _play(session, [(0, 0, 0), (0, 0, 1), (1, 1, 1), (0, 0, 2), (2, 2, 2)])

    assert session.outcome.winner == Mark.X
    assert session.outcome.line == ((0, 0, 0), (1, 1, 1), (2, 2, 2))


def test_run_asks_again_after_invalid_moves(two_player):
    script = [(0, 0), (0, 0), (9, 9), (1, 0), (0, 1), (1, 1), (0, 2)]
    errors = []
    renders = []

    def request_move(session, error_message):
        errors.append(error_message)
        return script.pop(0)

    outcome = two_player.run(request_move, render=lambda session: renders.append(session.board.move_count))

    assert outcome.winner == Mark.X
    assert errors[0] is None
    assert "already taken" in errors[2]
    assert "off the board" in errors[3]
    assert errors[4] is None
    assert script == []
    # Once per turn plus once at the end
    assert renders == [0, 1, 2, 3, 4, 5]


def test_run_against_minimax_never_loses():
    session = GameSession(GameConfig(difficulty=Difficulty.IMPOSSIBLE), random.Random(0))
    ai_moves = []

    outcome = session.run(
        lambda s, error: s.board.empty_cells()[0],
        on_ai_move=lambda s, coords: ai_moves.append(coords),
    )

    assert outcome.is_terminal
    assert outcome.winner != Mark.X
    assert ai_moves
    assert all(session.board.get(coords) == Mark.O for coords in ai_moves)
