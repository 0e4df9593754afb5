"""
Shared pytest fixtures for the TicTacToe tests.
"""

import random

import pytest

from tictactoe.game_state import Board, Geometry
from tictactoe.win_checker import WinChecker


@pytest.fixture
def checker():
    return WinChecker()


@pytest.fixture
def planar_board():
    return Board(geometry=Geometry.PLANAR)


@pytest.fixture
def cubic_board():
    return Board(geometry=Geometry.CUBIC)


@pytest.fixture
def rng():
    """Seeded random source so AI picks are repeatable."""
    return random.Random(1234)


class ScriptedConsole:
    """
    Stands in for input()/print() in UI tests.

    Answers prompts from a list and raises EOFError once it runs out,
    just like a closed stdin.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, *args):
        self.lines.append(" ".join(str(arg) for arg in args))

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def console_factory():
    return ScriptedConsole
