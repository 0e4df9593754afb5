"""
Console TicTacToe
=================
TicTacToe on a classic 3x3 board or a 3x3x3 cube, against a friend or
against an AI with four difficulty levels (the hardest never loses on
the 3x3 board).

This package is the game engine: board, rules, AI and turn order.
The console front end lives in ui.py.
"""

__version__ = "1.0.0"

from .game_state import Board, Coord, Geometry, Mark, Move
from .config import Difficulty, GameConfig, GameMode, GameSettings
from .win_checker import Outcome, OutcomeKind, WinChecker
from .move_validator import MoveError, MoveValidator, ValidationResult
from .ai_player import (
    AIPlayer,
    HeuristicStrategy,
    MinimaxStrategy,
    MoveStrategy,
    PositionalStrategy,
    RandomStrategy,
)
from .game_session import GameSession
