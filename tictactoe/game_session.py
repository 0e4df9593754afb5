"""
Game session for console TicTacToe.
Runs the turn order and keeps the board, move history and result together.
"""

import logging
import random
from typing import Callable, List, Optional

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import Board, Coord, Mark, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import Outcome, WinChecker

logger = logging.getLogger(__name__)


# request_move(session, error_message) -> coords typed by the player
MoveRequest = Callable[["GameSession", Optional[str]], Coord]
# render(session) -> None, read-only view of the game
RenderCallback = Callable[["GameSession"], None]
# on_ai_move(session, coords) -> None
AIMoveCallback = Callable[["GameSession", Coord], None]


class GameSession:
    """
    One game (and its rematches) with a fixed configuration.

    Game flow:
    1. X moves first
    2. In single-player mode the AI answers for its mark
    3. After every move the board is checked for a win or a draw
    4. Otherwise the turn passes to the other mark
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the session.

        Args:
            config: Board, mode, difficulty and names. Never changes afterwards.
            rng: Random source for the AI, seed it for repeatable games.
        """
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else random.Random()

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.ai: Optional[AIPlayer] = None
        if self.config.is_single_player:
            self.ai = AIPlayer(self.config.ai_mark, self.config.difficulty, self.rng)

        self.reset()

    def reset(self):
        """Start a new game with the same configuration."""
        self.board = Board(geometry=self.config.geometry)
        self.current_mark = Mark.X
        self.moves: List[Move] = []
        self.outcome = Outcome()

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def is_ai_turn(self) -> bool:
        """True if the AI should play the current mark."""
        return self.ai is not None and self.current_mark == self.ai.player

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def valid_moves(self) -> List[Coord]:
        return self.validator.get_valid_moves(self.board, self.is_game_over)

    def submit_move(self, coords: Coord) -> ValidationResult:
        """
        Play the current mark at the given coordinates.

        Invalid moves change nothing and come back with an error message.

        Args:
            coords: 0-based coordinates.

        Returns:
            ValidationResult of the move.
        """
        result = self.validator.validate_move(self.board, coords, self.is_game_over)
        if not result.is_valid:
            logger.debug("Rejected move %r: %s", coords, result.error_message)
            return result

        mark = self.current_mark
        self.board.apply_move(result.coords, mark)
        self.moves.append(Move(mark=mark, coords=result.coords, move_number=len(self.moves) + 1))

        # Check for winner
        self.outcome = self.win_checker.evaluate(self.board)

        if self.is_game_over:
            logger.info("Game over after %d moves: %s", len(self.moves), self.outcome.kind.value)
        else:
            self.current_mark = mark.opposite()

        return result

    def play_ai_turn(self) -> Optional[Coord]:
        """
        Let the AI make its move.

        Returns:
            The coordinates the AI played, or None if it is not the AI's turn.
        """
        if self.is_game_over or not self.is_ai_turn:
            logger.warning("play_ai_turn called when it is not the AI's turn")
            return None

        move = self.ai.get_best_move(self.board)
        if move is None:
            return None

        self.submit_move(move)
        return move

    def run(
        self,
        request_move: MoveRequest,
        render: Optional[RenderCallback] = None,
        on_ai_move: Optional[AIMoveCallback] = None
    ) -> Outcome:
        """
        Play turns until someone wins or the board is full.

        Args:
            request_move: Asked for the human's move. Called again with the
                error message until it returns a valid move.
            render: Called before every turn and once at the end.
            on_ai_move: Called after each AI move.

        Returns:
            The final Outcome.
        """
        while not self.is_game_over:
            if render is not None:
                render(self)

            if self.is_ai_turn:
                move = self.play_ai_turn()
                if move is None:
                    break
                if on_ai_move is not None:
                    on_ai_move(self, move)
                continue

            error_message = None
            while True:
                result = self.submit_move(request_move(self, error_message))
                if result.is_valid:
                    break
                error_message = result.error_message

        if render is not None:
            render(self)

        return self.outcome

    def winner_name(self) -> Optional[str]:
        """Get the name of whoever won, or None."""
        if self.outcome.winner is None:
            return None
        return self.config.name_for(self.outcome.winner)
