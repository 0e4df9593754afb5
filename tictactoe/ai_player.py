"""
AI player for console TicTacToe.
Four strategies, from random moves up to a full Minimax search.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Type

from .config import Difficulty, GameSettings
from .game_state import Board, Coord, Geometry, Mark
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class MoveStrategy(ABC):
    """
    One way of choosing the AI's next move.

    Strategies try moves on the live board and always take them back
    before returning, so the board is left exactly as it was found.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source for picks and tie-breaks. Pass a seeded
                random.Random to make games repeatable.
        """
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()

        # Keep track of how many positions the last search looked at (for debugging)
        self.moves_evaluated = 0

    @abstractmethod
    def select_move(self, board: Board, ai_mark: Mark, human_mark: Mark) -> Optional[Coord]:
        """
        Choose a move.

        Args:
            board: Current board (not already won or drawn).
            ai_mark: The mark being played.
            human_mark: The opponent's mark.

        Returns:
            Coordinates of an empty cell, or None if the board is full.
        """


class RandomStrategy(MoveStrategy):
    """Easy: any empty cell, uniformly at random."""

    def select_move(self, board: Board, ai_mark: Mark, human_mark: Mark) -> Optional[Coord]:
        empty_cells = board.empty_cells()
        if not empty_cells:
            return None
        return self.rng.choice(empty_cells)


class HeuristicStrategy(RandomStrategy):
    """
    Medium: win if possible, otherwise block, otherwise random.
    """

    def select_move(self, board: Board, ai_mark: Mark, human_mark: Mark) -> Optional[Coord]:
        # Offense first
        move = self.find_winning_move(board, ai_mark)
        if move is not None:
            logger.debug("Taking the win at %s", move)
            return move

        # Then defense: take the cell the opponent would win on
        move = self.find_winning_move(board, human_mark)
        if move is not None:
            logger.debug("Blocking at %s", move)
            return move

        return self._fallback_move(board, ai_mark, human_mark)

    def _fallback_move(self, board: Board, ai_mark: Mark, human_mark: Mark) -> Optional[Coord]:
        return super().select_move(board, ai_mark, human_mark)

    def find_winning_move(self, board: Board, mark: Mark) -> Optional[Coord]:
        """
        Find the first empty cell (in scan order) that wins for a mark.

        Args:
            board: Board to search.
            mark: Whose win to look for.

        Returns:
            Coordinates of the winning cell, or None.
        """
        for coords in board.empty_cells():
            board.apply_move(coords, mark)
            wins = self.win_checker.check_winner(board) == mark
            board.undo_move(coords)

            if wins:
                return coords
        return None


class PositionalStrategy(HeuristicStrategy):
    """
    Hard: win, block, then center, then corners, then random.

    The center/corner preference only exists for the flat board. On the
    cube this plays exactly like HeuristicStrategy.
    """

    def _fallback_move(self, board: Board, ai_mark: Mark, human_mark: Mark) -> Optional[Coord]:
        if board.geometry == Geometry.PLANAR:
            for coords in [GameSettings.CENTER] + GameSettings.CORNERS:
                if board.is_valid_move(coords):
                    return coords

        return super()._fallback_move(board, ai_mark, human_mark)


class MinimaxStrategy(PositionalStrategy):
    """
    Impossible: plays optimally on the flat board using Minimax.

    The AI will always win if possible, block the opponent if needed,
    and never lose (at worst, draw). The search is exhaustive and unpruned.

    The cube is too big to search this way, so there the strategy falls
    back to PositionalStrategy (which on the cube means win, block, random).
    """

    def select_move(self, board: Board, ai_mark: Mark, human_mark: Mark) -> Optional[Coord]:
        if board.geometry != Geometry.PLANAR:
            return super().select_move(board, ai_mark, human_mark)

        best_score = float('-inf')
        best_move = None

        # First move with the strictly best score wins ties
        for coords, score in self.score_moves(board, ai_mark, human_mark):
            if score > best_score:
                best_score = score
                best_move = coords

        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %s)",
            self.moves_evaluated, best_move, best_score
        )
        return best_move

    def score_moves(
        self,
        board: Board,
        ai_mark: Mark,
        human_mark: Mark
    ) -> List[Tuple[Coord, float]]:
        """
        Score every move the AI could make now.

        Args:
            board: Current flat board.
            ai_mark: The mark being played.
            human_mark: The opponent's mark.

        Returns:
            (coords, score) pairs in scan order. A win n plies after this
            move scores 10 - n, a loss scores n - 10, a draw 0.
        """
        self.moves_evaluated = 0
        scores = []

        for coords in board.empty_cells():
            # Try this move
            board.apply_move(coords, ai_mark)
            score = self._minimax(board, 0, False, ai_mark, human_mark)
            board.undo_move(coords)

            scores.append((coords, score))

        return scores

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        ai_mark: Mark,
        human_mark: Mark
    ) -> float:
        """
        Minimax algorithm.

        Args:
            board: Position to evaluate (the last move is already on it).
            depth: Plies played since the root move.
            is_maximizing: True if it's the AI's turn.
            ai_mark: The maximizing mark.
            human_mark: The minimizing mark.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        # Check terminal states
        winner = self.win_checker.check_winner(board)

        if winner == ai_mark:
            return GameSettings.WIN_SCORE - depth  # Win (prefer faster wins)
        elif winner == human_mark:
            return depth - GameSettings.WIN_SCORE  # Loss (prefer slower losses)
        elif board.is_full():
            return 0  # Draw

        if is_maximizing:
            max_score = float('-inf')
            for coords in board.empty_cells():
                board.apply_move(coords, ai_mark)
                score = self._minimax(board, depth + 1, False, ai_mark, human_mark)
                board.undo_move(coords)
                max_score = max(max_score, score)
            return max_score
        else:
            min_score = float('inf')
            for coords in board.empty_cells():
                board.apply_move(coords, human_mark)
                score = self._minimax(board, depth + 1, True, ai_mark, human_mark)
                board.undo_move(coords)
                min_score = min(min_score, score)
            return min_score


# Which strategy plays at which difficulty
STRATEGIES: Dict[Difficulty, Type[MoveStrategy]] = {
    Difficulty.EASY: RandomStrategy,
    Difficulty.MEDIUM: HeuristicStrategy,
    Difficulty.HARD: PositionalStrategy,
    Difficulty.IMPOSSIBLE: MinimaxStrategy,
}


class AIPlayer:
    """
    An AI that plays one mark at a fixed difficulty.

    It holds no game state between turns: every call looks at the board
    it is given and picks a move with the strategy for its difficulty.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        difficulty: Difficulty = Difficulty.IMPOSSIBLE,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            difficulty: Strength of play.
            rng: Random source shared by the random picks.
        """
        self.player = player
        self.difficulty = difficulty
        self.strategy = STRATEGIES[difficulty](rng)

    @property
    def moves_evaluated(self) -> int:
        return self.strategy.moves_evaluated

    def get_best_move(self, board: Board) -> Optional[Coord]:
        """
        Get the move for the current position.

        Args:
            board: Current board.

        Returns:
            Coordinates of the chosen move, or None if no moves available.
        """
        valid_moves = board.empty_cells()

        if not valid_moves:
            logger.warning("AI asked to move on a full board")
            return None

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        move = self.strategy.select_move(board, self.player, self.player.opposite())

        logger.info(
            "AI (%s, %s) plays %s",
            self.player.value, self.difficulty.name.lower(), move
        )
        return move
