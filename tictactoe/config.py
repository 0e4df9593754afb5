"""
Game configuration for console TicTacToe.
Board geometry, game mode, AI difficulty and display settings.
"""

from enum import Enum
from dataclasses import dataclass

from .game_state import BOARD_SIZE, Geometry, Mark


class GameMode(Enum):
    """Who is playing."""
    SINGLE_PLAYER = "single"
    TWO_PLAYER = "multi"


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1        # Random moves
    MEDIUM = 2      # Win or block, else random
    HARD = 3        # Win, block, center/corners, else random
    IMPOSSIBLE = 4  # Full minimax (planar board only)


class GameSettings:
    """
    Fixed settings for the game.
    Change these values to tweak the look of the console!
    """

    # ==================== BOARD SETTINGS ====================
    # Same axis length as the board itself (3 for both the 3x3 and the 3x3x3 board)
    BOARD_SIZE = BOARD_SIZE

    # Positional preferences (planar board only)
    CENTER = (BOARD_SIZE // 2, BOARD_SIZE // 2)
    CORNERS = [
        (0, 0),                                # top-left
        (0, BOARD_SIZE - 1),                   # top-right
        (BOARD_SIZE - 1, 0),                   # bottom-left
        (BOARD_SIZE - 1, BOARD_SIZE - 1),      # bottom-right
    ]

    # ==================== AI SETTINGS ====================
    # Minimax scores: a win at depth d is worth WIN_SCORE - d
    WIN_SCORE = 10
    DEFAULT_DIFFICULTY = Difficulty.MEDIUM

    DIFFICULTY_LABELS = {
        Difficulty.EASY: "Easy (Random moves)",
        Difficulty.MEDIUM: "Medium (Basic strategy)",
        Difficulty.HARD: "Hard (Advanced strategy)",
        Difficulty.IMPOSSIBLE: "Impossible (Minimax algorithm)",
    }

    # ==================== DISPLAY SETTINGS ====================
    # colorama foreground names used for each mark
    MARK_COLORS = {
        Mark.X: "RED",
        Mark.O: "BLUE",
    }

    AI_NAME = "AI"
    DEFAULT_PLAYER_NAMES = ("Player 1", "Player 2")

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class GameConfig:
    """
    Everything chosen once at session setup.

    X always moves first. In single-player mode the human plays X unless
    ``ai_first`` is set, in which case the AI takes X.
    """
    geometry: Geometry = Geometry.PLANAR
    mode: GameMode = GameMode.SINGLE_PLAYER
    difficulty: Difficulty = GameSettings.DEFAULT_DIFFICULTY
    player_one_name: str = GameSettings.DEFAULT_PLAYER_NAMES[0]
    player_two_name: str = GameSettings.DEFAULT_PLAYER_NAMES[1]
    ai_first: bool = False

    @property
    def is_single_player(self) -> bool:
        return self.mode == GameMode.SINGLE_PLAYER

    @property
    def ai_mark(self) -> Mark:
        """The mark the AI controls (only meaningful in single-player)."""
        return Mark.X if self.ai_first else Mark.O

    @property
    def human_mark(self) -> Mark:
        return self.ai_mark.opposite()

    def name_for(self, mark: Mark) -> str:
        """
        Get the display name of whoever plays a mark.

        Args:
            mark: Mark.X or Mark.O.

        Returns:
            The player's name, or the AI's name in single-player.
        """
        if self.is_single_player:
            if mark == self.ai_mark:
                return GameSettings.AI_NAME
            return self.player_one_name
        return self.player_one_name if mark == Mark.X else self.player_two_name
