"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw, on either board.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple
from dataclasses import dataclass

from .game_state import BOARD_SIZE, Board, Coord, Geometry, Mark

logger = logging.getLogger(__name__)


# All winning lines on the 3x3 board (as list of (row, col) tuples)
PLANAR_LINES: List[List[Coord]] = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]

# Corner-to-corner lines through the middle of the cube
SPACE_DIAGONALS: List[List[Coord]] = [
    [(0, 0, 0), (1, 1, 1), (2, 2, 2)],
    [(0, 0, 2), (1, 1, 1), (2, 2, 0)],
    [(0, 2, 0), (1, 1, 1), (2, 0, 2)],
    [(0, 2, 2), (1, 1, 1), (2, 0, 0)],
]


def _cubic_lines() -> List[List[Coord]]:
    """
    Build the 37 winning lines of the cube.

    Each layer wins like a flat board (8 x 3 = 24), every (row, col)
    wins straight down through the layers (9), plus the 4 space
    diagonals. Diagonals standing in a vertical plane do not count.
    """
    lines = []

    for layer in range(BOARD_SIZE):
        for line in PLANAR_LINES:
            lines.append([(layer, row, col) for row, col in line])

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            lines.append([(layer, row, col) for layer in range(BOARD_SIZE)])

    lines.extend(SPACE_DIAGONALS)
    return lines


CUBIC_LINES = _cubic_lines()


def _flat_index(coords: Coord) -> int:
    index = 0
    for value in coords:
        index = index * BOARD_SIZE + value
    return index


# Same lines as flat cell indexes, for fast checks during search
_INDEXED_LINES: Dict[Geometry, List[Tuple[int, ...]]] = {
    Geometry.PLANAR: [tuple(_flat_index(c) for c in line) for line in PLANAR_LINES],
    Geometry.CUBIC: [tuple(_flat_index(c) for c in line) for line in CUBIC_LINES],
}


class OutcomeKind(Enum):
    """State of a finished or unfinished game."""
    NO_RESULT = "no_result"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board."""
    kind: OutcomeKind = OutcomeKind.NO_RESULT
    winner: Optional[Mark] = None
    line: Optional[Tuple[Coord, ...]] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.NO_RESULT

    @property
    def is_draw(self) -> bool:
        return self.kind == OutcomeKind.DRAW


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row. On the flat board that is
    any row, column or diagonal (8 lines). On the cube it is any of those
    inside a layer, any vertical line through the layers, or one of the
    4 space diagonals (37 lines).
    """

    WINNING_LINES = {
        Geometry.PLANAR: PLANAR_LINES,
        Geometry.CUBIC: CUBIC_LINES,
    }

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The mark owning the first complete line, or None.
        """
        cells = board.cells
        for a, b, c in _INDEXED_LINES[board.geometry]:
            mark = cells[a]
            if mark != Mark.EMPTY and mark == cells[b] and mark == cells[c]:
                return mark
        return None

    def winning_marks(self, board: Board) -> Set[Mark]:
        """
        Get every mark that owns a complete line.
        Under alternating play this never holds more than one mark.
        """
        cells = board.cells
        winners = set()
        for a, b, c in _INDEXED_LINES[board.geometry]:
            mark = cells[a]
            if mark != Mark.EMPTY and mark == cells[b] and mark == cells[c]:
                winners.add(mark)
        return winners

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when every cell is filled and nobody has a line.

        Args:
            board: The board to check.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def get_winning_line(self, board: Board) -> Optional[List[Coord]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board to check.

        Returns:
            The winning line as a list of coordinates, or None.
        """
        cells = board.cells
        lines = self.WINNING_LINES[board.geometry]
        for line, (a, b, c) in zip(lines, _INDEXED_LINES[board.geometry]):
            mark = cells[a]
            if mark != Mark.EMPTY and mark == cells[b] and mark == cells[c]:
                return line
        return None

    def evaluate(self, board: Board) -> Outcome:
        """
        Work out the result of a board.

        Args:
            board: The board to evaluate.

        Returns:
            WIN with the winning mark and line, DRAW if the board is full,
            otherwise NO_RESULT.
        """
        line = self.get_winning_line(board)

        if line is not None:
            winners = self.winning_marks(board)
            if len(winners) > 1:
                logger.warning(
                    "Both players own a line on this board: %s",
                    sorted(mark.value for mark in winners),
                )
            return Outcome(
                kind=OutcomeKind.WIN,
                winner=board.get(line[0]),
                line=tuple(line),
            )

        if board.is_full():
            return Outcome(kind=OutcomeKind.DRAW)

        return Outcome()


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    print(f"Planar lines: {len(PLANAR_LINES)}, cubic lines: {len(CUBIC_LINES)}")

    board = Board.from_rows(["XXX", "O.O", "..."])
    print(f"Row win: {checker.evaluate(board)}")

    cube = Board(geometry=Geometry.CUBIC)
    for coords in [(0, 0, 0), (1, 1, 1), (2, 2, 2)]:
        cube.apply_move(coords, Mark.O)
    print(f"Space diagonal: {checker.evaluate(cube)}")

    print("\nWinChecker test done!")
