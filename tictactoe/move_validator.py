"""
Move validator for console TicTacToe.
Validates that moves follow the rules and parses typed coordinates.
"""

import re
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass

from .game_state import BOARD_SIZE, Board, Coord, Geometry, Mark


class MoveError(Enum):
    """Why a move was rejected."""
    INVALID_COORDINATE = "invalid_coordinate"   # off the board, wrong arity or occupied
    MALFORMED_INPUT = "malformed_input"         # not a list of numbers


@dataclass
class ValidationResult:
    """Result of move validation or parsing."""
    is_valid: bool
    error_message: Optional[str] = None
    error: Optional[MoveError] = None
    coords: Optional[Coord] = None


def format_coords(coords: Coord) -> str:
    """Show 0-based coordinates the way players type them (1-based)."""
    return "(" + ", ".join(str(value + 1) for value in coords) + ")"


def _describe(coords) -> str:
    if isinstance(coords, (tuple, list)) and all(isinstance(v, int) for v in coords):
        return format_coords(coords)
    return repr(coords)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Coordinates must be on the board (2 numbers on the flat board,
       3 on the cube)
    2. Can only place on empty cells
    3. Game must not be over

    Nothing here raises on bad input - every problem comes back as a
    ValidationResult so the caller can ask again.
    """

    # Numbers may be separated by spaces and/or commas
    SEPARATORS = re.compile(r"[\s,]+")

    def validate_move(
        self,
        board: Board,
        coords: Coord,
        game_over: bool = False
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            coords: 0-based coordinates of the move.
            game_over: True if the game has already finished.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!",
                error=MoveError.INVALID_COORDINATE
            )

        # Check shape and range
        index = board.index_of(coords)
        if index is None:
            dims = board.geometry.dimensions
            return ValidationResult(
                is_valid=False,
                error_message=f"Position {_describe(coords)} is off the board. Need {dims} numbers from 1 to {BOARD_SIZE}.",
                error=MoveError.INVALID_COORDINATE
            )

        # Check if cell is empty
        occupant = board.cells[index]
        if occupant != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {format_coords(coords)} is already taken by {occupant.value}!",
                error=MoveError.INVALID_COORDINATE
            )

        # All checks passed!
        return ValidationResult(is_valid=True, coords=tuple(coords))

    def parse_coordinates(self, text: str, geometry: Geometry) -> ValidationResult:
        """
        Parse what a player typed into 0-based coordinates.

        Players type 1-based numbers: "row col" on the flat board and
        "layer row col" on the cube. Range is not checked here - that is
        validate_move's job.

        Args:
            text: Raw input, e.g. "2 3" or "1,2,3".
            geometry: Board the move is for.

        Returns:
            ValidationResult carrying the coords when parsing worked.
        """
        tokens = [token for token in self.SEPARATORS.split(text.strip()) if token]

        numbers = []
        for token in tokens:
            try:
                numbers.append(int(token))
            except ValueError:
                return ValidationResult(
                    is_valid=False,
                    error_message="Invalid input! Please enter numbers only.",
                    error=MoveError.MALFORMED_INPUT
                )

        dims = geometry.dimensions
        if len(numbers) != dims:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid input! Please enter {dims} numbers.",
                error=MoveError.MALFORMED_INPUT
            )

        return ValidationResult(
            is_valid=True,
            coords=tuple(number - 1 for number in numbers)
        )

    def get_valid_moves(self, board: Board, game_over: bool = False) -> List[Coord]:
        """
        Get all valid moves for the player to move.

        Args:
            board: Current board.
            game_over: True if the game has already finished.

        Returns:
            List of coordinates in scan order.
        """
        if game_over:
            return []
        return board.empty_cells()
