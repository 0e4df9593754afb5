"""
Board state for console TicTacToe.
Tracks the marks on a 3x3 grid or a 3x3x3 cube.
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple
from dataclasses import dataclass, field


# Every axis of every board is this long
BOARD_SIZE = 3

# (row, col) on the planar board, (layer, row, col) on the cube
Coord = Tuple[int, ...]


class Mark(Enum):
    """What can sit in a cell."""
    EMPTY = " "
    X = "X"     # first mover
    O = "O"     # second mover

    def opposite(self) -> "Mark":
        """Get the other player's mark (EMPTY stays EMPTY)."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY


class Geometry(Enum):
    """Board topology."""
    PLANAR = "2d"   # single 3x3 grid
    CUBIC = "3d"    # 3x3x3 stack of grids

    @property
    def dimensions(self) -> int:
        """Number of coordinates in a move."""
        return 2 if self == Geometry.PLANAR else 3

    @property
    def layer_count(self) -> int:
        return 1 if self == Geometry.PLANAR else BOARD_SIZE

    @property
    def capacity(self) -> int:
        """Total number of cells (9 or 27)."""
        return self.layer_count * BOARD_SIZE * BOARD_SIZE


def _scan_order(geometry: Geometry) -> List[Coord]:
    """All coordinates, layer-major, then row, then column."""
    coords = []
    for layer in range(geometry.layer_count):
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if geometry == Geometry.PLANAR:
                    coords.append((row, col))
                else:
                    coords.append((layer, row, col))
    return coords


# Flat cell index -> coordinates, per geometry
SCAN_ORDER: Dict[Geometry, List[Coord]] = {
    geometry: _scan_order(geometry) for geometry in Geometry
}

_TEXT_MARKS = {
    "X": Mark.X,
    "O": Mark.O,
    ".": Mark.EMPTY,
    "_": Mark.EMPTY,
    "-": Mark.EMPTY,
    " ": Mark.EMPTY,
}


@dataclass
class Move:
    """
    A committed move in the game.
    """
    mark: Mark              # Who made the move
    coords: Coord           # Where it was played
    move_number: int        # 1-based position in the game


@dataclass
class Board:
    """
    The cells of a 3x3 or 3x3x3 board.

    Cells are kept in a flat list in scan order (layer, then row, then
    column), so ``cells[i]`` is the cell at ``SCAN_ORDER[geometry][i]``.

    ``move_count`` counts occupied cells. It only drifts from that number
    while a search has a speculative move on the board, and every search
    undoes its moves before returning.
    """

    geometry: Geometry = Geometry.PLANAR

    # Flat list of marks - filled with EMPTY when left out
    cells: List[Mark] = field(default_factory=list)

    # Number of moves applied (and not undone)
    move_count: int = 0

    def __post_init__(self):
        if not self.cells:
            self.cells = [Mark.EMPTY] * self.geometry.capacity

    @property
    def capacity(self) -> int:
        return self.geometry.capacity

    def index_of(self, coords: Sequence[int]) -> Optional[int]:
        """
        Convert coordinates to a flat cell index.

        Args:
            coords: (row, col) or (layer, row, col) depending on geometry.

        Returns:
            The flat index, or None if the coordinates are malformed or
            out of range.
        """
        if not isinstance(coords, (tuple, list)):
            return None
        if len(coords) != self.geometry.dimensions:
            return None

        index = 0
        for value in coords:
            if isinstance(value, bool) or not isinstance(value, int):
                return None
            if not 0 <= value < BOARD_SIZE:
                return None
            index = index * BOARD_SIZE + value
        return index

    def _flat(self, coords: Coord) -> int:
        # Unchecked version of index_of for the hot paths
        index = 0
        for value in coords:
            index = index * BOARD_SIZE + value
        return index

    def get(self, coords: Coord) -> Mark:
        """Get the mark at valid coordinates."""
        return self.cells[self._flat(coords)]

    def is_valid_move(self, coords: Sequence[int]) -> bool:
        """
        Check whether a mark may be placed at the given coordinates.

        Args:
            coords: Coordinates to check.

        Returns:
            True if the coordinates are in range and the cell is empty.
        """
        index = self.index_of(coords)
        if index is None:
            return False
        return self.cells[index] == Mark.EMPTY

    def apply_move(self, coords: Coord, mark: Mark):
        """
        Place a mark. The caller must have checked is_valid_move().

        Args:
            coords: Where to place the mark.
            mark: Mark.X or Mark.O.
        """
        self.cells[self._flat(coords)] = mark
        self.move_count += 1

    def undo_move(self, coords: Coord):
        """
        Take a speculative move back off the board.
        Only used while searching - committed moves are never undone.

        Args:
            coords: The cell to clear.
        """
        self.cells[self._flat(coords)] = Mark.EMPTY
        self.move_count -= 1

    def empty_cells(self) -> List[Coord]:
        """
        Get all empty cells in scan order.

        The order matters: the AI breaks ties by taking the first cell
        that scores best, and random picks index into this list.

        Returns:
            List of coordinate tuples.
        """
        order = SCAN_ORDER[self.geometry]
        return [order[i] for i, mark in enumerate(self.cells) if mark == Mark.EMPTY]

    def is_full(self) -> bool:
        return self.move_count >= self.capacity

    def layers(self) -> List[List[List[Mark]]]:
        """
        Get a nested copy of the cells for display.

        Returns:
            layers[layer][row][col]. The planar board has one layer.
        """
        size = BOARD_SIZE
        return [
            [
                self.cells[(layer * size + row) * size:(layer * size + row + 1) * size]
                for row in range(size)
            ]
            for layer in range(self.geometry.layer_count)
        ]

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(
            geometry=self.geometry,
            cells=list(self.cells),
            move_count=self.move_count,
        )

    def reset(self):
        """Clear every cell."""
        self.cells = [Mark.EMPTY] * self.capacity
        self.move_count = 0

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        geometry: Geometry = Geometry.PLANAR
    ) -> "Board":
        """
        Build a board from text rows like ``["XO.", ".X.", "..O"]``.

        For the cube, pass nine rows: layer 0 first, then layers 1 and 2.
        "X" and "O" are marks; ".", "_", "-" and " " are empty.

        Args:
            rows: The rows, top to bottom.
            geometry: Which board the rows describe.

        Returns:
            A Board whose move_count equals the number of marks.
        """
        expected_rows = geometry.layer_count * BOARD_SIZE
        if len(rows) != expected_rows:
            raise ValueError(f"Expected {expected_rows} rows, got {len(rows)}")

        cells = []
        for row in rows:
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {row!r} must have {BOARD_SIZE} cells")
            for char in row.upper():
                if char not in _TEXT_MARKS:
                    raise ValueError(f"Unknown cell {char!r} in row {row!r}")
                cells.append(_TEXT_MARKS[char])

        move_count = sum(1 for mark in cells if mark != Mark.EMPTY)
        return cls(geometry=geometry, cells=cells, move_count=move_count)
