"""
Board module for Osero.
Handles the board state, legal-move discovery, and piece flipping.
Uses a 10x10 grid whose outer ring is a wall, so directional scans never need
bounds checks.
"""
import logging
from enum import IntEnum
from typing import Dict, List, NamedTuple, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class CellKind(IntEnum):
    """Contents of a single grid cell."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2
    WALL = 3


class Side(IntEnum):
    """A player. Kept apart from CellKind so nobody can move as a wall."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Side':
        return Side.WHITE if self is Side.BLACK else Side.BLACK

    @property
    def cell(self) -> CellKind:
        return CellKind(self.value)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class Position(NamedTuple):
    """A (row, col) index into the grid, wall ring included."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class InvalidMove(ValueError):
    """Raised when a side tries to place a stone where it is not allowed."""

    def __init__(self, position: Position):
        self.position = Position(*position)
        super().__init__(f"Cannot place at ({self.position.row},{self.position.col}).")


# N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)

SYMBOLS = {CellKind.BLACK: 'B', CellKind.WHITE: 'W', CellKind.EMPTY: '+'}


class Board:
    """
    The Osero board engine.

    The grid is a numpy array of CellKind codes. Rows and columns 0 and 9 are
    walls for the lifetime of the board; the playable interior spans 1..8.
    """

    # Board dimensions
    SIZE = 8
    GRID_SIZE = SIZE + 2

    def __init__(self):
        """Initialize a board in the standard starting position."""
        self._grid = np.full((self.GRID_SIZE, self.GRID_SIZE), CellKind.EMPTY, dtype=np.int8)
        self._grid[0, :] = CellKind.WALL
        self._grid[-1, :] = CellKind.WALL
        self._grid[:, 0] = CellKind.WALL
        self._grid[:, -1] = CellKind.WALL

        self._grid[4, 4] = CellKind.BLACK
        self._grid[4, 5] = CellKind.WHITE
        self._grid[5, 4] = CellKind.WHITE
        self._grid[5, 5] = CellKind.BLACK

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from 8 strings describing the interior, top to bottom.

        Each string holds 8 symbols: 'B' (black), 'W' (white) or '+' (empty).
        Whitespace between symbols is ignored.

        Raises:
            ValueError: if the shape is wrong or a symbol is unknown
        """
        if len(rows) != cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} rows, got {len(rows)}")

        lookup = {symbol: kind for kind, symbol in SYMBOLS.items()}
        board = cls()
        for r, line in enumerate(rows, start=1):
            symbols = ''.join(line.split())
            if len(symbols) != cls.SIZE:
                raise ValueError(f"Row {r} has {len(symbols)} cells, expected {cls.SIZE}")
            for c, symbol in enumerate(symbols, start=1):
                if symbol not in lookup:
                    raise ValueError(f"Unknown cell symbol {symbol!r} in row {r}")
                board._grid[r, c] = lookup[symbol]
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._grid = self._grid.copy()
        return new_board

    def is_interior(self, position: Tuple[int, int]) -> bool:
        """Check whether a position lies on the playable 8x8 area."""
        row, col = position
        return 1 <= row <= self.SIZE and 1 <= col <= self.SIZE

    def cell(self, position: Tuple[int, int]) -> CellKind:
        """Return the contents of a grid cell (walls included)."""
        row, col = position
        return CellKind(int(self._grid[row, col]))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current grid as a numpy array.

        Returns:
            10x10 array of CellKind codes, wall ring included
        """
        return self._grid.copy()

    def captured_cells(self, position: Tuple[int, int], side: Side) -> List[Position]:
        """
        Get the opposing cells that a stone of `side` at `position` would capture.

        Every direction is walked outward independently. A run of opposing
        stones counts only when it is closed off by one of `side`'s stones;
        reaching an empty cell or the wall throws the run away. An empty result
        means the placement is not legal.

        Args:
            position: Where the stone would go
            side: The side placing the stone

        Returns:
            Captured positions in direction-table order
        """
        if not self.is_interior(position):
            return []

        own = side.cell
        enemy = side.opponent.cell
        row, col = position
        captured = []

        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            line = []
            while self._grid[r, c] == enemy:
                line.append(Position(r, c))
                r += dr
                c += dc
            # The wall ring stops every walk before it can leave the grid
            if line and self._grid[r, c] == own:
                captured.extend(line)

        return captured

    def legal_moves(self, side: Side) -> List[Position]:
        """
        Get all legal placements for a side.

        Returns:
            Positions in row-major order
        """
        moves = []
        for row in range(1, self.SIZE + 1):
            for col in range(1, self.SIZE + 1):
                if self._grid[row, col] == CellKind.EMPTY and self.captured_cells((row, col), side):
                    moves.append(Position(row, col))
        return moves

    def can_play(self, side: Side) -> bool:
        """Check if the side has any legal move."""
        for row in range(1, self.SIZE + 1):
            for col in range(1, self.SIZE + 1):
                if self._grid[row, col] == CellKind.EMPTY and self.captured_cells((row, col), side):
                    return True
        return False

    def place(self, position: Tuple[int, int], side: Side) -> List[Position]:
        """
        Place a stone for `side` and flip every captured cell.

        Args:
            position: Where to place the stone
            side: The side making the move

        Returns:
            The positions that were flipped

        Raises:
            InvalidMove: if the position is not among the side's legal moves.
                The board is left untouched.
        """
        position = Position(*position)
        if position not in self.legal_moves(side):
            logger.debug("Rejected %s for %s", position, side.display_name)
            raise InvalidMove(position)

        flipped = self.captured_cells(position, side)
        for r, c in flipped:
            self._grid[r, c] = side.cell
        self._grid[position.row, position.col] = side.cell

        logger.debug("%s placed at %s, flipped %d", side.display_name, position, len(flipped))
        return flipped

    def aggregate(self) -> Dict[CellKind, int]:
        """
        Count every cell of the grid by kind.

        Returns:
            Mapping with all four CellKind keys. Walls are always 36 and the
            other three always sum to 64.
        """
        return {kind: int(np.count_nonzero(self._grid == kind)) for kind in CellKind}

    def score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_count, white_count)
        """
        counts = self.aggregate()
        return counts[CellKind.BLACK], counts[CellKind.WHITE]

    def render(self) -> str:
        """Draw the interior with 1..8 row and column labels."""
        lines = ["  " + " ".join(str(c) for c in range(1, self.SIZE + 1))]
        for row in range(1, self.SIZE + 1):
            cells = " ".join(SYMBOLS[CellKind(int(v))] for v in self._grid[row, 1:-1])
            lines.append(f"{row} {cells}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
