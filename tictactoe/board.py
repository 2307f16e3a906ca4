"""
Board storage for TicTacToe.

The board is a square grid of cells, each holding a player mark or None.
It has no knowledge of the rules or the players; it only stores marks and
offers convenience views (rows, columns, diagonals, corners).

Cells are indexed row by row starting at 0:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

import logging
import math
from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np

from .errors import CapabilityDeniedError, OutOfRangeError, StateConflictError

logger = logging.getLogger(__name__)


class Board:
    """
    A square TicTacToe board of any dimension.

    Each cell can be written exactly once. Writing to an occupied cell
    raises StateConflictError until the cell is cleared again.
    """

    def __init__(self, dimension: int = 3):
        """
        Initialize an empty board.

        Args:
            dimension: Length of the board's sides (default 3).

        Raises:
            OutOfRangeError: If dimension is zero or negative.
        """
        if dimension < 1:
            raise OutOfRangeError(
                f"Dimension must be an integer greater than zero. Received `{dimension}`."
            )

        self._dimension = int(dimension)
        # Flat object array, None means empty
        self._cells = np.full(self._dimension * self._dimension, None, dtype=object)

    @classmethod
    def from_list(cls, cells: Sequence[Optional[str]]) -> "Board":
        """
        Build a board from a flat list of marks (None for empty cells).

        Raises:
            OutOfRangeError: If the list length is not a non-zero perfect square.
        """
        dimension = math.isqrt(len(cells))
        if dimension < 1 or dimension * dimension != len(cells):
            raise OutOfRangeError(
                f"Cannot build a square board from {len(cells)} cells."
            )

        board = cls(dimension)
        for index, mark in enumerate(cells):
            if mark is not None:
                board.set(index, mark)
        return board

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def size(self) -> int:
        """Total number of cells on the board."""
        return len(self._cells)

    def copy(self) -> "Board":
        """Create an independent copy of this board."""
        new_board = Board.__new__(Board)
        new_board._dimension = self._dimension
        new_board._cells = self._cells.copy()
        return new_board

    # ==================== CELL ACCESS ====================

    def exists(self, index: int) -> bool:
        """Check whether index is a valid cell on this board."""
        return 0 <= index < len(self._cells)

    def get(self, index: int) -> Optional[str]:
        """
        Get the mark stored at index.

        An out-of-range index is reported as a warning and reads as empty.
        Use exists() first when strict bounds checking is needed.
        """
        if not self.exists(index):
            logger.warning("Undefined board offset: %s", index)
            return None
        return self._cells[index]

    def set(self, index: int, mark) -> None:
        """
        Place a mark on an empty cell.

        Args:
            index: Cell to write.
            mark: Player mark, stored as a string.

        Raises:
            OutOfRangeError: If index is not on the board.
            StateConflictError: If the cell already holds a mark.
        """
        if not self.exists(index):
            raise OutOfRangeError(
                f"Undefined board offset: {index}. Valid: 0-{len(self._cells) - 1}."
            )

        current = self._cells[index]
        if current is not None:
            raise StateConflictError(
                f"Provided index `{index}` is already set to `{current}`."
            )

        self._cells[index] = str(mark)

    def clear(self, index: int) -> None:
        """Empty a cell. Clearing an out-of-range index does nothing."""
        if self.exists(index):
            self._cells[index] = None

    def to_list(self) -> List[Optional[str]]:
        """The whole board as a flat list, one entry per cell."""
        return self._cells.tolist()

    # ==================== DERIVED VIEWS ====================

    def available(self) -> List[int]:
        """Indices of all empty cells, in ascending order."""
        return np.flatnonzero(np.equal(self._cells, None)).tolist()

    def row(self, offset: int) -> List[Optional[str]]:
        """
        Get the cells of one row.

        Example (3x3): row(0) -> cells [0, 1, 2]

        Raises:
            OutOfRangeError: If offset is not in [0, dimension).
        """
        if not 0 <= offset < self._dimension:
            raise OutOfRangeError(
                f"Invalid row requested. Valid: 0-{self._dimension - 1}. Received `{offset}`."
            )
        return self._grid()[offset].tolist()

    def column(self, offset: int) -> List[Optional[str]]:
        """
        Get the cells of one column.

        Example (3x3): column(0) -> cells [0, 3, 6]

        Raises:
            OutOfRangeError: If offset is not in [0, dimension).
        """
        if not 0 <= offset < self._dimension:
            raise OutOfRangeError(
                f"Invalid column requested. Valid: 0-{self._dimension - 1}. Received `{offset}`."
            )
        return self._grid()[:, offset].tolist()

    def diagonal(self, left: bool) -> Dict[int, Optional[str]]:
        """
        Get one of the two diagonals as {index: mark}.

        Example (3x3):
            diagonal(True)  -> cells {0, 4, 8}
            diagonal(False) -> cells {2, 4, 6}
        """
        indices = self.diagonal_indices(left)
        return {index: self._cells[index] for index in indices}

    def diagonal_indices(self, left: bool) -> List[int]:
        """Cell indices on the left (main) or right (anti) diagonal."""
        d = self._dimension
        if left:
            return list(range(0, d * d, d + 1))
        # d == 1 would give a zero step; the single cell is both diagonals
        return [i * d + (d - 1 - i) for i in range(d)]

    def corners(self) -> List[int]:
        """
        Indices of the four corners.

        The order is fixed (top-left, top-right, bottom-left, bottom-right)
        so that corners()[i] and corners()[3 - i] are always opposite.
        """
        size = self.size
        return [0, self._dimension - 1, size - self._dimension, size - 1]

    def _grid(self) -> np.ndarray:
        """The cells as a dimension x dimension view."""
        return self._cells.reshape(self._dimension, self._dimension)

    # ==================== PYTHON PROTOCOL ====================

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter(self.to_list())

    def __getitem__(self, index: int) -> Optional[str]:
        return self.get(index)

    def __setitem__(self, index: int, mark) -> None:
        self.set(index, mark)

    def __delitem__(self, index: int) -> None:
        self.clear(index)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._dimension == other._dimension and self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dimension={self._dimension}, cells={self.to_list()!r})"


class ReadOnlyBoard(Board):
    """
    A frozen snapshot of a Board.

    Handed to players so they can use the convenience views (available(),
    row(), column(), ...) without being able to change the real board.
    Later changes to the source board are not visible through the snapshot.
    """

    def __init__(self, board: Board):
        """
        Args:
            board: The board to take a snapshot of.
        """
        self._dimension = board.dimension
        self._cells = board._cells.copy()
        self._cells.flags.writeable = False

    def set(self, index: int, mark) -> None:
        raise CapabilityDeniedError("ReadOnlyBoard values can not be assigned.")

    def clear(self, index: int) -> None:
        raise CapabilityDeniedError("ReadOnlyBoard values can not be unset.")
