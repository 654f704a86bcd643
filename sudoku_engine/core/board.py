"""Sudoku board representation for the standard 9x9 grid."""

from __future__ import annotations
import numpy as np
from collections.abc import Sequence
from typing import Any, List, Tuple, Optional, Set

from .errors import InputFormatError

SIZE = 9
BOX_SIZE = 3
EMPTY = 0


def as_grid_array(data: Any) -> np.ndarray:
    """
    Coerce grid-like input into a (9, 9) int32 array.

    Accepts nested sequences or numpy arrays. Every cell must be an
    integer (bools excluded) between 0 and 9.

    Raises:
        InputFormatError: If the input is not a well-formed 9x9 grid.
    """
    if isinstance(data, np.ndarray):
        if data.shape != (SIZE, SIZE):
            raise InputFormatError(f"Grid shape must be ({SIZE}, {SIZE}), got {data.shape}")
        if data.dtype == np.bool_ or not np.issubdtype(data.dtype, np.integer):
            raise InputFormatError(f"Grid cells must be integers, got dtype {data.dtype}")
        rows = data.tolist()
    else:
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise InputFormatError(f"Grid must be a sequence of {SIZE} rows")
        if len(data) != SIZE:
            raise InputFormatError(f"Grid must have {SIZE} rows, got {len(data)}")
        rows = []
        for i, row in enumerate(data):
            if isinstance(row, np.ndarray):
                row = row.tolist()
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise InputFormatError(f"Row {i} must be a sequence of {SIZE} cells")
            if len(row) != SIZE:
                raise InputFormatError(f"Row {i} must have {SIZE} cells, got {len(row)}")
            rows.append(list(row))

    for i, row in enumerate(rows):
        for j, val in enumerate(row):
            if isinstance(val, (bool, np.bool_)) or not isinstance(val, (int, np.integer)):
                raise InputFormatError(f"Cell ({i}, {j}) must be an integer, got {val!r}")
            if val < EMPTY or val > SIZE:
                raise InputFormatError(f"Cell ({i}, {j}) must be 0-{SIZE}, got {val}")

    return np.array(rows, dtype=np.int32)


class SudokuBoard:
    """
    A 9x9 Sudoku grid with 3x3 boxes. Zero marks an empty cell.

    Boards have value semantics: ``copy()`` returns an independent board and
    equality compares contents.
    """

    def __init__(self, grid: Optional[Any] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial grid (nested lists or numpy array).
                  If None, creates an empty board.
        """
        self.size = SIZE
        self.box_size = BOX_SIZE

        if grid is not None:
            self.grid = as_grid_array(grid)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < EMPTY or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return bool(self.grid[row, col] == EMPTY)

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                         box_col:box_col + self.box_size].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all valid candidate values for an empty cell.

        Returns:
            Set of values 1-9 that can be placed at (row, col).
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())

        return set(range(1, self.size + 1)) - used

    def find_empty_cell(self) -> Optional[Tuple[int, int]]:
        """Return the first empty cell in row-major order, or None."""
        empty = np.argwhere(self.grid == EMPTY)
        if len(empty) == 0:
            return None
        row, col = empty[0]
        return int(row), int(col)

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """Check that no row, column or box holds a duplicate value."""
        from .validator import is_valid
        return is_valid(self)

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[List[int]]:
        """Wire encoding: 9 lists of 9 Python ints, row-major."""
        return self.grid.tolist()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        s = s.strip()
        if len(s) != SIZE * SIZE:
            raise InputFormatError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        cells = []
        for idx, c in enumerate(s):
            if c == '.':
                cells.append(EMPTY)
            elif c in '0123456789':
                cells.append(int(c))
            else:
                raise InputFormatError(f"Invalid character {c!r} at position {idx}")

        return cls([cells[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)])

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(data)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == EMPTY else f' {val}'
                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
