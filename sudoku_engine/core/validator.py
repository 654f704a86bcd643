"""Validation utilities for Sudoku grids."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

import numpy as np

from .board import SudokuBoard, SIZE, BOX_SIZE, EMPTY, as_grid_array
from .errors import InputFormatError
from ..utils.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Conflict:
    """First duplicate found in a grid."""
    unit: str      # "row", "column" or "box"
    index: int     # 0-8; boxes are numbered row-major
    value: int

    def __str__(self) -> str:
        return f"value {self.value} repeated in {self.unit} {self.index}"


def _to_array(grid: Any) -> np.ndarray:
    if isinstance(grid, SudokuBoard):
        return grid.grid
    try:
        return as_grid_array(grid)
    except InputFormatError as e:
        logger.info("Rejected malformed grid: %s", e)
        raise


def _units(arr: np.ndarray) -> Iterator[Tuple[str, int, np.ndarray]]:
    """Yield rows, then columns, then boxes."""
    for i in range(SIZE):
        yield "row", i, arr[i, :]
    for j in range(SIZE):
        yield "column", j, arr[:, j]
    for b in range(SIZE):
        r = (b // BOX_SIZE) * BOX_SIZE
        c = (b % BOX_SIZE) * BOX_SIZE
        yield "box", b, arr[r:r + BOX_SIZE, c:c + BOX_SIZE].flatten()


def find_conflict(grid: Any) -> Optional[Conflict]:
    """
    Find the first uniqueness violation in a grid.

    Rows are scanned first, then columns, then boxes. Empty cells never
    conflict, not even with each other.

    Args:
        grid: A SudokuBoard, nested sequence or numpy array.

    Returns:
        The first Conflict found, or None if the grid is valid.

    Raises:
        InputFormatError: If the grid is not a 9x9 grid of integers 0-9.
    """
    arr = _to_array(grid)
    for unit, index, values in _units(arr):
        seen = set()
        for val in values.tolist():
            if val == EMPTY:
                continue
            if val in seen:
                conflict = Conflict(unit, index, val)
                logger.debug("Grid invalid: %s", conflict)
                return conflict
            seen.add(val)
    return None


def is_valid(grid: Any) -> bool:
    """
    Check a grid for duplicate values in any row, column or box.

    Raises:
        InputFormatError: If the grid is malformed. This is distinct from
            returning False for a well-formed grid that breaks a rule.
    """
    return find_conflict(grid) is None


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1-9).

    Returns:
        True if the value is absent from the row, column and box.
    """
    if value < 1 or value > board.size:
        return False

    if value in board.get_row(row):
        return False

    if value in board.get_col(col):
        return False

    if value in board.get_box(row, col):
        return False

    return True


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Returns:
        True if solution is complete, valid and matches every puzzle clue.
    """
    clues = puzzle.grid != EMPTY
    if not np.array_equal(puzzle.grid[clues], solution.grid[clues]):
        return False

    return solution.is_solved()
