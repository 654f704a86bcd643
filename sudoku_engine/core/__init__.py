"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, as_grid_array
from .errors import SudokuError, InputFormatError, GenerationFailure
from .validator import Conflict, find_conflict, is_valid, is_valid_placement, validate_solution

__all__ = [
    "SudokuBoard",
    "as_grid_array",
    "SudokuError",
    "InputFormatError",
    "GenerationFailure",
    "Conflict",
    "find_conflict",
    "is_valid",
    "is_valid_placement",
    "validate_solution",
]
