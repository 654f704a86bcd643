"""Sudoku puzzle generation and validation engine."""

from .api import generate, validate
from .core import SudokuBoard, SudokuError, InputFormatError, GenerationFailure, is_valid, find_conflict
from .generator import SudokuGenerator, Difficulty, GeneratedPuzzle, get_cells_to_remove

__version__ = "1.0.0"

__all__ = [
    "generate",
    "validate",
    "SudokuBoard",
    "SudokuError",
    "InputFormatError",
    "GenerationFailure",
    "is_valid",
    "find_conflict",
    "SudokuGenerator",
    "Difficulty",
    "GeneratedPuzzle",
    "get_cells_to_remove",
]
