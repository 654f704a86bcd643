"""Generator module for creating Sudoku puzzles."""

from .generator import SudokuGenerator, Difficulty, GeneratedPuzzle, get_cells_to_remove

__all__ = ["SudokuGenerator", "Difficulty", "GeneratedPuzzle", "get_cells_to_remove"]
