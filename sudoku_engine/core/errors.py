"""Exceptions raised by the Sudoku engine."""


class SudokuError(Exception):
    """Base class for all engine errors."""


class InputFormatError(SudokuError, ValueError):
    """A grid is not a 9x9 matrix of integers in the range 0-9."""


class GenerationFailure(SudokuError, RuntimeError):
    """The solver could not complete a seeded grid."""
