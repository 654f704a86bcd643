"""Sudoku puzzle generator with fixed removal counts per difficulty."""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from tqdm import tqdm

from ..core.board import SudokuBoard, SIZE, BOX_SIZE
from ..core.errors import GenerationFailure
from ..core.validator import is_valid_placement
from ..utils.log import get_logger

logger = get_logger(__name__)

MAX_SOLVE_DEPTH = SIZE * SIZE


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def cells_to_remove(self) -> int:
        """Number of cells cleared from the solution for this difficulty."""
        counts = {
            Difficulty.EASY: 30,
            Difficulty.MEDIUM: 40,
            Difficulty.HARD: 50,
        }
        return counts[self]

    @classmethod
    def parse(cls, value: Union[Difficulty, str, None]) -> Difficulty:
        """Map an exact difficulty name to a Difficulty. Anything else falls back to EASY."""
        if isinstance(value, Difficulty):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        logger.debug("Unrecognized difficulty %r, using %s", value, cls.EASY.value)
        return cls.EASY


def get_cells_to_remove(difficulty: Union[Difficulty, str, None]) -> int:
    """Removal count for a difficulty; unrecognized values count as easy (30)."""
    return Difficulty.parse(difficulty).cells_to_remove


@dataclass
class GeneratedPuzzle:
    """A puzzle together with the solved grid it was cut from."""
    puzzle: SudokuBoard
    solution: SudokuBoard
    difficulty: Difficulty

    def to_dict(self) -> Dict[str, Any]:
        """Wire pair: {"puzzle": Grid, "solution": Grid}."""
        return {
            "puzzle": self.puzzle.to_list(),
            "solution": self.solution.to_list(),
        }


class SudokuGenerator:
    """
    Generator for 9x9 Sudoku puzzles.

    Algorithm:
    1. Fill the three diagonal boxes with random permutations of 1-9
    2. Complete the grid using randomized backtracking
    3. Clear a fixed number of random cells based on difficulty

    The resulting puzzle is not checked for a unique solution.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random source to draw all shuffles from.
        """
        self.size = SIZE
        self.box_size = BOX_SIZE
        self.rng = rng if rng is not None else random.Random(seed)

    def generate_puzzle(self, difficulty: Union[Difficulty, str] = Difficulty.EASY) -> SudokuBoard:
        """
        Generate a Sudoku puzzle with the specified difficulty.

        Returns:
            A SudokuBoard with the puzzle (clues only, no solution).
        """
        return self.generate_with_solution(difficulty).puzzle

    def generate_with_solution(self, difficulty: Union[Difficulty, str] = Difficulty.EASY) -> GeneratedPuzzle:
        """
        Generate a puzzle along with its solution.

        Raises:
            GenerationFailure: If the seeded grid could not be completed.
        """
        difficulty = Difficulty.parse(difficulty)

        board = self.create_empty_grid()
        self.fill_diagonal(board)
        if not self.solve_sudoku(board):
            logger.error("Solver could not complete a diagonal-seeded grid:\n%s", board)
            raise GenerationFailure("Failed to generate puzzle")

        solution = board.copy()
        puzzle = self.remove_numbers(board, difficulty)
        logger.debug("Generated %s puzzle with %d clues", difficulty.value, puzzle.count_filled())
        return GeneratedPuzzle(puzzle=puzzle, solution=solution, difficulty=difficulty)

    def generate_batch(
        self,
        count: int,
        difficulty: Union[Difficulty, str] = Difficulty.EASY,
        show_progress: bool = False
    ) -> List[GeneratedPuzzle]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.
            show_progress: Display a tqdm progress bar.
        """
        difficulty = Difficulty.parse(difficulty)
        return [
            self.generate_with_solution(difficulty)
            for _ in tqdm(range(count), desc=f"Generating {difficulty.value}", disable=not show_progress)
        ]

    def create_empty_grid(self) -> SudokuBoard:
        """Return a 9x9 grid of zeros."""
        return SudokuBoard()

    def fill_diagonal(self, board: SudokuBoard) -> None:
        """
        Fill the boxes on the main diagonal with random permutations of 1-9.

        These boxes share no row, column or box, so they cannot conflict.
        """
        for start in range(0, self.size, self.box_size):
            self._fill_box(board, start, start)

    def _fill_box(self, board: SudokuBoard, start_row: int, start_col: int) -> None:
        """Fill a single box with random values."""
        values = self._shuffled(range(1, self.size + 1))

        idx = 0
        for i in range(self.box_size):
            for j in range(self.box_size):
                board.set(start_row + i, start_col + j, values[idx])
                idx += 1

    def solve_sudoku(self, board: SudokuBoard) -> bool:
        """
        Complete a partially filled board in place using randomized backtracking.

        Returns:
            True if the board was completed, False if no completion exists.
            On False, every cell this call filled is cleared again.
        """
        return self._backtrack(board, 0)

    def _backtrack(self, board: SudokuBoard, depth: int) -> bool:
        cell = board.find_empty_cell()
        if cell is None:
            return True

        # Each level fills one cell.
        if depth >= MAX_SOLVE_DEPTH:
            raise GenerationFailure(f"Solver exceeded {MAX_SOLVE_DEPTH} levels of recursion")

        row, col = cell
        for value in self._shuffled(range(1, self.size + 1)):
            if is_valid_placement(board, row, col, value):
                board.set(row, col, value)
                if self._backtrack(board, depth + 1):
                    return True
                board.clear(row, col)

        return False

    def remove_numbers(self, board: SudokuBoard, difficulty: Union[Difficulty, str]) -> SudokuBoard:
        """
        Clear cells from a copy of a solved board to create a puzzle.

        The input board is left untouched.
        """
        puzzle = board.copy()
        cells_to_remove = get_cells_to_remove(difficulty)

        positions = self._shuffled(
            (i // self.size, i % self.size) for i in range(self.size * self.size)
        )
        for row, col in positions[:cells_to_remove]:
            puzzle.clear(row, col)

        return puzzle

    def _shuffled(self, items) -> list:
        items = list(items)
        self.rng.shuffle(items)
        return items
