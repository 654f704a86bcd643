"""
The two operations collaborators call into: generate and validate.

Grids cross this boundary in their wire encoding, 9 lists of 9 ints with
0 for empty cells.
"""

from __future__ import annotations
import random
from typing import Any, Dict, List, Optional, Union

from .config import Config
from .core.validator import is_valid
from .generator import Difficulty, SudokuGenerator

Grid = List[List[int]]


def generate(
    difficulty: Union[Difficulty, str, None] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> Dict[str, Grid]:
    """
    Generate a puzzle and its answer key.

    Args:
        difficulty: "easy", "medium" or "hard". Anything else is treated as easy.
            Defaults to Config.DEFAULT_DIFFICULTY.
        seed: Random seed; falls back to Config.SEED.
        rng: Random source, takes precedence over seed.

    Returns:
        {"puzzle": Grid, "solution": Grid}

    Raises:
        GenerationFailure: If the solved grid could not be built.
    """
    if difficulty is None:
        difficulty = Config.DEFAULT_DIFFICULTY
    if seed is None:
        seed = Config.SEED
    generator = SudokuGenerator(seed=seed, rng=rng)
    return generator.generate_with_solution(difficulty).to_dict()


def validate(grid: Any) -> bool:
    """
    Check a candidate grid for row, column and box duplicates.

    Raises:
        InputFormatError: If grid is not a 9x9 grid of integers 0-9.
    """
    return is_valid(grid)
