"""Environment-driven configuration."""

import os


def _int_or_none(value):
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    # Default seed for generators created without an explicit seed or rng
    SEED = _int_or_none(os.environ.get("SUDOKU_SEED"))

    # Difficulty used when a caller does not name one
    DEFAULT_DIFFICULTY = os.environ.get("SUDOKU_DEFAULT_DIFFICULTY", "easy")

    # Package logger level
    LOG_LEVEL = os.environ.get("SUDOKU_LOG_LEVEL", "WARNING")
