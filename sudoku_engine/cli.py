"""Command-line interface for the Sudoku engine."""

import argparse
import sys
import json

from .config import Config
from .core.board import SudokuBoard
from .core.errors import InputFormatError, GenerationFailure
from .core.validator import find_conflict
from .generator import SudokuGenerator, Difficulty
from .utils.log import setup_logging

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2
EXIT_GENERATION_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-engine",
        description="Sudoku Puzzle Generator & Validator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 3 hard puzzles with their solutions
  sudoku-engine generate --count 3 --difficulty hard --show-solution

  # Validate a grid given as JSON
  sudoku-engine validate --grid "[[5,3,0,0,7,0,0,0,0], ...]"

  # Validate an 81-character puzzle string
  sudoku-engine validate --puzzle "530070000600195000..."
        """
    )
    parser.add_argument(
        "--log-level", default=Config.LOG_LEVEL, type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {Config.LOG_LEVEL})"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        default=Config.DEFAULT_DIFFICULTY,
        help="easy, medium or hard; anything else is treated as easy "
             f"(default: {Config.DEFAULT_DIFFICULTY})"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=Config.SEED,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--show-solution", action="store_true",
        help="Print the solution below each puzzle"
    )
    gen_parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar"
    )

    # Validate command
    val_parser = subparsers.add_parser("validate", help="Validate a Sudoku grid")
    source = val_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--grid", "-g", type=str,
        help="Grid as JSON: 9 lists of 9 integers, 0 for empty"
    )
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="JSON file holding a grid, or an object with a 'puzzle' grid"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_INVALID

    setup_logging(args.log_level)

    if args.command == "generate":
        return cmd_generate(args)
    return cmd_validate(args)


def cmd_generate(args) -> int:
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)
    difficulty = Difficulty.parse(args.difficulty)

    try:
        results = generator.generate_batch(args.count, difficulty, show_progress=args.progress)
    except GenerationFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_GENERATION_FAILED

    all_puzzles = []
    for i, result in enumerate(results, 1):
        all_puzzles.append({
            "difficulty": difficulty.value,
            "index": i,
            **result.to_dict()
        })

        print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({result.puzzle.count_filled()} clues) ---")
        print(result.puzzle)
        if args.show_solution:
            print("Solution:")
            print(result.solution)

    if args.output:
        try:
            with open(args.output, "w") as f:
                json.dump(all_puzzles, f, indent=2)
        except OSError as e:
            print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
            return EXIT_BAD_INPUT
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")
    return EXIT_OK


def _load_grid(args):
    if args.puzzle is not None:
        return SudokuBoard.from_string(args.puzzle)

    if args.grid is not None:
        text = args.grid
    else:
        try:
            with open(args.file) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputFormatError(f"Cannot read grid file {args.file}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputFormatError(f"Grid is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("puzzle")
    return data


def cmd_validate(args) -> int:
    """Handle the validate command."""
    try:
        grid = _load_grid(args)
        conflict = find_conflict(grid)
    except InputFormatError as e:
        print(f"Invalid puzzle format: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if conflict is not None:
        print(f"invalid: {conflict}")
        return EXIT_INVALID

    print("valid")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
