"""Tests for the command-line interface."""

import json

import pytest
from sudoku_engine import cli
from sudoku_engine.generator import SudokuGenerator

PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"


class TestGenerateCommand:
    """Tests for `sudoku-engine generate`."""

    def test_generate_prints_puzzles(self, capsys):
        code = cli.main(["generate", "-n", "2", "-d", "medium", "-s", "4"])
        out = capsys.readouterr().out

        assert code == cli.EXIT_OK
        assert "Medium Puzzle 1 (41 clues)" in out
        assert "Medium Puzzle 2 (41 clues)" in out
        assert "Total puzzles generated: 2" in out

    def test_generate_writes_json(self, tmp_path):
        output = tmp_path / "puzzles.json"
        code = cli.main(["generate", "-d", "hard", "-s", "1", "-o", str(output)])

        assert code == cli.EXIT_OK
        data = json.loads(output.read_text())
        assert len(data) == 1
        assert data[0]["difficulty"] == "hard"
        assert sum(v == 0 for row in data[0]["puzzle"] for v in row) == 50
        assert sum(v == 0 for row in data[0]["solution"] for v in row) == 0

    def test_unknown_difficulty_is_easy(self, capsys):
        assert cli.main(["generate", "-d", "extreme", "-s", "1"]) == cli.EXIT_OK
        assert "Easy Puzzle 1 (51 clues)" in capsys.readouterr().out

    def test_unwritable_output(self, tmp_path, capsys):
        output = tmp_path / "missing_dir" / "puzzles.json"
        assert cli.main(["generate", "-s", "1", "-o", str(output)]) == cli.EXIT_BAD_INPUT
        assert "cannot write" in capsys.readouterr().err

    def test_generation_failure_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr(SudokuGenerator, "solve_sudoku", lambda self, board: False)
        assert cli.main(["generate", "-s", "1"]) == cli.EXIT_GENERATION_FAILED
        assert "Failed to generate puzzle" in capsys.readouterr().err


class TestValidateCommand:
    """Tests for `sudoku-engine validate`."""

    def test_valid_puzzle_string(self, capsys):
        assert cli.main(["validate", "-p", PUZZLE]) == cli.EXIT_OK
        assert capsys.readouterr().out.strip() == "valid"

    def test_invalid_grid_json(self, capsys):
        grid = [[0] * 9 for _ in range(9)]
        grid[0][0] = 5
        grid[5][0] = 5
        assert cli.main(["validate", "-g", json.dumps(grid)]) == cli.EXIT_INVALID
        assert "column 0" in capsys.readouterr().out

    def test_grid_file_with_puzzle_key(self, tmp_path):
        path = tmp_path / "grid.json"
        path.write_text(json.dumps({"puzzle": [[0] * 9 for _ in range(9)]}))
        assert cli.main(["validate", "-f", str(path)]) == cli.EXIT_OK

    @pytest.mark.parametrize("argv", [
        ["validate", "-g", "not json"],
        ["validate", "-g", "[[1, 2, 3]]"],
        ["validate", "-p", "12345"],
    ])
    def test_bad_input_exit_code(self, argv, capsys):
        assert cli.main(argv) == cli.EXIT_BAD_INPUT
        assert "Invalid puzzle format" in capsys.readouterr().err

    def test_missing_grid_file(self, tmp_path, capsys):
        """An unreadable file is bad input, not a crash."""
        missing = tmp_path / "nope.json"
        assert cli.main(["validate", "-f", str(missing)]) == cli.EXIT_BAD_INPUT
        assert "Cannot read grid file" in capsys.readouterr().err

    def test_grid_file_is_directory(self, tmp_path):
        assert cli.main(["validate", "-f", str(tmp_path)]) == cli.EXIT_BAD_INPUT

    def test_grid_file_not_utf8(self, tmp_path):
        path = tmp_path / "grid.json"
        path.write_bytes(b"\xff\xfe\x00[[")
        assert cli.main(["validate", "-f", str(path)]) == cli.EXIT_BAD_INPUT

    def test_no_command(self, capsys):
        assert cli.main([]) == cli.EXIT_INVALID


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
