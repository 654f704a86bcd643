"""Unit tests for the Sudoku board."""

import pytest
import numpy as np
from sudoku_engine.core.board import SudokuBoard, as_grid_array
from sudoku_engine.core.errors import InputFormatError


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_set_out_of_range(self):
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 10)

    def test_get_candidates(self):
        """Test getting valid candidates for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        # Cell (0, 2) should not have 5 or 3 as candidates
        candidates = board.get_candidates(0, 2)
        assert 5 not in candidates
        assert 3 not in candidates
        assert len(candidates) == 7

    def test_find_empty_cell_row_major(self):
        """First empty cell is found scanning rows left to right."""
        board = SudokuBoard()
        board.set(0, 0, 1)
        board.set(0, 1, 2)
        assert board.find_empty_cell() == (0, 2)

        full = SudokuBoard.from_string(
            "534678912672195348198342567859761423426853791713924856961537284287419635345286179"
        )
        assert full.find_empty_cell() is None

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()

        board.set(0, 0, 5)
        board.set(0, 1, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9

        dotted = SudokuBoard.from_string("." * 81)
        assert dotted.count_empty() == 81

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(InputFormatError):
            SudokuBoard.from_string("123")
        with pytest.raises(InputFormatError):
            SudokuBoard.from_string("x" + "0" * 80)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        s = board.to_string()
        assert len(s) == 81
        assert s[0] == '5'

    def test_to_list_uses_python_ints(self):
        """Wire encoding is 9 lists of 9 plain ints."""
        board = SudokuBoard()
        board.set(2, 7, 4)
        data = board.to_list()
        assert len(data) == 9
        assert all(len(row) == 9 for row in data)
        assert all(type(v) is int for row in data for v in row)
        assert data[2][7] == 4
        assert SudokuBoard.from_2d_list(data) == board

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_constructor_copies_input(self):
        data = [[0] * 9 for _ in range(9)]
        board = SudokuBoard(data)
        data[0][0] = 9
        assert board.get(0, 0) == 0

    def test_str_layout(self):
        board = SudokuBoard()
        board.set(0, 0, 1)
        lines = str(board).splitlines()
        assert len(lines) == 13
        assert lines[1].startswith("| 1 . .")


class TestAsGridArray:
    """Tests for grid input coercion."""

    def test_accepts_nested_lists(self):
        arr = as_grid_array([[0] * 9 for _ in range(9)])
        assert arr.shape == (9, 9)
        assert arr.dtype == np.int32

    def test_accepts_numpy_array(self):
        arr = as_grid_array(np.ones((9, 9), dtype=np.int64))
        assert arr.sum() == 81

    @pytest.mark.parametrize("data", [
        None,
        "not a grid",
        {"puzzle": []},
        [[0] * 9 for _ in range(8)],
        [[0] * 9 for _ in range(8)] + [[0] * 8],
        [[0] * 9 for _ in range(8)] + ["000000000"],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [10]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [-1]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [1.0]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [None]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [True]],
        np.zeros((9, 8), dtype=np.int32),
        np.zeros((9, 9), dtype=np.float64),
    ])
    def test_rejects_malformed(self, data):
        with pytest.raises(InputFormatError):
            as_grid_array(data)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
