# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_solver" and "api_proto" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_solver.grid.board import Grid  # noqa: E402
from sudoku_solver.grid.parser import parse_board_string  # noqa: E402

SOLVED_TEXT = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

PUZZLE_TEXT = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)


@pytest.fixture
def solved_grid() -> Grid:
    return parse_board_string(SOLVED_TEXT)


@pytest.fixture
def puzzle_grid() -> Grid:
    return parse_board_string(PUZZLE_TEXT)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


def assert_unique_digits(grid: Grid) -> None:
    """Every row, column and 3x3 box holds each digit at most once."""
    cells = grid.to_numpy()
    units = [cells[r, :] for r in range(9)] + [cells[:, c] for c in range(9)]
    units += [cells[br:br + 3, bc:bc + 3].ravel() for br in range(0, 9, 3) for bc in range(0, 9, 3)]
    for unit in units:
        digits = [int(v) for v in unit if v != 0]
        assert len(digits) == len(set(digits))
