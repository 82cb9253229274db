# tests/test_board.py
import random

import numpy as np
import pytest

from sudoku_solver.grid.board import Grid
from sudoku_solver.types import Position


def test_empty_grid_has_no_clues():
    grid = Grid.empty()
    assert grid.filled_count() == 0
    assert grid.to_list() == [[None] * 9 for _ in range(9)]
    assert not grid.is_complete()


def test_with_placement_returns_new_grid(solved_grid):
    pos = Position(4, 4)
    cleared = solved_grid.with_placement(pos, None)

    assert cleared.value_at(pos) is None
    assert solved_grid.value_at(pos) == 5  # receiver unchanged
    assert cleared.filled_count() == 80


def test_with_placement_is_idempotent():
    pos = Position(2, 7)
    once = Grid.empty().with_placement(pos, 3)
    twice = once.with_placement(pos, 3)
    assert once == twice
    assert hash(once) == hash(twice)


def test_grid_cells_are_read_only(solved_grid):
    copy = solved_grid.to_numpy()
    copy[0, 0] = 9
    assert solved_grid.value_at(Position(0, 0)) == 5


def test_duplicate_in_row_is_invalid():
    grid = Grid.empty().with_placement(Position(0, 1), 7).with_placement(Position(0, 6), 7)
    assert not grid.is_valid(Position(0, 1), 7)
    assert not grid.is_valid(Position(0, 6), 7)
    assert not grid.is_consistent()


def test_duplicate_in_column_and_box_is_invalid():
    grid = Grid.empty().with_placement(Position(1, 1), 4)
    assert not grid.is_valid(Position(8, 1), 4)  # column
    assert not grid.is_valid(Position(2, 2), 4)  # box
    assert grid.is_valid(Position(3, 3), 4)


def test_cell_is_not_compared_with_itself():
    grid = Grid.empty().with_placement(Position(5, 5), 2)
    assert grid.is_valid(Position(5, 5), 2)


def test_candidates_for_empty_cell(puzzle_grid):
    # row: 5 3 7 / column: 8 / box: 5 3 6 9 8
    assert sorted(puzzle_grid.candidates(Position(0, 2))) == [1, 2, 4]


def test_candidates_for_filled_cell_is_its_value(puzzle_grid):
    assert puzzle_grid.candidates(Position(0, 0)) == [5]


def test_candidates_of_empty_grid_cover_all_digits():
    assert sorted(Grid.empty().candidates(Position(3, 3))) == list(range(1, 10))


def test_candidates_shuffle_is_seeded():
    pos = Position(0, 0)
    a = Grid.empty().candidates(pos, random.Random(5))
    b = Grid.empty().candidates(pos, random.Random(5))
    assert a == b


def test_render_layout(solved_grid):
    lines = solved_grid.render().split("\n")
    assert lines[0] == "5 3 4 | 6 7 8 | 9 1 2 "
    assert lines[3] == "- - - + - - - + - - -"
    assert lines[7] == "- - - + - - - + - - -"
    assert len(lines) == 12  # 9 rows + 2 separators + trailing ""


def test_render_shows_blanks_as_space():
    first = Grid.empty().render().split("\n")[0]
    assert first == "      |       |       "


def test_list_round_trip(puzzle_grid):
    assert Grid.from_list(puzzle_grid.to_list()) == puzzle_grid


def test_from_list_accepts_zero_as_empty():
    rows = [[0] * 9 for _ in range(9)]
    rows[0][0] = 9
    grid = Grid.from_list(rows)
    assert grid.value_at(Position(0, 0)) == 9
    assert grid.value_at(Position(0, 1)) is None


@pytest.mark.parametrize(
    "rows",
    [
        [[None] * 9 for _ in range(8)],
        [[None] * 8 for _ in range(9)],
        [[10] + [None] * 8] + [[None] * 9 for _ in range(8)],
        [[True] + [None] * 8] + [[None] * 9 for _ in range(8)],
        [["5"] + [None] * 8] + [[None] * 9 for _ in range(8)],
    ],
)
def test_from_list_rejects_bad_boards(rows):
    with pytest.raises(ValueError):
        Grid.from_list(rows)


def test_constructor_rejects_bad_shape():
    with pytest.raises(ValueError):
        Grid(np.zeros((3, 3), dtype=np.int8))


def test_to_string(puzzle_grid):
    text = puzzle_grid.to_string()
    assert len(text) == 81
    assert text.startswith("53..7....")


def test_position_order_and_successor():
    assert Position(0, 0).next() == Position(0, 1)
    assert Position(2, 8).next() == Position(3, 0)
    assert Position(8, 8).next() is None

    positions = Position.all()
    assert len(positions) == 81
    assert positions == sorted(positions)
    assert Position(7, 5).box_origin == Position(6, 3)


def test_position_out_of_range():
    with pytest.raises(ValueError):
        Position(9, 0)
