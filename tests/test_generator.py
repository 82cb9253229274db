# tests/test_generator.py
import logging
import random

import pytest

from sudoku_solver.csp import generator
from sudoku_solver.csp.generator import (
    carve,
    count_completions,
    frontier_depth_to_keep,
    generate_solved_batch,
    solve_one,
    try_solve,
)
from sudoku_solver.csp.search import SearchFrontier
from sudoku_solver.grid.board import Grid
from sudoku_solver.types import Position

from conftest import assert_unique_digits


@pytest.fixture(scope="module")
def carved():
    from conftest import SOLVED_TEXT
    from sudoku_solver.grid.parser import parse_board_string

    solved = parse_board_string(SOLVED_TEXT)
    return solved, carve(solved, random.Random(7))


def test_solve_empty_grid():
    grid = solve_one(Grid.empty(), random.Random(0))
    assert grid.is_complete()
    assert_unique_digits(grid)


def test_solve_keeps_single_clue():
    start = Grid.empty().with_placement(Position(0, 0), 5)
    grid = solve_one(start, random.Random(0))
    assert grid.is_complete()
    assert grid.value_at(Position(0, 0)) == 5
    assert_unique_digits(grid)


def test_solve_never_overwrites_clues(puzzle_grid, solved_grid):
    grid = solve_one(puzzle_grid)
    assert grid == solved_grid
    for pos in Position.all():
        if puzzle_grid.is_filled(pos):
            assert grid.value_at(pos) == puzzle_grid.value_at(pos)


def test_unsolvable_board_is_returned_unchanged(caplog):
    grid = Grid.empty().with_placement(Position(0, 0), 7).with_placement(Position(8, 0), 7)
    with caplog.at_level(logging.WARNING):
        assert solve_one(grid) == grid
    assert try_solve(grid) is None
    assert "no solution" in caplog.text


@pytest.mark.parametrize(
    "num_boards, expected",
    [(1, 1), (9, 1), (10, 2), (50, 2), (81, 2), (82, 3)],
)
def test_frontier_depth_to_keep(num_boards, expected):
    assert frontier_depth_to_keep(num_boards) == expected


@pytest.mark.parametrize("num_boards", [1, 5, 50])
def test_generate_solved_batch_distinct_and_valid(num_boards):
    boards = generate_solved_batch(num_boards, random.Random(num_boards))
    assert len(boards) == num_boards
    assert len(set(boards)) == num_boards
    for board in boards:
        assert board.is_complete()
        assert_unique_digits(board)


def test_generate_solved_batch_is_seeded():
    a = generate_solved_batch(3, random.Random(11))
    b = generate_solved_batch(3, random.Random(11))
    assert a == b


def test_generate_solved_batch_zero():
    assert generate_solved_batch(0) == []


def test_generate_solved_batch_shortfall(monkeypatch, caplog, solved_grid):
    # a frontier that can only ever yield one board
    monkeypatch.setattr(
        generator.SearchFrontier,
        "init",
        classmethod(lambda cls, rng=None: SearchFrontier.from_grid(solved_grid, rng)),
    )
    with caplog.at_level(logging.WARNING):
        boards = generate_solved_batch(3)
    assert boards == [solved_grid]
    assert "Could not generate 3 boards" in caplog.text


def test_count_completions(puzzle_grid):
    assert count_completions(puzzle_grid) == 1
    assert count_completions(Grid.empty(), limit=3) == 3


def test_carve_removes_cells(carved):
    solved, puzzle = carved
    assert puzzle.filled_count() < solved.filled_count()
    for pos in Position.all():
        if puzzle.is_filled(pos):
            assert puzzle.value_at(pos) == solved.value_at(pos)


def test_carved_puzzle_has_unique_solution(carved):
    solved, puzzle = carved
    assert count_completions(puzzle, limit=2) == 1
    assert solve_one(puzzle) == solved


def test_carve_is_reproducible(carved):
    solved, puzzle = carved
    assert carve(solved, random.Random(7)) == puzzle


def test_carve_rejects_invalid_board(solved_grid):
    # swapping two cells in a row breaks their columns
    a, b = Position(0, 0), Position(0, 1)
    broken = solved_grid.with_placement(a, solved_grid.value_at(b)).with_placement(
        b, solved_grid.value_at(a)
    )
    with pytest.raises(RuntimeError):
        carve(broken, random.Random(0))
