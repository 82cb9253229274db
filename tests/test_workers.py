# tests/test_workers.py
import random

from sudoku_solver.csp import workers
from sudoku_solver.csp.generator import count_completions, generate_solved_batch
from sudoku_solver.csp.workers import carve_many


def test_carve_many_empty_input():
    assert carve_many([]) == []


def test_carve_many_keeps_input_order_and_seeds(monkeypatch, solved_grid, puzzle_grid):
    calls = []

    def fake_carve(board, rng):
        calls.append(rng.random())
        return board

    monkeypatch.setattr(workers, "carve", fake_carve)
    out = carve_many([solved_grid, puzzle_grid], seed=3, max_workers=1)
    assert out == [solved_grid, puzzle_grid]

    first = list(calls)
    calls.clear()
    carve_many([solved_grid, puzzle_grid], seed=3, max_workers=1)
    assert calls == first
    assert first[0] != first[1]


def test_carve_many_in_process_pool():
    solved = generate_solved_batch(2, random.Random(21))
    puzzles = carve_many(solved, seed=5, max_workers=2)

    assert len(puzzles) == 2
    for board, puzzle in zip(solved, puzzles):
        assert puzzle.filled_count() < 81
        assert count_completions(puzzle, limit=2) == 1
        for solved_row, puzzle_row in zip(board.to_list(), puzzle.to_list()):
            for a, b in zip(solved_row, puzzle_row):
                assert b is None or a == b
