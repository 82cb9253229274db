# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

cli.py や api_proto/local_api.py などから:

    from sudoku_solver import solve_boards, generate

と呼び出されることを想定しています。

- solve_boards() : 盤面のリストをそれぞれ 1 通り完成させる（解けなければそのまま）
- generate()     : 完成盤面を作り、必要なら穴あけして問題盤面にする
- solve()        : 1 盤面（Grid / DataFrame / 入れ子リスト）を解いて結果 dict を返す
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd
from tqdm import tqdm

from .config import SHOW_PROGRESS
from .csp.generator import carve, generate_solved_batch, solve_one, try_solve
from .csp.search import SearchFrontier
from .csp.workers import carve_many
from .grid.board import Grid
from .grid.parser import grid_from_dataframe
from .logging_utils import get_logger
from .postprocess.render_result import build_result
from .types import Position, SearchNode

logger = get_logger()

__all__ = [
    "Grid",
    "Position",
    "SearchFrontier",
    "SearchNode",
    "carve",
    "carve_many",
    "generate",
    "generate_solved_batch",
    "solve",
    "solve_boards",
    "solve_one",
]

BoardInput = Union[Grid, pd.DataFrame, Sequence[Sequence[Optional[int]]]]


def _to_grid(board: BoardInput) -> Grid:
    if isinstance(board, Grid):
        return board
    if isinstance(board, pd.DataFrame):
        return grid_from_dataframe(board)
    return Grid.from_list(board)


def solve_boards(boards: Sequence[Grid], seed: Optional[int] = None) -> List[Grid]:
    """
    盤面をそれぞれ 1 通り完成させます。

    解けなかった盤面は入力のまま残します（エラーにはしません）。
    """
    rng = random.Random(seed)
    solved: List[Grid] = []
    unsolved = 0

    logger.info("=== solve_boards() START (%d boards) ===", len(boards))
    for i, board in enumerate(tqdm(boards, desc="Solving boards", disable=not SHOW_PROGRESS)):
        result = try_solve(board, rng)
        if result is None:
            unsolved += 1
            logger.warning("Board #%d has no solution; keeping it unchanged.", i)
            result = board
        solved.append(result)

    logger.info("=== solve_boards() END (unsolved=%d) ===", unsolved)
    return solved


def generate(
    num_boards: int,
    seed: Optional[int] = None,
    solved_only: bool = False,
    max_workers: Optional[int] = None,
) -> List[Grid]:
    """
    新しい盤面を num_boards 枚作ります。

    1) 1 つのフロンティアから互いに異なる完成盤面を作る
    2) solved_only でなければ、各盤面を並列に穴あけして問題盤面にする

    完成盤面が足りなかった場合は、作れた分だけを返します。
    """
    rng = random.Random(seed)

    logger.info("=== generate() START ===")
    solved = generate_solved_batch(num_boards, rng)
    if solved_only:
        logger.info("=== generate() END (solved only) ===")
        return solved

    puzzles = carve_many(solved, seed=rng.getrandbits(64), max_workers=max_workers)
    logger.info(
        "=== generate() END (%d puzzles, avg clues=%.1f) ===",
        len(puzzles),
        sum(p.filled_count() for p in puzzles) / len(puzzles) if puzzles else 0.0,
    )
    return puzzles


def solve(board: BoardInput, seed: Optional[int] = None) -> Dict[str, Any]:
    """
    1 盤面を解いて、表示用の結果 dict を返します。

    board には Grid、9x9 の DataFrame、9x9 の入れ子リストのいずれかを渡せます。
    """
    grid = _to_grid(board)
    logger.info("Solving board with %d clues", grid.filled_count())
    solution = try_solve(grid, random.Random(seed))
    if solution is None:
        logger.warning("Board has no solution.")
    return build_result(grid, solution)
