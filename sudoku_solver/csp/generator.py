# -*- coding: utf-8 -*-
"""
SearchFrontier を使って、盤面を解いたり新しい盤面を作ったりするモジュールです。

- solve_one()             : 途中まで埋まった盤面を 1 通り完成させる
- generate_solved_batch() : 互いに異なる完成盤面をまとめて作る
- carve()                 : 完成盤面からマスを消して「唯一解の問題」を作る
"""

from __future__ import annotations

import random
from typing import List, Optional

from tqdm import tqdm

from ..config import BRANCHING_FACTOR, SHOW_PROGRESS
from ..grid.board import Grid
from ..logging_utils import get_logger
from ..types import Position
from .search import SearchFrontier

logger = get_logger()


def try_solve(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Grid]:
    """盤面の完成形を 1 つ返します。解がなければ None。"""
    return SearchFrontier.from_grid(grid, rng).next_completion()


def solve_one(grid: Grid, rng: Optional[random.Random] = None) -> Grid:
    """
    盤面の完成形を 1 つ返します。

    解けなかった場合はエラーにせず、入力盤面をそのまま返します。
    """
    solved = try_solve(grid, rng)
    if solved is None:
        logger.warning("Board has no solution; keeping it unchanged.")
        return grid
    return solved


def count_completions(grid: Grid, limit: int = 2, rng: Optional[random.Random] = None) -> int:
    """
    盤面の完成形の数を数えます。limit 個見つかった時点で打ち切ります。

    limit=2 にすれば「唯一解かどうか」の判定になります。
    """
    frontier = SearchFrontier.from_grid(grid, rng)
    count = 0
    while count < limit and frontier.next_completion() is not None:
        count += 1
    return count


def frontier_depth_to_keep(num_boards: int) -> int:
    """
    num_boards 枚の異なる盤面を得るために、
    フロンティアを何段まで残せばよいかを返します。

    9**k >= num_boards を満たす最小の k（ただし 1 以上）です。
    """
    to_keep = 1
    while BRANCHING_FACTOR ** to_keep < num_boards:
        to_keep += 1
    return to_keep


def generate_solved_batch(num_boards: int, rng: Optional[random.Random] = None) -> List[Grid]:
    """
    互いに異なる完成盤面を num_boards 枚作ります。

    1 つのフロンティアから盤面を引くたびに、浅い k 段だけを残して
    それより深い探索を捨てます。こうすると、次の盤面は
    辞書式に隣り合う盤面ではなく、浅い段で別の枝を選んだ盤面になります。

    途中でフロンティアが尽きた場合は、警告を出してそこまでの盤面を返します。
    """
    if num_boards <= 0:
        return []

    to_keep = frontier_depth_to_keep(num_boards)
    frontier = SearchFrontier.init(rng)
    boards: List[Grid] = []

    logger.info("Generating %d solved boards (frontier depth kept: %d)", num_boards, to_keep)
    for _ in tqdm(range(num_boards), desc="Generating solved boards", disable=not SHOW_PROGRESS):
        board = frontier.next_completion()
        if board is None:
            logger.warning(
                "Could not generate %d boards; frontier exhausted after %d.",
                num_boards, len(boards),
            )
            break
        boards.append(board)
        frontier.truncate(to_keep)

    return boards


def carve(solved: Grid, rng: Optional[random.Random] = None) -> Grid:
    """
    完成盤面からマスを消して、唯一解を保つ問題盤面を作ります。

    81 マスをランダムな順に見ていき、
    - そのマスを消した盤面について探索を 2 回進める
    - 2 つ目の完成盤面が見つかった（＝解が複数になった）なら消さない
    - 見つからなければ消したままにする
    という貪欲法です。最少ヒントの保証はありません。

    Raises
    ------
    RuntimeError
        solved が正しい完成盤面でなく、1 つ目の完成盤面すら得られない場合。
    """
    positions = Position.all()
    (rng or random).shuffle(positions)

    board = solved
    removed = 0
    while positions:
        pos = positions.pop()
        cleared = board.with_placement(pos, None)

        probe = SearchFrontier.from_grid(cleared, rng)
        if probe.next_completion() is None:
            raise RuntimeError(f"Board became unsolvable after clearing {pos}")

        if probe.next_completion() is None:
            board = cleared
            removed += 1

    logger.debug("[carve] removed %d cells, %d clues left", removed, board.filled_count())
    return board
