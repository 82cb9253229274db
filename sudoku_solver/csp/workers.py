# -*- coding: utf-8 -*-
"""
複数の完成盤面に対する穴あけ（carve）を並列に実行するモジュールです。

1 枚の盤面の穴あけは逐次処理ですが、盤面どうしは独立しているので、
プロセスプールに 1 枚ずつ投げて並列に処理します。

- 各タスクは (盤面のリスト表現, 乱数シード) だけを受け取り、
  ワーカー内で自分専用の random.Random とフロンティアを作ります。
- 結果は as_completed() で届いた順に受け取り（tqdm で進捗表示）、最後に入力順へ並べ直します。
- シードは親の乱数から先に全部決めておくので、
  完了順に関係なく同じシードなら同じ結果になります。
"""

from __future__ import annotations

import os
import random
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence

from tqdm import tqdm

from ..config import MAX_WORKERS, SHOW_PROGRESS
from ..grid.board import Grid
from ..logging_utils import get_logger
from .generator import carve

logger = get_logger()


def _carve_worker(board: List[List[Optional[int]]], seed: int) -> List[List[Optional[int]]]:
    """ワーカープロセス側で 1 枚分の穴あけを行います。"""
    rng = random.Random(seed)
    return carve(Grid.from_list(board), rng).to_list()


def _resolve_workers(max_workers: Optional[int], num_tasks: int) -> int:
    workers = max_workers or MAX_WORKERS or max(1, (os.cpu_count() or 1) - 1)
    return max(1, min(workers, num_tasks))


def _progress_bar(total: int) -> tqdm:
    return tqdm(total=total, desc="Carving boards", disable=not SHOW_PROGRESS)


def _carve_sequential(boards: Sequence[Grid], seeds: Sequence[int]) -> List[Grid]:
    results: List[Grid] = []
    with _progress_bar(len(boards)) as pbar:
        for board, seed in zip(boards, seeds):
            results.append(carve(board, random.Random(seed)))
            pbar.update(1)
    return results


def carve_many(
    solved_boards: Sequence[Grid],
    seed: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> List[Grid]:
    """
    完成盤面のリストをそれぞれ穴あけし、入力と同じ順で返します。

    Parameters
    ----------
    solved_boards : sequence of Grid
        完成盤面のリスト。
    seed : int, optional
        乱数シード。指定すると結果が再現可能になります。
    max_workers : int, optional
        ワーカープロセス数。1 ならプロセスを使わずに逐次実行します。
    """
    if not solved_boards:
        return []

    master = random.Random(seed)
    seeds = [master.getrandbits(64) for _ in solved_boards]
    workers = _resolve_workers(max_workers, len(solved_boards))

    if workers == 1:
        return _carve_sequential(solved_boards, seeds)

    try:
        executor = ProcessPoolExecutor(max_workers=workers)
    except (PermissionError, OSError) as e:
        logger.warning("Process pool unavailable (%s); carving sequentially.", e)
        return _carve_sequential(solved_boards, seeds)

    logger.info("Carving %d boards with %d workers", len(solved_boards), workers)
    results: Dict[int, Grid] = {}
    with executor, _progress_bar(len(solved_boards)) as pbar:
        futures = {
            executor.submit(_carve_worker, board.to_list(), s): index
            for index, (board, s) in enumerate(zip(solved_boards, seeds))
        }
        for future in as_completed(futures):
            index = futures[future]
            results[index] = Grid.from_list(future.result())
            pbar.update(1)

    return [results[i] for i in range(len(solved_boards))]
