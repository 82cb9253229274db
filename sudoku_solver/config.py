# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 並列ワーカー数
- 進捗ログの出力間隔
- 出力ファイルの置き場所
などを簡単に変更できます。
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

# ==== 盤面ジオメトリ =======================================================

# 盤面の一辺のマス数（9x9 固定）
GRID_SIZE: int = 9

# ブロック（箱）の一辺のマス数（3x3 固定）
BOX_SIZE: int = 3

# セルに入りうる数字
DIGITS: Tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))

# 内部表現で「空マス」を表す値
EMPTY: int = 0

# 81文字表現で空マスとして受け付ける文字
EMPTY_CELL_CHARS: str = "0._"

# 81文字表現に書き出すときの空マス文字
EMPTY_CELL_OUTPUT_CHAR: str = "."

# ==== 探索関連 =============================================================

# 1マスあたりの候補数の上限。
# 解盤面をまとめて生成するとき、フロンティアを何段まで残すかの計算に使う。
BRANCHING_FACTOR: int = 9

# ==== 生成関連 =============================================================

# 進捗バー（tqdm）を表示するかどうか。SUDOKU_PROGRESS=0 で非表示にできる
SHOW_PROGRESS: bool = os.getenv("SUDOKU_PROGRESS", "1") != "0"

# 穴あけ（carve）を並列に行うときのワーカー数。
# None の場合は CPU 数から自動で決める。
_env_workers = os.getenv("SUDOKU_MAX_WORKERS")
MAX_WORKERS: Optional[int] = int(_env_workers) if _env_workers else None

# ==== 入出力関連 ===========================================================

# CLI でファイル出力するときのデフォルトディレクトリ
DEFAULT_OUTPUT_DIR: str = "outputs"

# CSV 形式で盤面を保持する列名
CSV_BOARD_COLUMN: str = "board"

# ==== API 関連 =============================================================

# 1リクエストで生成できる盤面数の上限
MAX_API_BOARDS: int = 20
