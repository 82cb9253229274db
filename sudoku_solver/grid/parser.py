# -*- coding: utf-8 -*-
"""
外部から受け取った盤面データを Grid に正規化するモジュールです。

主な役割:
- 個々のセル値（数字・文字列・空文字・NaN など）を 1〜9 / None に揃える
- 81 文字の 1 行表現（"53..7...." のような形式）を Grid に変換
- pandas.DataFrame（9x9）を Grid に変換
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np
import pandas as pd

from ..config import DIGITS, EMPTY_CELL_CHARS, GRID_SIZE
from .board import Grid


def normalize_cell(x: Any) -> Optional[int]:
    """
    個々のセルの値を、内部表現（1〜9 または None）に変換します。

    変換ルール
    ----------
    - None / 空文字 / NaN / "." / "0" / 0 : None（空マス）
    - "5" や 5 : 5
    - それ以外 : ValueError
    """
    if x is None:
        return None

    if isinstance(x, bool):
        raise ValueError(f"Invalid cell value: {x!r}")

    if isinstance(x, (float, np.floating)):
        # pandas で読み込むと空欄が NaN、数字が 5.0 になることがある
        if math.isnan(x):
            return None
        if not float(x).is_integer():
            raise ValueError(f"Invalid cell value: {x!r}")
        x = int(x)

    if isinstance(x, (int, np.integer)):
        if x == 0:
            return None
        if int(x) in DIGITS:
            return int(x)
        raise ValueError(f"Cell value out of range: {x!r}")

    s = str(x).strip()
    if not s or (len(s) == 1 and s in EMPTY_CELL_CHARS):
        return None
    if s.isdigit() and int(s) in DIGITS:
        return int(s)

    raise ValueError(f"Invalid cell value: {x!r}")


def parse_board_string(text: str) -> Grid:
    """
    81 文字の 1 行表現を Grid に変換します。

    数字 1〜9 はそのまま、"0" "." "_" は空マスとして扱います。
    途中の空白や改行は無視します。
    """
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != GRID_SIZE * GRID_SIZE:
        raise ValueError(
            f"Board string must have {GRID_SIZE * GRID_SIZE} cells, got {len(chars)}"
        )
    cells = [normalize_cell(ch) for ch in chars]
    rows = [cells[i:i + GRID_SIZE] for i in range(0, len(cells), GRID_SIZE)]
    return Grid.from_list(rows)


def grid_from_dataframe(df: pd.DataFrame) -> Grid:
    """
    9x9 の DataFrame から Grid を作ります。

    各セルは :func:`normalize_cell` で正規化します。
    """
    rows, cols = df.shape
    if (rows, cols) != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f"DataFrame must be {GRID_SIZE}x{GRID_SIZE}, got {df.shape}")

    return Grid.from_list(
        [[normalize_cell(df.iat[i, j]) for j in range(cols)] for i in range(rows)]
    )


def grid_to_dataframe(grid: Grid) -> pd.DataFrame:
    """Grid を 9x9 の DataFrame（空マスは None）に変換します。"""
    return pd.DataFrame(grid.to_list(), dtype=object)
