# -*- coding: utf-8 -*-
"""
盤面のまとまり（バッチ）をファイルに読み書きするモジュールです。

対応形式：
- .json : [{"board": [[5, 3, null, ...], ...]}, ...] という形式
          （9x9 の入れ子リスト、空マスは null）
- .csv  : 'board' 列に 81 文字の 1 行表現（空マスは "." または "0"）

JSON は pydantic で形を検証し、CSV は pandas で読み書きします。
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd
from pydantic import BaseModel, TypeAdapter, field_validator

from ..config import CSV_BOARD_COLUMN
from ..grid.board import Grid
from ..grid.parser import parse_board_string
from ..logging_utils import get_logger

logger = get_logger()


class BoardModel(BaseModel):
    """JSON 上の 1 盤面分のレコードです。"""

    board: List[List[Optional[int]]]

    @field_validator("board")
    @classmethod
    def _check_board(cls, v: List[List[Optional[int]]]) -> List[List[Optional[int]]]:
        # 形と値の範囲は Grid 側のチェックに任せる（ValueError は検証エラーになる）
        return Grid.from_list(v).to_list()

    def to_grid(self) -> Grid:
        return Grid.from_list(self.board)

    @classmethod
    def from_grid(cls, grid: Grid) -> "BoardModel":
        return cls(board=grid.to_list())


BoardListAdapter = TypeAdapter(List[BoardModel])


def _load_json(path: Path) -> List[Grid]:
    records = BoardListAdapter.validate_json(path.read_bytes())
    return [r.to_grid() for r in records]


def _save_json(grids: Sequence[Grid], path: Path) -> None:
    records = [BoardModel.from_grid(g) for g in grids]
    path.write_bytes(BoardListAdapter.dump_json(records))


def _load_csv(path: Path) -> List[Grid]:
    df = pd.read_csv(path, encoding="utf-8-sig", dtype=str, keep_default_na=False)
    if CSV_BOARD_COLUMN not in df.columns:
        raise ValueError(f"Board CSV must have a '{CSV_BOARD_COLUMN}' column.")
    return [parse_board_string(s) for s in df[CSV_BOARD_COLUMN]]


def _save_csv(grids: Sequence[Grid], path: Path) -> None:
    df = pd.DataFrame({CSV_BOARD_COLUMN: [g.to_string() for g in grids]})
    df.to_csv(path, index=False, encoding="utf-8")


def load_boards(path: str | Path) -> List[Grid]:
    """
    盤面ファイルを読み込み、Grid のリストにして返します。

    Raises
    ------
    FileNotFoundError
        ファイルが存在しない場合。
    ValueError
        拡張子が未対応、または中身が盤面として不正な場合
        （pydantic.ValidationError も ValueError のサブクラスです）。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Board file not found: {p}")

    suffix = p.suffix.lower()
    if suffix == ".json":
        grids = _load_json(p)
    elif suffix == ".csv":
        grids = _load_csv(p)
    else:
        raise ValueError(f"Unsupported board file type: {p.suffix!r}")

    logger.info("Loaded %d boards from %s", len(grids), p)
    return grids


def save_boards(grids: Sequence[Grid], path: str | Path) -> Path:
    """
    Grid のリストをファイルに保存し、保存先のパスを返します。

    親ディレクトリがなければ作成します。
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix not in (".json", ".csv"):
        raise ValueError(f"Unsupported board file type: {p.suffix!r}")

    p.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".json":
        _save_json(grids, p)
    else:
        _save_csv(grids, p)

    logger.info("Saved %d boards to %s", len(grids), p)
    return p
