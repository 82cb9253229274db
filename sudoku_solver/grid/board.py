# -*- coding: utf-8 -*-
"""
9x9 の数独盤面（Grid）を表すモジュールです。

主な役割:
- 盤面を numpy 配列（int8, 空マスは 0）で保持する
- 行・列・3x3 ブロックの重複チェック
- あるマスに置ける候補数字（ドメイン）の計算
- 人が読める形のテキスト表示

Grid は「値」として扱います。
with_placement() は元の盤面を書き換えず、コピーした新しい盤面を返すので、
探索の各枝がそれぞれ自分専用の盤面を持つことができます。
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

import numpy as np

from ..config import BOX_SIZE, DIGITS, EMPTY, EMPTY_CELL_OUTPUT_CHAR, GRID_SIZE
from ..types import Position

# ブロック区切りの横線
ROW_SEPARATOR = "- - - + - - - + - - -"

CellValue = Optional[int]


class Grid:
    """
    9x9 の数独盤面です。

    内部では shape=(9, 9) の numpy 配列を読み取り専用で保持し、
    変更はすべて新しい Grid を作ることで表現します。
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[np.ndarray] = None) -> None:
        if cells is None:
            arr = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
        else:
            arr = np.array(cells, dtype=np.int8)
        if arr.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {arr.shape}")
        if ((arr < EMPTY) | (arr > GRID_SIZE)).any():
            raise ValueError("Grid cells must be 0 (empty) or digits 1-9")
        arr.flags.writeable = False
        self._cells = arr

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Grid":
        # 検証済み配列をそのまま包む（探索中の高速パス）
        grid = cls.__new__(cls)
        arr.flags.writeable = False
        grid._cells = arr
        return grid

    @classmethod
    def empty(cls) -> "Grid":
        """すべてのマスが空の盤面を返します。"""
        return cls()

    @classmethod
    def from_list(cls, rows: Sequence[Sequence[CellValue]]) -> "Grid":
        """
        9x9 の入れ子リスト（数字 1〜9 または None）から盤面を作ります。

        JSON で受け取った盤面をそのまま渡せる形式です。
        0 も空マスとして受け付けます。

        Raises
        ------
        ValueError
            形が 9x9 でない、または 1〜9 以外の値が含まれる場合。
        """
        if len(rows) != GRID_SIZE:
            raise ValueError(f"Board must have {GRID_SIZE} rows, got {len(rows)}")

        arr = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
        for r, row in enumerate(rows):
            if len(row) != GRID_SIZE:
                raise ValueError(f"Row {r} must have {GRID_SIZE} cells, got {len(row)}")
            for c, value in enumerate(row):
                if value is None:
                    continue
                # bool は int のサブクラスなので明示的に弾く
                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise ValueError(f"Cell ({r}, {c}) must be an integer or None, got {value!r}")
                if value != EMPTY and value not in DIGITS:
                    raise ValueError(f"Cell ({r}, {c}) out of range: {value}")
                arr[r, c] = value
        return cls._wrap(arr)

    # ---------- 参照系 ----------

    def value_at(self, pos: Position) -> CellValue:
        """pos の数字を返します。空マスなら None。"""
        v = int(self._cells[pos.row, pos.column])
        return v if v != EMPTY else None

    def is_filled(self, pos: Position) -> bool:
        return self._cells[pos.row, pos.column] != EMPTY

    def filled_count(self) -> int:
        """埋まっているマスの数を返します。"""
        return int(np.count_nonzero(self._cells))

    def is_complete(self) -> bool:
        """81 マスすべてが埋まっていれば True。"""
        return self.filled_count() == GRID_SIZE * GRID_SIZE

    def to_numpy(self) -> np.ndarray:
        """内部配列のコピー（書き込み可能）を返します。"""
        return self._cells.copy()

    def to_list(self) -> List[List[CellValue]]:
        """
        9x9 の入れ子リストに変換します。空マスは None になります。

        from_list() と対になっていて、往復しても盤面は変わりません。
        """
        return [
            [int(v) if v != EMPTY else None for v in row]
            for row in self._cells
        ]

    def to_string(self) -> str:
        """81 文字の 1 行表現（空マスは "."）に変換します。"""
        return "".join(
            str(int(v)) if v != EMPTY else EMPTY_CELL_OUTPUT_CHAR
            for v in self._cells.ravel()
        )

    # ---------- 更新系（コピーを返す） ----------

    def with_placement(self, pos: Position, value: CellValue) -> "Grid":
        """
        pos に value を置いた新しい盤面を返します。

        value に None を渡すとそのマスを空にします。
        元の盤面（self）は変更されません。
        """
        arr = self._cells.copy()
        arr[pos.row, pos.column] = EMPTY if value is None else value
        return Grid._wrap(arr)

    # ---------- 制約チェック ----------

    def is_valid(self, pos: Position, value: int) -> bool:
        """
        pos に value を置いたとき、同じ行・列・3x3 ブロックの
        他の 8 マスと重複しなければ True を返します。

        pos 自身にすでに入っている値は比較対象にしません。
        """
        r, c = pos.row, pos.column

        row_hit = self._cells[r, :] == value
        row_hit[c] = False
        if row_hit.any():
            return False

        col_hit = self._cells[:, c] == value
        col_hit[r] = False
        if col_hit.any():
            return False

        br, bc = r - r % BOX_SIZE, c - c % BOX_SIZE
        box_hit = self._cells[br:br + BOX_SIZE, bc:bc + BOX_SIZE] == value
        box_hit[r - br, c - bc] = False
        return not box_hit.any()

    def candidates(self, pos: Position, rng: Optional[random.Random] = None) -> List[int]:
        """
        pos に置ける候補数字（1〜9）をランダムな順序で返します。

        pos がすでに埋まっている場合は、その値だけのリストを返します。
        こうしておくと、探索はヒントのマスも空マスも同じ流れで扱えます。

        Parameters
        ----------
        pos : Position
            対象のマス。
        rng : random.Random, optional
            シャッフルに使う乱数源。省略時は random モジュールの共有乱数。
        """
        current = int(self._cells[pos.row, pos.column])
        if current != EMPTY:
            return [current]

        r, c = pos.row, pos.column
        br, bc = r - r % BOX_SIZE, c - c % BOX_SIZE

        # used[d] が True なら d は行・列・ブロックのどこかで使用済み
        used = np.zeros(GRID_SIZE + 1, dtype=bool)
        used[self._cells[r, :]] = True
        used[self._cells[:, c]] = True
        used[self._cells[br:br + BOX_SIZE, bc:bc + BOX_SIZE].ravel()] = True

        valid = [d for d in DIGITS if not used[d]]
        (rng or random).shuffle(valid)
        return valid

    def is_consistent(self) -> bool:
        """埋まっているすべてのマスが重複ルールを満たしていれば True。"""
        for pos in Position.all():
            value = self.value_at(pos)
            if value is not None and not self.is_valid(pos, value):
                return False
        return True

    # ---------- 表示 ----------

    def render(self) -> str:
        """
        ブロック区切り付きのテキスト表現を返します。

        例（1 行目）::

            5 3 4 | 6 7 8 | 9 1 2

        空マスは半角スペース 1 つで表示します。
        """
        lines: List[str] = []
        for i, row in enumerate(self._cells):
            if i % BOX_SIZE == 0 and i != 0:
                lines.append(ROW_SEPARATOR + "\n")
            parts: List[str] = []
            for j, v in enumerate(row):
                if j % BOX_SIZE == 0 and j != 0:
                    parts.append("| ")
                parts.append(f"{int(v) if v != EMPTY else ' '} ")
            lines.append("".join(parts) + "\n")
        return "".join(lines)

    # ---------- 値としての振る舞い ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Grid('{self.to_string()}')"

    def __str__(self) -> str:
        return self.render()

    def __reduce__(self):
        # ProcessPoolExecutor でワーカーに渡すため
        return (Grid, (self._cells.copy(),))
