# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .config import GRID_SIZE

if TYPE_CHECKING:
    from .grid.board import Grid


@dataclass(frozen=True, order=True)
class Position:
    """
    盤面上のマスの座標を表すクラスです。

    order=True なので、(row, column) の辞書式順序、
    つまり「行優先（row-major）」の順序で比較できます。

    Attributes
    ----------
    row : int
        行番号（0〜8）。
    column : int
        列番号（0〜8）。
    """

    row: int
    column: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < GRID_SIZE and 0 <= self.column < GRID_SIZE):
            raise ValueError(f"Position out of range: ({self.row}, {self.column})")

    @classmethod
    def origin(cls) -> "Position":
        """探索の出発点である (0, 0) を返します。"""
        return cls(0, 0)

    @classmethod
    def all(cls) -> List["Position"]:
        """81 マスすべての座標を行優先の順で返します。"""
        return [cls(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)]

    def next(self) -> Optional["Position"]:
        """
        行優先で次のマスを返します。

        最後のマス (8, 8) の次はないので None を返します。
        """
        last = GRID_SIZE - 1
        if self.column < last:
            return Position(self.row, self.column + 1)
        if self.row < last:
            return Position(self.row + 1, 0)
        return None

    @property
    def box_origin(self) -> "Position":
        """このマスが属する 3x3 ブロックの左上のマスを返します。"""
        return Position(self.row - self.row % 3, self.column - self.column % 3)


@dataclass
class SearchNode:
    """
    深さ優先探索の 1 ノード（1 マス分の作業単位）を表すクラスです。

    Attributes
    ----------
    position : Position
        このノードで埋めるマス。
    board : Grid
        このノードに入った時点の盤面（ノードが専有するスナップショット）。
    remaining : list of int
        まだ試していない候補数字。シャッフル済みで、末尾から取り出します。
    """

    position: Position
    board: "Grid"
    remaining: List[int] = field(default_factory=list)

    def next_board(self) -> Optional["Grid"]:
        """
        候補を 1 つ消費して、その数字を置いた子盤面を返します。

        候補が尽きていれば None を返します。
        """
        if not self.remaining:
            return None
        value = self.remaining.pop()
        return self.board.with_placement(self.position, value)

    @property
    def exhausted(self) -> bool:
        return not self.remaining
