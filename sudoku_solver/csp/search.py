# -*- coding: utf-8 -*-
"""
深さ優先のバックトラック探索を行うモジュールです。

再帰呼び出しではなく、「明示的なスタック（フロンティア）」で探索状態を持ちます。

ざっくり流れ
------------
1. スタックからノードを 1 つ取り出す
2. そのノードの候補が尽きていれば捨てる（＝バックトラック）
3. 候補を 1 つ消費して子盤面を作る
4. 次のマスがあれば、ノードを積み直し、次のマスのノードを積む
5. 次のマスがない（(8, 8) を埋めた）なら、ノードを積み直して完成盤面を返す

完成盤面を返したあともスタックは生きているので、
もう一度 next_completion() を呼ぶと「次の別の完成盤面」が得られます。
また truncate() で深い部分の探索を捨てることで、
次に得られる盤面の多様性を確保できます。
"""

from __future__ import annotations

import random
from typing import List, Optional

from ..grid.board import Grid
from ..logging_utils import get_logger
from ..types import Position, SearchNode

logger = get_logger()


class SearchFrontier:
    """
    探索スタック（SearchNode の LIFO 列）を専有するクラスです。

    Attributes
    ----------
    stack : list of SearchNode
        ルートから現在の探索位置までのノード列。末尾がスタックの頂上。
    nodes_expanded : int
        これまでに作った子盤面の数（デバッグ用の統計）。
    """

    def __init__(self, board: Grid, rng: Optional[random.Random] = None) -> None:
        self.rng = rng
        self.nodes_expanded = 0
        self.stack: List[SearchNode] = []

        # ヒント同士がすでに矛盾している盤面には解がない
        if not board.is_consistent():
            logger.debug("[search] board has conflicting clues; frontier starts empty")
            return
        self.stack.append(self._make_node(board, Position.origin()))

    @classmethod
    def init(cls, rng: Optional[random.Random] = None) -> "SearchFrontier":
        """空の盤面から始まるフロンティアを作ります。"""
        return cls(Grid.empty(), rng)

    @classmethod
    def from_grid(cls, grid: Grid, rng: Optional[random.Random] = None) -> "SearchFrontier":
        """与えられた盤面（途中まで埋まっていてもよい）から始まるフロンティアを作ります。"""
        return cls(grid, rng)

    def _make_node(self, board: Grid, pos: Position) -> SearchNode:
        return SearchNode(position=pos, board=board, remaining=board.candidates(pos, self.rng))

    @property
    def depth(self) -> int:
        """現在のスタックの高さ。"""
        return len(self.stack)

    def __len__(self) -> int:
        return len(self.stack)

    def next_completion(self) -> Optional[Grid]:
        """
        次の完成盤面を 1 つ返します。

        スタックが空になるまで完成盤面が見つからなければ None を返します。
        これは「解がない」か「このフロンティアから到達できる解を
        すべて列挙し終えた」ことを意味します。
        """
        while self.stack:
            node = self.stack.pop()
            child = node.next_board()
            if child is None:
                # 候補が尽きたノードは積み直さない（バックトラック）
                continue

            self.nodes_expanded += 1
            successor = node.position.next()
            self.stack.append(node)

            if successor is None:
                logger.debug(
                    "[search] completion found after %d expansions", self.nodes_expanded
                )
                return child

            self.stack.append(self._make_node(child, successor))

        logger.debug("[search] frontier exhausted after %d expansions", self.nodes_expanded)
        return None

    def truncate(self, depth: int) -> None:
        """
        スタックの高さが depth 以下になるまでノードを捨てます。

        深い部分の探索を忘れることで、次の next_completion() が
        浅いところから別の枝を選び直すようになります。
        """
        while len(self.stack) > depth:
            self.stack.pop()
