# -*- coding: utf-8 -*-
"""
求解・生成の結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..config import GRID_SIZE
from ..grid.board import Grid


def render_boards(grids: Sequence[Grid]) -> str:
    """
    盤面を順にテキスト表示用の文字列にまとめます。

    各盤面の前に空行を 1 行入れます。
    """
    return "".join(f"\n{g.render()}\n" for g in grids)


def build_result(
    puzzle: Grid,
    solution: Optional[Grid] = None,
) -> Dict[str, Any]:
    """
    API などで返す、JSON にできる結果の dict を作ります。

    Parameters
    ----------
    puzzle : Grid
        問題盤面（または解けなかった入力盤面）。
    solution : Grid, optional
        完成盤面。解けなかった場合は None で、solved_board には puzzle が入ります。
    """
    shown = solution if solution is not None else puzzle

    return {
        "board": puzzle.to_list(),
        "solved_board": shown.to_list(),
        "solved": solution is not None and solution.is_complete(),
        "filled": puzzle.filled_count(),
        "shape": (GRID_SIZE, GRID_SIZE),
    }
