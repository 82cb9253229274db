# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- board.py  : 9x9 盤面の値型 Grid と制約チェック
- parser.py : 文字列や DataFrame などから Grid への変換
"""

from .board import Grid
from .parser import grid_from_dataframe, normalize_cell, parse_board_string

__all__ = ["Grid", "grid_from_dataframe", "normalize_cell", "parse_board_string"]
