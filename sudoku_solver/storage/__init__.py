# -*- coding: utf-8 -*-
"""
sudoku_solver.storage パッケージ

盤面バッチのファイル入出力（JSON / CSV）をまとめたサブパッケージです。
"""

from .loader import BoardModel, load_boards, save_boards

__all__ = ["BoardModel", "load_boards", "save_boards"]
