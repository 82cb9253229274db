# -*- coding: utf-8 -*-
"""
sudoku_solver.postprocess パッケージ

結果のテキスト表示や、API 用の dict の構築をまとめています。
"""
