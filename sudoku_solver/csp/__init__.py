# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

バックトラック探索と、それを使った盤面生成をまとめています。

主に以下の役割を持つモジュールから構成されています。
- search.py    : 明示スタックによる深さ優先探索（SearchFrontier）
- generator.py : 求解・完成盤面の一括生成・穴あけ（carve）
- workers.py   : 穴あけのプロセス並列実行
"""
