# -*- coding: utf-8 -*-
"""
コマンドラインから solver を使うためのモジュールです。

使い方の例::

    # 5 問作って画面に表示
    sudoku-solver -b 5

    # ファイルの盤面を全部解いて outputs/solved.json に保存
    sudoku-solver -i boards.json -o file outputs --file-name solved
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from . import generate, solve_boards
from .config import DEFAULT_OUTPUT_DIR
from .grid.board import Grid
from .logging_utils import get_logger, set_log_level
from .postprocess.render_result import render_boards
from .storage.loader import load_boards, save_boards

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku-solver", description="Sudoku solver and generator.")
    ap.add_argument("-i", "--input", type=Path, help="Board file (.json or .csv) to solve")
    ap.add_argument("-b", "--boards", type=int, help="Number of boards to generate (required without --input)")
    ap.add_argument("--solved-only", action="store_true", help="Output solved boards instead of puzzles")
    ap.add_argument(
        "-o", "--out-type", choices=["stdout", "file"], default="stdout",
        help="Where to write the output: to stdout or a file",
    )
    ap.add_argument(
        "output", nargs="?", type=Path, default=Path(DEFAULT_OUTPUT_DIR),
        help="Output directory (used with --out-type file)",
    )
    ap.add_argument("--file-name", help="File name without extension (required with --out-type file)")
    ap.add_argument("--format", choices=["json", "csv"], default="json", help="Output file format")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    ap.add_argument("--workers", type=int, default=None, help="Worker processes used for carving")
    ap.add_argument("--log-level", default="info", help="Logging level (debug, info, warning, ...)")
    return ap


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.input is None and args.boards is None:
        ap.error("--boards is required when --input is not given")
    if args.boards is not None and args.boards < 1:
        ap.error("--boards must be a positive integer")
    if args.out_type == "file" and not args.file_name:
        ap.error("--file-name is required when --out-type is 'file'")
    if args.workers is not None and args.workers < 1:
        ap.error("--workers must be a positive integer")
    return args


def run(args: argparse.Namespace) -> List[Grid]:
    """引数に従って盤面を解く、または作ります。"""
    if args.input is not None:
        return solve_boards(load_boards(args.input), seed=args.seed)
    return generate(
        args.boards,
        seed=args.seed,
        solved_only=args.solved_only,
        max_workers=args.workers,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        set_log_level(args.log_level)
    except ValueError as e:
        logger.error("Error: %s", e)
        return 1

    try:
        boards = run(args)
    except FileNotFoundError as e:
        logger.error("Error: could not read input file: %s", e)
        return 1
    except ValueError as e:
        logger.error("Error: could not deserialize input: %s", e)
        return 1

    if args.out_type == "file":
        path = args.output / f"{args.file_name}.{args.format}"
        try:
            save_boards(boards, path)
        except OSError as e:
            logger.error("Error: failed to write to file: %s", e)
            return 1
    else:
        sys.stdout.write(render_boards(boards))

    return 0


if __name__ == "__main__":
    sys.exit(main())
