from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from sudoku_solver import generate, solve
from sudoku_solver.config import MAX_API_BOARDS
from sudoku_solver.csp.generator import solve_one
from sudoku_solver.logging_utils import get_logger
from sudoku_solver.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    board: List[List[Optional[int]]]  # 9x9, null = empty
    seed: Optional[int] = None


class GenerateRequest(BaseModel):
    count: int = Field(1, ge=1, le=MAX_API_BOARDS)
    seed: Optional[int] = None
    solved_only: bool = False


@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid data (2D array) and returns one completion of it.
    """
    try:
        return solve(request.board, seed=request.seed)
    except ValueError as e:
        # 盤面の形や値が不正
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/generate")
def api_generate(request: GenerateRequest):
    """
    Generator API endpoint.
    Returns `count` new boards; puzzles come with their unique solution.
    """
    boards = generate(request.count, seed=request.seed, solved_only=request.solved_only, max_workers=1)
    if len(boards) < request.count:
        logger.warning("Generated only %d of %d boards", len(boards), request.count)

    results = []
    for board in boards:
        solution = board if request.solved_only else solve_one(board)
        results.append(build_result(board, solution))
    return {"count": len(results), "boards": results}
