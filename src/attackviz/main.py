import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from attackviz.board import Board, Color
from attackviz.config import Settings
from attackviz.coverage import attack_counts, compute_with_depth, filter_colors, filter_pieces
from attackviz.notation import board_from_fen, parse_depth, parse_placement, starting_board
from attackviz.report import coverage_report

logger = logging.getLogger(__name__)

settings = Settings()

app = FastAPI(title="Chess Attack Visualizer")
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


# --- Request models ---

class BoardRequest(BaseModel):
    pieces: str | None = None
    fen: str | None = None


class CoverageRequest(BoardRequest):
    depth: int | None = None
    select: list[int] | None = None
    colors: list[Color] | None = None


def _load_board(req: BoardRequest) -> Board:
    """Fresh snapshot per request; starting position when nothing is given."""
    if req.pieces is not None and req.fen is not None:
        raise ValueError("Give either pieces or fen, not both")
    if req.pieces is not None:
        return parse_placement(req.pieces)
    if req.fen is not None:
        return board_from_fen(req.fen)
    return starting_board()


# --- Endpoints ---

@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.post("/api/coverage")
async def coverage(req: CoverageRequest):
    try:
        board = _load_board(req)
        depth = parse_depth(req.depth if req.depth is not None else settings.default_depth)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    grid = compute_with_depth(board, depth)
    if req.select is not None:
        grid = filter_pieces(grid, req.select)
    if req.colors is not None:
        grid = filter_colors(grid, req.colors)
    logger.debug("Served depth-%d coverage for %d pieces", depth, len(board))
    return coverage_report(board, grid)


@app.post("/api/coverage/counts")
async def coverage_counts(req: BoardRequest):
    try:
        board = _load_board(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"counts": [list(row) for row in attack_counts(board)]}
