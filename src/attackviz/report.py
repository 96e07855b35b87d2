"""Serialization of coverage grids: JSON-ready dicts and a text heat map."""

from __future__ import annotations

from attackviz.board import BOARD_SIZE, Board, Square
from attackviz.coverage import CoverageGrid, SquareCoverage, heat_level
from attackviz.notation import format_placement

_FILES = "abcdefgh"


def _contributions_to_list(contribs) -> list[dict]:
    return [{"piece_id": c.piece_id, "color": c.color.value} for c in contribs]


def _level_to_dict(cov: SquareCoverage) -> dict:
    return {
        "attackers": _contributions_to_list(cov.attackers),
        "defenders": _contributions_to_list(cov.defenders),
    }


def grid_to_dict(grid: CoverageGrid) -> dict[str, dict[str, dict]]:
    """{"e4": {"depth1": {"attackers": [...], "defenders": [...]}, ...}, ...}"""
    return {
        square.name: {
            f"depth{d}": _level_to_dict(cov) for d, cov in enumerate(levels, start=1)
        }
        for square, levels in grid.squares()
    }


def coverage_report(board: Board, grid: CoverageGrid) -> dict:
    return {
        "max_depth": grid.max_depth,
        "placement": format_placement(board),
        "squares": grid_to_dict(grid),
    }


def render_heatmap(board: Board, grid: CoverageGrid, depth: int | None = None) -> str:
    """Text board, rank 8 on top.

    Occupied squares show the piece letter (uppercase white). Empty squares
    show the heat level of attackers summed over levels 1..depth, '.' for none.
    """
    depth = grid.max_depth if depth is None else depth
    if not 1 <= depth <= grid.max_depth:
        raise ValueError(f"Depth {depth} not computed (max_depth={grid.max_depth})")

    lines = []
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            sq = Square(r, c)
            piece = board.piece_at(sq)
            if piece is not None:
                cells.append(piece.symbol)
                continue
            count = sum(len(cov.attackers) for cov in grid.levels(sq)[:depth])
            level = heat_level(count)
            cells.append(str(level) if level else ".")
        lines.append(f"{BOARD_SIZE - r} {' '.join(cells)}")
    lines.append("  " + " ".join(_FILES))
    return "\n".join(lines)
