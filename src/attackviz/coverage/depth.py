"""Speculative coverage: what pieces could reach after one or two more moves.

Depth n relocates each piece n - 1 times along its move set, then records
what it would attack from there. Only the first relocation sees the real
board; later relocations and the final attack set ignore occlusion, so
sliders are treated as if they stood alone. This overstates reach whenever
other pieces would block a speculative ray.
"""

import logging

from attackviz.board import Board, Piece, Square
from attackviz.coverage.direct import _collect_direct
from attackviz.coverage.types import AttackContribution, CoverageBuilder, CoverageGrid
from attackviz.geometry import attacked_squares, move_squares

__all__ = [
    "MAX_DEPTH",
    "compute_with_depth",
]

logger = logging.getLogger(__name__)

MAX_DEPTH = 3


def _destinations(piece: Piece, origin: Square, board: Board, hops: int) -> list[Square]:
    """Squares the piece could stand on after `hops` hypothetical moves."""
    frontier = [origin]
    for hop in range(hops):
        reached: dict[Square, None] = {}
        for sq in frontier:
            for dst in move_squares(piece, sq, board if hop == 0 else None):
                reached.setdefault(dst, None)
        frontier = list(reached)
    return frontier


def _collect_speculative(board: Board, builder: CoverageBuilder, depth: int) -> None:
    for origin, piece in board.pieces():
        contribution = AttackContribution(piece_id=piece.identity, color=piece.color)
        for dst in _destinations(piece, origin, board, hops=depth - 1):
            for target in attacked_squares(piece, dst):
                builder.add(target, depth, contribution)


def compute_with_depth(board: Board, max_depth: int = 1) -> CoverageGrid:
    """Coverage levels 1..max_depth; each level only holds new reach."""
    if (isinstance(max_depth, bool) or not isinstance(max_depth, int)
            or not 1 <= max_depth <= MAX_DEPTH):
        raise ValueError(f"max_depth must be 1, 2 or 3, got {max_depth!r}")

    builder = CoverageBuilder(max_depth=max_depth)
    _collect_direct(board, builder)
    for depth in range(2, max_depth + 1):
        _collect_speculative(board, builder, depth)

    logger.debug("Coverage computed for %d pieces to depth %d", len(board), max_depth)
    return builder.build()
