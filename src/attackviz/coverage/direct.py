"""Depth-1 coverage: what every piece reaches from where it stands."""

import logging

from attackviz.board import Board
from attackviz.coverage.types import AttackContribution, CoverageBuilder, CoverageGrid
from attackviz.geometry import attacked_squares

__all__ = [
    "compute_direct",
    "attack_counts",
]

logger = logging.getLogger(__name__)


def _collect_direct(board: Board, builder: CoverageBuilder) -> None:
    """Record each piece's occluded reach as attacker or defender at depth 1.

    A target holding a same-colored piece is defended; an empty or enemy
    target is attacked.
    """
    for origin, piece in board.pieces():
        contribution = AttackContribution(piece_id=piece.identity, color=piece.color)
        for target in attacked_squares(piece, origin, board):
            occupant = board.piece_at(target)
            is_defense = occupant is not None and occupant.color is piece.color
            builder.add(target, 1, contribution, defender=is_defense)


def compute_direct(board: Board) -> CoverageGrid:
    builder = CoverageBuilder(max_depth=1)
    _collect_direct(board, builder)
    logger.debug("Direct coverage computed for %d pieces", len(board))
    return builder.build()


def attack_counts(board: Board) -> tuple[tuple[int, ...], ...]:
    """Legacy view: attacker count per square at depth 1."""
    return compute_direct(board).attack_counts()
