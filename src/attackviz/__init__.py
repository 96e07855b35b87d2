"""Attack and coverage maps for arbitrary chess piece placements.

Pure functions over an immutable Board snapshot. No move legality, no turn
order: a piece reaches a square if its geometry says so.
"""

from attackviz.board import Board, Color, Piece, PieceType, Square
from attackviz.coverage import (
    AttackContribution,
    CoverageGrid,
    SquareCoverage,
    attack_counts,
    compute_direct,
    compute_with_depth,
)

__all__ = [
    "AttackContribution",
    "Board",
    "Color",
    "CoverageGrid",
    "Piece",
    "PieceType",
    "Square",
    "SquareCoverage",
    "attack_counts",
    "compute_direct",
    "compute_with_depth",
]
