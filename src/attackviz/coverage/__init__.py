"""Attack/defense aggregation over a Board, direct and speculative."""

from attackviz.coverage.types import (
    AttackContribution,
    CoverageBuilder,
    CoverageGrid,
    SquareCoverage,
)
from attackviz.coverage.direct import attack_counts, compute_direct
from attackviz.coverage.depth import MAX_DEPTH, compute_with_depth
from attackviz.coverage.views import (
    HEAT_LEVELS,
    SquareSummary,
    filter_colors,
    filter_pieces,
    heat_level,
    square_summary,
)

__all__ = [
    "AttackContribution",
    "CoverageBuilder",
    "CoverageGrid",
    "HEAT_LEVELS",
    "MAX_DEPTH",
    "SquareCoverage",
    "SquareSummary",
    "attack_counts",
    "compute_direct",
    "compute_with_depth",
    "filter_colors",
    "filter_pieces",
    "heat_level",
    "square_summary",
]
