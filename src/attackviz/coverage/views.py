"""Projections of a CoverageGrid for display: selection, color toggles, heat."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from attackviz.board import Color, Square
from attackviz.coverage.types import AttackContribution, CoverageGrid, SquareCoverage

__all__ = [
    "HEAT_LEVELS",
    "SquareSummary",
    "filter_pieces",
    "filter_colors",
    "square_summary",
    "heat_level",
]

HEAT_LEVELS = 4  # counts at or above this share the darkest bucket


def _filter(grid: CoverageGrid, keep) -> CoverageGrid:
    def _level(cov: SquareCoverage) -> SquareCoverage:
        return SquareCoverage(
            attackers=tuple(a for a in cov.attackers if keep(a)),
            defenders=tuple(d for d in cov.defenders if keep(d)),
        )

    cells = tuple(
        tuple(tuple(_level(cov) for cov in levels) for levels in row)
        for row in grid.cells
    )
    return CoverageGrid(max_depth=grid.max_depth, cells=cells)


def filter_pieces(grid: CoverageGrid, identities: Iterable[int]) -> CoverageGrid:
    """Keep only contributions from the selected pieces. No selection, no coverage."""
    selected = frozenset(identities)
    return _filter(grid, lambda c: c.piece_id in selected)


def filter_colors(grid: CoverageGrid, colors: Iterable[Color | str]) -> CoverageGrid:
    shown = frozenset(Color(c) for c in colors)
    return _filter(grid, lambda c: c.color in shown)


@dataclass
class SquareSummary:
    square: str
    attackers: list[AttackContribution] = field(default_factory=list)  # all levels
    defenders: list[AttackContribution] = field(default_factory=list)  # depth 1
    attackers_by_depth: dict[int, int] = field(default_factory=dict)

    @property
    def total_attackers(self) -> int:
        return len(self.attackers)


def square_summary(grid: CoverageGrid, square: Square) -> SquareSummary:
    summary = SquareSummary(square=square.name)
    for depth, cov in enumerate(grid.levels(square), start=1):
        summary.attackers.extend(cov.attackers)
        summary.attackers_by_depth[depth] = len(cov.attackers)
        if depth == 1:
            summary.defenders.extend(cov.defenders)
    return summary


def heat_level(count: int) -> int:
    """Heat bucket for an attacker count: 0 (none) through HEAT_LEVELS."""
    if count <= 0:
        return 0
    return min(count, HEAT_LEVELS)
