"""Coverage result types and the builder that fills them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from attackviz.board import BOARD_SIZE, Color, Square

__all__ = [
    "AttackContribution",
    "SquareCoverage",
    "CoverageGrid",
    "CoverageBuilder",
]


@dataclass(frozen=True)
class AttackContribution:
    """One unit of reach, attributed to one piece."""
    piece_id: int
    color: Color


@dataclass(frozen=True)
class SquareCoverage:
    attackers: tuple[AttackContribution, ...] = ()
    defenders: tuple[AttackContribution, ...] = ()  # only populated at depth 1

    @property
    def attacker_ids(self) -> frozenset[int]:
        return frozenset(a.piece_id for a in self.attackers)

    @property
    def defender_ids(self) -> frozenset[int]:
        return frozenset(d.piece_id for d in self.defenders)

    @property
    def is_empty(self) -> bool:
        return not self.attackers and not self.defenders


Levels = tuple[SquareCoverage, ...]


@dataclass(frozen=True)
class CoverageGrid:
    """Per-square coverage for depth levels 1..max_depth.

    cells[row][col][depth - 1] holds the SquareCoverage for that level.
    Levels are disjoint per piece: a piece recorded at a shallower depth on
    a square never reappears deeper on the same square.
    """
    max_depth: int
    cells: tuple[tuple[Levels, ...], ...]

    def levels(self, square: Square) -> Levels:
        return self.cells[square.row][square.col]

    def at(self, square: Square, depth: int = 1) -> SquareCoverage:
        if not 1 <= depth <= self.max_depth:
            raise ValueError(f"Depth {depth} not computed (max_depth={self.max_depth})")
        return self.cells[square.row][square.col][depth - 1]

    def squares(self) -> Iterator[tuple[Square, Levels]]:
        for r, row in enumerate(self.cells):
            for c, levels in enumerate(row):
                yield Square(r, c), levels

    def attack_counts(self, depth: int = 1) -> tuple[tuple[int, ...], ...]:
        """Number of attacking pieces per square at one depth level."""
        if not 1 <= depth <= self.max_depth:
            raise ValueError(f"Depth {depth} not computed (max_depth={self.max_depth})")
        return tuple(
            tuple(len(levels[depth - 1].attackers) for levels in row)
            for row in self.cells
        )


class CoverageBuilder:
    """Mutable accumulator; build() freezes it into a CoverageGrid."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        self._attackers = [
            [[[] for _ in range(max_depth)] for _ in range(BOARD_SIZE)]
            for _ in range(BOARD_SIZE)
        ]
        self._defenders = [
            [[[] for _ in range(max_depth)] for _ in range(BOARD_SIZE)]
            for _ in range(BOARD_SIZE)
        ]
        # (row, col, piece_id) already recorded at any depth
        self._covered: set[tuple[int, int, int]] = set()

    def covers(self, square: Square, piece_id: int) -> bool:
        return (square.row, square.col, piece_id) in self._covered

    def add(
        self,
        square: Square,
        depth: int,
        contribution: AttackContribution,
        *,
        defender: bool = False,
    ) -> bool:
        """Record a contribution unless that piece already covers the square."""
        key = (square.row, square.col, contribution.piece_id)
        if key in self._covered:
            return False
        self._covered.add(key)
        bucket = self._defenders if defender else self._attackers
        bucket[square.row][square.col][depth - 1].append(contribution)
        return True

    def build(self) -> CoverageGrid:
        cells = tuple(
            tuple(
                tuple(
                    SquareCoverage(
                        attackers=tuple(self._attackers[r][c][d]),
                        defenders=tuple(self._defenders[r][c][d]),
                    )
                    for d in range(self.max_depth)
                )
                for c in range(BOARD_SIZE)
            )
            for r in range(BOARD_SIZE)
        )
        return CoverageGrid(max_depth=self.max_depth, cells=cells)
