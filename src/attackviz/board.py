"""Board model: an 8x8 grid of optional pieces.

Row 0 is rank 8 and row 7 is rank 1; column 0 is the a-file. A Board is an
immutable snapshot. Edits return a new Board so callers can hand each
computation a distinct, complete snapshot.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Sequence

import chess

__all__ = [
    "BOARD_SIZE",
    "PieceType",
    "Color",
    "Square",
    "Piece",
    "Board",
]

BOARD_SIZE = 8


class PieceType(enum.Enum):
    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"

    @property
    def letter(self) -> str:
        """Lowercase piece letter: 'k', 'q', 'r', 'b', 'n', 'p'."""
        return _TYPE_LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        try:
            return _LETTER_TYPES[letter.lower()]
        except KeyError:
            raise ValueError(f"Unknown piece letter: {letter!r}") from None


_TYPE_LETTERS = {
    PieceType.KING: "k",
    PieceType.QUEEN: "q",
    PieceType.ROOK: "r",
    PieceType.BISHOP: "b",
    PieceType.KNIGHT: "n",
    PieceType.PAWN: "p",
}
_LETTER_TYPES = {v: k for k, v in _TYPE_LETTERS.items()}


class Color(enum.Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class Square(NamedTuple):
    row: int
    col: int

    @property
    def on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def name(self) -> str:
        """Algebraic name, e.g. Square(4, 3).name == 'd4'."""
        return chess.square_name(chess.square(self.col, BOARD_SIZE - 1 - self.row))

    @classmethod
    def from_name(cls, name: str) -> Square:
        sq = chess.parse_square(name.strip().lower())
        return cls(BOARD_SIZE - 1 - chess.square_rank(sq), chess.square_file(sq))


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color
    identity: int  # caller-assigned, unique among pieces on one board

    def __post_init__(self):
        # Accept "rook" / "white" for convenience; reject anything unknown.
        if not isinstance(self.type, PieceType):
            try:
                object.__setattr__(self, "type", PieceType(self.type))
            except ValueError:
                raise ValueError(f"Unknown piece type: {self.type!r}") from None
        if not isinstance(self.color, Color):
            try:
                object.__setattr__(self, "color", Color(self.color))
            except ValueError:
                raise ValueError(f"Unknown piece color: {self.color!r}") from None
        if isinstance(self.identity, bool) or not isinstance(self.identity, int):
            raise ValueError(f"Piece identity must be an int, got {self.identity!r}")
        if self.identity < 0:
            raise ValueError(f"Piece identity must be non-negative, got {self.identity}")

    @property
    def symbol(self) -> str:
        """Piece letter, uppercase for white: 'N', 'p'."""
        letter = self.type.letter
        return letter.upper() if self.color is Color.WHITE else letter


Cells = tuple[tuple[Piece | None, ...], ...]


def _empty_cells() -> Cells:
    return tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE))


@dataclass(frozen=True)
class Board:
    """Read-only 8x8 placement. Construction validates shape and identities."""

    cells: Cells = ()

    def __post_init__(self):
        cells = self.cells if self.cells else _empty_cells()
        if len(cells) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} rows, got {len(cells)}")
        frozen = []
        seen: dict[int, Square] = {}
        for r, row in enumerate(cells):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Board row {r} must have {BOARD_SIZE} cells, got {len(row)}")
            for c, occupant in enumerate(row):
                if occupant is None:
                    continue
                if not isinstance(occupant, Piece):
                    raise ValueError(f"Square {Square(r, c).name} holds a non-piece: {occupant!r}")
                if occupant.identity in seen:
                    raise ValueError(
                        f"Duplicate piece identity {occupant.identity} on "
                        f"{seen[occupant.identity].name} and {Square(r, c).name}"
                    )
                seen[occupant.identity] = Square(r, c)
            frozen.append(tuple(row))
        object.__setattr__(self, "cells", tuple(frozen))

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        return cls(tuple(tuple(row) for row in rows))

    def piece_at(self, square: Square) -> Piece | None:
        if not square.on_board:
            return None
        return self.cells[square.row][square.col]

    def is_occupied(self, square: Square) -> bool:
        return self.piece_at(square) is not None

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """Yield (square, piece) in row-major order, rank 8 first."""
        for r, row in enumerate(self.cells):
            for c, piece in enumerate(row):
                if piece is not None:
                    yield Square(r, c), piece

    def __len__(self) -> int:
        return sum(1 for _ in self.pieces())

    def next_identity(self) -> int:
        return max((p.identity for _, p in self.pieces()), default=-1) + 1

    # --- Copy-on-write edits ---

    def _with(self, updates: dict[Square, Piece | None]) -> Board:
        rows = [list(row) for row in self.cells]
        for sq, occupant in updates.items():
            if not sq.on_board:
                raise ValueError(f"Square off the board: {tuple(sq)}")
            rows[sq.row][sq.col] = occupant
        return Board.from_rows(rows)

    def place(self, square: Square, piece: Piece) -> Board:
        return self._with({square: piece})

    def remove(self, square: Square) -> Board:
        return self._with({square: None})

    def move(self, src: Square, dst: Square) -> Board:
        """Relocate the piece on src to dst, replacing any occupant of dst."""
        piece = self.piece_at(src)
        if piece is None:
            raise ValueError(f"No piece on {src.name}")
        if src == dst:
            return self
        return self._with({src: None, dst: piece})
