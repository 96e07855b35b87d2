"""Per-piece movement geometry, ray tracing and move sets.

Offsets are (d_row, d_col). White pawns move toward row 0, black pawns
toward row 7. Off-board targets are dropped silently.
"""

from __future__ import annotations

from typing import NamedTuple

from attackviz.board import BOARD_SIZE, Board, Color, Piece, PieceType, Square

__all__ = [
    "Geometry",
    "geometry_for",
    "pawn_direction",
    "pawn_start_row",
    "walk_ray",
    "attacked_squares",
    "move_squares",
]

Offset = tuple[int, int]

_KING_OFFSETS: tuple[Offset, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)
_KNIGHT_OFFSETS: tuple[Offset, ...] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)
_ROOK_DIRS: tuple[Offset, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
_BISHOP_DIRS: tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

_RAY_DIRS: dict[PieceType, tuple[Offset, ...]] = {
    PieceType.ROOK: _ROOK_DIRS,
    PieceType.BISHOP: _BISHOP_DIRS,
    PieceType.QUEEN: _ROOK_DIRS + _BISHOP_DIRS,
}


class Geometry(NamedTuple):
    steps: tuple[Offset, ...]  # fixed single-jump deltas
    rays: tuple[Offset, ...]   # sliding directions


def pawn_direction(color: Color) -> int:
    return -1 if color is Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return BOARD_SIZE - 2 if color is Color.WHITE else 1


def geometry_for(piece_type: PieceType, color: Color = Color.WHITE) -> Geometry:
    """Attack geometry for a piece type before occlusion.

    Color only matters for pawns, whose two diagonal attacks point forward.
    """
    if piece_type is PieceType.KING:
        return Geometry(steps=_KING_OFFSETS, rays=())
    if piece_type is PieceType.KNIGHT:
        return Geometry(steps=_KNIGHT_OFFSETS, rays=())
    if piece_type is PieceType.PAWN:
        d = pawn_direction(color)
        return Geometry(steps=((d, -1), (d, 1)), rays=())
    if piece_type in _RAY_DIRS:
        return Geometry(steps=(), rays=_RAY_DIRS[piece_type])
    raise ValueError(f"Unknown piece type: {piece_type!r}")


def walk_ray(
    origin: Square,
    direction: Offset,
    board: Board | None = None,
) -> list[Square]:
    """Squares along one ray from origin, excluding origin.

    With a board, the walk stops after the first occupied square, which is
    itself included. Without one, the ray runs to the edge.
    """
    dr, dc = direction
    sq = Square(origin.row + dr, origin.col + dc)
    out: list[Square] = []
    while sq.on_board:
        out.append(sq)
        if board is not None and board.is_occupied(sq):
            break
        sq = Square(sq.row + dr, sq.col + dc)
    return out


def attacked_squares(
    piece: Piece,
    origin: Square,
    board: Board | None = None,
) -> list[Square]:
    """Every square the piece on origin attacks; occlusion applies only with a board."""
    geo = geometry_for(piece.type, piece.color)
    out: list[Square] = []
    for dr, dc in geo.steps:
        sq = Square(origin.row + dr, origin.col + dc)
        if sq.on_board:
            out.append(sq)
    for direction in geo.rays:
        out.extend(walk_ray(origin, direction, board))
    return out


def move_squares(
    piece: Piece,
    origin: Square,
    board: Board | None = None,
) -> list[Square]:
    """Squares the piece could relocate to.

    Identical to the attack set for everything but pawns. A pawn gets its
    forward push (double push from the start row when both squares are
    empty) plus both forward diagonals, which are treated as relocation
    targets whether or not anything stands there to capture.
    """
    if piece.type is not PieceType.PAWN:
        return attacked_squares(piece, origin, board)

    d = pawn_direction(piece.color)
    out: list[Square] = []

    def free(sq: Square) -> bool:
        return board is None or not board.is_occupied(sq)

    one = Square(origin.row + d, origin.col)
    if one.on_board and free(one):
        out.append(one)
        two = Square(origin.row + 2 * d, origin.col)
        if origin.row == pawn_start_row(piece.color) and two.on_board and free(two):
            out.append(two)

    for dc in (-1, 1):
        sq = Square(origin.row + d, origin.col + dc)
        if sq.on_board:
            out.append(sq)
    return out
