"""Building boards from text: placement strings, FEN, the starting position.

Placement strings are comma-separated tokens like "Ke1,Nb1,pe7": the piece
letter (uppercase = white), then file and rank. Identities are handed out
0, 1, 2, ... in token order.
"""

import logging

import chess

from attackviz.board import BOARD_SIZE, Board, Color, Piece, PieceType, Square
from attackviz.coverage.depth import MAX_DEPTH

__all__ = [
    "parse_placement",
    "format_placement",
    "starting_board",
    "board_from_fen",
    "parse_depth",
]

logger = logging.getLogger(__name__)

_BACK_RANK = (
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
)


def _parse_token(token: str) -> tuple[PieceType, Color, Square] | None:
    if len(token) < 3:
        return None
    letter, square_name = token[0], token[1:3]
    try:
        piece_type = PieceType.from_letter(letter)
        square = Square.from_name(square_name)
    except ValueError:
        return None
    color = Color.WHITE if letter.isupper() else Color.BLACK
    return piece_type, color, square


def parse_placement(text: str) -> Board:
    """Lenient parse: malformed tokens are skipped, later tokens win a square."""
    rows: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    identity = 0
    for raw in text.split(","):
        token = raw.strip()
        if not token:
            continue
        parsed = _parse_token(token)
        if parsed is None:
            logger.debug("Skipping malformed placement token %r", token)
            continue
        piece_type, color, square = parsed
        rows[square.row][square.col] = Piece(piece_type, color, identity)
        identity += 1
    return Board.from_rows(rows)


def format_placement(board: Board) -> str:
    return ",".join(f"{piece.symbol}{square.name}" for square, piece in board.pieces())


def starting_board() -> Board:
    """Standard initial position. Identities run a8..h8, a7..h7, a2..h2, a1..h1."""
    rows: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    identity = 0
    layout = (
        (0, Color.BLACK, _BACK_RANK),
        (1, Color.BLACK, (PieceType.PAWN,) * BOARD_SIZE),
        (6, Color.WHITE, (PieceType.PAWN,) * BOARD_SIZE),
        (7, Color.WHITE, _BACK_RANK),
    )
    for row, color, types in layout:
        for col, piece_type in enumerate(types):
            rows[row][col] = Piece(piece_type, color, identity)
            identity += 1
    return Board.from_rows(rows)


def board_from_fen(fen: str) -> Board:
    """Piece placement from a FEN; side to move, castling and clocks are ignored."""
    try:
        position = chess.Board(fen)
    except ValueError as e:
        raise ValueError(f"Invalid FEN: {fen}") from e

    rows: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    identity = 0
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            cp = position.piece_at(chess.square(col, BOARD_SIZE - 1 - row))
            if cp is None:
                continue
            color = Color.WHITE if cp.color == chess.WHITE else Color.BLACK
            rows[row][col] = Piece(PieceType(chess.piece_name(cp.piece_type)), color, identity)
            identity += 1
    return Board.from_rows(rows)


def parse_depth(value: int | str) -> int:
    try:
        depth = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Depth must be an integer, got {value!r}") from None
    if not 1 <= depth <= MAX_DEPTH:
        raise ValueError(f"Depth must be between 1 and {MAX_DEPTH}, got {depth}")
    return depth
