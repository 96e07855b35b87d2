"""Tests for piece geometry, ray occlusion and move sets."""

import pytest

from attackviz.board import Board, Color, Piece, PieceType, Square
from attackviz.geometry import (
    attacked_squares,
    geometry_for,
    move_squares,
    walk_ray,
)

D4 = Square(4, 3)


def _piece(piece_type, color=Color.WHITE, identity=0):
    return Piece(piece_type, color, identity)


def _names(squares):
    return sorted(sq.name for sq in squares)


# ---------------------------------------------------------------------------
# Reach on an empty board
# ---------------------------------------------------------------------------


class TestEmptyBoardCounts:
    @pytest.mark.parametrize("piece_type,center,corner", [
        (PieceType.KING, 8, 3),
        (PieceType.KNIGHT, 8, 2),
        (PieceType.ROOK, 14, 14),
        (PieceType.BISHOP, 13, 7),
        (PieceType.QUEEN, 27, 21),
    ])
    def test_counts(self, piece_type, center, corner):
        piece = _piece(piece_type)
        assert len(attacked_squares(piece, D4)) == center
        assert len(attacked_squares(piece, Square(7, 0))) == corner

    def test_no_duplicates(self):
        for piece_type in PieceType:
            squares = attacked_squares(_piece(piece_type), D4)
            assert len(squares) == len(set(squares))

    def test_origin_never_attacked(self):
        for piece_type in PieceType:
            assert D4 not in attacked_squares(_piece(piece_type), D4)


class TestPawnAttacks:
    def test_white_attacks_toward_rank_8(self):
        assert _names(attacked_squares(_piece(PieceType.PAWN), Square.from_name("e2"))) == ["d3", "f3"]

    def test_black_attacks_toward_rank_1(self):
        pawn = _piece(PieceType.PAWN, Color.BLACK)
        assert _names(attacked_squares(pawn, Square.from_name("e7"))) == ["d6", "f6"]

    def test_edge_file_has_one_attack(self):
        assert _names(attacked_squares(_piece(PieceType.PAWN), Square.from_name("a2"))) == ["b3"]
        assert _names(attacked_squares(_piece(PieceType.PAWN), Square.from_name("h2"))) == ["g3"]

    def test_last_rank_has_no_attacks(self):
        assert attacked_squares(_piece(PieceType.PAWN), Square.from_name("c8")) == []

    def test_never_attacks_straight_ahead(self):
        assert Square.from_name("e3") not in attacked_squares(_piece(PieceType.PAWN), Square.from_name("e2"))


class TestGeometryFor:
    def test_queen_is_rook_plus_bishop(self):
        queen = geometry_for(PieceType.QUEEN)
        rook = geometry_for(PieceType.ROOK)
        bishop = geometry_for(PieceType.BISHOP)
        assert set(queen.rays) == set(rook.rays) | set(bishop.rays)
        assert queen.steps == ()

    def test_pawn_steps_depend_on_color(self):
        assert set(geometry_for(PieceType.PAWN, Color.WHITE).steps) == {(-1, -1), (-1, 1)}
        assert set(geometry_for(PieceType.PAWN, Color.BLACK).steps) == {(1, -1), (1, 1)}

    def test_king_has_eight_unit_steps(self):
        steps = geometry_for(PieceType.KING).steps
        assert len(steps) == 8
        assert (0, 0) not in steps


# ---------------------------------------------------------------------------
# Occlusion
# ---------------------------------------------------------------------------


class TestOcclusion:
    def test_ray_stops_at_blocker_inclusive(self):
        board = Board.empty().place(Square.from_name("d6"), _piece(PieceType.PAWN, identity=1))
        ray = walk_ray(D4, (-1, 0), board)
        assert [sq.name for sq in ray] == ["d5", "d6"]

    def test_ray_without_board_runs_to_edge(self):
        board = Board.empty().place(Square.from_name("d6"), _piece(PieceType.PAWN, identity=1))
        assert [sq.name for sq in walk_ray(D4, (-1, 0))] == ["d5", "d6", "d7", "d8"]
        assert len(attacked_squares(_piece(PieceType.ROOK), D4)) == 14
        assert len(attacked_squares(_piece(PieceType.ROOK), D4, board)) == 12

    def test_enemy_blocker_also_stops_ray(self):
        board = Board.empty().place(Square.from_name("f6"), _piece(PieceType.KNIGHT, Color.BLACK, 1))
        squares = attacked_squares(_piece(PieceType.BISHOP), D4, board)
        assert Square.from_name("f6") in squares
        assert Square.from_name("g7") not in squares

    def test_adjacent_blocker(self):
        board = Board.empty().place(Square.from_name("e4"), _piece(PieceType.PAWN, identity=1))
        ray = walk_ray(D4, (0, 1), board)
        assert [sq.name for sq in ray] == ["e4"]

    def test_knight_jumps_over_pieces(self):
        board = Board.empty()
        for i, name in enumerate(["c3", "d3", "e3", "c4", "e4", "c5", "d5", "e5"], start=1):
            board = board.place(Square.from_name(name), _piece(PieceType.PAWN, identity=i))
        assert len(attacked_squares(_piece(PieceType.KNIGHT), D4, board)) == 8


# ---------------------------------------------------------------------------
# Move sets
# ---------------------------------------------------------------------------


class TestMoveSquares:
    def test_non_pawn_moves_equal_attacks(self):
        board = Board.empty().place(Square.from_name("d6"), _piece(PieceType.PAWN, identity=1))
        for piece_type in (PieceType.KING, PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT):
            piece = _piece(piece_type)
            assert move_squares(piece, D4, board) == attacked_squares(piece, D4, board)

    def test_pawn_from_start_row(self):
        pawn = _piece(PieceType.PAWN)
        assert _names(move_squares(pawn, Square.from_name("e2"), Board.empty())) == ["d3", "e3", "e4", "f3"]

    def test_black_pawn_from_start_row(self):
        pawn = _piece(PieceType.PAWN, Color.BLACK)
        assert _names(move_squares(pawn, Square.from_name("e7"))) == ["d6", "e5", "e6", "f6"]

    def test_pawn_off_start_row_single_push(self):
        pawn = _piece(PieceType.PAWN)
        assert _names(move_squares(pawn, Square.from_name("e3"))) == ["d4", "e4", "f4"]

    def test_pawn_blocked_directly(self):
        board = Board.empty().place(Square.from_name("e3"), _piece(PieceType.KNIGHT, Color.BLACK, 1))
        pawn = _piece(PieceType.PAWN)
        assert _names(move_squares(pawn, Square.from_name("e2"), board)) == ["d3", "f3"]

    def test_pawn_double_push_blocked(self):
        board = Board.empty().place(Square.from_name("e4"), _piece(PieceType.KNIGHT, Color.BLACK, 1))
        pawn = _piece(PieceType.PAWN)
        assert _names(move_squares(pawn, Square.from_name("e2"), board)) == ["d3", "e3", "f3"]

    def test_pawn_diagonals_included_without_targets(self):
        """Diagonals are relocation targets even when nothing is there to capture."""
        pawn = _piece(PieceType.PAWN)
        moves = move_squares(pawn, Square.from_name("a2"), Board.empty())
        assert Square.from_name("b3") in moves

    def test_pawn_on_last_rank_has_no_moves(self):
        assert move_squares(_piece(PieceType.PAWN), Square.from_name("e8")) == []
