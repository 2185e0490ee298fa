"""Tests for Position.make_move bookkeeping."""

import pytest

from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.piece import Piece
from chessrules.core.types import A1, D5, D7, E1, E2, E4, G1, H1, H8, parse_square


class TestMakeMove:
    def test_side_switches(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        pos.make_move(Move(E2, E4, flags=MoveFlag.DOUBLE_PAWN))
        assert pos.side_to_move == Color.BLACK

    def test_en_passant_set(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        pos.make_move(Move(E2, E4, flags=MoveFlag.DOUBLE_PAWN))
        assert pos.en_passant == parse_square("e3")

    def test_en_passant_replaced(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        pos.make_move(Move(E2, E4, flags=MoveFlag.DOUBLE_PAWN))
        pos.make_move(Move(D7, D5, flags=MoveFlag.DOUBLE_PAWN))
        assert pos.en_passant == parse_square("d6")

    def test_en_passant_cleared_by_quiet_move(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        pos.make_move(Move(E2, E4, flags=MoveFlag.DOUBLE_PAWN))
        pos.make_move(Move(parse_square("g8"), parse_square("f6")))
        assert pos.en_passant is None

    def test_capture_returns_victim(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 5 10")
        captured = pos.make_move(Move(E4, D5, flags=MoveFlag.CAPTURE))
        assert captured == Piece(Color.BLACK, PieceType.PAWN)
        assert pos.board[D5] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board[E4] is None

    def test_en_passant_capture_removes_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        move = Move(parse_square("e5"), parse_square("d6"),
                    flags=MoveFlag.CAPTURE | MoveFlag.EN_PASSANT)
        captured = pos.make_move(move)
        assert captured == Piece(Color.BLACK, PieceType.PAWN)
        assert pos.board[D5] is None
        assert pos.board[parse_square("d6")] == Piece(Color.WHITE, PieceType.PAWN)

    def test_no_piece_raises(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        with pytest.raises(ValueError):
            pos.make_move(Move(E4, parse_square("e5")))

    def test_copy_is_independent(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        clone = pos.copy()
        clone.make_move(Move(E2, E4, flags=MoveFlag.DOUBLE_PAWN))
        assert position_to_fen(pos) == STARTING_FEN
        assert clone.board[E4] is not None


class TestClocks:
    def test_quiet_move_increments_halfmove(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 7 12")
        pos.make_move(Move(A1, parse_square("a2")))
        assert pos.halfmove_clock == 8
        assert pos.fullmove_number == 12

    def test_pawn_move_resets_halfmove(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 7 12")
        pos.make_move(Move(E2, parse_square("e3")))
        assert pos.halfmove_clock == 0

    def test_fullmove_increments_after_black(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 b - - 3 12")
        pos.make_move(Move(parse_square("e8"), parse_square("d8")))
        assert pos.fullmove_number == 13
        assert pos.side_to_move == Color.WHITE


class TestCastlingRights:
    CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"

    def test_king_move_clears_both(self) -> None:
        pos = position_from_fen(self.CASTLING_FEN)
        pos.make_move(Move(E1, parse_square("f1")))
        assert not pos.castling & CastlingRights.WHITE_BOTH
        assert pos.castling & CastlingRights.BLACK_BOTH == CastlingRights.BLACK_BOTH

    def test_rook_move_clears_one_side(self) -> None:
        pos = position_from_fen(self.CASTLING_FEN)
        pos.make_move(Move(H1, parse_square("h4")))
        assert not pos.castling & CastlingRights.WHITE_KINGSIDE
        assert pos.castling & CastlingRights.WHITE_QUEENSIDE

    def test_rook_captured_on_corner(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        pos.make_move(Move(H1, H8, flags=MoveFlag.CAPTURE))
        assert not pos.castling & CastlingRights.BLACK_KINGSIDE
        assert not pos.castling & CastlingRights.WHITE_KINGSIDE
        assert pos.castling & CastlingRights.BLACK_QUEENSIDE

    def test_castle_moves_rook(self) -> None:
        pos = position_from_fen(self.CASTLING_FEN)
        pos.make_move(Move(E1, G1, flags=MoveFlag.CASTLE_KINGSIDE))
        assert pos.board[G1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[parse_square("f1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board[H1] is None
        assert position_to_fen(pos) == "r3k2r/8/8/8/8/8/8/R4RK1 b kq - 1 1"


class TestPromotion:
    def test_promotion_piece_placed(self) -> None:
        pos = position_from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        pos.make_move(Move(parse_square("a7"), parse_square("a8"),
                           PieceType.KNIGHT, MoveFlag.PROMOTION))
        assert pos.board[parse_square("a8")] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_promotion_without_piece_leaves_pawn(self) -> None:
        pos = position_from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        pos.make_move(Move(parse_square("a7"), parse_square("a8"),
                           flags=MoveFlag.PROMOTION))
        assert pos.board[parse_square("a8")] == Piece(Color.WHITE, PieceType.PAWN)


class TestZobrist:
    def test_same_position_same_key(self) -> None:
        a = position_from_fen(STARTING_FEN)
        b = position_from_fen(STARTING_FEN)
        assert a.zobrist_hash == b.zobrist_hash

    def test_side_to_move_changes_key(self) -> None:
        white = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        black = position_from_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert white.zobrist_hash != black.zobrist_hash

    def test_clocks_do_not_change_key(self) -> None:
        a = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        b = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 40 70")
        assert a.zobrist_hash == b.zobrist_hash

    def test_castling_changes_key(self) -> None:
        a = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        b = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kkq - 0 1")
        assert a.zobrist_hash != b.zobrist_hash

    def test_en_passant_changes_key(self) -> None:
        with_ep = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        without = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - - 0 2")
        assert with_ep.zobrist_hash != without.zobrist_hash

    def test_transposition_gives_same_key(self) -> None:
        a = position_from_fen(STARTING_FEN)
        b = position_from_fen(STARTING_FEN)
        for pos, line in ((a, ("g1f3", "g8f6", "b1c3")), (b, ("b1c3", "g8f6", "g1f3"))):
            for uci in line:
                pos.make_move(Move(parse_square(uci[:2]), parse_square(uci[2:])))
        assert a.zobrist_hash == b.zobrist_hash
