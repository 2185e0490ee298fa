"""Pseudo-legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_FORWARD,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_square_attacked,
)
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import SQUARES, Square, coerce_square, square_index

if TYPE_CHECKING:
    from chessrules.core.position import Position


_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Indexed by color.
_PAWN_START_RANK: tuple[int, int] = (6, 1)
_EN_PASSANT_RANK: tuple[int, int] = (3, 4)
_PROMOTION_RANK: tuple[int, int] = (0, 7)
_BACK_RANK: tuple[int, int] = (7, 0)

_KINGSIDE_RIGHT: tuple[CastlingRights, CastlingRights] = (
    CastlingRights.WHITE_KINGSIDE,
    CastlingRights.BLACK_KINGSIDE,
)
_QUEENSIDE_RIGHT: tuple[CastlingRights, CastlingRights] = (
    CastlingRights.WHITE_QUEENSIDE,
    CastlingRights.BLACK_QUEENSIDE,
)


class MoveGenerator:
    """Generates pseudo-legal moves for a given :class:`Position`.

    Generation only reads the position, so calling it repeatedly on an
    unchanged position yields the same moves.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All pseudo-legal moves for *color* (default: side to move)."""
        if color is None:
            color = self._pos.side_to_move
        moves: list[Move] = []
        for sq in self._board.all_pieces(color):
            self._gen_for_square(sq, moves)
        return moves

    def pseudo_legal_moves_from(self, sq: tuple[int, int] | str) -> list[Move]:
        """Pseudo-legal moves of the piece on *sq* (empty list if none)."""
        moves: list[Move] = []
        self._gen_for_square(coerce_square(sq), moves)
        return moves

    def is_square_attacked(self, sq: tuple[int, int], by_color: Color) -> bool:
        return is_square_attacked(self._board, sq, by_color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_for_square(self, sq: Square, moves: list[Move]) -> None:
        piece = self._board[sq]
        if piece is None:
            return

        idx = square_index(sq)
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_TARGETS[idx], moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(sq, piece.color, BISHOP_RAYS[idx], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, piece.color, ROOK_RAYS[idx], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, piece.color, QUEEN_RAYS[idx], moves)
        else:
            self._gen_steps(sq, piece.color, KING_TARGETS[idx], moves)
            self._gen_castling(sq, piece.color, moves)

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        c = int(color)
        step = PAWN_FORWARD[c]
        rank_idx, file_idx = sq
        next_rank = rank_idx + step
        if not 0 <= next_rank < 8:
            return
        promotes = next_rank == _PROMOTION_RANK[c]

        one_step = SQUARES[next_rank * 8 + file_idx]
        if board[one_step] is None:
            self._add_pawn_move(sq, one_step, MoveFlag.NONE, promotes, moves)
            if rank_idx == _PAWN_START_RANK[c]:
                two_step = SQUARES[(next_rank + step) * 8 + file_idx]
                if board[two_step] is None:
                    moves.append(Move(sq, two_step, flags=MoveFlag.DOUBLE_PAWN))

        for df in (-1, 1):
            cap_file = file_idx + df
            if not 0 <= cap_file < 8:
                continue
            cap_sq = SQUARES[next_rank * 8 + cap_file]
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._add_pawn_move(sq, cap_sq, MoveFlag.CAPTURE, promotes, moves)
            elif cap_sq == self._pos.en_passant and rank_idx == _EN_PASSANT_RANK[c]:
                moves.append(
                    Move(sq, cap_sq, flags=MoveFlag.CAPTURE | MoveFlag.EN_PASSANT)
                )

    @staticmethod
    def _add_pawn_move(
        from_sq: Square,
        to_sq: Square,
        flags: MoveFlag,
        promotes: bool,
        moves: list[Move],
    ) -> None:
        if not promotes:
            moves.append(Move(from_sq, to_sq, flags=flags))
            return
        for pt in _PROMOTION_TYPES:
            moves.append(Move(from_sq, to_sq, pt, flags | MoveFlag.PROMOTION))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
            elif target.color != color:
                moves.append(Move(sq, to_sq, flags=MoveFlag.CAPTURE))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq, flags=MoveFlag.CAPTURE))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        c = int(color)
        rank = _BACK_RANK[c]
        castling = self._pos.castling
        if king_sq != (rank, 4):
            return
        if not castling & (_KINGSIDE_RIGHT[c] | _QUEENSIDE_RIGHT[c]):
            return

        opponent = color.opposite
        if self.is_square_attacked(king_sq, opponent):
            return

        board = self._board
        rook = Piece(color, PieceType.ROOK)

        if castling & _KINGSIDE_RIGHT[c] and board[(rank, 7)] == rook:
            f_sq = SQUARES[rank * 8 + 5]
            g_sq = SQUARES[rank * 8 + 6]
            if (
                board[f_sq] is None
                and board[g_sq] is None
                and not self.is_square_attacked(f_sq, opponent)
                and not self.is_square_attacked(g_sq, opponent)
            ):
                moves.append(Move(king_sq, g_sq, flags=MoveFlag.CASTLE_KINGSIDE))

        if castling & _QUEENSIDE_RIGHT[c] and board[(rank, 0)] == rook:
            b_sq = SQUARES[rank * 8 + 1]
            c_sq = SQUARES[rank * 8 + 2]
            d_sq = SQUARES[rank * 8 + 3]
            if (
                board[b_sq] is None
                and board[c_sq] is None
                and board[d_sq] is None
                and not self.is_square_attacked(d_sq, opponent)
                and not self.is_square_attacked(c_sq, opponent)
            ):
                moves.append(Move(king_sq, c_sq, flags=MoveFlag.CASTLE_QUEENSIDE))
