"""Position — board plus side-state (turn, castling, en passant, clocks)."""

from __future__ import annotations

from chessrules.core import zobrist
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import A1, A8, H1, H8, Square, make_square


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    A position is mutated forward only; callers that need to look ahead work
    on a :meth:`copy`.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        A1: CastlingRights.WHITE_QUEENSIDE,
        H1: CastlingRights.WHITE_KINGSIDE,
        A8: CastlingRights.BLACK_QUEENSIDE,
        H8: CastlingRights.BLACK_KINGSIDE,
    }

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Core move operation ──────────────────────────────────────────────

    def make_move(self, move: Move) -> Piece | None:
        """Apply *move* and return the captured piece, if any.

        A promotion move without a ``promotion`` piece leaves the pawn on the
        last rank; the caller is expected to replace it.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = self.board.apply(move)

        # En passant target for the opponent
        next_en_passant: Square | None = None
        if move.flags & MoveFlag.DOUBLE_PAWN:
            next_en_passant = make_square(
                (move.from_sq[0] + move.to_sq[0]) // 2, move.from_sq[1]
            )
        self.en_passant = next_en_passant

        self._update_castling(move, piece)

        # Clocks
        if piece.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite
        return captured

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(self, move: Move, piece: Piece) -> None:
        next_castling = self.castling
        if piece.piece_type == PieceType.KING:
            if piece.color == Color.WHITE:
                next_castling &= ~CastlingRights.WHITE_BOTH
            else:
                next_castling &= ~CastlingRights.BLACK_BOTH

        # A rook leaving its corner, or anything landing on it, kills that right.
        for sq in (move.from_sq, move.to_sq):
            right = self._ROOK_CORNERS.get(sq)
            if right is not None:
                next_castling &= ~right

        self.castling = next_castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    @property
    def zobrist_hash(self) -> int:
        """Zobrist key of placement, side to move, castling and en passant."""
        key = zobrist.castling_key(self.castling) ^ zobrist.side_to_move_key(self.side_to_move)
        if self.en_passant is not None:
            key ^= zobrist.en_passant_key(self.en_passant)

        for sq, piece in self.board.occupied():
            key ^= zobrist.piece_key(piece, sq)
        return key
