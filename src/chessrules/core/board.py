"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import SQUARES, Square, make_square, square_index

if TYPE_CHECKING:
    from chessrules.core.move import Move

_COLOR_COUNT = 2


class Board:
    """Mutable 64-square board. Knows nothing about legality."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None] * _COLOR_COUNT

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: tuple[int, int]) -> Piece | None:
        """Piece on *sq*, or ``None``. Raises :class:`OutOfBoundsError`."""
        return self._squares[square_index(sq)]

    def set(self, sq: tuple[int, int], piece: Piece | None) -> None:
        """Place *piece* on *sq* (``None`` empties it)."""
        idx = square_index(sq)
        old_piece = self._squares[idx]
        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            if self._king_squares[int(old_piece.color)] == SQUARES[idx]:
                self._king_squares[int(old_piece.color)] = None

        self._squares[idx] = piece
        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = SQUARES[idx]

    __getitem__ = piece_at
    __setitem__ = set

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            SQUARES[idx]
            for idx, p in enumerate(self._squares)
            if p is not None and p.color == color and p.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            SQUARES[idx]
            for idx, p in enumerate(self._squares)
            if p is not None and p.color == color
        ]

    def occupied(self) -> list[tuple[Square, Piece]]:
        """Every ``(square, piece)`` pair, top-left to bottom-right."""
        return [
            (SQUARES[idx], p) for idx, p in enumerate(self._squares) if p is not None
        ]

    def has_king(self, color: Color) -> bool:
        return self._king_squares[int(color)] is not None

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # -- Mutation / copying -------------------------------------------------

    def apply(self, move: Move) -> Piece | None:
        """Relocate pieces for *move* and return the captured piece.

        Handles the en-passant victim square, the rook slide of a castle and
        the promoted piece. Does not check that the move is legal.
        """
        piece = self.piece_at(move.from_sq)
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        capture_sq = move.to_sq
        if move.flags & MoveFlag.EN_PASSANT:
            capture_sq = make_square(move.from_sq[0], move.to_sq[1])
        captured = self.piece_at(capture_sq)

        self.set(move.from_sq, None)
        if captured is not None:
            self.set(capture_sq, None)

        placed = piece
        if move.promotion is not None:
            placed = Piece(piece.color, move.promotion)
        self.set(move.to_sq, placed)

        rank = move.from_sq[0]
        if move.flags & MoveFlag.CASTLE_KINGSIDE:
            self.set((rank, 5), self.piece_at((rank, 7)))
            self.set((rank, 7), None)
        elif move.flags & MoveFlag.CASTLE_QUEENSIDE:
            self.set((rank, 3), self.piece_at((rank, 0)))
            self.set((rank, 0), None)

        return captured

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None] * _COLOR_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[(6, f)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(1, f)] = Piece(Color.BLACK, PieceType.PAWN)

        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for f, pt in enumerate(back_rank):
            b[(7, f)] = Piece(Color.WHITE, pt)
            b[(0, f)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8):
            row = []
            for file in range(8):
                p = self._squares[rank * 8 + file]
                row.append(str(p) if p else ".")
            rows.append(f"{8 - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
