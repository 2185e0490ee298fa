"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntFlag):
    """Special move classification. Several flags may be combined."""

    NONE = 0
    CAPTURE = auto()
    EN_PASSANT = auto()
    CASTLE_KINGSIDE = auto()
    CASTLE_QUEENSIDE = auto()
    DOUBLE_PAWN = auto()
    PROMOTION = auto()

    CASTLE = CASTLE_KINGSIDE | CASTLE_QUEENSIDE


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class WinCause(IntEnum):
    """Why a game was won."""

    CHECKMATE = auto()
    RESIGNATION = auto()


class DrawCause(IntEnum):
    """Why a game was drawn."""

    STALEMATE = auto()
    FIFTY_MOVE = auto()
    REPETITION = auto()
    INSUFFICIENT_MATERIAL = auto()
    AGREEMENT = auto()
