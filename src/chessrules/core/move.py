"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    flags: MoveFlag = MoveFlag.NONE

    # ── Flag helpers ─────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return bool(self.flags & MoveFlag.CAPTURE)

    @property
    def is_en_passant(self) -> bool:
        return bool(self.flags & MoveFlag.EN_PASSANT)

    @property
    def is_castle(self) -> bool:
        return bool(self.flags & MoveFlag.CASTLE)

    @property
    def is_double_pawn_push(self) -> bool:
        return bool(self.flags & MoveFlag.DOUBLE_PAWN)

    @property
    def is_promotion(self) -> bool:
        return bool(self.flags & MoveFlag.PROMOTION)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
