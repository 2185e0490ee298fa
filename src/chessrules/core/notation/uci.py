"""Long-algebraic (UCI) move strings, e.g. ``e2e4`` or ``e7e8q``."""

from __future__ import annotations

from chessrules.core.enums import PieceType
from chessrules.core.errors import InvalidNotationError
from chessrules.core.types import Square, parse_square

_PROMOTION_CHARS: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}


def parse_uci(text: str) -> tuple[Square, Square, PieceType | None]:
    """Split a UCI move into ``(from_sq, to_sq, promotion)``."""
    if not isinstance(text, str) or len(text) not in (4, 5):
        raise InvalidNotationError(f"Invalid UCI move: {text!r}")
    from_sq = parse_square(text[0:2])
    to_sq = parse_square(text[2:4])
    promotion: PieceType | None = None
    if len(text) == 5:
        promotion = _PROMOTION_CHARS.get(text[4].lower())
        if promotion is None:
            raise InvalidNotationError(f"Invalid promotion piece in {text!r}")
    return from_sq, to_sq, promotion
