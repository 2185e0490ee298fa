"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# Letters and glyphs in PieceType order (pawn .. king).
_LETTERS = "pnbrqk"
_GLYPHS: dict[Color, str] = {Color.WHITE: "♙♘♗♖♕♔", Color.BLACK: "♟♞♝♜♛♚"}

MINOR_PIECES: frozenset[PieceType] = frozenset({PieceType.KNIGHT, PieceType.BISHOP})


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored chess piece. Immutable, so it is safe to hand out."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter: uppercase for White, lowercase for Black."""
        letter = _LETTERS[self.piece_type - 1]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a FEN letter, e.g. ``'N'`` is a white knight."""
        if len(char) != 1 or char.lower() not in _LETTERS:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(_LETTERS.index(char.lower()) + 1))

    @property
    def symbol(self) -> str:
        """Unicode glyph, e.g. ♞."""
        return _GLYPHS[self.color][self.piece_type - 1]

    @property
    def is_minor(self) -> bool:
        return self.piece_type in MINOR_PIECES
