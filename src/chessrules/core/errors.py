"""Exception hierarchy for the rules engine.

Every error is recoverable: an operation that raises leaves the game and
board exactly as they were before the call.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all errors raised by :mod:`chessrules`."""


class OutOfBoundsError(ChessError, IndexError):
    """A coordinate lies outside the 8x8 grid."""

    def __init__(self, square: object) -> None:
        super().__init__(f"Square out of bounds: {square!r}")
        self.square = square


class InvalidNotationError(ChessError, ValueError):
    """Malformed algebraic square or move string."""


class InvalidFenError(ChessError, ValueError):
    """Malformed FEN string."""

    def __init__(self, reason: str, fen: str) -> None:
        super().__init__(f"Invalid FEN ({reason}): {fen!r}")
        self.reason = reason
        self.fen = fen


class IllegalMoveError(ChessError):
    """Move is not in the legal set, or the game does not accept moves."""


class InvalidPromotionStateError(ChessError):
    """Promotion requested while no promotion is pending."""
