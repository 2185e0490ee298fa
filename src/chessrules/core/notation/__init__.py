"""Notation package: algebraic squares, FEN and UCI move strings."""

from chessrules.core.notation.fen import (
    STARTING_FEN,
    parse_fen,
    position_from_fen,
    position_to_fen,
    to_fen,
)
from chessrules.core.notation.uci import parse_uci
from chessrules.core.types import algebraic_to_square, square_to_algebraic

__all__ = [
    "STARTING_FEN",
    "algebraic_to_square",
    "parse_fen",
    "parse_uci",
    "position_from_fen",
    "position_to_fen",
    "square_to_algebraic",
    "to_fen",
]
