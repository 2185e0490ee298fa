"""Zobrist keys for repetition detection.

A position key is the XOR of one 64-bit word per occupied (piece, square),
one per castling right still held, one for the en-passant file and one when
Black is to move. Clocks are not part of the key. The words are drawn from a
fixed-seed generator, so keys are stable between runs and processes.
"""

from __future__ import annotations

import random
from typing import Final

from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.types import square_index

_SEED: Final = 0x5EED_C4E5_5A1E
_PIECE_KINDS: Final = 12

_rng = random.Random(_SEED)

# Flat table: (color * 6 + piece_type - 1) * 64 + square.
_PIECE_WORDS: Final = tuple(_rng.getrandbits(64) for _ in range(_PIECE_KINDS * 64))
_BLACK_TO_MOVE: Final = _rng.getrandbits(64)
_CASTLING_WORDS: Final = {
    right: _rng.getrandbits(64)
    for right in (
        CastlingRights.WHITE_KINGSIDE,
        CastlingRights.WHITE_QUEENSIDE,
        CastlingRights.BLACK_KINGSIDE,
        CastlingRights.BLACK_QUEENSIDE,
    )
}
# The rank of an en-passant target follows from the side to move.
_EN_PASSANT_FILE_WORDS: Final = tuple(_rng.getrandbits(64) for _ in range(8))

del _rng


def piece_key(piece: Piece, sq: tuple[int, int]) -> int:
    kind = int(piece.color) * 6 + int(piece.piece_type) - 1
    return _PIECE_WORDS[kind * 64 + square_index(sq)]


def side_to_move_key(color: Color = Color.BLACK) -> int:
    """Word mixed in when *color* is to move; White contributes nothing."""
    return _BLACK_TO_MOVE if color == Color.BLACK else 0


def castling_key(castling: CastlingRights) -> int:
    key = 0
    for right, word in _CASTLING_WORDS.items():
        if castling & right:
            key ^= word
    return key


def en_passant_key(ep_square: tuple[int, int]) -> int:
    square_index(ep_square)
    return _EN_PASSANT_FILE_WORDS[ep_square[1]]
