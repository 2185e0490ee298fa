"""Square type and coordinate helpers.

Board layout is (rank, file) with rank 0 at the top of the board:
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)

Internally squares are also addressed by a flat index ``rank * 8 + file``.
"""

from __future__ import annotations

from typing import NamedTuple

from chessrules.core.errors import InvalidNotationError, OutOfBoundsError

_FILES = "abcdefgh"
_RANKS = "87654321"


class Square(NamedTuple):
    """Board coordinate; ``rank`` 0 is algebraic rank 8, ``file`` 0 is the a-file."""

    rank: int
    file: int

    def __str__(self) -> str:
        return square_to_algebraic(self)


def is_valid_square(sq: object) -> bool:
    """Whether *sq* is a ``(rank, file)`` pair inside the grid."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    rank, file = sq
    if type(rank) is not int or type(file) is not int:
        return False
    return 0 <= rank < 8 and 0 <= file < 8


def square_index(sq: tuple[int, int]) -> int:
    """Flat 0-63 index of *sq*; raises :class:`OutOfBoundsError` off the grid."""
    if not is_valid_square(sq):
        raise OutOfBoundsError(sq)
    return sq[0] * 8 + sq[1]


def make_square(rank: int, file: int) -> Square:
    """Create a validated square from rank (0-7, top first) and file (0-7)."""
    return SQUARES[square_index((rank, file))]


def square_to_algebraic(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. (0, 0) → 'a8', (7, 7) → 'h1'."""
    square_index(sq)
    return _FILES[sq[1]] + _RANKS[sq[0]]


def algebraic_to_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(rank=4, file=4)."""
    if (
        not isinstance(name, str)
        or len(name) != 2
        or name[0] not in _FILES
        or name[1] not in _RANKS
    ):
        raise InvalidNotationError(f"Invalid square name: {name!r}")
    return SQUARES[_RANKS.index(name[1]) * 8 + _FILES.index(name[0])]


def coerce_square(value: tuple[int, int] | str) -> Square:
    """Accept either an algebraic name or an array coordinate."""
    if isinstance(value, str):
        return algebraic_to_square(value)
    return SQUARES[square_index(value)]


# Short aliases kept for call sites that read better with them.
square_name = square_to_algebraic
parse_square = algebraic_to_square

SQUARES: tuple[Square, ...] = tuple(Square(r, f) for r in range(8) for f in range(8))

# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[56:64]
