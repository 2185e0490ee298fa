"""Precomputed move tables and the square-attack query.

The attack query answers "could a piece of this color capture on that
square right now?" It is shared by castling generation, check detection and
the legality filter.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.types import SQUARES, Square, square_index

# Offsets are (d_rank, d_file); rank grows towards White's side of the board.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Direction a pawn of each color advances in.
PAWN_FORWARD: tuple[int, int] = (-1, 1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for idx in range(64):
        rank_idx, file_idx = divmod(idx, 8)
        moves: list[Square] = []
        for dr, df in offsets:
            ar = rank_idx + dr
            af = file_idx + df
            if 0 <= ar < 8 and 0 <= af < 8:
                moves.append(SQUARES[ar * 8 + af])
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for idx in range(64):
        rank_idx, file_idx = divmod(idx, 8)
        square_rays: list[tuple[Square, ...]] = []
        for dr, df in directions:
            ar = rank_idx + dr
            af = file_idx + df
            ray: list[Square] = []
            while 0 <= ar < 8 and 0 <= af < 8:
                ray.append(SQUARES[ar * 8 + af])
                ar += dr
                af += df
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attackers() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """[color][target] -> squares a pawn of *color* would attack *target* from."""
    per_color: list[tuple[tuple[Square, ...], ...]] = []
    for color in Color:
        # The attacker sits one step *behind* the target from its own view.
        back = -PAWN_FORWARD[int(color)]
        per_color.append(_build_targets(((back, -1), (back, 1))))
    return tuple(per_color)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
PAWN_ATTACKERS = _build_pawn_attackers()

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


def _slider_attacks(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    sliders: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break
    return False


def is_square_attacked(board: Board, sq: tuple[int, int], by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Pawns attack diagonally whether or not the square is occupied; pawn
    pushes and castling never attack.
    """
    idx = square_index(sq)

    for from_sq in PAWN_ATTACKERS[int(by_color)][idx]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for from_sq in KNIGHT_TARGETS[idx]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for from_sq in KING_TARGETS[idx]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KING
        ):
            return True

    if _slider_attacks(board, BISHOP_RAYS[idx], by_color, _DIAGONAL_SLIDERS):
        return True
    return _slider_attacks(board, ROOK_RAYS[idx], by_color, _STRAIGHT_SLIDERS)
