"""Legal-move filtering by simulation on scratch boards."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from chessrules.core.attacks import is_square_attacked
from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import coerce_square

if TYPE_CHECKING:
    from chessrules.core.position import Position


class LegalityFilter:
    """Narrows pseudo-legal moves down to the ones that keep the king safe.

    Every candidate is played on a throwaway copy of the board and rejected
    if the mover's king is attacked afterwards. Pins and discovered checks
    fall out of this without any special casing.
    """

    __slots__ = ("_pos", "_gen")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._gen = MoveGenerator(position)

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, sq: tuple[int, int], by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._pos.board, sq, by_color)

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        board = self._pos.board
        if not board.has_king(color):
            return False
        return is_square_attacked(board, board.king_square(color), color.opposite)

    # -- Filtering ----------------------------------------------------------

    def filter_legal(self, moves: Iterable[Move], color: Color) -> list[Move]:
        """Keep only the *moves* that do not leave *color*'s king attacked."""
        board = self._pos.board
        opponent = color.opposite
        legal: list[Move] = []
        append_legal = legal.append

        for move in moves:
            scratch = board.copy()
            scratch.apply(move)
            if not scratch.has_king(color):
                continue
            if not is_square_attacked(scratch, scratch.king_square(color), opponent):
                append_legal(move)
        return legal

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """All strictly legal moves for *color* (default: side to move)."""
        if color is None:
            color = self._pos.side_to_move
        return self.filter_legal(self._gen.pseudo_legal_moves(color), color)

    def legal_moves_from(self, sq: tuple[int, int] | str) -> list[Move]:
        """Legal moves of the piece on *sq*."""
        square = coerce_square(sq)
        piece = self._pos.board[square]
        if piece is None:
            return []
        return self.filter_legal(self._gen.pseudo_legal_moves_from(square), piece.color)
