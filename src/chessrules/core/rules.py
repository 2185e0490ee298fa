"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, DrawCause, PieceType, WinCause
from chessrules.core.legality import LegalityFilter
from chessrules.core.state import IN_PROGRESS, Draw, GameState, Win

if TYPE_CHECKING:
    from chessrules.core.position import Position


@dataclass(frozen=True, slots=True)
class DrawRules:
    """Thresholds for the automatic draw rules.

    Args:
        fifty_move_plies: Halfmove clock value that ends the game.
        repetition_count: Occurrences of one position that end the game.
        insufficient_material: Whether dead material ends the game.
    """

    fifty_move_plies: int = 100
    repetition_count: int = 3
    insufficient_material: bool = True

    def __post_init__(self) -> None:
        if self.fifty_move_plies < 1:
            raise ValueError(f"fifty_move_plies must be positive: {self.fifty_move_plies}")
        if self.repetition_count < 2:
            raise ValueError(f"repetition_count must be >= 2: {self.repetition_count}")


DEFAULT_DRAW_RULES = DrawRules()


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return LegalityFilter(position).is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        legality = LegalityFilter(position)
        if not legality.is_in_check(position.side_to_move):
            return False
        return not legality.legal_moves()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        legality = LegalityFilter(position)
        if legality.is_in_check(position.side_to_move):
            return False
        return not legality.legal_moves()

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """Each side has a bare king or a king and one minor piece."""
        extras: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 0}
        for _, piece in position.board.occupied():
            if piece.piece_type == PieceType.KING:
                continue
            if not piece.is_minor:
                return False
            extras[piece.color] += 1
            if extras[piece.color] > 1:
                return False
        return True

    @staticmethod
    def is_fifty_move_rule(position: Position, plies: int = 100) -> bool:
        return position.halfmove_clock >= plies  # 100 half-moves = 50 full moves

    @staticmethod
    def is_repetition(occurrences: int, limit: int = 3) -> bool:
        return occurrences >= limit

    @staticmethod
    def evaluate(
        position: Position,
        occurrences: int = 1,
        draw_rules: DrawRules = DEFAULT_DRAW_RULES,
    ) -> GameState:
        """Determine the state of *position* for the side to move.

        *occurrences* is how many times this exact position has appeared in
        the game so far, including now.
        """
        legality = LegalityFilter(position)
        side = position.side_to_move

        if not legality.legal_moves(side):
            if legality.is_in_check(side):
                return Win(side.opposite, WinCause.CHECKMATE)
            return Draw(DrawCause.STALEMATE)

        if Rules.is_fifty_move_rule(position, draw_rules.fifty_move_plies):
            return Draw(DrawCause.FIFTY_MOVE)

        if Rules.is_repetition(occurrences, draw_rules.repetition_count):
            return Draw(DrawCause.REPETITION)

        if draw_rules.insufficient_material and Rules.is_insufficient_material(position):
            return Draw(DrawCause.INSUFFICIENT_MATERIAL)

        return IN_PROGRESS
