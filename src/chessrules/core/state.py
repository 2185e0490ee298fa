"""Game state values.

``GameState`` is a closed union of small frozen records; match on it with
``isinstance`` or structural pattern matching::

    match game.state:
        case Win(winner, WinCause.CHECKMATE):
            ...
        case Draw(cause):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessrules.core.enums import Color, DrawCause, WinCause
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class InProgress:
    """Moves are accepted from the active color."""

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class AwaitPromotion:
    """A pawn on *square* reached the last rank and needs a piece chosen."""

    square: Square

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Win:
    winner: Color
    cause: WinCause

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Draw:
    cause: DrawCause

    @property
    def is_terminal(self) -> bool:
        return True


GameState: TypeAlias = InProgress | AwaitPromotion | Win | Draw

IN_PROGRESS = InProgress()
