"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessrules.core import LegalityFilter, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in LegalityFilter(pos).legal_moves():
        print(move)
"""

from chessrules.core.attacks import is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    DrawCause,
    MoveFlag,
    PieceType,
    WinCause,
)
from chessrules.core.errors import (
    ChessError,
    IllegalMoveError,
    InvalidFenError,
    InvalidNotationError,
    InvalidPromotionStateError,
    OutOfBoundsError,
)
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    parse_uci,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import DrawRules, Rules
from chessrules.core.state import AwaitPromotion, Draw, GameState, InProgress, Win
from chessrules.core.types import (
    Square,
    algebraic_to_square,
    make_square,
    parse_square,
    square_name,
    square_to_algebraic,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "DrawCause",
    "MoveFlag",
    "PieceType",
    "WinCause",
    # Errors
    "ChessError",
    "IllegalMoveError",
    "InvalidFenError",
    "InvalidNotationError",
    "InvalidPromotionStateError",
    "OutOfBoundsError",
    # Types / helpers
    "Square",
    "algebraic_to_square",
    "make_square",
    "parse_square",
    "square_name",
    "square_to_algebraic",
    # Domain objects
    "Board",
    "LegalityFilter",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "DrawRules",
    "is_square_attacked",
    # States
    "AwaitPromotion",
    "Draw",
    "GameState",
    "InProgress",
    "Win",
    # Notation
    "STARTING_FEN",
    "parse_uci",
    "position_from_fen",
    "position_to_fen",
]
