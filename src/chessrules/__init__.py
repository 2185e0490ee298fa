"""chessrules — a chess rules engine.

Board representation, legal move generation, FEN and a game state machine
that detects check, checkmate, stalemate and the automatic draw rules::

    from chessrules import Game

    game = Game.new()
    game.make_move("e2", "e4")
    print(game.fen())
"""

from chessrules.core import (
    AwaitPromotion,
    CastlingRights,
    ChessError,
    Color,
    Draw,
    DrawCause,
    DrawRules,
    GameState,
    IllegalMoveError,
    InProgress,
    InvalidFenError,
    InvalidNotationError,
    InvalidPromotionStateError,
    Move,
    MoveFlag,
    OutOfBoundsError,
    Piece,
    PieceType,
    Square,
    STARTING_FEN,
    Win,
    WinCause,
    algebraic_to_square,
    square_to_algebraic,
)
from chessrules.core.notation import parse_fen, to_fen
from chessrules.game import Game, MoveOutcome

__all__ = [
    "AwaitPromotion",
    "CastlingRights",
    "ChessError",
    "Color",
    "Draw",
    "DrawCause",
    "DrawRules",
    "Game",
    "GameState",
    "IllegalMoveError",
    "InProgress",
    "InvalidFenError",
    "InvalidNotationError",
    "InvalidPromotionStateError",
    "Move",
    "MoveFlag",
    "MoveOutcome",
    "OutOfBoundsError",
    "Piece",
    "PieceType",
    "STARTING_FEN",
    "Square",
    "Win",
    "WinCause",
    "algebraic_to_square",
    "parse_fen",
    "square_to_algebraic",
    "to_fen",
]
