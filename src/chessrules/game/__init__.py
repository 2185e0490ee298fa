"""Game management layer — the state machine around a position.

Quick start::

    from chessrules.game import Game

    game = Game.new()
    if not game.make_move("e2", "e4"):
        print("illegal")
"""

from chessrules.game.game import Game, MoveOutcome

__all__ = [
    "Game",
    "MoveOutcome",
]
