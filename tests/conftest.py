"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.game import Game


@pytest.fixture
def start_game() -> Game:
    """A fresh game from the standard starting position."""
    return Game.new()


@pytest.fixture
def castling_game() -> Game:
    """Both kings and all four rooks on their home squares, nothing else."""
    return Game.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
