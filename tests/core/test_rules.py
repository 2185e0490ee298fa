"""Tests for checkmate, stalemate and the draw rules."""

import pytest

from chessrules.core.enums import Color, DrawCause, WinCause
from chessrules.core.notation import STARTING_FEN, position_from_fen
from chessrules.core.rules import DrawRules, Rules
from chessrules.core.state import IN_PROGRESS, Draw, InProgress, Win

BACK_RANK_MATE = "R5k1/5ppp/8/8/8/8/8/6K1 b - - 0 1"
STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"


class TestCheckmate:
    def test_back_rank(self) -> None:
        pos = position_from_fen(BACK_RANK_MATE)
        assert Rules.is_in_check(pos)
        assert Rules.is_checkmate(pos)
        assert not Rules.is_stalemate(pos)

    def test_check_with_escape_is_not_mate(self) -> None:
        pos = position_from_fen("R5k1/5pp1/8/8/8/8/8/6K1 b - - 0 1")
        assert Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)

    def test_starting_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert not Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)
        assert not Rules.is_stalemate(pos)


class TestStalemate:
    def test_queen_stalemate(self) -> None:
        pos = position_from_fen(STALEMATE)
        assert Rules.is_stalemate(pos)
        assert not Rules.is_checkmate(pos)


class TestInsufficientMaterial:
    @pytest.mark.parametrize(
        "fen",
        [
            "4k3/8/8/8/8/8/8/4K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/2B1K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/1N2K3 w - - 0 1",
            "2b1k3/8/8/8/8/8/8/1N2K3 w - - 0 1",
        ],
    )
    def test_dead_positions(self, fen: str) -> None:
        assert Rules.is_insufficient_material(position_from_fen(fen))

    @pytest.mark.parametrize(
        "fen",
        [
            "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/R3K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/1NB1K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/1NN1K3 w - - 0 1",
            STARTING_FEN,
        ],
    )
    def test_mating_material(self, fen: str) -> None:
        assert not Rules.is_insufficient_material(position_from_fen(fen))


class TestCounters:
    def test_fifty_move_threshold(self) -> None:
        assert not Rules.is_fifty_move_rule(position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 99 80"))
        assert Rules.is_fifty_move_rule(position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 100 80"))

    def test_repetition_threshold(self) -> None:
        assert not Rules.is_repetition(2)
        assert Rules.is_repetition(3)
        assert Rules.is_repetition(2, limit=2)


class TestEvaluate:
    def test_in_progress(self) -> None:
        assert Rules.evaluate(position_from_fen(STARTING_FEN)) == IN_PROGRESS
        assert isinstance(Rules.evaluate(position_from_fen(STARTING_FEN)), InProgress)

    def test_checkmate(self) -> None:
        state = Rules.evaluate(position_from_fen(BACK_RANK_MATE))
        assert state == Win(Color.WHITE, WinCause.CHECKMATE)
        assert state.is_terminal

    def test_stalemate(self) -> None:
        assert Rules.evaluate(position_from_fen(STALEMATE)) == Draw(DrawCause.STALEMATE)

    def test_fifty_moves(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 b - - 100 80")
        assert Rules.evaluate(pos) == Draw(DrawCause.FIFTY_MOVE)

    def test_checkmate_beats_fifty_moves(self) -> None:
        pos = position_from_fen("R5k1/5ppp/8/8/8/8/8/6K1 b - - 100 80")
        assert Rules.evaluate(pos) == Win(Color.WHITE, WinCause.CHECKMATE)

    def test_repetition(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert Rules.evaluate(pos, occurrences=3) == Draw(DrawCause.REPETITION)
        assert Rules.evaluate(pos, occurrences=2) == IN_PROGRESS

    def test_fifty_moves_before_repetition(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 100 80")
        assert Rules.evaluate(pos, occurrences=3) == Draw(DrawCause.FIFTY_MOVE)

    def test_insufficient_material(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
        assert Rules.evaluate(pos) == Draw(DrawCause.INSUFFICIENT_MATERIAL)

    def test_insufficient_material_can_be_disabled(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
        rules = DrawRules(insufficient_material=False)
        assert Rules.evaluate(pos, draw_rules=rules) == IN_PROGRESS

    def test_custom_thresholds(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 20 80")
        rules = DrawRules(fifty_move_plies=20, repetition_count=2)
        assert Rules.evaluate(pos, draw_rules=rules) == Draw(DrawCause.FIFTY_MOVE)
        assert Rules.evaluate(position_from_fen(STARTING_FEN), 2, rules) == Draw(
            DrawCause.REPETITION
        )


class TestDrawRules:
    def test_defaults(self) -> None:
        rules = DrawRules()
        assert rules.fifty_move_plies == 100
        assert rules.repetition_count == 3
        assert rules.insufficient_material

    @pytest.mark.parametrize(
        "kwargs", [{"fifty_move_plies": 0}, {"repetition_count": 1}]
    )
    def test_invalid(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            DrawRules(**kwargs)
