"""Game — the state machine that owns a position and drives it move by move."""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import IntEnum

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, DrawCause, PieceType, WinCause
from chessrules.core.errors import IllegalMoveError, InvalidPromotionStateError
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move
from chessrules.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.notation.uci import parse_uci
from chessrules.core.piece import Piece
from chessrules.core.rules import DEFAULT_DRAW_RULES, DrawRules, Rules
from chessrules.core.state import AwaitPromotion, Draw, GameState, InProgress, Win
from chessrules.core.types import Square, coerce_square, square_name

_LOGGER = logging.getLogger(__name__)

_PROMOTABLE: frozenset[PieceType] = frozenset(
    {PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT}
)


def _log_rejection(from_sq: Square, to_sq: Square, reason: str) -> None:
    _LOGGER.debug("Rejected %s%s: %s", square_name(from_sq), square_name(to_sq), reason)


class MoveOutcome(IntEnum):
    """Result of :meth:`Game.make_move`. ``ILLEGAL`` is falsy."""

    ILLEGAL = 0
    APPLIED = 1
    AWAITING_PROMOTION = 2


class Game:
    """A single chess game: position, repetition history and state.

    The game owns its board outright. Queries hand out :class:`Piece` values
    and fresh lists, never references into the board. A rejected operation
    leaves every field untouched.

    Not thread-safe; callers must serialise access to one instance.
    """

    __slots__ = (
        "_position",
        "_state",
        "_draw_rules",
        "_moves",
        "_key_stack",
        "_key_counts",
    )

    def __init__(self, fen: str | None = None, draw_rules: DrawRules | None = None) -> None:
        self._position = position_from_fen(fen if fen is not None else STARTING_FEN)
        self._draw_rules = draw_rules if draw_rules is not None else DEFAULT_DRAW_RULES
        self._moves: list[Move] = []
        self._key_stack: list[int] = []
        self._key_counts: dict[int, int] = {}
        self._state: GameState = InProgress()
        self._finish_half_move()

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def new(cls, draw_rules: DrawRules | None = None) -> Game:
        """Game from the standard starting position."""
        return cls(STARTING_FEN, draw_rules)

    @classmethod
    def from_fen(cls, fen: str, draw_rules: DrawRules | None = None) -> Game:
        """Game from a FEN string; raises :class:`InvalidFenError`."""
        return cls(fen, draw_rules)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def active_color(self) -> Color:
        return self._position.side_to_move

    @property
    def castling(self) -> CastlingRights:
        return self._position.castling

    @property
    def en_passant(self) -> Square | None:
        return self._position.en_passant

    @property
    def halfmove_clock(self) -> int:
        return self._position.halfmove_clock

    @property
    def fullmove_number(self) -> int:
        return self._position.fullmove_number

    @property
    def draw_rules(self) -> DrawRules:
        return self._draw_rules

    @property
    def moves(self) -> tuple[Move, ...]:
        """Moves played so far, oldest first."""
        return tuple(self._moves)

    @property
    def is_game_over(self) -> bool:
        return self._state.is_terminal

    def piece_at(self, sq: tuple[int, int] | str) -> Piece | None:
        """Piece on *sq* given as ``"e4"`` or ``(rank, file)``."""
        return self._position.board[coerce_square(sq)]

    def board_copy(self) -> Board:
        """Independent copy of the current board."""
        return self._position.board.copy()

    def is_check(self) -> bool:
        """Is the active color's king attacked?"""
        return Rules.is_in_check(self._position)

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """Legal moves for *color* (default: active color).

        Empty whenever the game does not accept moves.
        """
        if not isinstance(self._state, InProgress):
            return []
        return LegalityFilter(self._position).legal_moves(color)

    def legal_moves_from(self, sq: tuple[int, int] | str) -> list[Move]:
        """Legal moves of the piece on *sq*."""
        square = coerce_square(sq)
        if not isinstance(self._state, InProgress):
            return []
        return LegalityFilter(self._position).legal_moves_from(square)

    def legal_destinations(self, sq: tuple[int, int] | str) -> list[str]:
        """Algebraic names of squares the piece on *sq* may move to."""
        seen: dict[str, None] = {}
        for move in self.legal_moves_from(sq):
            seen.setdefault(square_name(move.to_sq), None)
        return list(seen)

    def repetition_count(self) -> int:
        """How many times the current position has occurred in this game."""
        if not self._key_stack:
            return 0
        return self._key_counts.get(self._key_stack[-1], 0)

    def fen(self) -> str:
        return position_to_fen(self._position)

    # ── Mutation ─────────────────────────────────────────────────────────

    def make_move(
        self,
        from_sq: tuple[int, int] | str,
        to_sq: tuple[int, int] | str,
        auto_promote: bool = True,
    ) -> MoveOutcome:
        """Play *from_sq* → *to_sq* for the active color.

        Returns ``MoveOutcome.ILLEGAL`` (and changes nothing) when the move is
        not legal or the game is not accepting moves. Malformed coordinates
        raise :class:`InvalidNotationError` / :class:`OutOfBoundsError`.

        A pawn reaching the last rank becomes a queen when *auto_promote* is
        true; otherwise the game waits for :meth:`promote_to_piece`.
        """
        candidates = self._candidates(coerce_square(from_sq), coerce_square(to_sq))
        if not candidates:
            return MoveOutcome.ILLEGAL

        move = candidates[0]
        if move.is_promotion:
            if auto_promote:
                move = next(m for m in candidates if m.promotion == PieceType.QUEEN)
            else:
                move = replace(move, promotion=None)

        self._position.make_move(move)
        self._moves.append(move)
        _LOGGER.debug("Applied %s", move)

        if move.is_promotion and move.promotion is None:
            self._state = AwaitPromotion(move.to_sq)
            _LOGGER.debug("Awaiting promotion on %s", square_name(move.to_sq))
            return MoveOutcome.AWAITING_PROMOTION

        self._finish_half_move()
        return MoveOutcome.APPLIED

    def promote_to_piece(self, piece_type: PieceType) -> GameState:
        """Resolve a pending promotion and return the new state."""
        state = self._state
        if not isinstance(state, AwaitPromotion):
            raise InvalidPromotionStateError(
                f"No promotion pending (state is {type(state).__name__})"
            )
        try:
            piece_type = PieceType(piece_type)
        except ValueError:
            raise IllegalMoveError(f"Unknown piece type {piece_type!r}") from None
        if piece_type not in _PROMOTABLE:
            raise IllegalMoveError(f"Cannot promote to {piece_type.name}")

        board = self._position.board
        pawn = board[state.square]
        assert pawn is not None
        board[state.square] = Piece(pawn.color, piece_type)
        self._moves[-1] = replace(self._moves[-1], promotion=piece_type)
        _LOGGER.debug("Promoted on %s to %s", square_name(state.square), piece_type.name)

        self._finish_half_move()
        return self._state

    def play(self, *uci_moves: str) -> None:
        """Play UCI move strings in order, raising on the first bad one.

        A promotion move without a piece letter promotes to a queen. Moves
        before the failing one stay played.
        """
        for text in uci_moves:
            from_sq, to_sq, promotion = parse_uci(text)
            candidates = self._candidates(from_sq, to_sq)
            if not candidates:
                raise IllegalMoveError(f"Illegal move {text!r} in {self.fen()!r}")
            if promotion is not None and not candidates[0].is_promotion:
                raise IllegalMoveError(f"Move {text!r} is not a promotion")

            if promotion is None:
                self.make_move(from_sq, to_sq, auto_promote=True)
            else:
                self.make_move(from_sq, to_sq, auto_promote=False)
                self.promote_to_piece(promotion)

    def resign(self, color: Color) -> GameState:
        """*color* resigns; the opponent wins."""
        self._ensure_not_over()
        self._set_state(Win(color.opposite, WinCause.RESIGNATION))
        return self._state

    def agree_draw(self) -> GameState:
        """Both players agree to a draw."""
        self._ensure_not_over()
        self._set_state(Draw(DrawCause.AGREEMENT))
        return self._state

    # ── Internal ─────────────────────────────────────────────────────────

    def _candidates(self, from_sq: Square, to_sq: Square) -> list[Move]:
        if not isinstance(self._state, InProgress):
            _log_rejection(from_sq, to_sq, f"game is {type(self._state).__name__}")
            return []
        piece = self._position.board[from_sq]
        if piece is None or piece.color != self._position.side_to_move:
            _log_rejection(from_sq, to_sq, "no piece of the active color")
            return []
        candidates = [
            m
            for m in LegalityFilter(self._position).legal_moves_from(from_sq)
            if m.to_sq == to_sq
        ]
        if not candidates:
            _log_rejection(from_sq, to_sq, "not legal")
        return candidates

    def _ensure_not_over(self) -> None:
        if self._state.is_terminal:
            raise IllegalMoveError(f"Game is already over: {self._state}")

    def _finish_half_move(self) -> None:
        """Record the settled position and re-evaluate the state."""
        key = self._position.zobrist_hash
        self._key_stack.append(key)
        self._key_counts[key] = self._key_counts.get(key, 0) + 1
        self._set_state(
            Rules.evaluate(self._position, self._key_counts[key], self._draw_rules)
        )

    def _set_state(self, state: GameState) -> None:
        if state == self._state:
            return
        self._state = state
        if state.is_terminal:
            _LOGGER.info("Game over: %s", state)
        else:
            _LOGGER.debug("State is now %s", state)

    def __repr__(self) -> str:
        return f"Game({self.fen()!r}, state={self._state})"
