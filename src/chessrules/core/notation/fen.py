"""FEN parsing and serialization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attacks import is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.errors import InvalidFenError, InvalidNotationError
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, make_square, parse_square, square_name

if TYPE_CHECKING:
    from chessrules.game.game import Game

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidFenError("board must contain 8 ranks", fen)

    board = Board()
    # FEN lists rank 8 first, which is row 0 of the board.
    for rank, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidFenError(f"bad empty-square count {ch!r}", fen)
                file += step
            else:
                if file >= 8:
                    raise InvalidFenError(f"rank {8 - rank} is wider than 8 files", fen)
                try:
                    board[(rank, file)] = Piece.from_char(ch)
                except ValueError:
                    raise InvalidFenError(f"unknown piece letter {ch!r}", fen) from None
                file += 1
            if file > 8:
                raise InvalidFenError(f"rank {8 - rank} is wider than 8 files", fen)
        if file != 8:
            raise InvalidFenError(f"rank {8 - rank} does not cover 8 files", fen)

    for color in Color:
        if len(board.pieces(color, PieceType.KING)) != 1:
            raise InvalidFenError(f"{color} must have exactly one king", fen)
    return board


def _parse_clock(text: str, minimum: int, name: str, fen: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise InvalidFenError(f"{name} must be a non-negative integer", fen)
    value = int(text)
    if value < minimum:
        raise InvalidFenError(f"{name} must be at least {minimum}", fen)
    return value


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    The two clock fields may be omitted; they default to ``0`` and ``1``.
    """
    if not isinstance(fen, str):
        raise InvalidFenError("not a string", repr(fen))
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InvalidFenError(f"expected 6 fields, got {len(parts)}", fen)

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    board = _parse_placement(placement, fen)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidFenError(f"side to move {side_part!r}", fen)

    # The side that just moved cannot have left its own king attacked.
    if is_square_attacked(board, board.king_square(side.opposite), side):
        raise InvalidFenError("side not to move is in check", fen)

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise InvalidFenError(f"castling field {castling_part!r}", fen)
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except InvalidNotationError:
            raise InvalidFenError(f"en-passant square {ep_part!r}", fen) from None
        # White to move captures onto rank 6 (row 2); black onto rank 3 (row 5).
        expected_row = 2 if side == Color.WHITE else 5
        if ep.rank != expected_row:
            raise InvalidFenError(
                f"en-passant square {ep_part!r} for side to move", fen
            )
        # The double-stepped pawn sits just past the empty target square.
        pawn_row = ep.rank + 1 if side == Color.WHITE else ep.rank - 1
        pawn_sq = make_square(pawn_row, ep.file)
        if board[ep] is not None or board[pawn_sq] != Piece(side.opposite, PieceType.PAWN):
            raise InvalidFenError(
                f"en-passant square {ep_part!r} has no pawn to capture", fen
            )

    # 5–6. Clocks (optional)
    halfmove = _parse_clock(parts[4], 0, "halfmove clock", fen) if len(parts) > 4 else 0
    fullmove = _parse_clock(parts[5], 1, "fullmove number", fen) if len(parts) > 5 else 1

    return Position(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(8):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"


def parse_fen(fen: str) -> Game:
    """Build a :class:`~chessrules.game.Game` from a FEN string."""
    from chessrules.game.game import Game

    return Game.from_fen(fen)


def to_fen(game: Game) -> str:
    """Serialise a game's current position to FEN."""
    return game.fen()
