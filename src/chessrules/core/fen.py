"""FEN setup and inspection.

The core never reads moves in algebraic notation; FEN is accepted only to
set up a position and to describe one. The en passant field names the
square *behind* the pawn that just double-stepped, while :class:`Position`
tracks the pawn itself, so the two are converted here.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.config import DEFAULT_SETUP
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import SIZE, Point, parse_point

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDE_CHARS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_H,
    "Q": CastlingRights.WHITE_A,
    "k": CastlingRights.BLACK_H,
    "q": CastlingRights.BLACK_A,
}


# -- Parsing ------------------------------------------------------------------


def position_from_fen(fen: str) -> Position:
    """Build a :class:`Position` from a FEN string.

    The two clock fields are optional and default to ``0`` and ``1``.
    Raises ``ValueError`` on any malformed field, and (via
    :class:`Position`) when either side does not have exactly one king.
    """
    fields = fen.split()
    if len(fields) not in (4, 5, 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    board = _parse_placement(fields[0])
    side = _SIDE_CHARS.get(fields[1])
    if side is None:
        raise ValueError(f"Invalid FEN side-to-move field: {fields[1]!r}")

    return Position(
        board,
        side,
        _parse_castling(fields[2]),
        _parse_double_stepped(fields[3], side),
        _parse_clock(fields, 4, "halfmove clock", default=0, minimum=0),
        _parse_clock(fields, 5, "fullmove number", default=1, minimum=1),
    )


def _parse_placement(text: str) -> Board:
    ranks = text.split("/")
    if len(ranks) != SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {text!r}")

    board = Board()
    for row, rank_text in zip(range(SIZE - 1, -1, -1), ranks):
        col = 0
        for ch in rank_text:
            if ch in "12345678":
                col += int(ch)
            elif col < SIZE:
                board[Point(row, col)] = Piece.from_char(ch)
                col += 1
            else:
                col = SIZE + 1
            if col > SIZE:
                break
        if col != SIZE:
            raise ValueError(f"Invalid FEN rank width: {rank_text!r}")
    return board


def _parse_castling(text: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if text == "-":
        return castling
    for ch in text:
        right = _CASTLING_CHARS.get(ch)
        if right is None or castling & right:
            raise ValueError(f"Invalid FEN castling field: {text!r}")
        castling |= right
    return castling


def _parse_double_stepped(text: str, side: Color) -> Point | None:
    """Square of the pawn the opponent just moved two squares, if any."""
    if text == "-":
        return None
    target = parse_point(text)
    mover = side.opposite
    # The target is the square the pawn skipped over.
    if target.row != DEFAULT_SETUP.pawn_row(mover) + mover.forward:
        raise ValueError(
            f"Invalid FEN en-passant square for side-to-move: {text!r}"
        )
    return Point(target.row + mover.forward, target.col)


def _parse_clock(
    fields: list[str], index: int, label: str, *, default: int, minimum: int
) -> int:
    if len(fields) <= index:
        return default
    try:
        value = int(fields[index])
    except ValueError:
        raise ValueError(f"Invalid FEN {label}: {fields[index]!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN {label}: {fields[index]!r}")
    return value


# -- Serialization ------------------------------------------------------------


def position_to_fen(pos: Position) -> str:
    """Describe *pos* as a six-field FEN string."""
    castling = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    side = "w" if pos.side_to_move == Color.WHITE else "b"
    return " ".join(
        (
            _placement_field(pos.board),
            side,
            castling or "-",
            _en_passant_field(pos),
            str(pos.halfmove_clock),
            str(pos.fullmove_number),
        )
    )


def _placement_field(board: Board) -> str:
    ranks: list[str] = []
    for row in range(SIZE - 1, -1, -1):
        text = ""
        gap = 0
        for col in range(SIZE):
            piece = board[Point(row, col)]
            if piece is None:
                gap += 1
                continue
            text += (str(gap) if gap else "") + str(piece)
            gap = 0
        ranks.append(text + (str(gap) if gap else ""))
    return "/".join(ranks)


def _en_passant_field(pos: Position) -> str:
    if pos.double_stepped is None:
        return "-"
    mover = pos.side_to_move.opposite
    pawn = pos.double_stepped
    return Point(pawn.row - mover.forward, pawn.col).name
