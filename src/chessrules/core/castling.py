"""Castling validator: path occupancy and path safety."""

from __future__ import annotations

from chessrules.core.attacks import is_square_attacked
from chessrules.core.board import Board
from chessrules.core.config import DEFAULT_SETUP, GameSetup
from chessrules.core.enums import CastleSide, Color
from chessrules.core.types import Point


def _span(a: int, b: int) -> range:
    """Closed column range between *a* and *b*, in either order."""
    return range(min(a, b), max(a, b) + 1)


def can_castle(
    color: Color,
    side: CastleSide,
    board: Board,
    king_point: Point,
    setup: GameSetup = DEFAULT_SETUP,
) -> bool:
    """Whether the castling path toward *side* is clear and safe.

    Castle rights are checked separately by the caller; this only looks at
    the board. Every square between king and rook must be empty, and the
    king may not start on, pass through, or land on an attacked square.
    """
    row = king_point.row
    king_col = king_point.col
    rook_col = setup.rook_cols[int(side)]
    target_col = setup.castled_king_cols[int(side)]

    for col in _span(king_col, rook_col):
        if col in (king_col, rook_col):
            continue
        if not board.is_empty(Point(row, col)):
            return False

    for col in _span(king_col, target_col):
        if is_square_attacked(board, Point(row, col), color):
            return False

    return True
