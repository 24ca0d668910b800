"""King-safety legality filter: make / check / unmake probes on a shared board.

The probe mutates *board* in place and restores every touched square before
returning, whether the candidate is accepted, rejected, or the detector
raises. It is not reentrant: nothing else may touch the board while a probe
is in flight.
"""

from __future__ import annotations

from collections.abc import Iterable

from chessrules.core.attacks import in_check
from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.types import Point


def en_passant_victim(board: Board, origin: Point, destination: Point) -> Point | None:
    """Square of the pawn captured en passant by origin→destination, if any."""
    piece = board[origin]
    if (
        piece is not None
        and piece.piece_type == PieceType.PAWN
        and origin.col != destination.col
        and board.is_empty(destination)
    ):
        return Point(origin.row, destination.col)
    return None


def is_legal(color: Color, move: Move, board: Board, king_point: Point) -> bool:
    """Probe a single pseudo-legal *move* for *color*."""
    origin = move.origin
    destination = move.destination
    moving = board[origin]
    if moving is None:
        raise ValueError(f"No piece on {origin.name}")

    replaced = board[destination]
    victim = en_passant_victim(board, origin, destination)
    victim_piece = board[victim] if victim is not None else None

    board[destination] = moving
    board[origin] = None
    if victim is not None:
        board[victim] = None
    try:
        probe_king = destination if origin == king_point else king_point
        return not in_check(board, color, probe_king)
    finally:
        board[origin] = moving
        board[destination] = replaced
        if victim is not None:
            board[victim] = victim_piece


def filter_legal(
    color: Color,
    candidates: Iterable[Move],
    board: Board,
    king_point: Point,
) -> list[Move]:
    """Keep only the *candidates* that do not leave *color*'s king attacked."""
    return [move for move in candidates if is_legal(color, move, board, king_point)]
