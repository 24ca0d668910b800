"""Pseudo-legal destination generation per piece type, and legal move queries."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from chessrules.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    Rays,
)
from chessrules.core.board import Board
from chessrules.core.config import DEFAULT_SETUP, GameSetup
from chessrules.core.enums import CastleSide, Color, MoveKind, PieceType
from chessrules.core.legality import en_passant_victim, filter_legal, is_legal
from chessrules.core.move import Move, MoveRequest
from chessrules.core.piece import Piece
from chessrules.core.types import Point

if TYPE_CHECKING:
    from chessrules.core.position import Position


# -- Per-piece destination generators --------------------------------------


def pawn_destinations(
    board: Board,
    origin: Point,
    color: Color,
    double_stepped: Point | None = None,
    setup: GameSetup = DEFAULT_SETUP,
) -> list[Point]:
    """Pushes, the start-row double step, diagonal captures and en passant."""
    moves: list[Point] = []
    forward = color.forward

    one_step = origin.offset(forward, 0)
    if one_step is not None and board.is_empty(one_step):
        moves.append(one_step)
        if origin.row == setup.pawn_row(color):
            two_step = origin.offset(2 * forward, 0)
            if two_step is not None and board.is_empty(two_step):
                moves.append(two_step)

    for dcol in (-1, 1):
        target = origin.offset(forward, dcol)
        if target is None:
            continue
        piece = board[target]
        if piece is not None and piece.color != color:
            moves.append(target)

    if (
        double_stepped is not None
        and double_stepped.row == origin.row
        and abs(double_stepped.col - origin.col) == 1
        and board[double_stepped] == Piece(color.opposite, PieceType.PAWN)
    ):
        target = Point(origin.row + forward, double_stepped.col)
        if board.is_empty(target):
            moves.append(target)

    return moves


def _step_destinations(
    board: Board, color: Color, targets: tuple[Point, ...]
) -> list[Point]:
    moves: list[Point] = []
    for target in targets:
        piece = board[target]
        if piece is None or piece.color != color:
            moves.append(target)
    return moves


def _sliding_destinations(board: Board, color: Color, rays: Rays) -> list[Point]:
    moves: list[Point] = []
    for ray in rays:
        for target in ray:
            piece = board[target]
            if piece is None:
                moves.append(target)
                continue
            if piece.color != color:
                moves.append(target)
            break
    return moves


def knight_destinations(board: Board, origin: Point, color: Color) -> list[Point]:
    return _step_destinations(board, color, KNIGHT_TARGETS[origin])


def king_destinations(board: Board, origin: Point, color: Color) -> list[Point]:
    """One-square king steps; castling is validated separately."""
    return _step_destinations(board, color, KING_TARGETS[origin])


def bishop_destinations(board: Board, origin: Point, color: Color) -> list[Point]:
    return _sliding_destinations(board, color, BISHOP_RAYS[origin])


def rook_destinations(board: Board, origin: Point, color: Color) -> list[Point]:
    return _sliding_destinations(board, color, ROOK_RAYS[origin])


def queen_destinations(board: Board, origin: Point, color: Color) -> list[Point]:
    return _sliding_destinations(board, color, QUEEN_RAYS[origin])


_PIECE_GENERATORS: dict[PieceType, Callable[[Board, Point, Color], list[Point]]] = {
    PieceType.KNIGHT: knight_destinations,
    PieceType.BISHOP: bishop_destinations,
    PieceType.ROOK: rook_destinations,
    PieceType.QUEEN: queen_destinations,
    PieceType.KING: king_destinations,
}


def pseudo_legal_destinations(
    board: Board,
    origin: Point,
    double_stepped: Point | None = None,
    setup: GameSetup = DEFAULT_SETUP,
) -> list[Point]:
    """Destinations for whatever piece stands on *origin*."""
    piece = board[origin]
    if piece is None:
        raise ValueError(f"No piece on {origin.name}")
    if piece.piece_type == PieceType.PAWN:
        return pawn_destinations(board, origin, piece.color, double_stepped, setup)
    return _PIECE_GENERATORS[piece.piece_type](board, origin, piece.color)


# -- Position-level queries -------------------------------------------------


class MoveGenerator:
    """Generates legal moves for a given :class:`Position`.

    Legality probes mutate the position's board in place but always restore
    it before returning.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All pseudo-legal non-castle moves for *color* (default: side to move)."""
        if color is None:
            color = self._pos.side_to_move
        moves: list[Move] = []
        for origin in self._board.all_pieces(color):
            moves.extend(self._moves_from(origin))
        return moves

    def legal_moves(self, include_castling: bool = True) -> list[Move]:
        """All strictly legal moves for the side to move."""
        color = self._pos.side_to_move
        legal = filter_legal(
            color,
            self.pseudo_legal_moves(color),
            self._board,
            self._pos.king_point(color),
        )
        if include_castling:
            legal.extend(self.castle_moves())
        return legal

    def legal_destinations(self, piece_type: PieceType, origin: Point) -> list[Point]:
        """Legal destinations of the side to move's *piece_type* on *origin*.

        Empty when *origin* does not hold such a piece. Promotion choices
        collapse into a single destination; castling is not included.
        """
        color = self._pos.side_to_move
        if self._board[origin] != Piece(color, piece_type):
            return []
        legal = filter_legal(
            color,
            list(self._moves_from(origin)),
            self._board,
            self._pos.king_point(color),
        )
        return list(dict.fromkeys(move.destination for move in legal))

    def legal_move_count(self, color: Color | None = None) -> int:
        """Number of legal (origin, destination) pairs, castling excluded."""
        if color is None:
            color = self._pos.side_to_move
        board = self._board
        king_point = self._pos.king_point(color)
        count = 0
        for origin in board.all_pieces(color):
            candidates = [
                Move(origin, destination)
                for destination in pseudo_legal_destinations(
                    board, origin, self._pos.double_stepped, self._pos.setup
                )
            ]
            count += len(filter_legal(color, candidates, board, king_point))
        return count

    def is_legal_move(self, move: Move) -> bool:
        """Whether *move* (kind and promotion included) is legal right now."""
        color = self._pos.side_to_move
        piece = self._board[move.origin]
        if piece is None or piece.color != color:
            return False
        if move not in list(self._moves_from(move.origin)):
            return False
        return is_legal(color, move, self._board, self._pos.king_point(color))

    def castle_moves(self) -> list[Move]:
        """Castle moves currently permitted by rights and the validator."""
        moves: list[Move] = []
        for side in CastleSide:
            move = self._pos.castle_move(side)
            if move is not None:
                moves.append(move)
        return moves

    def matching_moves(self, request: MoveRequest) -> list[Move]:
        """Every legal move that satisfies *request*.

        Zero results means the request is illegal; more than one means the
        origin filter under-specifies it.
        """
        if request.kind == MoveKind.CASTLE:
            assert request.castle_side is not None
            move = self._pos.castle_move(request.castle_side)
            return [move] if move is not None else []

        color = self._pos.side_to_move
        candidates = [
            move
            for origin in self._board.pieces(color, request.piece_type)
            if request.origin.matches(origin)
            for move in self._moves_from(origin)
            if move.destination == request.destination
            and move.kind == request.kind
            and move.promotion == request.promotion
        ]
        return filter_legal(
            color, candidates, self._board, self._pos.king_point(color)
        )

    # -- Internal -------------------------------------------------------------

    def _moves_from(self, origin: Point) -> Iterator[Move]:
        """Pseudo-legal moves from *origin*, tagged with their kind."""
        board = self._board
        setup = self._pos.setup
        piece = board[origin]
        assert piece is not None
        is_pawn = piece.piece_type == PieceType.PAWN
        promotion_row = setup.promotion_row(piece.color)

        for destination in pseudo_legal_destinations(
            board, origin, self._pos.double_stepped, setup
        ):
            capture = board[destination] is not None or (
                is_pawn and en_passant_victim(board, origin, destination) is not None
            )
            if is_pawn and destination.row == promotion_row:
                kind = MoveKind.CAPTURE_PROMOTION if capture else MoveKind.PROMOTION
                for pt in setup.promotion_types:
                    yield Move(origin, destination, kind, pt)
            else:
                kind = MoveKind.CAPTURE if capture else MoveKind.QUIET
                yield Move(origin, destination, kind)
