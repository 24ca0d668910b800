"""Position — complete game state (board + metadata) and the move mutator."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessrules.core.board import Board, BoardSnapshot
from chessrules.core.castling import can_castle
from chessrules.core.config import DEFAULT_SETUP, GameSetup
from chessrules.core.enums import (
    SINGLE_CASTLING_RIGHTS,
    CastleSide,
    CastlingRights,
    Color,
    MoveKind,
    PieceType,
)
from chessrules.core.legality import en_passant_victim
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import Point
from chessrules.core.zobrist import (
    castling_key as zobrist_castling_key,
)
from chessrules.core.zobrist import (
    compute_key as zobrist_compute_key,
)
from chessrules.core.zobrist import (
    en_passant_component as zobrist_en_passant_component,
)
from chessrules.core.zobrist import (
    piece_key as zobrist_piece_key,
)
from chessrules.core.zobrist import (
    side_to_move_key as zobrist_side_to_move_key,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PositionSnapshot:
    """Read-only view of a position for rendering collaborators."""

    board: BoardSnapshot
    side_to_move: Color
    king_points: tuple[Point, Point]
    castling: CastlingRights
    double_stepped: Point | None
    halfmove_clock: int
    fullmove_number: int
    zobrist_key: int


class Position:
    """Full chess position: board, side to move, castling, en passant, clocks.

    Mutated only through :meth:`commit` and :meth:`castle`, one ply at a
    time. Every committed ply appends the new Zobrist key to an append-only
    history used for repetition detection.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "double_stepped",
        "halfmove_clock",
        "fullmove_number",
        "setup",
        "_king_points",
        "_zobrist_key",
        "_key_history",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        double_stepped: Point | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        setup: GameSetup = DEFAULT_SETUP,
    ) -> None:
        self.board = board if board is not None else Board.initial(setup)
        self.side_to_move = side_to_move
        self.castling = castling
        self.double_stepped = double_stepped
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.setup = setup
        self._king_points: list[Point] = [
            self.board.find_king(Color.WHITE),
            self.board.find_king(Color.BLACK),
        ]
        self._zobrist_key = self._compute_zobrist_key()
        self._key_history: list[int] = [self._zobrist_key]

    # ── Queries ──────────────────────────────────────────────────────────

    def king_point(self, color: Color) -> Point:
        """Cached king square of *color*."""
        return self._king_points[int(color)]

    @property
    def zobrist_key(self) -> int:
        """Current Zobrist key for the full position."""
        return self._zobrist_key

    @property
    def key_history(self) -> tuple[int, ...]:
        """Keys of every position reached so far, oldest first."""
        return tuple(self._key_history)

    def repetition_count(self) -> int:
        """How many times the current key occurred in the game history."""
        return self._key_history.count(self._zobrist_key)

    def has_castling_right(self, color: Color, side: CastleSide) -> bool:
        return bool(self.castling & CastlingRights.of(color, side))

    # ── Mutator ──────────────────────────────────────────────────────────

    def commit(self, move: Move) -> bool:
        """Apply one fully resolved move.

        Returns ``False`` without touching the position when *move* is not a
        legal move for its exact origin/destination pair (and kind).
        """
        if move.kind == MoveKind.CASTLE:
            if move.castle_side is None:
                return False
            expected = self.castle_move(move.castle_side)
            if expected is None or expected != move:
                return False
            return self.castle(move.castle_side)

        if not MoveGenerator(self).is_legal_move(move):
            _LOGGER.debug("Rejected %s for %s", move, self.side_to_move)
            return False

        self._apply(move)
        _LOGGER.debug("Committed %s, key=%016x", move, self._zobrist_key)
        return True

    def castle_move(self, side: CastleSide) -> Move | None:
        """The castle move toward *side* if rights and the board allow it."""
        color = self.side_to_move
        if not self.has_castling_right(color, side):
            return None

        setup = self.setup
        king_home = setup.king_home(color)
        if self.king_point(color) != king_home:
            return None
        if self.board[setup.rook_home(color, side)] != Piece(color, PieceType.ROOK):
            return None

        if not can_castle(color, side, self.board, king_home, setup):
            return None
        return Move(
            king_home,
            setup.castled_king(color, side),
            MoveKind.CASTLE,
            castle_side=side,
        )

    def castle(self, side: CastleSide) -> bool:
        """Castle toward *side*; ``False`` when not currently permitted."""
        move = self.castle_move(side)
        color = self.side_to_move
        if move is None:
            _LOGGER.debug("Rejected castle toward %s for %s", side.name, color)
            return False

        setup = self.setup
        self._zobrist_key ^= zobrist_en_passant_component(
            self.board, self.double_stepped
        )

        self._move_piece(move.origin, move.destination)
        self._move_piece(setup.rook_home(color, side), setup.castled_rook(color, side))
        self._king_points[int(color)] = move.destination
        self._set_castling(self.castling & ~CastlingRights.both(color))

        # Castling never resets the fifty-move count.
        self.halfmove_clock += 1
        self._finish_ply(next_double_stepped=None)
        _LOGGER.debug(
            "Committed castle toward %s, key=%016x", side.name, self._zobrist_key
        )
        return True

    # ── Internal move application ────────────────────────────────────────

    def _apply(self, move: Move) -> None:
        board = self.board
        origin = move.origin
        destination = move.destination
        piece = board[origin]
        if piece is None:
            raise ValueError(f"No piece on {origin.name}")
        color = piece.color
        is_pawn = piece.piece_type == PieceType.PAWN

        # The en passant key depends on the board, so drop it before moving.
        self._zobrist_key ^= zobrist_en_passant_component(board, self.double_stepped)

        captured = board[destination]
        capture_point = destination
        if is_pawn and captured is None:
            victim = en_passant_victim(board, origin, destination)
            if victim is not None:
                captured = board[victim]
                capture_point = victim

        if captured is not None:
            self._toggle_piece_hash(captured, capture_point)
            board[capture_point] = None

        self._toggle_piece_hash(piece, origin)
        board[origin] = None

        placed = piece
        if move.promotion is not None:
            placed = Piece(color, move.promotion)
        board[destination] = placed
        self._toggle_piece_hash(placed, destination)

        self._update_castling(piece, origin, captured, capture_point)
        if piece.piece_type == PieceType.KING:
            self._king_points[int(color)] = destination

        if is_pawn or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        next_double_stepped = None
        if is_pawn and abs(destination.row - origin.row) == 2:
            next_double_stepped = destination
        self._finish_ply(next_double_stepped)

    def _move_piece(self, origin: Point, destination: Point) -> None:
        piece = self.board[origin]
        assert piece is not None
        self._toggle_piece_hash(piece, origin)
        self.board[origin] = None
        self.board[destination] = piece
        self._toggle_piece_hash(piece, destination)

    def _finish_ply(self, next_double_stepped: Point | None) -> None:
        self.double_stepped = next_double_stepped
        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite
        self._zobrist_key ^= zobrist_side_to_move_key()
        self._zobrist_key ^= zobrist_en_passant_component(
            self.board, self.double_stepped
        )
        self._key_history.append(self._zobrist_key)

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(
        self,
        piece: Piece,
        origin: Point,
        captured: Piece | None,
        capture_point: Point,
    ) -> None:
        next_castling = self.castling
        color = piece.color
        setup = self.setup

        if piece.piece_type == PieceType.KING:
            next_castling &= ~CastlingRights.both(color)
        elif piece.piece_type == PieceType.ROOK:
            side = setup.rook_side_at(color, origin)
            if side is not None:
                next_castling &= ~CastlingRights.of(color, side)

        if captured is not None and captured.piece_type == PieceType.ROOK:
            side = setup.rook_side_at(captured.color, capture_point)
            if side is not None:
                next_castling &= ~CastlingRights.of(captured.color, side)

        self._set_castling(next_castling)

    def _set_castling(self, castling: CastlingRights) -> None:
        changed = self.castling ^ castling
        for right in SINGLE_CASTLING_RIGHTS:
            if changed & right:
                self._zobrist_key ^= zobrist_castling_key(right)
        self.castling = castling

    def _toggle_piece_hash(self, piece: Piece, point: Point) -> None:
        self._zobrist_key ^= zobrist_piece_key(piece, point)

    def _compute_zobrist_key(self) -> int:
        return zobrist_compute_key(
            self.board, self.side_to_move, self.castling, self.double_stepped
        )

    # ── Utilities ────────────────────────────────────────────────────────

    def verify_key(self) -> bool:
        """Whether the incremental key matches a from-scratch computation."""
        return self._zobrist_key == self._compute_zobrist_key()

    def check_invariants(self) -> None:
        """Fail fast if the cached king squares disagree with the board."""
        for color in Color:
            found = self.board.find_king(color)
            if found != self._king_points[int(color)]:
                raise ValueError(
                    f"Cached {color.name} king {self._king_points[int(color)].name} "
                    f"does not match board ({found.name})"
                )

    def copy(self) -> Position:
        """Independent copy, key history included."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            double_stepped=self.double_stepped,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            setup=self.setup,
        )
        pos._key_history = self._key_history.copy()
        return pos

    def snapshot(self) -> PositionSnapshot:
        return PositionSnapshot(
            board=self.board.snapshot(),
            side_to_move=self.side_to_move,
            king_points=(self._king_points[0], self._king_points[1]),
            castling=self.castling,
            double_stepped=self.double_stepped,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            zobrist_key=self._zobrist_key,
        )
