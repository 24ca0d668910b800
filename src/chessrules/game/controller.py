"""GameController — the entry point for an input or rendering collaborator.

Resolves already-parsed move requests against the legal move set, commits
exactly one move per ply, and reports the outcome. Emits events via simple
callbacks so that front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Color, MoveKind, PieceType
from chessrules.core.fen import position_from_fen
from chessrules.core.move import Move, MoveRequest
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.position import Position, PositionSnapshot
from chessrules.core.rules import GameOutcome, Rules
from chessrules.core.types import Point

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, PositionSnapshot], None]
GameOverCallback = Callable[[GameOutcome], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns one :class:`Position` and is its only mutator.

    Thread-safety: none. All methods must be called from a single thread,
    one ply at a time.
    """

    __slots__ = ("_position", "_outcome", "_moves", "events")

    _position: Position
    _outcome: GameOutcome
    _moves: list[Move]

    def __init__(self, fen: str | None = None) -> None:
        self.events = GameEvents()
        self.new_game(fen)

    def new_game(self, fen: str | None = None) -> None:
        """Start from the standard position, or from *fen* when given."""
        self._position = position_from_fen(fen) if fen else Position()
        self._moves = []
        self._outcome = Rules.game_result(self._position)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def outcome(self) -> GameOutcome:
        """Outcome as of the last committed ply."""
        return self._outcome

    @property
    def is_game_over(self) -> bool:
        return self._outcome.is_over

    @property
    def zobrist_key(self) -> int:
        return self._position.zobrist_key

    @property
    def key_history(self) -> tuple[int, ...]:
        return self._position.key_history

    @property
    def move_history(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def snapshot(self) -> PositionSnapshot:
        return self._position.snapshot()

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_destinations(self, piece_type: PieceType, origin: Point) -> list[Point]:
        return MoveGenerator(self._position).legal_destinations(piece_type, origin)

    def matching_moves(self, request: MoveRequest) -> list[Move]:
        """Legal moves satisfying *request*; 0 = illegal, >1 = ambiguous."""
        return MoveGenerator(self._position).matching_moves(request)

    def result(self) -> GameOutcome:
        """Re-evaluate the terminal state of the current position."""
        return Rules.game_result(self._position)

    # ── Commands ─────────────────────────────────────────────────────────

    def submit(self, request: MoveRequest) -> bool:
        """Resolve *request* to exactly one legal move and commit it."""
        if self.is_game_over:
            return False
        if request.kind == MoveKind.CASTLE:
            assert request.castle_side is not None
            move = self._position.castle_move(request.castle_side)
            return move is not None and self.commit(move)

        matches = self.matching_moves(request)
        if len(matches) != 1:
            _LOGGER.debug(
                "Request %s resolved to %d legal moves", request, len(matches)
            )
            return False
        return self.commit(matches[0])

    def commit(self, move: Move) -> bool:
        """Commit a fully resolved move; ``False`` if it is not legal."""
        if self.is_game_over:
            return False
        if not self._position.commit(move):
            return False

        self._moves.append(move)
        self._emit_move(move)

        self._outcome = Rules.game_result(self._position)
        if self._outcome.is_over:
            _LOGGER.info(
                "Game over after %d plies: %s", len(self._moves), self._outcome
            )
            self._emit_game_over(self._outcome)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move) -> None:
        snapshot = self._position.snapshot()
        for cb in self.events.on_move:
            cb(move, snapshot)

    def _emit_game_over(self, outcome: GameOutcome) -> None:
        for cb in self.events.on_game_over:
            cb(outcome)
