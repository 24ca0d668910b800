"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.attacks import in_check
from chessrules.core.enums import Color, DrawReason, GameStatus, PieceType
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Ongoing, Win(side) or Draw(reason)."""

    status: GameStatus
    winner: Color | None = None
    reason: DrawReason | None = None

    @classmethod
    def ongoing(cls) -> GameOutcome:
        return cls(GameStatus.ONGOING)

    @classmethod
    def win(cls, winner: Color) -> GameOutcome:
        return cls(GameStatus.WIN, winner=winner)

    @classmethod
    def draw(cls, reason: DrawReason) -> GameOutcome:
        return cls(GameStatus.DRAW, reason=reason)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.ONGOING

    def __str__(self) -> str:
        if self.status == GameStatus.WIN:
            return f"win({self.winner})"
        if self.status == GameStatus.DRAW:
            assert self.reason is not None
            return f"draw({self.reason.name.lower()})"
        return "ongoing"


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        color = position.side_to_move
        return in_check(position.board, color, position.king_point(color))

    @staticmethod
    def legal_move_count(position: Position) -> int:
        """Legal non-castle moves available to the side to move."""
        return MoveGenerator(position).legal_move_count()

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return Rules.legal_move_count(position) == 0

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return Rules.legal_move_count(position) == 0

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= position.setup.fifty_move_plies

    @staticmethod
    def is_threefold_repetition(position: Position) -> bool:
        return position.repetition_count() >= position.setup.repetition_limit

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        others = [
            (point, piece)
            for point, piece in position.board.occupied()
            if piece.piece_type != PieceType.KING
        ]

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1:
            return others[0][1].piece_type in _MINOR_PIECES

        # K+B vs K+B with same-colour bishops
        if len(others) == 2:
            (p1, a), (p2, b) = others
            if (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
            ):
                return (p1.row + p1.col) % 2 == (p2.row + p2.col) % 2

        return False

    @staticmethod
    def game_result(position: Position) -> GameOutcome:
        """Determine the current outcome, checked in priority order."""
        if Rules.is_fifty_move_rule(position):
            outcome = GameOutcome.draw(DrawReason.FIFTY_MOVE)
        elif Rules.legal_move_count(position) == 0:
            if Rules.is_in_check(position):
                outcome = GameOutcome.win(position.side_to_move.opposite)
            else:
                outcome = GameOutcome.draw(DrawReason.STALEMATE)
        elif Rules.is_threefold_repetition(position):
            outcome = GameOutcome.draw(DrawReason.REPETITION)
        elif Rules.is_insufficient_material(position):
            outcome = GameOutcome.draw(DrawReason.MATERIAL)
        else:
            return GameOutcome.ongoing()

        _LOGGER.debug("Game over: %s", outcome)
        return outcome
