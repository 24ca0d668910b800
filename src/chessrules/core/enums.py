"""Core enumerations and flags for the rules core."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step for this side."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveKind(IntEnum):
    """Move classification as tagged by the requesting collaborator."""

    QUIET = 0
    CAPTURE = 1
    PROMOTION = 2
    CAPTURE_PROMOTION = 3
    CASTLE = 4

    @property
    def is_capture(self) -> bool:
        return self in (MoveKind.CAPTURE, MoveKind.CAPTURE_PROMOTION)

    @property
    def is_promotion(self) -> bool:
        return self in (MoveKind.PROMOTION, MoveKind.CAPTURE_PROMOTION)


class CastleSide(IntEnum):
    """Castling direction, named after the file of the participating rook."""

    A_FILE = 0
    H_FILE = 1


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_A = auto()
    WHITE_H = auto()
    BLACK_A = auto()
    BLACK_H = auto()

    WHITE_BOTH = WHITE_A | WHITE_H
    BLACK_BOTH = BLACK_A | BLACK_H
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def of(cls, color: Color, side: CastleSide) -> CastlingRights:
        """The single right for *color* castling toward *side*."""
        return _SINGLE_RIGHTS[int(color)][int(side)]

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


# Order matches the Zobrist castle-key layout.
SINGLE_CASTLING_RIGHTS: tuple[CastlingRights, ...] = (
    CastlingRights.WHITE_A,
    CastlingRights.WHITE_H,
    CastlingRights.BLACK_A,
    CastlingRights.BLACK_H,
)

_SINGLE_RIGHTS: tuple[tuple[CastlingRights, CastlingRights], ...] = (
    (CastlingRights.WHITE_A, CastlingRights.WHITE_H),
    (CastlingRights.BLACK_A, CastlingRights.BLACK_H),
)


class GameStatus(IntEnum):
    """Coarse state of a game."""

    ONGOING = 0
    WIN = 1
    DRAW = 2


class DrawReason(IntEnum):
    """Why a game ended drawn."""

    REPETITION = 1
    STALEMATE = 2
    MATERIAL = 3
    FIFTY_MOVE = 4
