"""Move value objects: resolved moves and structured move requests."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import CastleSide, MoveKind, PieceType
from chessrules.core.types import Point

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single, fully resolved move."""

    origin: Point
    destination: Point
    kind: MoveKind = MoveKind.QUIET
    promotion: PieceType | None = None
    castle_side: CastleSide | None = None

    def __str__(self) -> str:
        base = f"{self.origin.name}{self.destination.name}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """Long-algebraic coordinates, e.g. ``e7e8q``."""
        return str(self)


@dataclass(frozen=True, slots=True)
class OriginFilter:
    """Origin disambiguation: exact row, exact column, or unconstrained."""

    row: int | None = None
    col: int | None = None

    def __post_init__(self) -> None:
        if self.row is not None and self.col is not None:
            raise ValueError("OriginFilter constrains a row or a column, not both")

    def matches(self, point: Point) -> bool:
        if self.row is not None and point.row != self.row:
            return False
        if self.col is not None and point.col != self.col:
            return False
        return True

    @classmethod
    def any(cls) -> OriginFilter:
        return cls()


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """Already-parsed move request from the input collaborator.

    ``destination`` is ignored for castle requests, which carry
    ``castle_side`` instead.
    """

    piece_type: PieceType
    destination: Point | None
    kind: MoveKind = MoveKind.QUIET
    origin: OriginFilter = OriginFilter()
    promotion: PieceType | None = None
    castle_side: CastleSide | None = None

    def __post_init__(self) -> None:
        if self.kind == MoveKind.CASTLE:
            if self.castle_side is None:
                raise ValueError("Castle request needs a castle_side")
        elif self.destination is None:
            raise ValueError(f"{self.kind.name} request needs a destination")
        if self.kind.is_promotion and self.promotion is None:
            raise ValueError("Promotion request needs a promotion piece type")

    @classmethod
    def castle(cls, side: CastleSide) -> MoveRequest:
        return cls(PieceType.KING, None, MoveKind.CASTLE, castle_side=side)
