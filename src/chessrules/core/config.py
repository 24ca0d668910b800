"""Fixed game-setup data: initial placement, castling geometry, rule limits."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import CastleSide, Color, PieceType
from chessrules.core.types import Point


@dataclass(frozen=True, slots=True)
class GameSetup:
    """Immutable description of the standard game layout.

    Columns indexed by :class:`CastleSide` (``A_FILE`` first, ``H_FILE``
    second) describe the participating rook and the castled squares.
    """

    back_rank: tuple[PieceType, ...] = (
        PieceType.ROOK,
        PieceType.KNIGHT,
        PieceType.BISHOP,
        PieceType.QUEEN,
        PieceType.KING,
        PieceType.BISHOP,
        PieceType.KNIGHT,
        PieceType.ROOK,
    )
    home_rows: tuple[int, int] = (0, 7)
    pawn_rows: tuple[int, int] = (1, 6)
    king_col: int = 4
    rook_cols: tuple[int, int] = (0, 7)
    castled_king_cols: tuple[int, int] = (2, 6)
    castled_rook_cols: tuple[int, int] = (3, 5)
    promotion_types: tuple[PieceType, ...] = (
        PieceType.KNIGHT,
        PieceType.BISHOP,
        PieceType.ROOK,
        PieceType.QUEEN,
    )
    fifty_move_plies: int = 100
    repetition_limit: int = 3

    # -- Derived squares ----------------------------------------------------

    def home_row(self, color: Color) -> int:
        return self.home_rows[int(color)]

    def pawn_row(self, color: Color) -> int:
        """Row from which *color*'s pawns may double-step."""
        return self.pawn_rows[int(color)]

    def promotion_row(self, color: Color) -> int:
        """Row on which *color*'s pawns promote."""
        return self.home_rows[int(color.opposite)]

    def king_home(self, color: Color) -> Point:
        return Point(self.home_row(color), self.king_col)

    def rook_home(self, color: Color, side: CastleSide) -> Point:
        return Point(self.home_row(color), self.rook_cols[int(side)])

    def castled_king(self, color: Color, side: CastleSide) -> Point:
        return Point(self.home_row(color), self.castled_king_cols[int(side)])

    def castled_rook(self, color: Color, side: CastleSide) -> Point:
        return Point(self.home_row(color), self.castled_rook_cols[int(side)])

    def rook_side_at(self, color: Color, point: Point) -> CastleSide | None:
        """Castle side whose home rook square for *color* is *point*, if any."""
        if point.row != self.home_row(color):
            return None
        for side in CastleSide:
            if self.rook_cols[int(side)] == point.col:
                return side
        return None


DEFAULT_SETUP = GameSetup()
