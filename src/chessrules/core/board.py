"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.config import DEFAULT_SETUP, GameSetup
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_POINTS, SIZE, Point

BoardSnapshot = tuple[tuple[Piece | None, ...], ...]


class Board:
    """Mutable 8x8 grid of ``Piece | None`` cells, indexed by :class:`Point`."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * SIZE for _ in range(SIZE)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, point: Point) -> Piece | None:
        return self._grid[point[0]][point[1]]

    def __setitem__(self, point: Point, piece: Piece | None) -> None:
        self._grid[point[0]][point[1]] = piece

    def is_empty(self, point: Point) -> bool:
        return self._grid[point[0]][point[1]] is None

    def occupied(self) -> Iterator[tuple[Point, Piece]]:
        """Yield ``(point, piece)`` for every occupied square, a1 first."""
        grid = self._grid
        for point in ALL_POINTS:
            piece = grid[point.row][point.col]
            if piece is not None:
                yield point, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Point]:
        """Points occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [point for point, piece in self.occupied() if piece == target]

    def all_pieces(self, color: Color) -> list[Point]:
        """All points occupied by *color*."""
        return [point for point, piece in self.occupied() if piece.color == color]

    def find_king(self, color: Color) -> Point:
        """Scan for the single king of *color*; fail fast otherwise."""
        kings = self.pieces(color, PieceType.KING)
        if not kings:
            raise ValueError(f"No {color.name} king on board")
        if len(kings) > 1:
            raise ValueError(f"More than one {color.name} king on board")
        return kings[0]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * SIZE for _ in range(SIZE)]

    def snapshot(self) -> BoardSnapshot:
        """Read-only copy of the grid, row 0 first."""
        return tuple(tuple(row) for row in self._grid)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, setup: GameSetup = DEFAULT_SETUP) -> Board:
        """Standard starting position."""
        b = cls()
        for color in Color:
            home = setup.home_row(color)
            pawns = setup.pawn_row(color)
            for col, pt in enumerate(setup.back_rank):
                b[Point(home, col)] = Piece(color, pt)
                b[Point(pawns, col)] = Piece(color, PieceType.PAWN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(SIZE - 1, -1, -1):
            cells = []
            for col in range(SIZE):
                p = self._grid[row][col]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
