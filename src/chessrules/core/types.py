"""Point type and coordinate helpers.

Board layout (row, col), seen from White:
    row 0 = rank 1 (White's home rank), row 7 = rank 8
    col 0 = a-file, col 7 = h-file
"""

from __future__ import annotations

from typing import NamedTuple

SIZE = 8


class Point(NamedTuple):
    """A board coordinate, each component in ``[0, 8)``."""

    row: int
    col: int

    def offset(self, drow: int, dcol: int) -> Point | None:
        """Point shifted by (*drow*, *dcol*), or ``None`` off the board."""
        row = self.row + drow
        col = self.col + dcol
        if 0 <= row < SIZE and 0 <= col < SIZE:
            return Point(row, col)
        return None

    @property
    def name(self) -> str:
        """Human-readable name, e.g. Point(0, 4) → 'e1'."""
        return chr(ord("a") + self.col) + str(self.row + 1)

    def __str__(self) -> str:
        return self.name


def in_bounds(row: int, col: int) -> bool:
    """Check whether (*row*, *col*) lies on the board."""
    return 0 <= row < SIZE and 0 <= col < SIZE


def make_point(row: int, col: int) -> Point:
    """Create a validated point."""
    if not in_bounds(row, col):
        raise ValueError(f"Point out of range: ({row}, {col})")
    return Point(row, col)


def parse_point(name: str) -> Point:
    """Parse square name, e.g. 'e4' → Point(3, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Point(int(name[1]) - 1, ord(name[0]) - ord("a"))


ALL_POINTS: tuple[Point, ...] = tuple(
    Point(row, col) for row in range(SIZE) for col in range(SIZE)
)
