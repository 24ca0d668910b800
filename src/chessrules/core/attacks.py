"""Attack detection and the precomputed geometry it shares with move generation."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_POINTS, Point

Offsets = tuple[tuple[int, int], ...]
Rays = tuple[tuple[Point, ...], ...]

KNIGHT_OFFSETS: Offsets = (
    (2, 1),
    (-2, 1),
    (2, -1),
    (-2, -1),
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
)

KING_OFFSETS: Offsets = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)

BISHOP_DIRS: Offsets = ((1, 1), (-1, 1), (1, -1), (-1, -1))
ROOK_DIRS: Offsets = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: Offsets = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(offsets: Offsets) -> dict[Point, tuple[Point, ...]]:
    targets: dict[Point, tuple[Point, ...]] = {}
    for point in ALL_POINTS:
        moves: list[Point] = []
        for drow, dcol in offsets:
            target = point.offset(drow, dcol)
            if target is not None:
                moves.append(target)
        targets[point] = tuple(moves)
    return targets


def _build_rays(directions: Offsets) -> dict[Point, Rays]:
    rays_per_point: dict[Point, Rays] = {}
    for point in ALL_POINTS:
        point_rays: list[tuple[Point, ...]] = []
        for drow, dcol in directions:
            ray: list[Point] = []
            target = point.offset(drow, dcol)
            while target is not None:
                ray.append(target)
                target = target.offset(drow, dcol)
            point_rays.append(tuple(ray))
        rays_per_point[point] = tuple(point_rays)
    return rays_per_point


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)
_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)


def _ray_hits(
    board: Board,
    rays: Rays,
    attacker: Color,
    piece_types: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for target in ray:
            piece = board[target]
            if piece is None:
                continue
            if piece.color == attacker and piece.piece_type in piece_types:
                return True
            break
    return False


def is_square_attacked(board: Board, point: Point, defender: Color) -> bool:
    """Is *point* attacked by the side opposing *defender*?"""
    attacker = defender.opposite

    if _ray_hits(board, ROOK_RAYS[point], attacker, _ORTHOGONAL_ATTACKERS):
        return True

    if _ray_hits(board, BISHOP_RAYS[point], attacker, _DIAGONAL_ATTACKERS):
        return True

    enemy_knight = Piece(attacker, PieceType.KNIGHT)
    for target in KNIGHT_TARGETS[point]:
        if board[target] == enemy_knight:
            return True

    # Enemy pawns attack from one row ahead in the defender's direction.
    enemy_pawn = Piece(attacker, PieceType.PAWN)
    for dcol in (-1, 1):
        target = point.offset(defender.forward, dcol)
        if target is not None and board[target] == enemy_pawn:
            return True

    enemy_king = Piece(attacker, PieceType.KING)
    for target in KING_TARGETS[point]:
        if board[target] == enemy_king:
            return True

    return False


def in_check(board: Board, color: Color, king_point: Point) -> bool:
    """Is *color*'s king, standing on *king_point*, attacked?"""
    return is_square_attacked(board, king_point, color)
