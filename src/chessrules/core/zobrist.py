"""Zobrist hashing keys for incremental position fingerprinting.

Table layout, drawn in this order from one deterministic stream:
    - piece keys [color][piece_type][row][col]   (2 x 6 x 8 x 8)
    - one black-to-move key
    - castle-right keys: white-a, white-h, black-a, black-h
    - en passant file keys: a..h

Changing ``ZOBRIST_SEED`` changes every key; bump ``ZOBRIST_SEED_VERSION``
with it so that externally stored hash-keyed data can be invalidated.
"""

from __future__ import annotations

from typing import Final

from chessrules.core.board import Board
from chessrules.core.enums import (
    SINGLE_CASTLING_RIGHTS,
    CastlingRights,
    Color,
    PieceType,
)
from chessrules.core.piece import Piece
from chessrules.core.types import SIZE, Point

ZOBRIST_SEED: Final = 37811
ZOBRIST_SEED_VERSION: Final = 1
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF

_PIECE_KEY_COUNT: Final = 2 * 6 * SIZE * SIZE


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit bit-mixer suitable for static key generation."""
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


def _nth_key(index: int) -> int:
    return _splitmix64(ZOBRIST_SEED + index)


_PIECE_KEYS: Final = tuple(
    tuple(
        tuple(
            tuple(
                _nth_key((color * 384) + (ptype * 64) + (row * SIZE) + col)
                for col in range(SIZE)
            )
            for row in range(SIZE)
        )
        for ptype in range(6)
    )
    for color in range(2)
)
_SIDE_TO_MOVE_KEY: Final = _nth_key(_PIECE_KEY_COUNT)
_CASTLING_KEYS: Final = tuple(_nth_key(_PIECE_KEY_COUNT + 1 + idx) for idx in range(4))
_EN_PASSANT_KEYS: Final = tuple(
    _nth_key(_PIECE_KEY_COUNT + 1 + 4 + idx) for idx in range(SIZE)
)
_CASTLING_INDEX: Final = {
    right: idx for idx, right in enumerate(SINGLE_CASTLING_RIGHTS)
}


def piece_key(piece: Piece, point: Point) -> int:
    """Hash key for a specific piece on a square."""
    return _PIECE_KEYS[int(piece.color)][int(piece.piece_type) - 1][point[0]][point[1]]


def side_to_move_key() -> int:
    """Hash toggle key for Black to move."""
    return _SIDE_TO_MOVE_KEY


def castling_key(right: CastlingRights) -> int:
    """Hash key for one single castle right."""
    try:
        return _CASTLING_KEYS[_CASTLING_INDEX[right]]
    except KeyError:
        raise ValueError(f"Not a single castle right: {right!r}") from None


def castling_keys(rights: CastlingRights) -> int:
    """XOR of the keys of every right held in *rights*."""
    key = 0
    for right in SINGLE_CASTLING_RIGHTS:
        if rights & right:
            key ^= castling_key(right)
    return key


def en_passant_key(col: int) -> int:
    """Hash key for an en passant capture on file *col*."""
    return _EN_PASSANT_KEYS[col]


def en_passant_file(board: Board, double_stepped: Point | None) -> int | None:
    """File of the just-doubled pawn if it can actually be taken en passant.

    Requires an adjacent enemy pawn on the same row and an empty square
    behind the doubled pawn.
    """
    if double_stepped is None:
        return None
    pawn = board[double_stepped]
    if pawn is None or pawn.piece_type != PieceType.PAWN:
        return None

    behind = double_stepped.offset(-pawn.color.forward, 0)
    if behind is None or not board.is_empty(behind):
        return None

    capturer = Piece(pawn.color.opposite, PieceType.PAWN)
    for dcol in (-1, 1):
        neighbour = double_stepped.offset(0, dcol)
        if neighbour is not None and board[neighbour] == capturer:
            return double_stepped.col
    return None


def en_passant_component(board: Board, double_stepped: Point | None) -> int:
    """The en passant contribution to the key (0 when not capturable)."""
    col = en_passant_file(board, double_stepped)
    return en_passant_key(col) if col is not None else 0


def compute_key(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights,
    double_stepped: Point | None,
) -> int:
    """Full Zobrist key computed from scratch."""
    key = castling_keys(castling)
    if side_to_move == Color.BLACK:
        key ^= side_to_move_key()
    key ^= en_passant_component(board, double_stepped)
    for point, piece in board.occupied():
        key ^= piece_key(piece, point)
    return key
