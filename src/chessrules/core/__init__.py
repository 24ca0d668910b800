"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveGenerator, Position, Rules

    pos = Position()
    gen = MoveGenerator(pos)
    for move in gen.legal_moves():
        print(move)
    print(Rules.game_result(pos))
"""

from chessrules.core.attacks import in_check, is_square_attacked
from chessrules.core.board import Board, BoardSnapshot
from chessrules.core.castling import can_castle
from chessrules.core.config import DEFAULT_SETUP, GameSetup
from chessrules.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    DrawReason,
    GameStatus,
    MoveKind,
    PieceType,
)
from chessrules.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.legality import filter_legal, is_legal
from chessrules.core.move import Move, MoveRequest, OriginFilter
from chessrules.core.move_generator import MoveGenerator, pseudo_legal_destinations
from chessrules.core.piece import Piece
from chessrules.core.position import Position, PositionSnapshot
from chessrules.core.rules import GameOutcome, Rules
from chessrules.core.types import Point, make_point, parse_point
from chessrules.core.zobrist import ZOBRIST_SEED, ZOBRIST_SEED_VERSION, compute_key

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "Color",
    "DrawReason",
    "GameStatus",
    "MoveKind",
    "PieceType",
    # Types / helpers
    "Point",
    "make_point",
    "parse_point",
    # Configuration
    "DEFAULT_SETUP",
    "GameSetup",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "GameOutcome",
    "Move",
    "MoveGenerator",
    "MoveRequest",
    "OriginFilter",
    "Piece",
    "Position",
    "PositionSnapshot",
    "Rules",
    # Rule primitives
    "can_castle",
    "filter_legal",
    "in_check",
    "is_legal",
    "is_square_attacked",
    "pseudo_legal_destinations",
    # Hashing
    "ZOBRIST_SEED",
    "ZOBRIST_SEED_VERSION",
    "compute_key",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
