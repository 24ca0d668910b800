"""Tests for castling: path validation and castle-right bookkeeping."""

from chessrules.core.castling import can_castle
from chessrules.core.enums import CastleSide, CastlingRights, Color, MoveKind, PieceType
from chessrules.core.fen import position_from_fen
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import parse_point

BOTH_SIDES = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


def _commit(
    pos: Position, origin: str, destination: str, kind: MoveKind = MoveKind.QUIET
) -> None:
    assert pos.commit(Move(parse_point(origin), parse_point(destination), kind))


class TestCastleExecution:
    def test_white_h_file(self) -> None:
        pos = position_from_fen(BOTH_SIDES)
        assert pos.castle(CastleSide.H_FILE)
        assert pos.board[parse_point("g1")] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[parse_point("f1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board[parse_point("h1")] is None
        assert pos.board[parse_point("e1")] is None
        assert pos.castling == CastlingRights.BLACK_BOTH
        assert pos.side_to_move == Color.BLACK
        assert pos.verify_key()

    def test_white_a_file(self) -> None:
        pos = position_from_fen(BOTH_SIDES)
        assert pos.castle(CastleSide.A_FILE)
        assert pos.board[parse_point("c1")] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[parse_point("d1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board[parse_point("a1")] is None

    def test_black_h_file(self) -> None:
        pos = position_from_fen(BOTH_SIDES.replace(" w ", " b "))
        assert pos.castle(CastleSide.H_FILE)
        assert pos.board[parse_point("g8")] == Piece(Color.BLACK, PieceType.KING)
        assert pos.board[parse_point("f8")] == Piece(Color.BLACK, PieceType.ROOK)
        assert pos.castling == CastlingRights.WHITE_BOTH

    def test_commit_castle_move(self) -> None:
        pos = position_from_fen(BOTH_SIDES)
        move = pos.castle_move(CastleSide.H_FILE)
        assert move == Move(
            parse_point("e1"),
            parse_point("g1"),
            MoveKind.CASTLE,
            castle_side=CastleSide.H_FILE,
        )
        assert pos.commit(move)

    def test_castle_clears_double_step(self) -> None:
        pos = position_from_fen("4k2r/8/8/8/8/8/3P4/4K2R w Kk - 0 1")
        _commit(pos, "d2", "d4")
        assert pos.double_stepped == parse_point("d4")
        assert pos.castle(CastleSide.H_FILE)
        assert pos.double_stepped is None


class TestRightsRevocation:
    def test_king_move_revokes_both(self) -> None:
        pos = position_from_fen(BOTH_SIDES)
        _commit(pos, "e1", "f1")
        assert pos.castling == CastlingRights.BLACK_BOTH
        _commit(pos, "a8", "b8")
        _commit(pos, "f1", "e1")
        assert not pos.has_castling_right(Color.WHITE, CastleSide.H_FILE)
        assert not pos.has_castling_right(Color.WHITE, CastleSide.A_FILE)
        _commit(pos, "b8", "a8")
        assert pos.side_to_move == Color.WHITE
        assert pos.castle_move(CastleSide.H_FILE) is None
        assert pos.castle_move(CastleSide.A_FILE) is None

    def test_rook_move_revokes_own_side(self) -> None:
        pos = position_from_fen(BOTH_SIDES)
        _commit(pos, "h1", "h2")
        assert not pos.has_castling_right(Color.WHITE, CastleSide.H_FILE)
        assert pos.has_castling_right(Color.WHITE, CastleSide.A_FILE)

    def test_rook_returning_home_does_not_restore(self) -> None:
        pos = position_from_fen(BOTH_SIDES)
        _commit(pos, "a1", "b1")
        _commit(pos, "e8", "d8")
        _commit(pos, "b1", "a1")
        assert not pos.has_castling_right(Color.WHITE, CastleSide.A_FILE)
        assert not pos.castle(CastleSide.A_FILE)

    def test_rook_captured_on_home_square_revokes(self) -> None:
        pos = position_from_fen(BOTH_SIDES)
        _commit(pos, "a1", "a8", MoveKind.CAPTURE)
        assert not pos.has_castling_right(Color.BLACK, CastleSide.A_FILE)
        assert not pos.has_castling_right(Color.WHITE, CastleSide.A_FILE)
        assert pos.has_castling_right(Color.BLACK, CastleSide.H_FILE)
        assert pos.verify_key()

    def test_no_right_no_castle(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Qkq - 0 1")
        assert pos.castle_move(CastleSide.H_FILE) is None
        assert not pos.castle(CastleSide.H_FILE)

    def test_missing_rook_refuses_even_with_right(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K3 w KQkq - 0 1")
        assert pos.castle_move(CastleSide.H_FILE) is None


class TestPathValidation:
    def test_obstructed_path_blocks_without_revoking(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/RN2K2R w KQkq - 0 1")
        assert not pos.castle(CastleSide.A_FILE)
        assert pos.has_castling_right(Color.WHITE, CastleSide.A_FILE)
        assert pos.side_to_move == Color.WHITE

    def test_b_file_obstruction_blocks_a_side(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        board = pos.board
        board[parse_point("b1")] = Piece(Color.WHITE, PieceType.KNIGHT)
        assert not can_castle(Color.WHITE, CastleSide.A_FILE, board, parse_point("e1"))

    def test_attacked_path_blocks_without_revoking(self) -> None:
        # Black rook on f8 covers f1
        pos = position_from_fen("4kr2/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert not pos.castle(CastleSide.H_FILE)
        assert pos.has_castling_right(Color.WHITE, CastleSide.H_FILE)
        assert pos.castle(CastleSide.A_FILE)

    def test_attacked_destination_blocks(self) -> None:
        pos = position_from_fen("4k1r1/8/8/8/8/8/8/4K2R w K - 0 1")
        assert not pos.castle(CastleSide.H_FILE)

    def test_cannot_castle_out_of_check(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert not pos.castle(CastleSide.H_FILE)
        assert not pos.castle(CastleSide.A_FILE)

    def test_attacked_b_file_does_not_block(self) -> None:
        # Only the king's path matters; the rook may pass an attacked square
        pos = position_from_fen("1r2k3/8/8/8/8/8/8/R3K3 w Q - 0 1")
        assert pos.castle(CastleSide.A_FILE)
