"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Point, make_point, parse_point

E1 = parse_point("e1")
E2 = parse_point("e2")
E4 = parse_point("e4")
E8 = parse_point("e8")


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert board[Point(0, col)] == Piece(Color.WHITE, pt), f"col {col}"

    def test_black_back_rank_mirrors_white(self) -> None:
        board = Board.initial()
        for col in range(8):
            white = board[Point(0, col)]
            black = board[Point(7, col)]
            assert white is not None and black is not None
            assert black == Piece(Color.BLACK, white.piece_type)

    def test_pawns(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(p.row == 1 for p in white)
        assert len(black) == 8 and all(p.row == 6 for p in black)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[Point(row, col)] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No WHITE king"):
            board.find_king(Color.WHITE)

    def test_find_king_duplicate_raises(self) -> None:
        board = Board()
        board[E1] = Piece(Color.BLACK, PieceType.KING)
        board[E8] = Piece(Color.BLACK, PieceType.KING)
        with pytest.raises(ValueError, match="More than one BLACK king"):
            board.find_king(Color.BLACK)

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.occupied()) == []

    def test_snapshot_is_detached(self) -> None:
        board = Board.initial()
        snap = board.snapshot()
        board[E1] = None
        assert snap[0][4] == Piece(Color.WHITE, PieceType.KING)
        assert isinstance(snap, tuple) and isinstance(snap[0], tuple)

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text


class TestPoint:
    def test_parse_and_name(self) -> None:
        assert parse_point("a1") == Point(0, 0)
        assert parse_point("h8") == Point(7, 7)
        assert Point(3, 4).name == "e4"

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_point("i9")

    def test_offset_off_board(self) -> None:
        assert Point(0, 0).offset(-1, 0) is None
        assert Point(7, 7).offset(0, 1) is None
        assert Point(0, 0).offset(1, 2) == Point(1, 2)

    def test_make_point(self) -> None:
        assert make_point(3, 4) == Point(3, 4)
        with pytest.raises(ValueError, match="out of range"):
            make_point(8, 0)
        with pytest.raises(ValueError):
            make_point(0, -1)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbol_shared_by_both_sides(self) -> None:
        white = Piece(Color.WHITE, PieceType.KING)
        black = Piece(Color.BLACK, PieceType.KING)
        assert white.symbol == black.symbol == "♚"

    def test_name(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).name == "knight"
