"""Tests for Board, Piece and Square."""

import pytest

from chessrules.core.board import Board, create_initial_board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    Square,
    parse_square,
    square_at,
    square_name,
)


class TestSquare:
    def test_names_follow_algebraic_orientation(self) -> None:
        assert square_name(Square(0, 0)) == "a8"
        assert square_name(Square(7, 0)) == "a1"
        assert square_name(Square(7, 7)) == "h1"
        assert Square(4, 4).name == "e4"

    def test_parse_square(self) -> None:
        assert parse_square("e4") == Square(4, 4)
        assert parse_square("a8") == Square(0, 0)
        assert parse_square("h1") == H1

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "a0", "e44"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Square(8, 0)

    def test_offset(self) -> None:
        assert E2.offset(-2, 0) == E4
        assert A1.offset(1, 0) is None
        assert H8.offset(0, 1) is None

    def test_square_at_matches_index(self) -> None:
        assert square_at(0) == A8
        assert square_at(63) == H1
        assert square_at(E4.index) == E4


class TestPiece:
    def test_defaults_unmoved(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        assert not piece.has_moved
        assert not piece.en_passant_eligible

    def test_moved_copy(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN, en_passant_eligible=True)
        moved = pawn.moved()
        assert moved.has_moved
        assert not moved.en_passant_eligible
        assert not pawn.has_moved

    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = create_initial_board()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = create_initial_board()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.row == 6 for sq in white)
        assert len(black) == 8 and all(sq.row == 1 for sq in black)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[Square(row, col)] is None

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        assert all(not piece.has_moved for _, piece in board.occupied())


class TestBoardOperations:
    def test_replace_returns_new_board(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        updated = board.replace({E4: piece})
        assert updated[E4] == piece
        assert board.is_empty(E4)

    def test_replace_with_none_clears(self) -> None:
        board = Board.initial()
        updated = board.replace({E1: None})
        assert board != updated
        assert updated[E1] is None
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="64 squares"):
            Board([None] * 10)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_is_none(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16

    def test_rows_snapshot(self) -> None:
        rows = Board.initial().rows()
        assert len(rows) == 8 and all(len(r) == 8 for r in rows)
        assert rows[7][4] == Piece(Color.WHITE, PieceType.KING)
        rows[7][4] = None  # snapshot is detached from the board

    def test_equal_boards_hash_equal(self) -> None:
        assert hash(Board.initial()) == hash(Board.initial())

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text
