"""Tests for attack detection and check queries."""

from chessrules.core.attacks import is_king_in_check, is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.notation import board_from_fen
from chessrules.core.piece import Piece
from chessrules.core.types import parse_square


def _board(**placement: str) -> Board:
    """Board from keyword placement, e.g. ``_board(e4="Q", e8="k")``."""
    return Board().replace(
        {parse_square(name): Piece.from_char(ch) for name, ch in placement.items()}
    )


class TestPawnAttacks:
    def test_white_pawn_attacks_toward_row_zero(self) -> None:
        board = _board(e4="P")
        assert is_square_attacked(board, parse_square("d5"), Color.WHITE)
        assert is_square_attacked(board, parse_square("f5"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("e5"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("d3"), Color.WHITE)

    def test_black_pawn_attacks_toward_row_seven(self) -> None:
        board = _board(e5="p")
        assert is_square_attacked(board, parse_square("d4"), Color.BLACK)
        assert is_square_attacked(board, parse_square("f4"), Color.BLACK)
        assert not is_square_attacked(board, parse_square("d6"), Color.BLACK)

    def test_edge_pawn_does_not_wrap(self) -> None:
        board = _board(a4="P")
        assert is_square_attacked(board, parse_square("b5"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("h6"), Color.WHITE)


class TestLeaperAttacks:
    def test_knight(self) -> None:
        board = _board(g1="N")
        for name in ("e2", "f3", "h3"):
            assert is_square_attacked(board, parse_square(name), Color.WHITE)
        assert not is_square_attacked(board, parse_square("g3"), Color.WHITE)

    def test_knight_jumps_over_pieces(self) -> None:
        board = Board.initial()
        assert is_square_attacked(board, parse_square("f3"), Color.WHITE)

    def test_king(self) -> None:
        board = _board(e4="k")
        assert is_square_attacked(board, parse_square("d5"), Color.BLACK)
        assert is_square_attacked(board, parse_square("e3"), Color.BLACK)
        assert not is_square_attacked(board, parse_square("e6"), Color.BLACK)


class TestSliderAttacks:
    def test_rook_ray_stops_at_blocker(self) -> None:
        board = _board(a1="R", a4="p")
        assert is_square_attacked(board, parse_square("a4"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("a5"), Color.WHITE)
        assert is_square_attacked(board, parse_square("h1"), Color.WHITE)

    def test_bishop_diagonals_only(self) -> None:
        board = _board(c1="B")
        assert is_square_attacked(board, parse_square("h6"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("c4"), Color.WHITE)

    def test_bishop_blocked_by_own_piece(self) -> None:
        board = _board(c1="B", e3="N")
        assert is_square_attacked(board, parse_square("e3"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("f4"), Color.WHITE)

    def test_queen_both_directions(self) -> None:
        board = _board(d4="q")
        assert is_square_attacked(board, parse_square("d8"), Color.BLACK)
        assert is_square_attacked(board, parse_square("a7"), Color.BLACK)
        assert not is_square_attacked(board, parse_square("e6"), Color.BLACK)

    def test_attacker_color_matters(self) -> None:
        board = _board(a1="R")
        assert not is_square_attacked(board, parse_square("a8"), Color.BLACK)


class TestKingInCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not is_king_in_check(board, Color.WHITE)
        assert not is_king_in_check(board, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        board = board_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        assert is_king_in_check(board, Color.WHITE)
        assert not is_king_in_check(board, Color.BLACK)

    def test_missing_king_is_not_in_check(self) -> None:
        board = _board(a1="R", a8="r")
        assert not is_king_in_check(board, Color.WHITE)

    def test_check_blocked(self) -> None:
        board = _board(e1="K", e8="r", e4="N")
        assert not is_king_in_check(board, Color.WHITE)
        unblocked = board.replace({parse_square("e4"): None})
        assert is_king_in_check(unblocked, Color.WHITE)

    def test_adjacent_king_gives_check(self) -> None:
        board = Board().replace(
            {
                parse_square("e4"): Piece(Color.WHITE, PieceType.KING),
                parse_square("e5"): Piece(Color.BLACK, PieceType.KING),
            }
        )
        assert is_king_in_check(board, Color.WHITE)
        assert is_king_in_check(board, Color.BLACK)
