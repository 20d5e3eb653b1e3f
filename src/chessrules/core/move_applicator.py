"""Move application: board → new board, plus promotion resolution."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.move import MoveResult
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


def promotion_row(color: Color) -> int:
    """Far rank for *color*'s pawns."""
    return 0 if color == Color.WHITE else BOARD_SIZE - 1


def apply_move(board: Board, origin: Square, destination: Square) -> MoveResult:
    """Move the piece on *origin* to *destination* and return the new board.

    The input board is never modified. The move is assumed to come from
    :func:`~chessrules.core.move_generator.legal_moves`; an empty *origin*
    yields an unchanged board and no capture.
    """
    piece = board[origin]
    if piece is None:
        return MoveResult(board=board)

    cells = board.to_list()
    captured = board[destination]
    special = MoveFlag.NORMAL

    # En passant: diagonal pawn move onto an empty square, capturing the
    # eligible pawn beside the origin.
    if (
        piece.piece_type == PieceType.PAWN
        and destination.col != origin.col
        and captured is None
    ):
        beside = Square(origin.row, destination.col)
        victim = board[beside]
        if (
            victim is not None
            and victim.piece_type == PieceType.PAWN
            and victim.color != piece.color
            and victim.en_passant_eligible
        ):
            captured = victim
            cells[beside.index] = None
            special = MoveFlag.EN_PASSANT

    cells[origin.index] = None

    # Eligibility lasts for exactly one opposing move.
    for idx, cell in enumerate(cells):
        if cell is not None and cell.en_passant_eligible:
            cells[idx] = cell.without_en_passant()

    if piece.piece_type == PieceType.KING and abs(destination.col - origin.col) == 2:
        kingside = destination.col > origin.col
        rook_from = Square(origin.row, BOARD_SIZE - 1 if kingside else 0)
        rook_to = Square(origin.row, destination.col + (-1 if kingside else 1))
        rook = cells[rook_from.index]
        if rook is not None:
            cells[rook_from.index] = None
            cells[rook_to.index] = rook.moved()
            special = MoveFlag.CASTLE_KINGSIDE if kingside else MoveFlag.CASTLE_QUEENSIDE

    placed = piece.moved()
    if piece.piece_type == PieceType.PAWN and abs(destination.row - origin.row) == 2:
        placed = Piece(piece.color, PieceType.PAWN, has_moved=True, en_passant_eligible=True)
        if special == MoveFlag.NORMAL:
            special = MoveFlag.DOUBLE_PAWN
    cells[destination.index] = placed

    if (
        piece.piece_type == PieceType.PAWN
        and destination.row == promotion_row(piece.color)
    ):
        return MoveResult(
            board=Board(cells),
            promotion_pending=True,
            promotion_square=destination,
            promotion_color=piece.color,
            captured_piece=captured,
            special=special,
        )

    return MoveResult(board=Board(cells), captured_piece=captured, special=special)


def resolve_promotion(
    board: Board, square: Square, color: Color, piece_type: PieceType
) -> Board:
    """Replace the pawn on *square* with a *color* *piece_type*."""
    if piece_type not in PROMOTION_TYPES:
        raise ValueError(f"Cannot promote to {piece_type.name}")
    return board.replace({square: Piece(color, piece_type, has_moved=True)})
