"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import apply_move, create_initial_board, legal_moves, parse_square

    board = create_initial_board()
    e2 = parse_square("e2")
    for move in legal_moves(board, e2):
        print(move)
    result = apply_move(board, e2, parse_square("e4"))
"""

from chessrules.core.attacks import is_king_in_check, is_square_attacked
from chessrules.core.board import Board, create_initial_board
from chessrules.core.enums import Color, GameResult, MoveFlag, PieceType
from chessrules.core.move import Move, MoveResult
from chessrules.core.move_applicator import PROMOTION_TYPES, apply_move, resolve_promotion
from chessrules.core.move_generator import (
    MoveGenerator,
    generate_candidate_moves,
    legal_moves,
)
from chessrules.core.notation import (
    STARTING_FEN,
    FenPosition,
    board_from_fen,
    board_to_fen,
    parse_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.types import Square, parse_square, square_at, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_at",
    "square_name",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Rules",
    # Operations
    "PROMOTION_TYPES",
    "apply_move",
    "create_initial_board",
    "generate_candidate_moves",
    "is_king_in_check",
    "is_square_attacked",
    "legal_moves",
    "resolve_promotion",
    # Notation
    "STARTING_FEN",
    "FenPosition",
    "board_from_fen",
    "board_to_fen",
    "parse_fen",
]
