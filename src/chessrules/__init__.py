"""Rules engine for standard chess."""

from chessrules.core import (
    Board,
    Color,
    Move,
    MoveFlag,
    MoveResult,
    Piece,
    PieceType,
    Square,
    apply_move,
    create_initial_board,
    is_king_in_check,
    legal_moves,
    resolve_promotion,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Color",
    "Move",
    "MoveFlag",
    "MoveResult",
    "Piece",
    "PieceType",
    "Square",
    "apply_move",
    "create_initial_board",
    "is_king_in_check",
    "legal_moves",
    "resolve_promotion",
]
