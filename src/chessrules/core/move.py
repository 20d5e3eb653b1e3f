"""Move value objects: candidate moves and applied-move results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, MoveFlag
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Move:
    """A candidate move, relative to the square it was generated from."""

    destination: Square
    is_capture: bool = False
    special: MoveFlag = MoveFlag.NORMAL

    @property
    def is_castle(self) -> bool:
        return self.special in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    def __str__(self) -> str:
        return self.destination.name


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of applying a move to a board.

    When ``promotion_pending`` is set the pawn still stands on
    ``promotion_square``; the caller must resolve it before the turn ends.
    """

    board: Board
    promotion_pending: bool = False
    promotion_square: Square | None = None
    promotion_color: Color | None = None
    captured_piece: Piece | None = None
    special: MoveFlag = MoveFlag.NORMAL
