"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.attacks import is_king_in_check
from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult
from chessrules.core.move_generator import MoveGenerator


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Snapshot of a position from the point of view of the side to move."""

    side_to_move: Color
    in_check: bool
    has_any_move: bool
    result: GameResult = GameResult.IN_PROGRESS

    @property
    def is_checkmate(self) -> bool:
        return self.in_check and not self.has_any_move

    @property
    def is_stalemate(self) -> bool:
        return not self.in_check and not self.has_any_move

    @property
    def is_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    The board carries no side-to-move, so every query names the color
    it is asked about.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_king_in_check(board, color)

    @staticmethod
    def has_any_legal_move(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color)

    @staticmethod
    def evaluate(board: Board, side_to_move: Color) -> GameStatus:
        """Classify *board* with *side_to_move* about to play.

        Checkmate is a win for the side that just moved; stalemate is a draw.
        """
        in_check = Rules.is_in_check(board, side_to_move)
        has_any_move = Rules.has_any_legal_move(board, side_to_move)

        result = GameResult.IN_PROGRESS
        if not has_any_move:
            result = (
                GameResult.win_for(side_to_move.opposite) if in_check else GameResult.DRAW
            )
        return GameStatus(side_to_move, in_check, has_any_move, result)
