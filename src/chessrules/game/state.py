"""Game state machine: turn order, pending promotion and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, MoveFlag, PieceType
from chessrules.core.move import Move, MoveResult
from chessrules.core.move_applicator import apply_move, resolve_promotion
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import parse_fen
from chessrules.core.piece import Piece
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    origin: Square
    destination: Square
    piece: Piece
    captured: Piece | None = None
    special: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None
    gave_check: bool = False


@dataclass
class _PendingMove:
    origin: Square
    piece: Piece
    result: MoveResult


@dataclass
class GameState:
    """Drives a game one move at a time on top of the rules engine.

    A pure data/logic class with no threading, UI or clocks.
    Requests that are not legal in the current phase are ignored rather
    than raised, so a UI can forward every click unfiltered.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    status: GameStatus | None = field(default=None, init=False)
    history: list[MoveRecord] = field(default_factory=list, init=False)
    _pending: _PendingMove | None = field(default=None, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, by default from the standard setup."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.history.clear()
        self._pending = None
        self._update_status()
        _LOGGER.debug("New game, %s to move", self.side_to_move)

    def setup_fen(self, fen: str) -> None:
        parsed = parse_fen(fen)
        self.setup(parsed.board, parsed.side_to_move)

    # ── Move application ─────────────────────────────────────────────────

    def legal_moves(self, origin: Square) -> list[Move]:
        """Legal moves from *origin* for the side to move, if it may move now."""
        if self.phase != GamePhase.AWAITING_MOVE:
            return []
        piece = self.board[origin]
        if piece is None or piece.color != self.side_to_move:
            return []
        return MoveGenerator(self.board).legal_moves(origin)

    def submit_move(self, origin: Square, destination: Square) -> MoveResult | None:
        """Play *origin* → *destination* if legal; return ``None`` otherwise."""
        if not any(m.destination == destination for m in self.legal_moves(origin)):
            _LOGGER.debug("Ignoring move request %s -> %s", origin, destination)
            return None

        piece = self.board[origin]
        assert piece is not None
        result = apply_move(self.board, origin, destination)
        self.board = result.board

        if result.promotion_pending:
            self._pending = _PendingMove(origin, piece, result)
            self.phase = GamePhase.AWAITING_PROMOTION
            _LOGGER.debug("Promotion pending on %s", destination)
            return result

        self._finish_turn(origin, destination, piece, result, None)
        return result

    def promote(self, piece_type: PieceType) -> bool:
        """Resolve a pending promotion with *piece_type*.

        Returns ``False`` when no promotion is pending.
        """
        pending = self._pending
        if self.phase != GamePhase.AWAITING_PROMOTION or pending is None:
            return False

        square = pending.result.promotion_square
        color = pending.result.promotion_color
        assert square is not None and color is not None
        self.board = resolve_promotion(self.board, square, color, piece_type)
        self._pending = None
        _LOGGER.debug("Promoted on %s to %s", square, piece_type.name)

        self._finish_turn(pending.origin, square, pending.piece, pending.result, piece_type)
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def in_check(self) -> bool:
        """Whether the side to move is in check; ``False`` mid-promotion."""
        if self.phase == GamePhase.AWAITING_PROMOTION:
            return False
        return self.status is not None and self.status.in_check

    @property
    def pending_promotion(self) -> Square | None:
        if self._pending is None:
            return None
        return self._pending.result.promotion_square

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish_turn(
        self,
        origin: Square,
        destination: Square,
        piece: Piece,
        result: MoveResult,
        promotion: PieceType | None,
    ) -> None:
        self.side_to_move = self.side_to_move.opposite
        self._update_status()
        assert self.status is not None
        self.history.append(
            MoveRecord(
                origin=origin,
                destination=destination,
                piece=piece,
                captured=result.captured_piece,
                special=result.special,
                promotion=promotion,
                gave_check=self.status.in_check,
            )
        )
        _LOGGER.debug("Played %s %s -> %s", piece, origin, destination)

    def _update_status(self) -> None:
        status = Rules.evaluate(self.board, self.side_to_move)
        self.status = status
        self.result = status.result
        if status.is_over:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info(
                "Game over: %s (%s)",
                status.result.name,
                "checkmate" if status.is_checkmate else "stalemate",
            )
        else:
            self.phase = GamePhase.AWAITING_MOVE
