"""Pseudo-legal and legal move generation for a single square."""

from __future__ import annotations

from chessrules.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_king_in_check,
    is_square_attacked,
)
from chessrules.core.board import Board
from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.move_applicator import apply_move
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square

_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

_CASTLE_SIDES: tuple[tuple[int, MoveFlag], ...] = (
    (1, MoveFlag.CASTLE_KINGSIDE),
    (-1, MoveFlag.CASTLE_QUEENSIDE),
)

_SLIDER_RAYS = {
    PieceType.BISHOP: BISHOP_RAYS,
    PieceType.ROOK: ROOK_RAYS,
    PieceType.QUEEN: QUEEN_RAYS,
}


class MoveGenerator:
    """Generates moves on a fixed :class:`Board`.

    The board is only read; legality checks run on boards produced by
    :func:`~chessrules.core.move_applicator.apply_move`.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, origin: Square) -> list[Move]:
        """Moves from *origin* that do not leave the mover's king attacked."""
        piece = self._board[origin]
        if piece is None:
            return []
        legal: list[Move] = []
        for move in self.candidate_moves(origin):
            result = apply_move(self._board, origin, move.destination)
            if not is_king_in_check(result.board, piece.color):
                legal.append(move)
        return legal

    def candidate_moves(self, origin: Square) -> list[Move]:
        """Pseudo-legal moves from *origin* (may leave own king in check)."""
        piece = self._board[origin]
        if piece is None:
            return []

        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(origin, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(origin, piece.color, KNIGHT_TARGETS[origin.index], moves)
        elif ptype == PieceType.KING:
            self._gen_steps(origin, piece.color, KING_TARGETS[origin.index], moves)
            self._gen_castling(origin, piece, moves)
        else:
            self._gen_sliding(
                piece.color, _SLIDER_RAYS[ptype][origin.index], moves
            )
        return moves

    def all_legal_moves(self, color: Color) -> dict[Square, list[Move]]:
        """Legal moves of every *color* piece that has at least one."""
        by_square: dict[Square, list[Move]] = {}
        for sq in self._board.pieces(color):
            moves = self.legal_moves(sq)
            if moves:
                by_square[sq] = moves
        return by_square

    def has_legal_move(self, color: Color) -> bool:
        return any(self.legal_moves(sq) for sq in self._board.pieces(color))

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, origin: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        forward = color.forward

        one_step = origin.offset(forward, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(Move(one_step))
            if origin.row == _PAWN_HOME_ROW[color]:
                two_step = origin.offset(2 * forward, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move(two_step, special=MoveFlag.DOUBLE_PAWN))

        for dc in (-1, 1):
            cap_sq = origin.offset(forward, dc)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    moves.append(Move(cap_sq, is_capture=True))
                continue

            beside = origin.offset(0, dc)
            assert beside is not None
            neighbour = board[beside]
            if (
                neighbour is not None
                and neighbour.piece_type == PieceType.PAWN
                and neighbour.color != color
                and neighbour.en_passant_eligible
            ):
                moves.append(Move(cap_sq, is_capture=True, special=MoveFlag.EN_PASSANT))

    def _gen_steps(
        self,
        origin: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Move(to_sq))
            elif target.color != color:
                moves.append(Move(to_sq, is_capture=True))

    def _gen_sliding(
        self,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(to_sq, is_capture=True))
                break

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Move]) -> None:
        if king.has_moved:
            return

        board = self._board
        opponent = king.color.opposite
        if is_square_attacked(board, king_sq, opponent):
            return

        for direction, flag in _CASTLE_SIDES:
            transit = king_sq.offset(0, direction)
            landing = king_sq.offset(0, 2 * direction)
            if transit is None or landing is None or not board.is_empty(landing):
                continue

            corner = Square(king_sq.row, BOARD_SIZE - 1 if direction > 0 else 0)
            rook = board[corner]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != king.color
                or rook.has_moved
            ):
                continue

            between = range(king_sq.col + direction, corner.col, direction)
            if any(not board.is_empty(Square(king_sq.row, c)) for c in between):
                continue

            if is_square_attacked(board, transit, opponent) or is_square_attacked(
                board, landing, opponent
            ):
                continue
            moves.append(Move(landing, special=flag))


def generate_candidate_moves(board: Board, origin: Square) -> list[Move]:
    """Pseudo-legal moves for the piece on *origin* (empty if none)."""
    return MoveGenerator(board).candidate_moves(origin)


def legal_moves(board: Board, origin: Square) -> list[Move]:
    """Fully legal moves for the piece on *origin* (empty if none)."""
    return MoveGenerator(board).legal_moves(origin)
