"""FEN parsing and serialization for flag-carrying boards.

FEN stores castling rights and the en-passant target globally, while a
:class:`Board` keeps them per piece. On import the flags are derived:

* a king on its home square is unmoved iff its side holds a castling right;
* a corner rook is unmoved iff the matching right is present;
* all other kings and rooks count as moved;
* a pawn is unmoved iff it stands on its home rank;
* the pawn in front of the en-passant target is marked eligible.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_KING_HOME_COL = 4

# castling letter -> (color, rook corner column)
_CASTLING_CORNERS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


@dataclass(frozen=True, slots=True)
class FenPosition:
    """Board plus the side to move, as read from a FEN string."""

    board: Board
    side_to_move: Color


def parse_fen(fen: str) -> FenPosition:
    """Parse a FEN string into a board with derived per-piece flags."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    cells: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                cells[row * BOARD_SIZE + col] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    unmoved_rooks: set[tuple[Color, int]] = set()
    if castling_part != "-":
        for ch in castling_part:
            corner = _CASTLING_CORNERS.get(ch)
            if corner is None or corner in unmoved_rooks:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            unmoved_rooks.add(corner)
    castling_colors = {color for color, _ in unmoved_rooks}

    for idx, piece in enumerate(cells):
        if piece is None:
            continue
        row, col = divmod(idx, BOARD_SIZE)
        if piece.piece_type == PieceType.PAWN:
            unmoved = row == _PAWN_HOME_ROW[piece.color]
        elif piece.piece_type == PieceType.KING:
            unmoved = (
                row == _HOME_ROW[piece.color]
                and col == _KING_HOME_COL
                and piece.color in castling_colors
            )
        elif piece.piece_type == PieceType.ROOK:
            unmoved = (
                row == _HOME_ROW[piece.color] and (piece.color, col) in unmoved_rooks
            )
        else:
            continue
        if not unmoved:
            cells[idx] = replace(piece, has_moved=True)

    # 4. En passant
    if ep_part != "-":
        target = parse_square(ep_part)
        expected_row = 2 if side == Color.WHITE else 5
        if target.row != expected_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        mover = side.opposite
        pawn_sq = Square(target.row - side.forward, target.col)
        pawn = cells[pawn_sq.index]
        if pawn is None or pawn.piece_type != PieceType.PAWN or pawn.color != mover:
            raise ValueError(f"FEN en-passant square has no pawn in front: {ep_part!r}")
        cells[pawn_sq.index] = replace(pawn, has_moved=True, en_passant_eligible=True)

    # 5–6. Clocks are validated but not kept.
    for field_text in parts[4:]:
        if not field_text.isdigit():
            raise ValueError(f"Invalid FEN clock field: {field_text!r}")

    return FenPosition(Board(cells), side)


def board_from_fen(fen: str) -> Board:
    return parse_fen(fen).board


def board_to_fen(board: Board, side_to_move: Color = Color.WHITE) -> str:
    """Serialise *board* to FEN; clocks are written as ``0 1``."""
    # 1. Board
    rows: list[str] = []
    for cells in board.rows():
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = ""
    for letter, (color, rook_col) in _CASTLING_CORNERS.items():
        home = _HOME_ROW[color]
        king = board[Square(home, _KING_HOME_COL)]
        rook = board[Square(home, rook_col)]
        if king == Piece(color, PieceType.KING) and rook == Piece(color, PieceType.ROOK):
            castling_str += letter
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = "-"
    for sq, piece in board.occupied():
        if piece.piece_type == PieceType.PAWN and piece.en_passant_eligible:
            ep_str = square_name(Square(sq.row - piece.color.forward, sq.col))
            break

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 1"
