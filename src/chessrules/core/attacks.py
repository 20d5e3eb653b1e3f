"""Attack detection: is a square attacked, is a king in check."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.types import SQUARES, Square

# (d_row, d_col) pairs.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in SQUARES:
        moves: list[Square] = []
        for dr, dc in offsets:
            to_sq = sq.offset(dr, dc)
            if to_sq is not None:
                moves.append(to_sq)
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ray: list[Square] = []
            step = sq.offset(dr, dc)
            while step is not None:
                ray.append(step)
                step = step.offset(dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_sources() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """[color][target] -> squares a pawn of *color* would attack *target* from."""
    per_color: list[tuple[tuple[Square, ...], ...]] = []
    for color in Color:
        back = -color.forward
        sources: list[tuple[Square, ...]] = []
        for sq in SQUARES:
            left = sq.offset(back, -1)
            right = sq.offset(back, 1)
            sources.append(tuple(s for s in (left, right) if s is not None))
        per_color.append(tuple(sources))
    return tuple(per_color)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_PAWN_SOURCES = _build_pawn_sources()


# -- Public API -------------------------------------------------------------


def is_square_attacked(board: Board, square: Square, attacker: Color) -> bool:
    """Is *square* attacked by any piece of *attacker*?

    Whatever stands on *square* itself is irrelevant; a slider ray only
    counts when nothing stands between the slider and *square*.
    """
    idx = square.index

    for src in _PAWN_SOURCES[int(attacker)][idx]:
        piece = board[src]
        if (
            piece is not None
            and piece.color == attacker
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for src in KNIGHT_TARGETS[idx]:
        piece = board[src]
        if (
            piece is not None
            and piece.color == attacker
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for src in KING_TARGETS[idx]:
        piece = board[src]
        if (
            piece is not None
            and piece.color == attacker
            and piece.piece_type == PieceType.KING
        ):
            return True

    if _ray_hits(board, BISHOP_RAYS[idx], attacker, _DIAGONAL_SLIDERS):
        return True
    return _ray_hits(board, ROOK_RAYS[idx], attacker, _ORTHOGONAL_SLIDERS)


def is_king_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a king of *color* is never in check.
    """
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)


def _ray_hits(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    attacker: Color,
    sliders: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for sq in ray:
            piece = board[sq]
            if piece is None:
                continue
            if piece.color == attacker and piece.piece_type in sliders:
                return True
            break
    return False
