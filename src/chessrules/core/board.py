"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, SQUARES, Square

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-square board value.

    A board never changes after construction. Every operation that looks
    like a mutation (:meth:`replace`) returns a new board.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        if squares is None:
            self._squares: tuple[Piece | None, ...] = (None,) * _SQUARE_COUNT
            return
        cells = tuple(squares)
        if len(cells) != _SQUARE_COUNT:
            raise ValueError(f"Board needs {_SQUARE_COUNT} squares, got {len(cells)}")
        self._squares = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a8 first."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield SQUARES[idx], piece

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Square]:
        """Squares occupied by *color*, optionally restricted to *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if there is none."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def rows(self) -> list[list[Piece | None]]:
        """Nested 8x8 snapshot, ``rows()[row][col]``."""
        return [
            list(self._squares[r * BOARD_SIZE : (r + 1) * BOARD_SIZE])
            for r in range(BOARD_SIZE)
        ]

    def to_list(self) -> list[Piece | None]:
        """Flat scratch copy of the 64 cells, safe to modify."""
        return list(self._squares)

    # -- Copy-on-write ------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with *changes* applied on top of this one."""
        cells = list(self._squares)
        for sq, piece in changes.items():
            cells[sq.index] = piece
        return Board(cells)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0–1, white on rows 6–7)."""
        cells: list[Piece | None] = [None] * _SQUARE_COUNT
        for col, pt in enumerate(_BACK_RANK):
            cells[col] = Piece(Color.BLACK, pt)
            cells[BOARD_SIZE + col] = Piece(Color.BLACK, PieceType.PAWN)
            cells[6 * BOARD_SIZE + col] = Piece(Color.WHITE, PieceType.PAWN)
            cells[7 * BOARD_SIZE + col] = Piece(Color.WHITE, pt)
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for r in range(BOARD_SIZE):
            row = []
            for c in range(BOARD_SIZE):
                p = self._squares[r * BOARD_SIZE + c]
                row.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - r} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def create_initial_board() -> Board:
    """Standard chess starting position."""
    return Board.initial()
