"""Square value type and coordinate helpers.

Board layout (row-major, black at the top):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable (row, col) board coordinate."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    @property
    def index(self) -> int:
        """Flat index 0–63 (a8=0, h8=7, ..., h1=63)."""
        return self.row * BOARD_SIZE + self.col

    @property
    def name(self) -> str:
        """Algebraic name, e.g. Square(7, 4) → 'e1'."""
        return square_name(self)

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Shifted square, or ``None`` when it falls off the board."""
        row = self.row + d_row
        col = self.col + d_col
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return SQUARES[row * BOARD_SIZE + col]
        return None

    def __str__(self) -> str:
        return square_name(self)


SQUARES: tuple[Square, ...] = tuple(
    Square(i // BOARD_SIZE, i % BOARD_SIZE) for i in range(BOARD_SIZE * BOARD_SIZE)
)


def square_at(index: int) -> Square:
    """Square for a flat index 0–63."""
    return SQUARES[index]


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(0, 0) → 'a8'."""
    return _FILES[sq.col] + str(BOARD_SIZE - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return SQUARES[(BOARD_SIZE - int(name[1])) * BOARD_SIZE + _FILES.index(name[0])]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[56:64]
