# bitboard.py
# 7x7 grid <-> 49-bit integer, one bit per cell in row-major order

from __future__ import annotations

from typing import Iterable, Sequence

from board import BOARD_COLS, BOARD_ROWS

CELL_COUNT = BOARD_ROWS * BOARD_COLS
FULL_MASK = (1 << CELL_COUNT) - 1


def bit(row: int, col: int) -> int:
    return 1 << (row * BOARD_COLS + col)


def encode(grid: Sequence[Sequence[int]]) -> int:
    """Mask with bit row*7+col set for every occupied cell. Grid may be smaller than 7x7."""
    mask = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell:
                mask |= bit(r, c)
    return mask


def decode(mask: int) -> list[list[int]]:
    return [
        [(mask >> (r * BOARD_COLS + c)) & 1 for c in range(BOARD_COLS)]
        for r in range(BOARD_ROWS)
    ]


def mask_of_cells(cells: Iterable[tuple[int, int]]) -> int:
    mask = 0
    for r, c in cells:
        mask |= bit(r, c)
    return mask


def cells_of(mask: int) -> list[tuple[int, int]]:
    """Occupied (row, col) cells, in row-major order."""
    return [divmod(i, BOARD_COLS) for i in range(CELL_COUNT) if (mask >> i) & 1]


def popcount(mask: int) -> int:
    return bin(mask).count("1")
