# placements.py
# Generate all valid piece placements on the board

from __future__ import annotations

import logging
from typing import Sequence

from bitboard import encode
from board import BOARD_COLS, BOARD_ROWS
from pieces import Shape, all_piece_orientations

logger = logging.getLogger(__name__)

# One tuple of placement masks per piece index, read-only once built
PlacementTable = tuple[tuple[int, ...], ...]


def _stamp(shape: Shape, dr: int, dc: int) -> list[list[int]]:
    grid = [[0] * BOARD_COLS for _ in range(BOARD_ROWS)]
    for r, row in enumerate(shape):
        for c, cell in enumerate(row):
            if cell:
                grid[r + dr][c + dc] = 1
    return grid


def generate_piece_placements(orientations: Sequence[Shape]) -> tuple[int, ...]:
    """Every distinct mask of one piece lying fully inside the board."""
    # dict keeps first-seen order, so the search always walks candidates the same way
    masks: dict[int, None] = {}

    for shape in orientations:
        h = len(shape)
        w = len(shape[0])

        # Slide shape over the 7x7 board; empty range when it cannot fit
        for dr in range(BOARD_ROWS - h + 1):
            for dc in range(BOARD_COLS - w + 1):
                masks.setdefault(encode(_stamp(shape, dr, dc)), None)

    return tuple(masks)


def generate_placements(piece_orientations: Sequence[Sequence[Shape]]) -> PlacementTable:
    table = tuple(generate_piece_placements(o) for o in piece_orientations)
    logger.debug(
        "Placement table built: %s",
        ", ".join(f"piece {i + 1}={len(p)}" for i, p in enumerate(table)),
    )
    return table


def build_placement_table() -> PlacementTable:
    return generate_placements(all_piece_orientations())
