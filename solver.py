# solver.py
# Combines everything; solves for a given date

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from bitboard import FULL_MASK
from board import blocked_mask_for_date, validate_date
from pieces import PIECE_COUNT, SIZE_6_PIECE_INDEX
from placements import PlacementTable, build_placement_table
from pruning import is_board_feasible

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    # One placement mask per piece, in piece order
    masks: tuple[int, ...]
    blocked_mask: int

    @property
    def covered_mask(self) -> int:
        covered = self.blocked_mask
        for mask in self.masks:
            covered |= mask
        return covered

    def is_exact_cover(self) -> bool:
        seen = self.blocked_mask
        for mask in self.masks:
            if seen & mask:
                return False
            seen |= mask
        return seen == FULL_MASK


@dataclass
class SearchStats:
    nodes: int = 0
    overlaps: int = 0
    pruned: int = 0
    solutions: int = 0
    elapsed: float = 0.0
    placements_per_piece: List[int] = field(default_factory=list)


def find_solutions(
    blocked_mask: int,
    placements: PlacementTable,
    stats: Optional[SearchStats] = None,
) -> List[Solution]:
    """Every exact cover of the empty cells, one placement per piece, in search order."""
    if stats is None:
        stats = SearchStats()
    stats.placements_per_piece = [len(p) for p in placements]

    solutions: List[Solution] = []
    chosen: List[int] = []

    def search(piece_idx: int, filled: int, size6_used: bool) -> None:
        stats.nodes += 1
        if piece_idx == PIECE_COUNT:
            solutions.append(Solution(tuple(chosen), blocked_mask))
            return

        is_hexomino = piece_idx == SIZE_6_PIECE_INDEX
        for candidate in placements[piece_idx]:
            if filled & candidate:
                stats.overlaps += 1
                continue

            new_filled = filled | candidate
            new_size6_used = size6_used or is_hexomino
            if not is_board_feasible(new_filled, new_size6_used):
                stats.pruned += 1
                continue

            chosen.append(candidate)
            try:
                search(piece_idx + 1, new_filled, new_size6_used)
            finally:
                chosen.pop()

    start = time.perf_counter()
    if is_board_feasible(blocked_mask, False):
        search(0, blocked_mask, False)
    else:
        logger.debug("Starting board already has an untileable region")
    stats.elapsed = time.perf_counter() - start
    stats.solutions = len(solutions)
    return solutions


def solve_for_date(
    month: int,
    day: int,
    placements: Optional[PlacementTable] = None,
    stats: Optional[SearchStats] = None,
) -> List[Solution]:
    validate_date(month, day)
    if placements is None:
        placements = build_placement_table()
    if stats is None:
        stats = SearchStats()

    solutions = find_solutions(blocked_mask_for_date(month, day), placements, stats)
    logger.info(
        "Solved %02d/%02d: %d solutions in %.2fs (%d nodes, %d pruned)",
        month, day, len(solutions), stats.elapsed, stats.nodes, stats.pruned,
    )
    return solutions
