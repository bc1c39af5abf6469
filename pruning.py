# pruning.py
# Dead-board detection: every empty region must be tileable by the remaining sizes

from __future__ import annotations

from bitboard import CELL_COUNT
from board import BOARD_COLS

SMALLEST_PIECE = 5
HEXOMINO = 6


class UnionFind:
    """Disjoint sets over 0..n-1. Roots store their negated size."""

    def __init__(self, n: int):
        self.n = n
        self.parents = [-1] * n

    def find(self, x: int) -> int:
        root = x
        while self.parents[root] >= 0:
            root = self.parents[root]
        # Path compression
        while self.parents[x] >= 0 and self.parents[x] != root:
            self.parents[x], x = root, self.parents[x]
        return root

    def union(self, x: int, y: int) -> None:
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        # Attach the smaller tree below the larger one
        if self.parents[root_x] > self.parents[root_y]:
            root_x, root_y = root_y, root_x
        self.parents[root_x] += self.parents[root_y]
        self.parents[root_y] = root_x

    def size(self, x: int) -> int:
        return -self.parents[self.find(x)]

    def roots(self) -> list[int]:
        return [i for i in range(self.n) if self.parents[i] < 0]


def is_feasible_component(size: int, size6_used: bool) -> bool:
    """Can an empty region of this size still be filled by 5s and at most one 6?"""
    if size < SMALLEST_PIECE:
        return False
    if size % SMALLEST_PIECE == 0:
        return True
    if size6_used:
        return False
    return size >= HEXOMINO and (size - HEXOMINO) % SMALLEST_PIECE == 0


def is_board_feasible(board_mask: int, size6_used: bool) -> bool:
    """
    False when some empty region can never be covered exactly.

    Passing is a necessary condition only; the search still has to find
    the actual tiling.
    """
    uf = UnionFind(CELL_COUNT)

    for i in range(CELL_COUNT):
        if (board_mask >> i) & 1:
            continue
        right = i + 1
        if right % BOARD_COLS != 0 and not (board_mask >> right) & 1:
            uf.union(i, right)
        below = i + BOARD_COLS
        if below < CELL_COUNT and not (board_mask >> below) & 1:
            uf.union(i, below)

    for root in uf.roots():
        if (board_mask >> root) & 1:
            continue
        if not is_feasible_component(uf.size(root), size6_used):
            return False
    return True
