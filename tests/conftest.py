import pytest

from bitboard import bit
from board import blocked_mask_for_date
from placements import build_placement_table
from solver import Solution, find_solutions


@pytest.fixture(scope="session")
def placement_table():
    return build_placement_table()


@pytest.fixture(scope="session")
def jan1_solutions(placement_table):
    return find_solutions(blocked_mask_for_date(1, 1), placement_table)


@pytest.fixture
def tiny_solution():
    # Not a real tiling: piece n covers the single square (3, n - 1)
    return Solution(tuple(bit(3, i) for i in range(7)) + (bit(4, 0),), 0)
