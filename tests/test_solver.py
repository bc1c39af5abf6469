import pytest

from bitboard import FULL_MASK, mask_of_cells
from board import ILLEGAL_CELLS, blocked_mask_for_date
from errors import InvalidDateError
from pieces import PIECE_COUNT, PIECE_SIZES
from solver import SearchStats, Solution, find_solutions, solve_for_date


def _exact_covers(blocked, table):
    """Plain Algorithm X over piece and cell columns, independent of the bitboard search."""
    X = {("piece", p): set() for p in range(PIECE_COUNT)}
    X.update({("cell", i): set() for i in range(49) if not (blocked >> i) & 1})
    Y = {}
    for p, masks in enumerate(table):
        for m in masks:
            if m & blocked:
                continue
            Y[(p, m)] = [("piece", p)] + [("cell", i) for i in range(49) if (m >> i) & 1]
            for col in Y[(p, m)]:
                X[col].add((p, m))

    def select(row):
        cols = []
        for j in Y[row]:
            for i in X[j]:
                for k in Y[i]:
                    if k != j:
                        X[k].remove(i)
            cols.append(X.pop(j))
        return cols

    def deselect(row, cols):
        for j in reversed(Y[row]):
            X[j] = cols.pop()
            for i in X[j]:
                for k in Y[i]:
                    if k != j:
                        X[k].add(i)

    found = []

    def search(partial):
        if not X:
            found.append(tuple(m for _, m in sorted(partial)))
            return
        col = min(X, key=lambda c: len(X[c]))
        for row in list(X[col]):
            partial.append(row)
            cols = select(row)
            search(partial)
            deselect(row, cols)
            partial.pop()

    search([])
    return found


def test_solution_checks_cover_and_overlap():
    blocked = FULL_MASK & ~0b111
    assert Solution((0b1, 0b110), blocked).is_exact_cover()
    assert not Solution((0b11, 0b110), blocked).is_exact_cover()
    assert not Solution((0b1, 0b10), blocked).is_exact_cover()
    assert Solution((0b1, 0b10), blocked).covered_mask == FULL_MASK & ~0b100


@pytest.mark.slow
def test_january_first_has_solutions(jan1_solutions):
    assert jan1_solutions


@pytest.mark.slow
def test_every_solution_is_an_exact_cover(jan1_solutions):
    blocked = blocked_mask_for_date(1, 1)
    for solution in jan1_solutions:
        assert solution.blocked_mask == blocked
        assert len(solution.masks) == PIECE_COUNT
        for i, a in enumerate(solution.masks):
            assert bin(a).count("1") == PIECE_SIZES[i]
            assert a & blocked == 0
            for b in solution.masks[i + 1:]:
                assert a & b == 0
        assert solution.covered_mask == FULL_MASK
        assert solution.is_exact_cover()


@pytest.mark.slow
def test_solutions_are_distinct(jan1_solutions):
    assert len({s.masks for s in jan1_solutions}) == len(jan1_solutions)


@pytest.mark.slow
def test_january_first_solution_count(jan1_solutions):
    assert len(jan1_solutions) == 64


@pytest.mark.slow
def test_january_first_matches_independent_exact_cover(jan1_solutions, placement_table):
    reference = _exact_covers(blocked_mask_for_date(1, 1), placement_table)
    assert len(jan1_solutions) == len(reference)
    assert {s.masks for s in jan1_solutions} == set(reference)


@pytest.mark.slow
def test_search_is_deterministic(jan1_solutions, placement_table):
    again = solve_for_date(1, 1, placements=placement_table)
    assert {s.masks for s in again} == {s.masks for s in jan1_solutions}
    assert [s.masks for s in again] == [s.masks for s in jan1_solutions]


def test_isolated_pocket_yields_no_solutions(placement_table):
    # (6, 0)-(6, 2) cut off by blocking the squares above them
    blocked = mask_of_cells(set(ILLEGAL_CELLS) | {(5, 0), (5, 1), (5, 2)})
    stats = SearchStats()
    assert find_solutions(blocked, placement_table, stats) == []
    assert stats.nodes == 0
    assert stats.solutions == 0


def test_pockets_left_by_a_placement_are_pruned(placement_table):
    # 11 empty squares: the rectangle fits three ways, two of them strand a pocket
    region = [(r, c) for r in range(2) for c in range(5)] + [(2, 0)]
    blocked = FULL_MASK & ~mask_of_cells(region)
    stats = SearchStats()
    assert find_solutions(blocked, placement_table, stats) == []
    assert stats.pruned == 2
    assert stats.nodes == 2
    # every other rectangle position, then every position of the U against the final pocket
    assert stats.overlaps == (len(placement_table[0]) - 3) + len(placement_table[1])


def test_stats_record_search_effort(placement_table):
    # Only piece 1 fits: leave exactly a 2x3 hole
    hole = [(r, c) for r in range(2) for c in range(3)]
    blocked = FULL_MASK & ~mask_of_cells(hole)
    stats = SearchStats()
    assert find_solutions(blocked, placement_table, stats) == []
    assert stats.nodes == 2
    assert stats.placements_per_piece == [len(p) for p in placement_table]
    assert stats.elapsed >= 0


def test_solve_for_date_validates_at_the_boundary(placement_table):
    with pytest.raises(InvalidDateError):
        solve_for_date(2, 30, placements=placement_table)
    with pytest.raises(InvalidDateError):
        solve_for_date(13, 1, placements=placement_table)
