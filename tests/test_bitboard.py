from bitboard import FULL_MASK, bit, cells_of, decode, encode, mask_of_cells, popcount


def test_encode_sets_row_major_bits():
    grid = [[0] * 7 for _ in range(7)]
    grid[0][0] = 1
    grid[1][2] = 1
    grid[6][6] = 1
    assert encode(grid) == (1 << 0) | (1 << 9) | (1 << 48)


def test_encode_accepts_grid_smaller_than_board():
    assert encode([[1, 1], [0, 1]]) == bit(0, 0) | bit(0, 1) | bit(1, 1)


def test_decode_inverts_encode():
    grid = [[int((r * 7 + c) % 3 == 0) for c in range(7)] for r in range(7)]
    assert decode(encode(grid)) == grid


def test_full_mask_has_49_bits():
    assert popcount(FULL_MASK) == 49
    assert FULL_MASK >> 49 == 0


def test_cells_of_lists_occupied_cells_in_order():
    mask = mask_of_cells([(6, 0), (0, 6), (3, 3)])
    assert cells_of(mask) == [(0, 6), (3, 3), (6, 0)]
