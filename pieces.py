# pieces.py
# Piece definitions + rotations/flips

from __future__ import annotations

Shape = tuple[tuple[int, ...], ...]

# Canonical piece shapes as 0/1 rows, trimmed to their bounding box.
# Piece numbers shown to the user are the index + 1.
PIECE_SHAPES: tuple[Shape, ...] = (
    # 2x3 rectangle
    ((1, 1),
     (1, 1),
     (1, 1)),
    # U
    ((1, 1),
     (1, 0),
     (1, 1)),
    # N
    ((1, 0),
     (1, 1),
     (0, 1),
     (0, 1)),
    # V
    ((1, 0, 0),
     (1, 0, 0),
     (1, 1, 1)),
    # P
    ((1, 0),
     (1, 1),
     (1, 1)),
    # Y
    ((1, 0),
     (1, 1),
     (1, 0),
     (1, 0)),
    # L
    ((1, 1),
     (1, 0),
     (1, 0),
     (1, 0)),
    # S
    ((1, 1, 0),
     (0, 1, 0),
     (0, 1, 1)),
)

PIECE_COUNT = len(PIECE_SHAPES)


def shape_size(shape: Shape) -> int:
    return sum(sum(row) for row in shape)


PIECE_SIZES: tuple[int, ...] = tuple(shape_size(s) for s in PIECE_SHAPES)

# The pruner needs to know when the only hexomino is on the board
SIZE_6_PIECE_INDEX = PIECE_SIZES.index(6)


def _trim(shape: Shape) -> Shape:
    rows = [r for r, row in enumerate(shape) if any(row)]
    cols = [c for c in range(len(shape[0])) if any(row[c] for row in shape)]
    return tuple(
        tuple(shape[r][c] for c in range(cols[0], cols[-1] + 1))
        for r in range(rows[0], rows[-1] + 1)
    )


def rotate90(shape: Shape) -> Shape:
    # new[c][h-1-r] = old[r][c]
    h = len(shape)
    w = len(shape[0])
    return tuple(tuple(shape[h - 1 - r][c] for r in range(h)) for c in range(w))


def flip_horizontal(shape: Shape) -> Shape:
    return tuple(tuple(reversed(row)) for row in shape)


def generate_orientations(shape: Shape) -> list[Shape]:
    """All unique rotations + horizontal flip orientations, in first-seen order."""
    seen: set[Shape] = set()
    result: list[Shape] = []

    for start in (shape, flip_horizontal(shape)):
        current = _trim(start)
        for _ in range(4):
            if current not in seen:
                seen.add(current)
                result.append(current)
            current = rotate90(current)

    return result


def all_piece_orientations() -> list[list[Shape]]:
    return [generate_orientations(shape) for shape in PIECE_SHAPES]
