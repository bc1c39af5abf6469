# board.py
# Board geometry, month/day coordinate maps

from __future__ import annotations

import calendar

from errors import InvalidDateError

BOARD_ROWS = 7
BOARD_COLS = 7

# Permanently blocked cells (the board's cut-out corners)
ILLEGAL_CELLS: frozenset[tuple[int, int]] = frozenset({
    (0, 6),
    (1, 6),
    (6, 3),
    (6, 4),
    (6, 5),
    (6, 6),
})

# Months fill a 2x6 block from the top-left corner
MONTH_ROWS = 2
MONTH_COLS = 6
# Days run seven to a row starting on row 2
DAY_FIRST_ROW = 2

# Any leap year, so February 29 is a valid board
_REFERENCE_YEAR = 2000


def month_coord(month: int) -> tuple[int, int]:
    return (month - 1) // MONTH_COLS, (month - 1) % MONTH_COLS


def day_coord(day: int) -> tuple[int, int]:
    return (day - 1) // BOARD_COLS + DAY_FIRST_ROW, (day - 1) % BOARD_COLS


# Month coordinates (1–12)
MONTH_COORDS: dict[int, tuple[int, int]] = {m: month_coord(m) for m in range(1, 13)}

# Day coordinates (1–31)
DAY_COORDS: dict[int, tuple[int, int]] = {d: day_coord(d) for d in range(1, 32)}

_CELL_LABELS: dict[tuple[int, int], str] = {
    **{coord: calendar.month_abbr[m].title() for m, coord in MONTH_COORDS.items()},
    **{coord: str(d) for d, coord in DAY_COORDS.items()},
}


def days_in_month(month: int) -> int:
    return calendar.monthrange(_REFERENCE_YEAR, month)[1]


def validate_date(month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDateError(month, day, "month must be between 1 and 12")
    last = days_in_month(month)
    if not 1 <= day <= last:
        raise InvalidDateError(
            month, day, f"{calendar.month_name[month]} has days 1 to {last}"
        )


def all_valid_dates() -> list[tuple[int, int]]:
    return [(m, d) for m in range(1, 13) for d in range(1, days_in_month(m) + 1)]


def all_playable_cells() -> set[tuple[int, int]]:
    """All cells that can ever be covered by pieces (months + days)."""
    cells: set[tuple[int, int]] = set(MONTH_COORDS.values()) | set(DAY_COORDS.values())
    return cells


def blocked_cells_for_date(month: int, day: int) -> set[tuple[int, int]]:
    """Static holes plus the month and day squares that stay uncovered."""
    return set(ILLEGAL_CELLS) | {month_coord(month), day_coord(day)}


def blocked_mask_for_date(month: int, day: int) -> int:
    mask = 0
    for r, c in blocked_cells_for_date(month, day):
        mask |= 1 << (r * BOARD_COLS + c)
    return mask


def playable_cells_for_date(month: int, day: int) -> set[tuple[int, int]]:
    """Playable cells when month/day squares are left empty."""
    cells = all_playable_cells().copy()
    cells.discard(month_coord(month))
    cells.discard(day_coord(day))
    return cells


def cell_label(row: int, col: int) -> str | None:
    """Printed label of a board square ("Jan", "17"), None for the cut-out corners."""
    return _CELL_LABELS.get((row, col))
