# render.py
# Turn raw solutions into boards, text and JSON

from __future__ import annotations

import json
import os
from typing import List, Optional

from bitboard import cells_of
from board import BOARD_COLS, BOARD_ROWS
from errors import SerializationError
from solver import SearchStats, Solution

# Cell value for the static holes and the two date squares
BLOCKED = -1

Board = List[List[int]]


def solution_to_board(solution: Solution) -> Board:
    board = [[BLOCKED] * BOARD_COLS for _ in range(BOARD_ROWS)]
    for piece_idx, mask in enumerate(solution.masks):
        for r, c in cells_of(mask):
            board[r][c] = piece_idx + 1
    return board


def format_board(board: Board) -> str:
    return "\n".join(
        " ".join(" #" if v == BLOCKED else f"{v:2d}" for v in row) for row in board
    )


def format_solutions(month: int, day: int, solutions: List[Solution]) -> str:
    parts = [f"{month:02d}/{day:02d}: {len(solutions)} solutions"]
    for i, solution in enumerate(solutions, start=1):
        parts.append(f"\n#{i}\n{format_board(solution_to_board(solution))}")
    return "\n".join(parts) + "\n"


def solutions_to_json(
    month: int,
    day: int,
    solutions: List[Solution],
    stats: Optional[SearchStats] = None,
) -> str:
    doc = {
        "month": month,
        "day": day,
        "count": len(solutions),
        "solutions": [solution_to_board(s) for s in solutions],
    }
    if stats is not None:
        doc["elapsed"] = round(stats.elapsed, 3)
        doc["nodes"] = stats.nodes
    try:
        return json.dumps(doc)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"could not encode solutions for {month}/{day}: {exc}") from exc


def write_solutions(path: str, text: str) -> str:
    """Write rendered solutions to path, creating parent directories."""

    try:
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise SerializationError(f"could not write {path}: {exc}") from exc
    return path


__all__ = [
    "BLOCKED",
    "format_board",
    "format_solutions",
    "solution_to_board",
    "solutions_to_json",
    "write_solutions",
]
