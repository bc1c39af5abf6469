import json

import pytest

from errors import SerializationError
from render import (
    BLOCKED,
    format_board,
    format_solutions,
    solution_to_board,
    solutions_to_json,
    write_solutions,
)
from solver import SearchStats


def test_board_numbers_pieces_from_one(tiny_solution):
    board = solution_to_board(tiny_solution)
    assert board[3] == [1, 2, 3, 4, 5, 6, 7]
    assert board[4][0] == 8
    assert board[0][0] == BLOCKED
    assert len(board) == 7 and all(len(row) == 7 for row in board)


@pytest.mark.slow
def test_real_board_marks_only_the_holes(jan1_solutions):
    board = solution_to_board(jan1_solutions[0])
    blocked = {(r, c) for r in range(7) for c in range(7) if board[r][c] == BLOCKED}
    assert blocked == {(0, 6), (1, 6), (6, 3), (6, 4), (6, 5), (6, 6), (0, 0), (2, 0)}
    counts = {}
    for row in board:
        for v in row:
            counts[v] = counts.get(v, 0) + 1
    assert counts[1] == 6
    assert all(counts[p] == 5 for p in range(2, 9))


def test_format_board_uses_hash_for_blocked(tiny_solution):
    lines = format_board(solution_to_board(tiny_solution)).splitlines()
    assert len(lines) == 7
    assert lines[3] == " 1  2  3  4  5  6  7"
    assert lines[0] == " #  #  #  #  #  #  #"


def test_format_solutions_header(tiny_solution):
    text = format_solutions(3, 9, [tiny_solution])
    assert text.startswith("03/09: 1 solutions\n")
    assert "#1" in text


def test_json_document(tiny_solution):
    stats = SearchStats(nodes=12, elapsed=0.25)
    doc = json.loads(solutions_to_json(1, 1, [tiny_solution], stats))
    assert doc["month"] == 1
    assert doc["day"] == 1
    assert doc["count"] == 1
    assert doc["solutions"][0][3] == [1, 2, 3, 4, 5, 6, 7]
    assert doc["nodes"] == 12
    assert doc["elapsed"] == 0.25


def test_json_empty_result_is_not_an_error():
    doc = json.loads(solutions_to_json(2, 29, []))
    assert doc["count"] == 0
    assert doc["solutions"] == []
    assert "elapsed" not in doc


def test_json_encoding_failure_is_surfaced():
    with pytest.raises(SerializationError):
        solutions_to_json(object(), 1, [])


def test_write_solutions_creates_directories(tmp_path):
    target = tmp_path / "out" / "nested" / "solutions.txt"
    path = write_solutions(str(target), "hello\n")
    assert path == str(target)
    assert target.read_text(encoding="utf-8") == "hello\n"


def test_write_solutions_wraps_os_errors(tmp_path):
    with pytest.raises(SerializationError):
        write_solutions(str(tmp_path), "x")
