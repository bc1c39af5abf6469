from __future__ import annotations

import argparse
import logging
import random
import sys
from datetime import date
from typing import List, Optional

from board import all_valid_dates, validate_date
from config import CFG
from errors import PuzzleError
from placements import build_placement_table
from render import format_solutions, solution_to_board, solutions_to_json, write_solutions
from solver import SearchStats, solve_for_date

logger = logging.getLogger("main")


def setup_logging(level: str = CFG.LOG_LEVEL, logfile: str = CFG.LOG_FILE) -> None:
    formatter = logging.Formatter('{asctime} [{levelname:5}] {name} - {message}', '%H:%M:%S', style='{')

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if logfile:
        fh = logging.FileHandler(logfile, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    today = date.today()
    parser = argparse.ArgumentParser(
        description="Find every way to cover the calendar board leaving one month and one day visible.",
    )
    parser.add_argument("-m", "--month", type=int, default=today.month,
        help="Month to leave uncovered, 1-12 (default: %(default)s)")
    parser.add_argument("-d", "--day", type=int, default=today.day,
        help="Day to leave uncovered, 1-31 (default: %(default)s)")
    parser.add_argument("-f", "--format", choices=["text", "json"],
        help="Solve without the viewer and print the solutions in this format")
    parser.add_argument("-o", "--output", default=CFG.SOLUTIONS_OUT,
        help="Write the solutions to this file instead of stdout")
    parser.add_argument("-a", "--all", action="store_true",
        help="Solve every date of the year and print the number of solutions per date")
    parser.add_argument("-ll", "--log-level", default=CFG.LOG_LEVEL,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging output level (default: %(default)s)")
    return parser.parse_args(argv)


def _emit(text: str, output: str) -> None:
    if output:
        path = write_solutions(output, text)
        logger.info("Solutions written to %s", path)
    else:
        sys.stdout.write(text)


def run_headless(month: int, day: int, fmt: str, output: str = "") -> int:
    stats = SearchStats()
    solutions = solve_for_date(month, day, stats=stats)
    if fmt == "json":
        text = solutions_to_json(month, day, solutions, stats) + "\n"
    else:
        text = format_solutions(month, day, solutions)
    _emit(text, output)
    return 0


def run_all_dates(output: str = "") -> int:
    placements = build_placement_table()
    lines = []
    for month, day in all_valid_dates():
        solutions = solve_for_date(month, day, placements=placements)
        lines.append(f"{month:02d}/{day:02d} {len(solutions)}")
    _emit("\n".join(lines) + "\n", output)
    return 0


def run_viewer(month: int, day: int) -> int:
    import pygame

    from gui import (
        WINDOW_WIDTH, WINDOW_HEIGHT, BG,
        draw_menu, get_menu_action,
        draw_top_bar, draw_solution_grid,
        draw_date_picker, get_picker_action,
    )
    from ui_state import AppState, UIState
    from ui_intro import draw_intro, get_intro_action

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Calendar Puzzle")

    # Fonts
    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 24)
    cell_font = pygame.font.SysFont("SF Pro Text", 24, bold=True)
    button_font = pygame.font.SysFont("SF Pro Text", 20)
    body_font = pygame.font.SysFont("SF Pro Text", 18)

    clock = pygame.time.Clock()
    app_state = AppState()
    picker_date = (month, day)

    boards: List[List[List[int]]] = []
    current_sol_idx = 0
    next_sol_idx = 0

    # Animation State
    anim_phase = "IDLE"  # "IDLE", "REMOVING", "PLACING"
    visible_pieces: set[int] = set()
    pieces_sequence: List[int] = []
    current_piece_idx = 0
    piece_timer = 0.0
    PIECE_DELAY = CFG.PIECE_DELAY

    # Shake effects
    shake_timer = 0.0
    SHAKE_DURATION = 0.1
    completion_shake_timer = 0.0
    COMPLETION_SHAKE_DURATION = 0.4

    def solve(m: int, d: int) -> List[List[List[int]]]:
        if app_state.placements is None:
            app_state.placements = build_placement_table()
        logger.info("Solving for %02d/%02d...", m, d)
        return [solution_to_board(s) for s in solve_for_date(m, d, placements=app_state.placements)]

    def start_placing():
        nonlocal anim_phase, visible_pieces, pieces_sequence, current_piece_idx, piece_timer
        nonlocal shake_timer, completion_shake_timer
        anim_phase = "PLACING"
        visible_pieces = set()
        pieces_sequence = sorted({v for row in boards[current_sol_idx] for v in row if v > 0})
        current_piece_idx = 0
        piece_timer = 0
        shake_timer = 0
        completion_shake_timer = 0

    def show_solutions(m: int, d: int):
        nonlocal boards, current_sol_idx
        app_state.current_state = UIState.SOLUTIONS
        app_state.selected_date = (m, d)
        boards = solve(m, d)
        current_sol_idx = 0
        if boards:
            start_placing()

    running = True
    while running:
        dt = clock.tick(CFG.FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)

            if app_state.current_state == UIState.MENU:
                if event.type == pygame.MOUSEBUTTONDOWN:
                    action = get_menu_action(event.pos, screen.get_size())
                    if action == "solve_today":
                        today = date.today()
                        show_solutions(today.month, today.day)
                    elif action == "pick_date":
                        app_state.current_state = UIState.DATE_PICKER
                    elif action == "intro":
                        app_state.current_state = UIState.INTRO

            elif app_state.current_state == UIState.INTRO:
                if event.type == pygame.MOUSEBUTTONDOWN:
                    if get_intro_action(event.pos, screen.get_size()) == "menu":
                        app_state.current_state = UIState.MENU
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    app_state.current_state = UIState.MENU

            elif app_state.current_state == UIState.DATE_PICKER:
                if event.type == pygame.MOUSEBUTTONDOWN:
                    picked = get_picker_action(event.pos)
                    if picked is not None:
                        kind, value = picked
                        if kind == "month":
                            picker_date = (value, picker_date[1])
                        elif kind == "day":
                            picker_date = (picker_date[0], value)
                        else:
                            try:
                                validate_date(*picker_date)
                            except PuzzleError as exc:
                                logger.warning("%s", exc)
                            else:
                                show_solutions(*picker_date)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        app_state.current_state = UIState.MENU
                    elif event.key == pygame.K_RETURN:
                        try:
                            validate_date(*picker_date)
                        except PuzzleError as exc:
                            logger.warning("%s", exc)
                        else:
                            show_solutions(*picker_date)

            elif app_state.current_state == UIState.SOLUTIONS:
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        app_state.current_state = UIState.MENU

                    if not boards:
                        continue

                    if anim_phase == "IDLE":
                        step = 0
                        if event.key == pygame.K_RIGHT and current_sol_idx < len(boards) - 1:
                            step = 1
                        elif event.key == pygame.K_LEFT and current_sol_idx > 0:
                            step = -1
                        if step:
                            next_sol_idx = current_sol_idx + step
                            anim_phase = "REMOVING"
                            # Remove in reverse order (8 -> 1)
                            pieces_sequence = sorted(visible_pieces, reverse=True)
                            current_piece_idx = 0
                            piece_timer = 0

        # Draw
        if app_state.current_state == UIState.MENU:
            draw_menu(screen, title_font, button_font)

        elif app_state.current_state == UIState.INTRO:
            draw_intro(screen, title_font, body_font)

        elif app_state.current_state == UIState.DATE_PICKER:
            draw_date_picker(screen, title_font, cell_font, *picker_date)

        elif app_state.current_state == UIState.SOLUTIONS and app_state.selected_date:
            screen.fill(BG)
            sel_month, sel_day = app_state.selected_date
            draw_top_bar(screen, title_font, label_font, current_sol_idx, len(boards), sel_month, sel_day)

            if boards:
                if anim_phase == "REMOVING":
                    piece_timer += dt
                    if piece_timer >= PIECE_DELAY * 0.4:  # Remove faster than place
                        piece_timer = 0
                        if current_piece_idx < len(pieces_sequence):
                            visible_pieces.discard(pieces_sequence[current_piece_idx])
                            current_piece_idx += 1
                        else:
                            current_sol_idx = next_sol_idx
                            start_placing()

                elif anim_phase == "PLACING":
                    piece_timer += dt
                    if piece_timer >= PIECE_DELAY:
                        piece_timer = 0
                        if current_piece_idx < len(pieces_sequence):
                            visible_pieces.add(pieces_sequence[current_piece_idx])
                            current_piece_idx += 1
                            shake_timer = SHAKE_DURATION
                        else:
                            anim_phase = "IDLE"
                            completion_shake_timer = COMPLETION_SHAKE_DURATION

                shake_offset = (0, 0)
                if shake_timer > 0:
                    shake_timer -= dt
                    if shake_timer > 0:
                        shake_offset = (random.randint(-1, 1), random.randint(-1, 1))

                if completion_shake_timer > 0:
                    completion_shake_timer -= dt
                    if completion_shake_timer > 0:
                        shake_offset = (random.randint(-2, 2), random.randint(-2, 2))

                draw_solution_grid(
                    screen,
                    cell_font,
                    boards[current_sol_idx],
                    sel_month,
                    sel_day,
                    visible_pieces=visible_pieces,
                    shake_offset=shake_offset,
                    completion_shake=(completion_shake_timer > 0),
                )

        pygame.display.flip()

    pygame.quit()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    options = parse_args(argv)
    setup_logging(options.log_level)

    try:
        if options.all:
            return run_all_dates(options.output)
        validate_date(options.month, options.day)
        if options.format or options.output:
            return run_headless(options.month, options.day, options.format or "text", options.output)
        return run_viewer(options.month, options.day)
    except PuzzleError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
