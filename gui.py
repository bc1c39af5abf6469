# gui.py

from __future__ import annotations

import calendar
from typing import Dict, List, Tuple

import pygame

from board import (
    BOARD_ROWS,
    BOARD_COLS,
    ILLEGAL_CELLS,
    MONTH_COORDS,
    DAY_COORDS,
    cell_label,
    month_coord,
    day_coord,
)
from config import CFG
from render import Board

CELL_SIZE = CFG.CELL_SIZE
TOP_BAR_HEIGHT = 120

WINDOW_WIDTH = BOARD_COLS * CELL_SIZE
WINDOW_HEIGHT = BOARD_ROWS * CELL_SIZE + TOP_BAR_HEIGHT

# Colors – higher contrast, refined dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
HOVER_BG = (50, 50, 55)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
ILLEGAL = (45, 45, 49)

DATE_BORDER = (220, 90, 90)

# Indexed by piece number (1–8)
PIECE_COLORS: Dict[int, Tuple[int, int, int]] = {
    1: (60, 200, 80),
    2: (45, 140, 255),
    3: (255, 190, 60),
    4: (190, 70, 210),
    5: (90, 220, 220),
    6: (250, 80, 80),
    7: (210, 145, 50),
    8: (110, 120, 255),
}

MENU_BUTTONS: List[Tuple[str, str]] = [
    ("Solve Today", "solve_today"),
    ("Pick a Date", "pick_date"),
    ("How it Works", "intro"),
]


def _month_short_name(month: int) -> str:
    return calendar.month_abbr[month].title()


def piece_color(piece: int) -> Tuple[int, int, int]:
    return PIECE_COLORS[(piece - 1) % len(PIECE_COLORS) + 1]


def cell_rect(r: int, c: int, offset: Tuple[int, int] = (0, 0)) -> pygame.Rect:
    sx, sy = offset
    x = c * CELL_SIZE + sx
    y = TOP_BAR_HEIGHT + r * CELL_SIZE + sy
    return pygame.Rect(x + 2, y + 2, CELL_SIZE - 4, CELL_SIZE - 4)


def cell_at(pos: Tuple[int, int]) -> Tuple[int, int] | None:
    """Board (row, col) under a window position, None outside the board."""
    x, y = pos
    if x < 0 or y < TOP_BAR_HEIGHT:
        return None
    r = (y - TOP_BAR_HEIGHT) // CELL_SIZE
    c = x // CELL_SIZE
    if r >= BOARD_ROWS or c >= BOARD_COLS:
        return None
    return r, c


def _blit_centered(screen: pygame.Surface, surf: pygame.Surface, rect: pygame.Rect):
    screen.blit(surf, surf.get_rect(center=rect.center))


def _draw_date_cell(screen, cell_font, rect: pygame.Rect, label: str, selected: bool = True):
    pygame.draw.rect(screen, BG, rect, border_radius=12)
    border = DATE_BORDER if selected else GRID
    pygame.draw.rect(screen, border, rect, width=2 if selected else 1, border_radius=12)
    color = TEXT_MAIN if selected else GRID
    _blit_centered(screen, cell_font.render(label, True, color), rect)


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    current_idx: int,
    total_solutions: int,
    month: int,
    day: int,
):
    pygame.draw.rect(screen, BG, (0, 0, WINDOW_WIDTH, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, WINDOW_WIDTH - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render("Calendar Puzzle", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    month_name = _month_short_name(month)
    date_surf = label_font.render(f"{month_name} {day}", True, TEXT_MAIN)
    date_x = card_rect.right - date_surf.get_width() - 20
    screen.blit(date_surf, (date_x, card_rect.y + 12))

    if total_solutions:
        sol_text = f"Solution {current_idx + 1} of {total_solutions}"
    else:
        sol_text = "No solution for this date"
    sol_surf = label_font.render(sol_text, True, TEXT_SECONDARY)
    screen.blit(sol_surf, (card_rect.x + 20, card_rect.y + 48))


def draw_solution_grid(
    screen: pygame.Surface,
    cell_font: pygame.font.Font,
    board: Board,
    month: int,
    day: int,
    visible_pieces: set[int] | None = None,
    shake_offset: Tuple[int, int] = (0, 0),
    completion_shake: bool = False,
):
    """
    Draws a solved board.
    visible_pieces: piece numbers to draw. If None, draw all.
    shake_offset: (dx, dy) applied to the whole board.
    completion_shake: if True, draw a green glow around the board.
    """
    month_cell = month_coord(month)
    day_cell = day_coord(day)

    for r in range(BOARD_ROWS):
        for c in range(BOARD_COLS):
            rect = cell_rect(r, c, shake_offset)

            if (r, c) in ILLEGAL_CELLS:
                pygame.draw.rect(screen, ILLEGAL, rect, border_radius=12)
                continue

            if (r, c) == month_cell:
                _draw_date_cell(screen, cell_font, rect, _month_short_name(month).upper())
                continue

            if (r, c) == day_cell:
                _draw_date_cell(screen, cell_font, rect, str(day))
                continue

            piece = board[r][c]
            if piece > 0 and (visible_pieces is None or piece in visible_pieces):
                pygame.draw.rect(screen, piece_color(piece), rect, border_radius=12)
                _blit_centered(screen, cell_font.render(str(piece), True, (255, 255, 255)), rect)
            else:
                # Empty playable cell
                pygame.draw.rect(screen, BG, rect, border_radius=12)
                pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)

    if completion_shake:
        glow_surf = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        glow_color = (50, 255, 80)

        sx, sy = shake_offset
        board_rect = pygame.Rect(sx, TOP_BAR_HEIGHT + sy, BOARD_COLS * CELL_SIZE, BOARD_ROWS * CELL_SIZE)

        pygame.draw.rect(glow_surf, (*glow_color, 50), board_rect.inflate(8, 8), border_radius=20, width=4)
        pygame.draw.rect(glow_surf, (*glow_color, 255), board_rect, border_radius=16, width=3)
        pygame.draw.rect(glow_surf, (*glow_color, 120), board_rect.inflate(-6, -6), border_radius=14, width=3)

        screen.blit(glow_surf, (0, 0))


def _picker_button_rect() -> pygame.Rect:
    return pygame.Rect(WINDOW_WIDTH - 156, 44, 120, 48)


def draw_date_picker(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    cell_font: pygame.font.Font,
    month: int,
    day: int,
):
    screen.fill(BG)

    card_rect = pygame.Rect(16, 16, WINDOW_WIDTH - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)
    title_surf = title_font.render(f"{_month_short_name(month)} {day}", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 22))

    button_rect = _picker_button_rect()
    color = HOVER_BG if button_rect.collidepoint(pygame.mouse.get_pos()) else BG
    pygame.draw.rect(screen, color, button_rect, border_radius=10)
    pygame.draw.rect(screen, GRID, button_rect, width=1, border_radius=10)
    _blit_centered(screen, cell_font.render("Solve", True, TEXT_MAIN), button_rect)

    selected = {month_coord(month), day_coord(day)}
    for r in range(BOARD_ROWS):
        for c in range(BOARD_COLS):
            rect = cell_rect(r, c)
            label = cell_label(r, c)
            if label is None:
                pygame.draw.rect(screen, ILLEGAL, rect, border_radius=12)
                continue
            _draw_date_cell(screen, cell_font, rect, label, selected=(r, c) in selected)


def get_picker_action(mouse_pos: Tuple[int, int]) -> Tuple[str, int] | None:
    """("month", m), ("day", d) or ("solve", 0) for a click in the date picker."""
    if _picker_button_rect().collidepoint(mouse_pos):
        return "solve", 0
    cell = cell_at(mouse_pos)
    if cell is None:
        return None
    for m, coord in MONTH_COORDS.items():
        if coord == cell:
            return "month", m
    for d, coord in DAY_COORDS.items():
        if coord == cell:
            return "day", d
    return None


def _menu_button_rects(screen_size: Tuple[int, int]) -> List[Tuple[pygame.Rect, str, str]]:
    w, h = screen_size
    start_y = h // 2 - 40
    button_height = 60
    spacing = 20
    button_width = min(400, w - 80)
    return [
        (
            pygame.Rect((w - button_width) // 2, start_y + i * (button_height + spacing), button_width, button_height),
            text,
            action,
        )
        for i, (text, action) in enumerate(MENU_BUTTONS)
    ]


def draw_menu(screen: pygame.Surface, title_font: pygame.font.Font, button_font: pygame.font.Font):
    screen.fill(BG)
    w, h = screen.get_size()

    title_surf = title_font.render("Calendar Puzzle", True, TEXT_MAIN)
    screen.blit(title_surf, title_surf.get_rect(center=(w // 2, h // 4)))

    mouse_pos = pygame.mouse.get_pos()
    for rect, text, _ in _menu_button_rects((w, h)):
        color = HOVER_BG if rect.collidepoint(mouse_pos) else CARD_BG
        pygame.draw.rect(screen, color, rect, border_radius=12)
        pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)
        _blit_centered(screen, button_font.render(text, True, TEXT_MAIN), rect)


def get_menu_action(mouse_pos: Tuple[int, int], screen_size: Tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)) -> str | None:
    for rect, _, action in _menu_button_rects(screen_size):
        if rect.collidepoint(mouse_pos):
            return action
    return None
