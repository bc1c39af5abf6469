import pygame
from gui import BG, TEXT_MAIN, TEXT_SECONDARY, CARD_BG, HOVER_BG, GRID

LINES = [
    "The board is solved by a depth-first search over bitboards.",
    "",
    "1. Bitboards:",
    "   Each of the 49 squares is one bit of an integer.",
    "   Every way a piece can lie on the board is precomputed",
    "   as one such integer, for all rotations and flips.",
    "",
    "2. The Search:",
    "   Pieces are placed in a fixed order. A position is allowed",
    "   when it shares no bit with the squares already filled.",
    "",
    "3. Pruning:",
    "   After each placement the empty squares are grouped into",
    "   islands. An island that 5s and one 6 cannot fill",
    "   ends the branch immediately.",
]


def _back_rect(w: int, h: int) -> pygame.Rect:
    return pygame.Rect(w - 160, h - 80, 120, 50)


def draw_intro(screen: pygame.Surface, title_font: pygame.font.Font, body_font: pygame.font.Font):
    screen.fill(BG)
    w, h = screen.get_size()

    title = title_font.render("How it Works", True, TEXT_MAIN)
    screen.blit(title, (40, 40))

    y = 100
    for line in LINES:
        surf = body_font.render(line, True, TEXT_SECONDARY)
        screen.blit(surf, (40, y))
        y += 30

    button_rect = _back_rect(w, h)
    color = HOVER_BG if button_rect.collidepoint(pygame.mouse.get_pos()) else CARD_BG
    pygame.draw.rect(screen, color, button_rect, border_radius=8)
    pygame.draw.rect(screen, GRID, button_rect, width=1, border_radius=8)

    btn_text = body_font.render("< Menu", True, TEXT_MAIN)
    screen.blit(btn_text, btn_text.get_rect(center=button_rect.center))


def get_intro_action(mouse_pos: tuple[int, int], screen_size: tuple[int, int]) -> str | None:
    w, h = screen_size
    if _back_rect(w, h).collidepoint(mouse_pos):
        return "menu"
    return None
