import pygame

from pixel_racer.settings import *
from pixel_racer.utils.ui import draw_button, draw_text_centered, get_font

HELP_LINES = (
    "Throttle / brake: Up / Down arrows or W / S",
    "Steer: Left / Right arrows or A / D",
    "Pause / resume: Space or Esc",
)


def start_button_rect(surface):
    w, h = surface.get_size()
    return pygame.Rect(w // 2 - 100, h // 3, 200, 48)


def run_menu(screen, clock):
    """Menu scene loop."""
    while True:
        screen = pygame.display.get_surface()
        w, h = screen.get_size()
        screen.fill(COLOR_WINDOW_BG)

        # Title
        draw_text_centered(screen, "8-BIT RACING", 72, COLOR_HIGHLIGHT, (w // 2, h // 6))
        draw_text_centered(screen, "Top-down retro arcade", 30, COLOR_TEXT, (w // 2, h // 6 + 50))

        start_rect = start_button_rect(screen)
        draw_button(screen, start_rect, "START", primary=True)

        # Controls help
        help_y = start_rect.bottom + 50
        draw_text_centered(screen, "CONTROLS", 36, COLOR_TEXT, (w // 2, help_y))
        font_small = get_font(26)
        for i, line in enumerate(HELP_LINES):
            text = font_small.render(line, True, COLOR_TEXT)
            screen.blit(text, text.get_rect(center=(w // 2, help_y + 40 + i * 30)))

        draw_text_centered(screen, "Records are kept for this session only.",
                           22, (120, 120, 140), (w // 2, help_y + 150))

        # Input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return "QUIT"
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                    return "RACE"
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if start_rect.collidepoint(event.pos):
                    return "RACE"

        pygame.display.flip()
        clock.tick(FPS)
