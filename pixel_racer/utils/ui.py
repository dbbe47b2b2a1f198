import math
from functools import lru_cache

import pygame

from pixel_racer.models.road import sample_road
from pixel_racer.settings import *


@lru_cache(maxsize=None)
def get_font(size):
    return pygame.font.Font(None, size)


def draw_background(surface):
    surface.fill(COLOR_BG)
    # Sparse dither, every other row shifted by half a cell
    for y in range(0, LOGICAL_HEIGHT, 16):
        start = 0 if y % 32 == 0 else 8
        for x in range(start, LOGICAL_WIDTH, 16):
            surface.set_at((x, y), COLOR_DITHER)


def draw_road(surface, world_distance):
    """Road ribbon, one strip per screen row from the bottom up.

    Screen row y shows world coordinate world_distance + (LOGICAL_HEIGHT - y),
    the same mapping the collision check uses for the car row.
    """
    width = int(ROAD_WIDTH)
    for sy in range(1, LOGICAL_HEIGHT + 1):
        y_world = world_distance + sy
        screen_y = LOGICAL_HEIGHT - sy
        road = sample_road(y_world)
        left = int(round(road.left_edge))
        right = int(round(road.right_edge))

        pygame.draw.rect(surface, COLOR_ROAD, (left, screen_y, width, 1))

        # Borders
        pygame.draw.rect(surface, COLOR_ROAD_EDGE, (left - ROAD_BORDER, screen_y, ROAD_BORDER, 1))
        pygame.draw.rect(surface, COLOR_ROAD_EDGE, (right, screen_y, ROAD_BORDER, 1))

        # Dashed center line
        if math.floor(y_world / DASH_PERIOD) % 2 == 0:
            surface.set_at((int(road.center), screen_y), COLOR_CENTER_LINE)


def make_car_sprite():
    sprite = pygame.Surface((16, 26), pygame.SRCALPHA)
    # body
    pygame.draw.rect(sprite, COLOR_CAR_BODY, (2, 3, 12, 20))
    # nose
    pygame.draw.rect(sprite, COLOR_CAR_NOSE, (4, 1, 8, 2))
    # wheels
    for wx, wy in ((1, 5), (13, 5), (1, 17), (13, 17)):
        pygame.draw.rect(sprite, COLOR_CAR_WHEEL, (wx, wy, 2, 6))
    return sprite


def draw_car(surface, vehicle, sprite=None):
    if sprite is None:
        sprite = make_car_sprite()
    # pygame rotates counter-clockwise, positive bias leans right
    angle = -math.degrees(vehicle.heading_bias * HEADING_TILT)
    rotated = pygame.transform.rotate(sprite, angle)
    rect = rotated.get_rect(center=(int(round(vehicle.lateral_position)), CAR_SCREEN_Y))
    surface.blit(rotated, rect)


def speed_kmh(speed):
    return max(0.0, speed) * KMH_SCALE


def draw_hud(surface, vehicle, world, paused):
    """Speed / distance / best panel, plus the pause overlay when paused."""
    panel = pygame.Surface((120, 42), pygame.SRCALPHA)
    panel.fill(COLOR_HUD_BG + (HUD_ALPHA,))
    surface.blit(panel, (6, 6))

    font = get_font(14)
    lines = (
        f"SPEED: {speed_kmh(vehicle.speed):.0f} KM/H",
        f"DIST: {world.session_distance_m:.0f} M",
        f"BEST: {world.best_distance_m:.0f} M",
    )
    for i, line in enumerate(lines):
        surface.blit(font.render(line, False, COLOR_HUD_TEXT), (10, 9 + i * 12))

    if paused:
        dim = pygame.Surface((LOGICAL_WIDTH, LOGICAL_HEIGHT), pygame.SRCALPHA)
        dim.fill(COLOR_PAUSE_DIM)
        surface.blit(dim, (0, 0))
        label = get_font(18).render("PAUSED (SPACE / ESC)", False, COLOR_HUD_TEXT)
        surface.blit(label, label.get_rect(center=(LOGICAL_WIDTH // 2, LOGICAL_HEIGHT // 2)))


def render_frame(surface, vehicle, world, paused, sprite=None):
    draw_background(surface)
    draw_road(surface, world.world_distance)
    draw_car(surface, vehicle, sprite)
    draw_hud(surface, vehicle, world, paused)


# ============================================================================
# VIEWPORT & CHROME
# ============================================================================

def display_size(container_w, container_h):
    """On-screen size of the logical canvas inside a container.

    Integer scale only, to keep pixels crisp. Never smaller than 1x.
    """
    max_w = min(container_w, MAX_CONTAINER_WIDTH)
    max_h = min(container_h, MAX_CONTAINER_HEIGHT)
    scale = math.floor(min(max_w / LOGICAL_WIDTH, max_h / LOGICAL_HEIGHT))
    if scale < 1:
        scale = 1
    return LOGICAL_WIDTH * scale, LOGICAL_HEIGHT * scale


def draw_button(surface, rect, label, primary=False):
    color = COLOR_BUTTON_PRIMARY if primary else COLOR_BUTTON
    pygame.draw.rect(surface, color, rect, border_radius=4)
    text = get_font(24).render(label, True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=pygame.Rect(rect).center))


def draw_text_centered(surface, text, size, color, center):
    rendered = get_font(size).render(text, True, color)
    surface.blit(rendered, rendered.get_rect(center=center))
