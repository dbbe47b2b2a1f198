"""
Tests for the renderer and viewport scaling.
"""

import pygame
import pytest

from pixel_racer.models.road import sample_road
from pixel_racer.models.vehicle import VehicleState
from pixel_racer.models.world import WorldState
from pixel_racer.settings import *
from pixel_racer.utils.ui import display_size, render_frame, speed_kmh


def frame_bytes(vehicle, world, paused):
    surface = pygame.Surface((LOGICAL_WIDTH, LOGICAL_HEIGHT))
    render_frame(surface, vehicle, world, paused)
    return pygame.image.tobytes(surface, "RGB")


class TestDisplaySize:
    """Tests for display_size()"""

    @pytest.mark.parametrize("container, expected", [
        ((320, 240), (320, 240)),
        ((700, 500), (640, 480)),
        ((1920, 1080), (640, 480)),   # capped at 900x760
        ((100, 100), (320, 240)),     # never below 1x
        ((0, 0), (320, 240)),
        ((660, 1000), (640, 480)),
    ])
    def test_integer_scale(self, container, expected) -> None:
        assert display_size(*container) == expected


class TestRenderFrame:
    """Tests for render_frame()"""

    @pytest.fixture
    def vehicle(self) -> VehicleState:
        return VehicleState(lateral_position=170.0, speed=90.0, heading_bias=2.0)

    @pytest.fixture
    def world(self) -> WorldState:
        return WorldState(world_distance=812.5, session_distance_m=650.0, best_distance_m=900.0)

    def test_idempotent(self, vehicle, world) -> None:
        assert frame_bytes(vehicle, world, False) == frame_bytes(vehicle, world, False)

    def test_pause_overlay_changes_frame(self, vehicle, world) -> None:
        assert frame_bytes(vehicle, world, True) != frame_bytes(vehicle, world, False)

    def test_road_scrolls_with_world(self, vehicle, world) -> None:
        moved = WorldState(world_distance=world.world_distance + 3.0,
                           session_distance_m=world.session_distance_m,
                           best_distance_m=world.best_distance_m)
        assert frame_bytes(vehicle, world, False) != frame_bytes(vehicle, moved, False)

    def test_road_and_car_pixels(self, vehicle, world) -> None:
        surface = pygame.Surface((LOGICAL_WIDTH, LOGICAL_HEIGHT))
        render_frame(surface, vehicle, world, False)

        row = LOGICAL_HEIGHT - 100
        road = sample_road(world.world_distance + (LOGICAL_HEIGHT - row))
        assert surface.get_at((int(round(road.left_edge)) + 5, row))[:3] == COLOR_ROAD
        assert surface.get_at((int(round(road.left_edge)) - 1, row))[:3] == COLOR_ROAD_EDGE
        assert surface.get_at((int(vehicle.lateral_position), CAR_SCREEN_Y))[:3] == COLOR_CAR_BODY

    @pytest.mark.parametrize("row", [0, LOGICAL_HEIGHT - 1])
    def test_road_covers_edge_rows(self, vehicle, world, row: int) -> None:
        """Top and bottom rows both get a strip at world + (height - row)"""
        surface = pygame.Surface((LOGICAL_WIDTH, LOGICAL_HEIGHT))
        render_frame(surface, vehicle, world, False)

        road = sample_road(world.world_distance + (LOGICAL_HEIGHT - row))
        assert surface.get_at((int(round(road.left_edge)) + 5, row))[:3] == COLOR_ROAD

    def test_speed_display_clamps_reverse(self) -> None:
        assert speed_kmh(-30.0) == 0.0
        assert speed_kmh(100.0) == pytest.approx(60.0)
