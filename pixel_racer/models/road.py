import math
from typing import NamedTuple

from pixel_racer.settings import *


class RoadSample(NamedTuple):
    center: float
    left_edge: float
    right_edge: float


def centerline(world_y):
    """Road center x for a world-distance coordinate.

    Sum of two sine waves around the middle of the logical screen, so the
    road never leaves [base - A1 - A2, base + A1 + A2].
    """
    base = LOGICAL_WIDTH / 2
    if not math.isfinite(world_y):
        return base
    t = world_y * ROAD_FREQUENCY
    return (base
            + math.sin(t) * ROAD_AMPLITUDE_1
            + math.sin(t * ROAD_SECONDARY_RATIO + ROAD_PHASE) * ROAD_AMPLITUDE_2)


def sample_road(world_y):
    center = centerline(world_y)
    half = ROAD_WIDTH / 2
    return RoadSample(center, center - half, center + half)


def car_row_world_y(world_distance):
    """World coordinate under the car's fixed screen row."""
    return world_distance + (LOGICAL_HEIGHT - CAR_SCREEN_Y)
