from pixel_racer.settings import *


def resolve_collision(lateral_position, speed, sample, margin=COLLISION_MARGIN):
    """Keep the car inside the road at `sample`.

    Touching a wall clamps the car to it and scrubs speed by RESTITUTION.
    Returns (lateral_position, speed).
    """
    left = sample.left_edge + margin
    right = sample.right_edge - margin

    if lateral_position < left:
        lateral_position = left
        speed *= RESTITUTION
    elif lateral_position > right:
        lateral_position = right
        speed *= RESTITUTION

    return lateral_position, speed
