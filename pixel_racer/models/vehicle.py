from dataclasses import dataclass, replace

from pixel_racer.settings import *


@dataclass
class VehicleState:
    lateral_position: float = LOGICAL_WIDTH / 2 # x center, logical px
    speed: float = 0.0                          # px/s, negative = reverse
    heading_bias: float = 0.0                   # visual tilt only


def _apply_friction(speed, dt):
    # Never pushes speed past zero.
    if speed > 0:
        return max(0.0, speed - FRICTION * dt)
    if speed < 0:
        return min(0.0, speed + FRICTION * dt)
    return speed


def advance(state, control, dt):
    """Return the vehicle state one tick later.

    `control` is a ControlSignal from the input mapper. `dt` is in seconds and
    is expected to be pre-clamped by the frame driver; negative values count
    as zero. The input state is left untouched.
    """
    dt = max(0.0, dt)
    speed = state.speed

    if control.accelerate:
        speed += ACCEL * dt
    if control.brake:
        speed -= BRAKE_DECEL * dt
    if not control.accelerate and not control.brake:
        speed = _apply_friction(speed, dt)

    speed = min(MAX_SPEED, max(REVERSE_CAP, speed))

    # Steering authority grows with speed
    x = state.lateral_position
    authority = TURN_RATE * (1 + speed / MAX_SPEED)
    if control.steer_left:
        x -= authority
    if control.steer_right:
        x += authority

    heading = state.heading_bias
    heading += (1 if control.steer_right else 0) - (1 if control.steer_left else 0)
    heading *= HEADING_DAMPING

    return replace(state, lateral_position=x, speed=speed, heading_bias=heading)
