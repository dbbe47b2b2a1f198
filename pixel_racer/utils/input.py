from typing import NamedTuple

from pixel_racer.settings import *


class ControlSignal(NamedTuple):
    accelerate: bool = False
    brake: bool = False
    steer_left: bool = False
    steer_right: bool = False
    toggle_pause: bool = False # true for one poll per press


BOUND_KEYS = frozenset(KEYS_ACCELERATE + KEYS_BRAKE + KEYS_STEER_LEFT
                       + KEYS_STEER_RIGHT + KEYS_TOGGLE_PAUSE)


def _normalize(key):
    return key.lower()


class InputMapper:
    """Turns held-key snapshots into per-tick control signals.

    Key handlers only record the latest held state per key, and only for bound
    keys. `poll` is called once per frame. The pause toggle is latched on the
    key-down edge so a tap that starts and ends between two polls still
    counts, while key repeat and keys held across frames never fire twice.
    """

    def __init__(self):
        self.held = {}
        self._toggle_was_held = False
        self._toggle_pressed = False

    def on_key_down(self, key):
        key = _normalize(key)
        if key not in BOUND_KEYS:
            return
        if key in KEYS_TOGGLE_PAUSE and not self.held.get(key, False):
            self._toggle_pressed = True
        self.held[key] = True

    def on_key_up(self, key):
        key = _normalize(key)
        if key in BOUND_KEYS:
            self.held[key] = False

    def reset(self):
        self.held.clear()
        self._toggle_was_held = False
        self._toggle_pressed = False

    def _any(self, keys):
        return any(self.held.get(k, False) for k in keys)

    def poll(self):
        toggle_held = self._any(KEYS_TOGGLE_PAUSE)
        toggle = self._toggle_pressed or (toggle_held and not self._toggle_was_held)
        self._toggle_pressed = False
        self._toggle_was_held = toggle_held

        return ControlSignal(
            accelerate=self._any(KEYS_ACCELERATE),
            brake=self._any(KEYS_BRAKE),
            steer_left=self._any(KEYS_STEER_LEFT),
            steer_right=self._any(KEYS_STEER_RIGHT),
            toggle_pause=toggle,
        )
