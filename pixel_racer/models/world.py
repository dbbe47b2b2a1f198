from dataclasses import dataclass
from enum import Enum


class PauseState(Enum):
    RUNNING = "running"
    PAUSED = "paused"

    def toggled(self):
        return PauseState.RUNNING if self is PauseState.PAUSED else PauseState.PAUSED


@dataclass
class WorldState:
    world_distance: float = 0.0     # px, drives the road generator
    session_distance_m: float = 0.0
    best_distance_m: float = 0.0

    def record_distance(self, delta_m):
        """Add forward distance. Returns True when a new best was set."""
        if delta_m > 0:
            self.session_distance_m += delta_m
        if self.session_distance_m > self.best_distance_m:
            self.best_distance_m = self.session_distance_m
            return True
        return False
