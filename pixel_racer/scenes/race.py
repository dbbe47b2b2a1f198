from dataclasses import replace

import pygame

from pixel_racer.models.road import car_row_world_y, sample_road
from pixel_racer.models.vehicle import VehicleState, advance
from pixel_racer.models.world import WorldState
from pixel_racer.settings import *
from pixel_racer.utils.frame_driver import FrameDriver, FrameScheduler
from pixel_racer.utils.input import InputMapper
from pixel_racer.utils.log import get_logger
from pixel_racer.utils.physics import resolve_collision
from pixel_racer.utils.storage import load_best, save_best
from pixel_racer.utils.ui import (display_size, draw_button, draw_text_centered,
                                  make_car_sprite, render_frame)

logger = get_logger("race")

MENU_BUTTON = pygame.Rect(10, 6, 110, 28)
PAUSE_BUTTON = pygame.Rect(130, 6, 130, 28)


class RaceSession:
    """Simulation state for one mount of the game screen."""

    def __init__(self, store):
        self.store = store
        self.vehicle = VehicleState()
        self.world = WorldState(best_distance_m=load_best(store))

    def step(self, control, dt):
        """Advance one tick. Only called while running."""
        dt = max(0.0, dt)
        vehicle = advance(self.vehicle, control, dt)

        self.world.world_distance += max(0.0, vehicle.speed) * dt

        # Walls are checked at the car's row, not the top of the screen
        road = sample_road(car_row_world_y(self.world.world_distance))
        x, speed = resolve_collision(vehicle.lateral_position, vehicle.speed, road)
        self.vehicle = replace(vehicle, lateral_position=x, speed=speed)

        delta_m = max(0.0, speed) * dt * DISTANCE_SCALE
        if self.world.record_distance(delta_m):
            save_best(self.store, self.world.best_distance_m)


class RaceScreen:
    """The game screen: owns the session, input, frame driver and canvas.

    Entering the context mounts it, leaving unmounts it. Unmounting stops the
    frame driver and detaches every event listener, exactly once.
    """

    def __init__(self, store, scheduler, clock):
        self.store = store
        self.scheduler = scheduler
        self.session = None
        self.input = InputMapper()
        self.driver = None
        self.canvas = pygame.Surface((LOGICAL_WIDTH, LOGICAL_HEIGHT))
        self.sprite = make_car_sprite()
        self.clock = clock
        self.canvas_rect = pygame.Rect(0, TOPBAR_HEIGHT, LOGICAL_WIDTH, LOGICAL_HEIGHT)
        self.listeners = {}
        self.mounted = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def mount(self):
        if self.mounted:
            return
        self.session = RaceSession(self.store)
        self.driver = FrameDriver(self.scheduler, self.input.poll, self.session.step,
                                  self.render, self.clock)
        self.listeners = {
            pygame.KEYDOWN: self._on_key_down,
            pygame.KEYUP: self._on_key_up,
            pygame.VIDEORESIZE: self._on_resize,
            pygame.WINDOWFOCUSLOST: self._on_focus_lost,
            pygame.MOUSEBUTTONDOWN: self._on_click,
        }
        self.mounted = True
        self.driver.start()
        logger.info("race mounted, best %.1f m", self.session.world.best_distance_m)

    def unmount(self):
        if not self.mounted:
            return
        self.mounted = False
        self.driver.stop()
        self.listeners = {}
        self.input.reset()
        logger.info("race unmounted at %.1f m", self.session.world.session_distance_m)

    def __enter__(self):
        self.mount()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.unmount()
        return False

    @property
    def paused(self):
        return self.driver is not None and self.driver.paused

    def toggle_pause(self):
        if self.mounted:
            self.driver.toggle_pause()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, event):
        """Route one pygame event. Returns a scene change or None."""
        if event.type == pygame.QUIT:
            return "QUIT"
        listener = self.listeners.get(event.type)
        if listener is None:
            return None
        return listener(event)

    def _on_key_down(self, event):
        self.input.on_key_down(pygame.key.name(event.key))

    def _on_key_up(self, event):
        self.input.on_key_up(pygame.key.name(event.key))

    def _on_resize(self, event):
        self.resize(event.w, event.h)

    def _on_focus_lost(self, event):
        self.input.reset()

    def _on_click(self, event):
        if event.button != 1:
            return None
        if MENU_BUTTON.collidepoint(event.pos):
            return "MENU"
        if PAUSE_BUTTON.collidepoint(event.pos):
            self.toggle_pause()
        return None

    def resize(self, window_w, window_h):
        """Fit the canvas into the window area between top bar and hint."""
        container_h = window_h - TOPBAR_HEIGHT - HINT_HEIGHT
        w, h = display_size(window_w, container_h)
        self.canvas_rect = pygame.Rect((window_w - w) // 2, TOPBAR_HEIGHT, w, h)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def render(self, paused):
        render_frame(self.canvas, self.session.vehicle, self.session.world, paused, self.sprite)

    def present(self, screen):
        screen.fill(COLOR_WINDOW_BG)

        draw_button(screen, MENU_BUTTON, "MENU")
        draw_button(screen, PAUSE_BUTTON, "RESUME" if self.paused else "PAUSE", primary=True)

        screen.blit(pygame.transform.scale(self.canvas, self.canvas_rect.size), self.canvas_rect)

        hint_y = self.canvas_rect.bottom + HINT_HEIGHT // 2
        draw_text_centered(screen, "Arrows / WASD to drive - Space or Esc to pause",
                           22, COLOR_TEXT, (screen.get_width() // 2, hint_y))


def run_race(screen, clock, store):
    """Game screen loop. Returns "MENU" or "QUIT"."""
    scheduler = FrameScheduler()
    with RaceScreen(store, scheduler, pygame.time.get_ticks) as race:
        race.resize(*screen.get_size())
        while True:
            for event in pygame.event.get():
                result = race.handle_event(event)
                if result is not None:
                    return result

            scheduler.run_pending(pygame.time.get_ticks())

            screen = pygame.display.get_surface()
            race.present(screen)
            pygame.display.flip()
            clock.tick(FPS)
