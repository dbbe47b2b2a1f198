import itertools
import math

from pixel_racer.models.world import PauseState
from pixel_racer.settings import *
from pixel_racer.utils.log import get_logger

logger = get_logger("frame_driver")


def clamp_dt(dt, max_dt=MAX_DT):
    """Seconds to simulate for one frame.

    Negative, NaN or infinite readings are not real elapsed time and become
    zero. Long stalls are capped at max_dt.
    """
    if not math.isfinite(dt) or dt < 0:
        return 0.0
    return min(dt, max_dt)


class FrameScheduler:
    """Display-refresh callbacks: register once, fire on the next refresh.

    The game loop calls run_pending() once per refresh. Callbacks registered
    while pending ones run are kept for the following refresh. If a callback
    raises, the ones that had not run yet stay queued.
    """

    def __init__(self):
        self._pending = {}
        self._running = {}
        self._ids = itertools.count(1)

    def schedule(self, callback):
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle):
        self._pending.pop(handle, None)
        self._running.pop(handle, None)

    def run_pending(self, now):
        self._running = self._pending
        self._pending = {}
        count = 0
        try:
            while self._running:
                handle = next(iter(self._running))
                callback = self._running.pop(handle)
                count += 1
                callback(now)
        finally:
            leftover = self._running
            self._running = {}
            leftover.update(self._pending)
            self._pending = leftover
        return count

    def __len__(self):
        return len(self._pending)


class FrameDriver:
    """Per-frame loop plus the pause state machine.

    Each frame: measure and clamp dt, poll input, toggle pause on the press
    edge, step the simulation if running, then always render. Use it as a
    context manager so every exit path stops it.
    """

    def __init__(self, scheduler, poll_input, step, render, clock):
        self.scheduler = scheduler
        self.poll_input = poll_input
        self.step = step
        self.render = render
        self.clock = clock

        self.pause_state = PauseState.RUNNING
        self.running = False
        self.frames = 0
        self._handle = None
        self._last = None

    @property
    def paused(self):
        return self.pause_state is PauseState.PAUSED

    def toggle_pause(self):
        self.pause_state = self.pause_state.toggled()
        logger.info("pause state -> %s", self.pause_state.value)
        return self.pause_state

    def start(self):
        if self.running:
            return
        self.running = True
        self._last = self.clock()
        self._handle = self.scheduler.schedule(self._frame)
        logger.debug("frame driver started")

    def stop(self):
        if not self.running:
            return
        self.running = False
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None
        logger.debug("frame driver stopped after %d frames", self.frames)

    def _frame(self, now):
        self._handle = None
        if not self.running:
            return

        dt = clamp_dt((now - self._last) / 1000.0)
        if math.isfinite(now):
            self._last = now

        control = self.poll_input()
        if control.toggle_pause:
            self.toggle_pause()
        if not self.paused:
            self.step(control, dt)
        self.render(self.paused)
        self.frames += 1

        if self.running:
            self._handle = self.scheduler.schedule(self._frame)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
