import math

from pixel_racer.settings import *
from pixel_racer.utils.log import get_logger

logger = get_logger("storage")


class StorageError(Exception):
    """The key-value store could not be read or written."""


class SessionStore:
    """In-memory key-value store that lives as long as the process.

    Values are strings. `available=False` simulates a disabled store and makes
    every access raise StorageError.
    """

    def __init__(self, available=True):
        self._data = {}
        self.available = available

    def get(self, key):
        if not self.available:
            raise StorageError(f"store unavailable, cannot read {key!r}")
        return self._data.get(key)

    def set(self, key, value):
        if not self.available:
            raise StorageError(f"store unavailable, cannot write {key!r}")
        self._data[key] = str(value)
        return True


def parse_best(raw):
    """Parse a stored best distance. Anything unusable becomes 0.0."""
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def load_best(store, key=BEST_KEY):
    try:
        raw = store.get(key)
    except StorageError as e:
        logger.debug("best distance unavailable: %s", e)
        return 0.0
    return parse_best(raw)


def save_best(store, value, key=BEST_KEY):
    """Best-effort write. Returns False on failure, never raises."""
    try:
        ok = store.set(key, repr(float(value)))
    except StorageError as e:
        logger.debug("could not persist best distance: %s", e)
        return False
    return bool(ok)
