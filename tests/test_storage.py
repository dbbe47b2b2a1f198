"""
Unit tests for session-scoped best-distance persistence.
"""

import logging

import pytest

from pixel_racer.settings import *
from pixel_racer.utils.storage import (SessionStore, StorageError, load_best,
                                       parse_best, save_best)


class BrokenWriteStore(SessionStore):
    """Reads fine, every write is rejected."""

    def set(self, key, value):
        return False


class TestParseBest:
    """Tests for parse_best()"""

    @pytest.mark.parametrize("raw, expected", [
        ("123", 123.0),
        ("45.5", 45.5),
        (" 7 ", 7.0),
        (None, 0.0),
        ("", 0.0),
        ("fast", 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
        ("-5", 0.0),
    ])
    def test_values(self, raw, expected: float) -> None:
        assert parse_best(raw) == expected


class TestSessionStore:
    """Tests for SessionStore and the load/save helpers"""

    def test_missing_key(self) -> None:
        assert SessionStore().get(BEST_KEY) is None

    def test_values_stored_as_strings(self) -> None:
        store = SessionStore()
        store.set("k", 12.5)
        assert store.get("k") == "12.5"

    def test_unavailable_store_raises(self) -> None:
        store = SessionStore(available=False)
        with pytest.raises(StorageError):
            store.get(BEST_KEY)
        with pytest.raises(StorageError):
            store.set(BEST_KEY, "1")

    def test_round_trip(self) -> None:
        store = SessionStore()
        assert save_best(store, 123.0) is True
        assert load_best(store) == 123.0

    def test_load_external_integer_string(self) -> None:
        store = SessionStore()
        store.set(BEST_KEY, "123")
        assert load_best(store) == 123.0

    def test_load_from_unavailable_store(self) -> None:
        assert load_best(SessionStore(available=False)) == 0.0

    def test_save_to_unavailable_store(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pixel_racer"):
            assert save_best(SessionStore(available=False), 10.0) is False
        assert "could not persist" in caplog.text

    def test_rejected_write(self) -> None:
        assert save_best(BrokenWriteStore(), 10.0) is False

    def test_garbage_value_loads_as_zero(self) -> None:
        store = SessionStore()
        store.set(BEST_KEY, "not-a-number")
        assert load_best(store) == 0.0
