import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from data.history import HistoryStore
from data.storage import MemoryStorage


@pytest.fixture
def temp_dir_fixture():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def loaded_store(memory_storage):
    store = HistoryStore(memory_storage)
    store.load()
    return store


@pytest.fixture
def ticking_clock():
    """Returns a new UTC time one second later on every call."""
    start = datetime(2026, 10, 19, 9, 30, 0, 123456, tzinfo=timezone.utc)
    calls = {"n": 0}

    def clock():
        t = start + timedelta(seconds=calls["n"])
        calls["n"] += 1
        return t

    return clock
