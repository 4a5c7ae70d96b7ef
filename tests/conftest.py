# tests/conftest.py

from __future__ import annotations

from datetime import date

import pytest

from kvstore import MemoryStore
from planner import Planner
from storage import Storage

TODAY = date(2026, 3, 15)


@pytest.fixture()
def kv() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def storage(kv: MemoryStore) -> Storage:
    return Storage(kv)


@pytest.fixture()
def planner(storage: Storage) -> Planner:
    """
    Planner over an in-memory store with a pinned "today" so age math is
    deterministic.
    """
    p = Planner(storage, today=lambda: TODAY)
    p.initialize()
    return p
