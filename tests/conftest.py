from __future__ import annotations

import pytest

from src.leave_tracker.leave_tracker.common import date_utils
from src.leave_tracker.leave_tracker.personnel.registry import PersonnelRegistry
from src.leave_tracker.leave_tracker.storage.memory_store import InMemoryKeyValueStore
from src.leave_tracker.leave_tracker.storage.personnel_store import PersonnelStore

TODAY = "2024-03-10"


@pytest.fixture
def fixed_today(monkeypatch):
    monkeypatch.setattr(date_utils, "today_local", lambda: date_utils.parse_iso_date(TODAY))
    return TODAY


@pytest.fixture
def kv():
    return InMemoryKeyValueStore()


@pytest.fixture
def registry(kv):
    return PersonnelRegistry(PersonnelStore(kv))
