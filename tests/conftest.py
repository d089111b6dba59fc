"""
Shared fixtures: zero-latency store settings, in-memory backends, frozen clocks.
"""

import random
from datetime import datetime, timezone

import pytest

from config import StoreSettings
from storage.backends import MemoryBackend
from storage.record_store import RecordStore

FROZEN_NOW = datetime(2026, 10, 19, 9, 30, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> StoreSettings:
    """Settings with no latency and no simulated failures."""
    return StoreSettings(backend="memory")


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend, settings: StoreSettings) -> RecordStore:
    return RecordStore(backend, settings, rng=random.Random(42))


@pytest.fixture
def frozen_store(backend: MemoryBackend, settings: StoreSettings) -> RecordStore:
    """Store whose clock never advances."""
    return RecordStore(backend, settings, rng=random.Random(42), clock=lambda: FROZEN_NOW)


@pytest.fixture
def draft() -> dict:
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "enrolledCourse": "1",
        "profileImage": "https://randomuser.me/api/portraits/women/23.jpg",
    }
