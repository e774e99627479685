"""
Pytest configuration and shared fixtures for recordstore tests.
"""

import pytest

from recordstore import InMemoryRecordStore, Record


class Car(Record):
    model: str
    max_speed: int
    brake_distance: int


@pytest.fixture
def car_model():
    """The Car record class used across the store tests."""
    return Car


@pytest.fixture
def store():
    """A fresh, empty store per test."""
    return InMemoryRecordStore()


@pytest.fixture
def car_store(car_model):
    """Store seeded the way the car scenario starts."""
    s = InMemoryRecordStore()
    s.set(car_model(id="1", model="Ford", max_speed=200, brake_distance=100))
    s.set(car_model(id="2", model="Toyota", max_speed=100, brake_distance=50))
    return s


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep RECORDSTORE_* variables from the host shell out of config tests."""
    monkeypatch.delenv("RECORDSTORE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RECORDSTORE_THREAD_SAFE", raising=False)
