"""
recordstore
Generic in-memory record store with write hooks, traversal and best-by-score selection.

Usage:
  store = create_store()
  unsubscribe = store.on_after_set(lambda ev: print(ev.value))
  store.set(Car(id="1", max_speed=200))
  fastest = store.select_best(lambda car: car.max_speed)
"""

from typing import Callable, Optional

from .config import Settings, get_settings, setup_logging
from .errors import MissingIdentifierError, RecordStoreError
from .observer import Listener, Observer, Unsubscribe
from .repositories import InMemoryRecordStore, RecordStoreProtocol, record_id
from .schemas import AfterSetEvent, BeforeSetEvent, Record


def create_store(
    key: Optional[Callable] = None,
    thread_safe: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> InMemoryRecordStore:
    """Build a new, empty store. Unset options come from settings."""
    if thread_safe is None:
        thread_safe = (settings or get_settings()).RECORDSTORE_THREAD_SAFE
    return InMemoryRecordStore(key=key, thread_safe=thread_safe)


__all__ = [
    "AfterSetEvent",
    "BeforeSetEvent",
    "InMemoryRecordStore",
    "Listener",
    "MissingIdentifierError",
    "Observer",
    "Record",
    "RecordStoreError",
    "RecordStoreProtocol",
    "Settings",
    "Unsubscribe",
    "create_store",
    "get_settings",
    "record_id",
    "setup_logging",
]
