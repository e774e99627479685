"""Record store contract and implementations."""

from .base import RecordStoreProtocol
from .memory_store import InMemoryRecordStore, record_id

__all__ = ["RecordStoreProtocol", "InMemoryRecordStore", "record_id"]
