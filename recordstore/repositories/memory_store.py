"""
In-memory implementation of RecordStoreProtocol.

Records live in a dict keyed by identifier; traversal follows insertion
order of the identifiers (an overwrite keeps the original position).
Nothing is persisted, the data goes away with the store object.
"""

import logging
import threading
from collections.abc import Mapping
from contextlib import nullcontext
from typing import Any, Callable, Generic, Optional, TypeVar

from recordstore.errors import MissingIdentifierError
from recordstore.observer import Listener, Observer, Unsubscribe
from recordstore.schemas.events import AfterSetEvent, BeforeSetEvent

logger = logging.getLogger(__name__)

T = TypeVar("T")


def record_id(record: Any) -> str:
    """Default key accessor: the record's `id` attribute, or its "id" key for mappings."""
    if isinstance(record, Mapping):
        value = record.get("id")
    else:
        value = getattr(record, "id", None)
    if not isinstance(value, str):
        raise MissingIdentifierError(
            f"Record {record!r} has no string 'id' (got {type(value).__name__})"
        )
    return value


class InMemoryRecordStore(Generic[T]):
    """Dict-backed record store with before/after write notifications.

    A single re-entrant lock serializes set() so the before event, the write
    and the after event appear atomic to other threads. Listeners run on the
    writing thread while the lock is held and may call back into the store.

    visit() and select_best() work on a snapshot taken under the lock; a
    visitor must not modify the store, and would not see its own writes.
    """

    def __init__(
        self,
        key: Optional[Callable[[T], str]] = None,
        thread_safe: bool = True,
    ):
        self._key = key or record_id
        self._data: dict[str, T] = {}
        self._lock = threading.RLock() if thread_safe else nullcontext()
        self._before_set: Observer[BeforeSetEvent[T]] = Observer()
        self._after_set: Observer[AfterSetEvent[T]] = Observer()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, id: object) -> bool:
        with self._lock:
            return id in self._data

    def _identifier(self, record: T) -> str:
        try:
            value = self._key(record)
        except (KeyError, AttributeError, TypeError) as exc:
            raise MissingIdentifierError(
                f"Key accessor failed on {record!r}: {exc!r}"
            ) from exc
        if not isinstance(value, str):
            raise MissingIdentifierError(
                f"Key accessor returned {type(value).__name__}, expected str"
            )
        return value

    # Writes
    def set(self, record: T) -> None:
        rid = self._identifier(record)
        with self._lock:
            previous = self._data.get(rid)
            self._before_set.publish(BeforeSetEvent(value=previous, new_value=record))
            self._data[rid] = record
            logger.debug("%s record %s", "Replaced" if previous is not None else "Inserted", rid)
            self._after_set.publish(AfterSetEvent(value=record))

    # Reads
    def get(self, id: str) -> Optional[T]:
        with self._lock:
            return self._data.get(id)

    def visit(self, visitor: Callable[[T], None]) -> None:
        with self._lock:
            records = list(self._data.values())
        for record in records:
            visitor(record)

    def select_best(self, score_strategy: Callable[[T], float]) -> Optional[T]:
        """Return the record with the highest score, or None.

        The running maximum starts at 0 and only a strictly greater score
        replaces it, so an empty store or one where every score is <= 0
        yields None. On equal scores the earlier record wins.
        """
        with self._lock:
            records = list(self._data.values())
        best_score = 0
        best: Optional[T] = None
        for record in records:
            score = score_strategy(record)
            if score > best_score:
                best_score = score
                best = record
        return best

    # Hooks
    def on_before_set(self, listener: Listener) -> Unsubscribe:
        logger.debug("Registered before-set listener %r", listener)
        return self._before_set.subscribe(listener)

    def on_after_set(self, listener: Listener) -> Unsubscribe:
        logger.debug("Registered after-set listener %r", listener)
        return self._after_set.subscribe(listener)
