"""Contract every record store implementation provides."""

from typing import Callable, Optional, Protocol, TypeVar, runtime_checkable

from recordstore.observer import Listener, Unsubscribe

T = TypeVar("T")


@runtime_checkable
class RecordStoreProtocol(Protocol[T]):
    """Keyed upsert/lookup with write hooks, traversal and best-by-score selection."""

    def set(self, record: T) -> None:
        ...

    def get(self, id: str) -> Optional[T]:
        ...

    def on_before_set(self, listener: Listener) -> Unsubscribe:
        """Listener receives a BeforeSetEvent for every later set()."""
        ...

    def on_after_set(self, listener: Listener) -> Unsubscribe:
        """Listener receives an AfterSetEvent for every later set()."""
        ...

    def visit(self, visitor: Callable[[T], None]) -> None:
        ...

    def select_best(self, score_strategy: Callable[[T], float]) -> Optional[T]:
        ...
