"""
Minimal synchronous publish/subscribe channel.

One Observer is instantiated per event kind. Listeners run inline, in
registration order, on the publishing thread. A listener that raises stops
the publish and the exception reaches the publisher unchanged.
"""

import logging
import threading
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")

Listener = Callable[[E], None]
Unsubscribe = Callable[[], None]


class _Subscription(Generic[E]):
    __slots__ = ("listener",)

    def __init__(self, listener: Listener):
        self.listener = listener


class Observer(Generic[E]):
    """Ordered listener registry for a single event payload type."""

    def __init__(self):
        self._subscriptions: list[_Subscription[E]] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register listener. The returned handle removes this registration only."""
        subscription = _Subscription(listener)
        with self._lock:
            self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            with self._lock:
                # Identity match so a listener registered twice keeps its other slot.
                for i, s in enumerate(self._subscriptions):
                    if s is subscription:
                        del self._subscriptions[i]
                        return
            logger.debug("Unsubscribe called for an inactive listener: %r", listener)

        return unsubscribe

    def publish(self, event: E) -> None:
        with self._lock:
            snapshot = list(self._subscriptions)
        for subscription in snapshot:
            subscription.listener(event)
