"""Record and event types."""

from .events import AfterSetEvent, BeforeSetEvent
from .records import Record

__all__ = [
    "AfterSetEvent",
    "BeforeSetEvent",
    "Record",
]
