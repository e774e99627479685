"""Write notifications published by a RecordStore."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class BeforeSetEvent(Generic[T]):
    """Published before a write. value is the record being replaced, if any."""
    value: Optional[T]
    new_value: T


@dataclass(frozen=True)
class AfterSetEvent(Generic[T]):
    """Published after a write. value is the record just stored."""
    value: T
