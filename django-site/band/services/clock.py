"""Time source for the deferred feedback clear."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Interface for reading the current wall-clock time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as an aware datetime."""
        ...


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
