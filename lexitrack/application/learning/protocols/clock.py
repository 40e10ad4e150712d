"""Protocol for the injected clock."""

from datetime import date, datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time, injected so time-based rules are testable."""

    def now(self) -> datetime:
        """Current timezone-aware time."""
        ...

    def today(self) -> date:
        """Current calendar day in the learner's timezone."""
        ...
