"""Clock adapters."""

from datetime import date, datetime
from zoneinfo import ZoneInfo


class SystemClock:
    """Wall clock in the learner's study timezone."""

    def __init__(self, timezone: str = "UTC") -> None:
        self.timezone = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self.timezone)

    def today(self) -> date:
        """Calendar day in the study timezone, used for streaks."""
        return self.now().date()


class FixedClock:
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()
