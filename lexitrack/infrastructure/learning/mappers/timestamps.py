"""Timestamp normalization shared by the learning mappers."""

from datetime import UTC, datetime


def to_storage(value: datetime | None) -> datetime | None:
    """Store timestamps in UTC; backends without timezone support keep the wall time only."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def from_storage(value: datetime | None) -> datetime | None:
    """Read timestamps back as aware UTC datetimes."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
