from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops the offset on the way back)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
