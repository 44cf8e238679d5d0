"""Date and time helpers."""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC timezone."""
    if dt.tzinfo is None:
        # Assume UTC if no timezone
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def start_of_hour(dt: datetime) -> datetime:
    """Floor a datetime to the start of its hour (UTC)."""
    return to_utc(dt).replace(minute=0, second=0, microsecond=0)


def is_past_hour(dt: datetime, now: datetime) -> bool:
    """
    Check whether ``dt`` falls in an hour that has already ended.

    Both values are truncated to the start of their hour before comparing,
    so anything within the current hour still counts as upcoming.

    Args:
        dt: Timestamp to check (naive values are assumed UTC)
        now: Reference "current" time

    Returns:
        bool: True if dt's hour is strictly before now's hour
    """
    return start_of_hour(dt) < start_of_hour(now)
