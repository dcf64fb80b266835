"""
Time helpers: UTC clock and video age.
"""

from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def age_of(created_at: datetime, now: datetime) -> timedelta:
    """Age of a record relative to now. Future timestamps count as zero age."""
    age = now - created_at
    return age if age > timedelta(0) else timedelta(0)
