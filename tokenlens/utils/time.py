"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def epoch_millis(moment: datetime) -> int:
    """Return whole milliseconds since the Unix epoch for an aware datetime."""
    return (moment - EPOCH) // timedelta(milliseconds=1)
