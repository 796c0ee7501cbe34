"""
DateTime utilities

All timestamps are stored as naive UTC datetimes.
"""
import math
from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Get current naive UTC datetime
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def minutes_until(moment: datetime, now: datetime = None) -> int:
    """Whole minutes left until ``moment``, rounded up"""
    now = now or utcnow()
    remaining_ms = (moment - now).total_seconds() * 1000
    return max(0, math.ceil(remaining_ms / 60000))
