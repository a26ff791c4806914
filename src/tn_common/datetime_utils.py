"""UTC datetime and epoch-millisecond utilities."""

import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def current_millis() -> int:
    """Wall-clock milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def millis_to_datetime(ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime: 0 -> 1970-01-01T00:00:00+00:00."""
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
