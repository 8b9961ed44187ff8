"""Time utilities. Price cache timestamps are epoch milliseconds in UTC."""

import time
from datetime import datetime

import pytz

UTC_TZ = pytz.utc


def now_utc() -> datetime:
    """Return current time as an aware UTC datetime."""
    return datetime.now(UTC_TZ)


def now_millis() -> float:
    """Return current wall-clock time in epoch milliseconds."""
    return time.time() * 1000.0
