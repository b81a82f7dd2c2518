"""Microsecond timestamp utilities."""

import time
from datetime import datetime, timezone

_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 UTC with microseconds and a Z suffix."""
    if epoch_us is None:
        epoch_us = now_micros()
    seconds, micros = divmod(epoch_us, 1_000_000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros)
    return dt.strftime(_FORMAT) + "Z"
