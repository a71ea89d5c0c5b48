"""Time helpers: interval differences and timestamp formatting."""

from __future__ import annotations

import math
import time

_NANOS_PER_SECOND = 1_000_000_000


def elapsed_time(now: tuple[int, int], ref: tuple[int, int]) -> tuple[int, int]:
    """Return ``now - ref`` for ``(seconds, nanoseconds)`` pairs."""
    now_sec, now_nsec = now
    ref_sec, ref_nsec = ref
    if now_nsec - ref_nsec < 0:
        return now_sec - ref_sec - 1, now_nsec - ref_nsec + _NANOS_PER_SECOND
    return now_sec - ref_sec, now_nsec - ref_nsec


def get_time(timestamp: float | None = None) -> str:
    """Format a timestamp (default: now) as local ``Y:m:d H:M:S:millis``."""
    if timestamp is None:
        timestamp = time.time()
    seconds = math.floor(timestamp)
    micros = round((timestamp - seconds) * 1_000_000)
    millis = round(micros / 1000.0)
    if millis >= 1000:
        millis -= 1000
        seconds += 1
    stamp = time.strftime("%Y:%m:%d %H:%M:%S", time.localtime(seconds))
    return f"{stamp}:{millis}"