# bikeflow/viz/time_label.py
from __future__ import annotations

import math

from bikeflow.traffic.buckets import MINUTES_PER_DAY

ANY_TIME = -1


def parse_minute(value) -> int | None:
    """
    Slider / query value -> minute of day, or None for "any time" (-1).
    Raises ValueError for anything outside [-1, 1439].
    """
    if value is None or value == "":
        return None

    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"minute must be finite, got {value!r}")

    minute = int(number)
    if minute == ANY_TIME:
        return None
    if not 0 <= minute < MINUTES_PER_DAY:
        raise ValueError(f"minute must be in [-1, {MINUTES_PER_DAY - 1}], got {minute}")
    return minute


def format_time(minute: int | None) -> str:
    """
    Minute of day -> "3:45 PM". Blank for "any time".
    """
    if minute is None:
        return ""

    h, m = divmod(int(minute), 60)
    suffix = "AM" if h < 12 else "PM"
    h12 = h % 12 or 12
    return f"{h12}:{m:02d} {suffix}"
