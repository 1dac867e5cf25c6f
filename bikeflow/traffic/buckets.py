# bikeflow/traffic/buckets.py
from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Tuple

from bikeflow.traffic.types import Trip

MINUTES_PER_DAY = 1440
WINDOW_MINUTES = 60

Buckets = List[List[Trip]]


def minute_of_day(ts: datetime) -> int:
    """
    Local time of day in minutes (hour*60 + minute). Date and seconds are dropped.
    Works for datetime and pandas.Timestamp alike.
    """
    return ts.hour * 60 + ts.minute


def empty_buckets() -> Buckets:
    return [[] for _ in range(MINUTES_PER_DAY)]


def build_buckets(trips: Iterable[Trip]) -> Tuple[Buckets, Buckets]:
    """
    Returns (departures, arrivals), 1440 slots each.

    Every trip lands in exactly one departure slot (by started_at) and one
    arrival slot (by ended_at). Within a slot, input order is kept.
    """
    departures = empty_buckets()
    arrivals = empty_buckets()

    for trip in trips:
        departures[minute_of_day(trip.started_at)].append(trip)
        arrivals[minute_of_day(trip.ended_at)].append(trip)

    return departures, arrivals


def window_bounds(minute: int, half_width: int = WINDOW_MINUTES) -> Tuple[int, int]:
    """
    (lo, hi) slot indices of the circular window around `minute`.
    The window is half-open: [lo, hi), wrapping past midnight when lo > hi.
    """
    if not 0 <= minute < MINUTES_PER_DAY:
        raise ValueError(f"minute must be in [0, {MINUTES_PER_DAY - 1}], got {minute}")

    lo = (minute - half_width + MINUTES_PER_DAY) % MINUTES_PER_DAY
    hi = (minute + half_width) % MINUTES_PER_DAY
    return lo, hi


def select_window(buckets: Buckets, minute: int | None) -> List[Trip]:
    """
    Flatten the buckets that fall inside the window around `minute`.

    minute=None means "any time": every bucket, in index order.
    """
    if minute is None:
        return [trip for bucket in buckets for trip in bucket]

    lo, hi = window_bounds(minute)

    if lo <= hi:
        selected = buckets[lo:hi]
    else:
        # wraps past midnight
        selected = buckets[lo:] + buckets[:hi]

    return [trip for bucket in selected for trip in bucket]
