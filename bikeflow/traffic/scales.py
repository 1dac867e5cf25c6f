# bikeflow/traffic/scales.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from bikeflow.traffic.types import Station

RADIUS_RANGE_ANY_TIME = (0.0, 25.0)
RADIUS_RANGE_FILTERED = (3.0, 50.0)

# mostly arrivals, balanced, mostly departures
FLOW_LEVELS = (0.0, 0.5, 1.0)


@dataclass
class SqrtScale:
    """
    Square-root scale: maps [d0, d1] onto [r0, r1] through sqrt.
    Values outside the domain are extrapolated, not clamped.
    """
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = (math.sqrt(max(0.0, float(x))) for x in self.domain)
        r0, r1 = self.range
        if d1 == d0:
            # flat domain maps to the middle of the range
            return r0 + 0.5 * (r1 - r0)
        t = (math.sqrt(max(0.0, float(value))) - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)


def radius_scale(stations: Iterable[Station], minute: int | None) -> SqrtScale:
    """
    Marker radius scale for the current query.
    The "any time" view shows many more trips, so it gets a smaller range.
    """
    max_traffic = max((s.total_traffic for s in stations), default=0)
    rng = RADIUS_RANGE_ANY_TIME if minute is None else RADIUS_RANGE_FILTERED
    return SqrtScale(domain=(0.0, float(max_traffic)), range=rng)


def flow_ratio(station: Station) -> float:
    return station.departures / (station.total_traffic or 1)


def quantize_flow(ratio: float, levels: Sequence[float] = FLOW_LEVELS) -> float:
    """
    Quantize a ratio in [0, 1] into len(levels) equal-width bins.
    """
    n = len(levels)
    idx = int(math.floor(ratio * n))
    idx = max(0, min(n - 1, idx))
    return levels[idx]


def station_flow(station: Station) -> float:
    return quantize_flow(flow_ratio(station))
