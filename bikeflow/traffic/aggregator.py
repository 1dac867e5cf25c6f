# bikeflow/traffic/aggregator.py
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, List

from colorama import Fore, Style

from bikeflow.traffic.buckets import Buckets, build_buckets, select_window
from bikeflow.traffic.types import Station, Trip
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trips


def compute_station_traffic(
    stations: List[Station],
    departure_buckets: Buckets,
    arrival_buckets: Buckets,
    minute: int | None = None,
) -> List[Station]:
    """
    Overwrite departures / arrivals / total_traffic on every station with the
    counts of trips inside the window around `minute` (None = any time).

    Stations without matching trips end up with all-zero counts.
    Returns the same list, updated in place.
    """
    dep_counts = Counter(
        t.start_station_id for t in select_window(departure_buckets, minute)
    )
    arr_counts = Counter(
        t.end_station_id for t in select_window(arrival_buckets, minute)
    )

    for s in stations:
        s.departures = dep_counts.get(s.id, 0)
        s.arrivals = arr_counts.get(s.id, 0)
        s.total_traffic = s.departures + s.arrivals

    return stations


class TrafficAggregator:
    """
    Owns the minute buckets (built once) and the station list (traffic fields
    rewritten per query).
    """

    def __init__(self, stations: List[Station], trips: Iterable[Trip]):
        self.stations = list(stations)
        self.departure_buckets, self.arrival_buckets = build_buckets(trips)
        self.trip_count = sum(len(b) for b in self.departure_buckets)

    def compute_station_traffic(self, minute: int | None = None) -> List[Station]:
        return compute_station_traffic(
            self.stations,
            self.departure_buckets,
            self.arrival_buckets,
            minute,
        )

    def trips_in_window(self, minute: int | None = None) -> List[Trip]:
        return select_window(self.departure_buckets, minute)


def load_aggregator(
    stations_src: str | Path,
    trips_src: str | Path,
) -> TrafficAggregator:
    """
    Load stations, then trips, then bucket them.
    Nothing is served until this returns a fully built aggregator.
    """
    stations = load_stations(stations_src)
    trips = load_trips(trips_src)

    print(f"{Fore.CYAN}Bucketing {len(trips):,} trips by minute of day…{Style.RESET_ALL}")
    agg = TrafficAggregator(stations, trips)

    print(
        f"{Fore.GREEN}Aggregator ready: {len(agg.stations):,} stations, "
        f"{agg.trip_count:,} trips.{Style.RESET_ALL}"
    )
    return agg
