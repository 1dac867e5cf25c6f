"""Shared fixtures for bikeflow tests."""

from datetime import datetime

from bikeflow.traffic.types import Station, Trip


def at(minute, day=1):
    """datetime on 2024-03-<day> at the given minute of day."""
    h, m = divmod(minute, 60)
    return datetime(2024, 3, day, h, m, 30)


def trip(start_min, end_min, start="A", end="B", day=1):
    return Trip(
        started_at=at(start_min, day),
        ended_at=at(end_min, day),
        start_station_id=start,
        end_station_id=end,
    )


def stations(*ids):
    return [Station(id=i, lat=42.36, lon=-71.09, name=f"Station {i}") for i in ids]
