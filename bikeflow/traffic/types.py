# bikeflow/traffic/types.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Trip:
    started_at: datetime
    ended_at: datetime
    start_station_id: str
    end_station_id: str


@dataclass
class Station:
    id: str
    lat: float
    lon: float
    name: str = ""
    capacity: int | None = None

    # derived, overwritten on every traffic query
    departures: int = 0
    arrivals: int = 0
    total_traffic: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "capacity": self.capacity,
            "departures": self.departures,
            "arrivals": self.arrivals,
            "total_traffic": self.total_traffic,
        }
