import json
import math

from colorama import Fore, Style

from bikeflow.traffic.types import Station
from bikeflow.util.fetch import read_text


def _to_float(v):
    try:
        return float(v)
    except (TypeError, ValueError):
        return math.nan


def load_stations(src):
    """
    Load bike-share stations from a GBFS station_information-style JSON
    (path or URL). Station id is the `short_name` trips refer to.

    Rows with a non-finite lat/lon are dropped.
    """
    raw = json.loads(read_text(src))
    try:
        rows = raw["data"]["stations"]
    except (KeyError, TypeError):
        raise ValueError("Station JSON must contain data.stations") from None

    stations = []
    dropped = 0
    for s in rows:
        lat = _to_float(s.get("lat"))
        lon = _to_float(s.get("lon"))
        if not (math.isfinite(lat) and math.isfinite(lon)):
            dropped += 1
            continue

        cap = s.get("capacity")
        stations.append(
            Station(
                id=str(s.get("short_name", s.get("station_id", ""))),
                name=s.get("name", ""),
                lat=lat,
                lon=lon,
                capacity=int(cap) if cap is not None else None,
            )
        )

    if dropped:
        print(f"{Fore.YELLOW}Dropped {dropped} stations without coordinates{Style.RESET_ALL}")
    print(f"{Fore.CYAN}Loaded {len(stations):,} stations{Style.RESET_ALL}")

    return stations
