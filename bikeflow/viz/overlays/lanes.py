# bikeflow/viz/overlays/lanes.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import folium
from colorama import Fore, Style

from bikeflow.config import LANE_STYLE
from bikeflow.util.fetch import read_text


def load_lanes(sources: Dict[str, str | Path]) -> Dict[str, dict]:
    """
    Fetch each bike-lane GeoJSON once, keyed by layer name.
    Contents are not inspected.
    """
    lanes = {}
    for name, src in sources.items():
        print(f"{Fore.CYAN}Loading {name} bike lanes…{Style.RESET_ALL}")
        lanes[name] = json.loads(read_text(src))
    return lanes


def add_bike_lanes(m, lanes: Dict[str, dict]):
    for name, geojson in lanes.items():
        folium.GeoJson(
            geojson,
            name=f"{name}-bike-lanes",
            style_function=lambda _feature: dict(LANE_STYLE),
        ).add_to(m)
