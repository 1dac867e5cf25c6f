# bikeflow/util/trips.py
from __future__ import annotations

import io
from pathlib import Path
from typing import List

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from bikeflow.traffic.types import Trip
from bikeflow.util.fetch import read_text

REQUIRED_COLUMNS = ["started_at", "ended_at", "start_station_id", "end_station_id"]


def load_trip_frame(src: str | Path) -> pd.DataFrame:
    """
    Loads a trips CSV with (at least) the columns:

      started_at, ended_at, start_station_id, end_station_id

    Returns a cleaned DataFrame with just those columns:
      - started_at / ended_at parsed to datetimes
      - station ids as stripped strings
    Rows with unparsable times or missing station ids are dropped.
    """
    df = pd.read_csv(io.StringIO(read_text(src)), dtype=str)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips CSV missing columns: {', '.join(missing)}")

    out = pd.DataFrame()
    out["started_at"] = pd.to_datetime(df["started_at"], format="ISO8601", errors="coerce")
    out["ended_at"] = pd.to_datetime(df["ended_at"], format="ISO8601", errors="coerce")
    out["start_station_id"] = df["start_station_id"].str.strip()
    out["end_station_id"] = df["end_station_id"].str.strip()

    n_before = len(out)
    out = out.dropna(subset=REQUIRED_COLUMNS)
    out = out[(out["start_station_id"] != "") & (out["end_station_id"] != "")]

    dropped = n_before - len(out)
    if dropped:
        print(f"{Fore.YELLOW}Dropped {dropped:,} malformed trip rows{Style.RESET_ALL}")

    return out.reset_index(drop=True)


def load_trips(src: str | Path) -> List[Trip]:
    print(f"{Fore.CYAN}Loading trips from {src}…{Style.RESET_ALL}")
    df = load_trip_frame(src)

    rows = df.itertuples(index=False)
    trips = [
        Trip(
            started_at=r.started_at.to_pydatetime(),
            ended_at=r.ended_at.to_pydatetime(),
            start_station_id=r.start_station_id,
            end_station_id=r.end_station_id,
        )
        for r in tqdm(rows, total=len(df), desc="Reading trips")
    ]

    print(f"{Fore.CYAN}Loaded {len(trips):,} trips{Style.RESET_ALL}")
    return trips
