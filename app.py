import os

from bikeflow.config import DATA
from bikeflow.traffic.aggregator import load_aggregator
from bikeflow.viz.app.single import serve_traffic_map
from bikeflow.viz.overlays.lanes import load_lanes

STATIONS = os.environ.get("STATIONS_URL", DATA["stations"])
TRIPS = os.environ.get("TRIPS_CSV", DATA["trips"])
LANES = os.environ.get("LANES", "1") != "0"


def main():
  aggregator = load_aggregator(STATIONS, TRIPS)
  lanes = load_lanes(DATA["lanes"]) if LANES else None

  port = int(os.environ.get("PORT", "8080"))

  serve_traffic_map(
      aggregator,
      lanes=lanes,
      title=os.environ.get("TITLE", "Bluebikes Traffic"),
      host=os.environ.get("HOST", "0.0.0.0"),
      port=port,
  )


if __name__ == "__main__":
  main()
