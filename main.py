# bikeflow/main.py

from bikeflow.config import DATA
from bikeflow.traffic.aggregator import load_aggregator
from bikeflow.viz.app.single import serve_traffic_map
from bikeflow.viz.overlays.lanes import load_lanes


def main():
    # ---- data (sequential: everything loaded before serving) ----
    aggregator = load_aggregator(DATA["stations"], DATA["trips"])
    lanes = load_lanes(DATA["lanes"])

    # ---- busiest stations over the whole day ----
    stations = aggregator.compute_station_traffic(None)
    busiest = sorted(stations, key=lambda s: s.total_traffic, reverse=True)[:10]

    print("\nBusiest stations (any time):\n")
    for i, s in enumerate(busiest, 1):
        print(
            f"{i:02d}. "
            f"{s.id:>8} | "
            f"{s.total_traffic:6d} trips "
            f"({s.departures} out, {s.arrivals} in) "
            f"{s.name}"
        )

    # ---- UI ----
    serve_traffic_map(
        aggregator,
        lanes=lanes,
        title="Bluebikes Traffic",
        port=8080,
    )


if __name__ == "__main__":
    main()
