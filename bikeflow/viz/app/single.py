# bikeflow/viz/app/single.py
from __future__ import annotations

from flask import Flask, jsonify, request

from bikeflow.traffic.scales import flow_ratio, radius_scale, station_flow
from bikeflow.viz.maps.render import render_map_document
from bikeflow.viz.overlays.stations import station_color, station_tooltip
from bikeflow.viz.time_label import format_time, parse_minute


def _requested_minute():
    raw = request.args.get("minute", None)
    try:
        return parse_minute(raw)
    except ValueError:
        return None


def create_app(aggregator, *, lanes=None, title: str | None = None) -> Flask:
    """
    aggregator: fully loaded TrafficAggregator
    lanes: {name: geojson dict} drawn under the stations (optional)
    """
    if aggregator is None:
        raise ValueError("create_app requires a TrafficAggregator")

    app = Flask(__name__)

    @app.route("/")
    def _index():
        minute = _requested_minute()
        return render_map_document(aggregator, minute, lanes=lanes, title=title)

    @app.route("/stations.json")
    def _stations():
        minute = _requested_minute()
        stations = aggregator.compute_station_traffic(minute)
        radius = radius_scale(stations, minute)

        rows = []
        for s in stations:
            row = s.to_dict()
            row["radius"] = radius(s.total_traffic)
            row["flow_ratio"] = flow_ratio(s)
            row["flow"] = station_flow(s)
            row["color"] = station_color(s)
            row["tooltip"] = station_tooltip(s)
            rows.append(row)

        return jsonify(
            {
                "minute": minute,
                "label": format_time(minute),
                "stations": rows,
            }
        )

    return app


def serve_traffic_map(
    aggregator,
    *,
    lanes=None,
    title: str | None = None,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
):
    app = create_app(aggregator, lanes=lanes, title=title)
    app.run(host=host, port=int(port), debug=bool(debug))
