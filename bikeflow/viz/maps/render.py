# bikeflow/viz/maps/render.py
import folium

from bikeflow.config import CENTER_LAT, CENTER_LON, MAX_ZOOM, MIN_ZOOM, ZOOM_START
from bikeflow.traffic.scales import radius_scale
from bikeflow.viz.overlays.lanes import add_bike_lanes
from bikeflow.viz.overlays.stations import add_station_markers
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.map_wrap import build_map_wrap_widget
from bikeflow.viz.widgets.time_slider import build_time_slider


def build_traffic_map(aggregator, minute, *, lanes=None, title=None):
    """
    Recompute station traffic for `minute` and assemble the folium Map.
    """
    stations = aggregator.compute_station_traffic(minute)
    radius = radius_scale(stations, minute)

    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    # lanes under the stations
    if lanes:
        add_bike_lanes(m, lanes)

    markers = add_station_markers(m, stations, radius)

    # wrap first: the other widgets attach to #map-wrap
    html = m.get_root().html
    html.add_child(build_map_wrap_widget(title=title))
    html.add_child(build_legend_widget())
    html.add_child(build_time_slider(minute, markers=markers))

    return m


def render_map_document(aggregator, minute, *, lanes=None, title=None):
    """
    Single place that produces the full map HTML document.
    """
    m = build_traffic_map(aggregator, minute, lanes=lanes, title=title)
    return m.get_root().render()
