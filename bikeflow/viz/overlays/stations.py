import folium

from bikeflow.traffic.scales import station_flow

DEPARTURE_COLOR = "#4682b4"
ARRIVAL_COLOR = "#ff8c00"
BALANCED_COLOR = "#a2875a"

FLOW_COLORS = {
    0.0: ARRIVAL_COLOR,
    0.5: BALANCED_COLOR,
    1.0: DEPARTURE_COLOR,
}


def station_tooltip(s):
    return f"{s.total_traffic} trips ({s.departures} departures, {s.arrivals} arrivals)"


def station_color(s):
    return FLOW_COLORS[station_flow(s)]


def add_station_markers(m, stations, radius):
    """
    Draw one circle per station.
    radius: scale total_traffic -> pixels (see traffic.scales.radius_scale)
    Color encodes the quantized departure share.

    Returns {station_id: marker JS variable name} so the time slider can
    restyle markers in place.
    """
    markers = {}
    for s in stations:
        popup = [
            f"<b>{s.name or s.id}</b>",
            f"Station: {s.id}",
        ]
        if s.capacity is not None:
            popup.append(f"Capacity: {s.capacity}")

        marker = folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=radius(s.total_traffic),
            color="#ffffff",
            weight=1,
            fill=True,
            fill_color=station_color(s),
            fill_opacity=0.6,
            tooltip=station_tooltip(s),
            popup="<br>".join(popup),
        )
        marker.add_to(m)
        markers[s.id] = marker.get_name()

    return markers
