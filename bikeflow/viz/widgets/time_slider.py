# bikeflow/viz/widgets/time_slider.py
import json

import folium

from bikeflow.traffic.buckets import MINUTES_PER_DAY
from bikeflow.viz.time_label import ANY_TIME, format_time


def build_time_slider(minute, *, markers, endpoint="stations.json", param="minute"):
    """
    Time filter slider:
      - range [-1, 1439], -1 = any time
      - every move fetches `endpoint`?minute=<value> and restyles the
        markers in place (radius, fill color, tooltip); no page reload
      - the page URL follows the slider so a reload keeps the filter

    markers: {station_id: marker JS variable name} from add_station_markers
    """
    value = ANY_TIME if minute is None else int(minute)
    label = format_time(minute)

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter input {{
  width: 240px;
  display: block;
}}
#selected-time {{
  display: block;
  font-weight: 600;
}}
#any-time {{
  color: #666;
  font-style: italic;
  display: {"block" if minute is None else "none"};
}}
</style>

<div id="time-filter">
  <label for="time-slider">Filter by time:</label>
  <input id="time-slider" type="range" min="{ANY_TIME}" max="{MINUTES_PER_DAY - 1}" value="{value}">
  <time id="selected-time">{label}</time>
  <em id="any-time">(any time)</em>
</div>

<script>
const STATION_MARKERS = {json.dumps(markers)};
let trafficRequest = 0;

function updateTimeDisplay(value, text) {{
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  selected.textContent = text;
  anyTime.style.display = value === {ANY_TIME} ? "block" : "none";
}}

function updateScatterPlot(value) {{
  const seq = ++trafficRequest;
  const url = new URL("{endpoint}", window.location.href);
  url.searchParams.set("{param}", String(value));

  fetch(url)
    .then((resp) => resp.json())
    .then((body) => {{
      // a newer move already superseded this one
      if (seq !== trafficRequest) return;

      updateTimeDisplay(value, body.label);
      body.stations.forEach((s) => {{
        const marker = window[STATION_MARKERS[s.id]];
        if (!marker) return;
        marker.setRadius(s.radius);
        marker.setStyle({{ fillColor: s.color }});
        marker.setTooltipContent(s.tooltip);
      }});
    }});

  const page = new URL(window.location.href);
  page.searchParams.set("{param}", String(value));
  window.history.replaceState(null, "", page.toString());
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  if (!slider) return;

  slider.addEventListener("input", () => updateScatterPlot(Number(slider.value)));

  const wrap = document.getElementById("map-wrap");
  const box = document.getElementById("time-filter");
  if (wrap && box) wrap.appendChild(box);
}});
</script>
"""
    )
