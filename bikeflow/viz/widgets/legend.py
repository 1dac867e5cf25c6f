# bikeflow/viz/widgets/legend.py
import folium

from bikeflow.viz.overlays.stations import (
    ARRIVAL_COLOR,
    BALANCED_COLOR,
    DEPARTURE_COLOR,
)


def build_legend_widget():
    """
    Floating flow legend, placed inside #map-wrap.
    """
    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  bottom: 24px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}}
.legend-dot {{
  width: 10px;
  height: 10px;
  border-radius: 50%;
  display: inline-block;
  margin-right: 6px;
}}
</style>

<div id="map-legend">
  <div><strong>Legend</strong></div>
  <div><span class="legend-dot" style="background:{DEPARTURE_COLOR}"></span> more departures</div>
  <div><span class="legend-dot" style="background:{BALANCED_COLOR}"></span> balanced</div>
  <div><span class="legend-dot" style="background:{ARRIVAL_COLOR}"></span> more arrivals</div>
</div>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const wrap = document.getElementById("map-wrap");
  const legend = document.getElementById("map-legend");
  if (wrap && legend) wrap.appendChild(legend);
}});
</script>
"""
    )
