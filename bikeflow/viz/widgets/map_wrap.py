# bikeflow/viz/widgets/map_wrap.py
import json

import folium


def build_map_wrap_widget(*, title=None):
    """
    Wraps the leaflet container in #map-wrap so the other widgets can be
    positioned on top of the map. Must be added before them.
    """
    title_js = ""
    if title:
        title_js = (
            "const t = document.createElement('div');"
            "t.id = 'map-title';"
            f"t.textContent = {json.dumps(title)};"
            "wrap.appendChild(t);"
        )

    return folium.Element(
        f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 85vh !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl || document.getElementById("map-wrap")) return;

  const wrap = document.createElement("div");
  wrap.id = "map-wrap";
  mapEl.parentNode.insertBefore(wrap, mapEl);
  wrap.appendChild(mapEl);

  {title_js}
}});
</script>
"""
    )
