# bikeflow/config.py
DATA = {
    "lanes": {
        "boston": (
            "https://bostonopendata-boston.opendata.arcgis.com/datasets/"
            "boston::existing-bike-network-2022.geojson"
        ),
        "cambridge": (
            "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/"
            "Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson"
        ),
    },
    "stations": "https://dsc106.com/labs/lab07/data/bluebikes-stations.json",
    "trips": "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv",
}

CENTER_LAT = 42.36
CENTER_LON = -71.09
ZOOM_START = 12
MIN_ZOOM = 5
MAX_ZOOM = 18

LANE_STYLE = {
    "color": "#32D400",
    "weight": 3,
    "opacity": 0.4,
}

FETCH_TIMEOUT = 60
