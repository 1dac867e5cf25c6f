"""Tests for station and trip loading."""

import json
import os
import tempfile
import unittest
from datetime import datetime

from bikeflow.traffic.aggregator import load_aggregator
from bikeflow.util.fetch import is_url
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trip_frame, load_trips

STATIONS_JSON = {
    "data": {
        "stations": [
            {"short_name": "A32000", "name": "Kendall T", "lat": "42.3625", "lon": "-71.0843", "capacity": 19},
            {"short_name": "B32006", "name": "MIT Stata", "lat": 42.3617, "lon": -71.0909},
            {"short_name": "BAD1", "name": "No coords", "lat": None, "lon": -71.0},
            {"short_name": "BAD2", "name": "Garbage", "lat": "abc", "lon": "-71.0"},
            {"short_name": "BAD3", "name": "Inf", "lat": "inf", "lon": "-71.0"},
        ]
    }
}

TRIPS_CSV = """ride_id,rideable_type,started_at,ended_at,start_station_id,end_station_id,is_member
r1,classic_bike,2024-03-01 08:15:10.123,2024-03-01 08:30:00.000,A32000,B32006,1
r2,electric_bike,2024-03-02 23:59:59,2024-03-03 00:10:00,B32006,A32000,0
r3,classic_bike,not a date,2024-03-03 00:10:00,B32006,A32000,0
r4,classic_bike,2024-03-02 10:00:00,2024-03-02 10:05:00,,A32000,0
"""


class LoaderTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, name, text):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path


class TestLoadStations(LoaderTestCase):

    def test_filters_non_finite_coordinates(self):
        path = self.write("stations.json", json.dumps(STATIONS_JSON))
        stations = load_stations(path)

        self.assertEqual([s.id for s in stations], ["A32000", "B32006"])
        self.assertAlmostEqual(stations[0].lat, 42.3625)
        self.assertEqual(stations[0].capacity, 19)
        self.assertIsNone(stations[1].capacity)
        self.assertEqual(stations[0].total_traffic, 0)

    def test_missing_stations_key(self):
        path = self.write("stations.json", json.dumps({"data": {}}))
        with self.assertRaises(ValueError):
            load_stations(path)


class TestLoadTrips(LoaderTestCase):

    def test_parses_and_drops_malformed_rows(self):
        path = self.write("trips.csv", TRIPS_CSV)
        trips = load_trips(path)

        self.assertEqual(len(trips), 2)
        self.assertEqual(trips[0].start_station_id, "A32000")
        self.assertEqual(trips[0].end_station_id, "B32006")
        self.assertEqual(trips[0].started_at.replace(microsecond=0), datetime(2024, 3, 1, 8, 15, 10))
        self.assertEqual(trips[1].ended_at, datetime(2024, 3, 3, 0, 10))

    def test_missing_columns(self):
        path = self.write("trips.csv", "started_at,ended_at\n2024-03-01 00:00,2024-03-01 00:01\n")
        with self.assertRaises(ValueError) as ctx:
            load_trip_frame(path)
        self.assertIn("start_station_id", str(ctx.exception))


class TestLoadAggregator(LoaderTestCase):

    def test_builds_ready_aggregator(self):
        stations = self.write("stations.json", json.dumps(STATIONS_JSON))
        trips = self.write("trips.csv", TRIPS_CSV)

        agg = load_aggregator(stations, trips)
        self.assertEqual(agg.trip_count, 2)

        a, b = agg.compute_station_traffic(None)
        self.assertEqual((a.departures, a.arrivals), (1, 1))
        self.assertEqual((b.departures, b.arrivals), (1, 1))

        # 23:59 departure and 00:10 arrival both fall around midnight
        a, b = agg.compute_station_traffic(0)
        self.assertEqual((a.departures, a.arrivals), (0, 1))
        self.assertEqual((b.departures, b.arrivals), (1, 0))


class TestFetch(unittest.TestCase):

    def test_is_url(self):
        self.assertTrue(is_url("https://example.com/x.json"))
        self.assertTrue(is_url("http://example.com/x.json"))
        self.assertFalse(is_url("data/x.json"))


if __name__ == "__main__":
    unittest.main()
