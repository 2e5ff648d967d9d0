"""
Tests for the HTTP API
"""

import unittest
from datetime import UTC, datetime
from pathlib import Path

from fastapi.testclient import TestClient
from sky_fakes import FakeEphemeris

from planet_visibility.api.core.config import Settings
from planet_visibility.server.app import create_app
from planet_visibility.server.middleware import RateLimitStore


def _settings(**overrides) -> Settings:
    return Settings(skyfield_dir=Path("/tmp/planet-visibility-tests"), **overrides)


class TestPlanetsEndpoint(unittest.TestCase):
    """Test suite for GET /api/planets"""

    def setUp(self):
        """Set up test fixtures"""
        self.fake = FakeEphemeris()
        self.client = TestClient(create_app(_settings(), ephemeris=self.fake))

    def test_report(self):
        """Test a valid request returns all seven planets"""
        response = self.client.get("/api/planets", params={"lat": "45.0105", "lon": "-93.4556", "date": "2024-06-21"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["referenceTime"], "2024-06-21T00:00:00.000Z")
        self.assertEqual(data["location"], {"lat": 45.0105, "lon": -93.4556})
        self.assertEqual([p["name"] for p in data["planets"]][:3], ["Mercury", "Venus", "Mars"])
        self.assertEqual(len(data["planets"]), 7)

    def test_windows_inside_day(self):
        """Test reported windows are within the requested UTC day"""
        data = self.client.get("/api/planets", params={"lat": "10", "lon": "20", "date": "2024-06-21"}).json()
        day_start = datetime.fromisoformat("2024-06-21T00:00:00+00:00")
        day_end = datetime.fromisoformat("2024-06-22T00:00:00+00:00")
        for planet in data["planets"]:
            self.assertEqual(planet["visibleTonight"], bool(planet["nighttimeWindows"]))
            for window in planet["nighttimeWindows"]:
                start = datetime.fromisoformat(window["start"])
                end = datetime.fromisoformat(window["end"])
                self.assertTrue(day_start <= start < end <= day_end)

    def test_cache_control_header(self):
        """Test successful responses are cacheable"""
        response = self.client.get("/api/planets", params={"lat": "10", "lon": "20", "date": "2024-06-21"})
        self.assertEqual(response.headers["cache-control"], "public, s-maxage=60, stale-while-revalidate=120")

    def test_invalid_coordinates(self):
        """Test out-of-range, missing and non-numeric coordinates"""
        for params in ({"lat": "200", "lon": "0"}, {"lon": "0"}, {"lat": "abc", "lon": "0"}, {}):
            with self.subTest(params=params):
                response = self.client.get("/api/planets", params=params)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"error": "Invalid coordinates"})
        self.assertEqual(self.fake.calls, [])

    def test_invalid_date(self):
        """Test an unparseable date"""
        response = self.client.get("/api/planets", params={"lat": "10", "lon": "20", "date": "not-a-date"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid date"})
        self.assertEqual(self.fake.calls, [])

    def test_dates_the_server_cannot_compute(self):
        """Test parseable dates outside the supported range are client errors"""
        fake = FakeEphemeris(coverage=(datetime(1849, 12, 26, tzinfo=UTC), datetime(2150, 1, 22, tzinfo=UTC)))
        client = TestClient(create_app(_settings(), ephemeris=fake), raise_server_exceptions=False)
        for date in ("9999-12-31", "1800-01-01", "2200-06-21"):
            with self.subTest(date=date):
                response = client.get("/api/planets", params={"lat": "10", "lon": "20", "date": date})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"error": "Invalid date"})
        self.assertEqual(fake.calls, [])

    def test_coordinates_checked_before_date(self):
        """Test coordinate errors take precedence"""
        response = self.client.get("/api/planets", params={"lat": "100", "lon": "20", "date": "garbage"})
        self.assertEqual(response.json(), {"error": "Invalid coordinates"})

    def test_healthz(self):
        """Test the health check"""
        response = self.client.get("/healthz")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})


class TestRateLimit(unittest.TestCase):
    """Test suite for the rate limiter"""

    def test_limit_enforced(self):
        """Test requests over the limit are rejected"""
        app = create_app(_settings(rate_limit_enabled=True, rate_limit_per_minute=2), ephemeris=FakeEphemeris())
        client = TestClient(app)

        self.assertEqual(client.get("/healthz").status_code, 200)
        self.assertEqual(client.get("/healthz").status_code, 200)
        response = client.get("/healthz")
        self.assertEqual(response.status_code, 429)
        self.assertEqual(response.json(), {"error": "Rate limit exceeded"})

    def test_disabled_by_default(self):
        """Test no limit applies unless enabled"""
        client = TestClient(create_app(_settings(rate_limit_per_minute=1), ephemeris=FakeEphemeris()))
        for _ in range(3):
            self.assertEqual(client.get("/healthz").status_code, 200)

    def test_store_window_expires(self):
        """Test old hits fall out of the window"""
        store = RateLimitStore(window_seconds=60)
        self.assertEqual(store.hit("a", now=0.0), 1)
        self.assertEqual(store.hit("a", now=30.0), 2)
        self.assertEqual(store.hit("b", now=30.0), 1)
        self.assertEqual(store.hit("a", now=61.0), 2)

    def test_idle_clients_are_dropped(self):
        """Test clients with no request inside the window stop being tracked"""
        store = RateLimitStore(window_seconds=60)
        for i in range(5):
            store.hit(f"10.0.0.{i}", now=0.0)
        self.assertEqual(len(store), 5)

        store.hit("10.0.0.9", now=90.0)
        self.assertEqual(len(store), 1)
        self.assertEqual(store.hit("10.0.0.1", now=91.0), 1)


if __name__ == "__main__":
    unittest.main()
