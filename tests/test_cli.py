"""
Tests for the command-line interface
"""

import json
import unittest
from unittest.mock import patch

from sky_fakes import FakeEphemeris
from typer.testing import CliRunner

from planet_visibility.cli.main import app


runner = CliRunner()


class TestReportCommand(unittest.TestCase):
    """Test suite for the report command"""

    def setUp(self):
        """Set up test fixtures"""
        self.fake = FakeEphemeris()
        patchers = [
            patch("planet_visibility.api.visibility.load_ephemeris", return_value=self.fake),
            patch("planet_visibility.cli.main.load_ephemeris", return_value=self.fake),
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_json_output(self):
        """Test --json prints the HTTP response body"""
        result = runner.invoke(app, ["report", "--lat", "45.0105", "--lon", "-93.4556", "--date", "2024-06-21", "--json"])

        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.stdout)
        self.assertEqual(data["referenceTime"], "2024-06-21T00:00:00.000Z")
        self.assertEqual(len(data["planets"]), 7)
        self.assertEqual(data["planets"][6]["name"], "Neptune")

    def test_table_output(self):
        """Test the default table rendering"""
        result = runner.invoke(app, ["report", "--lat", "45.0105", "--lon", "-93.4556", "-d", "2024-06-21T22:00:00Z"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Planet visibility", result.output)

    def test_single_planet(self):
        """Test --planet shows position details"""
        result = runner.invoke(app, ["report", "--lat", "10", "--lon", "20", "-d", "2024-06-21", "--planet", "Mars"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Mars", result.output)
        self.assertIn("12.500h", result.output)
        self.assertIn("equatorial", self.fake.calls)

    def test_unknown_planet(self):
        """Test an unknown planet name is rejected"""
        result = runner.invoke(app, ["report", "--lat", "10", "--lon", "20", "--planet", "pluto"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unknown planet", result.output)
        self.assertEqual(self.fake.calls, [])

    def test_invalid_coordinates(self):
        """Test out-of-range coordinates exit with an error"""
        result = runner.invoke(app, ["report", "--lat", "200", "--lon", "0"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid coordinates", result.output)
        self.assertEqual(self.fake.calls, [])

    def test_invalid_date(self):
        """Test an unparseable date exits with an error"""
        result = runner.invoke(app, ["report", "--lat", "10", "--lon", "0", "--date", "yesterday"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid date", result.output)


class TestServeCommand(unittest.TestCase):
    """Test suite for the serve command"""

    @patch("uvicorn.run")
    def test_serve_runs_uvicorn(self, mock_run):
        """Test serve hands the app to uvicorn"""
        result = runner.invoke(app, ["serve", "--port", "9001"])

        self.assertEqual(result.exit_code, 0, result.output)
        mock_run.assert_called_once_with("planet_visibility.server.app:app", host="127.0.0.1", port=9001, reload=False)


if __name__ == "__main__":
    unittest.main()
