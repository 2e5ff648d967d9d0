"""
Unit tests for core/utils.py
"""

import unittest
from datetime import UTC, datetime, timedelta, timezone

from planet_visibility.api.core.utils import azimuth_to_compass, ensure_utc, format_instant, round_half_up, round_tenth


class TestAzimuthToCompass(unittest.TestCase):
    """Test suite for azimuth_to_compass function"""

    def test_cardinal_points(self):
        """Test the four cardinal directions"""
        self.assertEqual(azimuth_to_compass(0.0), "N")
        self.assertEqual(azimuth_to_compass(90.0), "E")
        self.assertEqual(azimuth_to_compass(180.0), "S")
        self.assertEqual(azimuth_to_compass(270.0), "W")

    def test_intermediate_points(self):
        """Test secondary and tertiary directions"""
        self.assertEqual(azimuth_to_compass(22.5), "NNE")
        self.assertEqual(azimuth_to_compass(135.0), "SE")
        self.assertEqual(azimuth_to_compass(292.5), "WNW")

    def test_sector_boundary_rounds_up(self):
        """Test an azimuth exactly between two points takes the clockwise one"""
        self.assertEqual(azimuth_to_compass(11.25), "NNE")
        self.assertEqual(azimuth_to_compass(33.75), "NE")

    def test_wraps_to_north(self):
        """Test azimuths near 360 map back to north"""
        self.assertEqual(azimuth_to_compass(355.0), "N")
        self.assertEqual(azimuth_to_compass(348.75), "N")
        self.assertEqual(azimuth_to_compass(360.0), "N")


class TestRoundHalfUp(unittest.TestCase):
    """Test suite for round_half_up function"""

    def test_halves_round_up(self):
        """Test halves go up rather than to even"""
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.49), 2)


class TestRoundTenth(unittest.TestCase):
    """Test suite for round_tenth function"""

    def test_ties_round_away_from_zero(self):
        """Test exact ties go up in magnitude rather than to even"""
        self.assertEqual(round_tenth(0.25), 0.3)
        self.assertEqual(round_tenth(10.25), 10.3)
        self.assertEqual(round_tenth(-4.75), -4.8)

    def test_uses_stored_value(self):
        """Test values just below a tie round down"""
        self.assertEqual(round_tenth(0.15), 0.1)
        self.assertEqual(round_tenth(61.26), 61.3)
        self.assertEqual(round_tenth(-12.34), -12.3)


class TestTimeFormatting(unittest.TestCase):
    """Test suite for time helpers"""

    def test_format_instant(self):
        """Test ISO format with milliseconds and Z suffix"""
        self.assertEqual(format_instant(datetime(2024, 6, 21, 3, 15, 7, 250000, tzinfo=UTC)), "2024-06-21T03:15:07.250Z")

    def test_format_instant_converts_offset(self):
        """Test non-UTC instants are converted"""
        dt = datetime(2024, 6, 21, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(format_instant(dt), "2024-06-20T23:00:00.000Z")

    def test_ensure_utc_naive(self):
        """Test naive datetimes are tagged as UTC"""
        self.assertEqual(ensure_utc(datetime(2024, 1, 1, 12)), datetime(2024, 1, 1, 12, tzinfo=UTC))


if __name__ == "__main__":
    unittest.main()
