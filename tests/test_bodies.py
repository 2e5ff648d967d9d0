"""
Unit tests for bodies.py
"""

import re
import unittest

from planet_visibility.api.bodies import PLANETS, get_planet
from planet_visibility.api.ephemeris import BODY_NAMES


class TestPlanets(unittest.TestCase):
    """Test suite for planet descriptors"""

    def test_canonical_order(self):
        """Test Mercury through Neptune, in order from the Sun"""
        self.assertEqual(
            [p.key for p in PLANETS], ["mercury", "venus", "mars", "jupiter", "saturn", "uranus", "neptune"]
        )

    def test_every_planet_has_an_ephemeris_body(self):
        """Test each key resolves to a kernel segment"""
        for planet in PLANETS:
            self.assertIn(planet.key, BODY_NAMES)

    def test_display_metadata(self):
        """Test colors are CSS hex values and tips are present"""
        for planet in PLANETS:
            with self.subTest(planet=planet.key):
                self.assertRegex(planet.color, re.compile(r"^#[0-9a-fA-F]{6}$"))
                self.assertTrue(planet.symbol)
                self.assertTrue(planet.tip)

    def test_get_planet(self):
        """Test lookup ignores case and surrounding spaces"""
        self.assertEqual(get_planet(" Saturn ").name, "Saturn")
        self.assertIsNone(get_planet("pluto"))
