#!/usr/bin/env python3
"""
Test suite for free-text and location matching.
"""

import unittest

from career_crush.scorer.text_match import (
    contains_either,
    location_matches,
    matches_any,
    normalize,
)


class TestContainment(unittest.TestCase):

    def test_normalize(self):
        self.assertEqual(normalize("  Product Designer "), "product designer")
        self.assertEqual(normalize(None), "")

    def test_contains_either_direction(self):
        self.assertTrue(contains_either("Senior Product Designer", "product designer"))
        self.assertTrue(contains_either("Tech", "Technology"))
        self.assertFalse(contains_either("Finance", "Healthcare"))

    def test_blank_never_matches(self):
        self.assertFalse(contains_either("", "anything"))
        self.assertFalse(contains_either("   ", "anything"))
        self.assertFalse(contains_either(None, "anything"))

    def test_matches_any_returns_first_hit(self):
        hit = matches_any("UX Designer", ["", "Engineer", "designer", "UX"])
        self.assertEqual(hit, "designer")
        self.assertIsNone(matches_any("UX Designer", ["Engineer"]))
        self.assertIsNone(matches_any(None, ["Engineer"]))


class TestLocationMatches(unittest.TestCase):

    def test_direct_containment(self):
        self.assertTrue(location_matches("Austin, TX", "austin"))
        self.assertTrue(location_matches("NYC", "NYC Metro Area"))

    def test_region_preference(self):
        self.assertTrue(location_matches("Nashville, TN", "South"))
        self.assertTrue(location_matches("Palo Alto, CA", "Bay Area"))
        self.assertTrue(location_matches("Arlington, VA", "DC Metro"))

    def test_region_overlapping_preference_name(self):
        # "silicon valley area" is not a region key but contains one
        self.assertTrue(location_matches("Sunnyvale, CA", "Silicon Valley area"))

    def test_region_places_match_whole_tokens(self):
        # "la" (west) must not match inside "atlanta"
        self.assertFalse(location_matches("Atlanta, GA", "West"))
        self.assertTrue(location_matches("Atlanta, GA", "South"))

    def test_no_match(self):
        self.assertFalse(location_matches("Denver, CO", "Boston"))
        self.assertFalse(location_matches(None, "Boston"))
        self.assertFalse(location_matches("Denver", ""))

    def test_custom_regions(self):
        regions = {"music city": ["nashville"]}
        self.assertTrue(location_matches("Nashville, TN", "Music City", regions))
        self.assertFalse(location_matches("Memphis, TN", "Music City", regions))


if __name__ == '__main__':
    unittest.main()
