from __future__ import annotations

import datetime as dt
import unittest

from plandash.util.tz import normalize_tz_name, resolve_tz


class TestTimezoneResolutionContract(unittest.TestCase):
    def test_valid_timezone_identifiers_resolve(self) -> None:
        self.assertEqual(resolve_tz("UTC"), dt.timezone.utc)
        self.assertEqual(resolve_tz(None), dt.timezone.utc)
        self.assertIsNotNone(resolve_tz("local"))
        self.assertEqual(resolve_tz("+02:00").utcoffset(None), dt.timedelta(hours=2))
        self.assertEqual(resolve_tz("-0530").utcoffset(None), -dt.timedelta(hours=5, minutes=30))

    def test_invalid_timezone_identifiers_raise(self) -> None:
        with self.assertRaises(ValueError):
            resolve_tz("No/Such_Zone")
        with self.assertRaises(ValueError):
            resolve_tz("+25:00")

    def test_names_normalize(self) -> None:
        self.assertEqual(normalize_tz_name(""), "UTC")
        self.assertEqual(normalize_tz_name("gmt"), "UTC")
        self.assertEqual(normalize_tz_name("LOCAL"), "local")
        self.assertEqual(normalize_tz_name(None), "UTC")
        self.assertEqual(normalize_tz_name(" Asia/Taipei "), "Asia/Taipei")


if __name__ == "__main__":
    unittest.main(verbosity=2)
