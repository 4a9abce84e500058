import unittest
from datetime import datetime, timezone

from onedriveshare.util.time import normalize_dt, parse_rfc3339, to_rfc3339


class TestUtilTime(unittest.TestCase):
    def test_normalize_dt_rejects_naive(self) -> None:
        naive = datetime(2019, 1, 1, 12, 0, 0)
        with self.assertRaises(ValueError):
            normalize_dt(naive)

    def test_parse_rfc3339_z(self) -> None:
        dt = parse_rfc3339("2019-12-24T12:34:56Z")
        self.assertEqual(dt.tzinfo, timezone.utc)
        self.assertEqual(dt, datetime(2019, 12, 24, 12, 34, 56, tzinfo=timezone.utc))

    def test_parse_rfc3339_fractional_z(self) -> None:
        dt = parse_rfc3339("2019-12-24T12:34:56.123Z")
        self.assertEqual(dt, datetime(2019, 12, 24, 12, 34, 56, 123000, tzinfo=timezone.utc))

    def test_parse_rfc3339_seven_fraction_digits(self) -> None:
        dt = parse_rfc3339("2019-12-24T12:34:56.1234567Z")
        self.assertEqual(dt, datetime(2019, 12, 24, 12, 34, 56, 123456, tzinfo=timezone.utc))

    def test_parse_rfc3339_short_fraction(self) -> None:
        dt = parse_rfc3339("2019-12-24T12:34:56.5Z")
        self.assertEqual(dt, datetime(2019, 12, 24, 12, 34, 56, 500000, tzinfo=timezone.utc))

    def test_parse_rfc3339_offset_converts_to_utc(self) -> None:
        dt = parse_rfc3339("2019-12-24T12:34:56+09:00")
        self.assertEqual(dt.tzinfo, timezone.utc)
        self.assertEqual(dt, datetime(2019, 12, 24, 3, 34, 56, tzinfo=timezone.utc))

    def test_parse_rfc3339_rejects_garbage(self) -> None:
        for bad in ("", "yesterday", "2019-13-45T00:00:00Z"):
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    parse_rfc3339(bad)

    def test_parse_rfc3339_rejects_naive(self) -> None:
        with self.assertRaises(ValueError):
            parse_rfc3339("2019-12-24T12:34:56")

    def test_to_rfc3339_outputs_z(self) -> None:
        dt = datetime(2019, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        self.assertEqual(to_rfc3339(dt), "2019-01-01T00:00:00.000000Z")


if __name__ == "__main__":
    unittest.main()
