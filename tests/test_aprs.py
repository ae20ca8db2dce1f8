import unittest
import logging
import math
import re

from latlong_codec.models import AdvisoryKind, LATITUDE, LONGITUDE
from latlong_codec.services.aprs import (
    format_latitude,
    format_longitude,
    compress_latitude,
    compress_longitude,
)


def blanked_positions(text: str) -> set:
    return {i for i, c in enumerate(text) if c == " "}


def base91_value(code: str) -> int:
    value = 0
    for c in code:
        value = value * 91 + (ord(c) - 33)
    return value


class TestUncompressedPosition(unittest.TestCase):
    def setUp(self):
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s"
        )

    def test_latitude_format(self):
        """Test ddmm.mmN layout for a range of latitudes"""
        pattern = re.compile(r"^\d{2}\d{2}\.\d{2}[NS]$")
        for i in range(-900, 901, 7):
            dlat = i / 10.0
            text = format_latitude(dlat).text
            logging.debug(f"{dlat} -> {text}")
            self.assertEqual(len(text), 8)
            self.assertRegex(text, pattern)
            self.assertEqual(text[-1], "S" if dlat < 0 else "N")

    def test_longitude_format(self):
        """Test dddmm.mmE layout for a range of longitudes"""
        pattern = re.compile(r"^\d{3}\d{2}\.\d{2}[EW]$")
        for i in range(-1800, 1801, 13):
            dlong = i / 10.0
            text = format_longitude(dlong).text
            self.assertEqual(len(text), 9)
            self.assertRegex(text, pattern)
            self.assertEqual(text[-1], "W" if dlong < 0 else "E")

    def test_known_values(self):
        self.assertEqual(format_latitude(48.1173).text, "4807.04N")
        self.assertEqual(format_latitude(-33.5).text, "3330.00S")
        self.assertEqual(format_latitude(0.0).text, "0000.00N")
        self.assertEqual(format_longitude(-122.345).text, "12220.70W")
        self.assertEqual(format_longitude(0.0).text, "00000.00E")
        self.assertEqual(format_longitude(11.5).text, "01130.00E")

    def test_latitude_ambiguity(self):
        """Test each ambiguity level blanks one more latitude digit"""
        expected = ["4807.04N", "4807.0 N", "4807.  N", "480 .  N", "48  .  N"]
        for level, text in enumerate(expected):
            self.assertEqual(format_latitude(48.1173, level).text, text)

    def test_longitude_ambiguity(self):
        """Test each ambiguity level blanks one more longitude digit"""
        expected = ["12220.70W", "12220.7 W", "12220.  W", "1222 .  W", "122  .  W"]
        for level, text in enumerate(expected):
            self.assertEqual(format_longitude(-122.345, level).text, text)

    def test_ambiguity_is_cumulative(self):
        for axis, encode, value in (
            (LATITUDE, format_latitude, 12.3456),
            (LONGITUDE, format_longitude, 123.4567),
        ):
            previous = set()
            for level in range(1, 5):
                blanks = blanked_positions(encode(value, level).text)
                self.assertTrue(previous < blanks)
                self.assertEqual(blanks, set(axis.blank_positions[:level]))
                previous = blanks

    def test_ambiguity_out_of_range_levels(self):
        self.assertEqual(format_latitude(48.1173, 7).text, format_latitude(48.1173, 4).text)
        self.assertEqual(format_latitude(48.1173, -1).text, "4807.04N")

    def test_minutes_rollover(self):
        """Test 59.999 minutes rounding up to 60.00 carries into degrees"""
        self.assertEqual(format_latitude(10.99999999).text, "1100.00N")
        self.assertEqual(format_latitude(-10.99999999).text, "1100.00S")
        self.assertEqual(format_longitude(-179.999999).text, "18000.00W")
        self.assertEqual(format_longitude(7.9999999).text, "00800.00E")

    def test_minutes_never_start_with_six(self):
        for i in range(0, 3600):
            value = i / 60.0 - 1e-9
            if value < 0:
                continue
            self.assertNotEqual(format_latitude(value).text[2], "6")
            self.assertNotEqual(format_longitude(value).text[3], "6")

    def test_clamping(self):
        result = format_latitude(95.0)
        self.assertEqual(result.text, format_latitude(90.0).text)
        self.assertEqual(result.text, "9000.00N")
        self.assertEqual(len(result.advisories), 1)
        self.assertEqual(result.advisories[0].kind, AdvisoryKind.CLAMPED)
        self.assertIs(result.advisories[0].axis, LATITUDE)

        result = format_longitude(-185.0)
        self.assertEqual(result.text, format_longitude(-180.0).text)
        self.assertEqual(result.advisories[0].kind, AdvisoryKind.CLAMPED)

        self.assertEqual(format_latitude(-90.0).advisories, [])

    def test_nan_rejected(self):
        """Test NaN degrees raise instead of producing a position"""
        with self.assertRaisesRegex(ValueError, "Latitude is not a number"):
            format_latitude(math.nan)
        with self.assertRaisesRegex(ValueError, "Longitude is not a number"):
            format_longitude(math.nan, 2)


class TestCompressedPosition(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(compress_latitude(90.0).text, "!!!!")
        self.assertEqual(compress_latitude(0.0).text, "NN!!")
        self.assertEqual(compress_latitude(-90.0).text, "{{!!")
        self.assertEqual(compress_latitude(49.5).text, "5L!!")
        self.assertEqual(compress_longitude(-180.0).text, "!!!!")
        self.assertEqual(compress_longitude(0.0).text, "NN!!")
        self.assertEqual(compress_longitude(180.0).text, "{{!!")
        self.assertEqual(compress_longitude(-72.75).text, "<*e8")

    def test_alphabet(self):
        for i in range(-180, 181, 3):
            for code in (compress_latitude(i / 2.0).text, compress_longitude(float(i)).text):
                self.assertEqual(len(code), 4)
                for c in code:
                    self.assertTrue(33 <= ord(c) <= 123)

    def test_monotonic(self):
        self.assertLess(
            base91_value(compress_latitude(90).text), base91_value(compress_latitude(0).text)
        )
        self.assertLess(
            base91_value(compress_latitude(0).text), base91_value(compress_latitude(-90).text)
        )
        self.assertLess(
            base91_value(compress_longitude(-180).text),
            base91_value(compress_longitude(0).text),
        )
        self.assertLess(
            base91_value(compress_longitude(0).text),
            base91_value(compress_longitude(180).text),
        )

        values = [base91_value(compress_longitude(i / 4.0).text) for i in range(-720, 721)]
        self.assertEqual(values, sorted(values))

    def test_clamping(self):
        result = compress_latitude(91.0)
        self.assertEqual(result.text, "!!!!")
        self.assertEqual(result.advisories[0].kind, AdvisoryKind.CLAMPED)
        result = compress_longitude(200.0)
        self.assertEqual(result.text, compress_longitude(180.0).text)
        self.assertEqual(len(result.advisories), 1)

    def test_nan_rejected(self):
        with self.assertRaisesRegex(ValueError, "Latitude is not a number"):
            compress_latitude(math.nan)
        with self.assertRaisesRegex(ValueError, "Longitude is not a number"):
            compress_longitude(math.nan)


if __name__ == "__main__":
    unittest.main()
