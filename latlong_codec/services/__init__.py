"""Encoders and decoders for APRS and NMEA 0183 coordinate fields."""

from .aprs import (
    format_latitude,
    format_longitude,
    compress_latitude,
    compress_longitude,
)
from .nmea0183 import (
    format_nmea_latitude,
    format_nmea_longitude,
    parse_nmea_latitude,
    parse_nmea_longitude,
)
from .reporting import report_advisories
from .track_encoder import compress_track

__all__ = [
    "format_latitude",
    "format_longitude",
    "compress_latitude",
    "compress_longitude",
    "format_nmea_latitude",
    "format_nmea_longitude",
    "parse_nmea_latitude",
    "parse_nmea_longitude",
    "report_advisories",
    "compress_track",
]
