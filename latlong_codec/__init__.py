"""
Latitude/Longitude Codec
Converts coordinates to and from APRS position fields and NMEA 0183 sentence fields.
"""

from .codec import (
    latitude_to_str,
    longitude_to_str,
    latitude_to_comp_str,
    longitude_to_comp_str,
    latitude_to_nmea,
    longitude_to_nmea,
    latitude_from_nmea,
    longitude_from_nmea,
)
from .models.coordinate import UNKNOWN_COORDINATE

__version__ = "0.1.0"

__all__ = [
    "UNKNOWN_COORDINATE",
    "latitude_to_str",
    "longitude_to_str",
    "latitude_to_comp_str",
    "longitude_to_comp_str",
    "latitude_to_nmea",
    "longitude_to_nmea",
    "latitude_from_nmea",
    "longitude_from_nmea",
]
