"""
Latitude and longitude conversions for position reports.

These functions return plain values, the way packet and sentence builders
want them, and send any advisories (clamped input, suspicious NMEA fields)
to the "latlong_codec" logger. Use latlong_codec.services directly to get
the advisories back instead.
"""

from typing import Optional, Tuple

from latlong_codec.services.aprs import (
    compress_latitude,
    compress_longitude,
    format_latitude,
    format_longitude,
)
from latlong_codec.services.nmea0183 import (
    format_nmea_latitude,
    format_nmea_longitude,
    parse_nmea_latitude,
    parse_nmea_longitude,
)
from latlong_codec.services.reporting import report_advisories


def latitude_to_str(dlat: float, ambiguity: int = 0) -> str:
    """Latitude as ddmm.mm[NS] with `ambiguity` trailing digits blanked"""
    result = format_latitude(dlat, ambiguity)
    report_advisories(result.advisories)
    return result.text


def longitude_to_str(dlong: float, ambiguity: int = 0) -> str:
    """Longitude as dddmm.mm[EW] with `ambiguity` trailing digits blanked"""
    result = format_longitude(dlong, ambiguity)
    report_advisories(result.advisories)
    return result.text


def latitude_to_comp_str(dlat: float) -> str:
    result = compress_latitude(dlat)
    report_advisories(result.advisories)
    return result.text


def longitude_to_comp_str(dlong: float) -> str:
    result = compress_longitude(dlong)
    report_advisories(result.advisories)
    return result.text


def latitude_to_nmea(dlat: Optional[float]) -> Tuple[str, str]:
    """Latitude as the (ddmm.mmmm, N/S) field pair, ("", "") when unknown"""
    result = format_nmea_latitude(dlat)
    report_advisories(result.advisories)
    return result.value, result.hemisphere


def longitude_to_nmea(dlong: Optional[float]) -> Tuple[str, str]:
    """Longitude as the (dddmm.mmmm, E/W) field pair, ("", "") when unknown"""
    result = format_nmea_longitude(dlong)
    report_advisories(result.advisories)
    return result.value, result.hemisphere


def latitude_from_nmea(token: str, hemisphere: str) -> Optional[float]:
    """Signed latitude from NMEA fields, UNKNOWN_COORDINATE if malformed"""
    result = parse_nmea_latitude(token, hemisphere)
    report_advisories(result.advisories)
    return result.degrees


def longitude_from_nmea(token: str, hemisphere: str) -> Optional[float]:
    """Signed longitude from NMEA fields, UNKNOWN_COORDINATE if malformed"""
    result = parse_nmea_longitude(token, hemisphere)
    report_advisories(result.advisories)
    return result.degrees
