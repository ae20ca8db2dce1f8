import math
import string
from typing import Optional

from latlong_codec.models.coordinate import (
    LATITUDE,
    LONGITUDE,
    UNKNOWN_COORDINATE,
    Advisory,
    AdvisoryKind,
    Axis,
    DecodedCoordinate,
    NMEACoordinate,
)
from latlong_codec.utils.coordinate_utils import (
    clamp_degrees,
    hemisphere_for,
    leading_float,
    split_degrees_minutes,
)


def _is_unknown(value: Optional[float]) -> bool:
    return value is UNKNOWN_COORDINATE or math.isnan(value)


def _format_nmea(value: Optional[float], axis: Axis) -> NMEACoordinate:
    if _is_unknown(value):
        return NMEACoordinate("", "")

    value, advisories = clamp_degrees(value, axis)
    hemisphere = hemisphere_for(value, axis)
    degrees, minutes = split_degrees_minutes(abs(value), decimals=4)
    return NMEACoordinate(
        f"{degrees:0{axis.degree_digits}d}{minutes}", hemisphere, advisories
    )


def format_nmea_latitude(dlat: Optional[float]) -> NMEACoordinate:
    """
    Convert latitude to the two fields of an NMEA 0183 sentence.

    Args:
        dlat: Latitude in decimal degrees, or UNKNOWN_COORDINATE

    Returns:
        NMEACoordinate: value in format ddmm.mmmm and hemisphere N/S,
            both empty when the latitude is unknown
    """
    return _format_nmea(dlat, LATITUDE)


def format_nmea_longitude(dlong: Optional[float]) -> NMEACoordinate:
    """
    Convert longitude to the two fields of an NMEA 0183 sentence.

    Args:
        dlong: Longitude in decimal degrees, or UNKNOWN_COORDINATE

    Returns:
        NMEACoordinate: value in format dddmm.mmmm and hemisphere E/W,
            both empty when the longitude is unknown
    """
    return _format_nmea(dlong, LONGITUDE)


def _parse_nmea(token: str, hemisphere: str, axis: Axis) -> DecodedCoordinate:
    digits = axis.degree_digits
    if not token or token[0] not in string.digits:
        return DecodedCoordinate(UNKNOWN_COORDINATE)
    if len(token) <= axis.separator_index or token[axis.separator_index] != ".":
        return DecodedCoordinate(UNKNOWN_COORDINATE)
    if not all(c in string.digits for c in token[:digits]):
        return DecodedCoordinate(UNKNOWN_COORDINATE)

    degrees = int(token[:digits]) + leading_float(token[digits:]) / 60.0

    advisories = []
    if degrees < 0 or degrees > axis.limit:
        advisories.append(
            Advisory(
                AdvisoryKind.OUT_OF_RANGE,
                axis,
                f"{axis.name} not in range of 0 to {axis.limit:.0f}.",
            )
        )

    # Only the first character of the hemisphere field counts.
    hemi = hemisphere[:1] if hemisphere else ""
    if hemi not in (axis.positive, axis.negative, ""):
        advisories.append(
            Advisory(
                AdvisoryKind.UNEXPECTED_HEMISPHERE,
                axis,
                f"{axis.name} hemisphere should be {axis.positive} or {axis.negative}.",
            )
        )

    # Empty hemisphere: value stays positive. Sentences with status V are the
    # caller's to discard.
    if hemi == axis.negative:
        degrees = -degrees

    return DecodedCoordinate(degrees, advisories)


def parse_nmea_latitude(token: str, hemisphere: str) -> DecodedCoordinate:
    """
    Convert an NMEA 0183 latitude field pair to signed decimal degrees.

    The numeric field has 2 digits of degrees, 2 digits of minutes, a period
    and a variable number of fractional minute digits (2, 3 and 4 are common).

    Args:
        token: Numeric field, e.g. "4807.038"
        hemisphere: Following field, should be N, S or empty

    Returns:
        DecodedCoordinate: degrees (negative for South), or unknown when the
            field is malformed
    """
    return _parse_nmea(token, hemisphere, LATITUDE)


def parse_nmea_longitude(token: str, hemisphere: str) -> DecodedCoordinate:
    """
    Convert an NMEA 0183 longitude field pair to signed decimal degrees.

    Same layout as latitude with 3 digits of degrees.

    Args:
        token: Numeric field, e.g. "01131.000"
        hemisphere: Following field, should be E, W or empty

    Returns:
        DecodedCoordinate: degrees (negative for West), or unknown when the
            field is malformed
    """
    return _parse_nmea(token, hemisphere, LONGITUDE)
