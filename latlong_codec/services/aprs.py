from latlong_codec.models.coordinate import (
    LATITUDE,
    LONGITUDE,
    Axis,
    EncodedCoordinate,
)
from latlong_codec.utils.coordinate_utils import (
    blank_ambiguous_digits,
    clamp_degrees,
    hemisphere_for,
    round_half_up,
    split_degrees_minutes,
    to_base91,
)


def _format_uncompressed(value: float, ambiguity: int, axis: Axis) -> EncodedCoordinate:
    value, advisories = clamp_degrees(value, axis)
    hemisphere = hemisphere_for(value, axis)
    degrees, minutes = split_degrees_minutes(abs(value), decimals=2)
    text = f"{degrees:0{axis.degree_digits}d}{minutes}{hemisphere}"
    return EncodedCoordinate(
        blank_ambiguous_digits(text, ambiguity, axis), advisories
    )


def format_latitude(dlat: float, ambiguity: int = 0) -> EncodedCoordinate:
    """
    Convert latitude to the uncompressed APRS position field.

    Args:
        dlat: Latitude in decimal degrees (clamped to -90..90)
        ambiguity: 1 to 4 blanks that many trailing digits, 0 keeps full precision

    Returns:
        EncodedCoordinate: text in format ddmm.mm[NS]
    """
    return _format_uncompressed(dlat, ambiguity, LATITUDE)


def format_longitude(dlong: float, ambiguity: int = 0) -> EncodedCoordinate:
    """
    Convert longitude to the uncompressed APRS position field.

    Position ambiguity in latitude applies to longitude implicitly on the
    air; the longitude digits are blanked too so the text reads the same.

    Args:
        dlong: Longitude in decimal degrees (clamped to -180..180)
        ambiguity: 1 to 4 blanks that many trailing digits, 0 keeps full precision

    Returns:
        EncodedCoordinate: text in format dddmm.mm[EW]
    """
    return _format_uncompressed(dlong, ambiguity, LONGITUDE)


def _compress(value: float, axis: Axis) -> EncodedCoordinate:
    value, advisories = clamp_degrees(value, axis)
    scaled = round_half_up(axis.compress_scale * (axis.limit + axis.compress_sign * value))
    return EncodedCoordinate(to_base91(scaled), advisories)


def compress_latitude(dlat: float) -> EncodedCoordinate:
    """Convert latitude to the 4 character base-91 field of a compressed position (yyyy)"""
    return _compress(dlat, LATITUDE)


def compress_longitude(dlong: float) -> EncodedCoordinate:
    """Convert longitude to the 4 character base-91 field of a compressed position (xxxx)"""
    return _compress(dlong, LONGITUDE)
