import math
import re
from typing import List, Tuple

from latlong_codec.models.coordinate import Advisory, AdvisoryKind, Axis

BASE91_OFFSET = 33  # '!'
BASE91_WIDTH = 4

_LEADING_NUMBER = re.compile(r"\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def clamp_degrees(value: float, axis: Axis) -> Tuple[float, List[Advisory]]:
    """
    Clamp a degree value to the legal range of an axis.

    Args:
        value: Degrees, any float
        axis: LATITUDE or LONGITUDE

    Returns:
        Tuple[float, List[Advisory]]: (clamped value, CLAMPED advisory if one was needed)

    Raises:
        ValueError: If value is NaN
    """
    if math.isnan(value):
        raise ValueError(f"{axis.name} is not a number")
    if value < -axis.limit:
        return -axis.limit, [
            Advisory(
                AdvisoryKind.CLAMPED,
                axis,
                f"{axis.name} is less than {-axis.limit:.0f}.  Changing to {-axis.limit:.0f}.",
            )
        ]
    if value > axis.limit:
        return axis.limit, [
            Advisory(
                AdvisoryKind.CLAMPED,
                axis,
                f"{axis.name} is greater than {axis.limit:.0f}.  Changing to {axis.limit:.0f}.",
            )
        ]
    return value, []


def hemisphere_for(value: float, axis: Axis) -> str:
    return axis.negative if value < 0 else axis.positive


def split_degrees_minutes(magnitude: float, decimals: int) -> Tuple[int, str]:
    """
    Split a non-negative degree value into whole degrees and formatted minutes.

    Minutes are zero padded to two integer digits. Round-off can turn 59.999...
    into "60.00"; that carries into the degrees and the minutes restart at "00".

    Args:
        magnitude: Absolute degree value
        decimals: Number of fractional minute digits (2 for APRS, 4 for NMEA)

    Returns:
        Tuple[int, str]: (whole degrees, minutes text)
    """
    degrees = int(magnitude)
    minutes = (magnitude - degrees) * 60
    text = f"{minutes:0{decimals + 3}.{decimals}f}"
    if text[0] == "6":
        text = "0" + text[1:]
        degrees += 1
    return degrees, text


def blank_ambiguous_digits(text: str, ambiguity: int, axis: Axis) -> str:
    """Replace the trailing digit positions hidden by an ambiguity level with spaces"""
    level = max(0, min(ambiguity, len(axis.blank_positions)))
    if level == 0:
        return text
    chars = list(text)
    for position in axis.blank_positions[:level]:
        chars[position] = " "
    return "".join(chars)


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves away from zero"""
    return int(math.floor(value + 0.5))


def to_base91(number: int, width: int = BASE91_WIDTH) -> str:
    """Encode a non-negative integer as fixed-width base-91, most significant first"""
    digits = []
    for power in range(width - 1, -1, -1):
        digit, number = divmod(number, 91**power)
        digits.append(chr(digit + BASE91_OFFSET))
    return "".join(digits)


def leading_float(text: str) -> float:
    """
    Parse the longest leading decimal number of a string.

    Trailing characters are ignored and a string with no leading number
    yields 0.0, so "30.5000*6A" parses as 30.5. An exponent is accepted as
    part of the number, as C atof does.
    """
    match = _LEADING_NUMBER.match(text)
    if not match:
        return 0.0
    return float(match.group(0))
