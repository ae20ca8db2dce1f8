import logging
from typing import List, Sequence, Tuple

import numpy as np

from latlong_codec.models.coordinate import LATITUDE, LONGITUDE, Axis
from latlong_codec.utils.coordinate_utils import BASE91_OFFSET, BASE91_WIDTH

logger = logging.getLogger("latlong_codec")


def _compress_axis(values: np.ndarray, axis: Axis) -> Tuple[List[str], int]:
    """Vectorised base-91 encoding of one axis. Returns (codes, number clamped)."""
    bad = np.flatnonzero(np.isnan(values))
    if bad.size:
        raise ValueError(f"{axis.name} is not a number at track points {bad.tolist()}")

    n_clamped = int(np.count_nonzero(np.abs(values) > axis.limit))
    clamped = np.clip(values, -axis.limit, axis.limit)

    scaled = np.floor(
        axis.compress_scale * (axis.limit + axis.compress_sign * clamped) + 0.5
    ).astype(np.int64)

    # One column per base-91 digit, most significant first
    powers = 91 ** np.arange(BASE91_WIDTH - 1, -1, -1, dtype=np.int64)
    digits = (scaled[:, None] // powers) % 91 + BASE91_OFFSET

    codes = ["".join(map(chr, row)) for row in digits.tolist()]
    return codes, n_clamped


def compress_track(
    latitudes: Sequence[float], longitudes: Sequence[float]
) -> List[Tuple[str, str]]:
    """
    Encode a track of positions as compressed APRS latitude/longitude pairs.

    Gives the same codes as compress_latitude() and compress_longitude()
    applied point by point.

    Args:
        latitudes: Latitudes in decimal degrees
        longitudes: Longitudes in decimal degrees, same length as latitudes

    Returns:
        List[Tuple[str, str]]: (yyyy, xxxx) for each point

    Raises:
        ValueError: If the sequences differ in length or hold NaN
    """
    lats = np.asarray(latitudes, dtype=np.float64).reshape(-1)
    lons = np.asarray(longitudes, dtype=np.float64).reshape(-1)
    if lats.shape != lons.shape:
        raise ValueError(
            f"Track has {lats.size} latitudes but {lons.size} longitudes"
        )

    lat_codes, lat_clamped = _compress_axis(lats, LATITUDE)
    lon_codes, lon_clamped = _compress_axis(lons, LONGITUDE)

    if lat_clamped or lon_clamped:
        logger.warning(
            f"Clamped {lat_clamped} latitudes and {lon_clamped} longitudes "
            f"out of {lats.size} track points"
        )

    return list(zip(lat_codes, lon_codes))
