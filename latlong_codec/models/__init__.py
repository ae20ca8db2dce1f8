"""Models module containing the codec data structures."""

from .coordinate import (
    UNKNOWN_COORDINATE,
    LATITUDE,
    LONGITUDE,
    Axis,
    Advisory,
    AdvisoryKind,
    EncodedCoordinate,
    NMEACoordinate,
    DecodedCoordinate,
)

__all__ = [
    "UNKNOWN_COORDINATE",
    "LATITUDE",
    "LONGITUDE",
    "Axis",
    "Advisory",
    "AdvisoryKind",
    "EncodedCoordinate",
    "NMEACoordinate",
    "DecodedCoordinate",
]
