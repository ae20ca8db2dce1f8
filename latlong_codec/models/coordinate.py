from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

# Marks a coordinate with no fix. Shared by the encoders and the decoder.
UNKNOWN_COORDINATE = None


@dataclass(frozen=True)
class Axis:
    """Description of one coordinate axis and its fixed-width encodings"""

    name: str
    limit: float  # Legal range is [-limit, +limit]
    degree_digits: int  # 2 for latitude, 3 for longitude
    positive: str  # Hemisphere letter for values >= 0
    negative: str  # Hemisphere letter for values < 0
    blank_positions: Tuple[int, ...]  # Ambiguity blanks, in order of level
    compress_scale: float  # Base-91 scale factor
    compress_sign: int  # +1 when the code grows with the value, -1 otherwise

    @property
    def separator_index(self) -> int:
        """Index of the '.' in the NMEA ddmm.mmmm / dddmm.mmmm token"""
        return self.degree_digits + 2


LATITUDE = Axis(
    name="Latitude",
    limit=90.0,
    degree_digits=2,
    positive="N",
    negative="S",
    blank_positions=(6, 5, 3, 2),
    compress_scale=380926.0,
    compress_sign=-1,
)

LONGITUDE = Axis(
    name="Longitude",
    limit=180.0,
    degree_digits=3,
    positive="E",
    negative="W",
    blank_positions=(7, 6, 4, 3),
    compress_scale=190463.0,
    compress_sign=1,
)


class AdvisoryKind(Enum):
    """Conditions worth reporting that do not stop a conversion"""

    CLAMPED = "clamped"
    OUT_OF_RANGE = "out_of_range"
    UNEXPECTED_HEMISPHERE = "unexpected_hemisphere"


@dataclass(frozen=True)
class Advisory:
    kind: AdvisoryKind
    axis: Axis
    message: str


@dataclass
class EncodedCoordinate:
    """APRS encoder output (uncompressed or compressed)"""

    text: str
    advisories: List[Advisory] = field(default_factory=list)


@dataclass
class NMEACoordinate:
    """NMEA 0183 field pair. Both fields are empty when the position is unknown."""

    value: str
    hemisphere: str
    advisories: List[Advisory] = field(default_factory=list)

    @property
    def is_unknown(self) -> bool:
        return self.value == "" and self.hemisphere == ""


@dataclass
class DecodedCoordinate:
    """NMEA 0183 decoder output in signed decimal degrees"""

    degrees: Optional[float]
    advisories: List[Advisory] = field(default_factory=list)

    @property
    def is_unknown(self) -> bool:
        return self.degrees is UNKNOWN_COORDINATE
