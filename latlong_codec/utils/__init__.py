"""Utility functions for coordinate field formatting."""

from .coordinate_utils import (
    clamp_degrees,
    split_degrees_minutes,
    blank_ambiguous_digits,
    to_base91,
)

__all__ = [
    "clamp_degrees",
    "split_degrees_minutes",
    "blank_ambiguous_digits",
    "to_base91",
]
