"""Quadrant identifiers used by C-squares notation.

A C-squares identifier starts with a global quadrant tag naming the
hemisphere pair of the point, and every further refinement starts with an
intermediate quadrant tag naming which quarter of the enclosing cell the
next digit pair falls into.
"""

from decimal import Decimal
from enum import IntEnum


class GlobalQuadrant(IntEnum):
    """Hemisphere quadrant of a point, tagged the way the notation writes it."""

    NE = 1
    SE = 3
    SW = 5
    NW = 7

    @classmethod
    def for_position(
        cls, latitude: Decimal | float, longitude: Decimal | float
    ) -> "GlobalQuadrant":
        """Return the quadrant of a signed coordinate pair.

        Zero counts as north and as east.

        Args:
            latitude: Signed latitude in degrees.
            longitude: Signed longitude in degrees.

        Returns:
            The global quadrant containing the point.
        """
        if latitude >= 0:
            return cls.NE if longitude >= 0 else cls.NW
        return cls.SE if longitude >= 0 else cls.SW

    @property
    def is_southern(self) -> bool:
        return self in (GlobalQuadrant.SE, GlobalQuadrant.SW)

    @property
    def is_western(self) -> bool:
        return self in (GlobalQuadrant.SW, GlobalQuadrant.NW)


class IntermediateQuadrant(IntEnum):
    """Quarter of a cell selected by the next latitude/longitude digit pair."""

    LOW_LAT_LOW_LNG = 1
    LOW_LAT_HIGH_LNG = 2
    HIGH_LAT_LOW_LNG = 3
    HIGH_LAT_HIGH_LNG = 4

    @classmethod
    def for_digits(cls, lat_digit: int, lng_digit: int) -> "IntermediateQuadrant":
        """Return the quarter selected by a pair of decimal digits.

        Digits below 5 fall in the low half of their axis.

        Args:
            lat_digit: Latitude digit, 0-9.
            lng_digit: Longitude digit, 0-9.

        Returns:
            The intermediate quadrant for the pair.
        """
        if lat_digit < 5:
            return cls.LOW_LAT_LOW_LNG if lng_digit < 5 else cls.LOW_LAT_HIGH_LNG
        return cls.HIGH_LAT_LOW_LNG if lng_digit < 5 else cls.HIGH_LAT_HIGH_LNG

    @property
    def is_high_latitude(self) -> bool:
        return self in (
            IntermediateQuadrant.HIGH_LAT_LOW_LNG,
            IntermediateQuadrant.HIGH_LAT_HIGH_LNG,
        )

    @property
    def is_high_longitude(self) -> bool:
        return self in (
            IntermediateQuadrant.LOW_LAT_HIGH_LNG,
            IntermediateQuadrant.HIGH_LAT_HIGH_LNG,
        )
