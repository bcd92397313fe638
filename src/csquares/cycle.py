"""The chain of nested cells behind a C-squares identifier.

A point is represented as a chain of links, each one level finer than its
parent. Below the 10 degree ``RootCycle`` the links alternate between a
``PartialCycle`` (which quarter of the parent cell) and a ``DigitPairCycle``
(one more decimal digit of latitude and longitude).

Offsets are accumulated from the finest link upward; the root applies the
hemisphere signs last, so every intermediate sum is a non-negative
magnitude.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

from csquares.models import Boundary
from csquares.quadrant import GlobalQuadrant, IntermediateQuadrant
from csquares.resolution import Resolution

ZERO = Decimal(0)


def boundary_from(near: Decimal, resolution: Resolution) -> Boundary:
    """Pair an accumulated offset with the edge one cell width away from zero.

    A negative offset, including the negative zero produced for a southern or
    western cell touching the equator or prime meridian, extends downward.

    Args:
        near: Signed offset of the cell corner in degrees.
        resolution: Width of the cell.

    Returns:
        The unsorted (near, far) boundary.
    """
    if near.is_signed():
        return Boundary(near, near - resolution.degrees)
    return Boundary(near, near + resolution.degrees)


def _check_digit(name: str, value: int, upper: int = 9) -> None:
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")


@dataclass(frozen=True)
class RootCycle:
    """The 10 degree cell: global quadrant plus the tens of each coordinate.

    Attributes:
        quadrant: Hemisphere quadrant of the point.
        latitude_part: Tens digit of the absolute latitude.
        longitude_part: Hundreds and tens of the absolute longitude, read as one number.
    """

    quadrant: GlobalQuadrant
    latitude_part: int
    longitude_part: int

    def __post_init__(self) -> None:
        _check_digit("latitude_part", self.latitude_part)
        _check_digit("longitude_part", self.longitude_part, upper=99)

    @property
    def resolution(self) -> Resolution:
        return Resolution.DEGREES_10

    @property
    def parent(self) -> None:
        return None

    def lat_offset(self, accumulated: Decimal) -> Decimal:
        offset = self.resolution.degrees * self.latitude_part + accumulated
        return offset.copy_negate() if self.quadrant.is_southern else offset

    def lng_offset(self, accumulated: Decimal) -> Decimal:
        offset = self.resolution.degrees * self.longitude_part + accumulated
        return offset.copy_negate() if self.quadrant.is_western else offset

    def lat_boundary(self) -> Boundary:
        return boundary_from(self.lat_offset(ZERO), self.resolution)

    def lng_boundary(self) -> Boundary:
        return boundary_from(self.lng_offset(ZERO), self.resolution)

    def fragment(self) -> str:
        return f"{self.quadrant.value}{self.latitude_part}{self.longitude_part}"


@dataclass(frozen=True)
class PartialCycle:
    """A quarter of its parent cell.

    A partial link carries no digits, so it passes offsets from finer links
    through unchanged. Only its own boundary moves one cell width along each
    axis on which its quadrant is on the high side.

    Attributes:
        quadrant: Which quarter of the parent cell.
        parent: The enclosing root or digit-pair link.
        resolution: One step finer than the parent.
    """

    quadrant: IntermediateQuadrant
    parent: "RootCycle | DigitPairCycle"
    resolution: Resolution = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "resolution", self.parent.resolution.finer())

    def lat_offset(self, accumulated: Decimal) -> Decimal:
        return self.parent.lat_offset(accumulated)

    def lng_offset(self, accumulated: Decimal) -> Decimal:
        return self.parent.lng_offset(accumulated)

    def lat_boundary(self) -> Boundary:
        step = self.resolution.degrees if self.quadrant.is_high_latitude else ZERO
        return boundary_from(self.parent.lat_offset(step), self.resolution)

    def lng_boundary(self) -> Boundary:
        step = self.resolution.degrees if self.quadrant.is_high_longitude else ZERO
        return boundary_from(self.parent.lng_offset(step), self.resolution)

    def fragment(self) -> str:
        return f":{self.quadrant.value}"


@dataclass(frozen=True)
class DigitPairCycle:
    """One more decimal digit of latitude and of longitude.

    Attributes:
        latitude_digit: Latitude digit at this power of ten, 0-9.
        longitude_digit: Longitude digit at this power of ten, 0-9.
        parent: The partial link selecting the quarter this pair falls in.
        resolution: One step finer than the parent.
    """

    latitude_digit: int
    longitude_digit: int
    parent: PartialCycle
    resolution: Resolution = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_digit("latitude_digit", self.latitude_digit)
        _check_digit("longitude_digit", self.longitude_digit)
        object.__setattr__(self, "resolution", self.parent.resolution.finer())

    def lat_offset(self, accumulated: Decimal) -> Decimal:
        return self.parent.lat_offset(self.resolution.degrees * self.latitude_digit + accumulated)

    def lng_offset(self, accumulated: Decimal) -> Decimal:
        return self.parent.lng_offset(self.resolution.degrees * self.longitude_digit + accumulated)

    def lat_boundary(self) -> Boundary:
        return boundary_from(self.lat_offset(ZERO), self.resolution)

    def lng_boundary(self) -> Boundary:
        return boundary_from(self.lng_offset(ZERO), self.resolution)

    def fragment(self) -> str:
        return f"{self.latitude_digit}{self.longitude_digit}"


Cycle = RootCycle | PartialCycle | DigitPairCycle


def iter_links(cycle: Cycle) -> Iterator[Cycle]:
    """Yield ``cycle`` and each of its ancestors, finest first."""
    link: Cycle | None = cycle
    while link is not None:
        yield link
        link = link.parent


def chain(cycle: Cycle) -> tuple[Cycle, ...]:
    """Return the links from the root down to ``cycle``."""
    return tuple(reversed(list(iter_links(cycle))))
