"""Value types returned by the csquares codec.

``Position`` and ``Boundary`` are plain named tuples of exact decimals so
they compare equal to ordinary tuples of numbers. ``CSquareSummary`` is the
serializable view of a cell used by the command line and the map viewer.
"""

from decimal import Decimal
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Position(NamedTuple):
    """A latitude/longitude pair in degrees."""

    latitude: Decimal
    longitude: Decimal


class Boundary(NamedTuple):
    """Edges of a cell along one axis.

    ``near`` is the edge reached by the accumulated offset and ``far`` lies one
    cell width further from zero, so for cells south of the equator or west of
    the prime meridian ``far`` is the smaller value. The pair is not sorted.
    """

    near: Decimal
    far: Decimal

    @property
    def lower(self) -> Decimal:
        return min(self.near, self.far)

    @property
    def upper(self) -> Decimal:
        return max(self.near, self.far)

    def midpoint(self) -> Decimal:
        """Return the arithmetic midpoint regardless of edge order."""
        return abs(self.near - self.far) / 2 + min(self.near, self.far)

    def contains(self, value: Decimal) -> bool:
        """Return True if ``value`` lies within the edges, inclusive."""
        return self.lower <= value <= self.upper


class CSquareSummary(BaseModel):
    """Serializable description of a single C-squares cell.

    Attributes:
        identifier: Canonical C-squares text form.
        resolution: Cell width in degrees.
        latitude_boundary: (near, far) latitude edges.
        longitude_boundary: (near, far) longitude edges.
        center_latitude: Latitude of the cell center.
        center_longitude: Longitude of the cell center.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Canonical C-squares text form.")
    resolution: float = Field(..., gt=0.0, description="Cell width in degrees.")
    latitude_boundary: tuple[float, float] = Field(..., description="(near, far) latitude edges.")
    longitude_boundary: tuple[float, float] = Field(
        ..., description="(near, far) longitude edges."
    )
    center_latitude: float = Field(..., description="Latitude of the cell center.")
    center_longitude: float = Field(..., description="Longitude of the cell center.")

    def to_dict(self) -> dict[str, Any]:
        """Convert the model to a dictionary.

        Returns:
            dict[str, Any]: A dictionary representation of the cell.
        """
        return self.model_dump()
