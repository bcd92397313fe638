"""C-squares grid cell encoding for latitude/longitude points."""

from .codec import CSquare, decode, encode
from .config import CodecSettings, LoggingSettings, Settings, ViewerSettings, get_settings
from .cycle import Cycle, DigitPairCycle, PartialCycle, RootCycle, boundary_from
from .earth_math import (
    degrees_latitude,
    degrees_longitude,
    meridional_radius,
    normal_radius,
    spherical_distance,
    unit_latitude,
    unit_longitude,
)
from .exceptions import CSquaresError, InvalidIdentifier, ResolutionExhausted
from .logger import configure_logging
from .models import Boundary, CSquareSummary, Position
from .quadrant import GlobalQuadrant, IntermediateQuadrant
from .resolution import MAX_DECIMALS, Resolution

__all__ = [
    "MAX_DECIMALS",
    "Boundary",
    "CSquare",
    "CSquareSummary",
    "CSquaresError",
    "CodecSettings",
    "Cycle",
    "DigitPairCycle",
    "GlobalQuadrant",
    "IntermediateQuadrant",
    "InvalidIdentifier",
    "LoggingSettings",
    "PartialCycle",
    "Position",
    "Resolution",
    "ResolutionExhausted",
    "RootCycle",
    "Settings",
    "ViewerSettings",
    "boundary_from",
    "configure_logging",
    "decode",
    "degrees_latitude",
    "degrees_longitude",
    "encode",
    "get_settings",
    "meridional_radius",
    "normal_radius",
    "spherical_distance",
    "unit_latitude",
    "unit_longitude",
]
