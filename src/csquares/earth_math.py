"""Earth radius and distance approximations.

References:
    http://en.wikipedia.org/wiki/Earth_radius
    http://www.codeproject.com/KB/dotnet/Zip_code_radius_search.aspx

All functions take degrees (except the radius functions, which take radians)
and return kilometres.
"""

import numpy as np

from csquares.models import Position

# WGS84 equatorial radius in metres and first eccentricity squared.
EQUATORIAL_RADIUS_M = 6378137
ECCENTRICITY_SQUARED = 0.0066943799901413165

# Statute miles per nautical mile and kilometres per statute mile.
_MILES_PER_NAUTICAL_MILE = 1.1515
_KM_PER_MILE = 1.609344


def meridional_radius(theta: float) -> float:
    """Return the north/south radius of curvature at a latitude.

    Args:
        theta: Latitude in radians.

    Returns:
        Radius in kilometers.
    """
    curvature = (1 - ECCENTRICITY_SQUARED * np.sin(theta) ** 2) ** 1.5
    return float(EQUATORIAL_RADIUS_M * (1 - ECCENTRICITY_SQUARED) / curvature / 1000)


def normal_radius(theta: float) -> float:
    """Return the east/west radius of curvature at a latitude.

    Args:
        theta: Latitude in radians.

    Returns:
        Radius in kilometers.
    """
    curvature = np.sqrt(1 - ECCENTRICITY_SQUARED * np.sin(theta) ** 2)
    return float(EQUATORIAL_RADIUS_M / curvature / 1000)


def unit_latitude(latitude: float) -> float:
    """Length in kilometers of one degree of latitude at ``latitude``."""
    return 2 * np.pi * meridional_radius(np.radians(latitude)) / 360


def unit_longitude(latitude: float) -> float:
    """Length in kilometers of one degree of longitude along the parallel at ``latitude``.

    Only the latitude is needed: the normal radius depends on latitude alone.
    """
    return 2 * np.pi * normal_radius(np.radians(latitude)) / 360


def degrees_latitude(latitude: float, kilometers: float) -> float:
    """Degrees of latitude covered by ``kilometers`` at ``latitude``."""
    return kilometers / unit_latitude(latitude)


def degrees_longitude(latitude: float, kilometers: float) -> float:
    """Degrees of longitude covered by ``kilometers`` at ``latitude``."""
    return kilometers / unit_longitude(latitude)


def spherical_distance(a: Position, b: Position) -> float:
    """Return the distance in kilometers between two points.

    Uses the spherical law of cosines. This is not accurate for points far
    apart, since the earth is an ellipsoid, but is cheap and close enough at
    short distances.

    Args:
        a: First point, in degrees.
        b: Second point, in degrees.

    Returns:
        Distance in kilometers.
    """
    lat_a, lng_a = float(a.latitude), float(a.longitude)
    lat_b, lng_b = float(b.latitude), float(b.longitude)
    if lat_a == lat_b and lng_a == lng_b:
        return 0.0

    phi_a, phi_b = np.radians(lat_a), np.radians(lat_b)
    cosine = np.sin(phi_a) * np.sin(phi_b) + np.cos(phi_a) * np.cos(phi_b) * np.cos(
        np.radians(lng_a - lng_b)
    )
    # Rounding can push the cosine just outside [-1, 1] for near-identical points.
    arc_degrees = np.degrees(np.arccos(np.clip(cosine, -1.0, 1.0)))
    return float(arc_degrees * 60 * _MILES_PER_NAUTICAL_MILE * _KM_PER_MILE)
