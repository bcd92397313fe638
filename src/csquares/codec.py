"""Encoding of latitude/longitude points into C-squares cells and back.

Details of the notation:
http://www.marine.csiro.au/csquares/spec1-1.htm

``encode`` splits both coordinates into decimal digits, builds the 10 degree
root from the leading digits and folds every further digit pair into a
partial link and a digit-pair link. ``decode`` rebuilds the same chain from
the text form.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import cached_property

from csquares.cycle import Cycle, DigitPairCycle, PartialCycle, RootCycle, chain
from csquares.exceptions import InvalidIdentifier, ResolutionExhausted
from csquares.models import Boundary, CSquareSummary, Position
from csquares.quadrant import GlobalQuadrant, IntermediateQuadrant
from csquares.resolution import MAX_DECIMALS, Resolution

logger = logging.getLogger(__name__)

Coordinate = Decimal | int | float | str

_ROOT_PATTERN = re.compile(r"([1357])(\d)([1-9]\d|\d)")
_PAIR_PATTERN = re.compile(r"([1-4])(\d\d)?")


@dataclass(frozen=True)
class CSquare:
    """A single C-squares cell, wrapping the finest link of its chain.

    Derived values are computed on first access and cached.

    Attributes:
        cycle: The finest link of the chain.
    """

    cycle: Cycle

    @property
    def resolution(self) -> Resolution:
        return self.cycle.resolution

    @cached_property
    def identifier(self) -> str:
        """Canonical C-squares text form, e.g. ``3414:227:383``."""
        return "".join(link.fragment() for link in chain(self.cycle))

    @cached_property
    def latitude_boundary(self) -> Boundary:
        return self.cycle.lat_boundary()

    @cached_property
    def longitude_boundary(self) -> Boundary:
        return self.cycle.lng_boundary()

    @cached_property
    def center(self) -> Position:
        return Position(self.latitude_boundary.midpoint(), self.longitude_boundary.midpoint())

    def summary(self) -> CSquareSummary:
        """Return a serializable description of the cell."""
        lat_near, lat_far = self.latitude_boundary
        lng_near, lng_far = self.longitude_boundary
        return CSquareSummary(
            identifier=self.identifier,
            resolution=float(self.resolution.degrees),
            latitude_boundary=(float(lat_near), float(lat_far)),
            longitude_boundary=(float(lng_near), float(lng_far)),
            center_latitude=float(self.center.latitude),
            center_longitude=float(self.center.longitude),
        )

    def __str__(self) -> str:
        return self.identifier


def encode(latitude: Coordinate, longitude: Coordinate, decimals: int) -> CSquare:
    """Encode a point into the C-squares cell that contains it.

    Floats are converted through their shortest decimal representation, so
    ``-42.8`` is read as exactly ``-42.8``.

    Args:
        latitude: Signed latitude in degrees.
        longitude: Signed longitude in degrees.
        decimals: Number of decimal places to resolve beyond the whole degrees.
            ``0`` gives a 1 degree cell, each further place a cell ten times smaller.

    Returns:
        The cell containing the point.

    Raises:
        ValueError: If a coordinate is not a finite number or ``decimals`` is negative.
        ResolutionExhausted: If ``decimals`` asks for a cell finer than the ladder allows.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    if decimals > MAX_DECIMALS:
        logger.warning(f"Cannot encode at {decimals} decimals, the ladder ends at {MAX_DECIMALS}")
        raise ResolutionExhausted(
            f"{decimals} decimals is finer than {Resolution.finest()} (at most {MAX_DECIMALS})"
        )

    lat = _to_decimal(latitude, "latitude")
    lng = _to_decimal(longitude, "longitude")

    lat_digits = _split_digits(lat, decimals)
    lng_digits = _split_digits(lng, decimals)

    root = RootCycle(
        GlobalQuadrant.for_position(lat, lng),
        lat_digits[1],
        lng_digits[0] * 10 + lng_digits[1],
    )

    end: Cycle = root
    for lat_digit, lng_digit in zip(lat_digits[2:], lng_digits[2:]):
        partial = PartialCycle(IntermediateQuadrant.for_digits(lat_digit, lng_digit), end)
        end = DigitPairCycle(lat_digit, lng_digit, partial)

    logger.debug(f"Encoded ({lat}, {lng}) at {decimals} decimals to a {end.resolution} cell")
    return CSquare(end)


def decode(identifier: str) -> CSquare:
    """Rebuild a cell from its C-squares text form.

    The identifier is a root fragment (quadrant, latitude tens, longitude tens)
    followed by ``:``-separated refinements, each an intermediate quadrant tag
    and a latitude/longitude digit pair. The last refinement may be a bare tag,
    naming a quarter of the preceding cell.

    Args:
        identifier: The C-squares text, e.g. ``3414:227:383``.

    Returns:
        The cell the identifier names.

    Raises:
        InvalidIdentifier: If the text is malformed or a quadrant tag does not
            match its digit pair.
        ResolutionExhausted: If the identifier is deeper than the ladder allows.
    """
    text = identifier.strip()
    root_text, *refinements = text.split(":")

    root_match = _ROOT_PATTERN.fullmatch(root_text)
    if root_match is None:
        raise InvalidIdentifier(identifier, f"malformed root fragment {root_text!r}")
    quadrant, lat_part, lng_part = root_match.groups()

    end: Cycle = RootCycle(GlobalQuadrant(int(quadrant)), int(lat_part), int(lng_part))
    for position, refinement in enumerate(refinements, start=1):
        pair_match = _PAIR_PATTERN.fullmatch(refinement)
        if pair_match is None:
            raise InvalidIdentifier(identifier, f"malformed refinement {refinement!r}")
        tag, digits = pair_match.groups()
        partial = PartialCycle(IntermediateQuadrant(int(tag)), end)
        if digits is None:
            if position != len(refinements):
                raise InvalidIdentifier(identifier, f"refinement {refinement!r} has no digits")
            end = partial
            break
        lat_digit, lng_digit = int(digits[0]), int(digits[1])
        if IntermediateQuadrant.for_digits(lat_digit, lng_digit) != partial.quadrant:
            raise InvalidIdentifier(
                identifier, f"quadrant {tag} does not match digits {digits}"
            )
        end = DigitPairCycle(lat_digit, lng_digit, partial)

    logger.debug(f"Decoded {identifier!r} to a {end.resolution} cell")
    return CSquare(end)


def _to_decimal(value: Coordinate, name: str) -> Decimal:
    try:
        number = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError) as exception:
        raise ValueError(f"{name} is not a number: {value!r}") from exception
    if not number.is_finite():
        raise ValueError(f"{name} must be finite, got {value!r}")
    return number


def _split_digits(value: Decimal, decimals: int) -> list[int]:
    """Digits of ``|value|`` from the hundreds place down to ``10**-decimals``.

    Digits are read from the coefficient, so magnitudes far beyond the context
    precision split the same way as small ones.
    """
    _, digits, exponent = value.copy_abs().as_tuple()
    return [_digit_at(digits, exponent, power) for power in range(2, -decimals - 1, -1)]


def _digit_at(digits: tuple[int, ...], exponent: int, power: int) -> int:
    index = len(digits) - 1 - (power - exponent)
    return digits[index] if 0 <= index < len(digits) else 0
