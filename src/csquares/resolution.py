"""The fixed ladder of C-squares cell sizes.

Every level of a C-squares identifier halves or fifths the cell above it:
10, 5, 1, 0.5, 0.1 ... degrees. Widths are kept as exact decimals so that
offsets summed over a long chain do not drift.
"""

from decimal import Decimal
from enum import Enum

from csquares.exceptions import ResolutionExhausted


class Resolution(Enum):
    """One step of the resolution ladder, coarsest first."""

    DEGREES_10 = Decimal("10")
    DEGREES_5 = Decimal("5")
    DEGREES_1 = Decimal("1")
    DEGREES_0_5 = Decimal("0.5")
    DEGREES_0_1 = Decimal("0.1")
    DEGREES_0_05 = Decimal("0.05")
    DEGREES_0_01 = Decimal("0.01")
    DEGREES_0_005 = Decimal("0.005")
    DEGREES_0_001 = Decimal("0.001")
    DEGREES_0_0005 = Decimal("0.0005")
    DEGREES_0_0001 = Decimal("0.0001")

    @property
    def degrees(self) -> Decimal:
        """Cell width in degrees."""
        return self.value

    @property
    def index(self) -> int:
        """Position on the ladder, 0 for the 10 degree root."""
        return _LADDER.index(self)

    def finer(self) -> "Resolution":
        """Return the next finer step.

        Raises:
            ResolutionExhausted: If this is already the finest step.
        """
        position = self.index + 1
        if position >= len(_LADDER):
            raise ResolutionExhausted(f"No resolution finer than {self.degrees} degrees")
        return _LADDER[position]

    def coarser(self) -> "Resolution":
        """Return the next coarser step.

        Raises:
            ResolutionExhausted: If this is already the 10 degree root.
        """
        position = self.index - 1
        if position < 0:
            raise ResolutionExhausted(f"No resolution coarser than {self.degrees} degrees")
        return _LADDER[position]

    @classmethod
    def coarsest(cls) -> "Resolution":
        return _LADDER[0]

    @classmethod
    def finest(cls) -> "Resolution":
        return _LADDER[-1]

    def __str__(self) -> str:
        return f"{self.degrees}°"


_LADDER: tuple[Resolution, ...] = tuple(Resolution)

# The root uses one step; every decimal place after it (the units place
# included) uses two more.
MAX_DECIMALS = (len(_LADDER) - 1) // 2 - 1
