"""Tests for the resolution ladder."""

from decimal import Decimal

import pytest

from csquares.exceptions import CSquaresError, ResolutionExhausted
from csquares.resolution import MAX_DECIMALS, Resolution


class TestLadder:
    """Tests for the fixed sequence of resolutions."""

    def test_has_eleven_steps(self) -> None:
        """Test the ladder length and its end points."""
        assert len(Resolution) == 11
        assert Resolution.coarsest().degrees == Decimal("10")
        assert Resolution.finest().degrees == Decimal("0.0001")

    def test_steps_are_strictly_descending(self) -> None:
        """Test that each step is finer than the one before."""
        widths = [step.degrees for step in Resolution]
        assert widths == sorted(widths, reverse=True)
        assert len(set(widths)) == len(widths)

    def test_widths_are_exact_decimals(self) -> None:
        """Test that widths are decimals, not binary floats."""
        assert Resolution.DEGREES_0_1.degrees == Decimal("0.1")
        assert isinstance(Resolution.DEGREES_0_005.degrees, Decimal)

    def test_max_decimals(self) -> None:
        """Test the deepest precision the ladder supports."""
        assert MAX_DECIMALS == 4


class TestNavigation:
    """Tests for finer/coarser lookups."""

    def test_finer_and_coarser_are_inverse(self) -> None:
        """Test that stepping finer then coarser returns to the start."""
        for step in list(Resolution)[:-1]:
            assert step.finer().coarser() is step

    def test_finer_sequence(self) -> None:
        """Test the first few finer steps."""
        assert Resolution.DEGREES_10.finer() is Resolution.DEGREES_5
        assert Resolution.DEGREES_5.finer() is Resolution.DEGREES_1
        assert Resolution.DEGREES_0_1.finer() is Resolution.DEGREES_0_05

    def test_no_finer_than_finest(self) -> None:
        """Test that the finest step has no finer neighbour."""
        with pytest.raises(ResolutionExhausted):
            Resolution.finest().finer()

    def test_no_coarser_than_root(self) -> None:
        """Test that the 10 degree step has no coarser neighbour."""
        with pytest.raises(ResolutionExhausted):
            Resolution.DEGREES_10.coarser()

    def test_exhaustion_is_a_value_error(self) -> None:
        """Test the error hierarchy callers can rely on."""
        assert issubclass(ResolutionExhausted, CSquaresError)
        assert issubclass(ResolutionExhausted, ValueError)

    def test_index_and_str(self) -> None:
        """Test ladder positions and the display form."""
        assert Resolution.DEGREES_10.index == 0
        assert Resolution.finest().index == 10
        assert str(Resolution.DEGREES_0_5) == "0.5°"
