"""Tests for global and intermediate quadrant selection."""

from decimal import Decimal

from csquares.quadrant import GlobalQuadrant, IntermediateQuadrant


class TestGlobalQuadrant:
    """Tests for hemisphere quadrant selection."""

    def test_sign_combinations(self) -> None:
        """Test each sign pair maps to its quadrant."""
        assert GlobalQuadrant.for_position(10, 20) is GlobalQuadrant.NE
        assert GlobalQuadrant.for_position(10, -20) is GlobalQuadrant.NW
        assert GlobalQuadrant.for_position(-10, 20) is GlobalQuadrant.SE
        assert GlobalQuadrant.for_position(-10, -20) is GlobalQuadrant.SW

    def test_zero_counts_as_north_and_east(self) -> None:
        """Test that the equator and prime meridian resolve to the non-negative branch."""
        assert GlobalQuadrant.for_position(0, 0) is GlobalQuadrant.NE
        assert GlobalQuadrant.for_position(Decimal("-0"), 0) is GlobalQuadrant.NE
        assert GlobalQuadrant.for_position(0, -1) is GlobalQuadrant.NW
        assert GlobalQuadrant.for_position(-1, 0) is GlobalQuadrant.SE

    def test_tags(self) -> None:
        """Test the numeric tags written into identifiers."""
        assert [q.value for q in GlobalQuadrant] == [1, 3, 5, 7]
        assert GlobalQuadrant(3) is GlobalQuadrant.SE

    def test_hemisphere_predicates(self) -> None:
        """Test southern and western flags."""
        southern = {q for q in GlobalQuadrant if q.is_southern}
        western = {q for q in GlobalQuadrant if q.is_western}
        assert southern == {GlobalQuadrant.SE, GlobalQuadrant.SW}
        assert western == {GlobalQuadrant.SW, GlobalQuadrant.NW}


class TestIntermediateQuadrant:
    """Tests for the quarter selected by a digit pair."""

    def test_every_digit_pair(self) -> None:
        """Test that every digit pair maps to exactly the expected quarter."""
        for lat_digit in range(10):
            for lng_digit in range(10):
                quadrant = IntermediateQuadrant.for_digits(lat_digit, lng_digit)
                assert quadrant.is_high_latitude == (lat_digit >= 5)
                assert quadrant.is_high_longitude == (lng_digit >= 5)

    def test_tags(self) -> None:
        """Test the tags of the four quarters."""
        assert IntermediateQuadrant.for_digits(0, 0) == 1
        assert IntermediateQuadrant.for_digits(4, 5) == 2
        assert IntermediateQuadrant.for_digits(5, 4) == 3
        assert IntermediateQuadrant.for_digits(9, 9) == 4
