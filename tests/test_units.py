"""
Tests for unit conversion helpers.
"""

import math
import pytest
from pydantic import ValidationError

from poletrack import FeetInches, feet_decimal_to_feet_inches, meters_to_feet_inches
from poletrack.utils.parsing import parse_height_to_meters
from poletrack.utils.units import convert_length, normalize_unit, round_half_up


class TestFeetInchesHelpers:
    """Tests for meters_to_feet_inches and feet_decimal_to_feet_inches."""

    def test_converts_meters_to_feet_inches(self):
        assert meters_to_feet_inches(4.6) == FeetInches(feet=15, inches=1)

    def test_converts_decimal_feet_to_feet_inches(self):
        assert feet_decimal_to_feet_inches(12.25) == FeetInches(feet=12, inches=3)

    def test_rounding_carries_into_feet(self):
        # 11.99 ft is 143.88 in, which rounds to a whole 12 ft
        assert feet_decimal_to_feet_inches(11.99) == FeetInches(feet=12, inches=0)

    def test_non_finite_input_is_zero(self):
        assert meters_to_feet_inches(math.nan) == FeetInches(feet=0, inches=0)
        assert meters_to_feet_inches(-math.inf) == FeetInches(feet=0, inches=0)
        assert feet_decimal_to_feet_inches(math.inf) == FeetInches(feet=0, inches=0)

    def test_huge_finite_input_is_zero(self):
        assert meters_to_feet_inches(1e308) == FeetInches(feet=0, inches=0)

    def test_negative_input_keeps_inches_in_range(self):
        value = feet_decimal_to_feet_inches(-0.25)
        assert value == FeetInches(feet=-1, inches=9)

    def test_round_trip_through_height_formula(self):
        for feet in range(0, 21):
            for inches in range(0, 12):
                meters = parse_height_to_meters(f"{feet}'{inches}\"")
                assert meters_to_feet_inches(meters) == FeetInches(feet=feet, inches=inches)


class TestFeetInchesModel:
    """Tests for the FeetInches value type."""

    def test_inches_must_be_below_a_foot(self):
        with pytest.raises(ValidationError):
            FeetInches(feet=5, inches=12)

    def test_is_immutable(self):
        value = FeetInches(feet=5, inches=3)
        with pytest.raises(ValidationError):
            value.feet = 6


class TestConvertLength:
    """Tests for convert_length."""

    def test_same_unit(self):
        assert convert_length(3.0, 'm', 'meters') == 3.0

    def test_inches_to_meters(self):
        assert convert_length(181, 'in', 'm') == pytest.approx(4.5974)

    def test_feet_to_inches_and_back(self):
        assert convert_length(12.25, 'feet', '"') == pytest.approx(147)
        assert convert_length(147, 'inches', "'") == pytest.approx(12.25)

    def test_meters_to_feet(self):
        assert convert_length(0.3048, 'm', 'ft') == pytest.approx(1.0)

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            convert_length(1.0, 'km', 'm')
        with pytest.raises(ValueError):
            normalize_unit('yards')


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.4999) == 2
