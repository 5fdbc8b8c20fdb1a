import sys
import math
from pathlib import Path

# Allow importing modules from the project root
sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np
import pytest

from angle import Angle
from utils import TWO_PI


def test_degrees_and_radians_agree():
    assert Angle(180, is_radians=False) == Angle(math.pi)
    assert math.isclose(Angle.from_degrees(90).raw_radians, math.pi / 2)
    assert math.isclose(Angle(math.pi / 2).degrees, 90.0)


def test_normalized_is_always_in_one_turn():
    for value in (-1e-20, -7.5, -TWO_PI, 0.0, TWO_PI, 100.0, 1e6):
        normalized = Angle(value, normalize=False).normalized_radians
        assert 0.0 <= normalized < TWO_PI


def test_normalize_flag_controls_raw_value():
    assert math.isclose(Angle(3 * math.pi).raw_radians, math.pi)
    unreduced = Angle(3 * math.pi, normalize=False)
    assert unreduced.raw_radians == 3 * math.pi
    assert math.isclose(unreduced.normalized_radians, math.pi)
    assert Angle(450, is_radians=False, normalize=False).format_as("deg") == "450.0°"


def test_whole_turn_shifts_are_equivalent():
    a = Angle(1.0)
    for k in range(-3, 4):
        shifted = Angle(a.raw_radians + k * TWO_PI, normalize=False)
        assert math.isclose(shifted.normalized_radians, a.normalized_radians, abs_tol=1e-9)
        assert shifted == a


def test_arithmetic_keeps_raw_magnitude():
    three_quarters = Angle(3 * math.pi / 2)
    total = three_quarters + three_quarters
    assert math.isclose(total.raw_radians, 3 * math.pi)
    assert math.isclose(total.normalized_radians, math.pi)

    one = Angle(1.0)
    assert (one + 2).raw_radians == 3.0
    assert (2 + one).raw_radians == 3.0
    assert (one - 0.5).raw_radians == 0.5
    assert (5 - one).raw_radians == 4.0
    assert (one - Angle(3.0)).raw_radians == -2.0
    assert (one * 3).raw_radians == 3.0
    assert (3 * one).raw_radians == 3.0
    assert (Angle(3.0) / 2).raw_radians == 1.5
    assert (-one).raw_radians == -1.0


def test_named_arithmetic_methods():
    a = Angle(1.0)
    assert a.add(Angle(2.0)).raw_radians == 3.0
    assert a.subtract(4).raw_radians == -3.0
    assert a.scale(10).raw_radians == 10.0
    assert a.divide(4).raw_radians == 0.25
    with pytest.raises(TypeError):
        a.add("1")


def test_division_by_zero_propagates_ieee_values():
    assert (Angle(1.0) / 0).raw_radians == math.inf
    assert (Angle(-1.0, normalize=False) / 0).raw_radians == -math.inf
    nan_angle = Angle(0.0) / 0
    assert math.isnan(nan_angle.raw_radians)
    # NaN compares false to everything
    assert not nan_angle == nan_angle
    assert not nan_angle < Angle(1.0)
    assert not nan_angle > Angle(1.0)


def test_conversions_use_raw_value():
    a = Angle(7.0, normalize=False)
    assert float(a) == 7.0
    assert a.to_float32() == np.float32(7.0)
    assert int(Angle(3.7, normalize=False)) == 4
    assert Angle(2.5, normalize=False).to_int() == 2


def test_integer_conversion_of_special_values():
    nan_angle = Angle(0.0) / 0
    assert math.isnan(float(nan_angle))
    assert math.isnan(nan_angle.to_float32())
    with pytest.raises(ValueError):
        nan_angle.to_int()
    with pytest.raises(OverflowError):
        int(Angle(1.0) / 0)


def test_formatting_modes():
    a = Angle(math.pi)
    assert a.format_as("rad") == "3.14 rad"
    assert a.format_as("RADIANS") == "3.14 rad"
    assert a.format_as("deg") == "180.0°"
    assert a.format_as("degrees") == "180.0°"
    assert a.format_as("gradians") == "180.0°"
    assert f"{a:rad}" == "3.14 rad"
    assert f"{a}" == "180.0°"
    assert str(Angle.from_degrees(90)) == "90.0°"
    assert repr(a) == "Angle(raw_radians=3.1416, normalized=3.1416, degrees=180.00°)"


def test_angle_comparisons_and_hashing():
    a = Angle.from_degrees(45)
    b = Angle.from_degrees(90)
    assert a < b
    assert b > a
    assert a <= Angle.from_degrees(45)
    assert a == Angle.from_degrees(45)
    # hashing and ordering
    s = {a, Angle.from_degrees(45)}
    assert len(s) == 1
    assert list(sorted([b, a])) == [a, b]


def test_ordering_uses_normalized_value():
    assert Angle.from_degrees(370) < Angle.from_degrees(350)
    assert Angle(TWO_PI + 0.1, normalize=False) < Angle(0.2)
    assert Angle(TWO_PI, normalize=False) == Angle(0.0)
    assert Angle(1e-10) == Angle(0.0)


def test_compare_normalized():
    assert Angle(1.0).compare_normalized(Angle(2.0)) == -1
    assert Angle(2.0).compare_normalized(Angle(1.0)) == 1
    assert Angle(1.0).compare_normalized(Angle(1.0 + TWO_PI, normalize=False)) == 0
    assert Angle(1.0).equals_within_epsilon(Angle(1.0 + 5e-10))


def test_equality_is_symmetric_and_transitive_within_tolerance():
    a, b, c = Angle(0.0), Angle(0.4e-9), Angle(0.8e-9)
    assert a == b and b == a
    assert b == c
    assert a == c


def test_comparison_with_other_types():
    assert Angle(1.0) != 1.0
    with pytest.raises(TypeError):
        Angle(1.0) < 1.0


def test_degrees_setter_replaces_raw_value():
    a = Angle()
    a.degrees = 450
    assert math.isclose(a.raw_radians, 2.5 * math.pi)
    assert math.isclose(a.normalized_radians, math.pi / 2)
    a.radians = -1.0
    assert a.raw_radians == -1.0
