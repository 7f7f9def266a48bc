"""Tests for the minimum / maximum length checks."""

from __future__ import annotations

import pytest

from alignment_checker.checks.too_long_check import TooLongElementCheck
from alignment_checker.checks.too_short_check import TooShortElementCheck
from alignment_checker.design.element import ErrorFlag
from alignment_checker.design.length_engine import LengthConstraintEngine
from alignment_checker.design.speed_engine import SpeedAssignmentEngine
from tests.conftest import clothoid, radius, straight


def check_lengths(elements):
    SpeedAssignmentEngine().assign(elements)
    LengthConstraintEngine().apply(elements)
    TooShortElementCheck().run(elements)
    TooLongElementCheck().run(elements)
    return elements


class TestClothoidBounds:
    # R=-300: AMin 122.47 m, AMax 173.21 m
    @pytest.mark.parametrize("length, expected", [
        (150, ErrorFlag.NONE),
        (100, ErrorFlag.MIN_LENGTH),
        (200, ErrorFlag.MAX_LENGTH),
    ])
    def test_flags(self, length, expected):
        elements = check_lengths([radius(1, 80, -300), clothoid(2, length)])
        assert elements[1].errors == expected


def test_short_straight_between_same_direction_radii():
    # needs 125 m at 90 km/h
    elements = check_lengths([radius(1, 40, -200), straight(2, 100), radius(3, 40, -150)])
    assert elements[1].errors == ErrorFlag.MIN_LENGTH


def test_straight_without_upper_bound():
    elements = check_lengths([straight(1, 5000), radius(2, 40, -200)])
    assert ErrorFlag.MAX_LENGTH not in elements[0].errors


def test_short_radius():
    elements = check_lengths([radius(1, 20, -300)])
    assert elements[0].errors == ErrorFlag.MIN_LENGTH


def test_error_counts():
    elements = [radius(1, 20, -300), clothoid(2, 100), clothoid(3, 200)]
    SpeedAssignmentEngine().assign(elements)
    LengthConstraintEngine().apply(elements)
    too_short = TooShortElementCheck()
    too_long = TooLongElementCheck()
    too_short.run(elements)
    too_long.run(elements)
    assert too_short.get_error_count() == 2
    assert too_long.get_error_count() == 1
