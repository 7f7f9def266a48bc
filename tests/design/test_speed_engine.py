"""Tests for design speed assignment."""

from __future__ import annotations

import math

import pytest

from alignment_checker.design.design_parameters import DesignParameters
from alignment_checker.design.speed_engine import SpeedAssignmentEngine
from alignment_checker.errors import NoRadiusError, TableLookupError
from tests.conftest import clothoid, radius, straight


def assign(elements, **params):
    return SpeedAssignmentEngine(DesignParameters(**params)).assign(elements)


class TestRadiusVp:
    def test_vp_and_clothoid_bounds(self):
        (r,) = assign([radius(1, 80, -300)])
        assert r.vp == 90
        assert r.a_min == pytest.approx(math.sqrt(300 * 50))
        assert r.a_max == pytest.approx(math.sqrt(300 * 100))
        assert r.a_min == pytest.approx(122.47, abs=0.01)
        assert r.a_max == pytest.approx(173.21, abs=0.01)

    def test_vp_is_capped(self):
        (r,) = assign([radius(1, 80, 500)])
        assert r.vp == 100

    def test_clothoid_length_uses_capped_vp(self):
        # uncapped 110 km/h would give 61 m, capped 100 km/h gives 56 m
        (r,) = assign([radius(1, 80, 500)])
        assert r.a_min == pytest.approx(math.sqrt(500 * 56))

    def test_configured_cap(self):
        (r,) = assign([radius(1, 80, 500)], max_vp=120)
        assert r.vp == 110
        assert r.a_min == pytest.approx(math.sqrt(500 * 61))


class TestStraightVp:
    ENGINE = SpeedAssignmentEngine()

    def test_breakpoint_index_adds_ten(self):
        assert self.ENGINE.straight_vp(45, 95) == 55

    def test_longer_than_all_breakpoints(self):
        assert self.ENGINE.straight_vp(45, 999) == 100

    def test_breakpoint_is_inclusive(self):
        assert self.ENGINE.straight_vp(40, 30) == 40
        assert self.ENGINE.straight_vp(40, 30.5) == 50

    def test_addition_is_kept(self):
        assert self.ENGINE.straight_vp(95, 50) == 95

    def test_bucket_without_breakpoints_is_fatal(self):
        with pytest.raises(TableLookupError):
            self.ENGINE.straight_vp(100, 10)

    def test_takes_faster_neighbour(self):
        # R=100 -> 65 km/h, R=250 -> 85 km/h
        elements = assign([radius(1, 40, 100), straight(2, 45), radius(3, 40, 250)])
        assert elements[1].vp == 85

    def test_one_sided_neighbour(self):
        elements = assign([straight(1, 100), radius(2, 40, -200)])
        assert elements[0].vp == 90

    def test_no_radius_is_fatal(self):
        with pytest.raises(NoRadiusError):
            assign([straight(1, 100), clothoid(2, 50)])


class TestClothoidVp:
    def test_inherits_nearest_radius(self):
        elements = assign([
            radius(1, 40, 45),
            clothoid(2, 30),
            straight(3, 20),
            clothoid(4, 30),
            radius(5, 40, -300),
        ])
        assert elements[1].vp == 50
        assert elements[3].vp == 90

    def test_single_radius_feeds_both_sides(self):
        elements = assign([
            straight(1, 50),
            clothoid(2, 60),
            radius(3, 100, -300),
            clothoid(4, 60),
            straight(5, 50),
        ])
        assert [e.vp for e in elements] == [90, 90, 90, 90, 90]

    def test_no_radius_is_fatal(self):
        with pytest.raises(NoRadiusError):
            assign([clothoid(1, 50)])
