# ==============================================================================
# Saikei Corridor - Corridor Modeling Core for Saikei Civil
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================
"""
Tests for Vertical Alignment Module
====================================

Tests for PVI calculations, vertical curves, station clamping and
ground clearance checks.
"""

import pytest

from saikei_corridor.core.geometry import Point, Point3
from saikei_corridor.core.horizontal_alignment import HorizontalAlignment
from saikei_corridor.core.tin import Tin
from saikei_corridor.core.vertical_alignment import (
    DESIGN_STANDARDS,
    PVI,
    GradeSegment,
    ParabolicSegment,
    VerticalAlignment,
    minimum_k,
)


class TestPVI:
    """Tests for PVI (Point of Vertical Intersection) dataclass."""

    @pytest.mark.unit
    def test_pvi_creation(self):
        pvi = PVI(station=1000.0, elevation=100.0)
        assert pvi.curve_length == 0.0
        assert pvi.k_value is None
        assert not pvi.has_curve

    @pytest.mark.unit
    def test_negative_station_raises(self):
        with pytest.raises(ValueError):
            PVI(station=-1.0, elevation=100.0)

    @pytest.mark.unit
    def test_negative_curve_length_raises(self):
        with pytest.raises(ValueError):
            PVI(station=100.0, elevation=100.0, curve_length=-5.0)

    @pytest.mark.unit
    def test_crest_curve(self):
        pvi = PVI(station=200.0, elevation=105.0, grade_in=0.02,
                  grade_out=-0.01, curve_length=90.0)
        assert pvi.is_crest_curve
        assert not pvi.is_sag_curve
        assert pvi.grade_change == pytest.approx(0.03)
        assert pvi.k_value == pytest.approx(30.0)
        assert pvi.bvc_station == 155.0
        assert pvi.evc_station == 245.0

    @pytest.mark.unit
    def test_sag_curve(self):
        pvi = PVI(station=200.0, elevation=95.0, grade_in=-0.02, grade_out=0.01)
        assert pvi.is_sag_curve
        assert pvi.bvc_station is None

    @pytest.mark.unit
    def test_validate_k_value(self):
        ok = PVI(station=500.0, elevation=100.0, grade_in=0.02,
                 grade_out=-0.01, curve_length=900.0)
        valid, message = ok.validate_k_value(100)
        assert valid
        assert "meets" in message

        short = PVI(station=500.0, elevation=100.0, grade_in=0.02,
                    grade_out=-0.01, curve_length=90.0)
        valid, message = short.validate_k_value(100)
        assert not valid
        assert "below" in message

    @pytest.mark.unit
    def test_validate_unknown_speed(self):
        pvi = PVI(station=500.0, elevation=100.0, grade_in=0.02,
                  grade_out=-0.01, curve_length=90.0)
        valid, _ = pvi.validate_k_value(70)
        assert not valid

    @pytest.mark.unit
    def test_design_standards(self):
        assert minimum_k(60, crest=True) == 17.0
        assert minimum_k(60, crest=False) == 12.0
        assert minimum_k(65, crest=True) is None
        for values in DESIGN_STANDARDS.values():
            assert values["k_crest"] >= values["k_sag"]


class TestSegments:
    """Tests for grade and parabolic segments."""

    @pytest.mark.unit
    def test_grade_segment(self):
        grade = GradeSegment(0.0, 100.0, 100.0, 102.0)
        assert grade.elevation_at(50.0) == pytest.approx(101.0)
        assert grade.grade_at(10.0) == pytest.approx(0.02)
        assert grade.end_elevation == 102.0

    @pytest.mark.unit
    def test_zero_length_grade(self):
        grade = GradeSegment(5.0, 5.0, 42.0, 42.0)
        assert grade.elevation_at(5.0) == 42.0
        assert grade.grade_at(5.0) == 0.0

    @pytest.mark.unit
    def test_reversed_stations_raise(self):
        with pytest.raises(ValueError):
            GradeSegment(10.0, 0.0, 1.0, 1.0)

    @pytest.mark.unit
    def test_parabola(self):
        curve = ParabolicSegment(160.0, 240.0, 104.0, g1=0.02, g2=-0.01)
        assert curve.elevation_at(160.0) == pytest.approx(104.0)
        assert curve.elevation_at(200.0) == pytest.approx(104.5)
        assert curve.grade_at(200.0) == pytest.approx(0.005)
        assert curve.grade_at(240.0) == pytest.approx(-0.01)
        assert curve.pvi_station == 200.0
        assert curve.is_crest
        assert curve.k_value == pytest.approx(80.0 / 3.0)

    @pytest.mark.unit
    def test_turning_point(self):
        curve = ParabolicSegment(160.0, 240.0, 104.0, g1=0.02, g2=-0.01)
        assert curve.turning_point_station == pytest.approx(160.0 + 160.0 / 3.0)
        assert curve.grade_at(curve.turning_point_station) == pytest.approx(0.0, abs=1e-12)

        no_turn = ParabolicSegment(0.0, 100.0, 0.0, g1=0.02, g2=0.01)
        assert no_turn.turning_point_station is None

    @pytest.mark.unit
    def test_zero_length_parabola_raises(self):
        with pytest.raises(ValueError):
            ParabolicSegment(100.0, 100.0, 0.0, g1=0.01, g2=-0.01)


class TestVerticalAlignment:
    """Tests for VerticalAlignment construction and queries."""

    @pytest.fixture
    def pvi_profile(self) -> VerticalAlignment:
        return VerticalAlignment.from_pvis([
            PVI(station=0.0, elevation=100.0),
            PVI(station=200.0, elevation=104.0, curve_length=80.0),
            PVI(station=400.0, elevation=102.0),
        ])

    @pytest.mark.unit
    def test_empty(self):
        profile = VerticalAlignment()
        assert profile.elevation_at(10.0) is None
        assert profile.grade_at(10.0) is None
        assert profile.length == 0.0

    @pytest.mark.unit
    def test_single_point_is_constant(self):
        profile = VerticalAlignment.from_points([(0.0, 12.5)])
        assert profile.elevation_at(-50.0) == 12.5
        assert profile.elevation_at(0.0) == 12.5
        assert profile.elevation_at(1000.0) == 12.5

    @pytest.mark.unit
    def test_clamps_before_and_after(self):
        profile = VerticalAlignment.from_points([(10.0, 100.0), (20.0, 110.0)])
        assert profile.elevation_at(0.0) == 100.0
        assert profile.elevation_at(15.0) == pytest.approx(105.0)
        assert profile.elevation_at(30.0) == 110.0

    @pytest.mark.unit
    def test_gap_holds_previous_end(self):
        profile = VerticalAlignment([
            GradeSegment(0.0, 10.0, 0.0, 10.0),
            GradeSegment(20.0, 30.0, 20.0, 30.0),
        ])
        assert profile.elevation_at(15.0) == 10.0
        assert profile.elevation_at(25.0) == pytest.approx(25.0)

    @pytest.mark.unit
    def test_from_pvis_segments(self, pvi_profile):
        types = [segment.segment_type for segment in pvi_profile.segments]
        assert types == ["GRADE", "PARABOLIC", "GRADE"]
        assert pvi_profile.start_station == 0.0
        assert pvi_profile.end_station == 400.0

    @pytest.mark.unit
    def test_from_pvis_elevations(self, pvi_profile):
        assert pvi_profile.elevation_at(100.0) == pytest.approx(102.0)
        assert pvi_profile.elevation_at(160.0) == pytest.approx(103.2)
        # Middle ordinate A*L/8 = 0.03 * 80 / 8 below the PVI
        assert pvi_profile.elevation_at(200.0) == pytest.approx(103.7)
        assert pvi_profile.elevation_at(240.0) == pytest.approx(103.6)
        assert pvi_profile.elevation_at(400.0) == pytest.approx(102.0)
        assert pvi_profile.grade_at(300.0) == pytest.approx(-0.01)

    @pytest.mark.unit
    def test_from_pvis_assigns_grades(self):
        pvis = [
            PVI(station=0.0, elevation=100.0),
            PVI(station=200.0, elevation=104.0, curve_length=80.0),
            PVI(station=400.0, elevation=102.0),
        ]
        VerticalAlignment.from_pvis(pvis)
        assert pvis[1].grade_in == pytest.approx(0.02)
        assert pvis[1].grade_out == pytest.approx(-0.01)
        assert pvis[1].k_value == pytest.approx(80.0 / 3.0)

    @pytest.mark.unit
    def test_from_pvis_duplicate_station(self):
        with pytest.raises(ValueError):
            VerticalAlignment.from_pvis([
                PVI(station=0.0, elevation=100.0),
                PVI(station=0.0, elevation=101.0),
            ])


class TestClearance:
    """Tests for check_clearance against a ground surface."""

    @pytest.fixture
    def ground(self) -> Tin:
        return Tin.from_points([
            Point3(0.0, 0.0, 0.0),
            Point3(10.0, 0.0, 0.0),
            Point3(10.0, 10.0, 0.0),
            Point3(0.0, 10.0, 0.0),
        ])

    @pytest.fixture
    def horizontal(self) -> HorizontalAlignment:
        return HorizontalAlignment.from_polyline([Point(0.0, 5.0), Point(10.0, 5.0)])

    @pytest.mark.unit
    def test_clearance_met(self, ground, horizontal):
        profile = VerticalAlignment.from_points([(0.0, 2.0), (10.0, 2.0)])
        assert profile.check_clearance(horizontal, ground, 1.0, 2.5)

    @pytest.mark.unit
    def test_clearance_violated(self, ground, horizontal):
        profile = VerticalAlignment.from_points([(0.0, 2.0), (10.0, 2.0)])
        assert not profile.check_clearance(horizontal, ground, 3.0, 2.5)

    @pytest.mark.unit
    def test_lowest_spanning_segment_governs(self, ground, horizontal):
        profile = VerticalAlignment([
            GradeSegment(0.0, 10.0, 5.0, 5.0),
            GradeSegment(4.0, 6.0, 0.5, 0.5),
        ])
        assert not profile.check_clearance(horizontal, ground, 1.0, 1.0)

    @pytest.mark.unit
    def test_non_positive_interval_raises(self, ground, horizontal):
        profile = VerticalAlignment.from_points([(0.0, 2.0), (10.0, 2.0)])
        with pytest.raises(ValueError):
            profile.check_clearance(horizontal, ground, 1.0, 0.0)
