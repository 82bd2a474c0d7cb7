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
Tests for Corridor Engine
=========================

Tests for cross-section extraction, design surfaces and earthwork
quantities.
"""

import pytest

from saikei_corridor.core.alignment_3d import Alignment
from saikei_corridor.core.corridor import (
    CrossSection,
    build_design_surface,
    build_design_surface_dynamic,
    corridor_cut_fill,
    corridor_mass_haul,
    corridor_station_volumes,
    corridor_volume,
    design_elevation,
    extract_cross_sections,
    extract_design_cross_sections,
    extract_polyline_cross_sections,
    offset_range,
    station_range,
)
from saikei_corridor.core.geometry import Point, Point3
from saikei_corridor.core.horizontal_alignment import HorizontalAlignment
from saikei_corridor.core.modulation import OffsetPoint, SuperelevationPoint
from saikei_corridor.core.tin import Tin
from saikei_corridor.core.vertical_alignment import VerticalAlignment


@pytest.fixture
def mid_alignment() -> Alignment:
    """Alignment through the middle of the 10 x 10 flat_tin."""
    horizontal = HorizontalAlignment.from_polyline([Point(0.0, 5.0), Point(10.0, 5.0)])
    vertical = VerticalAlignment.from_points([(0.0, 0.0), (10.0, 0.0)])
    return Alignment(horizontal, vertical)


class TestStationWalking:
    """Tests for station and offset ranges."""

    @pytest.mark.unit
    def test_station_range(self):
        assert station_range(10.0, 5.0) == [0.0, 5.0, 10.0]
        assert station_range(10.0, 3.0) == [0.0, 3.0, 6.0, 9.0]
        assert station_range(0.0, 1.0) == [0.0]

    @pytest.mark.unit
    def test_offset_range(self):
        assert offset_range(1.0, 1.0) == [-1.0, 0.0, 1.0]
        assert offset_range(5.0, 2.5) == [-5.0, -2.5, 0.0, 2.5, 5.0]

    @pytest.mark.unit
    def test_non_positive_steps_raise(self):
        with pytest.raises(ValueError):
            station_range(10.0, 0.0)
        with pytest.raises(ValueError):
            offset_range(1.0, -1.0)


class TestCrossSections:
    """Tests for ground cross-section extraction."""

    @pytest.mark.unit
    def test_flat_sections(self, flat_tin, mid_alignment):
        sections = extract_cross_sections(flat_tin, mid_alignment, 5.0, 5.0, 2.5)
        assert [s.station for s in sections] == [0.0, 5.0, 10.0]
        for section in sections:
            assert len(section.points) == 5
            for point in section.points:
                assert point.z == pytest.approx(0.0)

    @pytest.mark.unit
    def test_offsets_run_right_to_left(self, flat_tin, mid_alignment):
        section = extract_cross_sections(flat_tin, mid_alignment, 5.0, 5.0, 2.5)[1]
        assert [p.y for p in section.points] == pytest.approx([0.0, 2.5, 5.0, 7.5, 10.0])
        assert all(p.x == pytest.approx(5.0) for p in section.points)

    @pytest.mark.unit
    def test_points_off_mesh_omitted(self, flat_tin, mid_alignment):
        sections = extract_polyline_cross_sections(
            flat_tin, mid_alignment.horizontal, 7.5, 10.0, 2.5)
        assert [len(s.points) for s in sections] == [5, 5]

    @pytest.mark.unit
    def test_label(self):
        assert CrossSection(120.0, []).label == "0+120.00"


class TestDesignSections:
    """Tests for design cross-sections and design surfaces."""

    @pytest.mark.unit
    def test_design_elevation(self):
        assert design_elevation(10.0, 0.5, 2.0, (0.01, -0.02)) == pytest.approx(10.46)
        assert design_elevation(10.0, 0.0, 0.0, (0.01, -0.02)) == 10.0
        assert design_elevation(10.0, 0.0, -2.0, (0.01, -0.02)) == pytest.approx(9.98)

    @pytest.mark.unit
    def test_flat_design_follows_grade(self, straight_alignment, flat_section):
        sections = extract_design_cross_sections(straight_alignment, [flat_section], None, 50.0)
        assert [s.station for s in sections] == [0.0, 50.0, 100.0]
        assert [p.z for p in sections[1].points] == pytest.approx([101.0, 101.0, 101.0])
        assert [p.y for p in sections[1].points] == pytest.approx([-1.0, 0.0, 1.0])

    @pytest.mark.unit
    def test_superelevation_left_and_right(self, short_alignment, flat_section):
        table = [SuperelevationPoint(0.0, 0.02, -0.04)]
        section = extract_design_cross_sections(short_alignment, [flat_section], table, 10.0)[0]
        assert [p.z for p in section.points] == pytest.approx([-0.02, 0.0, -0.04])

    @pytest.mark.unit
    def test_offset_table_shifts_profile(self, short_alignment, flat_section):
        shifted = flat_section.with_offsets([OffsetPoint(0.0, 1.0)])
        table = [SuperelevationPoint(0.0, 0.02, -0.04)]
        section = extract_design_cross_sections(short_alignment, [shifted], table, 10.0)[0]
        assert [p.y for p in section.points] == pytest.approx([0.0, 1.0, 2.0])
        assert [p.z for p in section.points] == pytest.approx([0.0, -0.04, -0.08])

    @pytest.mark.unit
    def test_own_superelevation_overrides_corridor(self, short_alignment, flat_section):
        own = flat_section.with_superelevation([SuperelevationPoint(0.0, 0.0, 0.0)])
        table = [SuperelevationPoint(0.0, 0.02, -0.04)]
        section = extract_design_cross_sections(short_alignment, [own], table, 10.0)[0]
        assert [p.z for p in section.points] == pytest.approx([0.0, 0.0, 0.0])

    @pytest.mark.unit
    def test_build_design_surface(self, short_alignment, flat_section):
        surface = build_design_surface(short_alignment, [flat_section], 10.0)
        assert len(surface.vertices) == 6
        assert surface.elevation_at(5.0, 0.5) == pytest.approx(0.0)

    @pytest.mark.unit
    def test_static_surface_ignores_tables(self, short_alignment, flat_section):
        sloped = flat_section.with_superelevation([SuperelevationPoint(0.0, 0.1, 0.1)])
        static = build_design_surface(short_alignment, [sloped], 10.0)
        dynamic = build_design_surface_dynamic(short_alignment, [sloped], None, 10.0)
        assert static.elevation_at(5.0, 1.0) == pytest.approx(0.0)
        assert dynamic.elevation_at(5.0, 1.0) == pytest.approx(0.1)


class TestEarthwork:
    """Tests for volumes, cut/fill and mass haul."""

    @pytest.mark.unit
    def test_prism_volume(self, prism_design, prism_ground, short_alignment):
        volume = corridor_volume(prism_design, prism_ground, short_alignment, 1.0, 10.0, 1.0)
        assert volume == pytest.approx(20.0)

    @pytest.mark.unit
    def test_prism_cut_fill(self, prism_design, prism_ground, short_alignment):
        cut, fill = corridor_cut_fill(prism_design, prism_ground, short_alignment, 1.0, 10.0, 1.0)
        assert cut == pytest.approx(0.0, abs=1e-6)
        assert fill == pytest.approx(20.0)

    @pytest.mark.unit
    def test_design_below_ground_is_cut(self, prism_design, prism_ground, short_alignment):
        cut, fill = corridor_cut_fill(prism_ground, prism_design, short_alignment, 1.0, 10.0, 1.0)
        assert cut == pytest.approx(20.0)
        assert fill == pytest.approx(0.0, abs=1e-6)
        volume = corridor_volume(prism_ground, prism_design, short_alignment, 1.0, 10.0, 1.0)
        assert volume == pytest.approx(-20.0)

    @pytest.mark.unit
    def test_tilted_design_splits_cut_and_fill(self, short_alignment):
        """Design plane z = y + 0.5 crosses flat ground inside each section."""
        corners = [(-1.0, -3.0), (11.0, -3.0), (11.0, 3.0), (-1.0, 3.0)]
        design = Tin.from_points([Point3(x, y, y + 0.5) for x, y in corners])
        ground = Tin.from_points([Point3(x, y, 0.0) for x, y in corners])

        cut, fill = corridor_cut_fill(design, ground, short_alignment, 2.0, 10.0, 1.0)
        volume = corridor_volume(design, ground, short_alignment, 2.0, 10.0, 1.0)

        assert cut > 0.0
        assert fill > 0.0
        # Trapezoid areas per section: -1, 0, 1, 2
        assert cut == pytest.approx(10.0)
        assert fill == pytest.approx(30.0)
        assert fill - cut == pytest.approx(volume)
        assert volume == pytest.approx(20.0)

    @pytest.mark.unit
    def test_prism_mass_haul(self, prism_design, prism_ground, short_alignment):
        haul = corridor_mass_haul(prism_design, prism_ground, short_alignment, 1.0, 10.0, 1.0)
        assert len(haul) == 2
        assert haul[0] == (0.0, 0.0)
        assert haul[-1][1] == pytest.approx(20.0)

    @pytest.mark.unit
    def test_prism_station_volumes(self, prism_design, prism_ground, short_alignment):
        volumes = corridor_station_volumes(
            prism_design, prism_ground, short_alignment, 1.0, 10.0, 1.0)
        assert len(volumes) == 2
        assert volumes[0].volume == 0.0
        assert volumes[0].area == pytest.approx(2.0)
        last = volumes[-1]
        assert last.cumulative == pytest.approx(20.0)
        assert last.haul > 0.0
        assert last.haul == pytest.approx(100.0)

    @pytest.mark.unit
    def test_single_section_has_no_volume(self, prism_design, prism_ground, short_alignment):
        assert corridor_volume(prism_design, prism_ground, short_alignment, 1.0, 20.0, 1.0) == 0.0
        assert corridor_cut_fill(
            prism_design, prism_ground, short_alignment, 1.0, 20.0, 1.0) == (0.0, 0.0)
        assert corridor_mass_haul(
            prism_design, prism_ground, short_alignment, 1.0, 20.0, 1.0) == [(0.0, 0.0)]
