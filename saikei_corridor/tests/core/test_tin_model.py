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
Tests for Reactive Surface Model
================================

Tests that DynamicTin re-triangulates whenever its points or constraints
change, and for TinManager bookkeeping.
"""

import pytest

from saikei_corridor.core.geometry import Point3
from saikei_corridor.core.tin import Tin
from saikei_corridor.core.tin_model import DynamicTin, TinManager


def rhombus() -> list:
    return [
        Point3(0.0, 0.0, 0.0),
        Point3(10.0, -1.0, 0.0),
        Point3(20.0, 0.0, 0.0),
        Point3(10.0, 1.0, 5.0),
    ]


class TestDynamicTin:
    """Tests for DynamicTin rebuilds."""

    @pytest.mark.unit
    def test_initial_surface(self):
        surface = DynamicTin(rhombus())
        assert len(surface.tin.triangles) == 2
        assert surface.tin.elevation_at(10.0, 0.0) == pytest.approx(2.5)

    @pytest.mark.unit
    def test_update_point_rebuilds(self):
        surface = DynamicTin(rhombus())
        before = surface.tin
        surface.update_point(3, Point3(10.0, 1.0, 9.0))
        assert surface.tin is not before
        assert surface.tin.elevation_at(10.0, 0.0) == pytest.approx(4.5)

    @pytest.mark.unit
    def test_update_point_out_of_range(self):
        surface = DynamicTin(rhombus())
        with pytest.raises(IndexError):
            surface.update_point(4, Point3(0.0, 0.0, 0.0))
        assert surface.points == rhombus()

    @pytest.mark.unit
    def test_add_breakline_rebuilds(self):
        surface = DynamicTin(rhombus())
        assert surface.add_breakline(0, 2)
        assert surface.tin.elevation_at(10.0, 0.0) == pytest.approx(0.0)

    @pytest.mark.unit
    def test_duplicate_breakline_ignored(self):
        surface = DynamicTin(rhombus())
        surface.add_breakline(0, 2)
        current = surface.tin
        assert not surface.add_breakline(2, 0)
        assert surface.breaklines == [(0, 2)]
        assert surface.tin is current

    @pytest.mark.unit
    def test_breakline_out_of_range(self):
        surface = DynamicTin(rhombus())
        with pytest.raises(IndexError):
            surface.add_breakline(0, 7)
        assert surface.breaklines == []

    @pytest.mark.unit
    def test_breakline_survives_point_update(self):
        surface = DynamicTin(rhombus())
        surface.add_breakline(0, 2)
        surface.update_point(3, Point3(10.0, 1.0, 9.0))
        assert surface.tin.elevation_at(10.0, 0.0) == pytest.approx(0.0)

    @pytest.mark.unit
    def test_boundary_and_hole(self):
        points = [
            Point3(0.0, 0.0, 1.0),
            Point3(10.0, 0.0, 1.0),
            Point3(10.0, 10.0, 1.0),
            Point3(0.0, 10.0, 1.0),
            Point3(4.0, 4.0, 1.0),
            Point3(6.0, 4.0, 1.0),
            Point3(6.0, 6.0, 1.0),
            Point3(4.0, 6.0, 1.0),
        ]
        surface = DynamicTin(points)
        surface.set_boundary([0, 1, 2, 3])
        assert surface.tin.elevation_at(5.0, 5.0) == pytest.approx(1.0)

        surface.add_hole([4, 5, 6, 7])
        assert surface.tin.elevation_at(5.0, 5.0) is None
        assert surface.tin.volume_to_elevation(0.0) == pytest.approx(96.0)

    @pytest.mark.unit
    def test_add_point(self):
        surface = DynamicTin(rhombus())
        index = surface.add_point(Point3(10.0, 0.0, 1.0))
        assert index == 4
        assert surface.tin.elevation_at(10.0, 0.0) == pytest.approx(1.0)


class TestTinManager:
    """Tests for TinManager."""

    @pytest.mark.unit
    def test_add_get_remove(self):
        manager = TinManager()
        assert manager.is_empty
        ground = Tin.from_points(rhombus())
        proposed = Tin()
        assert manager.add(ground) == 0
        assert manager.add(proposed) == 1
        assert len(manager) == 2
        assert manager.get(1) is proposed
        assert list(manager) == [ground, proposed]

        assert manager.remove(0) is ground
        assert manager.get(0) is proposed
        assert len(manager) == 1

    @pytest.mark.unit
    def test_out_of_range(self):
        manager = TinManager([Tin()])
        assert manager.get(5) is None
        assert manager.get(-1) is None
        assert manager.remove(3) is None
        assert len(manager) == 1
