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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the Saikei Corridor test suite.
"""

import pytest

from saikei_corridor.core import (
    Alignment,
    HorizontalAlignment,
    Point,
    Point3,
    Subassembly,
    Tin,
    VerticalAlignment,
)


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow running tests")


# =============================================================================
# Alignment Fixtures
# =============================================================================

@pytest.fixture
def straight_horizontal() -> HorizontalAlignment:
    """100 m tangent along +X from the origin."""
    return HorizontalAlignment.from_polyline([Point(0.0, 0.0), Point(100.0, 0.0)])


@pytest.fixture
def curved_horizontal() -> HorizontalAlignment:
    """Tangent, 50 m radius left curve, tangent (90 degree turn)."""
    return HorizontalAlignment.from_pis(
        [Point(0.0, 0.0), Point(100.0, 0.0), Point(100.0, 100.0)],
        radii=[None, 50.0, None],
    )


@pytest.fixture
def straight_alignment(straight_horizontal) -> Alignment:
    """Straight alignment rising 2% from elevation 100."""
    vertical = VerticalAlignment.from_points([(0.0, 100.0), (100.0, 102.0)])
    return Alignment(straight_horizontal, vertical)


@pytest.fixture
def short_alignment() -> Alignment:
    """10 m flat alignment along +X at elevation 0."""
    horizontal = HorizontalAlignment.from_polyline([Point(0.0, 0.0), Point(10.0, 0.0)])
    vertical = VerticalAlignment.from_points([(0.0, 0.0), (10.0, 0.0)])
    return Alignment(horizontal, vertical)


# =============================================================================
# Surface Fixtures
# =============================================================================

def flat_square(size: float, z: float) -> Tin:
    """Two-triangle square [0, size] x [0, size] at constant elevation."""
    return Tin.from_points([
        Point3(0.0, 0.0, z),
        Point3(size, 0.0, z),
        Point3(size, size, z),
        Point3(0.0, size, z),
    ])


@pytest.fixture
def flat_tin() -> Tin:
    """10 x 10 m square at elevation 0."""
    return flat_square(10.0, 0.0)


@pytest.fixture
def unit_square_tin() -> Tin:
    """1 x 1 m square at elevation 1."""
    return flat_square(1.0, 1.0)


@pytest.fixture
def prism_design() -> Tin:
    """2 m wide strip along the X axis at elevation 1."""
    return Tin.from_points([
        Point3(0.0, -1.0, 1.0),
        Point3(0.0, 1.0, 1.0),
        Point3(10.0, -1.0, 1.0),
        Point3(10.0, 1.0, 1.0),
    ])


@pytest.fixture
def prism_ground() -> Tin:
    """Same strip as prism_design at elevation 0."""
    return Tin.from_points([
        Point3(0.0, -1.0, 0.0),
        Point3(0.0, 1.0, 0.0),
        Point3(10.0, -1.0, 0.0),
        Point3(10.0, 1.0, 0.0),
    ])


# =============================================================================
# Subassembly Fixtures
# =============================================================================

@pytest.fixture
def flat_section() -> Subassembly:
    """Flat 2 m section from offset -1 to 1."""
    return Subassembly([(-1.0, 0.0), (0.0, 0.0), (1.0, 0.0)], name="Flat")
