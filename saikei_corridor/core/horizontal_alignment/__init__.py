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
Horizontal Alignment Package
============================

Plan geometry built from tangents, circular curves and clothoid spirals.

Modules:
    elements: Tangent, curve and spiral element types
    clothoid: Fresnel-integral evaluation of Euler spirals
    curve_geometry: Circular curve fitting at PIs
    manager: HorizontalAlignment (station-based sampling)
    stakeout: Offset positions and station lists
"""

from .clothoid import fresnel_cs, spiral_point, spiral_direction
from .curve_geometry import calculate_curve_geometry, curve_geometry_to_arc
from .elements import CurveElement, HorizontalElement, SpiralElement, TangentElement
from .manager import HorizontalAlignment
from .stakeout import optimal_stationing, stakeout_position

__all__ = [
    "fresnel_cs",
    "spiral_point",
    "spiral_direction",
    "calculate_curve_geometry",
    "curve_geometry_to_arc",
    "HorizontalElement",
    "TangentElement",
    "CurveElement",
    "SpiralElement",
    "HorizontalAlignment",
    "stakeout_position",
    "optimal_stationing",
]
