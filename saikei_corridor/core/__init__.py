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
Saikei Corridor Core Module

Pure Python corridor modeling:
- Geometry primitives and alignment geometry (horizontal, vertical, 3D)
- Triangulated surfaces (TIN)
- Modulation tables, subassemblies and the corridor engine
- Reactive corridor and surface models

Nothing here performs file I/O or rendering.
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

from .settings import CorridorSettings, DEFAULT_SETTINGS
from .geometry import (
    Arc,
    Point,
    Point3,
    Spiral,
    chaikin_smooth,
    distance,
    distance3,
    polygon_area,
)
from .horizontal_alignment import (
    CurveElement,
    HorizontalAlignment,
    HorizontalElement,
    SpiralElement,
    TangentElement,
    optimal_stationing,
    stakeout_position,
)
from .vertical_alignment import (
    PVI,
    GradeSegment,
    ParabolicSegment,
    VerticalAlignment,
)
from .alignment_3d import Alignment, AlignmentPoint3D
from .tin import BreaklineKind, ClassifiedBreakline, Tin
from .tin_model import DynamicTin, TinManager
from .modulation import (
    OffsetPoint,
    OffsetTable,
    SuperelevationPoint,
    SuperelevationTable,
    offset_at,
    slopes_at,
)
from .subassembly import ProfilePoint, Subassembly
from .corridor import (
    CrossSection,
    StationVolume,
    build_design_surface,
    build_design_surface_dynamic,
    corridor_cut_fill,
    corridor_mass_haul,
    corridor_station_volumes,
    corridor_volume,
    extract_cross_sections,
    extract_design_cross_sections,
    extract_polyline_cross_sections,
)
from .corridor_model import Corridor, DynamicCrossSections
from .station_formatting import format_station, parse_station

logger = get_logger(__name__)

__all__ = [
    "get_logger",
    "setup_logging",
    "CorridorSettings",
    "DEFAULT_SETTINGS",
    "Point",
    "Point3",
    "Arc",
    "Spiral",
    "distance",
    "distance3",
    "polygon_area",
    "chaikin_smooth",
    "HorizontalElement",
    "TangentElement",
    "CurveElement",
    "SpiralElement",
    "HorizontalAlignment",
    "stakeout_position",
    "optimal_stationing",
    "PVI",
    "GradeSegment",
    "ParabolicSegment",
    "VerticalAlignment",
    "Alignment",
    "AlignmentPoint3D",
    "Tin",
    "BreaklineKind",
    "ClassifiedBreakline",
    "DynamicTin",
    "TinManager",
    "OffsetPoint",
    "OffsetTable",
    "SuperelevationPoint",
    "SuperelevationTable",
    "offset_at",
    "slopes_at",
    "ProfilePoint",
    "Subassembly",
    "CrossSection",
    "StationVolume",
    "extract_cross_sections",
    "extract_polyline_cross_sections",
    "extract_design_cross_sections",
    "build_design_surface",
    "build_design_surface_dynamic",
    "corridor_volume",
    "corridor_cut_fill",
    "corridor_mass_haul",
    "corridor_station_volumes",
    "Corridor",
    "DynamicCrossSections",
    "format_station",
    "parse_station",
]
