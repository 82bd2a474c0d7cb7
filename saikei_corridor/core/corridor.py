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
Corridor Engine
===============

Pure functions that combine an Alignment, subassemblies and modulation
tables into cross-sections, design surfaces and earthwork quantities.

Pipeline:
    1. Walk stations 0..length by ``interval``
    2. At each station take the centerline point and unit tangent; the
       lateral normal is the tangent rotated 90 degrees counter-clockwise,
       (-dy, dx)
    3. Ground sections: sample a Tin at offsets -width..width
    4. Design sections: place each subassembly profile, shifted by its
       offset table and raised by grade + elevation + offset * slope
    5. Design surface: triangulate all design points into a fresh Tin
    6. Volumes: pair design/ground sections by index and integrate with
       the average end area method

Sign conventions:
    Delta z is design minus ground. Positive area/volume is fill, negative
    is cut. Cut/fill splitting happens per offset trapezoid, so a section
    that straddles the ground line contributes to both buckets.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .geometry import Point, Point3
from .logging_config import get_logger
from .modulation import SuperelevationTable, offset_at, slopes_at
from .settings import DEFAULT_SETTINGS
from .station_formatting import format_station
from .subassembly import Subassembly
from .tin import Tin

logger = get_logger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class CrossSection:
    """3D cross-section sampled at a station.

    Attributes:
        station: Station along the alignment (m)
        points: Sampled points, ordered by offset
    """
    station: float
    points: List[Point3]

    @property
    def label(self) -> str:
        """Station label, e.g. '0+120.00'."""
        return format_station(self.station)

    def __repr__(self) -> str:
        return f"CrossSection({self.label}, {len(self.points)} points)"


@dataclass
class StationVolume:
    """Earthwork quantities at one station.

    Attributes:
        station: Station (m)
        area: Signed section area, fill positive (m^2)
        volume: Volume from the previous station (m^3)
        cumulative: Running volume from the first station (m^3)
        haul: Running volume-distance, trapezoidal over cumulative (m^4)
    """
    station: float
    area: float
    volume: float
    cumulative: float
    haul: float


# =============================================================================
# Station Walking
# =============================================================================

def station_range(length: float, interval: float) -> List[float]:
    """Stations 0, interval, 2*interval, ... up to and including length.

    Stations are accumulated by repeated addition, so the last station is
    included only if the running sum does not overshoot ``length``.

    Raises:
        ValueError: If interval is not positive
    """
    if interval <= 0:
        raise ValueError(f"Station interval must be positive, got {interval}")

    stations = []
    station = 0.0
    while station <= length:
        stations.append(station)
        station += interval
    return stations


def offset_range(width: float, offset_step: float) -> List[float]:
    """Offsets -width, -width + step, ... up to and including width.

    Raises:
        ValueError: If offset_step is not positive
    """
    if offset_step <= 0:
        raise ValueError(f"Offset step must be positive, got {offset_step}")

    offsets = []
    offset = -width
    while offset <= width:
        offsets.append(offset)
        offset += offset_step
    return offsets


def _frame(horizontal, station: float) -> Optional[Tuple[Point, Point]]:
    """(centerline point, left normal) at a station."""
    center = horizontal.point_at(station)
    direction = horizontal.direction_at(station)
    if center is None or direction is None:
        return None
    return center, Point(-direction[1], direction[0])


# =============================================================================
# Cross-Section Extraction
# =============================================================================

def extract_polyline_cross_sections(
    tin: Tin,
    horizontal,
    width: float = DEFAULT_SETTINGS.width,
    interval: float = DEFAULT_SETTINGS.interval,
    offset_step: float = DEFAULT_SETTINGS.offset_step
) -> List[CrossSection]:
    """Slice a surface across a plan alignment.

    Offsets outside the mesh are omitted, so sections may have different
    point counts.

    Args:
        tin: Surface to sample
        horizontal: HorizontalAlignment (plan path only)
        width: Half-width sampled each side of the centerline
        interval: Station interval
        offset_step: Lateral sample spacing

    Returns:
        One CrossSection per station with a plan position
    """
    offsets = offset_range(width, offset_step)
    sections = []
    for station in station_range(horizontal.length(), interval):
        frame = _frame(horizontal, station)
        if frame is None:
            continue
        center, normal = frame

        points = []
        for offset in offsets:
            x = center.x + offset * normal.x
            y = center.y + offset * normal.y
            z = tin.elevation_at(x, y)
            if z is not None:
                points.append(Point3(x, y, z))
        sections.append(CrossSection(station, points))

    logger.debug("Extracted %d cross-sections", len(sections))
    return sections


def extract_cross_sections(
    tin: Tin,
    alignment,
    width: float = DEFAULT_SETTINGS.width,
    interval: float = DEFAULT_SETTINGS.interval,
    offset_step: float = DEFAULT_SETTINGS.offset_step
) -> List[CrossSection]:
    """Slice a surface across an Alignment's plan path.

    Only the horizontal part is used; elevations come from the surface.
    """
    return extract_polyline_cross_sections(
        tin, alignment.horizontal, width, interval, offset_step
    )


def design_elevation(
    grade: float,
    elevation: float,
    offset: float,
    slopes: Tuple[float, float]
) -> float:
    """Design z for a profile point.

    The right slope applies to positive offsets, the left slope to zero
    and negative offsets.
    """
    left_slope, right_slope = slopes
    slope = right_slope if offset > 0 else left_slope
    return grade + elevation + offset * slope


def extract_design_cross_sections(
    alignment,
    subs: Sequence[Subassembly],
    superelevation: Optional[SuperelevationTable] = None,
    interval: float = DEFAULT_SETTINGS.interval
) -> List[CrossSection]:
    """Place subassemblies along an alignment.

    For each station with a plan position and a grade, every subassembly
    contributes its profile_at(station) shape shifted by its offset table.
    Cross-slope comes from the subassembly's own superelevation table if
    it has one, else from ``superelevation``, else (0, 0).

    Args:
        alignment: Alignment (horizontal + vertical)
        subs: Subassemblies, placed in order
        superelevation: Corridor-wide cross-slope table
        interval: Station interval

    Returns:
        One CrossSection per station, points in subassembly order
    """
    sections = []
    for station in station_range(alignment.horizontal.length(), interval):
        frame = _frame(alignment.horizontal, station)
        grade = alignment.vertical.elevation_at(station)
        if frame is None or grade is None:
            continue
        center, normal = frame

        points = []
        for sub in subs:
            shift = offset_at(sub.offsets, station)
            table = sub.superelevation if sub.superelevation is not None else superelevation
            slopes = slopes_at(table, station)
            for offset, elevation in sub.profile_at(station):
                lateral = offset + shift
                points.append(Point3(
                    center.x + lateral * normal.x,
                    center.y + lateral * normal.y,
                    design_elevation(grade, elevation, lateral, slopes),
                ))
        sections.append(CrossSection(station, points))

    return sections


# =============================================================================
# Design Surface
# =============================================================================

def build_design_surface(
    alignment,
    subs: Sequence[Subassembly],
    interval: float = DEFAULT_SETTINGS.interval
) -> Tin:
    """Triangulate the static profiles of ``subs`` along an alignment.

    Uses each subassembly's base ``profile`` only: offset tables, profile
    tables and superelevation are ignored. z = grade + elevation.
    """
    points = []
    for station in station_range(alignment.horizontal.length(), interval):
        frame = _frame(alignment.horizontal, station)
        grade = alignment.vertical.elevation_at(station)
        if frame is None or grade is None:
            continue
        center, normal = frame
        for sub in subs:
            for offset, elevation in sub.profile:
                points.append(Point3(
                    center.x + offset * normal.x,
                    center.y + offset * normal.y,
                    grade + elevation,
                ))

    logger.debug("Design surface from %d points", len(points))
    return Tin.from_points(points)


def build_design_surface_dynamic(
    alignment,
    subs: Sequence[Subassembly],
    superelevation: Optional[SuperelevationTable] = None,
    interval: float = DEFAULT_SETTINGS.interval
) -> Tin:
    """Triangulate extract_design_cross_sections() output into a fresh Tin."""
    sections = extract_design_cross_sections(alignment, subs, superelevation, interval)
    points = [point for section in sections for point in section.points]
    logger.debug(
        "Design surface from %d points over %d stations", len(points), len(sections)
    )
    return Tin.from_points(points)


# =============================================================================
# Earthwork
# =============================================================================

def _section_pairs(
    design: Tin,
    ground: Tin,
    alignment,
    width: float,
    interval: float,
    offset_step: float
) -> List[Tuple[CrossSection, CrossSection]]:
    """Design/ground sections on the same grid, paired by index."""
    design_sections = extract_cross_sections(design, alignment, width, interval, offset_step)
    ground_sections = extract_cross_sections(ground, alignment, width, interval, offset_step)
    return list(zip(design_sections, ground_sections))


def _segment_areas(
    design_section: CrossSection,
    ground_section: CrossSection,
    offset_step: float
) -> List[float]:
    """Signed trapezoid areas between consecutive matched points."""
    count = min(len(design_section.points), len(ground_section.points))
    if count < 2:
        return []

    dz = [
        design_section.points[j].z - ground_section.points[j].z
        for j in range(count)
    ]
    return [(dz[j] + dz[j + 1]) * 0.5 * offset_step for j in range(count - 1)]


def _average_end_area(areas: Sequence[float], interval: float) -> List[float]:
    """Volume between each consecutive pair of section areas."""
    return [
        (areas[i] + areas[i + 1]) * 0.5 * interval
        for i in range(len(areas) - 1)
    ]


def corridor_volume(
    design: Tin,
    ground: Tin,
    alignment,
    width: float = DEFAULT_SETTINGS.width,
    interval: float = DEFAULT_SETTINGS.interval,
    offset_step: float = DEFAULT_SETTINGS.offset_step
) -> float:
    """Net volume of design above ground (fill positive).

    Returns 0.0 when fewer than two section pairs exist.
    """
    pairs = _section_pairs(design, ground, alignment, width, interval, offset_step)
    if len(pairs) < 2:
        return 0.0

    areas = [sum(_segment_areas(d, g, offset_step)) for d, g in pairs]
    volume = 0.0
    for v in _average_end_area(areas, interval):
        volume += v
    return volume


def corridor_cut_fill(
    design: Tin,
    ground: Tin,
    alignment,
    width: float = DEFAULT_SETTINGS.width,
    interval: float = DEFAULT_SETTINGS.interval,
    offset_step: float = DEFAULT_SETTINGS.offset_step
) -> Tuple[float, float]:
    """(cut, fill) volumes, both as positive magnitudes.

    Each offset trapezoid's area goes to the fill bucket if positive and
    to the cut bucket otherwise, before average end area integration.
    """
    pairs = _section_pairs(design, ground, alignment, width, interval, offset_step)
    if len(pairs) < 2:
        return 0.0, 0.0

    cut_areas = []
    fill_areas = []
    for d, g in pairs:
        cut_area = 0.0
        fill_area = 0.0
        for area in _segment_areas(d, g, offset_step):
            if area > 0.0:
                fill_area += area
            else:
                cut_area -= area
        cut_areas.append(cut_area)
        fill_areas.append(fill_area)

    cut = 0.0
    for v in _average_end_area(cut_areas, interval):
        cut += v
    fill = 0.0
    for v in _average_end_area(fill_areas, interval):
        fill += v
    return cut, fill


def corridor_station_volumes(
    design: Tin,
    ground: Tin,
    alignment,
    width: float = DEFAULT_SETTINGS.width,
    interval: float = DEFAULT_SETTINGS.interval,
    offset_step: float = DEFAULT_SETTINGS.offset_step
) -> List[StationVolume]:
    """Per-station area, incremental volume, cumulative volume and haul.

    The first station carries zero volume. Haul accumulates the average of
    consecutive cumulative volumes times the interval.
    """
    pairs = _section_pairs(design, ground, alignment, width, interval, offset_step)

    results: List[StationVolume] = []
    cumulative = 0.0
    haul = 0.0
    previous_area = 0.0
    for i, (d, g) in enumerate(pairs):
        area = sum(_segment_areas(d, g, offset_step))
        volume = 0.0
        if i > 0:
            volume = (previous_area + area) * 0.5 * interval
            previous_cumulative = cumulative
            cumulative += volume
            haul += (previous_cumulative + cumulative) * 0.5 * interval
        results.append(StationVolume(d.station, area, volume, cumulative, haul))
        previous_area = area

    return results


def corridor_mass_haul(
    design: Tin,
    ground: Tin,
    alignment,
    width: float = DEFAULT_SETTINGS.width,
    interval: float = DEFAULT_SETTINGS.interval,
    offset_step: float = DEFAULT_SETTINGS.offset_step
) -> List[Tuple[float, float]]:
    """(station, cumulative volume) pairs, fill positive, starting at 0."""
    return [
        (entry.station, entry.cumulative)
        for entry in corridor_station_volumes(
            design, ground, alignment, width, interval, offset_step
        )
    ]


__all__ = [
    "CrossSection",
    "StationVolume",
    "station_range",
    "offset_range",
    "extract_cross_sections",
    "extract_polyline_cross_sections",
    "extract_design_cross_sections",
    "design_elevation",
    "build_design_surface",
    "build_design_surface_dynamic",
    "corridor_volume",
    "corridor_cut_fill",
    "corridor_station_volumes",
    "corridor_mass_haul",
]
