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
Subassemblies
=============

Cross-section templates applied along an alignment, and a library of
common roadway shapes.

A profile is a list of (offset, elevation) points relative to the
alignment grade line. Offsets are measured along the left normal of the
alignment (positive to the left of travel); elevations are relative to
the grade.

Sign convention for library slopes:
    slope is rise over run along increasing offset, so a lane built with
    slope=-0.02 falls 2% away from the attachment point.

Example:
    >>> section = compose([lane(3.0, -0.02), curb(0.15, 0.3)])
    >>> len(section.profile)
    4
    >>> [round(v, 6) for v in section.profile[-1]]
    [3.3, 0.09]
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from .geometry import Point3
from .modulation import OffsetTable, SuperelevationTable

Profile = List[Tuple[float, float]]


@dataclass
class ProfilePoint:
    """Profile shape in effect at a station.

    Attributes:
        station: Station of this entry (m)
        profile: (offset, elevation) points
    """
    station: float
    profile: Profile


@dataclass
class Subassembly:
    """Cross-section template.

    Attributes:
        profile: Default (offset, elevation) shape
        offsets: Optional lateral shift per station
        superelevation: Optional cross-slope table; overrides the
            corridor-wide superelevation for this subassembly only
        profile_table: Optional station-varying shape; overrides profile
        name: Optional label
    """
    profile: Profile
    offsets: Optional[OffsetTable] = None
    superelevation: Optional[SuperelevationTable] = None
    profile_table: Optional[List[ProfilePoint]] = None
    name: str = ""

    def profile_at(self, station: float) -> Profile:
        """Shape in effect at a station.

        Without a profile table this is ``profile``. With one, the table
        is clamped at its ends; between two entries with the same number
        of points the shape is interpolated pointwise, otherwise the
        earlier entry's shape is used.
        """
        table = self.profile_table
        if not table:
            return list(self.profile)

        if station <= table[0].station:
            return list(table[0].profile)
        if station >= table[-1].station:
            return list(table[-1].profile)

        for before, after in zip(table[:-1], table[1:]):
            if not before.station <= station <= after.station:
                continue
            span = after.station - before.station
            if span <= 0 or len(before.profile) != len(after.profile):
                return list(before.profile)
            t = (station - before.station) / span
            return [
                ((1.0 - t) * o0 + t * o1, (1.0 - t) * e0 + t * e1)
                for (o0, e0), (o1, e1) in zip(before.profile, after.profile)
            ]

        return list(table[-1].profile)

    def with_offsets(self, offsets: OffsetTable) -> "Subassembly":
        return replace(self, offsets=list(offsets))

    def with_superelevation(self, table: SuperelevationTable) -> "Subassembly":
        return replace(self, superelevation=list(table))


# ============================================================================
# LIBRARY
# ============================================================================

def _run(width: float, slope: float, name: str) -> Subassembly:
    return Subassembly([(0.0, 0.0), (width, width * slope)], name=name)


def lane(width: float, slope: float) -> Subassembly:
    """Travel lane of ``width`` at a constant cross slope."""
    return _run(width, slope, "Lane")


def shoulder(width: float, slope: float) -> Subassembly:
    """Paved shoulder of ``width`` at a constant cross slope."""
    return _run(width, slope, "Shoulder")


def sidewalk(width: float, slope: float) -> Subassembly:
    """Sidewalk of ``width`` at a constant cross slope."""
    return _run(width, slope, "Sidewalk")


def daylight(width: float, slope: float) -> Subassembly:
    """Fixed-width daylight slope."""
    return _run(width, slope, "Daylight")


def curb(height: float, width: float) -> Subassembly:
    """Vertical curb face of ``height`` with a flat top of ``width``."""
    return Subassembly([(0.0, 0.0), (0.0, height), (width, height)], name="Curb")


def curb_and_gutter(
    height: float,
    curb_width: float,
    gutter_width: float,
    gutter_slope: float
) -> Subassembly:
    """Curb followed by a gutter of ``gutter_width`` at ``gutter_slope``."""
    return Subassembly(
        [
            (0.0, 0.0),
            (0.0, height),
            (curb_width, height),
            (curb_width + gutter_width, height + gutter_width * gutter_slope),
        ],
        name="Curb and Gutter",
    )


def median(width: float, height: float) -> Subassembly:
    """Raised median with vertical faces, returning to grade at ``width``."""
    return Subassembly(
        [(0.0, 0.0), (0.0, height), (width, height), (width, 0.0)],
        name="Median",
    )


def ditch(depth: float, bottom_width: float, side_slope: float) -> Subassembly:
    """Trapezoidal ditch.

    Args:
        depth: Ditch depth below grade
        bottom_width: Flat bottom width (0 for a V ditch)
        side_slope: Horizontal run per unit of depth
    """
    run = depth * abs(side_slope)
    points = [(0.0, 0.0), (run, -depth)]
    if bottom_width > 0:
        points.append((run + bottom_width, -depth))
    points.append((run + bottom_width + run, 0.0))
    return Subassembly(points, name="Ditch")


def retaining_wall(height: float, width: float) -> Subassembly:
    """Wall dropping ``height`` with a footing of ``width``."""
    return Subassembly([(0.0, 0.0), (0.0, -height), (width, -height)], name="Retaining Wall")


def transition(start: Subassembly, end: Subassembly, length: float) -> Subassembly:
    """Shape that morphs from ``start`` at station 0 to ``end`` at ``length``."""
    table = [
        ProfilePoint(station=0.0, profile=list(start.profile)),
        ProfilePoint(station=length, profile=list(end.profile)),
    ]
    return Subassembly(list(start.profile), profile_table=table, name="Transition")


def mirror(sub: Subassembly) -> Subassembly:
    """Reflect a subassembly to the other side of the alignment.

    Points are reversed and offsets negated; the first point is pinned to
    offset 0.
    """
    profile = [(-offset, elevation) for offset, elevation in reversed(sub.profile)]
    if profile:
        profile[0] = (0.0, profile[0][1])
    return Subassembly(profile, name=sub.name)


def compose(parts: Sequence[Subassembly]) -> Subassembly:
    """Join subassemblies end to start into one profile.

    Each part is shifted so its first point lands on the previous part's
    last point; the shared vertex is kept once.
    """
    profile: Profile = []
    offset = 0.0
    elevation = 0.0
    for part in parts:
        if not part.profile:
            continue
        for i, (o, e) in enumerate(part.profile):
            if i == 0 and profile:
                continue
            profile.append((offset + o, elevation + e))
        last_offset, last_elevation = part.profile[-1]
        offset += last_offset
        elevation += last_elevation
    return Subassembly(profile)


def symmetric_section(parts_right: Sequence[Subassembly]) -> List[Subassembly]:
    """[left, right] subassemblies from a list of one-side parts."""
    right = compose(parts_right)
    left = mirror(right)
    return [left, right]


def daylight_to_surface(
    surface,
    alignment,
    slope: float,
    interval: float,
    step: float,
    max_dist: float
) -> Subassembly:
    """Daylight run that targets an existing surface.

    At each station the grade point is projected at ``slope`` onto
    ``surface`` (see Tin.slope_projection). A non-positive slope projects
    along the left normal (positive offsets), a positive slope along the
    right. Each hit becomes a two-point profile table entry; stations
    without a hit are left out.

    Args:
        surface: Target Tin
        alignment: Alignment supplying centerline and grade
        slope: Daylight grade (rise over run)
        interval: Station spacing of table entries
        step: March step of the projection
        max_dist: Maximum projection distance

    Returns:
        Subassembly whose profile is the first table entry (or a single
        origin point if nothing was hit)

    Raises:
        ValueError: If interval is not positive
    """
    if interval <= 0:
        raise ValueError(f"Interval must be positive, got {interval}")

    table: List[ProfilePoint] = []
    length = alignment.horizontal.length()
    station = 0.0
    while station <= length:
        center = alignment.horizontal.point_at(station)
        direction = alignment.horizontal.direction_at(station)
        grade = alignment.vertical.elevation_at(station)
        if center is not None and direction is not None and grade is not None:
            normal = (-direction[1], direction[0])
            side = normal if slope <= 0 else (-normal[0], -normal[1])
            hit = surface.slope_projection(
                Point3(center.x, center.y, grade), side, slope, step, max_dist
            )
            if hit is not None:
                distance = (hit.x - center.x) * side[0] + (hit.y - center.y) * side[1]
                offset = distance if slope <= 0 else -distance
                table.append(ProfilePoint(station, [(0.0, 0.0), (offset, slope * distance)]))
        station += interval

    profile = list(table[0].profile) if table else [(0.0, 0.0)]
    return Subassembly(profile, profile_table=table, name="Daylight to Surface")


__all__ = [
    "Profile",
    "ProfilePoint",
    "Subassembly",
    "lane",
    "shoulder",
    "sidewalk",
    "daylight",
    "curb",
    "curb_and_gutter",
    "median",
    "ditch",
    "retaining_wall",
    "transition",
    "mirror",
    "compose",
    "symmetric_section",
    "daylight_to_surface",
]
