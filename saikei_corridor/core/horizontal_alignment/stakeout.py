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
Stakeout Helpers
================

Field positions relative to a horizontal alignment.

Offsets use the same lateral normal as cross-section sampling: the unit
tangent rotated 90 degrees counter-clockwise, so positive offsets are to
the left of the direction of travel.
"""

from typing import List, Optional

from ..geometry import Point
from .manager import HorizontalAlignment

# Stations closer than this are merged by optimal_stationing()
STATION_TOLERANCE = 1e-6


def stakeout_position(
    alignment: HorizontalAlignment,
    station: float,
    offset: float
) -> Optional[Point]:
    """Point at ``station`` shifted ``offset`` along the left normal.

    Returns:
        Stakeout point, or None outside [0, length]

    Example:
        >>> halign = HorizontalAlignment.from_polyline([Point(0, 0), Point(10, 0)])
        >>> stakeout_position(halign, 5.0, 1.0)
        Point(x=5.0, y=1.0)
    """
    center = alignment.point_at(station)
    direction = alignment.direction_at(station)
    if center is None or direction is None:
        return None

    normal = Point(-direction[1], direction[0])
    return center + normal * offset


def optimal_stationing(alignment: HorizontalAlignment, interval: float) -> List[float]:
    """Sorted stations at every element boundary plus every ``interval``.

    Stations within STATION_TOLERANCE of each other are merged. A
    non-positive interval yields the element boundaries only.
    """
    stations = alignment.stations()
    if interval > 0:
        length = alignment.length()
        station = 0.0
        while station <= length:
            stations.append(station)
            station += interval

    stations.sort()
    merged: List[float] = []
    for station in stations:
        if merged and abs(station - merged[-1]) < STATION_TOLERANCE:
            continue
        merged.append(station)
    return merged


__all__ = [
    "stakeout_position",
    "optimal_stationing",
]
