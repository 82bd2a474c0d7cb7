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
3D Alignment (H+V Integration)
==============================

Combines a HorizontalAlignment and a VerticalAlignment sampled by the
same station value.

Mathematics:
    (x, y, z) = (horizontal.point_at(s).x, horizontal.point_at(s).y,
                 vertical.elevation_at(s))

The two parts are sampled independently. Their station domains should
coincide but are not required to; a station either part cannot answer
gives None.

Usage Example:
    >>> h = HorizontalAlignment.from_polyline([Point(0, 0), Point(100, 0)])
    >>> v = VerticalAlignment.from_points([(0.0, 10.0), (100.0, 12.0)])
    >>> Alignment(h, v).point3_at(50.0)
    Point3(x=50.0, y=0.0, z=11.0)
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .geometry import Point3
from .horizontal_alignment import HorizontalAlignment
from .logging_config import get_logger
from .vertical_alignment import VerticalAlignment

logger = get_logger(__name__)


@dataclass
class AlignmentPoint3D:
    """
    A sampled point along a 3D alignment.

    Attributes:
        station: Distance along alignment (m)
        x: Easting coordinate (m)
        y: Northing coordinate (m)
        z: Elevation (m)
        direction: Tangent angle (radians, counter-clockwise from +X)
        grade: Vertical grade (decimal, e.g., 0.02 = 2%)
        horizontal_curvature: Signed 1/radius (1/m), 0 = tangent
    """
    station: float
    x: float
    y: float
    z: float
    direction: float
    grade: float
    horizontal_curvature: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for easy access."""
        return {
            'station': self.station,
            'x': self.x,
            'y': self.y,
            'z': self.z,
            'elevation': self.z,
            'direction': self.direction,
            'direction_degrees': math.degrees(self.direction),
            'grade': self.grade,
            'grade_percent': self.grade * 100,
            'horizontal_curvature': self.horizontal_curvature,
        }


class Alignment:
    """
    Complete 3D alignment combining horizontal and vertical components.

    Attributes:
        horizontal: HorizontalAlignment
        vertical: VerticalAlignment
    """

    def __init__(self, horizontal: HorizontalAlignment, vertical: VerticalAlignment):
        self.horizontal = horizontal
        self.vertical = vertical

    def length(self) -> float:
        """Horizontal length; stations run 0..length."""
        return self.horizontal.length()

    def point3_at(self, station: float) -> Optional[Point3]:
        """3D point at a station, or None if either part has no value."""
        point = self.horizontal.point_at(station)
        if point is None:
            return None
        z = self.vertical.elevation_at(station)
        if z is None:
            return None
        return Point3(point.x, point.y, z)

    def direction_at(self, station: float) -> Optional[Tuple[float, float]]:
        """Unit plan tangent (dx, dy) at a station."""
        return self.horizontal.direction_at(station)

    def data_at(self, station: float) -> Optional[AlignmentPoint3D]:
        """Position, direction, grade and curvature at a station."""
        point = self.point3_at(station)
        direction = self.horizontal.direction_at(station)
        grade = self.vertical.grade_at(station)
        curvature = self.horizontal.curvature_at(station)
        if point is None or direction is None or grade is None or curvature is None:
            return None
        return AlignmentPoint3D(
            station=station,
            x=point.x,
            y=point.y,
            z=point.z,
            direction=math.atan2(direction[1], direction[0]),
            grade=grade,
            horizontal_curvature=curvature,
        )

    def key_stations(self) -> List[float]:
        """Element boundaries of both parts that fall inside 0..length."""
        length = self.length()
        stations = set(self.horizontal.stations())
        for segment in self.vertical.segments:
            stations.add(segment.start_station)
            stations.add(segment.end_station)
        return sorted(s for s in stations if 0.0 <= s <= length)

    def sample(
        self,
        interval: float,
        include_key_stations: bool = True
    ) -> List[AlignmentPoint3D]:
        """
        Sample the alignment at regular intervals.

        The end station is always included. Stations where either part
        has no value are omitted.

        Args:
            interval: Spacing between sample points (m)
            include_key_stations: Also include element boundaries

        Returns:
            List of AlignmentPoint3D ordered by station

        Raises:
            ValueError: If interval is not positive
        """
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")

        length = self.length()
        stations = []
        current = 0.0
        while current <= length:
            stations.append(current)
            current += interval
        if not stations or stations[-1] < length:
            stations.append(length)

        if include_key_stations:
            stations = sorted(set(stations) | set(self.key_stations()))

        points = []
        for station in stations:
            data = self.data_at(station)
            if data is not None:
                points.append(data)

        logger.debug("Sampled %d of %d stations", len(points), len(stations))
        return points

    def __repr__(self) -> str:
        return f"Alignment(length={self.length():.3f}, {self.vertical!r})"


__all__ = [
    "AlignmentPoint3D",
    "Alignment",
]
