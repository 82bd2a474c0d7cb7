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
Vertical Alignment Segments Module
===================================

Defines vertical alignment segment types:
- VerticalSegment: Abstract base class
- GradeSegment: Straight grade between two station/elevation pairs
- ParabolicSegment: Parabolic vertical curve

The set of segment types is closed; VerticalAlignment dispatches over
exactly these two.
"""

from abc import ABC, abstractmethod
from typing import Optional


class VerticalSegment(ABC):
    """Abstract base class for vertical alignment segments.

    All segments must implement:
    - elevation_at(station): elevation at given station
    - grade_at(station): grade at given station
    - end_elevation: elevation at the end station
    """

    def __init__(self, start_station: float, end_station: float, segment_type: str):
        if end_station < start_station:
            raise ValueError(
                f"End station ({end_station}) must be >= start station ({start_station})"
            )

        self.start_station = start_station
        self.end_station = end_station
        self.segment_type = segment_type

    @property
    def length(self) -> float:
        """Segment length in meters."""
        return self.end_station - self.start_station

    def contains_station(self, station: float, tolerance: float = 1e-6) -> bool:
        """True if station is within [start_station, end_station] +/- tolerance."""
        return (self.start_station - tolerance) <= station <= (self.end_station + tolerance)

    @property
    @abstractmethod
    def start_elevation(self) -> float:
        """Elevation at the start station."""

    @property
    @abstractmethod
    def end_elevation(self) -> float:
        """Elevation at the end station."""

    @abstractmethod
    def elevation_at(self, station: float) -> float:
        """Elevation at a station inside the segment."""

    @abstractmethod
    def grade_at(self, station: float) -> float:
        """Grade (decimal) at a station inside the segment."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.start_station:.1f}-{self.end_station:.1f}m)"


class GradeSegment(VerticalSegment):
    """Constant grade segment between two station/elevation pairs.

    Elevation equation:
        E(x) = E0 + (E1 - E0) * (x - x0) / (x1 - x0)

    A zero-length segment (x0 == x1) is allowed and holds E0 everywhere,
    which lets a single station/elevation pair describe a flat profile.

    Example:
        >>> grade = GradeSegment(0.0, 100.0, 100.0, 102.0)
        >>> grade.elevation_at(50.0)
        101.0
        >>> grade.grade_at(50.0)
        0.02
    """

    def __init__(
        self,
        start_station: float,
        end_station: float,
        start_elevation: float,
        end_elevation: float
    ):
        super().__init__(start_station, end_station, "GRADE")
        self._start_elevation = start_elevation
        self._end_elevation = end_elevation

    @property
    def start_elevation(self) -> float:
        return self._start_elevation

    @property
    def end_elevation(self) -> float:
        return self._end_elevation

    @property
    def grade(self) -> float:
        if self.length == 0:
            return 0.0
        return (self._end_elevation - self._start_elevation) / self.length

    def elevation_at(self, station: float) -> float:
        if self.length == 0:
            return self._start_elevation
        t = (station - self.start_station) / self.length
        return self._start_elevation + t * (self._end_elevation - self._start_elevation)

    def grade_at(self, station: float) -> float:
        return self.grade


class ParabolicSegment(VerticalSegment):
    """Parabolic vertical curve segment.

    Mathematics:
        Elevation: E(x) = E_BVC + g1*x + ((g2-g1)/(2L))*x^2
        Grade:     g(x) = g1 + ((g2-g1)/L)*x

    where:
        x = distance from BVC (begin vertical curve)
        L = curve length
        g1, g2 = entry and exit grades (decimal)

    Curve Types:
        - Crest: g1 > g2
        - Sag: g1 < g2

    Example:
        >>> curve = ParabolicSegment(160.0, 240.0, 104.0, g1=0.02, g2=-0.01)
        >>> round(curve.elevation_at(200.0), 6)
        104.5
    """

    def __init__(
        self,
        start_station: float,
        end_station: float,
        start_elevation: float,
        g1: float,
        g2: float,
        pvi_station: Optional[float] = None
    ):
        if end_station <= start_station:
            raise ValueError(
                f"Vertical curve end station ({end_station}) must be > "
                f"start station ({start_station})"
            )
        super().__init__(start_station, end_station, "PARABOLIC")

        self._start_elevation = start_elevation
        self.g1 = g1
        self.g2 = g2

        if pvi_station is None:
            self.pvi_station = (start_station + end_station) / 2.0
        else:
            self.pvi_station = pvi_station

    @property
    def start_elevation(self) -> float:
        return self._start_elevation

    @property
    def end_elevation(self) -> float:
        """Elevation at EVC."""
        return self.elevation_at(self.end_station)

    @property
    def is_crest(self) -> bool:
        return self.g1 > self.g2

    @property
    def is_sag(self) -> bool:
        return self.g1 < self.g2

    @property
    def k_value(self) -> float:
        """K-value of this curve (L/A in m/%)."""
        grade_change_percent = abs(self.g2 - self.g1) * 100
        if grade_change_percent == 0:
            return float('inf')
        return self.length / grade_change_percent

    @property
    def turning_point_station(self) -> Optional[float]:
        """Station where grade = 0 (high/low point), or None if not on the curve."""
        if self.g2 == self.g1:
            return None

        x = -self.g1 * self.length / (self.g2 - self.g1)
        if 0 <= x <= self.length:
            return self.start_station + x
        return None

    def elevation_at(self, station: float) -> float:
        x = station - self.start_station
        return (
            self._start_elevation +
            self.g1 * x +
            ((self.g2 - self.g1) / (2.0 * self.length)) * (x ** 2)
        )

    def grade_at(self, station: float) -> float:
        x = station - self.start_station
        return self.g1 + ((self.g2 - self.g1) / self.length) * x


__all__ = [
    "VerticalSegment",
    "GradeSegment",
    "ParabolicSegment",
]
