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
Vertical Alignment Manager Module
==================================

Provides the VerticalAlignment class: an ordered sequence of grade and
parabolic segments queried by station.

Station lookup rules:
    - before the first segment: the first segment's start elevation
    - inside a segment: that segment's equation (first match wins)
    - in a gap between segments: the previous segment's end elevation
    - after the last segment: the last segment's end elevation
    - no segments: None
"""

from typing import List, Optional, Sequence, Tuple

from .pvi import PVI
from .segments import GradeSegment, ParabolicSegment, VerticalSegment
from ..logging_config import get_logger

logger = get_logger(__name__)


class VerticalAlignment:
    """Profile of an alignment as an ordered list of vertical segments.

    Attributes:
        segments: Vertical segments with non-decreasing stations

    Example:
        >>> valign = VerticalAlignment.from_points([(0.0, 100.0), (100.0, 102.0)])
        >>> valign.elevation_at(50.0)
        101.0
        >>> valign.elevation_at(500.0)
        102.0
    """

    def __init__(self, segments: Optional[Sequence[VerticalSegment]] = None):
        self.segments: List[VerticalSegment] = list(segments or [])

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def from_points(cls, points: Sequence[Tuple[float, float]]) -> "VerticalAlignment":
        """Build consecutive grade segments from (station, elevation) pairs.

        A single pair gives one zero-length grade, so the elevation is
        constant along the whole alignment.
        """
        if len(points) == 1:
            station, elevation = points[0]
            return cls([GradeSegment(station, station, elevation, elevation)])

        segments = [
            GradeSegment(s0, s1, e0, e1)
            for (s0, e0), (s1, e1) in zip(points[:-1], points[1:])
        ]
        return cls(segments)

    @classmethod
    def from_pvis(cls, pvis: Sequence[PVI]) -> "VerticalAlignment":
        """Build grades and symmetric parabolic curves from PVIs.

        Grades between adjacent PVIs are assigned to the PVIs (grade_in /
        grade_out) and their K-values refreshed. A PVI with curve_length > 0
        gets a parabola from BVC to EVC.

        Raises:
            ValueError: If two PVIs share a station
        """
        pvis = list(pvis)
        if len(pvis) < 2:
            return cls()

        for pvi1, pvi2 in zip(pvis[:-1], pvis[1:]):
            run = pvi2.station - pvi1.station
            if run == 0:
                raise ValueError(f"PVIs at same station: {pvi1.station:.3f}m")
            grade = (pvi2.elevation - pvi1.elevation) / run
            pvi1.grade_out = grade
            pvi2.grade_in = grade

        pvis[0].grade_in = pvis[0].grade_out
        pvis[-1].grade_out = pvis[-1].grade_in
        for pvi in pvis:
            pvi.update_k_value()

        segments: List[VerticalSegment] = []
        current_station = pvis[0].station
        current_elevation = pvis[0].elevation

        for pvi1, pvi2 in zip(pvis[:-1], pvis[1:]):
            grade = pvi1.grade_out
            target = pvi2.bvc_station if pvi2.has_curve else pvi2.station

            if target > current_station:
                end_elevation = current_elevation + grade * (target - current_station)
                segments.append(GradeSegment(
                    current_station, target, current_elevation, end_elevation
                ))
                current_station = target
                current_elevation = end_elevation

            if pvi2.has_curve:
                curve = ParabolicSegment(
                    start_station=current_station,
                    end_station=pvi2.evc_station,
                    start_elevation=current_elevation,
                    g1=pvi2.grade_in,
                    g2=pvi2.grade_out,
                    pvi_station=pvi2.station
                )
                segments.append(curve)
                current_station = curve.end_station
                current_elevation = curve.end_elevation

        logger.debug("Generated %d vertical segments from %d PVIs", len(segments), len(pvis))
        return cls(segments)

    # ========================================================================
    # STATION RANGE
    # ========================================================================

    @property
    def start_station(self) -> Optional[float]:
        return self.segments[0].start_station if self.segments else None

    @property
    def end_station(self) -> Optional[float]:
        return self.segments[-1].end_station if self.segments else None

    @property
    def length(self) -> float:
        if not self.segments:
            return 0.0
        return self.segments[-1].end_station - self.segments[0].start_station

    # ========================================================================
    # ELEVATION & GRADE QUERIES
    # ========================================================================

    def _locate(self, station: float) -> Optional[Tuple[VerticalSegment, float]]:
        """Segment and clamped station used to evaluate ``station``."""
        if not self.segments:
            return None

        first = self.segments[0]
        if station <= first.start_station:
            return first, first.start_station

        previous = first
        for segment in self.segments:
            if station < segment.start_station:
                # Gap between segments
                return previous, previous.end_station
            if station <= segment.end_station:
                return segment, station
            previous = segment

        last = self.segments[-1]
        return last, last.end_station

    def elevation_at(self, station: float) -> Optional[float]:
        """Elevation at a station, clamped to the profile ends.

        Args:
            station: Station location (m)

        Returns:
            Elevation (m), or None if the alignment has no segments
        """
        located = self._locate(station)
        if located is None:
            return None
        segment, at = located
        if at == segment.start_station:
            return segment.start_elevation
        if at == segment.end_station:
            return segment.end_elevation
        return segment.elevation_at(at)

    def grade_at(self, station: float) -> Optional[float]:
        """Grade (decimal) at a station, with the same clamping as elevation_at."""
        located = self._locate(station)
        if located is None:
            return None
        segment, at = located
        return segment.grade_at(at)

    def elevations_spanning(self, station: float) -> List[float]:
        """Elevations of every segment whose range contains the station.

        Overlapping segments (stacked profiles) each contribute a value.
        """
        return [
            segment.elevation_at(station)
            for segment in self.segments
            if segment.contains_station(station, tolerance=0.0)
        ]

    # ========================================================================
    # CLEARANCE
    # ========================================================================

    def check_clearance(
        self,
        horizontal,
        ground_tin,
        min_clearance: float,
        interval: float
    ) -> bool:
        """Check the profile stays at least ``min_clearance`` above ground.

        Walks stations 0..horizontal.length() by ``interval``. At each
        station the grade is the minimum elevation over all segments that
        span it, or elevation_at() if none does. Stations where the plan
        point, the grade or the ground elevation is missing are skipped.

        Args:
            horizontal: HorizontalAlignment giving plan positions
            ground_tin: Tin of existing ground
            min_clearance: Required grade minus ground (m)
            interval: Station step (m)

        Returns:
            False at the first station that violates the clearance, else True

        Raises:
            ValueError: If interval is not positive
        """
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")

        length = horizontal.length()
        station = 0.0
        while station <= length:
            point = horizontal.point_at(station)
            if point is not None:
                spanning = self.elevations_spanning(station)
                grade = min(spanning) if spanning else self.elevation_at(station)
                ground = ground_tin.elevation_at(point.x, point.y)
                if grade is not None and ground is not None:
                    if grade - ground < min_clearance:
                        logger.debug(
                            "Clearance %.3f below %.3f at station %.3f",
                            grade - ground, min_clearance, station
                        )
                        return False
            station += interval
        return True

    def __repr__(self) -> str:
        return f"VerticalAlignment({len(self.segments)} segments)"


__all__ = ["VerticalAlignment"]
