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
Horizontal Alignment Manager
============================

Ordered sequence of horizontal elements sampled by station.

Station 0 is the start of the first element. Elements are expected to be
geometrically continuous (each element ends where the next begins); this
is the caller's responsibility and is not checked.

Example:
    >>> alignment = HorizontalAlignment.from_pis(
    ...     [Point(0, 0), Point(100, 0), Point(100, 100)], radii=[None, 50.0, None])
    >>> [e.kind for e in alignment.elements]
    ['TANGENT', 'CURVE', 'TANGENT']
    >>> alignment.point_at(-1.0) is None
    True
"""

from typing import List, Optional, Sequence, Tuple

from ..geometry import Point
from ..logging_config import get_logger
from .curve_geometry import calculate_curve_geometry, curve_geometry_to_arc
from .elements import CurveElement, HorizontalElement, TangentElement

logger = get_logger(__name__)


class HorizontalAlignment:
    """Plan geometry of an alignment.

    Attributes:
        elements: Ordered horizontal elements
    """

    def __init__(self, elements: Optional[Sequence[HorizontalElement]] = None):
        self.elements: List[HorizontalElement] = list(elements or [])

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def from_polyline(cls, vertices: Sequence[Point]) -> "HorizontalAlignment":
        """Build consecutive tangents through the given vertices."""
        elements = [
            TangentElement(a, b) for a, b in zip(vertices[:-1], vertices[1:])
        ]
        return cls(elements)

    @classmethod
    def from_pis(
        cls,
        pis: Sequence[Point],
        radii: Optional[Sequence[Optional[float]]] = None
    ) -> "HorizontalAlignment":
        """Build tangents and circular curves from PI positions.

        Args:
            pis: PI coordinates, first and last are the alignment ends
            radii: Optional curve radius per PI; None (or an end PI) means
                no curve at that PI. Interior PIs without a curve become
                angle points between two tangents.

        Returns:
            HorizontalAlignment

        Raises:
            ValueError: If radii length does not match pis, or a radius is
                not positive
        """
        if radii is None:
            radii = [None] * len(pis)
        if len(radii) != len(pis):
            raise ValueError(
                f"Expected {len(pis)} radii (one per PI), got {len(radii)}"
            )

        elements: List[HorizontalElement] = []
        current = pis[0] if pis else None

        for i in range(1, len(pis) - 1):
            radius = radii[i]
            curve = None
            if radius is not None:
                curve = calculate_curve_geometry(pis[i - 1], pis[i], pis[i + 1], radius)

            if curve is None:
                # Plain angle point
                if (pis[i] - current).length > 0:
                    elements.append(TangentElement(current, pis[i]))
                    current = pis[i]
                continue

            if (curve['bc'] - current).length > 0:
                elements.append(TangentElement(current, curve['bc']))
            elements.append(CurveElement(curve_geometry_to_arc(curve)))
            current = curve['ec']

        if len(pis) >= 2:
            end = pis[-1]
            if (end - current).length > 0:
                elements.append(TangentElement(current, end))

        logger.debug("Built alignment with %d elements from %d PIs", len(elements), len(pis))
        return cls(elements)

    # ========================================================================
    # STATIONING
    # ========================================================================

    def length(self) -> float:
        """Sum of element lengths."""
        return sum(element.length for element in self.elements)

    def stations(self) -> List[float]:
        """Cumulative station at each element boundary, starting at 0."""
        stations = [0.0]
        total = 0.0
        for element in self.elements:
            total += element.length
            stations.append(total)
        return stations

    def element_at(self, station: float) -> Optional[Tuple[HorizontalElement, float]]:
        """Locate the element owning a station.

        Args:
            station: Station along alignment

        Returns:
            (element, local_distance) tuple, or None outside [0, length].
            If floating-point drift leaves a residual past the last
            element, the last element is returned at its full length.
        """
        if not self.elements or station < 0.0 or station > self.length():
            return None

        remaining = station
        for element in self.elements:
            element_length = element.length
            if remaining <= element_length:
                return element, remaining
            remaining -= element_length

        last = self.elements[-1]
        return last, last.length

    # ========================================================================
    # QUERIES
    # ========================================================================

    def point_at(self, station: float) -> Optional[Point]:
        """Position at a station, or None outside [0, length]."""
        located = self.element_at(station)
        if located is None:
            return None
        element, local = located
        if local >= element.length and element is self.elements[-1]:
            return element.end_point
        return element.point_at(local)

    def direction_at(self, station: float) -> Optional[Tuple[float, float]]:
        """Unit tangent (dx, dy) at a station, or None outside [0, length]."""
        located = self.element_at(station)
        if located is None:
            return None
        element, local = located
        return element.direction_at(local).to_tuple()

    def curvature_at(self, station: float) -> Optional[float]:
        """Signed curvature at a station, or None outside [0, length]."""
        located = self.element_at(station)
        if located is None:
            return None
        element, local = located
        return element.curvature_at(local)

    @property
    def start_point(self) -> Optional[Point]:
        return self.elements[0].start_point if self.elements else None

    @property
    def end_point(self) -> Optional[Point]:
        return self.elements[-1].end_point if self.elements else None

    def __repr__(self) -> str:
        return (
            f"HorizontalAlignment({len(self.elements)} elements, "
            f"length={self.length():.3f})"
        )


__all__ = ["HorizontalAlignment"]
