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
Horizontal Alignment Elements
=============================

Defines the closed set of horizontal element types:
- HorizontalElement: Abstract base class
- TangentElement: Straight line between two points
- CurveElement: Circular arc
- SpiralElement: Clothoid transition

Every element is evaluated by local arc length ``s`` in [0, length]:
- point_at(s): position
- direction_at(s): unit tangent (cos theta, sin theta)
- curvature_at(s): signed curvature, positive turning left
"""

import math
from abc import ABC, abstractmethod

from ..geometry import Arc, Point, Spiral, distance
from . import clothoid


class HorizontalElement(ABC):
    """Abstract base class for horizontal alignment elements.

    Subclasses are limited to TangentElement, CurveElement and
    SpiralElement. Each implements length, point_at, direction_at and
    curvature_at; start/end points are derived from point_at.
    """

    kind = "ELEMENT"

    @property
    @abstractmethod
    def length(self) -> float:
        """Element length along its path."""

    @abstractmethod
    def point_at(self, s: float) -> Point:
        """Position at local distance ``s`` from the element start."""

    @abstractmethod
    def direction_at(self, s: float) -> Point:
        """Unit tangent at local distance ``s`` from the element start."""

    @abstractmethod
    def curvature_at(self, s: float) -> float:
        """Signed curvature (1/m) at local distance ``s``."""

    @property
    def start_point(self) -> Point:
        return self.point_at(0.0)

    @property
    def end_point(self) -> Point:
        return self.point_at(self.length)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(length={self.length:.3f})"


class TangentElement(HorizontalElement):
    """Straight segment from ``start`` to ``end``.

    A degenerate tangent (start == end) has zero length and a zero
    direction vector.

    Example:
        >>> t = TangentElement(Point(0, 0), Point(100, 0))
        >>> t.point_at(25.0)
        Point(x=25.0, y=0.0)
    """

    kind = "TANGENT"

    def __init__(self, start: Point, end: Point):
        self.start = start
        self.end = end

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    @property
    def end_point(self) -> Point:
        return self.end

    def point_at(self, s: float) -> Point:
        length = self.length
        if length == 0:
            return self.start
        t = s / length
        return Point(
            self.start.x + t * (self.end.x - self.start.x),
            self.start.y + t * (self.end.y - self.start.y),
        )

    def direction_at(self, s: float) -> Point:
        return (self.end - self.start).normalized()

    def curvature_at(self, s: float) -> float:
        return 0.0


class CurveElement(HorizontalElement):
    """Circular curve defined by an Arc.

    The swept angle at local distance ``s`` is ``s / radius`` in the arc's
    sweep direction; the tangent is the radial direction rotated 90
    degrees the same way.
    """

    kind = "CURVE"

    def __init__(self, arc: Arc):
        self.arc = arc

    @property
    def length(self) -> float:
        return self.arc.length

    @property
    def radius(self) -> float:
        return self.arc.radius

    def _angle_at(self, s: float) -> float:
        if self.arc.radius == 0:
            return self.arc.start_angle
        return self.arc.start_angle + self.arc.sweep * s / self.arc.radius

    def point_at(self, s: float) -> Point:
        angle = self._angle_at(s)
        return Point(
            self.arc.center.x + self.arc.radius * math.cos(angle),
            self.arc.center.y + self.arc.radius * math.sin(angle),
        )

    def direction_at(self, s: float) -> Point:
        angle = self._angle_at(s)
        radial = Point(math.cos(angle), math.sin(angle))
        return radial.perpendicular(clockwise=self.arc.sweep < 0)

    def curvature_at(self, s: float) -> float:
        if self.arc.radius == 0:
            return 0.0
        return self.arc.sweep / self.arc.radius


class SpiralElement(HorizontalElement):
    """Clothoid transition between two curvatures.

    Example:
        >>> spiral = Spiral(Point(0, 0), 0.0, 50.0, math.inf, 100.0)
        >>> element = SpiralElement(spiral)
        >>> round(element.end_point.x, 4)
        49.6884
    """

    kind = "SPIRAL"

    def __init__(self, spiral: Spiral):
        self.spiral = spiral

    @property
    def length(self) -> float:
        return self.spiral.length

    def point_at(self, s: float) -> Point:
        return clothoid.spiral_point(self.spiral, s)

    def direction_at(self, s: float) -> Point:
        return clothoid.spiral_direction(self.spiral, s)

    def curvature_at(self, s: float) -> float:
        return self.spiral.start_curvature + clothoid.curvature_rate(self.spiral) * s


__all__ = [
    "HorizontalElement",
    "TangentElement",
    "CurveElement",
    "SpiralElement",
]
