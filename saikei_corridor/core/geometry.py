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
Geometry Primitives
===================

Immutable 2D/3D points and the arc/spiral parameter records used by
horizontal alignment elements.

Coordinates are in project length units. Angles are radians measured
counter-clockwise from the positive X axis.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Point:
    """2D point or vector (Easting, Northing).

    Example:
        >>> p = Point(3.0, 4.0)
        >>> p.length
        5.0
        >>> (p - Point(1.0, 1.0)).to_tuple()
        (2.0, 3.0)
    """
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Point":
        return self.__mul__(scalar)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    @property
    def length(self) -> float:
        """Vector magnitude."""
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Angle in radians from positive X axis."""
        return math.atan2(self.y, self.x)

    def normalized(self) -> "Point":
        """Unit vector in the same direction, or zero vector if length is zero."""
        length = self.length
        if length > 0:
            return Point(self.x / length, self.y / length)
        return Point(0.0, 0.0)

    def perpendicular(self, clockwise: bool = False) -> "Point":
        """Vector rotated 90 degrees (counter-clockwise by default)."""
        if clockwise:
            return Point(self.y, -self.x)
        return Point(-self.y, self.x)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Point3:
    """3D point (Easting, Northing, Elevation)."""
    x: float
    y: float
    z: float

    @property
    def xy(self) -> Point:
        """Plan projection."""
        return Point(self.x, self.y)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


def distance(a: Point, b: Point) -> float:
    """Plan distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def distance3(a: Point3, b: Point3) -> float:
    """Slope distance between two 3D points."""
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2 + (b.z - a.z) ** 2)


def polygon_area(vertices: Sequence[Point]) -> float:
    """Polygon area by the shoelace formula.

    Ring orientation does not matter. Fewer than three vertices give zero.
    """
    count = len(vertices)
    if count < 3:
        return 0.0
    twice_area = 0.0
    for i in range(count):
        a = vertices[i]
        b = vertices[(i + 1) % count]
        twice_area += a.x * b.y - b.x * a.y
    return abs(twice_area) / 2.0


def chaikin_smooth(vertices: Sequence[Point], iterations: int) -> List[Point]:
    """Chaikin corner cutting of a polyline.

    Each pass replaces every segment p-q with the points at 1/4 and 3/4
    along it. Open polylines keep their end points; a polyline whose
    first and last vertices coincide is smoothed as a closed ring.
    """
    points = list(vertices)
    if iterations <= 0 or len(points) < 3:
        return points

    closed = points[0] == points[-1]
    for _ in range(iterations):
        if closed:
            ring = points[:-1]
            pairs = list(zip(ring, ring[1:] + ring[:1]))
        else:
            pairs = list(zip(points[:-1], points[1:]))

        smoothed = [] if closed else [points[0]]
        for p, q in pairs:
            smoothed.append(p * 0.75 + q * 0.25)
            smoothed.append(p * 0.25 + q * 0.75)
        smoothed.append(smoothed[0] if closed else points[-1])
        points = smoothed
    return points


@dataclass(frozen=True)
class Arc:
    """Circular arc.

    Attributes:
        center: Arc center
        radius: Arc radius
        start_angle: Angle of the start point seen from the center (radians)
        end_angle: Angle of the end point seen from the center (radians)

    The sweep direction is the sign of ``end_angle - start_angle``:
    positive runs counter-clockwise.
    """
    center: Point
    radius: float
    start_angle: float
    end_angle: float

    @property
    def length(self) -> float:
        return self.radius * abs(self.end_angle - self.start_angle)

    @property
    def sweep(self) -> float:
        """+1.0 for counter-clockwise arcs, -1.0 for clockwise."""
        return 1.0 if self.end_angle >= self.start_angle else -1.0


def _curvature(radius: float) -> float:
    if math.isinf(radius) or radius == 0:
        return 0.0
    return 1.0 / radius


@dataclass(frozen=True)
class Spiral:
    """Clothoid (Euler spiral) transition.

    Curvature varies linearly with arc length from ``1/start_radius`` to
    ``1/end_radius``. An infinite radius (``math.inf``) means zero
    curvature. Positive radii curve to the left.

    Attributes:
        start: Start point
        orientation: Tangent direction at the start (radians)
        length: Arc length
        start_radius: Radius at the start
        end_radius: Radius at the end
    """
    start: Point
    orientation: float
    length: float
    start_radius: float = math.inf
    end_radius: float = math.inf

    @property
    def start_curvature(self) -> float:
        return _curvature(self.start_radius)

    @property
    def end_curvature(self) -> float:
        return _curvature(self.end_radius)


__all__ = [
    "Point",
    "Point3",
    "Arc",
    "Spiral",
    "distance",
    "distance3",
    "polygon_area",
    "chaikin_smooth",
]
