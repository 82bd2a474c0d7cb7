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
Triangulated Irregular Network (TIN)
====================================

2.5D surface built from scattered 3D points by planar (XY) Delaunay
triangulation.

Storage is index based: ``vertices`` holds every input point once and
``triangles`` holds (i, j, k) index triples into it. A Tin is never
edited triangle by triangle; a new point set means a new Tin.

Point location:
    elevation_at() scans triangles in insertion order and returns the
    first one whose barycentric coordinates are all >= 0. Zero-area
    triangles are skipped. Points on a shared edge therefore resolve to
    the earlier triangle. The scan is vectorised with numpy but keeps
    first-match semantics.

Constrained construction:
    Breaklines, an outer boundary and interior holes are given as vertex
    index pairs or rings. They are passed to Triangle as a planar
    straight line graph. Without an outer boundary the convex hull is
    triangulated; with one, triangles outside it are removed. Holes are
    removed from a seed point inside each hole ring. Where two constraint
    edges cross Triangle adds a vertex, whose elevation is interpolated
    from the unconstrained surface.

Degenerate input (fewer than three points, all points collinear) gives
a Tin with no triangles rather than an error.
"""

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np
import triangle
from scipy.spatial import Delaunay, QhullError
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from .geometry import Point, Point3, chaikin_smooth, distance
from .logging_config import get_logger
from .settings import DEFAULT_SETTINGS

logger = get_logger(__name__)

EPSILON = sys.float_info.epsilon

# Endpoint match tolerance when chaining contour segments
CONTOUR_JOIN_TOLERANCE = 1e-8

# Design/ground difference treated as an exact daylight hit
DAYLIGHT_TOLERANCE = 1e-3

# Plan distance within which a vertex splits a constraint edge
EDGE_SPLIT_TOLERANCE = 1e-6

Triangle = Tuple[int, int, int]
Segment3 = Tuple[Point3, Point3]
Edge = Tuple[int, int]


def _signum(value: float) -> float:
    """Sign of a float, with +0.0 positive and -0.0 negative."""
    return math.copysign(1.0, value)


def _edge_slope(p: np.ndarray, q: np.ndarray) -> float:
    horizontal = math.hypot(p[0] - q[0], p[1] - q[1])
    if horizontal <= EPSILON:
        return 90.0
    return math.degrees(math.atan(abs(p[2] - q[2]) / horizontal))


def _triangle_slope(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
    """Steepest edge slope of a triangle in degrees."""
    return max(_edge_slope(a, b), _edge_slope(a, c), _edge_slope(b, c))


def _intersect_edge(a: np.ndarray, b: np.ndarray, level: float) -> Optional[Point3]:
    """Point where edge a-b crosses ``level``, or None."""
    da = a[2] - level
    db = b[2] - level
    if da * db > 0.0 or abs(da - db) < EPSILON:
        return None
    t = da / (da - db)
    return Point3(
        float(a[0] + t * (b[0] - a[0])),
        float(a[1] + t * (b[1] - a[1])),
        float(level),
    )


def _points_close(a: Point3, b: Point3, tolerance: float) -> bool:
    return (
        abs(a.x - b.x) <= tolerance and
        abs(a.y - b.y) <= tolerance and
        abs(a.z - b.z) <= tolerance
    )


def segments_to_polylines(
    segments: Sequence[Segment3],
    tolerance: float = CONTOUR_JOIN_TOLERANCE
) -> List[List[Point3]]:
    """Chain line segments into polylines by matching endpoints.

    Segments are taken from the end of the list; each polyline is grown
    at its tail while some remaining segment touches the last point.
    """
    remaining = list(segments)
    polylines = []
    while remaining:
        a, b = remaining.pop()
        line = [a, b]
        extended = True
        while extended:
            extended = False
            last = line[-1]
            for i, (start, end) in enumerate(remaining):
                if _points_close(start, last, tolerance):
                    line.append(end)
                elif _points_close(end, last, tolerance):
                    line.append(start)
                else:
                    continue
                remaining[i] = remaining[-1]
                remaining.pop()
                extended = True
                break
        polylines.append(line)
    return polylines


def _as_polygon(vertices: Sequence[Point]) -> Polygon:
    return Polygon([(p.x, p.y) for p in vertices])


class BreaklineKind(Enum):
    """Breakline classification for constrained TINs."""
    HARD = "hard"  # enforced as triangle edges
    SOFT = "soft"  # carried for smoothing only


@dataclass(frozen=True)
class ClassifiedBreakline:
    """Breakline between two vertex indices with its classification."""
    start: int
    end: int
    kind: BreaklineKind = BreaklineKind.HARD


def _ring_edges(ring: Sequence[int]) -> List[Edge]:
    """Closed edge loop of an index ring. A repeated closing index is dropped."""
    ring = list(ring)
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]
    if len(ring) < 2:
        return []
    return list(zip(ring, ring[1:] + ring[:1]))


def _split_edges_at_vertices(xy: np.ndarray, edges: Sequence[Edge]) -> List[Edge]:
    """Split constraint edges at every vertex lying on them.

    Returns unique (low, high) index pairs. Zero-length edges are dropped.
    """
    refined = set()
    for a, b in edges:
        pa = xy[a]
        ab = xy[b] - pa
        length = math.hypot(ab[0], ab[1])
        if length == 0.0:
            continue

        ap = xy - pa
        cross = ab[0] * ap[:, 1] - ab[1] * ap[:, 0]
        t = (ap @ ab) / (length * length)
        on_edge = (np.abs(cross) <= EDGE_SPLIT_TOLERANCE * length) & (t > 0.0) & (t < 1.0)
        on_edge[[a, b]] = False

        inner = np.flatnonzero(on_edge)
        chain = [a] + [int(i) for i in inner[np.argsort(t[inner])]] + [b]
        for p, q in zip(chain[:-1], chain[1:]):
            if np.any(xy[p] != xy[q]):
                refined.add((min(p, q), max(p, q)))
    return sorted(refined)


def _hole_seed(points: Sequence[Point3], ring: Sequence[int]) -> Optional[Tuple[float, float]]:
    """A point strictly inside a hole ring, or None for a degenerate ring."""
    polygon = Polygon([(points[i].x, points[i].y) for i in ring]) if len(ring) >= 3 else None
    if polygon is None or polygon.area <= 0.0:
        return None
    seed = polygon.representative_point()
    return seed.x, seed.y


class Tin:
    """Triangulated surface.

    Attributes:
        vertices: Surface points (z preserved, not used for triangulation)
        triangles: Vertex index triples

    Example:
        >>> tin = Tin.from_points([
        ...     Point3(0, 0, 1), Point3(1, 0, 1), Point3(1, 1, 1), Point3(0, 1, 1)])
        >>> tin.elevation_at(0.5, 0.5)
        1.0
        >>> tin.volume_to_elevation(0.0)
        1.0
    """

    def __init__(
        self,
        vertices: Optional[Sequence[Point3]] = None,
        triangles: Optional[Sequence[Triangle]] = None,
        tolerance: float = DEFAULT_SETTINGS.barycentric_tolerance
    ):
        self.vertices: List[Point3] = list(vertices or [])
        self.triangles: List[Triangle] = [
            (int(i), int(j), int(k)) for i, j, k in (triangles or [])
        ]
        self.tolerance = tolerance
        self._build_arrays()

    def _build_arrays(self) -> None:
        """Cache per-triangle corner coordinates for vectorised queries."""
        if self.vertices:
            self._xyz = np.array([p.to_tuple() for p in self.vertices], dtype=float)
        else:
            self._xyz = np.empty((0, 3), dtype=float)

        if self.triangles:
            index = np.array(self.triangles, dtype=int)
        else:
            index = np.empty((0, 3), dtype=int)

        self._a = self._xyz[index[:, 0]]
        self._b = self._xyz[index[:, 1]]
        self._c = self._xyz[index[:, 2]]
        a, b, c = self._a, self._b, self._c
        self._det = (b[:, 1] - c[:, 1]) * (a[:, 0] - c[:, 0]) + \
            (c[:, 0] - b[:, 0]) * (a[:, 1] - c[:, 1])
        self._valid = np.abs(self._det) >= self.tolerance
        self._area = np.abs(
            (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) -
            (c[:, 0] - a[:, 0]) * (b[:, 1] - a[:, 1])
        ) / 2.0

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def from_points(
        cls,
        points: Sequence[Point3],
        tolerance: float = DEFAULT_SETTINGS.barycentric_tolerance
    ) -> "Tin":
        """Build a TIN by Delaunay triangulation on the XY plane.

        Triangles are stored in the order the triangulation returns them.
        Fewer than three points, or a point set Qhull cannot triangulate
        (e.g. all collinear), yields a Tin with no triangles.
        """
        points = list(points)
        if len(points) < 3:
            logger.debug("TIN needs at least 3 points, got %d", len(points))
            return cls(points, [], tolerance)

        xy = np.array([(p.x, p.y) for p in points], dtype=float)
        try:
            triangulation = Delaunay(xy)
        except QhullError as exc:
            logger.warning("Triangulation failed for %d points: %s", len(points), exc)
            return cls(points, [], tolerance)

        triangles = [tuple(simplex) for simplex in triangulation.simplices.tolist()]
        logger.debug("Triangulated %d points into %d triangles", len(points), len(triangles))
        return cls(points, triangles, tolerance)

    @classmethod
    def from_points_constrained(
        cls,
        points: Sequence[Point3],
        breaklines: Optional[Sequence[Edge]] = None,
        outer_boundary: Optional[Sequence[int]] = None,
        tolerance: float = DEFAULT_SETTINGS.barycentric_tolerance
    ) -> "Tin":
        """Constrained triangulation with breaklines and an outer boundary.

        Args:
            points: Surface points
            breaklines: (i, j) vertex index pairs enforced as triangle edges
            outer_boundary: Vertex index ring; closed automatically
            tolerance: Degenerate-triangle determinant

        Returns:
            Tin; a plain Delaunay Tin when no constraints are given
        """
        return cls.from_points_constrained_with_holes(
            points, breaklines, outer_boundary, (), tolerance
        )

    @classmethod
    def from_points_constrained_with_holes(
        cls,
        points: Sequence[Point3],
        breaklines: Optional[Sequence[Edge]] = None,
        outer_boundary: Optional[Sequence[int]] = None,
        holes: Sequence[Sequence[int]] = (),
        tolerance: float = DEFAULT_SETTINGS.barycentric_tolerance
    ) -> "Tin":
        """Constrained triangulation with breaklines, boundary and holes.

        Edges through other vertices are split at those vertices before
        triangulation.

        Raises:
            ValueError: If a constraint references a missing vertex
        """
        points = list(points)
        count = len(points)

        edges: List[Edge] = [(int(a), int(b)) for a, b in (breaklines or [])]
        boundary_edges = _ring_edges(outer_boundary) if outer_boundary is not None else []
        edges.extend(boundary_edges)
        hole_rings = [list(ring) for ring in holes]
        for ring in hole_rings:
            edges.extend(_ring_edges(ring))

        for a, b in edges:
            if not (0 <= a < count and 0 <= b < count):
                raise ValueError(
                    f"Constraint edge ({a}, {b}) references a missing vertex "
                    f"(TIN has {count} points)"
                )

        if not edges or count < 3:
            return cls.from_points(points, tolerance)

        xy = np.array([(p.x, p.y) for p in points], dtype=float)
        segments = _split_edges_at_vertices(xy, edges)
        if not segments:
            return cls.from_points(points, tolerance)

        request = {"vertices": xy, "segments": np.array(segments, dtype=np.int32)}
        seeds = [seed for seed in (_hole_seed(points, ring) for ring in hole_rings) if seed]
        if seeds:
            request["holes"] = np.array(seeds, dtype=float)

        # "c" keeps the convex hull; without it Triangle trims to the boundary
        options = "p" if len(boundary_edges) >= 3 else "pc"
        result = triangle.triangulate(request, options)

        simplices = result.get("triangles")
        if simplices is None or len(simplices) == 0:
            logger.warning("Constrained triangulation of %d points produced no triangles", count)
            return cls(points, [], tolerance)

        vertices = list(points)
        added = result["vertices"][count:]
        if len(added):
            reference = cls.from_points(points, tolerance)
            for x, y in added.tolist():
                z = reference.elevation_at(x, y)
                if z is None:
                    nearest = int(np.argmin(np.hypot(xy[:, 0] - x, xy[:, 1] - y)))
                    z = points[nearest].z
                vertices.append(Point3(x, y, z))

        triangles = [tuple(t) for t in simplices.tolist()]
        logger.debug(
            "Constrained triangulation: %d points, %d segments, %d holes, %d added, %d triangles",
            count, len(segments), len(seeds), len(added), len(triangles)
        )
        return cls(vertices, triangles, tolerance)

    @classmethod
    def from_points_classified(
        cls,
        points: Sequence[Point3],
        breaklines: Sequence[ClassifiedBreakline],
        outer_boundary: Optional[Sequence[int]] = None,
        holes: Sequence[Sequence[int]] = (),
        tolerance: float = DEFAULT_SETTINGS.barycentric_tolerance
    ) -> "Tin":
        """Constrained triangulation enforcing only HARD breaklines."""
        hard = [(b.start, b.end) for b in breaklines if b.kind is BreaklineKind.HARD]
        return cls.from_points_constrained_with_holes(
            points, hard, outer_boundary, holes, tolerance
        )

    def with_breaklines(self, breaklines: Sequence[Edge]) -> "Tin":
        """Same vertices, re-triangulated with the given breaklines."""
        return Tin.from_points_constrained(self.vertices, breaklines, None, self.tolerance)

    def with_boundary(self, boundary: Sequence[int]) -> "Tin":
        """Same vertices, re-triangulated inside the given boundary ring."""
        return Tin.from_points_constrained(self.vertices, None, boundary, self.tolerance)

    def with_holes(self, holes: Sequence[Sequence[int]]) -> "Tin":
        """Same vertices, re-triangulated with the given hole rings removed."""
        return Tin.from_points_constrained_with_holes(
            self.vertices, None, None, holes, self.tolerance
        )

    def merge_with(self, other: "Tin", tolerance: float) -> "Tin":
        """Delaunay surface over the vertices of both TINs.

        A vertex of ``other`` is dropped when a kept vertex lies within
        ``tolerance`` of it in plan and in elevation.
        """
        points = list(self.vertices)
        kept = [p.to_tuple() for p in points]
        for vertex in other.vertices:
            if kept:
                existing = np.array(kept, dtype=float)
                plan = np.hypot(existing[:, 0] - vertex.x, existing[:, 1] - vertex.y)
                near = (plan <= tolerance) & (np.abs(existing[:, 2] - vertex.z) <= tolerance)
                if near.any():
                    continue
            points.append(vertex)
            kept.append(vertex.to_tuple())

        logger.debug(
            "Merged %d + %d vertices into %d",
            len(self.vertices), len(other.vertices), len(points)
        )
        return Tin.from_points(points, self.tolerance)

    # ========================================================================
    # PROPERTIES
    # ========================================================================

    @property
    def is_empty(self) -> bool:
        """True if the TIN has no triangles."""
        return not self.triangles

    def bounds(self) -> Optional[Tuple[float, float, float, float, float, float]]:
        """(min_x, min_y, min_z, max_x, max_y, max_z), or None without vertices."""
        if not self.vertices:
            return None
        low = self._xyz.min(axis=0)
        high = self._xyz.max(axis=0)
        return (
            float(low[0]), float(low[1]), float(low[2]),
            float(high[0]), float(high[1]), float(high[2]),
        )

    def vertex_array(self) -> np.ndarray:
        """Copy of the vertices as an (n, 3) array."""
        return self._xyz.copy()

    def triangle_array(self) -> np.ndarray:
        """Copy of the triangles as an (m, 3) integer array."""
        if not self.triangles:
            return np.empty((0, 3), dtype=int)
        return np.array(self.triangles, dtype=int)

    # ========================================================================
    # POINT QUERIES
    # ========================================================================

    def _locate(self, x: float, y: float) -> Optional[Tuple[int, float, float, float]]:
        """First triangle containing (x, y) and its barycentric coordinates."""
        if not self.triangles:
            return None

        a, b, c = self._a, self._b, self._c
        dx = x - c[:, 0]
        dy = y - c[:, 1]
        with np.errstate(divide='ignore', invalid='ignore'):
            u = ((b[:, 1] - c[:, 1]) * dx + (c[:, 0] - b[:, 0]) * dy) / self._det
            v = ((c[:, 1] - a[:, 1]) * dx + (a[:, 0] - c[:, 0]) * dy) / self._det
        w = 1.0 - u - v

        inside = np.flatnonzero(self._valid & (u >= 0.0) & (v >= 0.0) & (w >= 0.0))
        if inside.size == 0:
            return None
        i = int(inside[0])
        return i, float(u[i]), float(v[i]), float(w[i])

    def elevation_at(self, x: float, y: float) -> Optional[float]:
        """Interpolated elevation at (x, y), or None outside the mesh."""
        located = self._locate(x, y)
        if located is None:
            return None
        i, u, v, w = located
        return u * float(self._a[i, 2]) + v * float(self._b[i, 2]) + w * float(self._c[i, 2])

    def slope_at(self, x: float, y: float) -> Optional[float]:
        """Steepest-edge slope (degrees) of the triangle containing (x, y)."""
        located = self._locate(x, y)
        if located is None:
            return None
        i = located[0]
        return _triangle_slope(self._a[i], self._b[i], self._c[i])

    def triangle_slopes(self) -> List[float]:
        """Steepest-edge slope (degrees) of every triangle."""
        return [
            _triangle_slope(self._a[i], self._b[i], self._c[i])
            for i in range(len(self.triangles))
        ]

    def elevation_difference_at(self, other: "Tin", x: float, y: float) -> Optional[float]:
        """self minus other at (x, y), if both surfaces cover the point."""
        mine = self.elevation_at(x, y)
        if mine is None:
            return None
        theirs = other.elevation_at(x, y)
        if theirs is None:
            return None
        return mine - theirs

    # ========================================================================
    # CONTOURS
    # ========================================================================

    def _centroid_mask(
        self,
        include: Optional[Sequence[Point]],
        exclude: Sequence[Sequence[Point]]
    ) -> np.ndarray:
        """Triangles whose centroid is inside ``include`` and outside every ``exclude``."""
        keep = np.ones(len(self.triangles), dtype=bool)
        if include is None and not exclude:
            return keep

        centroids = (self._a[:, :2] + self._b[:, :2] + self._c[:, :2]) / 3.0
        include_polygon = _as_polygon(include) if include is not None else None
        exclude_polygons = [_as_polygon(ring) for ring in exclude]

        for i, (cx, cy) in enumerate(centroids):
            centroid = ShapelyPoint(cx, cy)
            if include_polygon is not None and not include_polygon.contains(centroid):
                keep[i] = False
            elif any(polygon.contains(centroid) for polygon in exclude_polygons):
                keep[i] = False
        return keep

    def contour_segments(self, interval: float) -> List[Segment3]:
        """Contour line segments at every multiple of ``interval``."""
        return self.contour_segments_bounded(interval, None, [])

    def contour_segments_bounded(
        self,
        interval: float,
        include: Optional[Sequence[Point]] = None,
        exclude: Sequence[Sequence[Point]] = ()
    ) -> List[Segment3]:
        """Contour segments limited by inclusion/exclusion polygons.

        Levels run from ceil(min_z / interval) * interval to max_z. A
        triangle whose z-range contains the level contributes one segment
        when exactly two of its edges cross the level.

        Returns:
            List of (Point3, Point3) segments; empty for interval <= 0
        """
        if interval <= 0 or not self.vertices:
            return []

        min_z = float(self._xyz[:, 2].min())
        max_z = float(self._xyz[:, 2].max())
        keep = self._centroid_mask(include, exclude)

        segments = []
        level = math.ceil(min_z / interval) * interval
        while level <= max_z:
            for i in range(len(self.triangles)):
                if not keep[i]:
                    continue
                a, b, c = self._a[i], self._b[i], self._c[i]
                if level < min(a[2], b[2], c[2]) or level > max(a[2], b[2], c[2]):
                    continue
                crossings = [
                    p for p in (
                        _intersect_edge(a, b, level),
                        _intersect_edge(b, c, level),
                        _intersect_edge(c, a, level),
                    ) if p is not None
                ]
                if len(crossings) == 2:
                    segments.append((crossings[0], crossings[1]))
            level += interval
        return segments

    def contour_polylines(
        self,
        interval: float,
        smooth: int = 0
    ) -> Tuple[List[List[Point]], List[List[Point3]]]:
        """Contour segments chained into polylines.

        Args:
            interval: Contour interval
            smooth: Chaikin smoothing passes applied to the plan polylines

        Returns:
            (plan polylines after smoothing, unsmoothed 3D polylines)
        """
        lines3 = segments_to_polylines(self.contour_segments(interval))
        lines2 = []
        for line in lines3:
            plan = [p.xy for p in line]
            if len(plan) > 2 and distance(plan[0], plan[-1]) <= CONTOUR_JOIN_TOLERANCE:
                plan[-1] = plan[0]
            lines2.append(chaikin_smooth(plan, smooth))
        return lines2, lines3

    # ========================================================================
    # VOLUMES
    # ========================================================================

    def volume_to_elevation(self, base_elev: float) -> float:
        """Signed volume between the surface and the plane z = base_elev.

        Sum over triangles of plan area * (mean vertex z - base_elev);
        triangles below the plane contribute negative volume.
        """
        return self.volume_to_elevation_bounded(base_elev, None, [])

    def volume_to_elevation_bounded(
        self,
        base_elev: float,
        include: Optional[Sequence[Point]] = None,
        exclude: Sequence[Sequence[Point]] = ()
    ) -> float:
        """volume_to_elevation() limited by inclusion/exclusion polygons."""
        if not self.triangles:
            return 0.0
        keep = self._centroid_mask(include, exclude)
        average_z = (self._a[:, 2] + self._b[:, 2] + self._c[:, 2]) / 3.0
        return float(np.sum(self._area[keep] * (average_z[keep] - base_elev)))

    def volume_between(self, other: "Tin") -> float:
        """Net volume of self above other, both measured to their lowest vertex."""
        if not self.vertices or not other.vertices:
            return 0.0
        base = min(float(self._xyz[:, 2].min()), float(other._xyz[:, 2].min()))
        return self.volume_to_elevation(base) - other.volume_to_elevation(base)

    def _prism_differences(self, other: "Tin") -> Tuple[np.ndarray, np.ndarray]:
        """Plan area and mean (self - other) dz for triangles fully covered by other."""
        areas = []
        differences = []
        for i in range(len(self.triangles)):
            corners = (self._a[i], self._b[i], self._c[i])
            below = [other.elevation_at(float(p[0]), float(p[1])) for p in corners]
            if any(z is None for z in below):
                continue
            dz = sum(float(p[2]) - z for p, z in zip(corners, below)) / 3.0
            areas.append(self._area[i])
            differences.append(dz)
        return np.array(areas, dtype=float), np.array(differences, dtype=float)

    def prismoidal_volume_between(self, other: "Tin") -> float:
        """Symmetric prismoidal volume of self above other.

        Evaluated from both triangulations and averaged; only areas where
        both surfaces have data contribute.
        """
        area_ab, dz_ab = self._prism_differences(other)
        area_ba, dz_ba = other._prism_differences(self)
        v_ab = float(np.sum(area_ab * dz_ab))
        v_ba = float(np.sum(area_ba * dz_ba))
        return (v_ab - v_ba) / 2.0

    def cut_fill_between(self, other: "Tin") -> Tuple[float, float]:
        """Symmetric prismoidal (cut, fill) between two surfaces.

        Fill is where self lies above other, cut where it lies below;
        both are returned as positive magnitudes.
        """
        def split(area: np.ndarray, dz: np.ndarray) -> Tuple[float, float]:
            volume = area * dz
            fill = float(np.sum(volume[dz > 0.0]))
            cut = float(-np.sum(volume[dz <= 0.0]))
            return cut, fill

        cut_ab, fill_ab = split(*self._prism_differences(other))
        cut_ba, fill_ba = split(*other._prism_differences(self))
        return (cut_ab + fill_ba) / 2.0, (fill_ab + cut_ba) / 2.0

    # ========================================================================
    # SURFACE OPERATIONS
    # ========================================================================

    def smooth(self, iterations: int) -> "Tin":
        """Laplacian smoothing of vertex elevations.

        Each pass replaces every connected vertex's z with the mean z of
        its neighbours. XY positions and triangles are unchanged.
        """
        if iterations <= 0:
            return Tin(self.vertices, self.triangles, self.tolerance)

        neighbours: List[List[int]] = [[] for _ in self.vertices]
        for triangle in self.triangles:
            for a in triangle:
                for b in triangle:
                    if a != b and b not in neighbours[a]:
                        neighbours[a].append(b)

        z = self._xyz[:, 2].copy()
        for _ in range(iterations):
            new_z = z.copy()
            for i, adjacent in enumerate(neighbours):
                if adjacent:
                    new_z[i] = z[adjacent].mean()
            z = new_z

        vertices = [Point3(p.x, p.y, float(h)) for p, h in zip(self.vertices, z)]
        return Tin(vertices, self.triangles, self.tolerance)

    def slope_projection(
        self,
        start: Point3,
        direction: Tuple[float, float],
        slope: float,
        step: float,
        max_dist: float
    ) -> Optional[Point3]:
        """Daylight point of a constant grade projected onto the surface.

        Marches from ``start`` along ``direction`` in ``step`` increments
        up to ``max_dist``. The design line is start.z + slope * distance.
        The first sign change of (design - ground) is refined by linear
        interpolation between the two bracketing samples.

        Returns:
            Point on the surface, or None if the grade never meets it or
            the march leaves the mesh
        """
        norm = math.hypot(direction[0], direction[1])
        if norm <= EPSILON or step <= 0:
            return None
        dx, dy = direction[0] / norm, direction[1] / norm

        ground = self.elevation_at(start.x, start.y)
        if ground is None:
            return None
        previous = start.z - ground

        distance = 0.0
        while distance <= max_dist:
            x = start.x + dx * distance
            y = start.y + dy * distance
            ground = self.elevation_at(x, y)
            if ground is None:
                return None

            difference = start.z + slope * distance - ground
            if abs(difference) < DAYLIGHT_TOLERANCE:
                return Point3(x, y, ground)
            if _signum(difference) != _signum(previous):
                t = previous / (previous - difference)
                xi = x - dx * step * (1.0 - t)
                yi = y - dy * step * (1.0 - t)
                zi = self.elevation_at(xi, yi)
                if zi is None:
                    return None
                return Point3(xi, yi, zi)
            previous = difference
            distance += step
        return None

    def daylight_line(
        self,
        start: Point3,
        direction: Tuple[float, float],
        slope: float,
        step: float,
        max_dist: float
    ) -> List[Point3]:
        """Polyline of a constant grade from ``start`` until it meets the surface.

        Points are spaced ``step`` apart; when the grade crosses the ground
        the daylight point from slope_projection() is appended and the
        line ends. The line also ends when it leaves the mesh or reaches
        ``max_dist``.
        """
        norm = math.hypot(direction[0], direction[1])
        if norm <= EPSILON or step <= 0:
            return [start]
        dx, dy = direction[0] / norm, direction[1] / norm

        points = [start]
        ground = self.elevation_at(start.x, start.y)
        previous = start.z - (ground if ground is not None else start.z)

        distance = step
        while distance <= max_dist:
            x = start.x + dx * distance
            y = start.y + dy * distance
            z = start.z + slope * distance
            points.append(Point3(x, y, z))

            ground = self.elevation_at(x, y)
            if ground is None:
                break
            difference = z - ground
            if _signum(difference) != _signum(previous):
                hit = self.slope_projection(start, (dx, dy), slope, step, distance)
                if hit is not None:
                    points.append(hit)
                break
            previous = difference
            distance += step
        return points

    def __repr__(self) -> str:
        return f"Tin({len(self.vertices)} vertices, {len(self.triangles)} triangles)"


__all__ = [
    "Tin",
    "BreaklineKind",
    "ClassifiedBreakline",
    "segments_to_polylines",
    "CONTOUR_JOIN_TOLERANCE",
    "DAYLIGHT_TOLERANCE",
]
