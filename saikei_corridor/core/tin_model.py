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
Reactive Surface Model
======================

DynamicTin:
    Owns surface points and their constraints (breaklines, outer boundary,
    holes). Every mutator stores the new value and re-triangulates
    ``tin`` from scratch, the same contract as Corridor.

TinManager:
    Ordered collection of surfaces (existing ground, proposed, borrow...).

Example:
    >>> surface = DynamicTin(points)
    >>> surface.add_breakline(0, 2)
    True
    >>> surface.update_point(1, Point3(10.0, 0.0, 2.5))
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .geometry import Point3
from .logging_config import get_logger
from .tin import Tin

logger = get_logger(__name__)


class DynamicTin:
    """Surface points with an eagerly rebuilt constrained triangulation.

    Attributes:
        points: Surface points
        breaklines: (i, j) vertex index pairs enforced as edges
        boundary: Optional outer boundary ring
        holes: Hole rings
        tin: Tin rebuilt on every change
    """

    def __init__(self, points: Sequence[Point3]):
        self.points: List[Point3] = list(points)
        self.breaklines: List[Tuple[int, int]] = []
        self.boundary: Optional[List[int]] = None
        self.holes: List[List[int]] = []
        # No constraints yet, so a plain Delaunay surface
        self.tin = Tin.from_points(self.points)

    # ========================================================================
    # MUTATORS
    # ========================================================================

    def rebuild(self) -> Tin:
        """Re-triangulate from the current points and constraints."""
        self.tin = Tin.from_points_constrained_with_holes(
            self.points,
            self.breaklines,
            self.boundary,
            self.holes,
        )
        logger.debug("Surface rebuilt: %r", self.tin)
        return self.tin

    def update_point(self, index: int, point: Point3) -> None:
        """Replace one point and rebuild.

        Raises:
            IndexError: If index is not a valid point index
        """
        if not 0 <= index < len(self.points):
            raise IndexError(f"Point index {index} out of range ({len(self.points)} points)")
        self.points[index] = point
        self.rebuild()

    def add_point(self, point: Point3) -> int:
        """Append a point, rebuild, and return its index."""
        self.points.append(point)
        self.rebuild()
        return len(self.points) - 1

    def add_breakline(self, start: int, end: int) -> bool:
        """Add a breakline and rebuild.

        Returns:
            False if the breakline (in either direction) already exists

        Raises:
            IndexError: If either end is not a valid point index
        """
        for index in (start, end):
            if not 0 <= index < len(self.points):
                raise IndexError(f"Point index {index} out of range ({len(self.points)} points)")
        for a, b in self.breaklines:
            if (a, b) == (start, end) or (a, b) == (end, start):
                return False
        self.breaklines.append((start, end))
        self.rebuild()
        return True

    def set_boundary(self, boundary: Optional[Sequence[int]]) -> None:
        self.boundary = list(boundary) if boundary is not None else None
        self.rebuild()

    def add_hole(self, ring: Sequence[int]) -> None:
        self.holes.append(list(ring))
        self.rebuild()

    def __repr__(self) -> str:
        return (
            f"DynamicTin({len(self.points)} points, "
            f"{len(self.breaklines)} breaklines, {self.tin!r})"
        )


class TinManager:
    """Ordered collection of surfaces."""

    def __init__(self, tins: Optional[Sequence[Tin]] = None):
        self.tins: List[Tin] = list(tins or [])

    def add(self, tin: Tin) -> int:
        """Append a surface and return its index."""
        self.tins.append(tin)
        return len(self.tins) - 1

    def remove(self, index: int) -> Optional[Tin]:
        """Remove and return the surface at index; None if there is none."""
        if not 0 <= index < len(self.tins):
            return None
        return self.tins.pop(index)

    def get(self, index: int) -> Optional[Tin]:
        if not 0 <= index < len(self.tins):
            return None
        return self.tins[index]

    @property
    def is_empty(self) -> bool:
        return not self.tins

    def __len__(self) -> int:
        return len(self.tins)

    def __iter__(self) -> Iterator[Tin]:
        return iter(self.tins)

    def __repr__(self) -> str:
        return f"TinManager({len(self.tins)} surfaces)"


__all__ = [
    "DynamicTin",
    "TinManager",
]
