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
Coordinate Reference System Boundary
====================================

Pure point transformation between two coordinate reference systems,
backed by PyProj. Alignment and corridor logic never call this; it
serves point-database style collaborators that hand the core projected
coordinates.

CRS arguments are anything pyproj.CRS accepts ("EPSG:4326", 26910, a
WKT string, ...). Axis order is always (x, y) = (easting/longitude,
northing/latitude).

Example:
    >>> x, y = transform_point("EPSG:4326", "EPSG:3857", 0.0, 0.0)
    >>> (round(x, 6), round(y, 6))
    (0.0, 0.0)
"""

from functools import lru_cache
from typing import Iterable, List, Optional, Tuple, Union

from .logging_config import get_logger

logger = get_logger(__name__)

try:
    import pyproj
    PYPROJ_AVAILABLE = True
except ImportError:
    PYPROJ_AVAILABLE = False

CrsLike = Union[str, int]


def _require_pyproj() -> None:
    if not PYPROJ_AVAILABLE:
        raise ImportError("pyproj is required for coordinate transformation")


@lru_cache(maxsize=32)
def get_transformer(source_crs: CrsLike, target_crs: CrsLike) -> "pyproj.Transformer":
    """Cached transformer between two reference systems.

    Raises:
        ImportError: If pyproj is not installed
        pyproj.exceptions.CRSError: If either CRS is not recognised
    """
    _require_pyproj()
    logger.debug("Creating transformer %s -> %s", source_crs, target_crs)
    return pyproj.Transformer.from_crs(source_crs, target_crs, always_xy=True)


def transform_point(
    source_crs: CrsLike,
    target_crs: CrsLike,
    x: float,
    y: float,
    z: Optional[float] = None
) -> Union[Tuple[float, float], Tuple[float, float, float]]:
    """Transform one point.

    Returns:
        (x', y') or, when z is given, (x', y', z')
    """
    transformer = get_transformer(source_crs, target_crs)
    if z is None:
        tx, ty = transformer.transform(x, y)
        return float(tx), float(ty)
    tx, ty, tz = transformer.transform(x, y, z)
    return float(tx), float(ty), float(tz)


def transform_points(
    source_crs: CrsLike,
    target_crs: CrsLike,
    points: Iterable[Tuple[float, ...]]
) -> List[Tuple[float, ...]]:
    """Transform (x, y) or (x, y, z) tuples, keeping each tuple's arity."""
    return [transform_point(source_crs, target_crs, *point) for point in points]


__all__ = [
    "PYPROJ_AVAILABLE",
    "get_transformer",
    "transform_point",
    "transform_points",
]
