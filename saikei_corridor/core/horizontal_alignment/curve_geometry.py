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
Horizontal Curve Geometry Module
=================================

Fits circular curves at PIs (Points of Intersection) and converts the
result into an Arc usable by CurveElement.
"""

import math
from typing import Optional

from ..geometry import Arc, Point
from ..logging_config import get_logger

logger = get_logger(__name__)

# Deflections smaller than this (radians) are treated as collinear
MIN_DEFLECTION = 0.001


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi]."""
    if angle > math.pi:
        angle -= 2 * math.pi
    elif angle < -math.pi:
        angle += 2 * math.pi
    return angle


def calculate_curve_geometry(
    prev_pi: Point,
    curr_pi: Point,
    next_pi: Point,
    radius: float
) -> Optional[dict]:
    """Calculate horizontal curve geometry from three PIs.

    Computes a circular arc tangent to both lines meeting at curr_pi.

    Args:
        prev_pi: Previous PI position (defines incoming tangent)
        curr_pi: Current PI position (curve location)
        next_pi: Next PI position (defines outgoing tangent)
        radius: Curve radius

    Returns:
        Dictionary with curve data:
        - bc: Begin Curve point (Point)
        - ec: End Curve point (Point)
        - center: Curve center (Point)
        - radius: Curve radius (float)
        - tangent_length: PI to BC distance (float)
        - arc_length: Length of curve arc (float)
        - deflection: Signed deflection angle in radians (float)
        - start_direction: Direction at BC in radians (float)
        - turn_direction: 'LEFT' or 'RIGHT' (str)

        Returns None if curve cannot be computed (collinear PIs)

    Raises:
        ValueError: If radius is not positive

    Example:
        >>> curve = calculate_curve_geometry(
        ...     Point(0, 0), Point(100, 0), Point(100, 100), 50.0)
        >>> round(curve['arc_length'], 2)
        78.54
    """
    if radius <= 0:
        raise ValueError(f"Curve radius must be positive, got {radius}")

    t1 = (curr_pi - prev_pi).normalized()
    t2 = (next_pi - curr_pi).normalized()

    angle1 = t1.angle
    angle2 = t2.angle
    deflection = normalize_angle(angle2 - angle1)

    if abs(deflection) < MIN_DEFLECTION:
        logger.debug("Deflection angle too small for curve at %s", curr_pi)
        return None

    # T = R * tan(|delta|/2)
    tangent_length = radius * math.tan(abs(deflection) / 2)

    bc = curr_pi - t1 * tangent_length
    ec = curr_pi + t2 * tangent_length

    # Positive deflection = left turn (counter-clockwise)
    turn_direction = 'LEFT' if deflection > 0 else 'RIGHT'

    return {
        'bc': bc,
        'ec': ec,
        'center': calculate_curve_center(bc, angle1, radius, turn_direction),
        'radius': radius,
        'tangent_length': tangent_length,
        'arc_length': radius * abs(deflection),
        'deflection': deflection,
        'start_direction': angle1,
        'turn_direction': turn_direction,
    }


def calculate_curve_center(
    bc: Point,
    start_direction: float,
    radius: float,
    turn_direction: str
) -> Point:
    """Calculate curve center point from BC and direction.

    Args:
        bc: Begin Curve point
        start_direction: Tangent direction at BC (radians)
        radius: Curve radius
        turn_direction: 'LEFT' or 'RIGHT'

    Returns:
        Center point
    """
    if turn_direction == 'LEFT':
        center_angle = start_direction + math.pi / 2
    else:
        center_angle = start_direction - math.pi / 2

    return Point(
        bc.x + radius * math.cos(center_angle),
        bc.y + radius * math.sin(center_angle),
    )


def curve_geometry_to_arc(curve: dict) -> Arc:
    """Convert calculate_curve_geometry() output into an Arc.

    The arc starts at BC and sweeps by the deflection angle, so a left
    turn produces a counter-clockwise arc.
    """
    center = curve['center']
    start_angle = (curve['bc'] - center).angle
    return Arc(
        center=center,
        radius=curve['radius'],
        start_angle=start_angle,
        end_angle=start_angle + curve['deflection'],
    )


__all__ = [
    "MIN_DEFLECTION",
    "normalize_angle",
    "calculate_curve_geometry",
    "calculate_curve_center",
    "curve_geometry_to_arc",
]
