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
Clothoid Evaluation
===================

Closed-form evaluation of Euler spirals using Fresnel integrals.

Mathematics:
    Heading:   theta(s) = theta0 + k0*s + (kp/2)*s^2
    Position:  P(s) = P0 + integral_0^s (cos theta(t), sin theta(t)) dt

    With alpha = kp/2 and beta = k0 the heading is completed to a square:

        theta(t) = sign(alpha) * (pi/2) * u(t)^2 + delta
        u(t)     = sqrt(2|alpha|/pi) * (t + beta/(2*alpha))
        delta    = theta0 - beta^2/(4*alpha)

    so the position integral reduces to differences of the Fresnel
    integrals C(u) and S(u), scaled by sqrt(pi/(2|alpha|)).

Degenerate spirals (no curvature change) are evaluated as straight lines
or circular arcs so the Fresnel scaling never divides by zero.

When the zero-curvature point of the spiral lies far from the evaluated
run (nearly circular spirals, kp tiny against k0) the Fresnel differences
cancel catastrophically. Those spirals are integrated with composite
Gauss-Legendre quadrature instead.
"""

import math
from typing import Tuple

import numpy as np
from scipy.special import fresnel

from ..geometry import Point, Spiral
from ..settings import DEFAULT_SETTINGS

# Fresnel form is used while the zero-curvature point lies within this
# many spiral lengths of the start
FRESNEL_REACH = 10.0

# Heading change (radians) covered by one quadrature panel
QUADRATURE_PANEL_SWEEP = 0.25

_GAUSS_NODES, _GAUSS_WEIGHTS = np.polynomial.legendre.leggauss(10)


def fresnel_cs(z: float) -> Tuple[float, float]:
    """Normalized Fresnel integrals.

    C(z) = integral_0^z cos(pi t^2 / 2) dt
    S(z) = integral_0^z sin(pi t^2 / 2) dt

    Args:
        z: Upper integration limit

    Returns:
        (C(z), S(z)) tuple
    """
    # scipy returns (S, C)
    s_value, c_value = fresnel(z)
    return float(c_value), float(s_value)


def spiral_heading(spiral: Spiral, s: float) -> float:
    """Tangent angle (radians) at arc length ``s`` from the spiral start."""
    k0 = spiral.start_curvature
    kp = curvature_rate(spiral)
    return spiral.orientation + k0 * s + 0.5 * kp * s * s


def curvature_rate(spiral: Spiral) -> float:
    """Rate of change of curvature along the spiral (1/m^2)."""
    if spiral.length <= 0:
        return 0.0
    return (spiral.end_curvature - spiral.start_curvature) / spiral.length


def spiral_point(
    spiral: Spiral,
    s: float,
    tolerance: float = DEFAULT_SETTINGS.curvature_tolerance
) -> Point:
    """Position at arc length ``s`` from the spiral start.

    Args:
        spiral: Spiral parameters
        s: Local arc length, 0 <= s <= spiral.length
        tolerance: Curvature magnitude treated as zero

    Returns:
        Point on the spiral
    """
    k0 = spiral.start_curvature
    kp = curvature_rate(spiral)
    theta0 = spiral.orientation
    start = spiral.start

    if abs(kp) < tolerance:
        if abs(k0) < tolerance:
            # Straight run along the start orientation
            return Point(start.x + s * math.cos(theta0), start.y + s * math.sin(theta0))

        # Constant curvature: circular arc, center to the left for k0 > 0
        radius = 1.0 / k0
        cx = start.x - radius * math.sin(theta0)
        cy = start.y + radius * math.cos(theta0)
        theta = theta0 + k0 * s
        return Point(cx + radius * math.sin(theta), cy - radius * math.cos(theta))

    if abs(k0) > FRESNEL_REACH * abs(kp) * max(spiral.length, abs(s)):
        return _integrate_heading(spiral, s)

    alpha = kp / 2.0
    beta = k0
    sign = 1.0 if alpha > 0 else -1.0
    delta = theta0 - beta * beta / (4.0 * alpha)

    factor = math.sqrt(2.0 * abs(alpha) / math.pi)
    shift = beta / (2.0 * alpha)
    u0 = factor * shift
    u1 = factor * (s + shift)

    c0, s0 = fresnel_cs(u0)
    c1, s1 = fresnel_cs(u1)
    dc = c1 - c0
    ds = s1 - s0

    scale = math.sqrt(math.pi / (2.0 * abs(alpha)))
    cos_d = math.cos(delta)
    sin_d = math.sin(delta)

    dx = scale * (cos_d * dc - sign * sin_d * ds)
    dy = scale * (sin_d * dc + sign * cos_d * ds)

    return Point(start.x + dx, start.y + dy)


def _integrate_heading(spiral: Spiral, s: float) -> Point:
    """Position by composite Gauss-Legendre quadrature of the heading."""
    k0 = spiral.start_curvature
    kp = curvature_rate(spiral)
    sweep = max(abs(k0), abs(k0 + kp * s)) * abs(s)
    panels = max(1, math.ceil(sweep / QUADRATURE_PANEL_SWEEP))

    edges = np.linspace(0.0, s, panels + 1)
    half = (edges[1:] - edges[:-1]) / 2.0
    mid = (edges[1:] + edges[:-1]) / 2.0
    t = mid[:, None] + half[:, None] * _GAUSS_NODES[None, :]
    theta = spiral.orientation + k0 * t + 0.5 * kp * t * t
    weights = half[:, None] * _GAUSS_WEIGHTS[None, :]

    return Point(
        spiral.start.x + float(np.sum(weights * np.cos(theta))),
        spiral.start.y + float(np.sum(weights * np.sin(theta))),
    )


def spiral_direction(spiral: Spiral, s: float) -> Point:
    """Unit tangent at arc length ``s`` from the spiral start."""
    theta = spiral_heading(spiral, s)
    return Point(math.cos(theta), math.sin(theta))


__all__ = [
    "fresnel_cs",
    "curvature_rate",
    "spiral_heading",
    "spiral_point",
    "spiral_direction",
]
