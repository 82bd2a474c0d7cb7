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
Corridor Settings
=================

Default sampling parameters and numerical tolerances.

Defaults are overridden per call or by constructing a CorridorSettings
directly:

    >>> settings = DEFAULT_SETTINGS.with_overrides(interval=5.0)
    >>> settings.interval
    5.0
"""

import sys
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CorridorSettings:
    """Sampling defaults for corridor generation and earthwork comparison.

    Attributes:
        interval: Station interval between cross-sections (m)
        width: Half-width sampled either side of the centerline (m)
        offset_step: Lateral spacing of ground/design samples (m)
        curvature_tolerance: Curvature (1/m) below which a spiral is
            treated as straight or as a circular arc
        barycentric_tolerance: Determinant below which a triangle is
            considered degenerate
        station_unit: Length of one full station (1000 metric, 100 US)
    """
    interval: float = 10.0
    width: float = 10.0
    offset_step: float = 1.0
    curvature_tolerance: float = 1e-12
    barycentric_tolerance: float = sys.float_info.epsilon
    station_unit: float = 1000.0

    def __post_init__(self):
        for name in ("interval", "width", "offset_step", "station_unit"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def with_overrides(self, **kwargs) -> "CorridorSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)


DEFAULT_SETTINGS = CorridorSettings()


__all__ = [
    "CorridorSettings",
    "DEFAULT_SETTINGS",
]
