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
Point of Vertical Intersection (PVI) Module
============================================

A PVI is the intersection of two grade lines. A symmetric parabolic
curve of ``curve_length`` may be placed at it, running from BVC
(station - L/2) to EVC (station + L/2).
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import minimum_k


@dataclass
class PVI:
    """Point of Vertical Intersection

    Attributes:
        station: Location along horizontal alignment (m)
        elevation: Height at this location (m)
        grade_in: Incoming grade (decimal, e.g., 0.02 = 2%)
        grade_out: Outgoing grade (decimal)
        curve_length: Length of vertical curve at this PVI (m), 0 = no curve
        k_value: K-value for curve design (m/%)

    Example:
        >>> pvi = PVI(station=200.0, elevation=105.0, grade_in=0.02,
        ...           grade_out=-0.01, curve_length=90.0)
        >>> round(pvi.k_value, 6)
        30.0
    """

    station: float
    elevation: float
    grade_in: Optional[float] = None
    grade_out: Optional[float] = None
    curve_length: float = 0.0
    k_value: Optional[float] = None

    def __post_init__(self):
        if self.station < 0:
            raise ValueError(f"Station must be non-negative, got {self.station}")

        if self.curve_length < 0:
            raise ValueError(
                f"Curve length must be non-negative, got {self.curve_length}"
            )

        if self.k_value is None:
            self.update_k_value()

    @property
    def grade_change(self) -> Optional[float]:
        """A-value |g2 - g1| (decimal), or None if grades are not set."""
        if self.grade_in is not None and self.grade_out is not None:
            return abs(self.grade_out - self.grade_in)
        return None

    @property
    def is_crest_curve(self) -> bool:
        if self.grade_in is not None and self.grade_out is not None:
            return self.grade_in > self.grade_out
        return False

    @property
    def is_sag_curve(self) -> bool:
        if self.grade_in is not None and self.grade_out is not None:
            return self.grade_in < self.grade_out
        return False

    @property
    def has_curve(self) -> bool:
        return self.curve_length > 0

    @property
    def bvc_station(self) -> Optional[float]:
        if self.curve_length > 0:
            return self.station - (self.curve_length / 2.0)
        return None

    @property
    def evc_station(self) -> Optional[float]:
        if self.curve_length > 0:
            return self.station + (self.curve_length / 2.0)
        return None

    def update_k_value(self) -> None:
        """Recompute k_value from curve length and grades.

        Leaves k_value as None when there is no curve, grades are not set,
        or the grade change is zero.
        """
        change = self.grade_change
        if self.curve_length > 0 and change:
            self.k_value = self.curve_length / (change * 100)
        else:
            self.k_value = None

    def validate_k_value(self, design_speed: float) -> Tuple[bool, str]:
        """Validate K-value against AASHTO minimums.

        Args:
            design_speed: Design speed in km/h

        Returns:
            Tuple of (is_valid, message)
        """
        if self.k_value is None:
            return False, "K-value not calculated"

        if self.is_crest_curve:
            curve_type = "crest"
        elif self.is_sag_curve:
            curve_type = "sag"
        else:
            return False, "Cannot determine curve type (grades not set)"

        min_k = minimum_k(design_speed, crest=self.is_crest_curve)
        if min_k is None:
            return False, f"No standards for design speed {design_speed} km/h"

        if self.k_value >= min_k:
            return True, (
                f"K-value {self.k_value:.1f} meets minimum {min_k:.1f} "
                f"for {curve_type} at {design_speed} km/h"
            )
        return False, (
            f"K-value {self.k_value:.1f} below minimum {min_k:.1f} "
            f"for {curve_type} at {design_speed} km/h"
        )

    def __repr__(self) -> str:
        curve_info = f"L={self.curve_length:.1f}m" if self.curve_length > 0 else "No curve"
        return f"PVI(sta={self.station:.1f}m, elev={self.elevation:.3f}m, {curve_info})"


__all__ = ["PVI"]
