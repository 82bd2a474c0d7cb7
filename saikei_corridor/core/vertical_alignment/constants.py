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
Vertical Curve Design Constants
===============================

AASHTO minimum K-values per design speed.

K = L / A, with L the curve length (m) and A the grade change in percent.
Crest values govern stopping sight distance, sag values headlight sight
distance.
"""

from typing import Optional

# Design speed (km/h) -> minimum K-values (m/%)
# Source: AASHTO Green Book
DESIGN_STANDARDS = {
    40: {"k_crest": 7.0, "k_sag": 6.0},
    50: {"k_crest": 11.0, "k_sag": 9.0},
    60: {"k_crest": 17.0, "k_sag": 12.0},
    80: {"k_crest": 29.0, "k_sag": 17.0},
    100: {"k_crest": 51.0, "k_sag": 26.0},
    120: {"k_crest": 84.0, "k_sag": 37.0},
}


def minimum_k(design_speed: float, crest: bool) -> Optional[float]:
    """Minimum K-value for a design speed, or None if the speed is not tabulated."""
    standards = DESIGN_STANDARDS.get(design_speed)
    if standards is None:
        return None
    return standards["k_crest"] if crest else standards["k_sag"]


__all__ = [
    "DESIGN_STANDARDS",
    "minimum_k",
]
