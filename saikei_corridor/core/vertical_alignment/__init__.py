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
Vertical Alignment Package
==========================

Profile geometry: grade and parabolic segments, PVIs and the
VerticalAlignment manager.
"""

from .constants import DESIGN_STANDARDS, minimum_k
from .pvi import PVI
from .segments import GradeSegment, ParabolicSegment, VerticalSegment
from .manager import VerticalAlignment

__all__ = [
    "DESIGN_STANDARDS",
    "minimum_k",
    "PVI",
    "VerticalSegment",
    "GradeSegment",
    "ParabolicSegment",
    "VerticalAlignment",
]
