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
Reactive Corridor Model
=======================

Stateful wrappers that keep a derived surface or section list in step
with their inputs.

Corridor:
    Owns an alignment, subassemblies, an optional corridor-wide
    superelevation table and a station interval. Every mutator stores the
    new value and rebuilds ``design_surface`` from scratch, so the surface
    always reflects the latest inputs. There is no partial invalidation.

DynamicCrossSections:
    Same contract for ground sections of a surface along an alignment.

Example:
    >>> corridor = Corridor(alignment, [lane(3.6, -0.02)], interval=10.0)
    >>> corridor.set_superelevation([SuperelevationPoint(0.0, 0.02, -0.04)])
    >>> corridor.design_surface.is_empty
    False
"""

from typing import List, Optional, Sequence, Tuple

from .corridor import (
    CrossSection,
    build_design_surface_dynamic,
    corridor_cut_fill,
    corridor_mass_haul,
    corridor_volume,
    extract_cross_sections,
    extract_design_cross_sections,
)
from .logging_config import get_logger
from .modulation import SuperelevationTable
from .settings import DEFAULT_SETTINGS
from .subassembly import Subassembly
from .tin import Tin

logger = get_logger(__name__)


class Corridor:
    """Alignment plus subassemblies with an eagerly rebuilt design surface.

    Attributes:
        alignment: Alignment (horizontal + vertical)
        subassemblies: Cross-section templates
        superelevation: Optional corridor-wide cross-slope table
        interval: Station interval
        design_surface: Tin rebuilt on every change
    """

    def __init__(
        self,
        alignment,
        subassemblies: Sequence[Subassembly],
        interval: float = DEFAULT_SETTINGS.interval,
        superelevation: Optional[SuperelevationTable] = None
    ):
        if interval <= 0:
            raise ValueError(f"Station interval must be positive, got {interval}")

        self.alignment = alignment
        self.subassemblies: List[Subassembly] = list(subassemblies)
        self.superelevation: Optional[SuperelevationTable] = (
            list(superelevation) if superelevation is not None else None
        )
        self.interval = interval
        self.design_surface = Tin()
        self.update_design_surface()

    # ========================================================================
    # MUTATORS
    # ========================================================================

    def set_superelevation(self, table: Optional[SuperelevationTable]) -> None:
        self.superelevation = list(table) if table is not None else None
        self.update_design_surface()

    def set_subassemblies(self, subassemblies: Sequence[Subassembly]) -> None:
        self.subassemblies = list(subassemblies)
        self.update_design_surface()

    def set_alignment(self, alignment) -> None:
        self.alignment = alignment
        self.update_design_surface()

    def set_interval(self, interval: float) -> None:
        """Change the station interval.

        Raises:
            ValueError: If interval is not positive
        """
        if interval <= 0:
            raise ValueError(f"Station interval must be positive, got {interval}")
        self.interval = interval
        self.update_design_surface()

    def update_design_surface(self) -> Tin:
        """Re-sample all stations and re-triangulate the design surface."""
        self.design_surface = build_design_surface_dynamic(
            self.alignment,
            self.subassemblies,
            self.superelevation,
            self.interval,
        )
        logger.debug("Corridor rebuilt: %r", self.design_surface)
        return self.design_surface

    # ========================================================================
    # QUERIES
    # ========================================================================

    def cross_sections(self) -> List[CrossSection]:
        """Design cross-sections at the current interval."""
        return extract_design_cross_sections(
            self.alignment,
            self.subassemblies,
            self.superelevation,
            self.interval,
        )

    def volume(
        self,
        ground: Tin,
        width: float = DEFAULT_SETTINGS.width,
        offset_step: float = DEFAULT_SETTINGS.offset_step
    ) -> float:
        """Net design-minus-ground volume (fill positive)."""
        return corridor_volume(
            self.design_surface, ground, self.alignment, width, self.interval, offset_step
        )

    def cut_fill(
        self,
        ground: Tin,
        width: float = DEFAULT_SETTINGS.width,
        offset_step: float = DEFAULT_SETTINGS.offset_step
    ) -> Tuple[float, float]:
        """(cut, fill) volumes against a ground surface."""
        return corridor_cut_fill(
            self.design_surface, ground, self.alignment, width, self.interval, offset_step
        )

    def mass_haul(
        self,
        ground: Tin,
        width: float = DEFAULT_SETTINGS.width,
        offset_step: float = DEFAULT_SETTINGS.offset_step
    ) -> List[Tuple[float, float]]:
        """(station, cumulative volume) pairs against a ground surface."""
        return corridor_mass_haul(
            self.design_surface, ground, self.alignment, width, self.interval, offset_step
        )

    def __repr__(self) -> str:
        return (
            f"Corridor({len(self.subassemblies)} subassemblies, "
            f"interval={self.interval}, {self.design_surface!r})"
        )


class DynamicCrossSections:
    """Ground cross-sections kept in step with an alignment and a surface.

    Attributes:
        alignment: Alignment whose plan path is sliced
        surface: Tin sampled for elevations
        width: Half-width either side of the centerline
        interval: Station interval
        offset_step: Lateral spacing
        sections: Current cross-sections
    """

    def __init__(
        self,
        alignment,
        surface: Tin,
        width: float = DEFAULT_SETTINGS.width,
        interval: float = DEFAULT_SETTINGS.interval,
        offset_step: float = DEFAULT_SETTINGS.offset_step
    ):
        self.alignment = alignment
        self.surface = surface
        self.width = width
        self.interval = interval
        self.offset_step = offset_step
        self.sections: List[CrossSection] = []
        self.update()

    def set_alignment(self, alignment) -> None:
        self.alignment = alignment
        self.update()

    def set_surface(self, surface: Tin) -> None:
        self.surface = surface
        self.update()

    def update(self) -> List[CrossSection]:
        """Re-extract every section from the current inputs."""
        self.sections = extract_cross_sections(
            self.surface, self.alignment, self.width, self.interval, self.offset_step
        )
        return self.sections

    def __repr__(self) -> str:
        return f"DynamicCrossSections({len(self.sections)} sections)"


__all__ = [
    "Corridor",
    "DynamicCrossSections",
]
