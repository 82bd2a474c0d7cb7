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
Modulation Tables
=================

Station-indexed, piecewise-linear tables consumed by the corridor engine:

    OffsetTable:          lateral shift of a subassembly per station
    SuperelevationTable:  left/right cross-slope per station

Both share one lookup rule:
    - empty table: neutral value (0 offset, (0, 0) slopes)
    - station at or before the first sample: first sample's value
    - station at or after the last sample: last sample's value
    - otherwise: linear interpolation between the bracketing samples

Samples are assumed sorted by station; this is not validated. Two
samples at the same station resolve to the earlier one.

Example:
    >>> table = [OffsetPoint(0.0, 0.0), OffsetPoint(10.0, 2.0)]
    >>> offset_at(table, 5.0)
    1.0
    >>> offset_at(table, 25.0)
    2.0
"""

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class OffsetPoint:
    """Lateral offset sample.

    Attributes:
        station: Station of the sample (m)
        offset: Lateral shift, positive to the left (m)
    """
    station: float
    offset: float

    def to_dict(self) -> dict:
        return {'station': self.station, 'offset': self.offset}

    @classmethod
    def from_dict(cls, data: dict) -> 'OffsetPoint':
        return cls(station=float(data['station']), offset=float(data['offset']))


@dataclass(frozen=True)
class SuperelevationPoint:
    """Cross-slope sample.

    Slopes are rise over run (decimal). The right slope applies to
    positive offsets, the left slope to zero and negative offsets.

    Attributes:
        station: Station of the sample (m)
        left_slope: Cross-slope left of the centerline
        right_slope: Cross-slope right of the centerline
    """
    station: float
    left_slope: float
    right_slope: float

    def to_dict(self) -> dict:
        return {
            'station': self.station,
            'left_slope': self.left_slope,
            'right_slope': self.right_slope,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SuperelevationPoint':
        return cls(
            station=float(data['station']),
            left_slope=float(data['left_slope']),
            right_slope=float(data['right_slope']),
        )


OffsetTable = List[OffsetPoint]
SuperelevationTable = List[SuperelevationPoint]


def _lerp(a: float, b: float, t: float) -> float:
    # Exact at t == 0 and t == 1
    return (1.0 - t) * a + t * b


def _bracket(stations: Sequence[float], station: float) -> Tuple[int, float]:
    """Index of the left sample and interpolation parameter.

    Returns (i, t) such that the value is lerp(table[i], table[i + 1], t),
    or (i, 0.0) when the station clamps to sample i.
    """
    if station <= stations[0]:
        return 0, 0.0

    for i in range(len(stations) - 1):
        a = stations[i]
        b = stations[i + 1]
        if a <= station <= b:
            span = b - a
            if abs(span) < sys.float_info.epsilon:
                return i, 0.0
            if station == b:
                return i + 1, 0.0
            return i, (station - a) / span

    return len(stations) - 1, 0.0


def offset_at(table: Optional[Sequence[OffsetPoint]], station: float) -> float:
    """Interpolated lateral offset at a station (0.0 for an empty table)."""
    if not table:
        return 0.0

    i, t = _bracket([p.station for p in table], station)
    if t == 0.0:
        return table[i].offset
    return _lerp(table[i].offset, table[i + 1].offset, t)


def slopes_at(
    table: Optional[Sequence[SuperelevationPoint]],
    station: float
) -> Tuple[float, float]:
    """Interpolated (left_slope, right_slope) at a station ((0, 0) for an empty table)."""
    if not table:
        return 0.0, 0.0

    i, t = _bracket([p.station for p in table], station)
    if t == 0.0:
        return table[i].left_slope, table[i].right_slope
    a = table[i]
    b = table[i + 1]
    return _lerp(a.left_slope, b.left_slope, t), _lerp(a.right_slope, b.right_slope, t)


__all__ = [
    "OffsetPoint",
    "SuperelevationPoint",
    "OffsetTable",
    "SuperelevationTable",
    "offset_at",
    "slopes_at",
]
