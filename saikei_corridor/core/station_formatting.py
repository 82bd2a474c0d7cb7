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
Station Formatting Utilities

Conversion between station notation (XX+XXX.XX) and numeric values.

Stationing Notation:
- Metric: XX+XXX.XX (1000 m stations, unit=1000.0)
  Examples: 0+000 = 0 m, 0+472.58 = 472.58 m, 10+000 = 10000 m
- US Customary: XX+XX.XX (100 ft stations, unit=100.0)
  Examples: 0+00 = 0 ft, 5+47.23 = 547.23 ft, 10+00 = 1000 ft

Metric is the default (see CorridorSettings.station_unit).
"""

import math
from typing import Tuple, Union

from .settings import DEFAULT_SETTINGS


def _minor_digits(unit: float) -> int:
    """Integer digits of the minor part: 3 for 1000, 2 for 100."""
    return max(1, int(round(math.log10(unit))))


def parse_station(
    station_str: Union[str, float],
    unit: float = DEFAULT_SETTINGS.station_unit
) -> float:
    """
    Parse station input and convert to a numeric value.

    Accepts formats:
    - "10+472.58" -> 10472.58
    - "-0+012.5" -> -12.5
    - "472.58" -> 472.58 (no + symbol)
    - 472.58 -> 472.58 (already numeric)

    Args:
        station_str: Station string or numeric value
        unit: Length of one full station

    Returns:
        Numeric station value

    Raises:
        ValueError: If input format is invalid
    """
    if isinstance(station_str, (int, float)):
        return float(station_str)

    text = str(station_str).strip()

    if '+' not in text:
        try:
            return float(text)
        except ValueError as exc:
            raise ValueError(f"Invalid station value: {text}") from exc

    sign = 1.0
    if text.startswith('-'):
        sign = -1.0
        text = text[1:]

    parts = text.split('+')
    if len(parts) != 2:
        raise ValueError(f"Invalid station format: {station_str}. Expected format: XX+XXX.XX")

    try:
        major = float(parts[0])
        minor = float(parts[1])
    except ValueError as exc:
        raise ValueError(f"Invalid station format: {station_str}. Non-numeric values found.") from exc

    if major < 0 or minor < 0:
        raise ValueError(f"Invalid station format: {station_str}. Misplaced sign.")

    return sign * (major * unit + minor)


def format_station(
    station_value: float,
    decimals: int = 2,
    unit: float = DEFAULT_SETTINGS.station_unit
) -> str:
    """
    Format a numeric station value to standard notation.

    Args:
        station_value: Numeric station value
        decimals: Number of decimal places
        unit: Length of one full station

    Returns:
        Formatted station string

    Examples:
        >>> format_station(10472.58)
        '10+472.58'
        >>> format_station(10000.0, decimals=0)
        '10+000'
        >>> format_station(547.23, unit=100.0)
        '5+47.23'
    """
    rounded = round(abs(station_value), decimals)
    sign = '-' if station_value < 0 and rounded > 0 else ''

    major, minor = split_station(rounded, unit)
    minor = round(minor, decimals)
    if minor >= unit:
        major += 1
        minor -= unit

    digits = _minor_digits(unit)
    if decimals > 0:
        width = digits + 1 + decimals
        return f"{sign}{major}+{minor:0{width}.{decimals}f}"
    return f"{sign}{major}+{int(round(minor)):0{digits}d}"


def split_station(
    station_value: float,
    unit: float = DEFAULT_SETTINGS.station_unit
) -> Tuple[int, float]:
    """(major, minor) parts of a non-negative station value."""
    major = int(station_value // unit)
    return major, station_value - major * unit


def validate_station_input(station_str: str) -> Tuple[bool, str]:
    """
    Validate station input format.

    Returns:
        Tuple of (is_valid, error_message); error_message is empty if valid
    """
    try:
        parse_station(station_str)
        return True, ""
    except ValueError as e:
        return False, str(e)


__all__ = [
    "parse_station",
    "format_station",
    "split_station",
    "validate_station_input",
]
