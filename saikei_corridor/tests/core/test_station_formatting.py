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
Tests for Station Formatting Module
====================================

Tests the station parsing and formatting utilities used for
civil engineering station notation (e.g., "10+472.58").
"""

import pytest

from saikei_corridor.core.station_formatting import (
    format_station,
    parse_station,
    split_station,
    validate_station_input,
)


class TestParseStation:
    """Tests for parse_station function."""

    @pytest.mark.unit
    def test_parse_metric_format(self):
        assert parse_station("10+472.58") == pytest.approx(10472.58)

    @pytest.mark.unit
    def test_parse_us_format(self):
        assert parse_station("10+50.00", unit=100.0) == 1050.0

    @pytest.mark.unit
    def test_parse_with_spaces(self):
        assert parse_station("  0+120  ") == 120.0

    @pytest.mark.unit
    def test_parse_plain_number(self):
        assert parse_station("472.58") == 472.58
        assert parse_station(472.58) == 472.58
        assert parse_station(5) == 5.0

    @pytest.mark.unit
    def test_parse_negative(self):
        assert parse_station("-0+012.5") == -12.5

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["invalid", "", "1+2+3", "a+100", "0+-5"])
    def test_parse_invalid_raises(self, text):
        with pytest.raises(ValueError):
            parse_station(text)

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["invalid", "a+100"])
    def test_parse_error_keeps_cause(self, text):
        with pytest.raises(ValueError) as exc_info:
            parse_station(text)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestFormatStation:
    """Tests for format_station function."""

    @pytest.mark.unit
    def test_format_basic(self):
        assert format_station(10472.58) == "10+472.58"

    @pytest.mark.unit
    def test_format_zero(self):
        assert format_station(0.0) == "0+000.00"

    @pytest.mark.unit
    def test_format_small_value(self):
        assert format_station(50.25) == "0+050.25"

    @pytest.mark.unit
    def test_format_no_decimals(self):
        assert format_station(10000.0, decimals=0) == "10+000"

    @pytest.mark.unit
    def test_format_us_units(self):
        assert format_station(547.23, unit=100.0) == "5+47.23"

    @pytest.mark.unit
    def test_format_rounding_carries(self):
        """999.999 rounds up to the next full station."""
        assert format_station(999.999) == "1+000.00"

    @pytest.mark.unit
    def test_format_negative(self):
        assert format_station(-12.5) == "-0+012.50"
        assert format_station(-0.001) == "0+000.00"

    @pytest.mark.unit
    def test_round_trip(self):
        for value in (0.0, 12.34, 999.5, 10472.58):
            assert parse_station(format_station(value)) == pytest.approx(value)


class TestHelpers:
    """Tests for split and validation helpers."""

    @pytest.mark.unit
    def test_split_station(self):
        major, minor = split_station(10472.5)
        assert major == 10
        assert minor == pytest.approx(472.5)

    @pytest.mark.unit
    def test_validate_station_input(self):
        assert validate_station_input("1+250.00") == (True, "")
        valid, message = validate_station_input("abc")
        assert not valid
        assert message
