"""
Tests for the pressure unit registry.
"""

import pytest

from simunits.conversions import pressure
from simunits.pressure_registry import (
    PressureUnit,
    UnsupportedUnitError,
    convert,
    convert_from_canonical,
    convert_to_canonical,
    parse_pressure,
)

DEFINED_UNITS = [
    PressureUnit.KPA,
    PressureUnit.BAR,
    PressureUnit.PSI,
    PressureUnit.INHG,
    PressureUnit.KGF_PER_CM2,
]


class TestCanonicalDispatch:
    """convert_from_canonical / convert_to_canonical."""

    def test_kpa_is_identity(self):
        assert convert_from_canonical(123.4, PressureUnit.KPA) == 123.4
        assert convert_to_canonical(123.4, PressureUnit.KPA) == 123.4

    def test_delegates_to_conversion_library(self):
        assert convert_from_canonical(500.0, PressureUnit.BAR) == pressure.to_bar(500.0)
        assert convert_from_canonical(500.0, PressureUnit.PSI) == pressure.to_psi(500.0)
        assert convert_from_canonical(500.0, PressureUnit.INHG) == pressure.to_inhg(500.0)
        assert convert_from_canonical(500.0, PressureUnit.KGF_PER_CM2) == pressure.to_kgf_per_cm2(500.0)
        assert convert_to_canonical(5.0, PressureUnit.BAR) == pressure.from_bar(5.0)
        assert convert_to_canonical(72.0, PressureUnit.PSI) == pressure.from_psi(72.0)

    @pytest.mark.parametrize("unit", DEFINED_UNITS)
    def test_round_trip_through_each_unit(self, unit):
        for value in (0.0, 1.0, 500.0, -20.0):
            kpa = convert_to_canonical(value, unit)
            assert convert_from_canonical(kpa, unit) == pytest.approx(value, abs=1e-9)

    def test_accepts_plain_string_values(self):
        """Wire values such as 'bar' are accepted as well as enum members."""
        assert convert_from_canonical(100.0, "bar") == pytest.approx(1.0)

    def test_convert_between_units(self):
        assert convert(1.0, PressureUnit.BAR, PressureUnit.KPA) == pytest.approx(100.0)
        assert convert(14.5037738, PressureUnit.PSI, PressureUnit.BAR) == pytest.approx(1.0, rel=1e-6)


class TestUnsupportedUnits:
    """Anything outside the five defined units is rejected."""

    def test_none_is_rejected(self):
        with pytest.raises(UnsupportedUnitError):
            convert_from_canonical(1.0, PressureUnit.NONE)
        with pytest.raises(UnsupportedUnitError):
            convert_to_canonical(1.0, PressureUnit.NONE)

    @pytest.mark.parametrize("unit", ["atm", "KPA", "", 7, None])
    def test_out_of_range_tags_rejected(self, unit):
        with pytest.raises(UnsupportedUnitError):
            convert_from_canonical(1.0, unit)
        with pytest.raises(UnsupportedUnitError):
            convert_to_canonical(1.0, unit)

    def test_error_is_a_value_error(self):
        """Callers catching ValueError also catch unsupported units."""
        with pytest.raises(ValueError):
            convert(1.0, "hPa", PressureUnit.BAR)


class TestParsePressure:
    """Tests for parse_pressure."""

    @pytest.mark.parametrize(
        "text,value,unit",
        [
            ("30 psi", 30.0, PressureUnit.PSI),
            ("2.5 bar", 2.5, PressureUnit.BAR),
            ("500 kPa", 500.0, PressureUnit.KPA),
            ("29.9 inHg", 29.9, PressureUnit.INHG),
            ("5 kgf/cm**2", 5.0, PressureUnit.KGF_PER_CM2),
        ],
    )
    def test_parses_defined_units(self, text, value, unit):
        parsed_value, parsed_unit = parse_pressure(text)
        assert parsed_value == pytest.approx(value)
        assert parsed_unit == unit

    def test_other_pressure_unit_rejected(self):
        with pytest.raises(UnsupportedUnitError, match="not supported"):
            parse_pressure("1 atm")

    def test_not_a_pressure(self):
        with pytest.raises(UnsupportedUnitError, match="not a pressure"):
            parse_pressure("3 m")

    def test_garbage(self):
        with pytest.raises(UnsupportedUnitError):
            parse_pressure("lots of pressure")
