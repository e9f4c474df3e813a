"""
Tests for display formatting and unit labels.
"""

import pytest

from simunits.formatting import FORMAT_STYLES, UNIT_TOKENS, QuantityFormatter, UnitLabels
from simunits.pressure_registry import PressureUnit, UnsupportedUnitError


class TestSpeed:
    """Speed formats from m/s."""

    def test_report_form_has_no_space(self, formatter):
        assert formatter.format_speed(10.0, is_metric=True) == "36.0km/h"
        assert formatter.format_speed(10.0, is_metric=False) == "22.4mph"

    def test_display_form_has_space(self, formatter):
        assert formatter.format_speed_display(10.0, is_metric=True) == "36.0 km/h"
        assert formatter.format_speed_display(10.0, is_metric=False) == "22.4 mph"

    def test_speed_limit_has_no_decimals(self, formatter):
        assert formatter.format_speed_limit(100.0 / 3.6, is_metric=True) == "100 km/h"

    def test_negative_speed(self, formatter):
        assert formatter.format_speed(-10.0, is_metric=True) == "-36.0km/h"


class TestDistance:
    """Distance formats from metres."""

    def test_metric_short_distance_in_metres(self, formatter):
        assert formatter.format_distance(50.0, is_metric=True) == "50m"

    def test_metric_long_distance_in_km(self, formatter):
        assert formatter.format_distance(1500.0, is_metric=True) == "1.5km"

    def test_metric_threshold_is_100_m(self, formatter):
        assert formatter.format_distance(99.0, is_metric=True) == "99m"
        assert formatter.format_distance(100.0, is_metric=True) == "0.1km"

    def test_metric_threshold_uses_magnitude(self, formatter):
        assert formatter.format_distance(-50.0, is_metric=True) == "-50m"
        assert formatter.format_distance(-1500.0, is_metric=True) == "-1.5km"

    def test_imperial_short_distance_in_yards(self, formatter):
        # 50 m is about 54.7 yd
        assert formatter.format_distance(50.0, is_metric=False) == "55yd"

    def test_imperial_long_distance_in_miles(self, formatter):
        assert formatter.format_distance(1609.344, is_metric=False) == "1.0mi"

    def test_imperial_threshold_is_a_tenth_of_a_mile(self, formatter):
        assert formatter.format_distance(160.0, is_metric=False).endswith("yd")
        assert formatter.format_distance(161.0, is_metric=False) == "0.1mi"

    def test_display_form(self, formatter):
        assert formatter.format_distance_display(50.0, is_metric=True) == "50 m"
        assert formatter.format_distance_display(2500.0, is_metric=True) == "2.5 km"
        assert formatter.format_distance_display(50.0, is_metric=False) == "55 yd"
        assert formatter.format_distance_display(3218.688, is_metric=False) == "2.0 mi"

    def test_short_distance_never_switches_unit(self, formatter):
        assert formatter.format_short_distance_display(50.0, is_metric=True) == "50 m"
        assert formatter.format_short_distance_display(850.0, is_metric=True) == "850 m"
        # 10 m is about 32.8 ft
        assert formatter.format_short_distance_display(10.0, is_metric=False) == "33 ft"


class TestMass:
    """Mass formats from kilograms."""

    def test_below_one_tonne_in_kg(self, formatter):
        assert formatter.format_mass(500.0, is_metric=True) == "500.0kg"

    def test_above_one_tonne_in_tonnes(self, formatter):
        assert formatter.format_mass(2000.0, is_metric=True) == "2t"

    def test_exactly_one_tonne_stays_in_kg(self, formatter):
        assert formatter.format_mass(1000.0, is_metric=True) == "1000.0kg"

    def test_negative_mass_uses_magnitude(self, formatter):
        assert formatter.format_mass(-2000.0, is_metric=True) == "-2t"

    def test_imperial_in_pounds(self, formatter):
        assert formatter.format_mass(100.0, is_metric=False) == "220.5Lb"


class TestPressure:
    """Pressure formats between tagged units."""

    def test_kpa_to_bar(self, formatter):
        assert formatter.format_pressure(100.0, PressureUnit.KPA, PressureUnit.BAR, True) == "1.0 bar"

    def test_without_unit_label(self, formatter):
        assert formatter.format_pressure(100.0, PressureUnit.KPA, PressureUnit.BAR, False) == "1.0"

    def test_precision_per_unit(self, formatter):
        assert formatter.format_pressure(2.5, PressureUnit.BAR, PressureUnit.KPA) == "250 kPa"
        assert formatter.format_pressure(689.475729, PressureUnit.KPA, PressureUnit.PSI) == "100 psi"
        assert formatter.format_pressure(30.0 * 3.386389, PressureUnit.KPA, PressureUnit.INHG) == "30 inHg"
        assert formatter.format_pressure(98.068059, PressureUnit.KPA, PressureUnit.KGF_PER_CM2) == "1.0 kgf/cm^2"

    def test_same_unit(self, formatter):
        assert formatter.format_pressure(5.0, PressureUnit.BAR, PressureUnit.BAR) == "5.0 bar"

    def test_undefined_unit_gives_empty_string(self, formatter):
        assert formatter.format_pressure(100.0, PressureUnit.NONE, PressureUnit.BAR, True) == ""
        assert formatter.format_pressure(100.0, PressureUnit.KPA, PressureUnit.NONE, True) == ""
        assert formatter.format_pressure(100.0, "none", "bar", True) == ""

    def test_unknown_unit_raises(self, formatter):
        with pytest.raises(UnsupportedUnitError):
            formatter.format_pressure(100.0, "atm", PressureUnit.BAR)


class TestLabels:
    """Unit labels come from the injected lookup."""

    def test_translated_labels(self, russian_labels):
        formatter = QuantityFormatter(russian_labels)
        assert formatter.format_speed_display(10.0, is_metric=True) == "36.0 км/ч"
        assert formatter.format_distance_display(2500.0, is_metric=True) == "2.5 км"
        assert formatter.format_pressure(100.0, PressureUnit.KPA, PressureUnit.BAR) == "1.0 бар"

    def test_missing_label_falls_back_to_token(self, russian_labels):
        formatter = QuantityFormatter(russian_labels)
        assert formatter.format_speed_display(10.0, is_metric=False) == "22.4 mph"

    def test_report_distance_ignores_catalog(self, russian_labels):
        """Report/log distances always use the raw tokens."""
        formatter = QuantityFormatter(russian_labels)
        assert formatter.format_distance(1500.0, is_metric=True) == "1.5km"

    def test_failing_lookup_falls_back_to_token(self):
        class BrokenCatalog:
            def lookup(self, key):
                raise KeyError(key)

        formatter = QuantityFormatter(BrokenCatalog())
        assert formatter.format_speed_display(10.0, is_metric=True) == "36.0 km/h"
        assert formatter.format_mass(2000.0, is_metric=True) == "2t"

    def test_empty_lookup_result_falls_back_to_token(self):
        class BlankCatalog:
            def lookup(self, key):
                return ""

        formatter = QuantityFormatter(BlankCatalog())
        assert formatter.label("psi") == "psi"

    def test_unit_labels_are_immutable_copy(self):
        source = {"km": "kilometres"}
        labels = UnitLabels(source)
        source["km"] = "changed"
        assert labels.lookup("km") == "kilometres"
        assert "km" in labels
        assert len(labels) == 1

    def test_unit_labels_unknown_key(self):
        assert UnitLabels().lookup("furlong") == "furlong"

    def test_from_gettext_without_catalog(self, tmp_path):
        """A missing catalog gives an identity table for every token."""
        labels = UnitLabels.from_gettext("simunits", localedir=str(tmp_path), languages=["de"])
        assert len(labels) == len(UNIT_TOKENS)
        for token in UNIT_TOKENS:
            assert labels.lookup(token) == token


class TestLocaleNumbers:
    """Numbers follow the LC_NUMERIC conventions."""

    def test_decimal_comma(self, formatter, comma_decimal_locale):
        assert formatter.format_distance_display(2500.0, is_metric=True) == "2,5 km"
        assert formatter.format_pressure(100.0, PressureUnit.KPA, PressureUnit.BAR) == "1,0 bar"

    def test_whole_numbers_are_grouped(self, formatter, comma_decimal_locale):
        assert formatter.format_short_distance_display(12345.0, is_metric=True) == "12.345 m"
        assert formatter.format_mass(1234567.0, is_metric=True) == "1.235t"

    def test_fixed_point_is_not_grouped(self, formatter, comma_decimal_locale):
        assert formatter.format_mass(1234567.0, is_metric=False) == "2721751,1Lb"


class TestFormatQuantity:
    """Dispatch by style name."""

    @pytest.mark.parametrize("style", sorted(FORMAT_STYLES))
    def test_every_style_dispatches(self, formatter, style):
        method = getattr(formatter, FORMAT_STYLES[style])
        assert formatter.format_quantity(style, 1234.0, True) == method(1234.0, True)

    def test_unknown_style(self, formatter):
        with pytest.raises(ValueError):
            formatter.format_quantity("temperature", 20.0, True)


class TestRounding:
    """Exact halves round away from zero."""

    def test_half_tonne_rounds_up(self, formatter):
        assert formatter.format_mass(2500.0, is_metric=True) == "3t"
        assert formatter.format_mass(-2500.0, is_metric=True) == "-3t"

    def test_half_km_per_hour_rounds_up(self, formatter):
        assert formatter.format_speed_limit(12.5 / 3.6, is_metric=True) == "13 km/h"

    def test_half_tenth_rounds_up(self, formatter):
        assert formatter.format_mass(0.25, is_metric=True) == "0.3kg"

    def test_half_metre_rounds_up(self, formatter):
        assert formatter.format_short_distance_display(0.5, is_metric=True) == "1 m"

    def test_non_finite_values_pass_through(self, formatter):
        assert formatter.format_mass(float("inf"), is_metric=True) == "inft"
        assert formatter.format_mass(float("nan"), is_metric=True) == "nankg"

    def test_very_large_values(self, formatter):
        assert formatter.format_mass(1e20, is_metric=False) == f"{1e20 * 2.20462:.1f}Lb"


class TestPrecision:
    """Thresholds are compared in double precision."""

    def test_just_over_one_tonne_switches_to_tonnes(self, formatter):
        assert formatter.format_mass(1000.00001, is_metric=True) == "1t"

    def test_just_under_a_tenth_of_a_mile_stays_in_yards(self, formatter):
        assert formatter.format_distance(160.9343, is_metric=False) == "176yd"
