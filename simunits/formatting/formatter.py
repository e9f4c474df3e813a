"""
Display formatting for speeds, distances, masses and pressures.

Values come in their canonical units (m/s, m, kg, or a tagged pressure) and
are turned into a number plus a unit label. Numbers follow the process
locale (``LC_NUMERIC``): fixed-point values are never grouped, whole-number
values are. Labels come from the injected label lookup.
"""

from __future__ import annotations

import locale
import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from simunits.conversions import length, mass, speed
from simunits.formatting.labels import LabelLookup, UnitLabels
from simunits.pressure_registry import (
    UNIT_LABELS,
    PressureUnit,
    UnitLike,
    convert_from_canonical,
    convert_to_canonical,
)

logger = logging.getLogger(__name__)

# Decimal places per displayed pressure unit
PRESSURE_DECIMALS: dict[PressureUnit, int] = {
    PressureUnit.KPA: 0,
    PressureUnit.BAR: 1,
    PressureUnit.PSI: 0,
    PressureUnit.INHG: 0,
    PressureUnit.KGF_PER_CM2: 1,
}

# Below this, metric distances are shown in metres
METRIC_SHORT_DISTANCE_M = 100.0


def _round_half_away(value: float, decimals: int) -> float:
    """Round exact halves away from zero, on the shortest decimal form of value."""
    # Doubles this large have no fractional part
    if not math.isfinite(value) or abs(value) >= 2.0 ** 52:
        return value
    quantum = Decimal(10) ** -decimals
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _fixed(value: float, decimals: int) -> str:
    """Fixed-point number with the locale's decimal separator."""
    return locale.format_string(f"%.{decimals}f", _round_half_away(value, decimals))


def _whole(value: float) -> str:
    """Rounded whole number with the locale's digit grouping."""
    return locale.format_string("%.0f", _round_half_away(value, 0), grouping=True)


class QuantityFormatter:
    """
    Formats canonical-unit values for reports and in-game windows.

    Args:
        labels: Unit label lookup. Defaults to an empty ``UnitLabels``,
            which shows the raw tokens.
    """

    def __init__(self, labels: Optional[LabelLookup] = None):
        self.labels: LabelLookup = labels if labels is not None else UnitLabels()

    def label(self, token: str) -> str:
        """Look up a unit label, falling back to the token on any failure."""
        try:
            text = self.labels.lookup(token)
        except Exception:
            logger.debug("Label lookup failed for %r, using token", token, exc_info=True)
            return token
        if not text:
            logger.debug("No label for %r, using token", token)
            return token
        return text

    def _speed_label(self, is_metric: bool) -> str:
        return self.label("km/h" if is_metric else "mph")

    # Speed

    def format_speed(self, speed_mps: float, is_metric: bool) -> str:
        """Speed for reports and logs, one decimal, no space before the unit."""
        return f"{_fixed(speed.from_mps(speed_mps, is_metric), 1)}{self._speed_label(is_metric)}"

    def format_speed_display(self, speed_mps: float, is_metric: bool) -> str:
        """Speed as shown in the track monitor, one decimal."""
        return f"{_fixed(speed.from_mps(speed_mps, is_metric), 1)} {self._speed_label(is_metric)}"

    def format_speed_limit(self, speed_mps: float, is_metric: bool) -> str:
        """Speed limit, no decimals."""
        return f"{_fixed(speed.from_mps(speed_mps, is_metric), 0)} {self._speed_label(is_metric)}"

    # Distance

    def format_distance(self, distance_m: float, is_metric: bool) -> str:
        """
        Distance for reports and logs, using raw unit tokens.

        Metric: metres below 100 m, else kilometres with one decimal.
        Imperial: yards below 0.1 mile, else miles with one decimal.
        """
        if is_metric:
            # <0.1 kilometres, show metres
            if abs(distance_m) < METRIC_SHORT_DISTANCE_M:
                return f"{_whole(distance_m)}m"
            return f"{_fixed(length.to_km(distance_m), 1)}km"
        # <0.1 miles, show yards
        if abs(distance_m) < length.from_mi(0.1):
            return f"{_whole(length.to_yd(distance_m))}yd"
        return f"{_fixed(length.to_mi(distance_m), 1)}mi"

    def format_distance_display(self, distance_m: float, is_metric: bool) -> str:
        """Distance as shown in in-game windows, same thresholds as format_distance."""
        if is_metric:
            if abs(distance_m) < METRIC_SHORT_DISTANCE_M:
                return f"{_whole(distance_m)} {self.label('m')}"
            return f"{_fixed(length.to_km(distance_m), 1)} {self.label('km')}"
        if abs(distance_m) < length.from_mi(0.1):
            return f"{_whole(length.to_yd(distance_m))} {self.label('yd')}"
        return f"{_fixed(length.to_mi(distance_m), 1)} {self.label('mi')}"

    def format_short_distance_display(self, distance_m: float, is_metric: bool) -> str:
        """Short distance in whole metres or whole feet, never km or miles."""
        if is_metric:
            return f"{_whole(distance_m)} {self.label('m')}"
        return f"{_whole(length.to_ft(distance_m))} {self.label('ft')}"

    # Mass

    def format_mass(self, mass_kg: float, is_metric: bool) -> str:
        """
        Mass as shown in in-game windows.

        Metric shows whole tonnes above one tonne and kilograms with one
        decimal otherwise; imperial always shows pounds with one decimal.
        """
        if not is_metric:
            return f"{_fixed(mass.to_lb(mass_kg), 1)}{self.label('Lb')}"
        mass_t = mass.to_tonne(mass_kg)
        if abs(mass_t) > 1:
            return f"{_whole(mass_t)}{self.label('t')}"
        return f"{_fixed(mass_kg, 1)}{self.label('kg')}"

    # Pressure

    def format_pressure(
        self,
        pressure: float,
        input_unit: UnitLike,
        output_unit: UnitLike,
        unit_displayed: bool = True,
    ) -> str:
        """
        Pressure converted from ``input_unit`` to ``output_unit``.

        Returns an empty string if either unit is ``PressureUnit.NONE``.

        Raises:
            UnsupportedUnitError: If a unit is not a PressureUnit at all
        """
        if input_unit == PressureUnit.NONE or output_unit == PressureUnit.NONE:
            return ""

        pressure_kpa = convert_to_canonical(pressure, input_unit)
        pressure_out = convert_from_canonical(pressure_kpa, output_unit)

        output_unit = PressureUnit(output_unit)
        text = _fixed(pressure_out, PRESSURE_DECIMALS[output_unit])
        if unit_displayed:
            text += " " + self.label(UNIT_LABELS[output_unit])
        return text

    # Dispatch by name, for the CLI and API

    def format_quantity(self, style: str, value: float, is_metric: bool) -> str:
        """
        Format ``value`` with the style named in ``FORMAT_STYLES``.

        Raises:
            ValueError: If the style is unknown
        """
        try:
            method_name = FORMAT_STYLES[style]
        except KeyError:
            raise ValueError(f"Unknown format style: {style}") from None
        return getattr(self, method_name)(value, is_metric)


# Style name -> QuantityFormatter method
FORMAT_STYLES: dict[str, str] = {
    "speed": "format_speed",
    "speed-display": "format_speed_display",
    "speed-limit": "format_speed_limit",
    "distance": "format_distance",
    "distance-display": "format_distance_display",
    "short-distance": "format_short_distance_display",
    "mass": "format_mass",
}
