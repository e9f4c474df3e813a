"""
Pressure unit registry.

Pressure is the one family whose display unit is chosen from data (cab
gauge definitions, user options) rather than fixed at the call site, so it
carries a runtime unit tag. Values are converted through kilopascals.
"""

from enum import Enum
from typing import Callable, Union

from simunits.conversions import pressure
from simunits.conversions.units import magnitude_in, parse_quantity, ureg


class UnsupportedUnitError(ValueError):
    """Raised when a pressure unit tag is not one of the five defined units."""


class PressureUnit(str, Enum):
    """Units a pressure value can be expressed in."""
    NONE = "none"
    KPA = "kpa"
    BAR = "bar"
    PSI = "psi"
    INHG = "inhg"
    KGF_PER_CM2 = "kgfpcm2"


# Label tokens, looked up through the formatter's label catalog
UNIT_LABELS: dict[PressureUnit, str] = {
    PressureUnit.KPA: "kPa",
    PressureUnit.BAR: "bar",
    PressureUnit.PSI: "psi",
    PressureUnit.INHG: "inHg",
    PressureUnit.KGF_PER_CM2: "kgf/cm^2",
}

# pint spellings of the defined units
PINT_UNITS: dict[PressureUnit, str] = {
    PressureUnit.KPA: "kilopascal",
    PressureUnit.BAR: "bar",
    PressureUnit.PSI: "psi",
    PressureUnit.INHG: "inch_Hg",
    PressureUnit.KGF_PER_CM2: "kilogram_force / centimeter ** 2",
}

_FROM_KPA: dict[PressureUnit, Callable[[float], float]] = {
    PressureUnit.KPA: lambda value: value,
    PressureUnit.BAR: pressure.to_bar,
    PressureUnit.PSI: pressure.to_psi,
    PressureUnit.INHG: pressure.to_inhg,
    PressureUnit.KGF_PER_CM2: pressure.to_kgf_per_cm2,
}

_TO_KPA: dict[PressureUnit, Callable[[float], float]] = {
    PressureUnit.KPA: lambda value: value,
    PressureUnit.BAR: pressure.from_bar,
    PressureUnit.PSI: pressure.from_psi,
    PressureUnit.INHG: pressure.from_inhg,
    PressureUnit.KGF_PER_CM2: pressure.from_kgf_per_cm2,
}

UnitLike = Union[PressureUnit, str]


def _defined_unit(unit: UnitLike) -> PressureUnit:
    """Coerce to a PressureUnit with a conversion, or raise UnsupportedUnitError."""
    try:
        tag = PressureUnit(unit)
    except ValueError:
        raise UnsupportedUnitError(f"Pressure unit not recognized: {unit!r}") from None
    if tag not in _TO_KPA:
        raise UnsupportedUnitError(f"Pressure unit not recognized: {unit!r}")
    return tag


def convert_from_canonical(value: float, unit: UnitLike) -> float:
    """
    Convert a pressure in kilopascals to the given unit.

    Args:
        value: Pressure in kPa
        unit: Target unit

    Returns:
        Pressure in the target unit

    Raises:
        UnsupportedUnitError: If unit is NONE or not a PressureUnit
    """
    return _FROM_KPA[_defined_unit(unit)](value)


def convert_to_canonical(value: float, unit: UnitLike) -> float:
    """
    Convert a pressure in the given unit to kilopascals.

    Raises:
        UnsupportedUnitError: If unit is NONE or not a PressureUnit
    """
    return _TO_KPA[_defined_unit(unit)](value)


def convert(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """Convert a pressure between two units, passing through kPa."""
    return convert_from_canonical(convert_to_canonical(value, from_unit), to_unit)


def parse_pressure(text: str) -> tuple[float, PressureUnit]:
    """
    Parse text such as ``"30 psi"`` into a value and its unit tag.

    The unit must be one of the defined pressure units; other pressure
    units that pint knows (e.g. ``atm``) are rejected rather than silently
    converted.

    Raises:
        UnsupportedUnitError: If the text cannot be parsed or the unit is
            not one of the defined pressure units
    """
    try:
        quantity = parse_quantity(text)
    except ValueError as e:
        raise UnsupportedUnitError(str(e)) from e

    for tag, pint_unit in PINT_UNITS.items():
        if quantity.units == ureg.parse_units(pint_unit):
            return float(quantity.magnitude), tag

    if quantity.check("[pressure]"):
        # Same dimension but a unit we do not display; report the kPa value
        raise UnsupportedUnitError(
            f"Pressure unit {quantity.units:~} not supported "
            f"(equals {magnitude_in(quantity, 'kPa'):.3f} kPa)"
        )
    raise UnsupportedUnitError(f"{text!r} is not a pressure")
