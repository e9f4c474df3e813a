"""
Scalar unit conversions, one module per physical quantity family.

Each family has a canonical unit and ``from_<unit>``/``to_<unit>`` pairs:
``from_`` converts into the canonical unit, ``to_`` out of it. Families with
a metric/imperial pair also carry dual-mode helpers taking ``is_metric``.

All arithmetic is in Python floats (IEEE-754 double precision), not single
precision. Values within about 1e-7 relative of a display threshold can
therefore land on the other side of it than a float32 computation would.

    >>> from simunits.conversions import length
    >>> length.from_km(1.5)
    1500.0
"""

import inspect
from types import ModuleType
from typing import Callable

from simunits.conversions import (
    area,
    energy_density,
    force,
    frequency,
    length,
    liquid_volume,
    mass,
    mass_rate,
    power,
    pressure,
    pressure_rate,
    speed,
    temperature,
    time,
    volume,
)

FAMILIES: dict[str, ModuleType] = {
    "length": length,
    "area": area,
    "volume": volume,
    "speed": speed,
    "mass": mass,
    "force": force,
    "mass_rate": mass_rate,
    "power": power,
    "pressure": pressure,
    "pressure_rate": pressure_rate,
    "energy_density": energy_density,
    "liquid_volume": liquid_volume,
    "frequency": frequency,
    "time": time,
    "temperature": temperature,
}

CANONICAL_UNITS: dict[str, str] = {
    "length": "m",
    "area": "m^2",
    "volume": "m^3",
    "speed": "m/s",
    "mass": "kg",
    "force": "N",
    "mass_rate": "kg/s",
    "power": "W",
    "pressure": "kPa",
    "pressure_rate": "bar/s",
    "energy_density": "kJ/kg",
    "liquid_volume": "L",
    "frequency": "1/s",
    "time": "s",
    "temperature": "degC",
}


def _public_functions(module: ModuleType) -> dict[str, Callable[..., float]]:
    return {
        name: obj
        for name, obj in vars(module).items()
        if inspect.isfunction(obj)
        and obj.__module__ == module.__name__
        and not name.startswith("_")
    }


def list_conversions() -> dict[str, list[str]]:
    """Return the conversion function names available in each family."""
    return {family: sorted(_public_functions(module)) for family, module in FAMILIES.items()}


def get_conversion(family: str, name: str) -> Callable[..., float]:
    """
    Look up a conversion function by family and function name.

    Raises:
        KeyError: If the family or the function does not exist
    """
    if family not in FAMILIES:
        raise KeyError(f"Unknown quantity family: {family}")
    functions = _public_functions(FAMILIES[family])
    if name not in functions:
        raise KeyError(f"Unknown conversion '{name}' for family '{family}'")
    return functions[name]


def is_dual_mode(func: Callable[..., float]) -> bool:
    """True for helpers that choose metric or imperial via ``is_metric``."""
    return "is_metric" in inspect.signature(func).parameters


__all__ = [
    "FAMILIES",
    "CANONICAL_UNITS",
    "list_conversions",
    "get_conversion",
    "is_dual_mode",
    *FAMILIES,
]
