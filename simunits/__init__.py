"""
Simulation units (simunits)

Physical-quantity conversion and display formatting for a vehicle
simulation: metric/imperial conversions per quantity family, a runtime
pressure unit registry, display formatting with localized unit labels, and
a time-of-day comparison that lets the night run past midnight.

Usage:
    python -m simunits convert length to_mi 1609.344
    python -m simunits format distance 1500
    python -m simunits format-pressure 100 --from kpa --to bar
    python -m simunits compare-times 23:00 02:00
    python -m simunits serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "simunits contributors"

from simunits.formatting import QuantityFormatter, UnitLabels
from simunits.pressure_registry import (
    PressureUnit,
    UnsupportedUnitError,
    convert_from_canonical,
    convert_to_canonical,
)
from simunits.schedule import earliest_of, latest_of

__all__ = [
    "QuantityFormatter",
    "UnitLabels",
    "PressureUnit",
    "UnsupportedUnitError",
    "convert_from_canonical",
    "convert_to_canonical",
    "earliest_of",
    "latest_of",
]
