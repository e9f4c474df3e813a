"""
Display formatting of canonical-unit values.

    >>> from simunits.formatting import QuantityFormatter
    >>> QuantityFormatter().format_distance(1500.0, is_metric=True)
    '1.5km'
"""

from simunits.formatting.formatter import FORMAT_STYLES, PRESSURE_DECIMALS, QuantityFormatter
from simunits.formatting.labels import UNIT_TOKENS, LabelLookup, UnitLabels

__all__ = [
    "QuantityFormatter",
    "PRESSURE_DECIMALS",
    "FORMAT_STYLES",
    "UnitLabels",
    "LabelLookup",
    "UNIT_TOKENS",
]
