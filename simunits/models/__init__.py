"""
Pydantic models for simunits requests and responses.
"""

from simunits.models.inputs import (
    ConversionRequest,
    FormatRequest,
    FormatStyle,
    PressureConversionRequest,
    PressureFormatRequest,
    TimeComparisonRequest,
)
from simunits.models.outputs import (
    ConversionCatalog,
    ConversionResult,
    FormattedValue,
    PressureConversionResult,
    PressureUnitInfo,
    TimeComparisonResult,
)

__all__ = [
    "ConversionRequest",
    "FormatRequest",
    "FormatStyle",
    "PressureConversionRequest",
    "PressureFormatRequest",
    "TimeComparisonRequest",
    "ConversionCatalog",
    "ConversionResult",
    "FormattedValue",
    "PressureConversionResult",
    "PressureUnitInfo",
    "TimeComparisonResult",
]
