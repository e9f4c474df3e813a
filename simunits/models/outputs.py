"""
Response models for the CLI and HTTP API.
"""

from typing import Optional

from pydantic import BaseModel, Field

from simunits.pressure_registry import PressureUnit


class ConversionResult(BaseModel):
    """Result of a single conversion call."""
    # inf/nan results are serialized as "Infinity", "-Infinity" and "NaN" strings
    model_config = {"ser_json_inf_nan": "strings"}

    family: str
    function: str
    value: float = Field(..., description="Input value")
    is_metric: Optional[bool] = None
    result: float = Field(..., description="Converted value")
    canonical_unit: str = Field(..., description="Canonical unit of the family")


class PressureConversionResult(BaseModel):
    """Result of a pressure conversion."""
    model_config = {"ser_json_inf_nan": "strings"}

    value: float
    from_unit: PressureUnit
    to_unit: PressureUnit
    value_kpa: float = Field(..., description="Intermediate canonical value in kPa")
    result: float


class FormattedValue(BaseModel):
    """A formatted display string."""
    text: str


class PressureUnitInfo(BaseModel):
    """Description of a selectable pressure unit."""
    unit: PressureUnit
    label: str
    decimals: int = Field(..., description="Decimal places used when displayed")


class TimeComparisonResult(BaseModel):
    """Ordering of two times of day, night wrapping past midnight."""
    time1: int
    time2: int
    latest: int
    earliest: int
    latest_clock: str = Field(..., description="latest as HH:MM:SS")
    earliest_clock: str = Field(..., description="earliest as HH:MM:SS")


class ConversionCatalog(BaseModel):
    """Available conversion functions per family."""
    families: dict[str, list[str]]
    canonical_units: dict[str, str]
