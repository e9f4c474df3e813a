"""
Request models for the CLI and HTTP API.

All values are in canonical units (m, m/s, kg, ...) unless a unit field
says otherwise.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from simunits.pressure_registry import PressureUnit
from simunits.schedule import parse_clock


class FormatStyle(str, Enum):
    """Named formatting styles of QuantityFormatter."""
    SPEED = "speed"
    SPEED_DISPLAY = "speed-display"
    SPEED_LIMIT = "speed-limit"
    DISTANCE = "distance"
    DISTANCE_DISPLAY = "distance-display"
    SHORT_DISTANCE = "short-distance"
    MASS = "mass"


class ConversionRequest(BaseModel):
    """Apply one conversion function of a quantity family."""
    family: str = Field(..., description="Quantity family, e.g. 'length' or 'speed'")
    function: str = Field(..., description="Function name within the family, e.g. 'to_mi'")
    value: float = Field(..., description="Input value")
    is_metric: Optional[bool] = Field(
        default=None,
        description="Required for dual-mode functions such as length.from_m",
    )

    model_config = {
        "json_schema_extra": {
            "example": {"family": "speed", "function": "to_mph", "value": 27.78}
        }
    }


class PressureConversionRequest(BaseModel):
    """Convert a pressure between two tagged units."""
    value: float = Field(..., description="Pressure in from_unit")
    from_unit: PressureUnit = Field(default=PressureUnit.KPA, description="Unit of value")
    to_unit: PressureUnit = Field(..., description="Unit to convert to")


class FormatRequest(BaseModel):
    """Format a speed, distance or mass for display."""
    style: FormatStyle = Field(..., description="Formatting style")
    value: float = Field(..., description="Value in canonical units (m/s, m or kg)")
    is_metric: Optional[bool] = Field(
        default=None,
        description="Metric or imperial output. Uses the configured default if omitted",
    )


class PressureFormatRequest(BaseModel):
    """Format a tagged pressure in another unit."""
    value: float = Field(..., description="Pressure in input_unit")
    input_unit: PressureUnit = Field(..., description="Unit of value")
    output_unit: Optional[PressureUnit] = Field(
        default=None,
        description="Display unit. Uses the configured default if omitted",
    )
    unit_displayed: bool = Field(default=True, description="Append the unit label")


class TimeComparisonRequest(BaseModel):
    """
    Two times of day to order.

    Each time is either seconds since midnight or a ``HH:MM[:SS]`` string.
    """
    time1: int = Field(..., description="First time, seconds since midnight")
    time2: int = Field(..., description="Second time, seconds since midnight")

    @field_validator("time1", "time2", mode="before")
    @classmethod
    def parse_clock_strings(cls, v: Union[int, str]) -> Union[int, str]:
        """Accept HH:MM[:SS] strings as well as integer seconds."""
        if isinstance(v, str):
            return parse_clock(v)
        return v
