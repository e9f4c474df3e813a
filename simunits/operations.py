"""
Request-level operations shared by the CLI and the HTTP API.

These wrap the plain conversion, pressure and schedule functions with the
pydantic request/response models.
"""

from simunits.conversions import CANONICAL_UNITS, get_conversion, is_dual_mode
from simunits.formatting import PRESSURE_DECIMALS, QuantityFormatter
from simunits.models.inputs import (
    ConversionRequest,
    PressureConversionRequest,
    TimeComparisonRequest,
)
from simunits.models.outputs import (
    ConversionResult,
    PressureConversionResult,
    PressureUnitInfo,
    TimeComparisonResult,
)
from simunits.pressure_registry import (
    UNIT_LABELS,
    convert_from_canonical,
    convert_to_canonical,
)
from simunits.schedule import earliest_of, format_clock, latest_of


def run_conversion(request: ConversionRequest) -> ConversionResult:
    """
    Apply the requested conversion.

    Raises:
        KeyError: Unknown family or function
        ValueError: Dual-mode function called without is_metric
    """
    func = get_conversion(request.family, request.function)
    if is_dual_mode(func):
        if request.is_metric is None:
            raise ValueError(
                f"{request.family}.{request.function} needs is_metric (metric or imperial)"
            )
        result = func(request.value, request.is_metric)
    else:
        result = func(request.value)

    return ConversionResult(
        family=request.family,
        function=request.function,
        value=request.value,
        is_metric=request.is_metric,
        result=result,
        canonical_unit=CANONICAL_UNITS[request.family],
    )


def run_pressure_conversion(request: PressureConversionRequest) -> PressureConversionResult:
    """
    Convert a pressure through kPa.

    Raises:
        UnsupportedUnitError: If either unit is NONE
    """
    value_kpa = convert_to_canonical(request.value, request.from_unit)
    return PressureConversionResult(
        value=request.value,
        from_unit=request.from_unit,
        to_unit=request.to_unit,
        value_kpa=value_kpa,
        result=convert_from_canonical(value_kpa, request.to_unit),
    )


def run_time_comparison(request: TimeComparisonRequest) -> TimeComparisonResult:
    """Order two times with the night-wraps-past-midnight rule."""
    latest = latest_of(request.time1, request.time2)
    earliest = earliest_of(request.time1, request.time2)
    return TimeComparisonResult(
        time1=request.time1,
        time2=request.time2,
        latest=latest,
        earliest=earliest,
        latest_clock=format_clock(latest),
        earliest_clock=format_clock(earliest),
    )


def list_pressure_units(formatter: QuantityFormatter) -> list[PressureUnitInfo]:
    """Describe the selectable pressure units with their display labels."""
    return [
        PressureUnitInfo(unit=unit, label=formatter.label(token), decimals=PRESSURE_DECIMALS[unit])
        for unit, token in UNIT_LABELS.items()
    ]
