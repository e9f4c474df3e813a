"""Power conversions from and to watts."""

WATTS_PER_KILOWATT = 1000.0
WATTS_PER_HORSEPOWER = 745.699872
WATTS_PER_BTU_PER_S = 1055.05585


def from_kw(kilowatts: float) -> float:
    """Convert kilowatts to watts."""
    return kilowatts * WATTS_PER_KILOWATT


def to_kw(watts: float) -> float:
    """Convert watts to kilowatts."""
    return watts * (1.0 / WATTS_PER_KILOWATT)


def from_hp(horsepower: float) -> float:
    """Convert (mechanical) horsepower to watts."""
    return horsepower * WATTS_PER_HORSEPOWER


def to_hp(watts: float) -> float:
    """Convert watts to (mechanical) horsepower."""
    return watts * (1.0 / WATTS_PER_HORSEPOWER)


def from_btu_per_s(btu_per_second: float) -> float:
    """Convert British Thermal Units per second to watts."""
    return btu_per_second * WATTS_PER_BTU_PER_S


def to_btu_per_s(watts: float) -> float:
    """Convert watts to British Thermal Units per second."""
    return watts * (1.0 / WATTS_PER_BTU_PER_S)


def from_w(power: float, is_metric: bool) -> float:
    """Convert watts to kilowatts (metric) or horsepower (imperial)."""
    return to_kw(power) if is_metric else to_hp(power)


def to_w(power: float, is_metric: bool) -> float:
    """Convert kilowatts (metric) or horsepower (imperial) to watts."""
    return from_kw(power) if is_metric else from_hp(power)
