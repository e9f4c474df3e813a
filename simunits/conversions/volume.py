"""Volume conversions from and to cubic metres."""

CUBIC_FEET_PER_CUBIC_METRE = 35.3146665722
CUBIC_INCHES_PER_CUBIC_METRE = 61023.7441


def from_ft3(cubic_feet: float) -> float:
    """Convert cubic feet to cubic metres."""
    return cubic_feet * (1.0 / CUBIC_FEET_PER_CUBIC_METRE)


def to_ft3(cubic_metres: float) -> float:
    """Convert cubic metres to cubic feet."""
    return cubic_metres * CUBIC_FEET_PER_CUBIC_METRE


def from_in3(cubic_inches: float) -> float:
    """Convert cubic inches to cubic metres."""
    return cubic_inches * (1.0 / CUBIC_INCHES_PER_CUBIC_METRE)


def to_in3(cubic_metres: float) -> float:
    """Convert cubic metres to cubic inches."""
    return cubic_metres * CUBIC_INCHES_PER_CUBIC_METRE
