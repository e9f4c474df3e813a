"""Area conversions from and to square metres."""

SQUARE_METRES_PER_SQUARE_FOOT = 0.092903
SQUARE_INCHES_PER_SQUARE_METRE = 1550.0031


def from_ft2(square_feet: float) -> float:
    """Convert square feet to square metres."""
    return square_feet * SQUARE_METRES_PER_SQUARE_FOOT


def to_ft2(square_metres: float) -> float:
    """Convert square metres to square feet."""
    return square_metres * (1.0 / SQUARE_METRES_PER_SQUARE_FOOT)


def from_in2(square_inches: float) -> float:
    """Convert square inches to square metres."""
    return square_inches * (1.0 / SQUARE_INCHES_PER_SQUARE_METRE)


def to_in2(square_metres: float) -> float:
    """Convert square metres to square inches."""
    return square_metres * SQUARE_INCHES_PER_SQUARE_METRE
