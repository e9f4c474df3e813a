"""
Distance conversions from and to metres.

Every factor is a literal used by both directions of a conversion pair, so
a round trip only ever sees ordinary float rounding.
"""

METRES_PER_MILE = 1609.344
METRES_PER_KILOMETRE = 1000.0
METRES_PER_YARD = 0.9144
METRES_PER_FOOT = 0.3048
METRES_PER_INCH = 0.0254


def from_mi(miles: float) -> float:
    """Convert (statute or land) miles to metres."""
    return miles * METRES_PER_MILE


def to_mi(metres: float) -> float:
    """Convert metres to (statute or land) miles."""
    return metres * (1.0 / METRES_PER_MILE)


def from_km(kilometres: float) -> float:
    """Convert kilometres to metres."""
    return kilometres * METRES_PER_KILOMETRE


def to_km(metres: float) -> float:
    """Convert metres to kilometres."""
    return metres * (1.0 / METRES_PER_KILOMETRE)


def from_yd(yards: float) -> float:
    """Convert yards to metres."""
    return yards * METRES_PER_YARD


def to_yd(metres: float) -> float:
    """Convert metres to yards."""
    return metres * (1.0 / METRES_PER_YARD)


def from_ft(feet: float) -> float:
    """Convert feet to metres."""
    return feet * METRES_PER_FOOT


def to_ft(metres: float) -> float:
    """Convert metres to feet."""
    return metres * (1.0 / METRES_PER_FOOT)


def from_in(inches: float) -> float:
    """Convert inches to metres."""
    return inches * METRES_PER_INCH


def to_in(metres: float) -> float:
    """Convert metres to inches."""
    return metres * (1.0 / METRES_PER_INCH)


def from_m(distance: float, is_metric: bool) -> float:
    """
    Convert from metres into kilometres or miles.

    Args:
        distance: Distance in metres
        is_metric: Convert to kilometres if True, to miles if False

    Returns:
        Distance in kilometres or miles
    """
    return to_km(distance) if is_metric else to_mi(distance)


def to_m(distance: float, is_metric: bool) -> float:
    """
    Convert to metres from kilometres or miles.

    Args:
        distance: Distance in kilometres (is_metric) or miles
        is_metric: Convert from kilometres if True, from miles if False

    Returns:
        Distance in metres
    """
    return from_km(distance) if is_metric else from_mi(distance)
