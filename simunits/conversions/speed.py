"""
Speed conversions from and to metres per second.

Track speeds are held in m/s everywhere inside the simulation; km/h and mph
only appear at the display edge.
"""

MPH_PER_MPS = 2.23693629
KPH_PER_MPS = 3.6


def from_mph(miles_per_hour: float) -> float:
    """Convert miles/hour to metres/second."""
    return miles_per_hour * (1.0 / MPH_PER_MPS)


def to_mph(metres_per_second: float) -> float:
    """Convert metres/second to miles/hour."""
    return metres_per_second * MPH_PER_MPS


def from_kph(kilometres_per_hour: float) -> float:
    """Convert kilometres/hour to metres/second."""
    return kilometres_per_hour * (1.0 / KPH_PER_MPS)


def to_kph(metres_per_second: float) -> float:
    """Convert metres/second to kilometres/hour."""
    return metres_per_second * KPH_PER_MPS


def from_mps(speed: float, is_metric: bool) -> float:
    """
    Convert from metres/second to kilometres/hour or miles/hour.

    Args:
        speed: Speed in metres/second
        is_metric: True for kilometres/hour, False for miles/hour
    """
    return to_kph(speed) if is_metric else to_mph(speed)


def to_mps(speed: float, is_metric: bool) -> float:
    """
    Convert to metres/second from kilometres/hour or miles/hour.

    Args:
        speed: Speed in kilometres/hour (is_metric) or miles/hour
        is_metric: True if speed is in kilometres/hour, False for miles/hour
    """
    return from_kph(speed) if is_metric else from_mph(speed)
