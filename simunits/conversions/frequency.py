"""Rotational rate conversions from and to revolutions (or events) per second."""

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0


def from_per_min(per_minute: float) -> float:
    """Convert per minute (e.g. rpm) to per second."""
    return per_minute * (1.0 / SECONDS_PER_MINUTE)


def to_per_min(per_second: float) -> float:
    """Convert per second to per minute."""
    return per_second * SECONDS_PER_MINUTE


def from_per_h(per_hour: float) -> float:
    """Convert per hour to per second."""
    return per_hour * (1.0 / SECONDS_PER_HOUR)


def to_per_h(per_second: float) -> float:
    """Convert per second to per hour."""
    return per_second * SECONDS_PER_HOUR
