"""Time conversions from and to seconds."""

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0


def from_min(minutes: float) -> float:
    """Convert minutes to seconds."""
    return minutes * SECONDS_PER_MINUTE


def to_min(seconds: float) -> float:
    """Convert seconds to minutes."""
    return seconds * (1.0 / SECONDS_PER_MINUTE)


def from_h(hours: float) -> float:
    """Convert hours to seconds."""
    return hours * SECONDS_PER_HOUR


def to_h(seconds: float) -> float:
    """Convert seconds to hours."""
    return seconds * (1.0 / SECONDS_PER_HOUR)
