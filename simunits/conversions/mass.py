"""Mass conversions from and to kilograms."""

POUNDS_PER_KILOGRAM = 2.20462
KILOGRAMS_PER_US_TON = 907.1847
KILOGRAMS_PER_UK_TON = 1016.047
KILOGRAMS_PER_TONNE = 1000.0


def from_lb(pounds: float) -> float:
    """Convert pounds (lb) to kilograms."""
    return pounds * (1.0 / POUNDS_PER_KILOGRAM)


def to_lb(kilograms: float) -> float:
    """Convert kilograms to pounds (lb)."""
    return kilograms * POUNDS_PER_KILOGRAM


def from_t_us(tons_us: float) -> float:
    """Convert US (short) tons to kilograms."""
    return tons_us * KILOGRAMS_PER_US_TON


def to_t_us(kilograms: float) -> float:
    """Convert kilograms to US (short) tons."""
    return kilograms * (1.0 / KILOGRAMS_PER_US_TON)


def from_t_uk(tons_uk: float) -> float:
    """Convert UK (long) tons to kilograms."""
    return tons_uk * KILOGRAMS_PER_UK_TON


def to_t_uk(kilograms: float) -> float:
    """Convert kilograms to UK (long) tons."""
    return kilograms * (1.0 / KILOGRAMS_PER_UK_TON)


def from_tonne(tonnes: float) -> float:
    """Convert metric tonnes to kilograms."""
    return tonnes * KILOGRAMS_PER_TONNE


def to_tonne(kilograms: float) -> float:
    """Convert kilograms to metric tonnes."""
    return kilograms * (1.0 / KILOGRAMS_PER_TONNE)


def from_kg(mass: float, is_metric: bool) -> float:
    """Convert kilograms to tonnes (metric) or pounds (imperial)."""
    return to_tonne(mass) if is_metric else to_lb(mass)


def to_kg(mass: float, is_metric: bool) -> float:
    """Convert tonnes (metric) or pounds (imperial) to kilograms."""
    return from_tonne(mass) if is_metric else from_lb(mass)
