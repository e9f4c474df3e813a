"""Liquid volume conversions from and to litres (fuel, water, sand)."""

LITRES_PER_UK_GALLON = 4.54609
LITRES_PER_US_GALLON = 3.78541


def from_gal_uk(gallons_uk: float) -> float:
    """Convert UK (imperial) gallons to litres."""
    return gallons_uk * LITRES_PER_UK_GALLON


def to_gal_uk(litres: float) -> float:
    """Convert litres to UK (imperial) gallons."""
    return litres * (1.0 / LITRES_PER_UK_GALLON)


def from_gal_us(gallons_us: float) -> float:
    """Convert US gallons to litres."""
    return gallons_us * LITRES_PER_US_GALLON


def to_gal_us(litres: float) -> float:
    """Convert litres to US gallons."""
    return litres * (1.0 / LITRES_PER_US_GALLON)


def from_l(volume: float, is_metric: bool) -> float:
    """Litres stay litres when metric; otherwise convert to UK gallons."""
    return volume if is_metric else to_gal_uk(volume)


def to_l(volume: float, is_metric: bool) -> float:
    """Litres stay litres when metric; otherwise convert from UK gallons."""
    return volume if is_metric else from_gal_uk(volume)
