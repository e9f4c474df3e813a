"""Energy density conversions from and to kilojoules per kilogram."""

KJ_PER_KG_PER_BTU_PER_LB = 2.326


def from_btu_per_lb(btu_per_pound: float) -> float:
    """Convert British Thermal Units per pound to kilojoules per kilogram."""
    return btu_per_pound * KJ_PER_KG_PER_BTU_PER_LB


def to_btu_per_lb(kilojoules_per_kilogram: float) -> float:
    """Convert kilojoules per kilogram to British Thermal Units per pound."""
    return kilojoules_per_kilogram * (1.0 / KJ_PER_KG_PER_BTU_PER_LB)
