"""Mass flow rate conversions from and to kilograms per second."""

LB_PER_H_PER_KG_PER_S = 7936.64144


def from_lb_per_h(pounds_per_hour: float) -> float:
    """Convert pounds/hour to kilograms/second."""
    return pounds_per_hour * (1.0 / LB_PER_H_PER_KG_PER_S)


def to_lb_per_h(kilograms_per_second: float) -> float:
    """Convert kilograms/second to pounds/hour."""
    return kilograms_per_second * LB_PER_H_PER_KG_PER_S
