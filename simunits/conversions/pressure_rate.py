"""
Pressure rate conversions from and to bar per second.

Unlike ``pressure`` this family is based on bar/s, not kPa/s. Brake pipe
charging and release rates are specified that way and callers depend on it.
"""

PSI_PER_S_PER_BAR_PER_S = 14.5037738


def from_psi_per_s(psi_per_second: float) -> float:
    """Convert psi/second to bar/second."""
    return psi_per_second * (1.0 / PSI_PER_S_PER_BAR_PER_S)


def to_psi_per_s(bar_per_second: float) -> float:
    """Convert bar/second to psi/second."""
    return bar_per_second * PSI_PER_S_PER_BAR_PER_S
