"""
Pressure conversions from and to kilopascals.

Brake and boiler pressures are carried in kPa. A second set of helpers,
prefixed ``bar_``, converts from and to bar for the subsystems that keep
their pressures in bar (see also ``pressure_rate``).
"""

KPA_PER_PSI = 6.89475729
KPA_PER_INHG = 3.386389
KPA_PER_BAR = 100.0
KPA_PER_KGF_PER_CM2 = 98.068059

PSI_PER_BAR = 14.5037738
BAR_PER_INHG = 0.03386389
KGF_PER_CM2_PER_BAR = 1.0197


def from_psi(psi: float) -> float:
    """Convert pounds per square inch to kilopascals."""
    return psi * KPA_PER_PSI


def to_psi(kilopascals: float) -> float:
    """Convert kilopascals to pounds per square inch."""
    return kilopascals * (1.0 / KPA_PER_PSI)


def from_inhg(inches_mercury: float) -> float:
    """Convert inches of mercury to kilopascals."""
    return inches_mercury * KPA_PER_INHG


def to_inhg(kilopascals: float) -> float:
    """Convert kilopascals to inches of mercury."""
    return kilopascals * (1.0 / KPA_PER_INHG)


def from_bar(bar: float) -> float:
    """Convert bar to kilopascals."""
    return bar * KPA_PER_BAR


def to_bar(kilopascals: float) -> float:
    """Convert kilopascals to bar."""
    return kilopascals * (1.0 / KPA_PER_BAR)


def from_kgf_per_cm2(kgf_per_cm2: float) -> float:
    """Convert kilogram-force per square centimetre to kilopascals."""
    return kgf_per_cm2 * KPA_PER_KGF_PER_CM2


def to_kgf_per_cm2(kilopascals: float) -> float:
    """Convert kilopascals to kilogram-force per square centimetre."""
    return kilopascals * (1.0 / KPA_PER_KGF_PER_CM2)


# Bar-based helpers

def bar_from_kpa(kilopascals: float) -> float:
    """Convert kilopascals to bar."""
    return kilopascals * (1.0 / KPA_PER_BAR)


def bar_to_kpa(bar: float) -> float:
    """Convert bar to kilopascals."""
    return bar * KPA_PER_BAR


def bar_from_psi(psi: float) -> float:
    """Convert pounds per square inch to bar."""
    return psi * (1.0 / PSI_PER_BAR)


def bar_to_psi(bar: float) -> float:
    """Convert bar to pounds per square inch."""
    return bar * PSI_PER_BAR


def bar_from_inhg(inches_mercury: float) -> float:
    """Convert inches of mercury to bar."""
    return inches_mercury * BAR_PER_INHG


def bar_to_inhg(bar: float) -> float:
    """Convert bar to inches of mercury."""
    return bar * (1.0 / BAR_PER_INHG)


def bar_from_kgf_per_cm2(kgf_per_cm2: float) -> float:
    """Convert kilogram-force per square centimetre to bar."""
    return kgf_per_cm2 * (1.0 / KGF_PER_CM2_PER_BAR)


def bar_to_kgf_per_cm2(bar: float) -> float:
    """Convert bar to kilogram-force per square centimetre."""
    return bar * KGF_PER_CM2_PER_BAR
