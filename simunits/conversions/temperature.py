"""
Temperature conversions from and to degrees Celsius.

These are affine, so unlike the other families they must not be used for
temperature differences.
"""

ZERO_CELSIUS_IN_KELVIN = 273.15
FAHRENHEIT_OFFSET = 32.0


def from_f(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (fahrenheit - FAHRENHEIT_OFFSET) * (100.0 / 180.0)


def to_f(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * (180.0 / 100.0) + FAHRENHEIT_OFFSET


def from_k(kelvin: float) -> float:
    """Convert kelvin to degrees Celsius."""
    return kelvin - ZERO_CELSIUS_IN_KELVIN


def to_k(celsius: float) -> float:
    """Convert degrees Celsius to kelvin."""
    return celsius + ZERO_CELSIUS_IN_KELVIN


def from_c(temperature: float, is_metric: bool) -> float:
    """Degrees Celsius stay Celsius when metric; otherwise convert to Fahrenheit."""
    return temperature if is_metric else to_f(temperature)


def to_c(temperature: float, is_metric: bool) -> float:
    """Degrees Celsius stay Celsius when metric; otherwise convert from Fahrenheit."""
    return temperature if is_metric else from_f(temperature)
