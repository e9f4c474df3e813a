"""
Shared pint unit registry.

The conversion functions in this package never go through pint; the
registry is used where unit names arrive as text (CLI and API input) and to
check the hard-coded factors against pint's definitions.
"""

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity


def parse_quantity(text: str) -> pint.Quantity:
    """
    Parse a string such as ``"30 psi"`` or ``"2.5bar"`` into a quantity.

    Raises:
        ValueError: If the text is not a number followed by a known unit
    """
    try:
        quantity = ureg.Quantity(text.strip())
    except (pint.errors.PintError, SyntaxError, TypeError, AttributeError) as e:
        raise ValueError(f"Cannot parse quantity {text!r}: {e}") from e
    if not isinstance(quantity, pint.Quantity) or quantity.dimensionless:
        raise ValueError(f"Cannot parse quantity {text!r}: no unit given")
    return quantity


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return float(quantity.to(unit).magnitude)
