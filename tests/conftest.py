"""
Pytest configuration and shared fixtures.
"""

import locale
import os

import pytest

from simunits.config import get_settings
from simunits.formatting import QuantityFormatter, UnitLabels


@pytest.fixture(autouse=True)
def c_numeric_locale():
    """Run every test with the C numeric locale, then restore the previous one."""
    previous = locale.setlocale(locale.LC_NUMERIC)
    locale.setlocale(locale.LC_NUMERIC, "C")
    yield
    locale.setlocale(locale.LC_NUMERIC, previous)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and any SIMUNITS_* variables from the environment."""
    for name in list(os.environ):
        if name.startswith("SIMUNITS_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def formatter() -> QuantityFormatter:
    """Formatter with no label catalog (raw tokens)."""
    return QuantityFormatter()


@pytest.fixture
def russian_labels() -> UnitLabels:
    """A partial translated label table."""
    return UnitLabels({
        "m": "м",
        "km": "км",
        "km/h": "км/ч",
        "bar": "бар",
    })


@pytest.fixture
def comma_decimal_locale(monkeypatch):
    """Pretend LC_NUMERIC uses a decimal comma and dot thousands separator."""
    conv = dict(locale.localeconv())
    conv.update({"decimal_point": ",", "thousands_sep": ".", "grouping": [3, 0]})
    monkeypatch.setattr(locale, "localeconv", lambda: conv)
