"""
Unit label catalog.

The formatter never translates anything itself; it asks a label lookup for
the display form of a fixed token such as ``"km/h"``. ``UnitLabels`` is the
stock implementation: an immutable table built once, either from a plain
mapping or from a gettext catalog.
"""

from __future__ import annotations

import gettext
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

# Every token the formatter asks for
UNIT_TOKENS: tuple[str, ...] = (
    "m",
    "km",
    "mi",
    "ft",
    "yd",
    "km/h",
    "mph",
    "kg",
    "t",
    "Lb",
    "kPa",
    "bar",
    "psi",
    "inHg",
    "kgf/cm^2",
)


class LabelLookup(Protocol):
    """Anything that maps a unit token to its display label."""

    def lookup(self, key: str) -> str:
        ...


class UnitLabels:
    """
    Read-only table of unit labels.

    Tokens missing from the table come back unchanged, so an empty table is
    a valid (untranslated) catalog.
    """

    def __init__(self, labels: Optional[Mapping[str, str]] = None):
        self._labels = MappingProxyType(dict(labels or {}))

    def lookup(self, key: str) -> str:
        """Return the label for ``key``, or ``key`` itself if there is none."""
        return self._labels.get(key) or key

    def __contains__(self, key: object) -> bool:
        return key in self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def as_dict(self) -> dict[str, str]:
        """Copy of the table, e.g. for the API."""
        return dict(self._labels)

    @classmethod
    def from_gettext(
        cls,
        domain: str = "simunits",
        localedir: Optional[str] = None,
        languages: Optional[Sequence[str]] = None,
    ) -> "UnitLabels":
        """
        Build the table from a gettext catalog.

        A missing catalog is not an error: gettext falls back to returning
        each token untranslated.
        """
        translation = gettext.translation(
            domain,
            localedir=localedir,
            languages=list(languages) if languages else None,
            fallback=True,
        )
        if type(translation) is gettext.NullTranslations:
            logger.debug("No gettext catalog for domain %r in %s, using raw unit tokens", domain, localedir)
        return cls({token: translation.gettext(token) for token in UNIT_TOKENS})
