"""Settings for the CLI and API via pydantic-settings."""

from __future__ import annotations

import locale
import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from simunits.formatting import QuantityFormatter, UnitLabels
from simunits.pressure_registry import PressureUnit

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    simunits configuration.

    Values are loaded from ``SIMUNITS_*`` environment variables, falling back
    to a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="SIMUNITS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Defaults used when a request does not say
    is_metric: bool = Field(default=True, description="Metric (True) or imperial display units")
    pressure_unit: PressureUnit = Field(default=PressureUnit.BAR, description="Default pressure display unit")

    # Label catalog
    gettext_domain: str = "simunits"
    locale_dir: Optional[str] = None
    language: Optional[str] = None

    # Passed to locale.setlocale(LC_NUMERIC, ...) when set
    number_locale: str = ""

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any standard logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once."""
    return Settings()


def apply_number_locale(settings: Settings) -> None:
    """Switch LC_NUMERIC to the configured locale, if one is configured."""
    if not settings.number_locale:
        return
    try:
        locale.setlocale(locale.LC_NUMERIC, settings.number_locale)
    except locale.Error:
        logger.warning("Locale %r not available, keeping %r", settings.number_locale, locale.setlocale(locale.LC_NUMERIC))


def build_formatter(settings: Settings) -> QuantityFormatter:
    """Create a formatter whose labels come from the configured gettext catalog."""
    labels = UnitLabels.from_gettext(
        domain=settings.gettext_domain,
        localedir=settings.locale_dir,
        languages=[settings.language] if settings.language else None,
    )
    return QuantityFormatter(labels)
