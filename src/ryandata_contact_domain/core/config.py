"""Runtime settings read from the environment.

Environment variables:
    RYANDATA_LOCAL_COUNTRY: Country considered "home" (enum name or display
        name, e.g. ``UNITED_STATES_OF_AMERICA`` or ``Canada``).
    RYANDATA_LENGTH_UNIT: Default length unit for elevations and distances
        (``METER``, ``FOOT``, ...). Defaults to feet in the United States and
        meters elsewhere.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any

from ryandata_contact_domain.geo.enums import Country, LengthUnit

logger = logging.getLogger(__name__)

_LOCAL_COUNTRY_ENV = "RYANDATA_LOCAL_COUNTRY"
_LENGTH_UNIT_ENV = "RYANDATA_LENGTH_UNIT"

DEFAULT_LOCAL_COUNTRY = Country.UNITED_STATES_OF_AMERICA


def _country_from_env() -> Country:
    value = os.getenv(_LOCAL_COUNTRY_ENV)
    if not value:
        return DEFAULT_LOCAL_COUNTRY
    country = Country.find(value)
    if country is None:
        logger.warning(
            "Unknown %s value %r; using %s", _LOCAL_COUNTRY_ENV, value, DEFAULT_LOCAL_COUNTRY.name
        )
        return DEFAULT_LOCAL_COUNTRY
    return country


def _length_unit_from_env() -> LengthUnit | None:
    value = os.getenv(_LENGTH_UNIT_ENV)
    if not value:
        return None
    unit = LengthUnit.find(value)
    if unit is None:
        logger.warning("Unknown %s value %r; ignoring", _LENGTH_UNIT_ENV, value)
    return unit


@dataclass(frozen=True)
class DomainSettings:
    """Settings shared by the domain model."""

    local_country: Country = field(default_factory=_country_from_env)
    length_unit: LengthUnit | None = field(default_factory=_length_unit_from_env)

    @property
    def default_length_unit(self) -> LengthUnit:
        """Configured length unit, or the customary unit of the local country."""
        if self.length_unit is not None:
            return self.length_unit
        if self.local_country is Country.UNITED_STATES_OF_AMERICA:
            return LengthUnit.FOOT
        return LengthUnit.METER


_settings: DomainSettings | None = None


def get_settings() -> DomainSettings:
    """Get the shared DomainSettings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = DomainSettings()
    return _settings


def configure(**overrides: Any) -> DomainSettings:
    """Replace individual settings, e.g. ``configure(local_country=Country.CANADA)``."""
    global _settings
    _settings = replace(get_settings(), **overrides)
    logger.debug("Settings updated: %s", _settings)
    return _settings


def reset_settings() -> None:
    """Forget configured settings so the environment is read again."""
    global _settings
    _settings = None
