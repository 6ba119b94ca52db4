"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

from ryandata_contact_domain.core.config import configure, reset_settings
from ryandata_contact_domain.geo.enums import Country

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(autouse=True)
def local_country(monkeypatch: pytest.MonkeyPatch) -> Iterator[Country]:
    """Pin the local country to the United States, ignoring the environment."""
    monkeypatch.delenv("RYANDATA_LOCAL_COUNTRY", raising=False)
    monkeypatch.delenv("RYANDATA_LENGTH_UNIT", raising=False)
    reset_settings()
    configure(local_country=Country.UNITED_STATES_OF_AMERICA, length_unit=None)
    yield Country.UNITED_STATES_OF_AMERICA
    reset_settings()
