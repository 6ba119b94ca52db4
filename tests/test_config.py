"""Tests for environment-driven settings."""

from __future__ import annotations

import logging

import pytest

from ryandata_contact_domain.core.config import (
    DomainSettings,
    configure,
    get_settings,
    reset_settings,
)
from ryandata_contact_domain.geo.enums import Country, LengthUnit


class TestDomainSettings:
    """Tests for DomainSettings and the module-level accessors."""

    def test_defaults(self) -> None:
        reset_settings()
        settings = get_settings()
        assert settings.local_country is Country.UNITED_STATES_OF_AMERICA
        assert settings.length_unit is None
        assert settings.default_length_unit is LengthUnit.FOOT

    def test_settings_are_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RYANDATA_LOCAL_COUNTRY", "Canada")
        monkeypatch.setenv("RYANDATA_LENGTH_UNIT", "yards")
        reset_settings()
        settings = get_settings()
        assert settings.local_country is Country.CANADA
        assert settings.length_unit is LengthUnit.YARD
        assert settings.default_length_unit is LengthUnit.YARD

    def test_environment_member_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RYANDATA_LOCAL_COUNTRY", "NEW_ZEALAND")
        reset_settings()
        assert get_settings().local_country is Country.NEW_ZEALAND
        assert get_settings().default_length_unit is LengthUnit.METER

    def test_unknown_environment_values_are_ignored(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("RYANDATA_LOCAL_COUNTRY", "Atlantis")
        monkeypatch.setenv("RYANDATA_LENGTH_UNIT", "furlong")
        reset_settings()
        with caplog.at_level(logging.WARNING, logger="ryandata_contact_domain.core.config"):
            settings = get_settings()
        assert settings.local_country is Country.UNITED_STATES_OF_AMERICA
        assert settings.length_unit is None
        assert "Atlantis" in caplog.text
        assert "furlong" in caplog.text

    def test_configure_replaces_only_given_settings(self) -> None:
        configure(length_unit=LengthUnit.METER)
        settings = configure(local_country=Country.JAPAN)
        assert settings == DomainSettings(local_country=Country.JAPAN, length_unit=LengthUnit.METER)
        assert get_settings() is settings
