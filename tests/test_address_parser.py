"""Tests for USAddressParser and ParseResult."""

from __future__ import annotations

import pytest

from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.geo.enums import Country, State
from ryandata_contact_domain.geo.street import StreetType
from ryandata_contact_domain.geo.usa.address import UnitedStatesAddress
from ryandata_contact_domain.geo.usa.city import UnitedStatesCity
from ryandata_contact_domain.geo.usa.zip_code import ZIP
from ryandata_contact_domain.parsers import ParseResult, USAddressParser
from ryandata_contact_domain.protocols import AddressParserProtocol
from ryandata_contact_domain.validation import create_default_validators


@pytest.fixture
def parser() -> USAddressParser:
    return USAddressParser()


# =============================================================================
# Parsing
# =============================================================================


class TestUSAddressParser:
    """Tests for composing addresses from tagged address lines."""

    def test_is_address_parser(self, parser: USAddressParser) -> None:
        assert isinstance(parser, AddressParserProtocol)
        assert parser.name == "usaddress"

    def test_basic_address(self, parser: USAddressParser) -> None:
        """A street, city, state and ZIP line composes a UnitedStatesAddress."""
        result = parser.parse("123 Main St, Austin TX 78749")
        assert result.is_parsed
        address = result.address
        assert isinstance(address, UnitedStatesAddress)
        assert address.street.number == 123
        assert address.street.name == "Main"
        assert address.street.type is StreetType.STREET
        assert address.city == UnitedStatesCity("Austin", State.TEXAS)
        assert address.state is State.TEXAS
        assert address.zip_code == ZIP.of("78749")
        assert address.country is Country.UNITED_STATES_OF_AMERICA

    def test_pre_directional(self, parser: USAddressParser) -> None:
        result = parser.parse("100 N Main St, Austin TX 78749")
        assert result.address is not None
        assert str(result.address.street) == "100 N Main ST"

    def test_unit(self, parser: USAddressParser) -> None:
        result = parser.parse("400 Main St Apt 5, Austin TX 78749")
        assert result.address is not None
        assert result.address.unit is not None
        assert result.address.unit.number == "5"

    def test_zip_plus_four(self, parser: USAddressParser) -> None:
        result = parser.parse("123 Main St, Austin TX 78749-1234")
        assert result.address is not None
        assert str(result.address.zip_code) == "78749-1234"

    def test_full_state_name_is_normalized(self, parser: USAddressParser) -> None:
        """A full state name resolves to the state and is logged as a cleaning."""
        result = parser.parse("123 Main St, Austin Texas 78749")
        assert result.address is not None
        assert result.address.state is State.TEXAS
        (entry,) = result.process_log.cleaning
        assert (entry.field, entry.original_value, entry.new_value) == (
            "StateName",
            "Texas",
            "TX",
        )

    def test_multi_word_city(self, parser: USAddressParser) -> None:
        result = parser.parse("456 Oak Ave, New York NY 10001")
        assert result.address is not None
        assert result.address.city.name == "New York"
        assert result.address.street.type is StreetType.AVENUE

    @pytest.mark.parametrize("number, name", [(123, "Main"), (456, "Oak"), (7890, "Elm")])
    def test_street_number_and_name(self, parser: USAddressParser, number: int, name: str) -> None:
        result = parser.parse(f"{number} {name} St, Austin TX 78749")
        assert result.address is not None
        assert (result.address.street.number, result.address.street.name) == (number, name)


class TestParseErrors:
    """Tests for lines that cannot be composed into an address."""

    def test_missing_street_number(self, parser: USAddressParser) -> None:
        result = parser.parse("Main St, Austin TX 78749")
        assert not result.is_parsed
        assert not result.is_valid
        assert isinstance(result.error, RyanDataArgumentError)
        assert "must begin with a street number" in str(result.error)

    def test_missing_zip(self, parser: USAddressParser) -> None:
        result = parser.parse("123 Main St, Austin TX")
        assert result.address is None
        assert "ZIP code is required" in str(result.error)

    def test_unknown_zip_without_state(self, parser: USAddressParser) -> None:
        result = parser.parse("123 Main St, Austin 00000")
        assert result.address is None
        assert result.error is not None

    def test_error_is_logged_to_process_log(self, parser: USAddressParser) -> None:
        result = parser.parse("Main St, Austin TX 78749")
        (entry,) = result.process_log.errors
        assert entry.field == "address"
        assert entry.original_value == "Main St, Austin TX 78749"

    def test_parse_never_raises(self, parser: USAddressParser) -> None:
        result = parser.parse("")
        assert result.error is not None
        assert result.to_dict() is None


class TestStateComponent:
    """Tests for state resolution from tagged components."""

    def test_abbreviation_is_not_a_cleaning(self, parser: USAddressParser) -> None:
        result = ParseResult(raw_input="")
        assert parser._state({"StateName": "TX"}, result) is State.TEXAS
        assert result.process_log.cleaning == []

    def test_unknown_state_is_logged(self, parser: USAddressParser) -> None:
        result = ParseResult(raw_input="")
        assert parser._state({"StateName": "XX"}, result) is None
        (entry,) = result.process_log.errors
        assert entry.field == "StateName"
        assert entry.message == "Unknown US state [XX]"

    def test_missing_state(self, parser: USAddressParser) -> None:
        assert parser._state({}, ParseResult(raw_input="")) is None

    def test_merge_consecutive_labels(self, parser: USAddressParser) -> None:
        tokens = [
            ("123", "AddressNumber"),
            ("Main", "StreetName"),
            ("St,", "StreetNamePostType"),
            ("New", "PlaceName"),
            ("York,", "PlaceName"),
        ]
        assert parser._merge_consecutive_labels(tokens) == {
            "AddressNumber": "123",
            "StreetName": "Main",
            "StreetNamePostType": "St",
            "PlaceName": "New York",
        }


# =============================================================================
# Results, batches and statistics
# =============================================================================


class TestParseResult:
    """Tests for ParseResult."""

    def test_to_dict(self, parser: USAddressParser) -> None:
        data = parser.parse("123 Main St, Austin TX 78749").to_dict()
        assert data is not None
        assert data["state"] == "TX"
        assert data["zip_code"] == {"number": "78749"}
        assert data["country"] == "United States of America"

    def test_validation_runs_when_configured(self) -> None:
        parser = USAddressParser(validator=create_default_validators())
        result = parser.parse("123 Main St, Austin TX 78749")
        assert result.validation is not None
        assert result.is_valid

    def test_zip_outside_state_is_invalid(self) -> None:
        parser = USAddressParser(validator=create_default_validators())
        result = parser.parse("123 Main St, Austin TX 97205")
        assert result.is_parsed
        assert not result.is_valid
        assert result.validation is not None
        assert any(
            "ZIP code 97205 is not in TX" in error.message for error in result.validation.errors
        )

    def test_without_validator(self, parser: USAddressParser) -> None:
        result = parser.parse("123 Main St, Austin TX 78749")
        assert result.validation is None
        assert result.is_valid


class TestBatchAndStats:
    """Tests for parse_batch() and parser statistics."""

    def test_parse_batch(self, parser: USAddressParser) -> None:
        results = parser.parse_batch(
            [
                "123 Main St, Austin TX 78749",
                "Main St, Austin TX 78749",
                "456 Oak Ave, Dallas TX 75201",
            ]
        )
        assert [result.is_parsed for result in results] == [True, False, True]

    def test_stats(self, parser: USAddressParser) -> None:
        parser.parse("123 Main St, Austin TX 78749")
        parser.parse("Main St, Austin TX 78749")
        assert parser.stats == {"parse_count": 2, "error_count": 1}
        parser.reset_stats()
        assert parser.stats == {"parse_count": 0, "error_count": 0}
