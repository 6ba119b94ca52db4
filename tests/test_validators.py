"""Tests for address and phone number validators."""

from __future__ import annotations

from ryandata_contact_domain.geo.city import City
from ryandata_contact_domain.geo.enums import Country, State
from ryandata_contact_domain.geo.generic import GenericAddress
from ryandata_contact_domain.geo.postal_code import PostalCode
from ryandata_contact_domain.geo.street import Street
from ryandata_contact_domain.geo.usa.address import UnitedStatesAddress
from ryandata_contact_domain.geo.usa.repository import StateZipCodesRepository, ZipCodeRegion
from ryandata_contact_domain.geo.usa.zip_code import ZIP
from ryandata_contact_domain.phone.generic import GenericPhoneNumber
from ryandata_contact_domain.phone.usa import UnitedStatesPhoneNumber
from ryandata_contact_domain.validation import (
    PhoneNumberAreaCodeValidator,
    RequiredAddressFieldsValidator,
    ZipStateValidator,
    create_default_validators,
    create_phone_number_validators,
)


def _messages(result) -> list[str]:
    return [error.message for error in result.errors]


class TestRequiredAddressFieldsValidator:
    """Tests for RequiredAddressFieldsValidator."""

    def test_complete_address_is_valid(self) -> None:
        address = GenericAddress.of(
            Street.parse("1 Main St"), City.of("Lyon"), PostalCode.of("69001"), Country.FRANCE
        )
        assert RequiredAddressFieldsValidator().validate(address).is_valid

    def test_reports_every_missing_field(self) -> None:
        address = GenericAddress.model_construct(country=None)
        result = RequiredAddressFieldsValidator().validate(address)
        assert not result.is_valid
        assert _messages(result) == [
            "Street is required",
            "City is required",
            "Postal Code is required",
            "Country is required",
        ]

    def test_name(self) -> None:
        assert RequiredAddressFieldsValidator().name == "required_address_fields"


class TestZipStateValidator:
    """Tests for ZipStateValidator."""

    def test_matching_zip_and_state(self) -> None:
        address = UnitedStatesAddress().in_zip(ZIP.of("97205")).in_state(State.OREGON)
        assert ZipStateValidator().validate(address).is_valid

    def test_zip_outside_state(self) -> None:
        address = UnitedStatesAddress().in_zip(ZIP.of("97205")).in_state(State.TEXAS)
        result = ZipStateValidator().validate(address)
        assert not result.is_valid
        assert _messages(result) == ["ZIP code 97205 is not in TX"]

    def test_zip_from_postal_code(self) -> None:
        address = UnitedStatesAddress().in_postal_code(PostalCode.of("97205")).in_state(State.TEXAS)
        assert not ZipStateValidator().validate(address).is_valid

    def test_state_without_regions_passes(self) -> None:
        address = UnitedStatesAddress().in_zip(ZIP.of("19901")).in_state(State.DELAWARE)
        assert ZipStateValidator().validate(address).is_valid

    def test_incomplete_or_foreign_addresses_pass(self) -> None:
        assert ZipStateValidator().validate(UnitedStatesAddress()).is_valid
        foreign = GenericAddress().in_postal_code(PostalCode.of("97205"))
        assert ZipStateValidator().validate(foreign).is_valid

    def test_custom_repository(self) -> None:
        repository = StateZipCodesRepository({State.TEXAS: ZipCodeRegion("97")})
        address = UnitedStatesAddress().in_zip(ZIP.of("97205")).in_state(State.TEXAS)
        assert ZipStateValidator(repository).validate(address).is_valid


class TestPhoneNumberAreaCodeValidator:
    """Tests for PhoneNumberAreaCodeValidator."""

    def test_assigned_area_code(self) -> None:
        phone = UnitedStatesPhoneNumber("503", "555", "1234")
        assert PhoneNumberAreaCodeValidator().validate(phone).is_valid

    def test_unassigned_area_code(self) -> None:
        phone = UnitedStatesPhoneNumber("999", "555", "1234")
        result = PhoneNumberAreaCodeValidator().validate(phone)
        assert not result.is_valid
        assert _messages(result) == ["No State for AreaCode [999] could be found"]

    def test_generic_numbers_are_not_checked(self) -> None:
        phone = GenericPhoneNumber("999", "555", "1234").in_country(Country.CANADA)
        assert PhoneNumberAreaCodeValidator().validate(phone).is_valid


class TestPipelines:
    """Tests for the validator pipelines."""

    def test_default_address_pipeline(self) -> None:
        validator = create_default_validators()
        good = UnitedStatesAddress.of(
            Street.parse("123 Main St"), City.of("Austin"), PostalCode.of("78749")
        )
        assert validator.validate(good).is_valid
        bad = UnitedStatesAddress.from_address(good).in_state(State.OREGON)
        assert not validator.validate(bad).is_valid

    def test_pipeline_without_zip_state_check(self) -> None:
        validator = create_default_validators(check_zip_state=False)
        address = (
            UnitedStatesAddress.of(
                Street.parse("123 Main St"), City.of("Austin"), PostalCode.of("78749")
            )
            .in_state(State.OREGON)
        )
        assert validator.validate(address).is_valid

    def test_phone_number_pipeline(self) -> None:
        validator = create_phone_number_validators()
        assert validator.validate(UnitedStatesPhoneNumber("503", "555", "1234")).is_valid
        assert not validator.validate(UnitedStatesPhoneNumber("999", "555", "1234")).is_valid
