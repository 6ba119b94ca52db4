"""Tests for addresses, their builders and the address factory."""

from __future__ import annotations

import re

import pytest
from hypothesis import given, settings

from ryandata_contact_domain.core.config import configure
from ryandata_contact_domain.core.errors import RyanDataArgumentError, RyanDataStateError
from ryandata_contact_domain.geo.address import Address, AddressType
from ryandata_contact_domain.geo.city import City
from ryandata_contact_domain.geo.coordinates import Coordinates
from ryandata_contact_domain.geo.enums import Country, State
from ryandata_contact_domain.geo.factory import AddressFactory
from ryandata_contact_domain.geo.generic import GenericAddress, GenericAddressBuilder
from ryandata_contact_domain.geo.postal_code import PostalCode
from ryandata_contact_domain.geo.street import Street
from ryandata_contact_domain.geo.unit import Unit, UnitType
from ryandata_contact_domain.geo.usa.address import (
    UnitedStatesAddress,
    UnitedStatesAddressBuilder,
)
from ryandata_contact_domain.geo.usa.city import UnitedStatesCity
from ryandata_contact_domain.geo.usa.repository import StateZipCodesRepository, ZipCodeRegion
from ryandata_contact_domain.geo.usa.zip_code import ZIP
from tests.strategies import valid_zip_state_strategy, zip4_strategy


@pytest.fixture
def portland() -> Address:
    return Address.of(Street.parse("100 Main St"), City.of("Portland"), PostalCode.of("97205"))


@pytest.fixture
def toronto() -> Address:
    return Address.of(
        Street.parse("100 Queen St"), City.of("Toronto"), PostalCode.of("M5H 2N2"), Country.CANADA
    )


class TestAddressOf:
    """Tests for Address.of() and the country-specific result."""

    def test_local_country_gives_united_states_address(self, portland: Address) -> None:
        assert isinstance(portland, UnitedStatesAddress)
        assert portland.country is Country.UNITED_STATES_OF_AMERICA
        assert portland.state is State.OREGON
        assert portland.zip_code == ZIP.of("97205")
        assert portland.city == UnitedStatesCity("Portland", State.OREGON)

    def test_other_country_gives_generic_address(self, toronto: Address) -> None:
        assert isinstance(toronto, GenericAddress)
        assert toronto.country is Country.CANADA
        assert toronto.postal_code == PostalCode.of("M5H 2N2")

    def test_local_country_follows_configuration(self) -> None:
        configure(local_country=Country.CANADA)
        address = Address.of(Street.parse("1 King St"), City.of("Toronto"), PostalCode.of("M5H"))
        assert isinstance(address, GenericAddress)
        assert address.country is Country.CANADA
        assert address.is_local()

    def test_unknown_zip_is_rejected(self) -> None:
        with pytest.raises(RyanDataArgumentError, match=re.escape("State for ZIP code [00000]")):
            Address.of(Street.parse("1 Main St"), City.of("Nowhere"), PostalCode.of("00000"))

    def test_non_zip_postal_code_is_rejected_in_united_states(self) -> None:
        with pytest.raises(RyanDataArgumentError, match="5 or 9 digit postal code is required"):
            Address.of(Street.parse("1 Main St"), City.of("Portland"), PostalCode.of("M5H"))


class TestAddressBuilder:
    """Tests for AddressBuilder.build()."""

    def test_requires_street_then_city_then_postal_code(self) -> None:
        builder = Address.builder(Country.CANADA)
        with pytest.raises(RyanDataArgumentError, match="Street is required"):
            builder.build()
        builder.on(Street.parse("100 Queen St"))
        with pytest.raises(RyanDataArgumentError, match="City is required"):
            builder.build()
        builder.in_city(City.of("Toronto"))
        with pytest.raises(RyanDataArgumentError, match="PostalCode is required"):
            builder.build()
        builder.in_postal_code(PostalCode.of("M5H 2N2"))
        assert builder.build().country is Country.CANADA

    def test_unit_and_coordinates(self) -> None:
        address = (
            Address.builder(Country.FRANCE)
            .on(Street.parse("5 Rue St"))
            .in_unit(Unit("4", UnitType.APARTMENT))
            .in_city(City.of("Paris"))
            .in_postal_code(PostalCode.of("75001"))
            .at(Coordinates.at(48.86, 2.35))
            .build()
        )
        assert address.unit == Unit("4", UnitType.APARTMENT)
        assert address.coordinates == Coordinates.at(48.86, 2.35)

    def test_unset_country_is_local_country(self) -> None:
        builder = GenericAddressBuilder()
        assert builder.country is Country.UNITED_STATES_OF_AMERICA
        assert builder.in_country(Country.JAPAN).country is Country.JAPAN
        assert builder.in_local_country().country is Country.UNITED_STATES_OF_AMERICA

    def test_from_address(self, toronto: Address) -> None:
        copy = GenericAddressBuilder.from_address(toronto).build()
        assert copy == toronto
        assert copy is not toronto

    def test_united_states_builder_rejects_other_countries(self) -> None:
        with pytest.raises(
            RyanDataArgumentError,
            match=re.escape("Country [Canada] must be the United States of America"),
        ):
            UnitedStatesAddressBuilder(Country.CANADA)

    def test_united_states_builder_derives_state(self) -> None:
        address = (
            UnitedStatesAddressBuilder()
            .on(Street.parse("123 Main St"))
            .in_city(City.of("Austin"))
            .in_zip(ZIP.of("78749"))
            .build()
        )
        assert address.state is State.TEXAS
        assert address.city == UnitedStatesCity("Austin", State.TEXAS)

    def test_united_states_builder_keeps_given_state(self) -> None:
        address = (
            UnitedStatesAddressBuilder()
            .on(Street.parse("123 Main St"))
            .in_city(City.of("Portland"))
            .in_state(State.MAINE)
            .in_zip(ZIP.of("04101"))
            .build()
        )
        assert address.state is State.MAINE


class TestAddressFactory:
    """Tests for AddressFactory."""

    def test_united_states_builder(self) -> None:
        assert AddressFactory.builder_for(Country.UNITED_STATES_OF_AMERICA) is (
            UnitedStatesAddressBuilder
        )

    def test_unregistered_country_falls_back_to_generic(self) -> None:
        assert AddressFactory.builder_for(Country.CANADA) is GenericAddressBuilder

    def test_default_is_local_country(self) -> None:
        assert isinstance(AddressFactory.new_address_builder(), UnitedStatesAddressBuilder)

    def test_available_types(self) -> None:
        types = AddressFactory.available_types()
        assert Country.UNKNOWN in types
        assert Country.UNITED_STATES_OF_AMERICA in types

    def test_registered_country(self) -> None:
        class CanadianAddressBuilder(GenericAddressBuilder):
            pass

        AddressFactory.register(Country.CANADA, CanadianAddressBuilder)
        try:
            assert AddressFactory.builder_for(Country.CANADA) is CanadianAddressBuilder
        finally:
            AddressFactory.unregister(Country.CANADA)
        assert AddressFactory.builder_for(Country.CANADA) is GenericAddressBuilder


class TestAddress:
    """Tests for Address behavior shared by every country."""

    def test_from_address_uses_country_class(self, portland: Address, toronto: Address) -> None:
        us_copy = Address.from_address(portland)
        assert isinstance(us_copy, UnitedStatesAddress)
        assert us_copy == portland
        assert us_copy.state is State.OREGON

        generic_copy = Address.from_address(toronto)
        assert isinstance(generic_copy, GenericAddress)
        assert generic_copy == toronto

    def test_from_address_requires_address(self) -> None:
        with pytest.raises(RyanDataArgumentError, match="Address to copy is required"):
            Address.from_address(None)

    def test_type_is_not_part_of_identity(self, toronto: Address) -> None:
        home = Address.from_address(toronto).as_home()
        assert home.is_home()
        assert not home.is_work()
        assert home == toronto

    def test_address_types(self, toronto: Address) -> None:
        assert toronto.as_billing().is_billing()
        assert toronto.as_po_box().is_po_box()
        assert toronto.as_type(None).type is None
        assert AddressType.from_abbreviation("ha") is AddressType.HOME

    def test_validate(self) -> None:
        address = GenericAddress()
        with pytest.raises(RyanDataStateError, match="Street is required"):
            address.validate()
        address.on(Street.parse("1 Main St"))
        with pytest.raises(RyanDataStateError, match="City is required"):
            address.validate()
        address.in_city(City.of("Lyon")).in_postal_code(PostalCode.of("69001"))
        assert address.validate() is address

    def test_setters_require_values(self) -> None:
        address = GenericAddress()
        with pytest.raises(RyanDataArgumentError, match="Street is required"):
            address.on(None)
        with pytest.raises(RyanDataArgumentError, match="Country is required"):
            address.in_country(None)

    def test_str(self, toronto: Address) -> None:
        text = str(toronto)
        assert text.startswith("{ @type = GenericAddress, ")
        assert "city = Toronto" in text
        assert "postal code = M5H 2N2" in text
        assert "country = Canada" in text

    def test_sorting_by_country_then_city(self) -> None:
        oslo = GenericAddress.of(
            Street.parse("1 Main St"), City.of("Oslo"), PostalCode.of("0150"), Country.NORWAY
        )
        bergen = GenericAddress.of(
            Street.parse("1 Main St"), City.of("Bergen"), PostalCode.of("5003"), Country.NORWAY
        )
        lyon = GenericAddress.of(
            Street.parse("1 Main St"), City.of("Lyon"), PostalCode.of("69001"), Country.FRANCE
        )
        assert sorted([oslo, bergen, lyon]) == [lyon, bergen, oslo]

    def test_clone_and_dict_round_trip(self, toronto: Address) -> None:
        clone = toronto.clone()
        assert clone == toronto
        assert GenericAddress.from_dict(toronto.to_dict()) == toronto

    def test_dict_round_trip_keeps_country_class(self, toronto: Address) -> None:
        address = (
            Address.builder()
            .on(Street.parse("100 Main St"))
            .in_unit(Unit.suite("1"))
            .in_city(City.of("Portland"))
            .in_postal_code(PostalCode.of("97205"))
            .build()
        )
        copy = Address.from_dict(address.to_dict())
        assert isinstance(copy, UnitedStatesAddress)
        assert copy == address
        assert copy.state is State.OREGON
        assert copy.unit == Unit.suite("1")

        generic_copy = Address.from_dict(toronto.to_dict())
        assert isinstance(generic_copy, GenericAddress)
        assert generic_copy == toronto


class TestUnitedStatesAddress:
    """Tests for UnitedStatesAddress."""

    def test_of_derives_state(self) -> None:
        address = UnitedStatesAddress.of(
            Street.parse("123 Main St"), City.of("Austin"), PostalCode.of("78749")
        )
        assert address.state is State.TEXAS
        assert address.zip == ZIP.of("78749")

    def test_in_zip_sets_postal_code(self) -> None:
        address = UnitedStatesAddress().in_zip(ZIP.of("97205"))
        assert address.postal_code == ZIP.of("97205")
        assert address.zip_code == ZIP.of("97205")

    def test_postal_code_does_not_set_zip(self) -> None:
        address = UnitedStatesAddress().in_postal_code(PostalCode.of("97205"))
        assert address.zip_code is None
        assert address.zip == ZIP.of("97205")

    def test_validate_requires_state(self) -> None:
        address = (
            UnitedStatesAddress()
            .on(Street.parse("100 Main St"))
            .in_city(City.of("Portland"))
            .in_zip(ZIP.of("97205"))
        )
        with pytest.raises(RyanDataStateError, match="State is required"):
            address.validate()
        assert address.in_state(State.OREGON).validate() is address

    def test_equality_uses_zip_derived_from_postal_code(self) -> None:
        street = Street.parse("100 Main St")
        city = UnitedStatesCity.of("Portland", State.OREGON)
        with_zip = UnitedStatesAddress().on(street).in_city(city).in_state(State.OREGON)
        with_zip.set_zip(ZIP.of("97205"))
        with_postal_code = UnitedStatesAddress().on(street).in_city(city).in_state(State.OREGON)
        with_postal_code.set_postal_code(ZIP.of("97205"))

        assert with_postal_code.zip_code is None
        assert with_zip == with_postal_code
        assert hash(with_zip) == hash(with_postal_code)
        with_postal_code.set_postal_code(ZIP.of("97209"))
        assert with_zip != with_postal_code

    def test_state_is_part_of_identity(self, portland: Address) -> None:
        other = UnitedStatesAddress.from_address(portland).in_state(State.MAINE)
        assert other != portland

    def test_str(self, portland: Address) -> None:
        text = str(portland)
        assert text.startswith("{ @type = UnitedStatesAddress, ")
        assert "state = Oregon" in text
        assert "zip = 97205" in text


class TestZip:
    """Tests for ZIP codes."""

    def test_zip_plus_four(self) -> None:
        zip_code = ZIP.of("97205-5515")
        assert zip_code.number == "972055515"
        assert (zip_code.code, zip_code.four_digit_extension) == ("97205", "5515")
        assert str(zip_code) == "97205-5515"

    def test_plus_four(self) -> None:
        assert str(ZIP.of("97205").plus_four("5515")) == "97205-5515"
        assert str(ZIP.of("97205-5515").plus_four(None)) == "97205"

    @pytest.mark.parametrize("number", ["1234", "123456", "ABCDE", "", None])
    def test_rejects_wrong_length(self, number: str | None) -> None:
        with pytest.raises(RyanDataArgumentError, match="5 or 9 digit postal code is required"):
            ZIP(number)

    def test_rejects_non_ascii_digits(self) -> None:
        with pytest.raises(RyanDataArgumentError):
            ZIP.of("٩٧٢٠٥")

    def test_equals_postal_code_with_same_number(self) -> None:
        assert ZIP.of("97205") == PostalCode.of("97205")
        assert ZIP.from_postal_code(PostalCode.of("97205")).country is (
            Country.UNITED_STATES_OF_AMERICA
        )

    @given(zip4_strategy())
    @settings(max_examples=50)
    def test_nine_digit_zip_renders_with_hyphen(self, zip4: str) -> None:
        zip_code = ZIP.of("97205").plus_four(zip4)
        assert zip_code.four_digit_extension == zip4
        assert str(zip_code) == f"97205-{zip4}"


class TestPostalCode:
    """Tests for PostalCode and City."""

    def test_requires_number(self) -> None:
        with pytest.raises(RyanDataArgumentError, match=re.escape("Postal Code number [ ]")):
            PostalCode.of(" ")

    def test_city_requires_name(self) -> None:
        with pytest.raises(RyanDataArgumentError, match="City name"):
            City.of("")

    def test_united_states_city(self) -> None:
        city = UnitedStatesCity.of("Portland", State.OREGON)
        assert city.country is Country.UNITED_STATES_OF_AMERICA
        assert city != UnitedStatesCity.of("Portland", State.MAINE)
        assert str(city) == "Portland"
        assert UnitedStatesCity.from_city(city) == city
        assert City.of("Portland").country is None


class TestStateZipCodesRepository:
    """Tests for the ZIP code to state lookup."""

    @given(valid_zip_state_strategy())
    @settings(max_examples=30)
    def test_find_state_by(self, zip_state: tuple[str, str]) -> None:
        zip_code, abbreviation = zip_state
        repository = StateZipCodesRepository.get_instance()
        assert repository.find_state_by(zip_code) is State.from_abbreviation(abbreviation)
        assert repository.find_state_by(ZIP.of(zip_code)).abbreviation == abbreviation

    def test_find_state_by_requires_postal_code(self) -> None:
        with pytest.raises(RyanDataArgumentError, match="PostalCode used to find a State"):
            StateZipCodesRepository.get_instance().find_state_by(None)

    def test_states_without_regions(self) -> None:
        repository = StateZipCodesRepository.get_instance()
        assert repository.find_zip_ranges_by(State.DELAWARE) == ()
        assert repository.find_zip_ranges_by(State.MARYLAND) == ()
        assert len(repository) == 49

    def test_find_zip_ranges_by(self) -> None:
        (region,) = StateZipCodesRepository.get_instance().find_zip_ranges_by(State.TEXAS)
        assert region.contains("75001")
        assert region.contains(ZIP.of("79999-1234"))
        assert not region.contains("97205")

    def test_region(self) -> None:
        region = ZipCodeRegion("97")
        assert not region.is_range
        assert region.contains("97205")
        assert not region.contains(None)
        assert not region.contains("abc")
        assert ZipCodeRegion("35", "36").adjusted_end == "369999999"

    def test_custom_regions(self) -> None:
        repository = StateZipCodesRepository({State.OREGON: ZipCodeRegion("97")})
        assert list(repository) == [(State.OREGON, ZipCodeRegion("97"))]
        with pytest.raises(RyanDataArgumentError, match="not found"):
            repository.find_state_by("78749")
