"""United States addresses."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Self

from ryandata_contact_domain.core.assertions import is_true, require, require_state
from ryandata_contact_domain.geo.address import Address, AddressBuilder
from ryandata_contact_domain.geo.city import City
from ryandata_contact_domain.geo.enums import Country, State
from ryandata_contact_domain.geo.postal_code import PostalCode
from ryandata_contact_domain.geo.street import Street
from ryandata_contact_domain.geo.usa.city import UnitedStatesCity
from ryandata_contact_domain.geo.usa.repository import StateZipCodesRepository
from ryandata_contact_domain.geo.usa.zip_code import ZIP

logger = logging.getLogger(__name__)


class UnitedStatesAddress(Address):
    """An address in the United States, with a state and a ZIP code.

    Setting the ZIP also sets the postal code; setting the postal code leaves
    the ZIP alone. Reading :attr:`zip` falls back to a ZIP derived from the
    postal code.

    Example:
        >>> address = UnitedStatesAddress().in_zip(ZIP.of("97205"))
        >>> address.postal_code
        ZIP(number='97205')
    """

    city: UnitedStatesCity | City | None = None
    postal_code: ZIP | PostalCode | None = None
    country: Country = Country.UNITED_STATES_OF_AMERICA
    state: State | None = None
    zip_code: ZIP | None = None

    @classmethod
    def of(
        cls,
        street: Street,
        city: City,
        postal_code: PostalCode,
        country: Country | None = None,
        state: State | None = None,
    ) -> UnitedStatesAddress:
        """Create an address, deriving the state from the ZIP when not given."""
        zip_code = ZIP.from_postal_code(postal_code)
        state = state or StateZipCodesRepository.get_instance().find_state_by(zip_code)
        return cls().in_zip(zip_code).in_state(state).in_city(city).on(street)

    @classmethod
    def builder(cls, country: Country | None = None) -> UnitedStatesAddressBuilder:
        return UnitedStatesAddressBuilder(country)

    @classmethod
    def from_address(cls, address: Address | None) -> Self:
        """Copy ``address``, including state and ZIP when it has them."""
        require(address, "Address to copy is required")
        copy = cls(
            street=address.street,
            city=address.city,
            postal_code=address.postal_code,
            unit=address.unit,
            coordinates=address.coordinates,
            type=address.type,
        )
        if isinstance(address, UnitedStatesAddress):
            copy.state = address.state
            copy.zip_code = address.zip_code
        return copy

    @property
    def zip(self) -> ZIP | None:
        """The ZIP code, or one derived from the postal code."""
        if self.zip_code is not None:
            return self.zip_code
        if self.postal_code is None:
            return None
        return ZIP.from_postal_code(self.postal_code)

    def set_state(self, state: State | None) -> None:
        self.state = require(state, "State is required")

    def set_zip(self, zip_code: ZIP | None) -> None:
        self.zip_code = require(zip_code, "Zip is required")
        self.set_postal_code(zip_code)

    def in_state(self, state: State | None) -> Self:
        self.set_state(state)
        return self

    def in_zip(self, zip_code: ZIP | None) -> Self:
        self.set_zip(zip_code)
        return self

    def validate(self) -> Self:  # type: ignore[override]
        super().validate()
        require_state(self.state, "State is required")
        return self

    def _equality_key(self) -> tuple[Any, ...]:
        return super()._equality_key() + (self.state, self.zip)

    def _describe(self) -> dict[str, Any]:
        return {
            "street": self.street,
            "unit": self.unit,
            "city": self.city,
            "state": self.state,
            "zip": self.zip_code or self.postal_code,
            "country": self.country,
            "type": self.type,
        }


class UnitedStatesAddressBuilder(AddressBuilder):
    """Builds a :class:`UnitedStatesAddress`.

    The postal code becomes the ZIP; the state is looked up from the ZIP
    unless given, and the city becomes a :class:`UnitedStatesCity` in that
    state.
    """

    address_class: ClassVar[type[Address]] = UnitedStatesAddress

    def __init__(self, country: Country | None = None) -> None:
        self._state: State | None = None
        super().__init__(country)

    @classmethod
    def from_address(cls, address: Address | None) -> Self:
        builder = super().from_address(address)
        if isinstance(address, UnitedStatesAddress) and address.state is not None:
            builder.in_state(address.state)
        return builder

    @property
    def country(self) -> Country:
        return Country.UNITED_STATES_OF_AMERICA

    def in_country(self, country: Country | None) -> Self:
        is_true(
            country is None or country is Country.UNITED_STATES_OF_AMERICA,
            "Country [%s] must be the United States of America",
            country,
            value=country,
        )
        return super().in_country(country)

    def in_state(self, state: State | None) -> Self:
        self._state = state
        return self

    def in_zip(self, zip_code: ZIP | None) -> Self:
        return self.in_postal_code(zip_code)

    def _create_address(self, street: Street, city: City, postal_code: PostalCode) -> Address:
        zip_code = ZIP.from_postal_code(postal_code)
        state = self._state
        if state is None:
            state = StateZipCodesRepository.get_instance().find_state_by(zip_code)
            logger.debug("Derived state %s from ZIP %s", state.name, zip_code)
        if not isinstance(city, UnitedStatesCity) or city.state is None:
            city = UnitedStatesCity(city.name, state)
        return UnitedStatesAddress().on(street).in_city(city).in_state(state).in_zip(zip_code)
