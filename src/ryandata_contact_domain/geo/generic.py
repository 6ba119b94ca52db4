"""Addresses for countries without a specific address model."""

from __future__ import annotations

from typing import ClassVar

from ryandata_contact_domain.geo.address import Address, AddressBuilder
from ryandata_contact_domain.geo.city import City
from ryandata_contact_domain.geo.enums import Country
from ryandata_contact_domain.geo.postal_code import PostalCode
from ryandata_contact_domain.geo.street import Street


class GenericAddress(Address):
    """An address in any country."""

    @classmethod
    def of(
        cls,
        street: Street,
        city: City,
        postal_code: PostalCode,
        country: Country | None = None,
    ) -> GenericAddress:
        """Create a generic address; ``country`` is required here."""
        return cls().on(street).in_city(city).in_postal_code(postal_code).in_country(country)

    @classmethod
    def builder(cls, country: Country | None = None) -> GenericAddressBuilder:
        return GenericAddressBuilder(country)


class GenericAddressBuilder(AddressBuilder):
    """Builds a :class:`GenericAddress` in the builder's country."""

    address_class: ClassVar[type[Address]] = GenericAddress

    def _create_address(self, street: Street, city: City, postal_code: PostalCode) -> Address:
        return GenericAddress(street, city, postal_code, self.country)
