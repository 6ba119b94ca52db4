"""Postal address base model and builder.

Addresses are populated incrementally (``on``/``in_*`` fluent setters) and
checked as a whole with :meth:`Address.validate`. Country-specific variants
live beside this module (:mod:`.generic`, :mod:`.usa.address`) and are chosen
by :class:`~ryandata_contact_domain.geo.factory.AddressFactory`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic import Field

from ryandata_contact_domain.core.assertions import require, require_state
from ryandata_contact_domain.core.enums import DescribedEnum
from ryandata_contact_domain.core.model import DomainModel, nulls_first
from ryandata_contact_domain.geo.city import City
from ryandata_contact_domain.geo.coordinates import Coordinates
from ryandata_contact_domain.geo.enums import Country
from ryandata_contact_domain.geo.postal_code import PostalCode
from ryandata_contact_domain.geo.street import Street
from ryandata_contact_domain.geo.unit import Unit

if TYPE_CHECKING:
    from ryandata_contact_domain.geo.factory import AddressFactory


class AddressType(DescribedEnum):
    """What an address is used for."""

    BILLING = ("BA", "Billing")
    HOME = ("HA", "Home")
    MAILING = ("MA", "Mailing")
    OFFICE = ("OA", "Office")
    PO_BOX = ("PO", "Post Office Box")
    RESIDENTIAL = ("RA", "Residential")
    WORK = ("WA", "Work")
    UNKNOWN = ("??", "Unknown")

    @classmethod
    def _not_found_message(cls, abbreviation: str | None) -> str:
        return f"Address.Type for abbreviation [{abbreviation}] was not found"


class Address(DomainModel):
    """Street, optional unit, city, postal code and country.

    The country defaults to the local country. Addresses compare by country
    name, city, postal code, street and unit; the address type and id are not
    part of an address's identity.

    Example:
        >>> address = Address.of(
        ...     Street.parse("100 Main St"), City.of("Portland"), PostalCode.of("97205"),
        ...     Country.UNITED_STATES_OF_AMERICA,
        ... ).as_home()
        >>> address.is_home(), type(address).__name__
        (True, 'UnitedStatesAddress')
    """

    street: Street | None = None
    unit: Unit | None = None
    city: City | None = None
    postal_code: PostalCode | None = None
    country: Country = Field(default_factory=Country.local_country)
    coordinates: Coordinates | None = None
    type: AddressType | None = None
    id: int | None = None

    def __init__(
        self,
        street: Street | None = None,
        city: City | None = None,
        postal_code: PostalCode | None = None,
        country: Country | None = None,
        **data: Any,
    ) -> None:
        if country is not None:
            data["country"] = country
        super().__init__(street=street, city=city, postal_code=postal_code, **data)

    @classmethod
    def _kind(cls) -> type[DomainModel]:
        return Address

    # Factories

    @staticmethod
    def _factory() -> type[AddressFactory]:
        from ryandata_contact_domain.geo.factory import AddressFactory

        return AddressFactory

    @classmethod
    def builder(cls, country: Country | None = None) -> AddressBuilder:
        """Get a builder for addresses in ``country`` (default: local country)."""
        return cls._factory().new_address_builder(country)

    @classmethod
    def of(
        cls,
        street: Street,
        city: City,
        postal_code: PostalCode,
        country: Country | None = None,
    ) -> Address:
        """Build the country-appropriate address from its required parts."""
        return cls._factory().new_address(street, city, postal_code, country)

    @classmethod
    def from_address(cls, address: Address | None) -> Self:
        """Copy ``address`` into a new address of this class.

        Called on :class:`Address` itself, the class registered for the
        address's country is used.
        """
        require(address, "Address to copy is required")
        if cls is Address:
            target = cls._factory().builder_for(address.country).address_class
            if target is not Address:
                return target.from_address(address)  # type: ignore[return-value]
        return cls(
            street=address.street,
            city=address.city,
            postal_code=address.postal_code,
            country=address.country,
            unit=address.unit,
            coordinates=address.coordinates,
            type=address.type,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Deserialize from the output of :meth:`to_dict`.

        Called on :class:`Address` itself, the class registered for the
        serialized country is used, so country-specific fields survive.
        """
        if cls is Address:
            country = Country.find(data.get("country"))
            target = cls._factory().builder_for(country).address_class
            if target is not Address:
                return target.from_dict(data)  # type: ignore[return-value]
        return super().from_dict(data)

    # Setters

    def set_street(self, street: Street | None) -> None:
        self.street = require(street, "Street is required")

    def set_unit(self, unit: Unit | None) -> None:
        self.unit = unit

    def set_city(self, city: City | None) -> None:
        self.city = require(city, "City is required")

    def set_postal_code(self, postal_code: PostalCode | None) -> None:
        self.postal_code = require(postal_code, "Postal Code is required")

    def set_country(self, country: Country | None) -> None:
        self.country = require(country, "Country is required")

    def set_coordinates(self, coordinates: Coordinates | None) -> None:
        self.coordinates = coordinates

    def set_type(self, address_type: AddressType | None) -> None:
        self.type = address_type

    # Fluent setters

    def on(self, street: Street | None) -> Self:
        self.set_street(street)
        return self

    def in_unit(self, unit: Unit | None) -> Self:
        self.set_unit(unit)
        return self

    def in_city(self, city: City | None) -> Self:
        self.set_city(city)
        return self

    def in_postal_code(self, postal_code: PostalCode | None) -> Self:
        self.set_postal_code(postal_code)
        return self

    def in_country(self, country: Country | None) -> Self:
        self.set_country(country)
        return self

    def in_local_country(self) -> Self:
        return self.in_country(Country.local_country())

    def with_coordinates(self, coordinates: Coordinates | None) -> Self:
        self.set_coordinates(coordinates)
        return self

    def as_type(self, address_type: AddressType | None) -> Self:
        self.set_type(address_type)
        return self

    def as_billing(self) -> Self:
        return self.as_type(AddressType.BILLING)

    def as_home(self) -> Self:
        return self.as_type(AddressType.HOME)

    def as_mailing(self) -> Self:
        return self.as_type(AddressType.MAILING)

    def as_office(self) -> Self:
        return self.as_type(AddressType.OFFICE)

    def as_po_box(self) -> Self:
        return self.as_type(AddressType.PO_BOX)

    def as_residential(self) -> Self:
        return self.as_type(AddressType.RESIDENTIAL)

    def as_work(self) -> Self:
        return self.as_type(AddressType.WORK)

    # Queries

    def is_billing(self) -> bool:
        return self.type is AddressType.BILLING

    def is_home(self) -> bool:
        return self.type is AddressType.HOME

    def is_mailing(self) -> bool:
        return self.type is AddressType.MAILING

    def is_office(self) -> bool:
        return self.type is AddressType.OFFICE

    def is_po_box(self) -> bool:
        return self.type is AddressType.PO_BOX

    def is_residential(self) -> bool:
        return self.type is AddressType.RESIDENTIAL

    def is_work(self) -> bool:
        return self.type is AddressType.WORK

    def is_local(self) -> bool:
        return self.country is Country.local_country()

    def validate(self) -> Self:  # type: ignore[override]
        """Check that every required component is set.

        Raises:
            RyanDataStateError: Naming the first missing component.
        """
        require_state(self.street, "Street is required")
        require_state(self.city, "City is required")
        require_state(self.postal_code, "Postal Code is required")
        require_state(self.country, "Country is required")
        return self

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.street, self.unit, self.postal_code, self.city, self.country)

    def _sort_key(self) -> tuple[Any, ...]:
        return (
            self.country.name if self.country else "",
            nulls_first(self.city),
            nulls_first(self.postal_code),
            nulls_first(self.street),
            nulls_first(self.unit),
        )

    def _describe(self) -> dict[str, Any]:
        return {
            "street": self.street,
            "unit": self.unit,
            "city": self.city,
            "postal code": self.postal_code,
            "country": self.country,
            "type": self.type,
        }

    def __str__(self) -> str:
        fields = ", ".join(f"{name} = {value}" for name, value in self._describe().items())
        return f"{{ @type = {type(self).__name__}, {fields} }}"


class AddressBuilder(ABC):
    """Fluent builder for an address of one country-specific class.

    ``build()`` requires a street, city and postal code; the country defaults
    to the local country when unset or set to None.

    Example:
        >>> address = (
        ...     Address.builder(Country.CANADA)
        ...     .on(Street.parse("100 Main St"))
        ...     .in_city(City.of("Toronto"))
        ...     .in_postal_code(PostalCode.of("M5H 2N2"))
        ...     .build()
        ... )
    """

    address_class: ClassVar[type[Address]] = Address

    def __init__(self, country: Country | None = None) -> None:
        self._street: Street | None = None
        self._unit: Unit | None = None
        self._city: City | None = None
        self._postal_code: PostalCode | None = None
        self._country: Country | None = None
        self._coordinates: Coordinates | None = None
        self.in_country(country)

    @classmethod
    def from_address(cls, address: Address | None) -> Self:
        """Seed a builder with every component of ``address`` except its type."""
        require(address, "Address to copy is required")
        return (
            cls(address.country)
            .on(address.street)
            .in_unit(address.unit)
            .in_city(address.city)
            .in_postal_code(address.postal_code)
            .at(address.coordinates)
        )

    @property
    def country(self) -> Country:
        return self._country or Country.local_country()

    def on(self, street: Street | None) -> Self:
        self._street = street
        return self

    def in_unit(self, unit: Unit | None) -> Self:
        self._unit = unit
        return self

    def in_city(self, city: City | None) -> Self:
        self._city = city
        return self

    def in_postal_code(self, postal_code: PostalCode | None) -> Self:
        self._postal_code = postal_code
        return self

    def in_country(self, country: Country | None) -> Self:
        """Set the country; None means the local country."""
        self._country = country
        return self

    def in_local_country(self) -> Self:
        return self.in_country(None)

    def at(self, coordinates: Coordinates | None) -> Self:
        self._coordinates = coordinates
        return self

    def build(self) -> Address:
        """Build the address.

        Raises:
            RyanDataArgumentError: Naming the first missing of street, city
                and postal code.
        """
        street = require(self._street, "Street is required")
        city = require(self._city, "City is required")
        postal_code = require(self._postal_code, "PostalCode is required")
        address = self._create_address(street, city, postal_code)
        address.set_unit(self._unit)
        address.set_coordinates(self._coordinates)
        return address

    @abstractmethod
    def _create_address(self, street: Street, city: City, postal_code: PostalCode) -> Address:
        """Create the country-specific address from the required components."""
        ...
