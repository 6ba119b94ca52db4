"""Address factory for creating country-specific addresses.

Builders are registered per Country. The United States always resolves to
:class:`UnitedStatesAddressBuilder`; any country without a registered
builder falls back to :class:`GenericAddressBuilder`.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from ryandata_contact_domain.core.factory import PluginFactory
from ryandata_contact_domain.geo.address import Address, AddressBuilder
from ryandata_contact_domain.geo.city import City
from ryandata_contact_domain.geo.enums import Country
from ryandata_contact_domain.geo.postal_code import PostalCode
from ryandata_contact_domain.geo.street import Street

logger = logging.getLogger(__name__)


class AddressFactory(PluginFactory[Country, AddressBuilder]):
    """Factory for creating address builders keyed by country.

    Example:
        >>> AddressFactory.builder_for(Country.CANADA).__name__
        'GenericAddressBuilder'
    """

    _registry: ClassVar[dict[Country, type[AddressBuilder]]] = {}
    _default_type: ClassVar[Country] = Country.UNKNOWN
    _fallback_type: ClassVar[Country] = Country.UNKNOWN
    _entity_name: ClassVar[str] = "address builder"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Lazily register the default builders."""
        if Country.UNKNOWN not in cls._registry:
            from ryandata_contact_domain.geo.generic import GenericAddressBuilder

            cls._registry[Country.UNKNOWN] = GenericAddressBuilder
        if Country.UNITED_STATES_OF_AMERICA not in cls._registry:
            from ryandata_contact_domain.geo.usa.address import UnitedStatesAddressBuilder

            cls._registry[Country.UNITED_STATES_OF_AMERICA] = UnitedStatesAddressBuilder

    @classmethod
    def builder_for(cls, country: Country | None = None) -> type[AddressBuilder]:
        """Get the builder class for ``country`` (default: the local country)."""
        country = country or Country.local_country()
        if country is Country.UNITED_STATES_OF_AMERICA:
            from ryandata_contact_domain.geo.usa.address import UnitedStatesAddressBuilder

            return UnitedStatesAddressBuilder
        return cls.resolve(country)

    @classmethod
    def new_address_builder(cls, country: Country | None = None) -> AddressBuilder:
        """Create a builder for addresses in ``country`` (default: the local country)."""
        country = country or Country.local_country()
        builder_class = cls.builder_for(country)
        logger.debug("Using %s for %s", builder_class.__name__, country.name)
        return builder_class(country)

    @classmethod
    def new_address(
        cls,
        street: Street,
        city: City,
        postal_code: PostalCode,
        country: Country | None = None,
    ) -> Address:
        """Build an address in ``country`` from its required components."""
        return (
            cls.new_address_builder(country)
            .on(street)
            .in_city(city)
            .in_postal_code(postal_code)
            .build()
        )
