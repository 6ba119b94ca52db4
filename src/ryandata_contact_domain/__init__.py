"""ryandata-contact-domain: typed value objects for contact details.

This package provides:
- Phone numbers parsed from free text, with US area-code lookup
- Streets parsed from a street line, units, cities and postal codes
- Country-aware addresses built through a per-country factory
- Coordinates, elevations and distances with unit conversion
- Email addresses and domains
- Full-line US address parsing (usaddress) and composable validators

Quick Start:
    >>> from ryandata_contact_domain import PhoneNumber, Street
    >>> phone = PhoneNumber.parse("(503) 555-1234")
    >>> str(phone.area_code)
    '503'
    >>> street = Street.parse("100 N Main St")
    >>> (street.number, street.direction, street.name, street.type)
    (100, <Direction.NORTH: 'N'>, 'Main', <StreetType.STREET: 'ST'>)

    # Build addresses for any country
    >>> from ryandata_contact_domain import Address, City, ZIP
    >>> address = (
    ...     Address.builder()
    ...     .on(street)
    ...     .in_city(City.of("Portland"))
    ...     .in_postal_code(ZIP.of("97205"))
    ...     .build()
    ... )
"""

from ryandata_contact_domain.core import (
    DomainModel,
    RyanDataArgumentError,
    RyanDataContactError,
    RyanDataStateError,
    RyanDataUnsupportedOperationError,
    RyanDataValidationError,
)
from ryandata_contact_domain.core.config import (
    DomainSettings,
    configure,
    get_settings,
    reset_settings,
)
from ryandata_contact_domain.email import Domain, DomainExtension, EmailAddress, User
from ryandata_contact_domain.geo import (
    Address,
    AddressBuilder,
    AddressFactory,
    AddressType,
    City,
    Continent,
    ConversionFunctions,
    Conversions,
    Coordinates,
    Country,
    Direction,
    Distance,
    Elevation,
    GenericAddress,
    LengthUnit,
    PostalCode,
    State,
    Street,
    StreetType,
    Unit,
    UnitType,
)
from ryandata_contact_domain.geo.usa import (
    ZIP,
    County,
    ImmutableUnitedStatesCity,
    StateZipCodesRepository,
    UnitedStatesAddress,
    UnitedStatesCity,
)
from ryandata_contact_domain.parsers import ParseResult, ParserFactory, USAddressParser
from ryandata_contact_domain.phone import (
    AreaCode,
    ExchangeCode,
    Extension,
    GenericPhoneNumber,
    LineNumber,
    PhoneNumber,
    PhoneNumberType,
    StateAreaCodesRepository,
    UnitedStatesPhoneNumber,
)
from ryandata_contact_domain.validation import create_default_validators

__version__ = "0.1.0"

__all__ = [
    "ZIP",
    "Address",
    "AddressBuilder",
    "AddressFactory",
    "AddressType",
    "AreaCode",
    "City",
    "Continent",
    "ConversionFunctions",
    "Conversions",
    "Coordinates",
    "Country",
    "County",
    "Direction",
    "Distance",
    "Domain",
    "DomainExtension",
    "DomainModel",
    "DomainSettings",
    "Elevation",
    "EmailAddress",
    "ExchangeCode",
    "Extension",
    "GenericAddress",
    "GenericPhoneNumber",
    "ImmutableUnitedStatesCity",
    "LengthUnit",
    "LineNumber",
    "ParseResult",
    "ParserFactory",
    "PhoneNumber",
    "PhoneNumberType",
    "PostalCode",
    "RyanDataArgumentError",
    "RyanDataContactError",
    "RyanDataStateError",
    "RyanDataUnsupportedOperationError",
    "RyanDataValidationError",
    "State",
    "StateAreaCodesRepository",
    "StateZipCodesRepository",
    "Street",
    "StreetType",
    "USAddressParser",
    "Unit",
    "UnitType",
    "UnitedStatesAddress",
    "UnitedStatesCity",
    "UnitedStatesPhoneNumber",
    "User",
    "configure",
    "create_default_validators",
    "get_settings",
    "reset_settings",
]
