from ryandata_contact_domain.geo.address import Address, AddressBuilder, AddressType
from ryandata_contact_domain.geo.city import City
from ryandata_contact_domain.geo.coordinates import Coordinates
from ryandata_contact_domain.geo.distance import ConversionFunctions, Conversions, Distance
from ryandata_contact_domain.geo.elevation import Elevation
from ryandata_contact_domain.geo.enums import Continent, Country, Direction, LengthUnit, State
from ryandata_contact_domain.geo.factory import AddressFactory
from ryandata_contact_domain.geo.generic import GenericAddress, GenericAddressBuilder
from ryandata_contact_domain.geo.postal_code import PostalCode
from ryandata_contact_domain.geo.street import Street, StreetType
from ryandata_contact_domain.geo.unit import Unit, UnitType

__all__ = [
    "Address",
    "AddressBuilder",
    "AddressFactory",
    "AddressType",
    "City",
    "Continent",
    "ConversionFunctions",
    "Conversions",
    "Coordinates",
    "Country",
    "Direction",
    "Distance",
    "Elevation",
    "GenericAddress",
    "GenericAddressBuilder",
    "LengthUnit",
    "PostalCode",
    "State",
    "Street",
    "StreetType",
    "Unit",
    "UnitType",
]
