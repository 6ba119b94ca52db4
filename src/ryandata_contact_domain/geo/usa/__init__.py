from ryandata_contact_domain.geo.usa.address import UnitedStatesAddress, UnitedStatesAddressBuilder
from ryandata_contact_domain.geo.usa.city import ImmutableUnitedStatesCity, UnitedStatesCity
from ryandata_contact_domain.geo.usa.county import County
from ryandata_contact_domain.geo.usa.repository import StateZipCodesRepository, ZipCodeRegion
from ryandata_contact_domain.geo.usa.zip_code import ZIP

__all__ = [
    "ZIP",
    "County",
    "ImmutableUnitedStatesCity",
    "StateZipCodesRepository",
    "UnitedStatesAddress",
    "UnitedStatesAddressBuilder",
    "UnitedStatesCity",
    "ZipCodeRegion",
]
