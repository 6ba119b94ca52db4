"""Phone numbers in any country."""

from __future__ import annotations

from typing import Self

from ryandata_contact_domain.core.assertions import require
from ryandata_contact_domain.geo.enums import Country
from ryandata_contact_domain.phone.number import ExtensionCapable, PhoneNumber


class GenericPhoneNumber(ExtensionCapable, PhoneNumber):
    """A phone number with a settable country."""

    @classmethod
    def from_phone_number(cls, phone_number: PhoneNumber | None) -> GenericPhoneNumber:
        """Copy any phone number; an unset country becomes the local country."""
        require(phone_number, "PhoneNumber to copy is required")
        copy = cls(phone_number.area_code, phone_number.exchange_code, phone_number.line_number)
        copy.in_country(phone_number.country or Country.local_country())
        copy.set_extension(phone_number.extension)
        copy.set_type(phone_number.type)
        return copy

    def in_country(self, country: Country | None) -> Self:
        self.country = country
        return self

    def in_local_country(self) -> Self:
        return self.in_country(Country.local_country())
