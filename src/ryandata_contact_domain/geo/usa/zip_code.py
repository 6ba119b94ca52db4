"""United States ZIP codes."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from ryandata_contact_domain.core.assertions import extract_digits, require
from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.geo.enums import Country
from ryandata_contact_domain.geo.postal_code import PostalCode


class ZIP(PostalCode):
    """A 5-digit ZIP code with an optional ZIP+4 extension.

    ``number`` holds the digits only; ``str()`` renders the ZIP+4 form.

    Example:
        >>> zip_code = ZIP.of("97205").plus_four("5515")
        >>> (zip_code.code, zip_code.four_digit_extension, str(zip_code))
        ('97205', '5515', '97205-5515')
    """

    @field_validator("number", mode="before")
    @classmethod
    def _validate_number(cls, value: Any) -> str:
        digits = extract_digits(value) if isinstance(value, str) else ""
        if len(digits) not in (5, 9):
            raise RyanDataArgumentError.create(
                f"5 or 9 digit postal code is required; but was [{value}]", value
            )
        return digits

    @classmethod
    def of(cls, number: str) -> ZIP:
        return cls(number)

    @classmethod
    def from_postal_code(cls, postal_code: PostalCode | None) -> ZIP:
        """Convert any postal code holding 5 or 9 digits into a ZIP."""
        require(postal_code, "Postal Code is required")
        return cls(postal_code.number)

    @property
    def code(self) -> str:
        return self.number[:5]

    @property
    def four_digit_extension(self) -> str | None:
        return self.number[5:] or None

    @property
    def country(self) -> Country:
        return Country.UNITED_STATES_OF_AMERICA

    def plus_four(self, extension: str | None) -> ZIP:
        """Return this ZIP with the given ZIP+4 extension (None drops it)."""
        return ZIP(self.code + (extension or ""))

    def __str__(self) -> str:
        if self.four_digit_extension:
            return f"{self.code}-{self.four_digit_extension}"
        return self.code
