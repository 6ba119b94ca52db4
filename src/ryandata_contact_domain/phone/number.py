"""Phone number base model, extension capability and builder."""

from __future__ import annotations

import logging
from typing import Any, Self

from pydantic import ValidationInfo, field_validator

from ryandata_contact_domain.core.assertions import require, require_state
from ryandata_contact_domain.core.enums import DescribedEnum
from ryandata_contact_domain.core.errors import RyanDataUnsupportedOperationError
from ryandata_contact_domain.core.model import DomainModel, nulls_first
from ryandata_contact_domain.geo.enums import Country
from ryandata_contact_domain.phone.codes import AreaCode, ExchangeCode, Extension, LineNumber
from ryandata_contact_domain.protocols import SupportsExtension

logger = logging.getLogger(__name__)


class PhoneNumberType(DescribedEnum):
    CELL = ("CELL", "Cellular")
    LANDLINE = ("LAND", "Landline")
    SATELLITE = ("SAT", "Satellite")
    VOIP = ("VOIP", "Voice-Over-IP")
    UNKNOWN = ("??", "Unknown")

    @classmethod
    def _not_found_message(cls, abbreviation: str | None) -> str:
        return f"PhoneNumber.Type for abbreviation [{abbreviation}] was not found"


_REQUIRED_COMPONENTS = {
    "area_code": ("AreaCode is required", AreaCode),
    "exchange_code": ("ExchangeCode is required", ExchangeCode),
    "line_number": ("LineNumber is required", LineNumber),
}


class PhoneNumber(DomainModel):
    """A phone number: area code, exchange code and line number.

    Concrete variants are :class:`GenericPhoneNumber` (any country) and
    :class:`UnitedStatesPhoneNumber`. Phone numbers compare by area code,
    exchange code, line number and extension; equality also includes the
    country.

    Example:
        >>> phone = PhoneNumber.parse("(503) 555-1234")
        >>> (str(phone.area_code), str(phone.exchange_code), str(phone.line_number))
        ('503', '555', '1234')
    """

    area_code: AreaCode
    exchange_code: ExchangeCode
    line_number: LineNumber
    extension: Extension | None = None
    country: Country | None = None
    type: PhoneNumberType | None = None
    id: int | None = None
    text_enabled: bool = False

    def __init__(
        self,
        area_code: AreaCode | None = None,
        exchange_code: ExchangeCode | None = None,
        line_number: LineNumber | None = None,
        **data: Any,
    ) -> None:
        super().__init__(
            area_code=area_code, exchange_code=exchange_code, line_number=line_number, **data
        )

    @field_validator("area_code", "exchange_code", "line_number", mode="before")
    @classmethod
    def _validate_component(cls, value: Any, info: ValidationInfo) -> Any:
        message, component_class = _REQUIRED_COMPONENTS[info.field_name]
        require(value, message)
        if isinstance(value, (str, int)):
            return component_class(value)
        return value

    @classmethod
    def _kind(cls) -> type[DomainModel]:
        return PhoneNumber

    @staticmethod
    def builder() -> PhoneNumberBuilder:
        return PhoneNumberBuilder()

    @classmethod
    def of(
        cls, area_code: AreaCode, exchange_code: ExchangeCode, line_number: LineNumber
    ) -> PhoneNumber:
        """Create a generic phone number in the local country."""
        from ryandata_contact_domain.phone.generic import GenericPhoneNumber

        return GenericPhoneNumber(area_code, exchange_code, line_number).in_local_country()

    @classmethod
    def parse(cls, text: str | None) -> PhoneNumber:
        """Parse a 10-digit phone number into a generic phone number in the local country.

        Raises:
            RyanDataArgumentError: If ``text`` does not hold exactly 10 digits.
        """
        phone_number = PhoneNumber.of(
            AreaCode.parse(text), ExchangeCode.parse(text), LineNumber.parse(text)
        )
        logger.debug("Parsed phone number %r", text)
        return phone_number

    @classmethod
    def from_phone_number(cls, phone_number: PhoneNumber | None) -> PhoneNumber:
        """Copy a phone number, keeping its variant for its country."""
        copy = PhoneNumberBuilder.from_phone_number(phone_number).build()
        copy.set_type(phone_number.type)
        copy.id = phone_number.id
        return copy

    def is_roaming(self) -> bool:
        return self.country is not None and self.country is not Country.local_country()

    def set_text_enabled(self, text_enabled: bool | None) -> None:
        self.text_enabled = bool(text_enabled)

    def with_text_enabled(self, text_enabled: bool = True) -> Self:
        self.set_text_enabled(text_enabled)
        return self

    def set_type(self, phone_number_type: PhoneNumberType | None) -> None:
        self.type = phone_number_type

    def as_type(self, phone_number_type: PhoneNumberType | None) -> Self:
        self.set_type(phone_number_type)
        return self

    def as_cell(self) -> Self:
        return self.as_type(PhoneNumberType.CELL)

    def as_landline(self) -> Self:
        return self.as_type(PhoneNumberType.LANDLINE)

    def as_satellite(self) -> Self:
        return self.as_type(PhoneNumberType.SATELLITE)

    def as_voip(self) -> Self:
        return self.as_type(PhoneNumberType.VOIP)

    def is_cell(self) -> bool:
        return self.type is PhoneNumberType.CELL

    def is_landline(self) -> bool:
        return self.type is PhoneNumberType.LANDLINE

    def is_satellite(self) -> bool:
        return self.type is PhoneNumberType.SATELLITE

    def is_voip(self) -> bool:
        return self.type is PhoneNumberType.VOIP

    def is_unknown(self) -> bool:
        return self.type is None or self.type is PhoneNumberType.UNKNOWN

    def validate(self) -> Self:  # type: ignore[override]
        """Check that area code, exchange code and line number are set.

        Raises:
            RyanDataStateError: Naming the first missing component.
        """
        require_state(self.area_code, "AreaCode is required")
        require_state(self.exchange_code, "ExchangeCode is required")
        require_state(self.line_number, "LineNumber is required")
        return self

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.area_code, self.exchange_code, self.line_number, self.extension, self.country)

    def _sort_key(self) -> tuple[Any, ...]:
        return (
            self.area_code,
            self.exchange_code,
            self.line_number,
            nulls_first(self.extension),
        )

    def __str__(self) -> str:
        extension = f"x{self.extension}" if self.extension is not None else None
        return (
            f"{{ @type = {type(self).__name__}, areaCode = {self.area_code}, "
            f"exchangeCode = {self.exchange_code}, number = {self.line_number}, "
            f"extension = {extension}, country = {self.country} }}"
        )


class ExtensionCapable:
    """Mixin for phone number variants whose extension can be changed."""

    def set_extension(self, extension: Extension | None) -> None:
        self.extension = extension

    def with_extension(self, extension: Extension | None) -> Self:
        self.set_extension(extension)
        return self


def set_phone_extension(phone_number: PhoneNumber, extension: Extension | None) -> PhoneNumber:
    """Set the extension of any phone number.

    Raises:
        RyanDataUnsupportedOperationError: If the phone number's variant does
            not support changing its extension.
    """
    if not isinstance(phone_number, SupportsExtension):
        raise RyanDataUnsupportedOperationError.create(
            f"Setting an Extension for a PhoneNumber of type [{type(phone_number).__name__}]"
            " is not supported",
            type(phone_number).__name__,
        )
    phone_number.set_extension(extension)
    return phone_number


class PhoneNumberBuilder:
    """Fluent builder for phone numbers.

    A builder in the United States builds a :class:`UnitedStatesPhoneNumber`;
    any other (or no) country builds a :class:`GenericPhoneNumber`.

    Example:
        >>> phone = (
        ...     PhoneNumber.builder()
        ...     .in_area_code(AreaCode.of("503"))
        ...     .with_exchange_code(ExchangeCode.of("555"))
        ...     .with_line_number(LineNumber.of("1234"))
        ...     .in_country(Country.UNITED_STATES_OF_AMERICA)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._area_code: AreaCode | None = None
        self._exchange_code: ExchangeCode | None = None
        self._line_number: LineNumber | None = None
        self._extension: Extension | None = None
        self._country: Country | None = None
        self._text_enabled = False
        self._type: PhoneNumberType | None = None

    @classmethod
    def from_phone_number(cls, phone_number: PhoneNumber | None) -> Self:
        """Seed a builder with the components of ``phone_number``."""
        require(phone_number, "PhoneNumber to copy is required")
        return (
            cls()
            .in_area_code(phone_number.area_code)
            .with_exchange_code(phone_number.exchange_code)
            .with_line_number(phone_number.line_number)
            .with_extension(phone_number.extension)
            .in_country(phone_number.country)
            .with_text_enabled(phone_number.text_enabled)
        )

    def in_area_code(self, area_code: AreaCode | None) -> Self:
        self._area_code = require(area_code, "AreaCode is required")
        return self

    def with_exchange_code(self, exchange_code: ExchangeCode | None) -> Self:
        self._exchange_code = require(exchange_code, "ExchangeCode is required")
        return self

    def with_line_number(self, line_number: LineNumber | None) -> Self:
        self._line_number = require(line_number, "LineNumber is required")
        return self

    def with_extension(self, extension: Extension | None) -> Self:
        self._extension = extension
        return self

    def in_country(self, country: Country | None) -> Self:
        self._country = country
        return self

    def in_local_country(self) -> Self:
        return self.in_country(Country.local_country())

    def with_text_enabled(self, text_enabled: bool = True) -> Self:
        self._text_enabled = text_enabled
        return self

    def as_type(self, phone_number_type: PhoneNumberType | None) -> Self:
        self._type = phone_number_type
        return self

    def build(self) -> PhoneNumber:
        """Build the phone number.

        Raises:
            RyanDataArgumentError: Naming the first missing of area code,
                exchange code and line number.
        """
        from ryandata_contact_domain.phone.generic import GenericPhoneNumber
        from ryandata_contact_domain.phone.usa import UnitedStatesPhoneNumber

        area_code = require(self._area_code, "AreaCode is required")
        exchange_code = require(self._exchange_code, "ExchangeCode is required")
        line_number = require(self._line_number, "LineNumber is required")

        phone_number: PhoneNumber
        if self._country is Country.UNITED_STATES_OF_AMERICA:
            phone_number = UnitedStatesPhoneNumber(area_code, exchange_code, line_number)
        else:
            phone_number = GenericPhoneNumber(area_code, exchange_code, line_number).in_country(
                self._country
            )

        return (
            set_phone_extension(phone_number, self._extension)
            .with_text_enabled(self._text_enabled)
            .as_type(self._type)
        )
