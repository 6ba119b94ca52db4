"""Phone number components and the digit-based phone number parser.

Parsing drops every non-digit character and then picks the component out of
the remaining digits by position, so ``"(503) 555-1234"`` and
``"503.555.1234"`` parse the same way.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Self

from pydantic import ConfigDict, field_validator

from ryandata_contact_domain.core.assertions import extract_digits, require
from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.core.model import DomainModel

logger = logging.getLogger(__name__)

TEN_DIGIT_PHONE_NUMBER_LENGTH = 10
SEVEN_DIGIT_PHONE_NUMBER_LENGTH = 7


def _parse_failed(message: str, phone_number: str | None) -> RyanDataArgumentError:
    logger.warning("Failed to parse phone number: %.50s", phone_number)
    return RyanDataArgumentError.create(message % (phone_number,), phone_number)


class DigitCode(DomainModel):
    """Base for fixed-length, digits-only phone number components.

    The number is stored as digits only; formatting characters given to the
    constructor (``"[555]"``) are dropped.
    """

    model_config = ConfigDict(frozen=True)

    required_length: ClassVar[int]
    label: ClassVar[str]

    number: str

    def __init__(self, number: str | int | None = None, **data: Any) -> None:
        super().__init__(number=number, **data)

    @field_validator("number", mode="before")
    @classmethod
    def _validate_number(cls, value: Any) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        digits = extract_digits(value) if isinstance(value, str) else ""
        if len(digits) != cls.required_length:
            raise RyanDataArgumentError.create(
                f"{cls.label} [{value}] must be a {cls.required_length}-digit number", value
            )
        return digits

    @classmethod
    def of(cls, number: str | int) -> Self:
        return cls(number)

    @classmethod
    def from_code(cls, code: DigitCode | None) -> Self:
        """Copy another code of the same kind."""
        require(code, f"{cls.__name__} to copy is required")
        return cls(code.number)

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.number,)

    def __str__(self) -> str:
        return self.number


class AreaCode(DigitCode):
    """The 3-digit area code of a phone number."""

    required_length: ClassVar[int] = 3
    label: ClassVar[str] = "AreaCode"

    @classmethod
    def from_area_code(cls, area_code: AreaCode | None) -> AreaCode:
        return cls.from_code(area_code)

    @classmethod
    def parse(cls, phone_number: str | None) -> AreaCode:
        """Take the area code from a 10-digit phone number."""
        digits = extract_digits(phone_number)
        if len(digits) != TEN_DIGIT_PHONE_NUMBER_LENGTH:
            raise _parse_failed("Phone Number [%s] must be 10-digits", phone_number)
        return cls(digits[:3])


class ExchangeCode(DigitCode):
    """The 3-digit exchange code of a phone number."""

    required_length: ClassVar[int] = 3
    label: ClassVar[str] = "ExchangeCode"

    @classmethod
    def from_exchange_code(cls, exchange_code: ExchangeCode | None) -> ExchangeCode:
        return cls.from_code(exchange_code)

    @classmethod
    def parse(cls, phone_number: str | None) -> ExchangeCode:
        """Take the exchange code from a 10-digit or 7-digit phone number."""
        digits = extract_digits(phone_number)
        if len(digits) == TEN_DIGIT_PHONE_NUMBER_LENGTH:
            return cls(digits[3:6])
        if len(digits) == SEVEN_DIGIT_PHONE_NUMBER_LENGTH:
            return cls(digits[:3])
        raise _parse_failed("Phone Number [%s] must be 10-digits or 7-digits", phone_number)


class FourDigitNumber(DigitCode):
    """A 4-digit number."""

    required_length: ClassVar[int] = 4
    label: ClassVar[str] = "Number"

    @classmethod
    def _kind(cls) -> type[DomainModel]:
        return FourDigitNumber

    @classmethod
    def of(cls, number: str | int) -> Self:
        """Create from text, or from an int whose sign is ignored."""
        if isinstance(number, int) and not isinstance(number, bool):
            number = str(abs(number))
        return cls(number)

    @property
    def four_digit_number(self) -> str:
        return self.number


class LineNumber(FourDigitNumber):
    """The 4-digit line number of a phone number."""

    REQUIRED_LINE_NUMBER_LENGTH: ClassVar[int] = 4

    @classmethod
    def from_line_number(cls, line_number: LineNumber | None) -> LineNumber:
        return cls.from_code(line_number)

    @classmethod
    def parse(cls, phone_number: str | None) -> LineNumber:
        """Take the last 4 digits of any phone number with at least 4 digits.

        Example:
            >>> LineNumber.parse("31 6 85 31 67").number
            '3167'
        """
        digits = extract_digits(phone_number)
        if len(digits) < cls.REQUIRED_LINE_NUMBER_LENGTH:
            raise _parse_failed("Phone Number [%s] must be at least 4-digits", phone_number)
        return cls(digits[-cls.REQUIRED_LINE_NUMBER_LENGTH :])


class Extension(DomainModel):
    """A phone number extension of any number of digits."""

    model_config = ConfigDict(frozen=True)

    number: str

    def __init__(self, number: str | int | None = None, **data: Any) -> None:
        super().__init__(number=number, **data)

    @field_validator("number", mode="before")
    @classmethod
    def _validate_number(cls, value: Any) -> str:
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            value = str(value)
        if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
            raise RyanDataArgumentError.create(
                f"Extension [{value}] must contain digits only", value
            )
        return value

    @classmethod
    def of(cls, number: str | int) -> Extension:
        return cls(number)

    @classmethod
    def from_extension(cls, extension: Extension | None) -> Extension:
        require(extension, "Extension to copy is required")
        return cls(extension.number)

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.number,)

    def __str__(self) -> str:
        return self.number
