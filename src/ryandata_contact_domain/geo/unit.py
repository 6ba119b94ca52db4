"""Units (apartment, suite, ...) within a building."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from ryandata_contact_domain.core.assertions import require, require_text
from ryandata_contact_domain.core.enums import DescribedEnum
from ryandata_contact_domain.core.model import DomainModel


class UnitType(DescribedEnum):
    APARTMENT = ("APT", "Apartment")
    OFFICE = ("OFC", "Office")
    ROOM = ("RM", "Room")
    SUITE = ("STE", "Suite")
    UNIT = ("UNT", "Unit")
    UNKNOWN = ("UKN", "Unknown")


class Unit(DomainModel):
    """A numbered unit, optionally typed.

    Example:
        >>> str(Unit.suite("16"))
        'Suite 16'
        >>> str(Unit.of("16"))
        'Unit 16'
    """

    number: str
    type: UnitType | None = None

    def __init__(self, number: str | None = None, type: UnitType | None = None, **data: Any) -> None:
        super().__init__(number=number, type=type, **data)

    @field_validator("number", mode="before")
    @classmethod
    def _validate_number(cls, value: Any) -> str:
        if isinstance(value, int):
            value = str(value)
        return require_text(value, "Number [%s] is required").strip()

    @classmethod
    def of(cls, number: str) -> Unit:
        return cls(number)

    @classmethod
    def from_unit(cls, unit: Unit | None) -> Unit:
        require(unit, "Unit to copy is required")
        return cls(unit.number, unit.type)

    @classmethod
    def apartment(cls, number: str) -> Unit:
        return cls(number, UnitType.APARTMENT)

    @classmethod
    def office(cls, number: str) -> Unit:
        return cls(number, UnitType.OFFICE)

    @classmethod
    def room(cls, number: str) -> Unit:
        return cls(number, UnitType.ROOM)

    @classmethod
    def suite(cls, number: str) -> Unit:
        return cls(number, UnitType.SUITE)

    def as_type(self, unit_type: UnitType | None) -> Unit:
        self.type = unit_type
        return self

    def as_apartment(self) -> Unit:
        return self.as_type(UnitType.APARTMENT)

    def as_office(self) -> Unit:
        return self.as_type(UnitType.OFFICE)

    def as_room(self) -> Unit:
        return self.as_type(UnitType.ROOM)

    def as_suite(self) -> Unit:
        return self.as_type(UnitType.SUITE)

    def as_unit(self) -> Unit:
        return self.as_type(UnitType.UNIT)

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.number, self.type)

    def _sort_key(self) -> tuple[Any, ...]:
        return ((self.type or UnitType.UNKNOWN).value, self.number)

    def __str__(self) -> str:
        return f"{(self.type or UnitType.UNIT).description} {self.number}"
