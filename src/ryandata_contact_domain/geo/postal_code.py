"""Postal codes."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, field_validator

from ryandata_contact_domain.core.assertions import require, require_text
from ryandata_contact_domain.core.model import DomainModel
from ryandata_contact_domain.geo.enums import Country


class PostalCode(DomainModel):
    """A postal code, kept as text since many countries use letters."""

    model_config = ConfigDict(frozen=True)

    number: str

    def __init__(self, number: str | None = None, **data: Any) -> None:
        super().__init__(number=number, **data)

    @field_validator("number", mode="before")
    @classmethod
    def _validate_number(cls, value: Any) -> str:
        return require_text(value, "Postal Code number [%s] is required")

    @classmethod
    def _kind(cls) -> type[DomainModel]:
        return PostalCode

    @classmethod
    def of(cls, number: str) -> PostalCode:
        return cls(number)

    @classmethod
    def from_postal_code(cls, postal_code: PostalCode | None) -> PostalCode:
        require(postal_code, "Postal Code is required")
        return PostalCode(postal_code.number)

    @property
    def country(self) -> Country | None:
        return None

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.number,)

    def _sort_key(self) -> tuple[Any, ...]:
        return (str(self),)

    def __str__(self) -> str:
        return self.number
