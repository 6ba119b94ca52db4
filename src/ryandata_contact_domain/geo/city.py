"""Cities."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from ryandata_contact_domain.core.assertions import require, require_text
from ryandata_contact_domain.core.model import DomainModel
from ryandata_contact_domain.geo.enums import Country


class City(DomainModel):
    """A named city.

    A plain City belongs to no particular country; country-specific cities
    such as :class:`~ryandata_contact_domain.geo.usa.city.UnitedStatesCity`
    report theirs through :attr:`country`.
    """

    name: str

    def __init__(self, name: str | None = None, **data: Any) -> None:
        super().__init__(name=name, **data)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        return require_text(value, "City name [%s] is required")

    @classmethod
    def _kind(cls) -> type[DomainModel]:
        return City

    @classmethod
    def of(cls, name: str) -> City:
        return cls(name)

    @classmethod
    def from_city(cls, city: City | None) -> City:
        require(city, "City is required")
        return cls(city.name)

    @property
    def country(self) -> Country | None:
        return None

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.name,)

    def _sort_key(self) -> tuple[Any, ...]:
        return ((self.country or Country.UNKNOWN).value, self.name)

    def __str__(self) -> str:
        return self.name
