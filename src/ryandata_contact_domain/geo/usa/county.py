"""Counties in the United States."""

from __future__ import annotations

from typing import Any, Self

from pydantic import field_validator

from ryandata_contact_domain.core.assertions import require, require_text
from ryandata_contact_domain.core.model import DomainModel, nulls_first
from ryandata_contact_domain.geo.enums import State


class County(DomainModel):
    """A named county, optionally placed in a state.

    Two counties are equal when their names match and their states do not
    conflict; a county without a state equals the same-named county in any
    state.

    Example:
        >>> County.of("Multnomah").in_state(State.OREGON) == County.of("Multnomah")
        True
    """

    name: str
    state: State | None = None

    def __init__(self, name: str | None = None, **data: Any) -> None:
        super().__init__(name=name, **data)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        return require_text(value, "Name [%s] is required")

    @classmethod
    def _kind(cls) -> type[DomainModel]:
        return County

    @classmethod
    def of(cls, name: str) -> County:
        return cls(name)

    @classmethod
    def from_county(cls, county: County | None) -> County:
        """Copy the county's name; the state is not copied."""
        require(county, "County to copy is required")
        return cls(county.name)

    def in_state(self, state: State | None) -> Self:
        self.state = state
        return self

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.name,)

    def _sort_key(self) -> tuple[Any, ...]:
        return (nulls_first(self.state.name if self.state else None), self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, County):
            return NotImplemented
        return self.name == other.name and (
            self.state is None or other.state is None or self.state is other.state
        )

    def __hash__(self) -> int:
        return super().__hash__()

    def __str__(self) -> str:
        return self.name
