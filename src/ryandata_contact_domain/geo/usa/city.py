"""Cities in the United States."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from ryandata_contact_domain.core.assertions import require
from ryandata_contact_domain.core.errors import RyanDataUnsupportedOperationError
from ryandata_contact_domain.geo.city import City
from ryandata_contact_domain.geo.enums import Country, State


class UnitedStatesCity(City):
    """A city in one of the United States.

    Example:
        >>> UnitedStatesCity.of("Portland", State.OREGON).country
        <Country.UNITED_STATES_OF_AMERICA: 'United States of America'>
    """

    state: State | None = None

    def __init__(self, name: str | None = None, state: State | None = None, **data: Any) -> None:
        super().__init__(name, state=state, **data)

    @classmethod
    def of(cls, name: str, state: State | None = None) -> UnitedStatesCity:
        city = cls(name)
        return city.in_state(state) if state is not None else city

    @classmethod
    def from_city(cls, city: City | None) -> UnitedStatesCity:
        """Copy a city's name, and its state when it has one."""
        require(city, "City is required")
        return cls(city.name, getattr(city, "state", None))

    @property
    def country(self) -> Country:
        return Country.UNITED_STATES_OF_AMERICA

    def is_capital(self) -> bool:
        return False

    def in_state(self, state: State | None) -> UnitedStatesCity:
        self.state = require(state, "State is required")
        return self

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.name, self.state)

    def _sort_key(self) -> tuple[Any, ...]:
        return (self.country.value, self.state.value if self.state else "", self.name)

    def __hash__(self) -> int:
        return hash((City.__name__, self._equality_key(), self.country))


class ImmutableUnitedStatesCity(UnitedStatesCity):
    """A United States city whose state is fixed at creation.

    Used for well-known cities; ``capital`` marks state capitals.

    Example:
        >>> NASHVILLE = ImmutableUnitedStatesCity("Nashville", State.TENNESSEE, capital=True)
        >>> NASHVILLE.is_capital(), NASHVILLE == UnitedStatesCity.of("Nashville", State.TENNESSEE)
        (True, True)
    """

    model_config = ConfigDict(frozen=True)

    capital: bool = False

    def __init__(
        self,
        name: str | None = None,
        state: State | None = None,
        capital: bool = False,
        **data: Any,
    ) -> None:
        super().__init__(name, require(state, "State is required"), capital=capital, **data)

    @classmethod
    def of(cls, name: str, state: State | None = None) -> ImmutableUnitedStatesCity:
        return cls(name, state)

    def is_capital(self) -> bool:
        return self.capital

    def in_state(self, state: State | None) -> UnitedStatesCity:
        raise RyanDataUnsupportedOperationError.create("State cannot be changed", state)
