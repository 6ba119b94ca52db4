"""Well-known United States cities."""

from __future__ import annotations

from ryandata_contact_domain.geo.enums import State
from ryandata_contact_domain.geo.usa.city import ImmutableUnitedStatesCity

CUBA_CITY_WISCONSIN = ImmutableUnitedStatesCity("Cuba City", State.WISCONSIN)
JACKSON_MISSISSIPPI = ImmutableUnitedStatesCity("Jackson", State.MISSISSIPPI, capital=True)
MIAMI_FLORIDA = ImmutableUnitedStatesCity("Miami", State.FLORIDA)
NASHVILLE_TENNESSEE = ImmutableUnitedStatesCity("Nashville", State.TENNESSEE, capital=True)
SAN_DIEGO_CALIFORNIA = ImmutableUnitedStatesCity("San Diego", State.CALIFORNIA)

CITIES: tuple[ImmutableUnitedStatesCity, ...] = (
    CUBA_CITY_WISCONSIN,
    JACKSON_MISSISSIPPI,
    MIAMI_FLORIDA,
    NASHVILLE_TENNESSEE,
    SAN_DIEGO_CALIFORNIA,
)


def find_city(name: str | None, state: State | None = None) -> ImmutableUnitedStatesCity | None:
    """Case-insensitive lookup of a well-known city, optionally in ``state``."""
    if not name:
        return None
    wanted = name.strip().casefold()
    for city in CITIES:
        if city.name.casefold() == wanted and state in (None, city.state):
            return city
    return None
