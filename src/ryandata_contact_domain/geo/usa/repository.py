"""Lookup of U.S. states by ZIP code prefix."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ryandata_contact_domain.core.assertions import extract_digits, require, require_text
from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.geo.enums import State
from ryandata_contact_domain.geo.postal_code import PostalCode

logger = logging.getLogger(__name__)

ZIP_CODE_LENGTH = 9


@dataclass(frozen=True)
class ZipCodeRegion:
    """A ZIP code prefix, or an inclusive range of prefixes.

    The end of a range is padded with ``9`` to the full nine-digit length, so
    ``ZipCodeRegion("35", "36")`` covers ``350000000`` through ``369999999``.
    """

    start: str
    end: str | None = None

    def __post_init__(self) -> None:
        require_text(self.start, "The beginning [%s] of the ZIP code range is required")

    @property
    def is_range(self) -> bool:
        return bool(self.end and self.end.strip())

    @property
    def adjusted_end(self) -> str:
        return (self.end or "").ljust(ZIP_CODE_LENGTH, "9")

    def contains(self, postal_code: PostalCode | str | None) -> bool:
        """Check whether a postal code falls in this region (null-safe)."""
        if postal_code is None:
            return False
        number = postal_code if isinstance(postal_code, str) else postal_code.number
        digits = extract_digits(number)
        if not digits:
            return False
        if self.is_range and self.start <= digits <= self.adjusted_end:
            return True
        return digits.startswith(self.start)


_STATE_ZIP_CODE_REGIONS: dict[State, ZipCodeRegion] = {
    State.ALABAMA: ZipCodeRegion("35", "36"),
    State.ALASKA: ZipCodeRegion("995", "999"),
    State.ARIZONA: ZipCodeRegion("85", "86"),
    State.ARKANSAS: ZipCodeRegion("716", "729"),
    State.CALIFORNIA: ZipCodeRegion("900", "961"),
    State.COLORADO: ZipCodeRegion("80", "81"),
    State.CONNECTICUT: ZipCodeRegion("06"),
    State.DISTRICT_OF_COLUMBIA: ZipCodeRegion("200", "205"),
    State.FLORIDA: ZipCodeRegion("32", "34"),
    State.GEORGIA: ZipCodeRegion("30", "31"),
    State.HAWAII: ZipCodeRegion("967", "968"),
    State.IDAHO: ZipCodeRegion("832", "839"),
    State.ILLINOIS: ZipCodeRegion("60", "62"),
    State.INDIANA: ZipCodeRegion("46", "47"),
    State.IOWA: ZipCodeRegion("50", "52"),
    State.KANSAS: ZipCodeRegion("66", "67"),
    State.KENTUCKY: ZipCodeRegion("40", "42"),
    State.LOUISIANA: ZipCodeRegion("700", "715"),
    State.MAINE: ZipCodeRegion("039", "049"),
    State.MASSACHUSETTS: ZipCodeRegion("010", "027"),
    State.MICHIGAN: ZipCodeRegion("48", "49"),
    State.MINNESOTA: ZipCodeRegion("550", "567"),
    State.MISSISSIPPI: ZipCodeRegion("386", "399"),
    State.MISSOURI: ZipCodeRegion("63", "65"),
    State.MONTANA: ZipCodeRegion("59"),
    State.NEBRASKA: ZipCodeRegion("68", "69"),
    State.NEVADA: ZipCodeRegion("889", "899"),
    State.NEW_HAMPSHIRE: ZipCodeRegion("030", "038"),
    State.NEW_JERSEY: ZipCodeRegion("07", "08"),
    State.NEW_MEXICO: ZipCodeRegion("870", "884"),
    State.NEW_YORK: ZipCodeRegion("10", "14"),
    State.NORTH_CAROLINA: ZipCodeRegion("27", "28"),
    State.NORTH_DAKOTA: ZipCodeRegion("58"),
    State.OHIO: ZipCodeRegion("43", "45"),
    State.OKLAHOMA: ZipCodeRegion("73", "74"),
    State.OREGON: ZipCodeRegion("97"),
    State.PENNSYLVANIA: ZipCodeRegion("150", "196"),
    State.RHODE_ISLAND: ZipCodeRegion("028", "029"),
    State.SOUTH_CAROLINA: ZipCodeRegion("29"),
    State.SOUTH_DAKOTA: ZipCodeRegion("57"),
    State.TENNESSEE: ZipCodeRegion("370", "385"),
    State.TEXAS: ZipCodeRegion("75", "79"),
    State.UTAH: ZipCodeRegion("84"),
    State.VERMONT: ZipCodeRegion("05"),
    State.VIRGINIA: ZipCodeRegion("220", "246"),
    State.WASHINGTON: ZipCodeRegion("980", "984"),
    State.WEST_VIRGINIA: ZipCodeRegion("247", "269"),
    State.WISCONSIN: ZipCodeRegion("53", "54"),
    State.WYOMING: ZipCodeRegion("820", "831"),
}


class StateZipCodesRepository:
    """Read-only repository mapping states to their ZIP code regions.

    Example:
        >>> StateZipCodesRepository.get_instance().find_state_by("97205")
        <State.OREGON: 'OR'>
    """

    _instance: StateZipCodesRepository | None = None

    def __init__(self, regions: Mapping[State, ZipCodeRegion] | None = None) -> None:
        self._regions = MappingProxyType(dict(regions or _STATE_ZIP_CODE_REGIONS))

    @classmethod
    def get_instance(cls) -> StateZipCodesRepository:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def repository(self) -> Mapping[State, ZipCodeRegion]:
        return self._regions

    def find_state_by(self, postal_code: PostalCode | str | None) -> State:
        """Find the state whose ZIP code region contains ``postal_code``.

        Raises:
            RyanDataArgumentError: If ``postal_code`` is None or no state
                claims it.
        """
        require(postal_code, "PostalCode used to find a State is required")
        for state, region in self._regions.items():
            if region.contains(postal_code):
                logger.debug("Resolved ZIP code %s to %s", postal_code, state.name)
                return state
        raise RyanDataArgumentError.create(
            f"State for ZIP code [{postal_code}] not found", str(postal_code)
        )

    def find_zip_ranges_by(self, state: State | None) -> tuple[ZipCodeRegion, ...]:
        """Return the ZIP code regions of ``state``; empty when none are known."""
        require(state, "State is required")
        region = self._regions.get(state)
        return (region,) if region is not None else ()

    def __iter__(self) -> Iterator[tuple[State, ZipCodeRegion]]:
        return iter(self._regions.items())

    def __len__(self) -> int:
        return len(self._regions)
