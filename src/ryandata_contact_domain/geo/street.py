"""Street and the street parser."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import field_validator

from ryandata_contact_domain.core.assertions import require_text
from ryandata_contact_domain.core.enums import DescribedEnum
from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.core.model import DomainModel
from ryandata_contact_domain.geo.enums import Direction

logger = logging.getLogger(__name__)


class StreetType(DescribedEnum):
    """Street suffixes, abbreviated the way the postal service writes them."""

    ALLEY = ("ALLY", "Alley")
    AVENUE = ("AVE", "Avenue")
    BEND = ("BND", "Bend")
    BOULEVARD = ("BLVD", "Boulevard")
    BYPASS = ("BYP", "Bypass")
    CAUSEWAY = ("CSWY", "Causeway")
    CENTER = ("CTR", "Center")
    CIRCLE = ("CRCL", "Circle")
    CORNER = ("CNR", "Corner")
    COURT = ("CT", "Court")
    CROSSING = ("XING", "Crossing")
    CROSSROAD = ("XRD", "Crossroad")
    CURVE = ("CURV", "Curve")
    DRIVE = ("DR", "Drive")
    EXPRESSWAY = ("EXP", "Expressway")
    FERRY = ("FRY", "Ferry")
    FORK = ("FRK", "Fork")
    FREEWAY = ("FWY", "Freeway")
    GATEWAY = ("GTWY", "Gateway")
    HIGHWAY = ("HWY", "Highway")
    JUNCTION = ("JCT", "Junction")
    LANE = ("LN", "Lane")
    LOOP = ("LP", "Loop")
    MOTORWAY = ("MTWY", "Motorway")
    OVERPASS = ("OPAS", "Overpass")
    PARKWAY = ("PKWY", "Parkway")
    PLACE = ("PL", "Place")
    PLAZA = ("PLZ", "Plaza")
    ROAD = ("RD", "Road")
    ROUTE = ("RTE", "Route")
    SKYWAY = ("SKWY", "Skyway")
    SQUARE = ("SQR", "Square")
    STREET = ("ST", "Street")
    TURNPIKE = ("TPKE", "Turnpike")
    UNDERPASS = ("UPAS", "Underpass")
    UNKNOWN = ("UKN", "Unknown")
    VIADUCT = ("VIA", "Viaduct")
    WAY = ("WY", "Way")

    @classmethod
    def _not_found_message(cls, abbreviation: str | None) -> str:
        return f"No Street Type was found for abbreviation [{abbreviation}]"


class Street(DomainModel):
    """A numbered, named street with optional suffix type and direction.

    Example:
        >>> street = Street.parse("767 SW Airline Rd")
        >>> (street.number, street.direction, street.name, street.type)
        (767, <Direction.SOUTHWEST: 'SW'>, 'Airline', <StreetType.ROAD: 'RD'>)
        >>> str(street)
        '767 SW Airline RD'
    """

    number: int
    name: str
    type: StreetType | None = None
    direction: Direction | None = None

    def __init__(
        self,
        number: int | None = None,
        name: str | None = None,
        type: StreetType | None = None,
        direction: Direction | None = None,
        **data: Any,
    ) -> None:
        super().__init__(number=number, name=name, type=type, direction=direction, **data)

    @field_validator("number", mode="before")
    @classmethod
    def _validate_number(cls, value: Any) -> Any:
        if value is None:
            raise RyanDataArgumentError.create("Street number is required", value)
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        return require_text(value, "Street name [%s] is required")

    @classmethod
    def of(cls, number: int, name: str) -> Street:
        return cls(number, name)

    @classmethod
    def from_street(cls, street: Street | None) -> Street:
        """Copy the number, name, type and direction of ``street``."""
        if street is None:
            raise RyanDataArgumentError.create("The Street to copy is required", street)
        return cls(street.number, street.name, street.type, street.direction)

    @classmethod
    def parse(cls, text: str | None) -> Street:
        """Parse a street line of the form ``<number> [direction] <name> [type]``.

        A direction abbreviation directly after the number, and a street type
        (abbreviation or name) as the last token, are only taken when a name
        token remains.

        Raises:
            RyanDataArgumentError: If the text does not start with a number or
                has no name after it.
        """
        tokens = (text or "").split()

        try:
            number = int(tokens[0])
        except (IndexError, ValueError) as cause:
            logger.warning("Failed to parse street: %.50s", text)
            raise RyanDataArgumentError.create(
                f"Street [{text}] must begin with a street number", text
            ) from cause

        remaining = tokens[1:]

        if not remaining:
            logger.warning("Failed to parse street: %.50s", text)
            raise RyanDataArgumentError.create(
                f"Street [{text}] must minimally consist of a number and name", text
            )

        direction = None
        if len(remaining) > 1:
            direction = Direction.find_by_abbreviation(remaining[0])
            if direction is not None:
                remaining = remaining[1:]

        street_type = None
        if len(remaining) > 1:
            street_type = StreetType.find(remaining[-1])
            if street_type is not None:
                remaining = remaining[:-1]

        street = cls(number, " ".join(remaining), street_type, direction)
        logger.debug("Parsed street %r into %r", text, street)
        return street

    def as_type(self, street_type: StreetType | None) -> Street:
        self.type = street_type
        return self

    def as_alley(self) -> Street:
        return self.as_type(StreetType.ALLEY)

    def as_avenue(self) -> Street:
        return self.as_type(StreetType.AVENUE)

    def as_bend(self) -> Street:
        return self.as_type(StreetType.BEND)

    def as_boulevard(self) -> Street:
        return self.as_type(StreetType.BOULEVARD)

    def as_bypass(self) -> Street:
        return self.as_type(StreetType.BYPASS)

    def as_causeway(self) -> Street:
        return self.as_type(StreetType.CAUSEWAY)

    def as_center(self) -> Street:
        return self.as_type(StreetType.CENTER)

    def as_circle(self) -> Street:
        return self.as_type(StreetType.CIRCLE)

    def as_corner(self) -> Street:
        return self.as_type(StreetType.CORNER)

    def as_court(self) -> Street:
        return self.as_type(StreetType.COURT)

    def as_crossing(self) -> Street:
        return self.as_type(StreetType.CROSSING)

    def as_crossroad(self) -> Street:
        return self.as_type(StreetType.CROSSROAD)

    def as_curve(self) -> Street:
        return self.as_type(StreetType.CURVE)

    def as_drive(self) -> Street:
        return self.as_type(StreetType.DRIVE)

    def as_expressway(self) -> Street:
        return self.as_type(StreetType.EXPRESSWAY)

    def as_ferry(self) -> Street:
        return self.as_type(StreetType.FERRY)

    def as_fork(self) -> Street:
        return self.as_type(StreetType.FORK)

    def as_freeway(self) -> Street:
        return self.as_type(StreetType.FREEWAY)

    def as_gateway(self) -> Street:
        return self.as_type(StreetType.GATEWAY)

    def as_highway(self) -> Street:
        return self.as_type(StreetType.HIGHWAY)

    def as_junction(self) -> Street:
        return self.as_type(StreetType.JUNCTION)

    def as_lane(self) -> Street:
        return self.as_type(StreetType.LANE)

    def as_loop(self) -> Street:
        return self.as_type(StreetType.LOOP)

    def as_motorway(self) -> Street:
        return self.as_type(StreetType.MOTORWAY)

    def as_overpass(self) -> Street:
        return self.as_type(StreetType.OVERPASS)

    def as_parkway(self) -> Street:
        return self.as_type(StreetType.PARKWAY)

    def as_place(self) -> Street:
        return self.as_type(StreetType.PLACE)

    def as_plaza(self) -> Street:
        return self.as_type(StreetType.PLAZA)

    def as_road(self) -> Street:
        return self.as_type(StreetType.ROAD)

    def as_route(self) -> Street:
        return self.as_type(StreetType.ROUTE)

    def as_skyway(self) -> Street:
        return self.as_type(StreetType.SKYWAY)

    def as_square(self) -> Street:
        return self.as_type(StreetType.SQUARE)

    def as_street(self) -> Street:
        return self.as_type(StreetType.STREET)

    def as_turnpike(self) -> Street:
        return self.as_type(StreetType.TURNPIKE)

    def as_underpass(self) -> Street:
        return self.as_type(StreetType.UNDERPASS)

    def as_unknown(self) -> Street:
        return self.as_type(StreetType.UNKNOWN)

    def as_viaduct(self) -> Street:
        return self.as_type(StreetType.VIADUCT)

    def as_way(self) -> Street:
        return self.as_type(StreetType.WAY)

    def in_direction(self, direction: Direction | None) -> Street:
        self.direction = direction
        return self

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.name, self.number, self.type, self.direction)

    def _sort_key(self) -> tuple[Any, ...]:
        return (self.name, (self.type or StreetType.UNKNOWN).value, self.number)

    def __str__(self) -> str:
        parts = [str(self.number)]
        if self.direction is not None:
            parts.append(self.direction.abbreviation)
        parts.append(self.name)
        if self.type is not None:
            parts.append(self.type.abbreviation)
        return " ".join(parts)
