"""United States address lines parsed with the usaddress library."""

from __future__ import annotations

import usaddress

from ryandata_contact_domain.core.assertions import require
from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.geo.address import Address
from ryandata_contact_domain.geo.enums import Direction, State
from ryandata_contact_domain.geo.street import Street, StreetType
from ryandata_contact_domain.geo.unit import Unit, UnitType
from ryandata_contact_domain.geo.usa.address import UnitedStatesAddressBuilder
from ryandata_contact_domain.geo.usa.city import UnitedStatesCity
from ryandata_contact_domain.geo.usa.zip_code import ZIP
from ryandata_contact_domain.parsers.base import BaseAddressParser, ParseResult


class USAddressParser(BaseAddressParser):
    """Parser implementation using the usaddress library.

    Tags the address line with usaddress, then composes a
    :class:`UnitedStatesAddress` from Street, Unit, UnitedStatesCity, State
    and ZIP. A state missing from the line is derived from the ZIP.

    Example:
        >>> result = USAddressParser().parse("100 Main St Apt 4, Portland, OR 97205")
        >>> str(result.address.street)
        '100 Main ST'
    """

    @property
    def name(self) -> str:
        return "usaddress"

    def _merge_consecutive_labels(self, tokens: list[tuple[str, str]]) -> dict[str, str]:
        """Join the values of consecutive tokens that share a label."""
        merged: dict[str, list[str]] = {}
        previous_label: str | None = None

        for value, label in tokens:
            if label == previous_label:
                merged[label].append(value)
            else:
                merged[label] = [value]
                previous_label = label

        return {label: " ".join(values).strip(" ,") for label, values in merged.items()}

    def _parse_impl(self, address_string: str, result: ParseResult) -> Address:
        try:
            tokens = usaddress.parse(address_string)
        except Exception as e:
            raise RyanDataArgumentError.create(
                f"Failed to tag address [{address_string}]: {e}", address_string
            ) from e

        components = self._merge_consecutive_labels(tokens)

        state = self._state(components, result)
        builder = (
            UnitedStatesAddressBuilder()
            .on(self._street(components, address_string))
            .in_unit(self._unit(components))
            .in_zip(ZIP.of(require(components.get("ZipCode"), "ZIP code is required")))
            .in_state(state)
        )
        city_name = components.get("PlaceName")
        if city_name:
            builder.in_city(UnitedStatesCity(city_name, state))
        return builder.build()

    def _street(self, components: dict[str, str], address_string: str) -> Street:
        number = components.get("AddressNumber", "")
        if not number.isdigit():
            raise RyanDataArgumentError.create(
                f"Address [{address_string}] must begin with a street number", address_string
            )
        return Street(
            int(number),
            components.get("StreetName"),
            StreetType.find(components.get("StreetNamePostType", "").rstrip(".")),
            Direction.find(components.get("StreetNamePreDirectional", "").rstrip(".")),
        )

    def _unit(self, components: dict[str, str]) -> Unit | None:
        number = components.get("OccupancyIdentifier", "").lstrip("#").strip()
        if not number:
            return None
        return Unit(number, UnitType.find(components.get("OccupancyType", "").rstrip(".")))

    def _state(self, components: dict[str, str], result: ParseResult) -> State | None:
        text = components.get("StateName")
        if not text:
            return None
        state = State.normalize(text.rstrip("."))
        if state is None:
            result.add_process_error("StateName", f"Unknown US state [{text}]", text)
        elif text != state.abbreviation:
            result.add_process_cleaning("StateName", text, state.abbreviation, "state normalized")
        return state
