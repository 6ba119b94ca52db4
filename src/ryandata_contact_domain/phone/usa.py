"""United States phone numbers and the area codes of each state."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import Field

from ryandata_contact_domain.core.assertions import require
from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.geo.enums import Country, State
from ryandata_contact_domain.phone.codes import AreaCode
from ryandata_contact_domain.phone.number import ExtensionCapable, PhoneNumber

logger = logging.getLogger(__name__)


def _area_codes(*numbers: int) -> frozenset[AreaCode]:
    return frozenset(AreaCode(number) for number in numbers)


_STATE_AREA_CODES: dict[State, frozenset[AreaCode]] = {
    State.ALABAMA: _area_codes(205, 251, 256, 334, 659, 938),
    State.ALASKA: _area_codes(907),
    State.ARIZONA: _area_codes(480, 520, 602, 623, 928),
    State.ARKANSAS: _area_codes(479, 501, 870),
    State.CALIFORNIA: _area_codes(209, 213, 279, 310, 323, 341, 350, 408, 415, 424, 442, 510, 530, 559, 562, 619, 626, 628, 650, 657, 661, 669, 707, 714, 747, 760, 805, 818, 820, 831, 840, 858, 909, 916, 925, 949, 951),
    State.COLORADO: _area_codes(303, 719, 720, 970, 983),
    State.CONNECTICUT: _area_codes(203, 475, 860, 959),
    State.DELAWARE: _area_codes(302),
    State.DISTRICT_OF_COLUMBIA: _area_codes(202, 771),
    State.FLORIDA: _area_codes(239, 305, 321, 352, 386, 407, 448, 561, 656, 689, 727, 754, 772, 786, 813, 850, 863, 904, 941, 954),
    State.GEORGIA: _area_codes(229, 404, 470, 478, 678, 706, 762, 770, 912, 943),
    State.HAWAII: _area_codes(808),
    State.IDAHO: _area_codes(208, 986),
    State.ILLINOIS: _area_codes(217, 224, 309, 312, 331, 447, 464, 618, 630, 708, 773, 779, 815, 847, 872),
    State.INDIANA: _area_codes(219, 260, 317, 463, 574, 765, 812, 930),
    State.IOWA: _area_codes(319, 515, 563, 641, 712),
    State.KANSAS: _area_codes(316, 620, 785, 913),
    State.KENTUCKY: _area_codes(270, 364, 502, 606, 859),
    State.LOUISIANA: _area_codes(225, 318, 337, 504, 985),
    State.MAINE: _area_codes(207),
    State.MARYLAND: _area_codes(240, 301, 410, 443, 667),
    State.MASSACHUSETTS: _area_codes(339, 351, 413, 508, 617, 774, 781, 857, 978),
    State.MICHIGAN: _area_codes(231, 248, 269, 313, 517, 586, 616, 734, 810, 906, 947, 989),
    State.MINNESOTA: _area_codes(218, 320, 507, 612, 651, 763, 952),
    State.MISSISSIPPI: _area_codes(228, 601, 662, 769),
    State.MISSOURI: _area_codes(314, 417, 557, 573, 636, 660, 816),
    State.MONTANA: _area_codes(406),
    State.NEBRASKA: _area_codes(308, 402, 531),
    State.NEVADA: _area_codes(702, 725, 775),
    State.NEW_HAMPSHIRE: _area_codes(603),
    State.NEW_JERSEY: _area_codes(201, 551, 609, 640, 732, 848, 856, 862, 908, 973),
    State.NEW_MEXICO: _area_codes(505, 575),
    State.NEW_YORK: _area_codes(212, 315, 332, 347, 363, 516, 518, 585, 607, 631, 646, 680, 716, 718, 838, 845, 914, 917, 929, 934),
    State.NORTH_CAROLINA: _area_codes(252, 336, 472, 704, 743, 828, 910, 919, 980, 984),
    State.NORTH_DAKOTA: _area_codes(701),
    State.OHIO: _area_codes(216, 220, 234, 326, 330, 380, 419, 440, 513, 567, 614, 740, 937),
    State.OKLAHOMA: _area_codes(405, 539, 572, 580, 918),
    State.OREGON: _area_codes(458, 503, 541, 971),
    State.PENNSYLVANIA: _area_codes(215, 223, 267, 272, 412, 445, 484, 570, 582, 610, 717, 724, 814, 835, 878),
    State.RHODE_ISLAND: _area_codes(401),
    State.SOUTH_CAROLINA: _area_codes(803, 839, 843, 854, 864),
    State.SOUTH_DAKOTA: _area_codes(605),
    State.TENNESSEE: _area_codes(423, 615, 629, 731, 865, 901, 931),
    State.TEXAS: _area_codes(210, 214, 254, 281, 325, 346, 361, 409, 430, 432, 469, 512, 682, 713, 726, 737, 806, 817, 830, 832, 903, 915, 936, 940, 945, 956, 972, 979),
    State.UTAH: _area_codes(385, 435, 801),
    State.VERMONT: _area_codes(802),
    State.VIRGINIA: _area_codes(276, 434, 540, 571, 703, 757, 804, 826, 948),
    State.WASHINGTON: _area_codes(206, 253, 360, 425, 509, 564),
    State.WEST_VIRGINIA: _area_codes(304, 681),
    State.WISCONSIN: _area_codes(262, 414, 534, 608, 715, 920),
    State.WYOMING: _area_codes(307),
}


class StateAreaCodesRepository:
    """Read-only repository mapping states to their telephone area codes.

    Example:
        >>> StateAreaCodesRepository.get_instance().find_state_by(AreaCode.of("503"))
        <State.OREGON: 'OR'>
    """

    _instance: StateAreaCodesRepository | None = None

    def __init__(self, area_codes: Mapping[State, frozenset[AreaCode]] | None = None) -> None:
        self._area_codes = MappingProxyType(dict(area_codes or _STATE_AREA_CODES))

    @classmethod
    def get_instance(cls) -> StateAreaCodesRepository:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def repository(self) -> Mapping[State, frozenset[AreaCode]]:
        return self._area_codes

    def find_area_codes_by(self, state: State | None) -> frozenset[AreaCode]:
        """Return the area codes of ``state``; empty when none are known."""
        return self._area_codes.get(require(state, "State is required"), frozenset())

    def find_state_by(self, area_code: AreaCode | None) -> State:
        """Find the state an area code is assigned to.

        Raises:
            RyanDataArgumentError: If no state has the area code.
        """
        for state, area_codes in self._area_codes.items():
            if area_code in area_codes:
                return state
        raise RyanDataArgumentError.create(
            f"No State for AreaCode [{area_code}] could be found", str(area_code)
        )

    def __iter__(self) -> Iterator[tuple[State, frozenset[AreaCode]]]:
        return iter(self._area_codes.items())

    def __len__(self) -> int:
        return len(self._area_codes)


class UnitedStatesPhoneNumber(ExtensionCapable, PhoneNumber):
    """A phone number in the United States; its country cannot change.

    Example:
        >>> UnitedStatesPhoneNumber("503", "555", "1234").state
        <State.OREGON: 'OR'>
    """

    country: Country = Field(default=Country.UNITED_STATES_OF_AMERICA, frozen=True)

    @classmethod
    def from_phone_number(cls, phone_number: PhoneNumber | None) -> UnitedStatesPhoneNumber:
        """Copy any phone number into the United States."""
        require(phone_number, "PhoneNumber to copy is required")
        copy = cls(phone_number.area_code, phone_number.exchange_code, phone_number.line_number)
        copy.set_extension(phone_number.extension)
        copy.set_type(phone_number.type)
        return copy

    @property
    def state(self) -> State:
        """The state the area code is assigned to.

        Raises:
            RyanDataArgumentError: If the area code is not assigned to a state.
        """
        return StateAreaCodesRepository.get_instance().find_state_by(self.area_code)
