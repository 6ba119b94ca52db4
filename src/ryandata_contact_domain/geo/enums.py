"""Geographic enumerations: continents, countries, states, directions and length units."""

from __future__ import annotations

from enum import Enum
from typing import Self

from ryandata_contact_domain.core.enums import DescribedEnum
from ryandata_contact_domain.core.errors import RyanDataArgumentError


class Continent(str, Enum):
    """The seven continents."""

    AFRICA = "Africa"
    ANTARCTICA = "Antarctica"
    AUSTRALIA_AND_OCEANIA = "Australia and Oceania"
    ASIA = "Asia"
    EUROPE = "Europe"
    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"

    def countries(self) -> set[Country]:
        """All countries on this continent."""
        return Country.by_continent(self)


class Country(str, Enum):
    """Countries of the world, valued by display name."""

    AFGHANISTAN = "Afghanistan"
    ALBANIA = "Albania"
    ALGERIA = "Algeria"
    ANDORRA = "Andorra"
    ANGOLA = "Angola"
    ANTIGUA_AND_BARBUDA = "Antigua and Barbuda"
    ARGENTINA = "Argentina"
    ARMENIA = "Armenia"
    AUSTRALIA = "Australia"
    AUSTRIA = "Austria"
    AZERBAIJAN = "Azerbaijan"
    BAHAMAS = "Bahamas"
    BAHRAIN = "Bahrain"
    BANGLADESH = "Bangladesh"
    BARBADOS = "Barbados"
    BELARUS = "Belarus"
    BELGIUM = "Belgium"
    BELIZE = "Belize"
    BENIN = "Benin"
    BHUTAN = "Bhutan"
    BOLIVIA = "Bolivia"
    BOSNIA_AND_HERZEGOVINA = "Bosnia and Herzegovina"
    BOTSWANA = "Botswana"
    BRAZIL = "Brazil"
    BRUNEI = "Brunei"
    BULGARIA = "Bulgaria"
    BURKINA_FASO = "Burkina Faso"
    BURUNDI = "Burundi"
    CABO_VERDE = "Cabo Verde"
    CAMBODIA = "Cambodia"
    CAMEROON = "Cameroon"
    CANADA = "Canada"
    CENTRAL_AFRICAN_REPUBLIC = "Central African Republic"
    CHAD = "Chad"
    CHILE = "Chile"
    CHINA = "China"
    COLOMBIA = "Colombia"
    COMOROS = "Comoros"
    DEMOCRATIC_REPUBLIC_OF_THE_CONGO = "Democratic Republic of the Congo"
    REPUBLIC_OF_THE_CONGO = "Republic of the Congo"
    COSTA_RICA = "Costa Rica"
    COTE_D_IVOIRE = "Cote d'Ivoire"
    CROATIA = "Croatia"
    CUBA = "Cuba"
    CYPRUS = "Cyprus"
    CZECH_REPUBLIC = "Czech Republic"
    DENMARK = "Denmark"
    DJIBOUTI = "Djibouti"
    DOMINICA = "Dominica"
    DOMINICAN_REPUBLIC = "Dominican Republic"
    ECUADOR = "Ecuador"
    EGYPT = "Egypt"
    EL_SALVADOR = "El Salvador"
    EQUATORIAL_GUINEA = "Equatorial Guinea"
    ERITREA = "Eritrea"
    ESTONIA = "Estonia"
    ETHIOPIA = "Ethiopia"
    FIJI = "Fiji"
    FINLAND = "Finland"
    FRANCE = "France"
    GABON = "Gabon"
    GAMBIA = "Gambia"
    GEORGIA = "Georgia"
    GERMANY = "Germany"
    GHANA = "Ghana"
    GREECE = "Greece"
    GRENADA = "Grenada"
    GUATEMALA = "Guatemala"
    GUINEA = "Guinea"
    GUINEA_BISSAU = "Guinea-Bissau"
    GUYANA = "Guyana"
    HAITI = "Haiti"
    HONDURAS = "Honduras"
    HUNGARY = "Hungary"
    ICELAND = "Iceland"
    INDIA = "India"
    INDONESIA = "Indonesia"
    IRAN = "Iran"
    IRAQ = "Iraq"
    IRELAND = "Ireland"
    ISRAEL = "Israel"
    ITALY = "Italy"
    JAMAICA = "Jamaica"
    JAPAN = "Japan"
    JORDAN = "Jordan"
    KAZAKHSTAN = "Kazakhstan"
    KENYA = "Kenya"
    KIRIBATI = "Kiribati"
    KOSOVO = "Kosovo"
    KUWAIT = "Kuwait"
    KYRGYZSTAN = "Kyrgyzstan"
    LAOS = "Laos"
    LATVIA = "Latvia"
    LEBANON = "Lebanon"
    LESOTHO = "Lesotho"
    LIBERIA = "Liberia"
    LIBYA = "Libya"
    LIECHTENSTEIN = "Liechtenstein"
    LITHUANIA = "Lithuania"
    LUXEMBOURG = "Luxembourg"
    MACEDONIA = "Macedonia"
    MADAGASCAR = "Madagascar"
    MALAWI = "Malawi"
    MALAYSIA = "Malaysia"
    MALDIVES = "Maldives"
    MALI = "Mali"
    MALTA = "Malta"
    MARSHALL_ISLANDS = "Marshall Islands"
    MAURITANIA = "Mauritania"
    MAURITIUS = "Mauritius"
    MEXICO = "Mexico"
    MICRONESIA = "Micronesia"
    MOLDOVA = "Moldova"
    MONACO = "Monaco"
    MONGOLIA = "Mongolia"
    MONTENEGRO = "Montenegro"
    MOROCCO = "Morocco"
    MOZAMBIQUE = "Mozambique"
    MYANMAR = "Myanmar"
    NAMIBIA = "Namibia"
    NAURU = "Nauru"
    NEPAL = "Nepal"
    NETHERLANDS = "Netherlands"
    NEW_ZEALAND = "New Zealand"
    NICARAGUA = "Nicaragua"
    NIGER = "Niger"
    NIGERIA = "Nigeria"
    NORTH_KOREA = "North Korea"
    NORWAY = "Norway"
    OMAN = "Oman"
    PAKISTAN = "Pakistan"
    PALAU = "Palau"
    PALESTINE = "Palestine"
    PANAMA = "Panama"
    PAPUA_NEW_GUINEA = "Papua New Guinea"
    PARAGUAY = "Paraguay"
    PERU = "Peru"
    PHILIPPINES = "Philippines"
    POLAND = "Poland"
    PORTUGAL = "Portugal"
    QATAR = "Qatar"
    ROMANIA = "Romania"
    RUSSIA = "Russia"
    RWANDA = "Rwanda"
    SAINT_KITTS_AND_NEVIS = "Saint Kitts and Nevis"
    SAINT_LUCIA = "Saint Lucia"
    SAINT_VINCENT_AND_THE_GRENADINES = "Saint Vincent and the Grenadines"
    SAMOA = "Samoa"
    SAN_MARINO = "San Marino"
    SAO_TOME_AND_PRINCIPE = "Sao Tome and Principe"
    SAUDI_ARABIA = "Saudi Arabia"
    SENEGAL = "Senegal"
    SERBIA = "Serbia"
    SEYCHELLES = "Seychelles"
    SIERRA_LEONE = "Sierra Leone"
    SINGAPORE = "Singapore"
    SLOVAKIA = "Slovakia"
    SLOVENIA = "Slovenia"
    SOLOMON_ISLANDS = "Solomon Islands"
    SOMALIA = "Somalia"
    SOUTH_AFRICA = "South Africa"
    SOUTH_KOREA = "South Korea"
    SOUTH_SUDAN = "South Sudan"
    SPAIN = "Spain"
    SRI_LANKA = "Sri Lanka"
    SUDAN = "Sudan"
    SURINAME = "Suriname"
    SWAZILAND = "Swaziland"
    SWEDEN = "Sweden"
    SWITZERLAND = "Switzerland"
    SYRIA = "Syria"
    TAIWAN = "Taiwan"
    TAJIKISTAN = "Tajikistan"
    TANZANIA = "Tanzania"
    THAILAND = "Thailand"
    TIMOR_LESTE = "Timor-Leste"
    TOGO = "Togo"
    TONGA = "Tonga"
    TRINIDAD_AND_TOBAGO = "Trinidad and Tobago"
    TUNISIA = "Tunisia"
    TURKEY = "Turkey"
    TURKMENISTAN = "Turkmenistan"
    TUVALU = "Tuvalu"
    UGANDA = "Uganda"
    UKRAINE = "Ukraine"
    UNITED_ARAB_EMIRATES = "United Arab Emirates"
    UNITED_KINGDOM = "United Kingdom"
    UNITED_STATES_OF_AMERICA = "United States of America"
    URUGUAY = "Uruguay"
    UZBEKISTAN = "Uzbekistan"
    VANUATU = "Vanuatu"
    VATICAN_CITY = "Vatican City"
    VENEZUELA = "Venezuela"
    VIETNAM = "Vietnam"
    YEMEN = "Yemen"
    ZAMBIA = "Zambia"
    ZIMBABWE = "Zimbabwe"
    UNKNOWN = "Unknown"

    @classmethod
    def by_continent(cls, continent: Continent) -> set[Country]:
        """All countries on the given continent."""
        return {country for country in cls if country.is_on_continent(continent)}

    @classmethod
    def find(cls, name: str | None) -> Country | None:
        """Case-insensitive lookup by member name or display name."""
        if not name:
            return None
        wanted = name.strip().upper().replace(" ", "_").replace("-", "_")
        for country in cls:
            if country.name == wanted or country.value.upper() == name.strip().upper():
                return country
        return None

    @classmethod
    def from_name(cls, name: str | None) -> Country:
        """Look up a country by member name or display name.

        Raises:
            RyanDataArgumentError: If no country matches.
        """
        country = cls.find(name)
        if country is None:
            raise RyanDataArgumentError.create(f"Country [{name}] was not found", name)
        return country

    @classmethod
    def local_country(cls) -> Country:
        """The configured local country (see ``core.config``)."""
        from ryandata_contact_domain.core.config import get_settings

        return get_settings().local_country

    @property
    def continents(self) -> frozenset[Continent]:
        return COUNTRY_CONTINENTS.get(self, frozenset())

    def is_on_continent(self, continent: Continent | None) -> bool:
        return continent in self.continents

    def is_local(self) -> bool:
        return self is Country.local_country()

    def __str__(self) -> str:
        return self.value


COUNTRY_CONTINENTS: dict[Country, frozenset[Continent]] = {
    country: frozenset(continents)
    for country, continents in {
        Country.AFGHANISTAN: (Continent.ASIA,),
        Country.ALBANIA: (Continent.EUROPE,),
        Country.ALGERIA: (Continent.AFRICA,),
        Country.ANDORRA: (Continent.EUROPE,),
        Country.ANGOLA: (Continent.AFRICA,),
        Country.ANTIGUA_AND_BARBUDA: (Continent.NORTH_AMERICA,),
        Country.ARGENTINA: (Continent.SOUTH_AMERICA,),
        Country.ARMENIA: (Continent.ASIA, Continent.EUROPE),
        Country.AUSTRALIA: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.AUSTRIA: (Continent.EUROPE,),
        Country.AZERBAIJAN: (Continent.ASIA, Continent.EUROPE),
        Country.BAHAMAS: (Continent.NORTH_AMERICA,),
        Country.BAHRAIN: (Continent.ASIA,),
        Country.BANGLADESH: (Continent.ASIA,),
        Country.BARBADOS: (Continent.NORTH_AMERICA,),
        Country.BELARUS: (Continent.EUROPE,),
        Country.BELGIUM: (Continent.EUROPE,),
        Country.BELIZE: (Continent.NORTH_AMERICA,),
        Country.BENIN: (Continent.AFRICA,),
        Country.BHUTAN: (Continent.ASIA,),
        Country.BOLIVIA: (Continent.SOUTH_AMERICA,),
        Country.BOSNIA_AND_HERZEGOVINA: (Continent.EUROPE,),
        Country.BOTSWANA: (Continent.AFRICA,),
        Country.BRAZIL: (Continent.SOUTH_AMERICA,),
        Country.BRUNEI: (Continent.ASIA,),
        Country.BULGARIA: (Continent.EUROPE,),
        Country.BURKINA_FASO: (Continent.AFRICA,),
        Country.BURUNDI: (Continent.AFRICA,),
        Country.CABO_VERDE: (Continent.AFRICA,),
        Country.CAMBODIA: (Continent.ASIA,),
        Country.CAMEROON: (Continent.AFRICA,),
        Country.CANADA: (Continent.NORTH_AMERICA,),
        Country.CENTRAL_AFRICAN_REPUBLIC: (Continent.AFRICA,),
        Country.CHAD: (Continent.AFRICA,),
        Country.CHILE: (Continent.SOUTH_AMERICA,),
        Country.CHINA: (Continent.ASIA,),
        Country.COLOMBIA: (Continent.SOUTH_AMERICA,),
        Country.COMOROS: (Continent.AFRICA,),
        Country.DEMOCRATIC_REPUBLIC_OF_THE_CONGO: (Continent.AFRICA,),
        Country.REPUBLIC_OF_THE_CONGO: (Continent.AFRICA,),
        Country.COSTA_RICA: (Continent.NORTH_AMERICA,),
        Country.COTE_D_IVOIRE: (Continent.AFRICA,),
        Country.CROATIA: (Continent.EUROPE,),
        Country.CUBA: (Continent.NORTH_AMERICA,),
        Country.CYPRUS: (Continent.ASIA, Continent.EUROPE),
        Country.CZECH_REPUBLIC: (Continent.EUROPE,),
        Country.DENMARK: (Continent.EUROPE,),
        Country.DJIBOUTI: (Continent.AFRICA,),
        Country.DOMINICA: (Continent.NORTH_AMERICA,),
        Country.DOMINICAN_REPUBLIC: (Continent.NORTH_AMERICA,),
        Country.ECUADOR: (Continent.SOUTH_AMERICA,),
        Country.EGYPT: (Continent.AFRICA,),
        Country.EL_SALVADOR: (Continent.NORTH_AMERICA,),
        Country.EQUATORIAL_GUINEA: (Continent.AFRICA,),
        Country.ERITREA: (Continent.AFRICA,),
        Country.ESTONIA: (Continent.EUROPE,),
        Country.ETHIOPIA: (Continent.AFRICA,),
        Country.FIJI: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.FINLAND: (Continent.EUROPE,),
        Country.FRANCE: (Continent.EUROPE,),
        Country.GABON: (Continent.AFRICA,),
        Country.GAMBIA: (Continent.AFRICA,),
        Country.GEORGIA: (Continent.ASIA, Continent.EUROPE),
        Country.GERMANY: (Continent.EUROPE,),
        Country.GHANA: (Continent.AFRICA,),
        Country.GREECE: (Continent.EUROPE,),
        Country.GRENADA: (Continent.NORTH_AMERICA,),
        Country.GUATEMALA: (Continent.NORTH_AMERICA,),
        Country.GUINEA: (Continent.AFRICA,),
        Country.GUINEA_BISSAU: (Continent.AFRICA,),
        Country.GUYANA: (Continent.SOUTH_AMERICA,),
        Country.HAITI: (Continent.NORTH_AMERICA,),
        Country.HONDURAS: (Continent.NORTH_AMERICA,),
        Country.HUNGARY: (Continent.EUROPE,),
        Country.ICELAND: (Continent.EUROPE,),
        Country.INDIA: (Continent.ASIA,),
        Country.INDONESIA: (Continent.ASIA,),
        Country.IRAN: (Continent.ASIA,),
        Country.IRAQ: (Continent.ASIA,),
        Country.IRELAND: (Continent.EUROPE,),
        Country.ISRAEL: (Continent.ASIA,),
        Country.ITALY: (Continent.EUROPE,),
        Country.JAMAICA: (Continent.NORTH_AMERICA,),
        Country.JAPAN: (Continent.ASIA,),
        Country.JORDAN: (Continent.ASIA,),
        Country.KAZAKHSTAN: (Continent.ASIA, Continent.EUROPE),
        Country.KENYA: (Continent.AFRICA,),
        Country.KIRIBATI: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.KOSOVO: (Continent.EUROPE,),
        Country.KUWAIT: (Continent.ASIA,),
        Country.KYRGYZSTAN: (Continent.ASIA,),
        Country.LAOS: (Continent.ASIA,),
        Country.LATVIA: (Continent.EUROPE,),
        Country.LEBANON: (Continent.ASIA,),
        Country.LESOTHO: (Continent.AFRICA,),
        Country.LIBERIA: (Continent.AFRICA,),
        Country.LIBYA: (Continent.AFRICA,),
        Country.LIECHTENSTEIN: (Continent.EUROPE,),
        Country.LITHUANIA: (Continent.EUROPE,),
        Country.LUXEMBOURG: (Continent.EUROPE,),
        Country.MACEDONIA: (Continent.EUROPE,),
        Country.MADAGASCAR: (Continent.AFRICA,),
        Country.MALAWI: (Continent.AFRICA,),
        Country.MALAYSIA: (Continent.ASIA,),
        Country.MALDIVES: (Continent.ASIA,),
        Country.MALI: (Continent.AFRICA,),
        Country.MALTA: (Continent.EUROPE,),
        Country.MARSHALL_ISLANDS: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.MAURITANIA: (Continent.AFRICA,),
        Country.MAURITIUS: (Continent.AFRICA,),
        Country.MEXICO: (Continent.NORTH_AMERICA,),
        Country.MICRONESIA: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.MOLDOVA: (Continent.EUROPE,),
        Country.MONACO: (Continent.EUROPE,),
        Country.MONGOLIA: (Continent.ASIA,),
        Country.MONTENEGRO: (Continent.EUROPE,),
        Country.MOROCCO: (Continent.AFRICA,),
        Country.MOZAMBIQUE: (Continent.AFRICA,),
        Country.MYANMAR: (Continent.ASIA,),
        Country.NAMIBIA: (Continent.AFRICA,),
        Country.NAURU: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.NEPAL: (Continent.ASIA,),
        Country.NETHERLANDS: (Continent.EUROPE,),
        Country.NEW_ZEALAND: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.NICARAGUA: (Continent.NORTH_AMERICA,),
        Country.NIGER: (Continent.AFRICA,),
        Country.NIGERIA: (Continent.AFRICA,),
        Country.NORTH_KOREA: (Continent.ASIA,),
        Country.NORWAY: (Continent.EUROPE,),
        Country.OMAN: (Continent.ASIA,),
        Country.PAKISTAN: (Continent.ASIA,),
        Country.PALAU: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.PALESTINE: (Continent.ASIA,),
        Country.PANAMA: (Continent.NORTH_AMERICA,),
        Country.PAPUA_NEW_GUINEA: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.PARAGUAY: (Continent.SOUTH_AMERICA,),
        Country.PERU: (Continent.SOUTH_AMERICA,),
        Country.PHILIPPINES: (Continent.ASIA,),
        Country.POLAND: (Continent.EUROPE,),
        Country.PORTUGAL: (Continent.EUROPE,),
        Country.QATAR: (Continent.ASIA,),
        Country.ROMANIA: (Continent.EUROPE,),
        Country.RUSSIA: (Continent.ASIA, Continent.EUROPE),
        Country.RWANDA: (Continent.AFRICA,),
        Country.SAINT_KITTS_AND_NEVIS: (Continent.NORTH_AMERICA,),
        Country.SAINT_LUCIA: (Continent.NORTH_AMERICA,),
        Country.SAINT_VINCENT_AND_THE_GRENADINES: (Continent.NORTH_AMERICA,),
        Country.SAMOA: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.SAN_MARINO: (Continent.EUROPE,),
        Country.SAO_TOME_AND_PRINCIPE: (Continent.AFRICA,),
        Country.SAUDI_ARABIA: (Continent.ASIA,),
        Country.SENEGAL: (Continent.AFRICA,),
        Country.SERBIA: (Continent.EUROPE,),
        Country.SEYCHELLES: (Continent.AFRICA,),
        Country.SIERRA_LEONE: (Continent.AFRICA,),
        Country.SINGAPORE: (Continent.ASIA,),
        Country.SLOVAKIA: (Continent.EUROPE,),
        Country.SLOVENIA: (Continent.EUROPE,),
        Country.SOLOMON_ISLANDS: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.SOMALIA: (Continent.AFRICA,),
        Country.SOUTH_AFRICA: (Continent.AFRICA,),
        Country.SOUTH_KOREA: (Continent.ASIA,),
        Country.SOUTH_SUDAN: (Continent.AFRICA,),
        Country.SPAIN: (Continent.EUROPE,),
        Country.SRI_LANKA: (Continent.ASIA,),
        Country.SUDAN: (Continent.AFRICA,),
        Country.SURINAME: (Continent.SOUTH_AMERICA,),
        Country.SWAZILAND: (Continent.AFRICA,),
        Country.SWEDEN: (Continent.EUROPE,),
        Country.SWITZERLAND: (Continent.EUROPE,),
        Country.SYRIA: (Continent.ASIA,),
        Country.TAIWAN: (Continent.ASIA,),
        Country.TAJIKISTAN: (Continent.ASIA,),
        Country.TANZANIA: (Continent.AFRICA,),
        Country.THAILAND: (Continent.ASIA,),
        Country.TIMOR_LESTE: (Continent.ASIA,),
        Country.TOGO: (Continent.AFRICA,),
        Country.TONGA: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.TRINIDAD_AND_TOBAGO: (Continent.NORTH_AMERICA,),
        Country.TUNISIA: (Continent.AFRICA,),
        Country.TURKEY: (Continent.ASIA, Continent.EUROPE),
        Country.TURKMENISTAN: (Continent.ASIA,),
        Country.TUVALU: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.UGANDA: (Continent.AFRICA,),
        Country.UKRAINE: (Continent.EUROPE,),
        Country.UNITED_ARAB_EMIRATES: (Continent.ASIA,),
        Country.UNITED_KINGDOM: (Continent.EUROPE,),
        Country.UNITED_STATES_OF_AMERICA: (Continent.NORTH_AMERICA,),
        Country.URUGUAY: (Continent.SOUTH_AMERICA,),
        Country.UZBEKISTAN: (Continent.ASIA,),
        Country.VANUATU: (Continent.AUSTRALIA_AND_OCEANIA,),
        Country.VATICAN_CITY: (Continent.EUROPE,),
        Country.VENEZUELA: (Continent.SOUTH_AMERICA,),
        Country.VIETNAM: (Continent.ASIA,),
        Country.YEMEN: (Continent.ASIA,),
        Country.ZAMBIA: (Continent.AFRICA,),
        Country.ZIMBABWE: (Continent.AFRICA,),
    }.items()
}


class State(DescribedEnum):
    """States of the United States, plus the District of Columbia."""

    ALABAMA = ("AL", "Alabama")
    ALASKA = ("AK", "Alaska")
    ARIZONA = ("AZ", "Arizona")
    ARKANSAS = ("AR", "Arkansas")
    CALIFORNIA = ("CA", "California")
    COLORADO = ("CO", "Colorado")
    CONNECTICUT = ("CT", "Connecticut")
    DELAWARE = ("DE", "Delaware")
    DISTRICT_OF_COLUMBIA = ("DC", "District of Columbia")
    FLORIDA = ("FL", "Florida")
    GEORGIA = ("GA", "Georgia")
    HAWAII = ("HI", "Hawaii")
    IDAHO = ("ID", "Idaho")
    ILLINOIS = ("IL", "Illinois")
    INDIANA = ("IN", "Indiana")
    IOWA = ("IA", "Iowa")
    KANSAS = ("KS", "Kansas")
    KENTUCKY = ("KY", "Kentucky")
    LOUISIANA = ("LA", "Louisiana")
    MAINE = ("ME", "Maine")
    MARYLAND = ("MD", "Maryland")
    MASSACHUSETTS = ("MA", "Massachusetts")
    MICHIGAN = ("MI", "Michigan")
    MINNESOTA = ("MN", "Minnesota")
    MISSISSIPPI = ("MS", "Mississippi")
    MISSOURI = ("MO", "Missouri")
    MONTANA = ("MT", "Montana")
    NEBRASKA = ("NE", "Nebraska")
    NEVADA = ("NV", "Nevada")
    NEW_HAMPSHIRE = ("NH", "New Hampshire")
    NEW_JERSEY = ("NJ", "New Jersey")
    NEW_MEXICO = ("NM", "New Mexico")
    NEW_YORK = ("NY", "New York")
    NORTH_CAROLINA = ("NC", "North Carolina")
    NORTH_DAKOTA = ("ND", "North Dakota")
    OHIO = ("OH", "Ohio")
    OKLAHOMA = ("OK", "Oklahoma")
    OREGON = ("OR", "Oregon")
    PENNSYLVANIA = ("PA", "Pennsylvania")
    RHODE_ISLAND = ("RI", "Rhode Island")
    SOUTH_CAROLINA = ("SC", "South Carolina")
    SOUTH_DAKOTA = ("SD", "South Dakota")
    TENNESSEE = ("TN", "Tennessee")
    TEXAS = ("TX", "Texas")
    UTAH = ("UT", "Utah")
    VERMONT = ("VT", "Vermont")
    VIRGINIA = ("VA", "Virginia")
    WASHINGTON = ("WA", "Washington")
    WEST_VIRGINIA = ("WV", "West Virginia")
    WISCONSIN = ("WI", "Wisconsin")
    WYOMING = ("WY", "Wyoming")

    @classmethod
    def _not_found_message(cls, abbreviation: str | None) -> str:
        return f"State for abbreviation [{abbreviation}] was not found"

    @classmethod
    def from_name(cls, name: str | None) -> State:
        """Look up a state by its name (``"New York"``) or member name."""
        return cls.from_description(name)

    @classmethod
    def normalize(cls, text: str | None) -> State | None:
        """Resolve a state abbreviation or name, returning None when unknown."""
        return cls.find(text)


class Direction(DescribedEnum):
    """Cardinal and intercardinal directions."""

    EAST = ("E", "East")
    NORTH = ("N", "North")
    NORTHEAST = ("NE", "Northeast")
    NORTHWEST = ("NW", "Northwest")
    SOUTH = ("S", "South")
    SOUTHEAST = ("SE", "Southeast")
    SOUTHWEST = ("SW", "Southwest")
    WEST = ("W", "West")

    @classmethod
    def _not_found_message(cls, abbreviation: str | None) -> str:
        return f"Direction abbreviation [{abbreviation}] is not valid"

    def is_east(self) -> bool:
        return self is Direction.EAST

    def is_north(self) -> bool:
        return self is Direction.NORTH

    def is_northeast(self) -> bool:
        return self is Direction.NORTHEAST

    def is_northwest(self) -> bool:
        return self is Direction.NORTHWEST

    def is_south(self) -> bool:
        return self is Direction.SOUTH

    def is_southeast(self) -> bool:
        return self is Direction.SOUTHEAST

    def is_southwest(self) -> bool:
        return self is Direction.SOUTHWEST

    def is_west(self) -> bool:
        return self is Direction.WEST

    def is_eastbound(self) -> bool:
        return "EAST" in self.name

    def is_northbound(self) -> bool:
        return "NORTH" in self.name

    def is_southbound(self) -> bool:
        return "SOUTH" in self.name

    def is_westbound(self) -> bool:
        return "WEST" in self.name


class LengthUnit(str, Enum):
    """Units of length with their size in meters."""

    def __new__(cls, value: str, meters: float, plural_name: str) -> Self:
        member = str.__new__(cls, value)
        member._value_ = value
        member._meters = meters
        member._plural_name = plural_name
        return member

    MILLIMETER = ("MILLIMETER", 0.001, "MILLIMETERS")
    CENTIMETER = ("CENTIMETER", 0.01, "CENTIMETERS")
    INCH = ("INCH", 0.0254, "INCHES")
    FOOT = ("FOOT", 0.3048, "FEET")
    YARD = ("YARD", 0.9144, "YARDS")
    METER = ("METER", 1.0, "METERS")
    KILOMETER = ("KILOMETER", 1000.0, "KILOMETERS")
    MILE = ("MILE", 1609.344, "MILES")

    @classmethod
    def default(cls) -> LengthUnit:
        """The configured default unit (see ``core.config``)."""
        from ryandata_contact_domain.core.config import get_settings

        return get_settings().default_length_unit

    @classmethod
    def find(cls, text: str | None) -> LengthUnit | None:
        """Case-insensitive lookup by singular or plural name."""
        if not text:
            return None
        wanted = text.strip().upper()
        for unit in cls:
            if wanted in (unit.value, unit.plural_name):
                return unit
        return None

    @property
    def meter_conversion_factor(self) -> float:
        """Number of meters in one of this unit."""
        return self._meters

    @property
    def plural_name(self) -> str:
        return self._plural_name

    def is_metric(self) -> bool:
        return self.name.endswith("METER")

    def __str__(self) -> str:
        return self.value
