"""Elevation relative to sea level."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.core.model import DomainModel
from ryandata_contact_domain.geo.distance import MEASUREMENT_PRECISION, Conversions
from ryandata_contact_domain.geo.enums import LengthUnit


class Elevation(DomainModel):
    """Signed altitude relative to sea level.

    ``length_unit`` may be left unset, in which case the configured default
    unit applies (see :meth:`LengthUnit.default`).

    Example:
        >>> Elevation.at(3.0).in_meters()
        Elevation(altitude=3.0, length_unit=<LengthUnit.METER: 'METER'>)
    """

    altitude: float = 0.0
    length_unit: LengthUnit | None = None

    def __init__(
        self, altitude: float = 0.0, length_unit: LengthUnit | None = None, **data: Any
    ) -> None:
        super().__init__(altitude=altitude, length_unit=length_unit, **data)

    @field_validator("altitude", mode="before")
    @classmethod
    def _validate_altitude(cls, value: Any) -> float:
        if value is None:
            raise RyanDataArgumentError.create("Altitude is required", value)
        return float(value)

    @classmethod
    def at(cls, altitude: float, length_unit: LengthUnit | None = None) -> Elevation:
        return cls(altitude, length_unit)

    @classmethod
    def at_sea_level(cls) -> Elevation:
        return cls(0.0)

    @property
    def unit(self) -> LengthUnit:
        """The length unit in effect."""
        return self.length_unit or LengthUnit.default()

    def in_unit(self, length_unit: LengthUnit | None) -> Elevation:
        """Re-label the altitude with ``length_unit`` without converting it."""
        self.length_unit = length_unit
        return self

    def in_feet(self) -> Elevation:
        return self.in_unit(LengthUnit.FOOT)

    def in_meters(self) -> Elevation:
        return self.in_unit(LengthUnit.METER)

    def to_unit(self, length_unit: LengthUnit) -> Elevation:
        """Convert to ``length_unit``; returns this instance when already in it."""
        if self.unit is length_unit:
            return self
        return Elevation(Conversions.convert(self.altitude, self.unit, length_unit), length_unit)

    def to_feet(self) -> Elevation:
        return self.to_unit(LengthUnit.FOOT)

    def to_meters(self) -> Elevation:
        return self.to_unit(LengthUnit.METER)

    def is_above_sea_level(self) -> bool:
        return self.altitude > 0

    def is_at_sea_level(self) -> bool:
        return self.altitude == 0

    def is_below_sea_level(self) -> bool:
        return self.altitude < 0

    def _equality_key(self) -> tuple[Any, ...]:
        return (round(Conversions.to_meters(self.altitude, self.unit), MEASUREMENT_PRECISION),)

    def __str__(self) -> str:
        unit = self.unit
        unit_name = unit.value if abs(self.altitude) == 1.0 else unit.plural_name
        return f"{self.altitude} {unit_name.lower()}"
