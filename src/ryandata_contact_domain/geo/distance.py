"""Distance measurements and length unit conversions."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Self

from pydantic import ConfigDict, field_validator

from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.core.model import DomainModel
from ryandata_contact_domain.geo.enums import LengthUnit

# Measurements are compared in meters at this many decimal places
MEASUREMENT_PRECISION = 4


class Conversions:
    """Fixed conversion constants and the pairwise conversions built on them.

    Example:
        >>> Conversions.convert(1.0, LengthUnit.MILE, LengthUnit.FOOT)
        5280.0
    """

    FEET_IN_MILES = 5280.0
    FEET_IN_YARDS = 3.0
    INCHES_IN_FEET = 12.0
    METERS_IN_FEET = 0.3048
    METERS_IN_KILOMETERS = 1000.0

    @staticmethod
    def feet_to_meters(measurement: float) -> float:
        return measurement * Conversions.METERS_IN_FEET

    @staticmethod
    def feet_to_miles(measurement: float) -> float:
        return measurement / Conversions.FEET_IN_MILES

    @staticmethod
    def feet_to_yards(measurement: float) -> float:
        return measurement / Conversions.FEET_IN_YARDS

    @staticmethod
    def feet_to_kilometers(measurement: float) -> float:
        return Conversions.meters_to_kilometers(Conversions.feet_to_meters(measurement))

    @staticmethod
    def inches_to_feet(measurement: float) -> float:
        return measurement / Conversions.INCHES_IN_FEET

    @staticmethod
    def kilometers_to_meters(measurement: float) -> float:
        return measurement * Conversions.METERS_IN_KILOMETERS

    @staticmethod
    def meters_to_feet(measurement: float) -> float:
        return measurement / Conversions.METERS_IN_FEET

    @staticmethod
    def meters_to_kilometers(measurement: float) -> float:
        return measurement / Conversions.METERS_IN_KILOMETERS

    @staticmethod
    def meters_to_miles(measurement: float) -> float:
        return Conversions.feet_to_miles(Conversions.meters_to_feet(measurement))

    @staticmethod
    def meters_to_yards(measurement: float) -> float:
        return Conversions.feet_to_yards(Conversions.meters_to_feet(measurement))

    @staticmethod
    def miles_to_feet(measurement: float) -> float:
        return measurement * Conversions.FEET_IN_MILES

    @staticmethod
    def miles_to_kilometers(measurement: float) -> float:
        return Conversions.feet_to_kilometers(Conversions.miles_to_feet(measurement))

    @staticmethod
    def miles_to_yards(measurement: float) -> float:
        return Conversions.feet_to_yards(Conversions.miles_to_feet(measurement))

    @staticmethod
    def yards_to_feet(measurement: float) -> float:
        return measurement * Conversions.FEET_IN_YARDS

    @staticmethod
    def yards_to_miles(measurement: float) -> float:
        return Conversions.feet_to_miles(Conversions.yards_to_feet(measurement))

    @staticmethod
    def to_meters(measurement: float, unit: LengthUnit) -> float:
        """Convert a measurement in any unit to meters."""
        if unit is LengthUnit.METER:
            return measurement
        if unit is LengthUnit.FOOT:
            return Conversions.feet_to_meters(measurement)
        if unit is LengthUnit.KILOMETER:
            return Conversions.kilometers_to_meters(measurement)
        return measurement * unit.meter_conversion_factor

    @staticmethod
    def from_meters(measurement: float, unit: LengthUnit) -> float:
        """Convert a measurement in meters to any unit."""
        if unit is LengthUnit.METER:
            return measurement
        if unit is LengthUnit.FOOT:
            return Conversions.meters_to_feet(measurement)
        if unit is LengthUnit.KILOMETER:
            return Conversions.meters_to_kilometers(measurement)
        return measurement / unit.meter_conversion_factor

    @staticmethod
    def convert(measurement: float, from_unit: LengthUnit, to_unit: LengthUnit) -> float:
        """Convert between units, using a direct conversion where one exists."""
        if from_unit is to_unit:
            return measurement
        direct = _DIRECT_CONVERSIONS.get((from_unit, to_unit))
        if direct is not None:
            return direct(measurement)
        return Conversions.from_meters(Conversions.to_meters(measurement, from_unit), to_unit)


_DIRECT_CONVERSIONS: dict[tuple[LengthUnit, LengthUnit], Callable[[float], float]] = {
    (LengthUnit.INCH, LengthUnit.FOOT): Conversions.inches_to_feet,
    (LengthUnit.YARD, LengthUnit.FOOT): Conversions.yards_to_feet,
    (LengthUnit.MILE, LengthUnit.FOOT): Conversions.miles_to_feet,
    (LengthUnit.FOOT, LengthUnit.MILE): Conversions.feet_to_miles,
    (LengthUnit.FOOT, LengthUnit.YARD): Conversions.feet_to_yards,
    (LengthUnit.FOOT, LengthUnit.KILOMETER): Conversions.feet_to_kilometers,
    (LengthUnit.METER, LengthUnit.MILE): Conversions.meters_to_miles,
    (LengthUnit.METER, LengthUnit.YARD): Conversions.meters_to_yards,
    (LengthUnit.MILE, LengthUnit.KILOMETER): Conversions.miles_to_kilometers,
    (LengthUnit.MILE, LengthUnit.YARD): Conversions.miles_to_yards,
    (LengthUnit.YARD, LengthUnit.MILE): Conversions.yards_to_miles,
}


class Distance(DomainModel):
    """A non-negative measurement of length in a given unit.

    Distances compare by the real-world length they describe, so
    ``Distance.in_kilometers(1.0) == Distance.in_meters(1000.0)``.

    Example:
        >>> Distance.in_miles(1.0).to_feet()
        Distance(measurement=5280.0, length_unit=<LengthUnit.FOOT: 'FOOT'>)
    """

    model_config = ConfigDict(frozen=True)

    measurement: float
    length_unit: LengthUnit

    def __init__(
        self, measurement: float | None = None, length_unit: LengthUnit | None = None, **data: Any
    ) -> None:
        super().__init__(measurement=measurement, length_unit=length_unit, **data)

    @field_validator("measurement", mode="before")
    @classmethod
    def _validate_measurement(cls, value: Any) -> float:
        if value is None:
            raise RyanDataArgumentError.create("Measurement is required", value)
        measurement = float(value)
        if measurement < 0:
            raise RyanDataArgumentError.create(
                f"The measurement of distance [{measurement}] must be greater than equal to 0",
                value,
            )
        return measurement

    @field_validator("length_unit", mode="before")
    @classmethod
    def _validate_length_unit(cls, value: Any) -> Any:
        if value is None:
            raise RyanDataArgumentError.create("LengthUnit is required", value)
        return value

    @classmethod
    def in_feet(cls, measurement: float) -> Distance:
        return cls(measurement, LengthUnit.FOOT)

    @classmethod
    def in_kilometers(cls, measurement: float) -> Distance:
        return cls(measurement, LengthUnit.KILOMETER)

    @classmethod
    def in_meters(cls, measurement: float) -> Distance:
        return cls(measurement, LengthUnit.METER)

    @classmethod
    def in_miles(cls, measurement: float) -> Distance:
        return cls(measurement, LengthUnit.MILE)

    @classmethod
    def in_yards(cls, measurement: float) -> Distance:
        return cls(measurement, LengthUnit.YARD)

    @classmethod
    def of(cls, measurement: float, length_unit: LengthUnit | None = None) -> Distance:
        """Create a Distance, using the default length unit when none is given."""
        return cls(measurement, length_unit or LengthUnit.default())

    @staticmethod
    def is_metric_unit(length_unit: LengthUnit | None) -> bool:
        """Null-safe check whether ``length_unit`` is a metric unit."""
        return length_unit is not None and length_unit.is_metric()

    def is_in_feet(self) -> bool:
        return self.length_unit is LengthUnit.FOOT

    def is_in_kilometers(self) -> bool:
        return self.length_unit is LengthUnit.KILOMETER

    def is_in_meters(self) -> bool:
        return self.length_unit is LengthUnit.METER

    def is_in_miles(self) -> bool:
        return self.length_unit is LengthUnit.MILE

    def is_in_yards(self) -> bool:
        return self.length_unit is LengthUnit.YARD

    def is_metric(self) -> bool:
        return self.is_metric_unit(self.length_unit)

    def is_non_metric(self) -> bool:
        return not self.is_metric()

    def to_unit(self, length_unit: LengthUnit) -> Self:
        """Convert to ``length_unit``; returns this instance when already in it."""
        if self.length_unit is length_unit:
            return self
        return type(self)(
            Conversions.convert(self.measurement, self.length_unit, length_unit), length_unit
        )

    def to_feet(self) -> Self:
        return self.to_unit(LengthUnit.FOOT)

    def to_kilometers(self) -> Self:
        return self.to_unit(LengthUnit.KILOMETER)

    def to_meters(self) -> Self:
        return self.to_unit(LengthUnit.METER)

    def to_miles(self) -> Self:
        return self.to_unit(LengthUnit.MILE)

    def to_yards(self) -> Self:
        return self.to_unit(LengthUnit.YARD)

    def _equality_key(self) -> tuple[Any, ...]:
        return (round(self.to_meters().measurement, MEASUREMENT_PRECISION),)

    def __str__(self) -> str:
        unit_name = (
            self.length_unit.plural_name if self.measurement != 1.0 else self.length_unit.value
        )
        return f"{self.measurement} {unit_name}"


class ConversionFunctions(Enum):
    """Conversion functions, callable on a Distance.

    Example:
        >>> ConversionFunctions.TO_METERS(Distance.in_kilometers(2.0))
        Distance(measurement=2000.0, length_unit=<LengthUnit.METER: 'METER'>)
    """

    TO_FEET = LengthUnit.FOOT
    TO_KILOMETERS = LengthUnit.KILOMETER
    TO_METERS = LengthUnit.METER
    TO_MILES = LengthUnit.MILE
    TO_YARDS = LengthUnit.YARD

    def __call__(self, distance: Distance | None) -> Distance:
        if distance is None:
            raise RyanDataArgumentError.create("Distance is required", distance)
        return distance.to_unit(self.value)
