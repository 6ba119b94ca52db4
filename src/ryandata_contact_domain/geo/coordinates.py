"""Geographic coordinates."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationInfo, field_validator

from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.core.model import DomainModel
from ryandata_contact_domain.geo.elevation import Elevation
from ryandata_contact_domain.geo.enums import LengthUnit


class Coordinates(DomainModel):
    """Latitude and longitude with an optional elevation.

    Two coordinates are equal when their latitude and longitude are; the
    elevation is informational.

    Example:
        >>> str(Coordinates.at(1.0, 2.0).at_altitude(3.0, LengthUnit.METER))
        '[latitude: 1.0, longitude: 2.0, altitude: 3.0 meters]'
    """

    latitude: float
    longitude: float
    elevation: Elevation | None = None

    def __init__(
        self,
        latitude: float | None = None,
        longitude: float | None = None,
        elevation: Elevation | None = None,
        **data: Any,
    ) -> None:
        super().__init__(latitude=latitude, longitude=longitude, elevation=elevation, **data)

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _validate_degrees(cls, value: Any, info: ValidationInfo) -> float:
        if value is None:
            raise RyanDataArgumentError.create(f"{info.field_name.capitalize()} is required", value)
        return float(value)

    @classmethod
    def at(cls, latitude: float, longitude: float) -> Coordinates:
        return cls(latitude, longitude)

    @classmethod
    def from_point(cls, point: tuple[float, float] | None) -> Coordinates:
        """Create from an ``(x, y)`` point, where x is longitude and y latitude."""
        if point is None:
            raise RyanDataArgumentError.create("Point is required", point)
        x, y = point
        return cls(y, x)

    @property
    def altitude(self) -> Elevation | None:
        return self.elevation

    def with_elevation(self, elevation: Elevation | None) -> Coordinates:
        self.elevation = elevation
        return self

    def at_altitude(self, altitude: float, length_unit: LengthUnit | None = None) -> Coordinates:
        return self.with_elevation(Elevation(altitude, length_unit))

    def as_point(self) -> tuple[float, float]:
        """Return the ``(x, y)`` point, that is ``(longitude, latitude)``."""
        return (self.longitude, self.latitude)

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        text = f"[latitude: {self.latitude}, longitude: {self.longitude}"
        if self.elevation is not None:
            text += f", altitude: {self.elevation}"
        return text + "]"
