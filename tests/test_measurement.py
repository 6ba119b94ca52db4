"""Tests for Distance, Elevation, Coordinates and length unit conversions."""

from __future__ import annotations

import re

import pytest
from hypothesis import HealthCheck, given, settings

from ryandata_contact_domain.core.config import configure
from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.geo.coordinates import Coordinates
from ryandata_contact_domain.geo.distance import ConversionFunctions, Conversions, Distance
from ryandata_contact_domain.geo.elevation import Elevation
from ryandata_contact_domain.geo.enums import Country, LengthUnit
from tests.strategies import length_unit_strategy, measurement_strategy


class TestConversions:
    """Tests for the fixed conversion constants."""

    def test_mile_to_feet(self) -> None:
        assert Conversions.convert(1.0, LengthUnit.MILE, LengthUnit.FOOT) == 5280.0

    def test_yard_to_feet(self) -> None:
        assert Conversions.convert(2.0, LengthUnit.YARD, LengthUnit.FOOT) == 6.0

    def test_foot_to_meters(self) -> None:
        assert Conversions.convert(1.0, LengthUnit.FOOT, LengthUnit.METER) == pytest.approx(0.3048)

    def test_kilometer_to_mile(self) -> None:
        assert Conversions.convert(1.609344, LengthUnit.KILOMETER, LengthUnit.MILE) == (
            pytest.approx(1.0)
        )

    def test_same_unit(self) -> None:
        assert Conversions.convert(3.5, LengthUnit.INCH, LengthUnit.INCH) == 3.5

    @given(measurement_strategy(), length_unit_strategy(), length_unit_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_conversion_is_reversible(
        self, measurement: float, from_unit: LengthUnit, to_unit: LengthUnit
    ) -> None:
        converted = Conversions.convert(measurement, from_unit, to_unit)
        back = Conversions.convert(converted, to_unit, from_unit)
        assert back == pytest.approx(measurement, rel=1e-9, abs=1e-9)


class TestDistance:
    """Tests for the Distance value object."""

    def test_equal_across_units(self) -> None:
        assert Distance.in_kilometers(1.0) == Distance.in_meters(1000.0)
        assert Distance.in_miles(1.0) == Distance.in_feet(5280.0)
        assert hash(Distance.in_kilometers(1.0)) == hash(Distance.in_meters(1000.0))

    def test_feet_equal_meters_at_measurement_precision(self) -> None:
        assert Distance.in_feet(3280.84) == Distance.in_meters(1000.0)
        assert hash(Distance.in_feet(3280.84)) == hash(Distance.in_meters(1000.0))

    def test_ordering_across_units(self) -> None:
        distances = [Distance.in_miles(1.0), Distance.in_feet(10.0), Distance.in_kilometers(1.0)]
        assert sorted(distances) == [
            Distance.in_feet(10.0),
            Distance.in_kilometers(1.0),
            Distance.in_miles(1.0),
        ]

    def test_to_feet(self) -> None:
        assert Distance.in_miles(1.0).to_feet().measurement == 5280.0

    def test_to_same_unit_returns_self(self) -> None:
        distance = Distance.in_meters(5.0)
        assert distance.to_meters() is distance

    def test_rejects_negative_measurement(self) -> None:
        with pytest.raises(
            RyanDataArgumentError,
            match=re.escape("The measurement of distance [-1.0] must be greater than equal to 0"),
        ):
            Distance(-1.0, LengthUnit.METER)

    def test_requires_measurement_and_unit(self) -> None:
        with pytest.raises(RyanDataArgumentError, match="Measurement is required"):
            Distance(None, LengthUnit.METER)
        with pytest.raises(RyanDataArgumentError, match="LengthUnit is required"):
            Distance(1.0, None)

    def test_of_uses_default_unit(self) -> None:
        assert Distance.of(3.0).length_unit is LengthUnit.FOOT
        configure(local_country=Country.FRANCE)
        assert Distance.of(3.0).length_unit is LengthUnit.METER
        configure(length_unit=LengthUnit.YARD)
        assert Distance.of(3.0).length_unit is LengthUnit.YARD

    def test_metric(self) -> None:
        assert Distance.in_kilometers(1.0).is_metric()
        assert Distance.in_miles(1.0).is_non_metric()
        assert Distance.is_metric_unit(LengthUnit.CENTIMETER)
        assert not Distance.is_metric_unit(None)

    def test_str(self) -> None:
        assert str(Distance.in_feet(1.0)) == "1.0 FOOT"
        assert str(Distance.in_feet(2.5)) == "2.5 FEET"
        assert str(Distance.in_miles(0.0)) == "0.0 MILES"

    def test_conversion_functions(self) -> None:
        converted = ConversionFunctions.TO_METERS(Distance.in_kilometers(2.0))
        assert converted.measurement == 2000.0
        assert converted.is_in_meters()
        with pytest.raises(RyanDataArgumentError, match="Distance is required"):
            ConversionFunctions.TO_FEET(None)

    def test_immutable(self) -> None:
        distance = Distance.in_feet(1.0)
        with pytest.raises(ValueError):
            distance.measurement = 2.0  # type: ignore[misc]


class TestElevation:
    """Tests for the Elevation value object."""

    def test_sea_level(self) -> None:
        elevation = Elevation.at_sea_level()
        assert elevation.is_at_sea_level()
        assert not elevation.is_above_sea_level()
        assert not elevation.is_below_sea_level()

    def test_signed_altitude(self) -> None:
        assert Elevation.at(-10.0).is_below_sea_level()
        assert Elevation.at(10.0).is_above_sea_level()

    def test_requires_altitude(self) -> None:
        with pytest.raises(RyanDataArgumentError, match="Altitude is required"):
            Elevation(None)  # type: ignore[arg-type]

    def test_default_unit_follows_local_country(self) -> None:
        elevation = Elevation.at(10.0)
        assert elevation.length_unit is None
        assert elevation.unit is LengthUnit.FOOT
        configure(local_country=Country.GERMANY)
        assert elevation.unit is LengthUnit.METER

    def test_in_unit_relabels_without_converting(self) -> None:
        elevation = Elevation.at(3.0).in_meters()
        assert (elevation.altitude, elevation.length_unit) == (3.0, LengthUnit.METER)

    def test_to_unit_converts(self) -> None:
        elevation = Elevation.at(1.0, LengthUnit.METER).to_feet()
        assert elevation.altitude == pytest.approx(3.28084, rel=1e-5)
        assert elevation.length_unit is LengthUnit.FOOT

    def test_equal_across_units(self) -> None:
        assert Elevation.at(1.0, LengthUnit.METER) == Elevation.at(1 / 0.3048, LengthUnit.FOOT)

    def test_str(self) -> None:
        assert str(Elevation.at(3.0, LengthUnit.METER)) == "3.0 meters"
        assert str(Elevation.at(1.0, LengthUnit.FOOT)) == "1.0 foot"
        assert str(Elevation.at(-1.0, LengthUnit.MILE)) == "-1.0 mile"


class TestCoordinates:
    """Tests for the Coordinates value object."""

    def test_str(self) -> None:
        coordinates = Coordinates.at(1.0, 2.0)
        assert str(coordinates) == "[latitude: 1.0, longitude: 2.0]"
        coordinates.at_altitude(3.0, LengthUnit.METER)
        assert str(coordinates) == "[latitude: 1.0, longitude: 2.0, altitude: 3.0 meters]"

    def test_point_is_longitude_then_latitude(self) -> None:
        coordinates = Coordinates.from_point((2.0, 1.0))
        assert (coordinates.latitude, coordinates.longitude) == (1.0, 2.0)
        assert coordinates.as_point() == (2.0, 1.0)

    def test_requires_latitude_and_longitude(self) -> None:
        with pytest.raises(RyanDataArgumentError, match="Latitude is required"):
            Coordinates(None, 1.0)
        with pytest.raises(RyanDataArgumentError, match="Longitude is required"):
            Coordinates(1.0, None)
        with pytest.raises(RyanDataArgumentError, match="Point is required"):
            Coordinates.from_point(None)

    def test_elevation_is_not_part_of_equality(self) -> None:
        assert Coordinates.at(1.0, 2.0) == Coordinates.at(1.0, 2.0).at_altitude(100.0)
        assert Coordinates.at(1.0, 2.0) != Coordinates.at(2.0, 1.0)

    def test_altitude(self) -> None:
        coordinates = Coordinates.at(45.5, -122.7)
        assert coordinates.altitude is None
        coordinates.with_elevation(Elevation.at(50.0, LengthUnit.METER))
        assert coordinates.altitude == Elevation.at(50.0, LengthUnit.METER)
