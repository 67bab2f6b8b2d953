"""Tests for the GeoName and CountryInfo models.

Covers:
- Coordinate validation at construction (the adapter boundary)
- Cached unit-sphere projection
- Immutability, hashing and the country join
- Feature class code mapping
- Serialisation
"""

from __future__ import annotations

import math
from datetime import date

import pytest

from geonames_index.core.exceptions import (
    InvalidCoordinateError,
    InvalidFeatureClassError,
    RecordParseError,
    ValidationError,
)
from geonames_index.geometry.projection import project
from geonames_index.models import CountryInfo, FeatureClass, GeoName


class TestGeoNameValidation:
    """Invalid coordinates never reach the index."""

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(90.0001, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
    )
    def test_rejects_out_of_range(self, lat: float, lon: float) -> None:
        with pytest.raises(InvalidCoordinateError):
            GeoName(lat, lon)

    @pytest.mark.parametrize(("lat", "lon"), [(90.0, 180.0), (-90.0, -180.0), (0.0, 0.0)])
    def test_accepts_bounds(self, lat: float, lon: float) -> None:
        assert GeoName(lat, lon).latitude == lat

    def test_error_taxonomy(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            GeoName(100.0, 0.0)
        assert isinstance(excinfo.value, RecordParseError)
        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.category == "validation"
        assert "Latitude 100.0" in str(excinfo.value)


class TestGeoNameProjection:
    """The projection is computed once and stays on the unit sphere."""

    def test_xyz_matches_projection(self) -> None:
        place = GeoName(46.94809, 7.44744, name="Bern")
        assert place.xyz == project(46.94809, 7.44744)

    def test_xyz_unit_length(self) -> None:
        x, y, z = GeoName(-33.86785, 151.20732).xyz
        assert x * x + y * y + z * z == pytest.approx(1.0)

    def test_at_builds_bare_query_point(self) -> None:
        query = GeoName.at(1, 2)
        assert (query.latitude, query.longitude) == (1.0, 2.0)
        assert query.name == ""
        assert query.geoname_id == 0


class TestGeoNameBehaviour:
    """Immutability, equality and country join."""

    def test_frozen(self) -> None:
        place = GeoName(0.0, 0.0)
        with pytest.raises(AttributeError):
            place.latitude = 1.0  # type: ignore[misc]

    def test_equal_records_hash_equal(self) -> None:
        a = GeoName(1.0, 2.0, name="x", alternate_names=("y",))
        b = GeoName(1.0, 2.0, name="x", alternate_names=("y",))
        assert a == b
        assert hash(a) == hash(b)

    def test_with_country_joins_by_code(self) -> None:
        switzerland = CountryInfo(iso="CH", name="Switzerland")
        place = GeoName(47.0, 8.0, country_code="ch")
        joined = place.with_country({"CH": switzerland})
        assert joined.country is switzerland
        assert joined.xyz == place.xyz
        assert place.country is None

    def test_with_country_unknown_code_unchanged(self) -> None:
        place = GeoName(47.0, 8.0, country_code="ZZ")
        assert place.with_country({"CH": CountryInfo(iso="CH", name="Switzerland")}) is place

    def test_str(self) -> None:
        assert str(GeoName(1.0, 2.0, name="Somewhere")) == "Somewhere"
        assert str(GeoName(1.0, 2.0)) == "(1.0, 2.0)"

    def test_to_dict(self) -> None:
        place = GeoName(
            47.36667,
            8.55,
            name="Zürich",
            geoname_id=2657896,
            feature_class=FeatureClass.CITY,
            country_code="CH",
            modification_date=date(2023, 10, 4),
        )
        data = place.to_dict()
        assert data["geoname_id"] == 2657896
        assert data["feature_class"] == "P"
        assert data["modification_date"] == "2023-10-04"
        assert data["elevation"] is None
        assert "xyz" not in data


class TestFeatureClass:
    """Single-letter GeoNames feature classes."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("A", FeatureClass.COUNTRY),
            ("H", FeatureClass.WATER_BODY),
            ("L", FeatureClass.LAND_AREA),
            ("P", FeatureClass.CITY),
            ("R", FeatureClass.TRANSPORT_ROUTE),
            ("S", FeatureClass.FACILITY),
            ("T", FeatureClass.LANDMARK),
            ("U", FeatureClass.UNDERSEA),
            ("V", FeatureClass.VEGETATION),
            ("p", FeatureClass.CITY),
        ],
    )
    def test_from_code(self, code: str, expected: FeatureClass) -> None:
        assert FeatureClass.from_code(code) is expected

    def test_code_round_trip(self) -> None:
        for feature_class in FeatureClass:
            assert FeatureClass.from_code(feature_class.code) is feature_class

    @pytest.mark.parametrize("code", ["", "X", "PP", "1"])
    def test_invalid_code(self, code: str) -> None:
        with pytest.raises(InvalidFeatureClassError):
            FeatureClass.from_code(code)
