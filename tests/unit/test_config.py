"""Tests for index configuration.

Covers:
- Default values
- Loading from environment variables
- Type coercion (string env vars → typed fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from geonames_index.core.config import ConfigValidationError, IndexConfig
from geonames_index.core.constants import MEAN_EARTH_RADIUS_M
from geonames_index.core.exceptions import GeoIndexError


class TestIndexConfigDefaults:
    """Verify default configuration values."""

    def test_default_k(self) -> None:
        assert IndexConfig().default_k == 5

    def test_default_earth_radius(self) -> None:
        assert IndexConfig().earth_radius_m == MEAN_EARTH_RADIUS_M

    def test_default_ellipsoid(self) -> None:
        assert IndexConfig().ellipsoid == "WGS84"

    def test_default_not_strict(self) -> None:
        assert IndexConfig().strict_records is False


class TestIndexConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {
            "GEOINDEX_DEFAULT_K": "12",
            "GEOINDEX_EARTH_RADIUS_M": "6378137",
            "GEOINDEX_ELLIPSOID": "GRS80",
            "GEOINDEX_STRICT_RECORDS": "true",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = IndexConfig.from_env()

        assert cfg.default_k == 12
        assert cfg.earth_radius_m == 6_378_137.0
        assert cfg.ellipsoid == "GRS80"
        assert cfg.strict_records is True

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = IndexConfig.from_env()
        assert cfg == IndexConfig()

    @pytest.mark.parametrize(("raw", "expected"), [("1", True), ("YES", True), ("off", False), ("", False)])
    def test_bool_literals(self, raw: str, expected: bool) -> None:
        with patch.dict(os.environ, {"GEOINDEX_STRICT_RECORDS": raw}, clear=True):
            assert IndexConfig.from_env().strict_records is expected

    def test_frozen_immutability(self) -> None:
        cfg = IndexConfig()
        with pytest.raises(AttributeError):
            cfg.default_k = 3  # type: ignore[misc]


class TestIndexConfigValidation:
    """Fail-fast range validation in from_env."""

    def test_k_zero_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOINDEX_DEFAULT_K": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="GEOINDEX_DEFAULT_K"),
        ):
            IndexConfig.from_env()

    def test_k_not_a_number(self) -> None:
        with (
            patch.dict(os.environ, {"GEOINDEX_DEFAULT_K": "abc"}, clear=True),
            pytest.raises(ValueError),
        ):
            IndexConfig.from_env()

    def test_earth_radius_negative_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOINDEX_EARTH_RADIUS_M": "-1"}, clear=True),
            pytest.raises(ConfigValidationError, match="must be > 0"),
        ):
            IndexConfig.from_env()

    def test_empty_ellipsoid_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOINDEX_ELLIPSOID": ""}, clear=True),
            pytest.raises(ConfigValidationError, match="must not be empty"),
        ):
            IndexConfig.from_env()

    def test_bad_bool_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOINDEX_STRICT_RECORDS": "maybe"}, clear=True),
            pytest.raises(ConfigValidationError, match="GEOINDEX_STRICT_RECORDS"),
        ):
            IndexConfig.from_env()

    def test_error_attributes(self) -> None:
        err = ConfigValidationError("GEOINDEX_DEFAULT_K", 0, "must be >= 1")
        assert isinstance(err, GeoIndexError)
        assert err.key == "GEOINDEX_DEFAULT_K"
        assert err.value == 0
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert str(err) == "Invalid configuration GEOINDEX_DEFAULT_K=0: must be >= 1"
