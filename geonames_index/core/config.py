"""Index configuration loaded from environment variables.

All configuration values have sensible defaults; environment variables
override them when the index is embedded in a long-running service.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range.  This catches bad configuration at startup
    instead of at the first query.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geonames_index.core.constants import DEFAULT_ELLIPSOID, DEFAULT_K, MEAN_EARTH_RADIUS_M
from geonames_index.core.exceptions import GeoIndexError

_TRUE_LITERALS = frozenset({"1", "true", "yes", "on"})
_FALSE_LITERALS = frozenset({"0", "false", "no", "off", ""})


class ConfigValidationError(GeoIndexError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class IndexConfig:
    """Immutable index configuration.

    Attributes:
        default_k: Result count used by ``k_nearest`` / ``neighbors``
            when the caller does not pass ``k``.
        earth_radius_m: Sphere radius in metres used to turn a radius
            query in metres into a chord bound on the unit sphere.
        ellipsoid: ``pyproj.Geod`` ellipsoid used for reported distances.
        strict_records: Raise on the first malformed record instead of
            logging and skipping it.
    """

    default_k: int = DEFAULT_K
    earth_radius_m: float = MEAN_EARTH_RADIUS_M
    ellipsoid: str = DEFAULT_ELLIPSOID
    strict_records: bool = False

    @classmethod
    def from_env(cls) -> IndexConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a
                boolean flag is not a recognised literal.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GEOINDEX_DEFAULT_K=abc``).
        """
        config = cls(
            default_k=int(os.getenv("GEOINDEX_DEFAULT_K", str(DEFAULT_K))),
            earth_radius_m=float(os.getenv("GEOINDEX_EARTH_RADIUS_M", str(MEAN_EARTH_RADIUS_M))),
            ellipsoid=os.getenv("GEOINDEX_ELLIPSOID", DEFAULT_ELLIPSOID),
            strict_records=_parse_bool(
                "GEOINDEX_STRICT_RECORDS", os.getenv("GEOINDEX_STRICT_RECORDS", "false")
            ),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false, 1/0, yes/no, on/off)")


def _validate(config: IndexConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.default_k < 1:
        raise ConfigValidationError(
            "GEOINDEX_DEFAULT_K",
            config.default_k,
            "must be >= 1",
        )

    if config.earth_radius_m <= 0:
        raise ConfigValidationError(
            "GEOINDEX_EARTH_RADIUS_M",
            config.earth_radius_m,
            "must be > 0 (metres)",
        )

    if not config.ellipsoid:
        raise ConfigValidationError(
            "GEOINDEX_ELLIPSOID",
            config.ellipsoid,
            "must not be empty",
        )
