"""Unified exception taxonomy.

Every domain exception inherits from ``GeoIndexError`` and carries
structured context fields (stage, code) so callers loading records or
wiring the index into a service can report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError`` — malformed input at the adapter boundary
  (bad records, out-of-range coordinates).
- ``ContractError``   — a capability contract was violated by the
  calling code (e.g. an axis selector outside ``{0, 1, 2}``).

Empty inputs are not errors: building from zero points or querying an
empty tree yields an empty result.  Nothing here is retryable; the
index performs no I/O.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeoIndexError(Exception):
    """Base exception for all index-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"parse_record"``, ``"kdtree"``).
        code: Machine-readable error code (e.g. ``"AXIS_INVALID"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeoIndexError):
    """Input or domain-model validation failure."""


class ContractError(GeoIndexError):
    """A caller broke an interface contract. Always a programming error."""


# ---------------------------------------------------------------------------
# Concrete errors shared across subpackages
# ---------------------------------------------------------------------------


class InvalidAxisError(ValueError, ContractError):
    """Raised when an axis selector outside ``{0, 1, 2}`` is supplied.

    Attributes:
        axis: The rejected selector value.
    """

    default_stage = "kdtree"
    default_code = "AXIS_INVALID"

    def __init__(self, axis: object) -> None:
        self.axis = axis
        GeoIndexError.__init__(self, f"Invalid axis {axis!r}: must be one of 0, 1, 2")


class RecordParseError(ValidationError):
    """Raised when a GeoNames or country-info row cannot be parsed."""

    default_stage = "parse_record"
    default_code = "PARSE_RECORD_FAILED"


class InvalidCoordinateError(ValueError, RecordParseError):
    """Raised when latitude/longitude are non-finite or outside WGS 84 bounds."""

    default_code = "COORDINATE_INVALID"

    def __init__(self, message: str = "", **kwargs: str) -> None:
        GeoIndexError.__init__(self, message, **kwargs)


class InvalidFeatureClassError(ValueError, RecordParseError):
    """Raised when a feature class code is not one of the GeoNames classes."""

    default_code = "FEATURE_CLASS_INVALID"

    def __init__(self, message: str = "", **kwargs: str) -> None:
        GeoIndexError.__init__(self, message, **kwargs)
