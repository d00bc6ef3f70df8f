"""Conversion exception taxonomy.

Every domain exception inherits from ``ConversionError`` and carries
structured context fields (stage and machine-readable code) so callers
and the CLI can report failures consistently.

Fatal conditions
----------------
- ``KmlParseError``         — input is empty or not well-formed XML.
- ``CoordinateParseError``  — a coordinate token is not a number, or a
  tuple does not have 2 or 3 components.
- ``ConfigValidationError`` — an environment setting is out of range.

Missing optional KML constructs are never errors; they leave the
corresponding GeoJSON property absent.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion errors.

    Attributes:
        message: Human-readable error description.
        stage: Conversion stage where the error occurred
            (e.g. ``"parse"``, ``"coordinates"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


class KmlParseError(ConversionError):
    """Raised when the input cannot be parsed as an XML document."""

    default_stage = "parse"
    default_code = "KML_PARSE_FAILED"


class CoordinateParseError(ConversionError):
    """Raised when coordinate text contains a malformed token or tuple.

    Attributes:
        token: The offending coordinate text.
    """

    default_stage = "coordinates"
    default_code = "COORDINATE_PARSE_FAILED"

    def __init__(self, message: str, *, token: str = "") -> None:
        self.token = token
        super().__init__(message)


class ConfigValidationError(ConversionError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")
