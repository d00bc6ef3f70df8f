"""Converter configuration loaded from environment variables.

Configuration only affects XML parser limits and output presentation;
the transformation itself has no tunables.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from kml_geojson.core.exceptions import ConfigValidationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Attributes:
        indent: JSON indentation width; ``None`` emits compact output.
        huge_tree: Lift lxml's tree depth and text size safety limits.
        log_level: Logging level name used by the command line entry point.
    """

    indent: int | None = 2
    huge_tree: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value cannot be parsed or is out
                of range.
        """
        config = cls(
            indent=_parse_indent(os.getenv("KML_GEOJSON_INDENT", "2")),
            huge_tree=os.getenv("KML_GEOJSON_HUGE_TREE", "").strip().lower() in _TRUTHY,
            log_level=os.getenv("KML_GEOJSON_LOG_LEVEL", "WARNING").strip().upper(),
        )
        _validate(config)
        return config

    @property
    def logging_level(self) -> int:
        """Numeric logging level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)  # type: ignore[no-any-return]


def _parse_indent(raw: str) -> int | None:
    """Parse the indent setting; empty or ``-1`` means compact output."""
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigValidationError("KML_GEOJSON_INDENT", raw, "must be an integer") from exc
    if value < -1:
        raise ConfigValidationError("KML_GEOJSON_INDENT", value, "must be >= -1")
    return None if value == -1 else value


def _validate(config: ConverterConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.indent is not None and config.indent < 0:
        raise ConfigValidationError("KML_GEOJSON_INDENT", config.indent, "must be >= 0")

    if config.log_level not in _LOG_LEVELS:
        raise ConfigValidationError(
            "KML_GEOJSON_LOG_LEVEL",
            config.log_level,
            f"must be one of {', '.join(sorted(_LOG_LEVELS))}",
        )
