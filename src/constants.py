"""
Centralized configuration constants for the TSV Graph Converter.

This module provides a single source of truth for all configuration constants,
default values, and vocabulary URIs used throughout the application.
"""

from enum import IntEnum
from typing import Final

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Following Unix conventions:
    - 0: Success
    - 1: General error
    - 2: Validation/syntax error
    - 3+: Specific error categories
    """
    SUCCESS = 0
    ERROR = 1
    VALIDATION_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 5
    PERMISSION_DENIED = 6


# ============================================================================
# Conversion Defaults
# ============================================================================

class ConversionDefaults:
    """Defaults applied when the caller does not configure a conversion."""

    NAMESPACE: Final[str] = "urn:babel:"
    """URI prefix for every synthesized resource and predicate."""

    URL: Final[str] = "urn:babel:/"
    """Location advertised by feed-style writers (RSS channel)."""

    INPUT_ENCODING: Final[str] = "utf-8"
    """Text encoding used to decode input files."""

    OUTPUT_ENCODING: Final[str] = "utf-8"
    """Text encoding used to write output files."""

    OUTPUT_FORMAT: Final[str] = "turtle"
    """Writer used when no output format is given."""

    PROGRESS_THRESHOLD: Final[int] = 10
    """Progress bars are shown only for at least this many entities."""


# ============================================================================
# TSV Syntax
# ============================================================================

class TSVSyntax:
    """Delimiters and keywords of the tab-separated input format."""

    FIELD_SEPARATOR: Final[str] = "\t"
    """Separates header cells and data fields."""

    DETAIL_SEPARATOR: Final[str] = ":"
    """Separates a column name from its detail list."""

    DETAIL_LIST_SEPARATOR: Final[str] = ","
    """Separates details within the detail list."""

    VALUE_SEPARATOR: Final[str] = ";"
    """Separates values within one multi-valued cell."""

    DEFAULT_TYPE: Final[str] = "Item"
    """Type local name used when a row declares no type."""

    URI_SAFE_CHARACTERS: Final[frozenset] = frozenset(
        "abcdefghijklmnopqrstuvwxyz"
        "@ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        "0123456789:;"
        "'()*+,-."
        "$=_!"
    )
    """Characters left unescaped when building resource URIs."""


# ============================================================================
# Vocabulary
# ============================================================================

class Vocabulary:
    """URIs of vocabularies the converter writes with."""

    EXHIBIT_NAMESPACE: Final[str] = "http://simile.mit.edu/2006/11/exhibit#"
    """Exhibit vocabulary; hosts the ``id`` predicate."""

    RSS_NAMESPACE: Final[str] = "http://purl.org/rss/1.0/"
    """RSS 1.0 core namespace."""

    DC_NAMESPACE: Final[str] = "http://purl.org/dc/elements/1.1/"
    """Dublin Core elements namespace."""


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
    """Supported formatter styles."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""

    ROTATION_ENABLED: Final[bool] = True
    """Enable log rotation by default when a file handler is configured."""
