"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import ValidationError, ValidationReport
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    extract_json,
    load_message,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationReport",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "load_message",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
]
