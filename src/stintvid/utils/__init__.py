"""Utility helpers for stintvid."""

from .duration import (
    DurationFields,
    DurationParseError,
    DurationResult,
    duration_to_length,
    is_duration,
    parse_duration,
)
from .logging import get_logger

__all__ = [
    "DurationFields",
    "DurationParseError",
    "DurationResult",
    "duration_to_length",
    "is_duration",
    "parse_duration",
    "get_logger",
]
