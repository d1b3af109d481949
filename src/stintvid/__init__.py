"""Helpers for assembling stint videos."""

from .types import TimeInterval, parse_span
from .utils.duration import DurationParseError, duration_to_length, parse_duration

__all__ = [
    "DurationParseError",
    "TimeInterval",
    "duration_to_length",
    "parse_duration",
    "parse_span",
]

__version__ = "0.1.0"
