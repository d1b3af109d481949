"""Parsing of human friendly duration strings.

A duration is written as one to three colon separated fields::

    SS[.fff]
    MM:SS[.fff]
    HH:MM:SS[.fff]

Only the rightmost field may carry a fraction; the fields to its left are
whole minutes and hours.  :func:`parse_duration` returns a
:class:`DurationResult` instead of raising, while :func:`duration_to_length`
is the raising convenience wrapper used by most callers.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

MAX_FIELDS = 3

_INT_FIELD = re.compile(r"[0-9]+")
_SECONDS_FIELD = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


class DurationParseError(ValueError):
    """Raised when a duration string cannot be parsed."""

    def __init__(self, text: object, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid duration {text!r}: {reason}")


@dataclass(frozen=True)
class DurationFields:
    """Numeric fields of a duration string."""

    hours: int = 0
    minutes: int = 0
    seconds: float = 0.0

    @property
    def total(self) -> float:
        """Return the duration in seconds."""

        return float(self.hours * 3600 + self.minutes * 60 + self.seconds)


@dataclass(frozen=True)
class DurationResult:
    """Outcome of :func:`parse_duration`.

    Exactly one of ``fields`` and ``error`` is set.
    """

    fields: Optional[DurationFields] = None
    error: Optional[DurationParseError] = None

    def __post_init__(self) -> None:
        if (self.fields is None) == (self.error is None):
            raise ValueError("exactly one of fields and error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def seconds(self) -> Optional[float]:
        return self.fields.total if self.fields is not None else None

    def unwrap(self) -> float:
        """Return the parsed seconds or raise the stored error."""

        if self.error is not None:
            raise self.error
        return self.fields.total  # type: ignore[union-attr]


def _failure(text: object, reason: str) -> DurationResult:
    logger.debug("rejected duration %r: %s", text, reason)
    return DurationResult(error=DurationParseError(text, reason))


def parse_duration(text: str) -> DurationResult:
    """Parse ``text`` into a :class:`DurationResult`.

    Surrounding whitespace is ignored.  Signs, exponents, empty fields and
    more than three fields are rejected.
    """

    if not isinstance(text, str):
        return _failure(text, f"expected a string, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        return _failure(text, "empty duration")

    parts = stripped.split(":")
    if len(parts) > MAX_FIELDS:
        return _failure(text, f"too many fields ({len(parts)} > {MAX_FIELDS})")

    *whole, last = parts
    if not _SECONDS_FIELD.fullmatch(last):
        return _failure(text, f"seconds field {last!r} is not a number")
    for part in whole:
        if not _INT_FIELD.fullmatch(part):
            return _failure(text, f"field {part!r} is not a whole number")

    try:
        numbers = [int(part) for part in whole]
    except ValueError:
        # beyond the interpreter's integer string conversion limit
        return _failure(text, "duration out of range")
    seconds = float(last)
    if not math.isfinite(seconds):
        return _failure(text, "duration out of range")
    if len(numbers) == 2:
        fields = DurationFields(hours=numbers[0], minutes=numbers[1], seconds=seconds)
    elif len(numbers) == 1:
        fields = DurationFields(minutes=numbers[0], seconds=seconds)
    else:
        fields = DurationFields(seconds=seconds)
    try:
        total = fields.total
    except OverflowError:
        return _failure(text, "duration out of range")
    if not math.isfinite(total):
        return _failure(text, "duration out of range")
    return DurationResult(fields=fields)


def duration_to_length(text: str) -> float:
    """Return the number of seconds described by ``text``.

    >>> duration_to_length("1:02:11.0")
    3731.0

    :class:`DurationParseError` is raised on malformed input.
    """

    return parse_duration(text).unwrap()


def is_duration(text: str) -> bool:
    """Return ``True`` if ``text`` is a well formed duration string."""

    return parse_duration(text).ok
