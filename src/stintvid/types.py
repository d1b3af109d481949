"""Value types shared across stintvid."""

from __future__ import annotations

from dataclasses import dataclass

from .utils.duration import duration_to_length


@dataclass(frozen=True)
class TimeInterval:
    """Span of a recording expressed in seconds."""

    start: float
    end: float

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"interval ends before it starts ({self.end} < {self.start})")

    @property
    def duration(self) -> float:
        """Return the interval length in seconds."""

        return self.end - self.start


def parse_span(start: str, end: str) -> TimeInterval:
    """Build a :class:`TimeInterval` from two duration strings.

    ``DurationParseError`` propagates for malformed endpoints and
    ``ValueError`` is raised when ``end`` precedes ``start``.
    """

    return TimeInterval(duration_to_length(start), duration_to_length(end))
