"""Simplified calendar timestamps counted in seconds from 1970.

The calendar is deliberately coarse: every year has 365 days and every
month has 30 days.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_MONTH = 2592000
SECONDS_PER_YEAR = 31536000
EPOCH_YEAR = 1970

_PATTERN = re.compile(
    r"\s*(\d+)-(\d+)-(\d+)\s+(\d+):(\d+):(\d+)\s*"
)


@dataclass(frozen=True, order=True)
class DateTime:
    """A point in time as a count of seconds since the start of 1970."""

    seconds: int = 0

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise ValueError("a date cannot lie before 01-01-1970")

    @classmethod
    def from_parts(
        cls,
        day: int,
        month: int,
        year: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> DateTime:
        """Build a date from calendar parts in the simplified calendar."""
        total = (
            (year - EPOCH_YEAR) * SECONDS_PER_YEAR
            + (month - 1) * SECONDS_PER_MONTH
            + (day - 1) * SECONDS_PER_DAY
            + hour * SECONDS_PER_HOUR
            + minute * SECONDS_PER_MINUTE
            + second
        )
        return cls(total)

    @classmethod
    def parse(cls, text: str) -> DateTime:
        """Read a date written as ``DD-MM-YYYY hh:mm:ss``."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not a date in DD-MM-YYYY hh:mm:ss form: {text!r}")
        return cls.from_parts(*(int(part) for part in match.groups()))

    def to_string(self) -> str:
        """Format the date as ``DD-MM-YYYY hh:mm:ss``."""
        years, rest = divmod(self.seconds, SECONDS_PER_YEAR)
        months, rest = divmod(rest, SECONDS_PER_MONTH)
        days, rest = divmod(rest, SECONDS_PER_DAY)
        hours, rest = divmod(rest, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        return (
            f"{days + 1:02d}-{months + 1:02d}-{EPOCH_YEAR + years:04d} "
            f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        )

    def __str__(self) -> str:
        return self.to_string()