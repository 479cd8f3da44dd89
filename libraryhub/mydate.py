"""Calendar dates with the library's simplified thirty-day month arithmetic."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass

DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

# Mirrors "%d/%d/%d": each number may be preceded by whitespace and a sign,
# the slashes must follow the digits directly, and trailing text is ignored.
_DATE_PATTERN = re.compile(
    r"\s*([+-]?[0-9]+)/\s*([+-]?[0-9]+)/\s*([+-]?[0-9]+)", re.ASCII
)


@dataclass
class MyDate:
    """A day/month/year triple rendered as ``dd/mm/yyyy``."""

    day: int = 1
    month: int = 1
    year: int = 2000

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year}"

    def is_before(self, other: MyDate) -> bool:
        """Return True if this date falls strictly before ``other``."""
        return (self.year, self.month, self.day) < (other.year, other.month, other.day)

    def add_days(self, days: int) -> None:
        """Advance the date in place, treating every month as thirty days long."""
        self.day += days
        while self.day > DAYS_PER_MONTH:
            self.day -= DAYS_PER_MONTH
            self.month += 1
            if self.month > MONTHS_PER_YEAR:
                self.month = 1
                self.year += 1

    @classmethod
    def from_string(cls, text: str) -> MyDate:
        """Parse a ``dd/mm/yyyy`` string; raise ValueError if it does not fit."""
        match = _DATE_PATTERN.match(text)
        if match is None:
            raise ValueError(f"invalid date: {text!r}")
        day, month, year = (int(group) for group in match.groups())
        return cls(day, month, year)

    @classmethod
    def today(cls) -> MyDate:
        """Return the current local date."""
        now = _dt.date.today()
        return cls(now.day, now.month, now.year)