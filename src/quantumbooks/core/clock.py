"""Clock collaborators supplying the reference "current year"."""

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current calendar year."""

    def current_year(self) -> int: ...


class SystemClock:
    """Reads the year from the local system date."""

    def current_year(self) -> int:
        return date.today().year


class FixedClock:
    """Always reports the same year. Used for tests and reproducible runs."""

    def __init__(self, year: int) -> None:
        self.year = year

    def current_year(self) -> int:
        return self.year

    def __repr__(self) -> str:
        return f"<FixedClock(year={self.year})>"
