from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime

# Index 0 is a placeholder so that 1 == January and 1 == Sunday.
MONTH_NAMES = (
    "n/a",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_OF_WEEK_NAMES = (
    "n/a",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

SUNDAY = 1
SATURDAY = 7


def _match_prefix(name: str, table: tuple[str, ...]) -> int | None:
    low = name.strip().lower()
    if not low:
        return None
    for i, full in enumerate(table[1:], start=1):
        if full.lower().startswith(low):
            return i
    return None


def match_month_name(name: str) -> int | None:
    """Return 1-12 for a full or partial month name ("mar", "Sept"), else None.

    The first table entry that starts with the name wins, so "ma" is March.
    """
    return _match_prefix(name, MONTH_NAMES)


def match_day_of_week_name(name: str) -> int | None:
    """Return 1 (Sunday) .. 7 (Saturday) for a full or partial weekday name, else None."""
    return _match_prefix(name, DAY_OF_WEEK_NAMES)


def month_name(index: int) -> str:
    if 1 <= index <= 12:
        return MONTH_NAMES[index]
    return ""


def short_month_name(month: int | str | None) -> str:
    """3-letter month name for 1-12 (int or digit text); empty string otherwise."""
    if isinstance(month, str):
        month = int(month) if month.isdigit() else None
    if month is None:
        return ""
    return month_name(month)[:3]


def day_of_week_name(index: int) -> str:
    if 1 <= index <= 7:
        return DAY_OF_WEEK_NAMES[index]
    return ""


def day_of_week(year: int, month: int, day: int) -> int | None:
    """Gregorian day of week where 1 is Sunday, or None if y/m/d is not a real date."""
    try:
        d = date(year, month, day)
    except ValueError:
        return None
    return d.isoweekday() % 7 + 1


def days_in_month(year: int, month: int) -> int:
    # No datetime round-trip, so years past 9999 (e.g. "20005") still work.
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


@dataclass
class Today:
    """Resolves the "today" and "now" keywords.

    Holds one timestamp so that every rendering within a parse agrees; pass a
    fixed `now` to pin the clock.
    """

    now: datetime = field(default_factory=datetime.now)

    def refresh(self) -> None:
        self.now = datetime.now()

    @property
    def ymd(self) -> str:
        return self.now.strftime("%Y-%m-%d")

    @property
    def ymdhms(self) -> str:
        return self.now.strftime("%Y-%m-%d %H:%M:%S")

    @property
    def yyyy(self) -> str:
        return f"{self.now.year:04d}"

    @property
    def mm(self) -> str:
        return f"{self.now.month:02d}"

    @property
    def dd(self) -> str:
        return f"{self.now.day:02d}"

    def current_date(self) -> tuple[int, int, int]:
        return (self.now.year, self.now.month, self.now.day)
