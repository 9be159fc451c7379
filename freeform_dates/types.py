from __future__ import annotations

import datetime
import os
from dataclasses import dataclass
from typing import Literal

from dotenv import load_dotenv

from . import dateutils
from .formatting import format_date
from .simple import SimpleDate

AmPm = Literal["am", "pm"]


@dataclass
class ParsedDate:
    """Best-effort reading of a freeform date string.

    Fields hold text so the user's formatting survives: year is 4 digits, the
    rest are zero-padded to 2. Anything not found stays None. Only the parser
    sets fields; everything else here is derived.
    """

    original_value: str = ""

    year: str | None = None
    month: str | None = None
    day: str | None = None

    hour: str | None = None
    minute: str | None = None
    second: str | None = None
    ampm: AmPm | None = None

    is_alpha_month: bool = False
    funky_date: bool = False  # some token could not be placed
    time_values_included: bool = False

    # Raw time-range text ("2", "4 pm"); kept for range rendering.
    time_start: str = ""
    time_end: str = ""

    @property
    def is_full_date(self) -> bool:
        return bool(self.year and self.month and self.day)

    @property
    def yy(self) -> str:
        if self.year and len(self.year) == 4:
            return self.year[2:]
        return ""

    @property
    def year_number(self) -> int | None:
        return _to_int(self.year)

    @property
    def month_number(self) -> int | None:
        return _to_int(self.month)

    @property
    def day_number(self) -> int | None:
        return _to_int(self.day)

    @property
    def m(self) -> str:
        """Month without zero padding."""
        n = self.month_number
        return str(n) if n is not None else (self.month or "")

    @property
    def d(self) -> str:
        """Day without zero padding."""
        n = self.day_number
        return str(n) if n is not None else (self.day or "")

    @property
    def ymd_date(self) -> str:
        """yyyy-mm-dd, degrading to yyyy-mm or yyyy when parts are missing."""
        yyyy = self.year or ""
        if not self.month:
            return yyyy
        if not self.day:
            return f"{yyyy}-{self.month}"
        return f"{yyyy}-{self.month}-{self.day}"

    @property
    def year_and_month(self) -> str:
        if not self.month:
            return self.year or ""
        return f"{self.year or ''}-{self.month}"

    @property
    def dmy_date(self) -> str:
        yyyy = self.year or ""
        if not self.month:
            return yyyy
        mon = dateutils.short_month_name(self.month)
        if not self.day:
            return f"   {mon} {yyyy}"
        return f"{self.day} {mon} {yyyy}"

    @property
    def dmyw_date(self) -> str:
        """dd Mon yyyy - Weekday"""
        dow = self._day_of_week()
        if dow is None:
            return self.dmy_date
        return f"{self.dmy_date} - {dateutils.day_of_week_name(dow)}"

    @property
    def dmyw2_date(self) -> str:
        """dd Mon yyyy / We (two-letter weekday)"""
        dow = self._day_of_week()
        if dow is None:
            return self.dmy_date
        return f"{self.dmy_date} / {dateutils.day_of_week_name(dow)[:2]}"

    @property
    def normalized_date(self) -> str:
        """Sortable yyyy-mm-dd HH:MM:SS on a 24-hour clock, as far as the parts allow."""
        out = self.year or ""
        if not _two(self.month):
            return out
        out += f"-{self.month}"
        if not _two(self.day):
            return out
        out += f"-{self.day}"
        if not _two(self.hour):
            return out
        out += f" {_to_24_hour(self.hour, self.ampm)}"
        if not _two(self.minute):
            return out
        out += f":{self.minute}"
        if not _two(self.second):
            return out
        return out + f":{self.second}"

    @property
    def time(self) -> str:
        """HH[:MM[:SS]] as typed; only reported alongside a full date."""
        if not (_two(self.month) and _two(self.day) and _two(self.hour)):
            return ""
        out = self.hour
        if _two(self.minute):
            out += f":{self.minute}"
            if _two(self.second):
                out += f":{self.second}"
        return out

    @property
    def date(self) -> datetime.date | None:
        if not self.is_full_date:
            return None
        try:
            return datetime.datetime.strptime(self.ymd_date, "%Y-%m-%d").date()
        except ValueError:
            return None

    @property
    def simple_date(self) -> SimpleDate | None:
        if not self.is_full_date:
            return None
        return SimpleDate.from_parts(self.year_number, self.month_number, self.day_number)

    def is_today(self, today: dateutils.Today | None = None) -> bool:
        today = today or dateutils.Today()
        return self.ymd_date == today.ymd

    def format(self, pattern: str) -> str:
        """Render with a d/M/y template, e.g. "d MMMM yyyy" or "MM/dd/yy"."""
        return format_date(self, pattern)

    def _day_of_week(self) -> int | None:
        if not self.is_full_date:
            return None
        simple = self.simple_date
        if simple is None or not simple.good_date:
            return None
        return simple.day_of_week


@dataclass(frozen=True)
class ParsePolicy:
    """Controls the year backfill for dates typed without a year.

    - year_start/year_end: the years a collection spans (e.g. a school year);
      months before July take year_end, the rest take year_start.
    - default_year: used when neither of those is a usable integer.
    """

    default_year: int = 2025
    year_start: str | None = None
    year_end: str | None = None

    @classmethod
    def from_env(cls) -> "ParsePolicy":
        load_dotenv()
        raw = os.environ.get("FREEFORM_DEFAULT_YEAR", "").strip()
        default_year = cls.default_year
        if raw:
            try:
                default_year = int(raw)
            except ValueError:
                raise ValueError(f"FREEFORM_DEFAULT_YEAR must be an integer year, got {raw!r}") from None
        return cls(
            default_year=default_year,
            year_start=os.environ.get("FREEFORM_YEAR_START", "").strip() or None,
            year_end=os.environ.get("FREEFORM_YEAR_END", "").strip() or None,
        )


def _to_int(s: str | None) -> int | None:
    if not s:
        return None
    try:
        return int(s)
    except ValueError:
        return None


def _two(s: str | None) -> bool:
    return s is not None and len(s) == 2


def _to_24_hour(hour: str, ampm: AmPm | None) -> str:
    h = _to_int(hour)
    if h is None or ampm is None:
        return hour
    if ampm == "pm" and h < 12:
        return f"{h + 12:02d}"
    if ampm == "am" and h == 12:
        return "00"
    return hour
