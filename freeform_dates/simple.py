from __future__ import annotations

import datetime
from dataclasses import dataclass, field

from . import dateutils


@dataclass
class SimpleDate:
    """A y/m/d value that can be stepped by days, months or years.

    Month and year steps keep the day inside the month (Jan 31 + 1 month = Feb 28/29).
    """

    year: int
    month: int
    day: int
    day_of_week: int | None = field(init=False, default=None)
    days_in_month: int = field(init=False, default=30)

    def __post_init__(self) -> None:
        self._recalc()

    @classmethod
    def from_parts(cls, year: int | None, month: int | None, day: int | None) -> "SimpleDate":
        return cls(year=year or 0, month=month or 0, day=day or 0)

    def __str__(self) -> str:
        return f"{self.yyyy}-{self.mm}-{self.dd}"

    @property
    def yyyy(self) -> str:
        return f"{self.year:04d}"

    @property
    def mm(self) -> str:
        return f"{self.month:02d}"

    @property
    def dd(self) -> str:
        return f"{self.day:02d}"

    @property
    def good_date(self) -> bool:
        return self.year > 0 and 0 < self.month <= 12 and 0 < self.day <= 31

    @property
    def weekend(self) -> bool:
        return self.day_of_week in (dateutils.SUNDAY, dateutils.SATURDAY)

    @property
    def date(self) -> datetime.date | None:
        try:
            return datetime.date(self.year, self.month, self.day)
        except ValueError:
            return None

    def set_day_of_month(self, day: int) -> None:
        self.day = day
        self._clamp_day()
        self.day_of_week = dateutils.day_of_week(self.year, self.month, self.day)

    def add_days(self, days: int) -> None:
        self.day += days
        while self.day > self.days_in_month:
            self.day -= self.days_in_month
            self._bump_month(1)
        while self.day < 1:
            self._bump_month(-1)
            self.day += self.days_in_month
        self.day_of_week = dateutils.day_of_week(self.year, self.month, self.day)

    def add_months(self, months: int) -> None:
        self.year, month0 = divmod(self.year * 12 + self.month - 1 + months, 12)
        self.month = month0 + 1
        self._recalc()
        self._clamp_day()

    def add_years(self, years: int) -> None:
        self.year += years
        self._recalc()
        self._clamp_day()

    def _bump_month(self, step: int) -> None:
        self.month += step
        if self.month > 12:
            self.year += 1
            self.month = 1
        elif self.month < 1:
            self.year -= 1
            self.month = 12
        self.days_in_month = dateutils.days_in_month(self.year, self.month)

    def _clamp_day(self) -> None:
        if self.day > self.days_in_month:
            self.day = self.days_in_month
            self.day_of_week = dateutils.day_of_week(self.year, self.month, self.day)

    def _recalc(self) -> None:
        # Out-of-range parts (e.g. from a partial parse) get no weekday.
        if not self.good_date:
            self.day_of_week = None
            self.days_in_month = 30
            return
        self.days_in_month = dateutils.days_in_month(self.year, self.month)
        self.day_of_week = dateutils.day_of_week(self.year, self.month, self.day)
