from __future__ import annotations

from datetime import datetime

from freeform_dates import dateutils
from freeform_dates.dateutils import Today


def test_match_month_name_prefix() -> None:
    assert dateutils.match_month_name("January") == 1
    assert dateutils.match_month_name("sept") == 9
    assert dateutils.match_month_name("DEC") == 12
    assert dateutils.match_month_name("ma") == 3
    assert dateutils.match_month_name("xyz") is None
    assert dateutils.match_month_name("") is None


def test_match_day_of_week_name() -> None:
    assert dateutils.match_day_of_week_name("thu") == 5
    assert dateutils.match_day_of_week_name("S") == 1
    assert dateutils.match_day_of_week_name("funday") is None


def test_names_out_of_range_are_empty() -> None:
    assert dateutils.month_name(0) == ""
    assert dateutils.short_month_name("03") == "Mar"
    assert dateutils.short_month_name(13) == ""
    assert dateutils.short_month_name("x") == ""
    assert dateutils.short_month_name(None) == ""
    assert dateutils.day_of_week_name(7) == "Saturday"
    assert dateutils.day_of_week_name(8) == ""


def test_day_of_week_sunday_is_one() -> None:
    assert dateutils.day_of_week(2024, 3, 3) == 1
    assert dateutils.day_of_week(2024, 3, 9) == 7
    assert dateutils.day_of_week(2024, 2, 30) is None


def test_days_in_month_leap_year() -> None:
    assert dateutils.days_in_month(2024, 2) == 29
    assert dateutils.days_in_month(2023, 2) == 28
    assert dateutils.days_in_month(2024, 12) == 31
    assert dateutils.days_in_month(20004, 2) == 29


def test_today_renderings() -> None:
    t = Today(now=datetime(2024, 7, 4, 9, 8, 7))
    assert t.ymd == "2024-07-04"
    assert t.ymdhms == "2024-07-04 09:08:07"
    assert (t.yyyy, t.mm, t.dd) == ("2024", "07", "04")
    assert t.current_date() == (2024, 7, 4)


def test_today_refresh_moves_clock() -> None:
    t = Today(now=datetime(2000, 1, 1))
    t.refresh()
    assert t.now.year > 2000
