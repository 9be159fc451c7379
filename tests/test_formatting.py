from __future__ import annotations

from datetime import date

from freeform_dates import parse


def test_full_date_templates() -> None:
    p = parse("2024-03-05")
    assert p.format("d MMMM yyyy") == "5 March 2024"
    assert p.format("MM/dd/yy") == "03/05/24"
    assert p.format("MMM d, yyyy") == "Mar 5, 2024"
    assert p.format("M-d-y") == "3-5-24"


def test_unknown_letters_are_dropped() -> None:
    assert parse("2024-03-05").format("EEE dd MMM") == "05 Mar"


def test_missing_parts_are_skipped_between_spaces() -> None:
    assert parse("2024-03").format("d MMM yyyy") == "Mar 2024"
    assert parse("2024").format("MMM yyyy") == "2024"


def test_missing_parts_get_placeholders_next_to_punctuation() -> None:
    assert parse("2024-03").format("yyyy-MM-dd") == "2024-03-01"
    assert parse("2024").format("MM/yyyy") == "06/2024"
    assert parse("2024").format("MMM-yyyy") == "Jun-2024"


def test_dmy_renderings() -> None:
    p = parse("2024-03-03")
    assert p.dmy_date == "03 Mar 2024"
    assert p.dmyw_date == "03 Mar 2024 - Sunday"
    assert p.dmyw2_date == "03 Mar 2024 / Su"


def test_dmy_renderings_degrade() -> None:
    assert parse("2024-03").dmy_date == "   Mar 2024"
    assert parse("2024-03").dmyw_date == "   Mar 2024"
    assert parse("2024").dmy_date == "2024"
    assert parse("2024").year_and_month == "2024"
    assert parse("2024-03-09").year_and_month == "2024-03"


def test_impossible_day_has_no_weekday() -> None:
    p = parse("Feb 31 2024")
    assert p.is_full_date
    assert p.dmyw_date == "31 Feb 2024"
    assert p.date is None


def test_date_and_simple_date() -> None:
    p = parse("March 3, 2024")
    assert p.date == date(2024, 3, 3)
    assert str(p.simple_date) == "2024-03-03"
    assert parse("March 2024").simple_date is None


def test_unpadded_accessors() -> None:
    p = parse("2024-03-05")
    assert (p.m, p.d, p.yy) == ("3", "5", "24")
    assert (p.year_number, p.month_number, p.day_number) == (2024, 3, 5)
