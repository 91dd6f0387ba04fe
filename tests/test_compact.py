from __future__ import annotations

from datetime import date

from expiry_reader.date import find_date, parse_date_from_text
from expiry_reader.date.compact import parse_compact

NOW = date(2026, 1, 15)


def test_parse_compact_four_digit_year() -> None:
    assert parse_compact("12NOV2025") == date(2025, 11, 12)


def test_parse_compact_two_digit_year_pivot() -> None:
    assert parse_compact("03JAN26") == date(2026, 1, 3)
    assert parse_compact("03jan75") == date(1975, 1, 3)


def test_parse_compact_finds_the_date_inside_other_text() -> None:
    assert parse_compact("LOT A1 7MAR27 X") == date(2027, 3, 7)


def test_parse_compact_failures() -> None:
    assert parse_compact("12XYZ2025") is None
    assert parse_compact("31FEB2026") is None
    assert parse_compact("no date here") is None
    assert parse_compact("") is None


def test_bare_compact_dates_through_the_engine() -> None:
    assert parse_date_from_text("12NOV2025", NOW) == date(2025, 11, 12)
    assert parse_date_from_text("03JAN26", NOW) == date(2026, 1, 3)


def test_compact_parser_is_the_fallback_after_the_catalog() -> None:
    m = find_date("BB 03JAN27 X", NOW)
    assert m is not None
    assert m.d == date(2027, 1, 3)
    assert m.grammar == "compact"
    assert m.form == "original"
