from __future__ import annotations

from datetime import date

from expiry_reader.date import DatePolicy, parse_date_from_text
from expiry_reader.date.window import is_reasonable, shift_years

NOW = date(2026, 1, 15)


def test_window_bounds_are_inclusive() -> None:
    assert is_reasonable(date(2021, 1, 15), NOW)
    assert not is_reasonable(date(2021, 1, 14), NOW)
    assert is_reasonable(date(2036, 1, 15), NOW)
    assert not is_reasonable(date(2036, 1, 16), NOW)


def test_shift_years_clamps_leap_day() -> None:
    assert shift_years(date(2024, 2, 29), -5) == date(2019, 2, 28)
    assert shift_years(date(2024, 2, 29), 4) == date(2028, 2, 29)


def test_out_of_window_dates_are_never_returned() -> None:
    assert parse_date_from_text("EXP 12/11/2015", NOW) is None
    assert parse_date_from_text("EXP 12/11/2045", NOW) is None
    assert parse_date_from_text("12NOV1999", NOW) is None


def test_window_follows_the_supplied_now() -> None:
    assert parse_date_from_text("EXP 12/11/2015", date(2016, 1, 1)) == date(2015, 11, 12)


def test_custom_policy_widens_the_window() -> None:
    assert parse_date_from_text("EXP 12/11/2015", NOW, DatePolicy(past_years=20)) == date(2015, 11, 12)
