from __future__ import annotations

from datetime import date

from .types import DEFAULT_POLICY, DatePolicy


def shift_years(d: date, years: int) -> date:
    """Move ``d`` by whole years; Feb 29 lands on Feb 28 in non-leap years."""
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return d.replace(year=d.year + years, day=28)


def is_reasonable(d: date, now: date, policy: DatePolicy = DEFAULT_POLICY) -> bool:
    """True if ``d`` lies within [now - past_years, now + future_years]."""
    lo = shift_years(now, -policy.past_years)
    hi = shift_years(now, policy.future_years)
    return lo <= d <= hi
