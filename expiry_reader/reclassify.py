"""Caller-side policy: turn a found date into an expiry date.

The engine only reports *a* date. When the label talks about manufacture
(MFG, MFD, PRODUCTION, ...) that date is treated as a production date and a
default shelf life is added to estimate the expiry.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date

from .date.types import DEFAULT_POLICY, DatePolicy

MANUFACTURE_RE = re.compile(r"MFG|MANUFAC|MFD|PRODUCTION", re.IGNORECASE)


@dataclass(frozen=True)
class ExpiryEstimate:
    found: date
    expiry: date
    is_manufacture_date: bool
    note: str | None = None


def add_months(d: date, months: int) -> date:
    """Add calendar months, clamping the day to the target month's length."""
    idx = d.month - 1 + months
    year = d.year + idx // 12
    month = idx % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def mentions_manufacture(text: str) -> bool:
    return MANUFACTURE_RE.search(text or "") is not None


def reclassify(text: str, found: date | None, policy: DatePolicy = DEFAULT_POLICY) -> ExpiryEstimate | None:
    if found is None:
        return None

    if not mentions_manufacture(text):
        return ExpiryEstimate(found=found, expiry=found, is_manufacture_date=False)

    months = policy.shelf_life_months
    return ExpiryEstimate(
        found=found,
        expiry=add_months(found, months),
        is_manufacture_date=True,
        note=f"Manufacture date detected: {found.isoformat()}\nEstimated expiry ({months} months added)",
    )
