from __future__ import annotations

import re
from datetime import date

from .grammars import MONTH_ABBREVIATIONS, expand_year

# 12NOV2025, 03Jan26: day, 3-letter month, 2-4 digit year, no separators.
COMPACT_RE = re.compile(r"(\d{1,2})([A-Za-z]{3})(\d{2,4})", re.IGNORECASE)


def parse_compact(s: str) -> date | None:
    """Parse the first compact date found anywhere in ``s``.

    Only the first match is considered; an unknown month token or an impossible
    day/month/year combination yields None.
    """
    m = COMPACT_RE.search(s or "")
    if not m:
        return None

    month = MONTH_ABBREVIATIONS.get(m.group(2).upper())
    if month is None:
        return None

    try:
        return date(expand_year(int(m.group(3))), month, int(m.group(1)))
    except ValueError:
        return None
