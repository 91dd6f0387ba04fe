"""Format catalog: the ordered calendar-date grammars tried on each candidate.

Order matters. When a string fits several grammars (03/04/2026) the earliest
grammar wins, so the catalog order *is* the disambiguation policy.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Literal

MonthKind = Literal["numeric", "abbrev", "full"]

# Ambiguous numeric dates (03/04/2026) are read day-first: dd/MM/yyyy is tried
# before MM/dd/yyyy. Pass day_first=False to build_catalog() for US labels.
DAY_FIRST = True

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

# Upper-case 3-letter abbreviations, as printed on packaging.
MONTH_ABBREVIATIONS = {name[:3].upper(): num for name, num in MONTHS.items()}

# Textual grammars match Title-case tokens only; all-caps OCR output reaches
# them through the title-cased forms.
_TITLE_ABBREVS = {name[:3].capitalize(): num for name, num in MONTHS.items()}
_TITLE_ABBREVS["Sept"] = 9
_TITLE_FULL = {name.capitalize(): num for name, num in MONTHS.items()}

_ABBR = "|".join(sorted(_TITLE_ABBREVS, key=len, reverse=True))
_FULL = "|".join(_TITLE_FULL)

DAY = r"(?P<day>\d{1,2})"
MONTH_NUM = r"(?P<month>\d{1,2})"
MONTH_ABBR = rf"(?P<month>{_ABBR})"
MONTH_FULL = rf"(?P<month>{_FULL})"
YEAR4 = r"(?P<year>\d{4})"
YEAR2 = r"(?P<year>\d{2})"


def expand_year(year: int) -> int:
    """Two-digit years pivot at 50: 26 -> 2026, 75 -> 1975."""
    if year < 100:
        year += 2000 if year < 50 else 1900
    return year


@dataclass(frozen=True)
class DateGrammar:
    """One date shape: a full-match regex with ``day``/``month``/``year`` groups.

    Grammars without a ``day`` group (MM/yy and friends) resolve to the first of
    the month.
    """

    name: str
    pattern: re.Pattern[str]
    month_kind: MonthKind

    @property
    def day_required(self) -> bool:
        return "day" in self.pattern.groupindex

    def parse(self, text: str) -> date | None:
        m = self.pattern.fullmatch(text)
        if not m:
            return None

        tok = m.group("month")
        if self.month_kind == "abbrev":
            month = _TITLE_ABBREVS.get(tok)
        elif self.month_kind == "full":
            month = _TITLE_FULL.get(tok)
        else:
            month = int(tok)
        if not month:
            return None

        day = int(m.group("day")) if self.day_required else 1
        year = expand_year(int(m.group("year")))
        try:
            return date(year, month, day)
        except ValueError:
            # 31 April, 29 Feb in a non-leap year, month 13, ...
            return None


def _g(name: str, pattern: str, month_kind: MonthKind = "numeric") -> DateGrammar:
    return DateGrammar(name=name, pattern=re.compile(pattern), month_kind=month_kind)


_DAY_FIRST_SLASH = _g("dd/MM/yyyy", rf"{DAY}/{MONTH_NUM}/{YEAR4}")
_MONTH_FIRST_SLASH = _g("MM/dd/yyyy", rf"{MONTH_NUM}/{DAY}/{YEAR4}")


def build_catalog(day_first: bool = DAY_FIRST) -> tuple[DateGrammar, ...]:
    first, second = (_DAY_FIRST_SLASH, _MONTH_FIRST_SLASH)
    if not day_first:
        first, second = second, first

    return (
        _g("yyyy-MM-dd", rf"{YEAR4}-{MONTH_NUM}-{DAY}"),
        _g("dd-MM-yyyy", rf"{DAY}-{MONTH_NUM}-{YEAR4}"),
        first,
        second,
        _g("dd.MM.yyyy", rf"{DAY}\.{MONTH_NUM}\.{YEAR4}"),
        _g("dd MMM yyyy", rf"{DAY} {MONTH_ABBR} {YEAR4}", "abbrev"),
        _g("dd MMMM yyyy", rf"{DAY} {MONTH_FULL} {YEAR4}", "full"),
        _g("MMM dd, yyyy", rf"{MONTH_ABBR} {DAY}(?:, ?| ){YEAR4}", "abbrev"),
        _g("MMMM dd, yyyy", rf"{MONTH_FULL} {DAY}(?:, ?| ){YEAR4}", "full"),
        _g("dd-MMM-yyyy", rf"{DAY}-{MONTH_ABBR}-{YEAR4}", "abbrev"),
        _g("ddMMMyyyy", rf"{DAY}{MONTH_ABBR}{YEAR4}", "abbrev"),
        _g("MM/yy", rf"{MONTH_NUM}/{YEAR2}"),
        _g("MM-yy", rf"{MONTH_NUM}-{YEAR2}"),
        _g("MM/yyyy", rf"{MONTH_NUM}/{YEAR4}"),
        _g("MM-yyyy", rf"{MONTH_NUM}-{YEAR4}"),
        # Short-year day-first forms ("EXP 12/11/26").
        _g("dd/MM/yy", rf"{DAY}/{MONTH_NUM}/{YEAR2}"),
        _g("dd.MM.yy", rf"{DAY}\.{MONTH_NUM}\.{YEAR2}"),
    )


CATALOG = build_catalog(DAY_FIRST)
_MONTH_FIRST_CATALOG = build_catalog(False)


def catalog_for(day_first: bool) -> tuple[DateGrammar, ...]:
    return CATALOG if day_first else _MONTH_FIRST_CATALOG
