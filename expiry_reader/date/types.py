from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Literal

CandidateOrigin = Literal["keyword-anchored", "general-scan"]
FormName = Literal["original", "normalized", "title_original", "title_normalized"]


@dataclass(frozen=True)
class Candidate:
    """A substring of the OCR text suspected to encode a date."""

    text: str
    origin: CandidateOrigin
    keyword: str | None = None  # anchoring label, e.g. "BEST BEFORE"


@dataclass(frozen=True)
class NormalizedForms:
    original: str
    normalized: str
    title_original: str
    title_normalized: str

    def items(self) -> Iterator[tuple[FormName, str]]:
        """Yield (form name, text) in the fixed try order."""
        yield "original", self.original
        yield "normalized", self.normalized
        yield "title_original", self.title_original
        yield "title_normalized", self.title_normalized


@dataclass(frozen=True)
class DateMatch:
    """A validated date plus where it came from."""

    d: date
    candidate: Candidate
    grammar: str  # catalog grammar name, or "compact"
    form: FormName


@dataclass(frozen=True)
class DatePolicy:
    """Knobs for the date engine.

    - the reasonableness window is [now - past_years, now + future_years].
    - day_first orders dd/MM/yyyy ahead of MM/dd/yyyy in the catalog.
    """

    past_years: int = 5
    future_years: int = 10
    day_first: bool = True

    # Product name cap (characters).
    name_max_chars: int = 100

    # Assumed shelf life when only a manufacture date is printed.
    shelf_life_months: int = 6


DEFAULT_POLICY = DatePolicy()
