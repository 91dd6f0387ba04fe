from __future__ import annotations

import re
from typing import Iterator

from .normalize import collapse_whitespace
from .types import Candidate

# Labels whose trailing text is preferentially read as a date. Longest first so
# EXPIRY is not consumed as EXP + "IRY"; a keyword may not touch another letter.
KEYWORDS = (
    "EXPIRATION",
    "EXPIRY",
    "EXPIRES",
    "EXPIRE",
    "EXP",
    r"BEST\s*BEFORE",
    "BB",
    r"USE\s*BY",
    "MFG",
    "MFD",
    "MANUFACTURED",
    "PRODUCTION",
)

KEYWORD_RE = re.compile(
    r"(?<![A-Za-z])(?P<kw>" + "|".join(KEYWORDS) + r")(?![A-Za-z])",
    re.IGNORECASE,
)

# Text after a keyword: optional ":"/spaces, then 4+ date-ish characters.
CAPTURE_RE = re.compile(r"[:\s]*(?P<value>[0-9A-Za-z\s\-/.]{4,})")

# Anything shaped like a date, used when no keyword candidate resolves.
DATE_SHAPE_RE = re.compile(
    r"\b\d{1,2}\s*[/\-.]\s*\d{1,2}\s*[/\-.]\s*\d{2,4}\b"  # 12/11/2025, 12.11.25
    r"|\b\d{4}\s*-\s*\d{1,2}\s*-\s*\d{1,2}\b"  # 2025-11-12
    r"|\b\d{1,2}\s+[A-Za-z]{3,9}\s+\d{4}\b"  # 12 NOV 2025
    r"|\b[A-Za-z]{3,9}\s+\d{1,2}\s*,?\s*\d{4}\b"  # Nov 12, 2025
    r"|\b\d{1,2}\s*[\-.][A-Za-z]{3,9}\s*[\-.]\s*\d{2,4}\b"  # 12-NOV-2025
    r"|\b\d{1,2}[A-Za-z]{3}\d{2,4}\b"  # 12NOV2025, 03JAN26
    r"|\b\d{1,2}[/\-]\d{4}\b"  # 11/2025
)


def looks_like_date(s: str) -> bool:
    return DATE_SHAPE_RE.search(s or "") is not None


def _label(raw: str) -> str:
    return collapse_whitespace(raw).upper()


def keyword_candidates(text: str) -> Iterator[Candidate]:
    """Yield keyword-anchored candidates, left to right.

    Each keyword's capture runs up to the next keyword. The whole capture is
    yielded first, then any date-shaped pieces inside it, so that
    "EXP 12/11/2025 LOT 12345" still offers "12/11/2025" under EXP.
    """
    flat = collapse_whitespace(text)
    hits = list(KEYWORD_RE.finditer(flat))

    for i, kw in enumerate(hits):
        stop = hits[i + 1].start() if i + 1 < len(hits) else len(flat)
        m = CAPTURE_RE.match(flat, kw.end(), stop)
        if not m:
            continue

        label = _label(kw.group("kw"))
        value = m.group("value").strip()
        if not value:
            continue
        yield Candidate(text=value, origin="keyword-anchored", keyword=label)

        for sub in DATE_SHAPE_RE.finditer(value):
            piece = sub.group(0).strip()
            if piece != value:
                yield Candidate(text=piece, origin="keyword-anchored", keyword=label)


def general_candidates(text: str) -> Iterator[Candidate]:
    flat = collapse_whitespace(text)
    for m in DATE_SHAPE_RE.finditer(flat):
        yield Candidate(text=m.group(0).strip(), origin="general-scan")
