from __future__ import annotations

import re

from .types import NormalizedForms

_WS_RE = re.compile(r"\s+")
_LETTER_DIGIT_RE = re.compile(r"([A-Za-z])(\d)")
_DIGIT_LETTER_RE = re.compile(r"(\d)([A-Za-z])")
_SEP_SPACING_RE = re.compile(r"\s*([/.\-])\s*")
_ALPHA_RUN_RE = re.compile(r"[A-Za-z]{3,}")


def collapse_whitespace(s: str) -> str:
    return _WS_RE.sub(" ", s or "").strip()


def normalize_candidate(s: str) -> str:
    """Whitespace-normalize a candidate and split glued tokens.

    "12NOV2025" -> "12 NOV 2025", "12 / 11 / 2025" -> "12/11/2025".
    """
    out = collapse_whitespace(s)
    out = _LETTER_DIGIT_RE.sub(r"\1 \2", out)
    out = _DIGIT_LETTER_RE.sub(r"\1 \2", out)
    out = _SEP_SPACING_RE.sub(r"\1", out)
    return out


def title_case_runs(s: str) -> str:
    """Capitalize every maximal run of 3+ letters ("NOV" -> "Nov").

    Runs are bounded by any non-letter, digits included, so "12NOV2025" becomes
    "12Nov2025". Shorter runs and digits are left alone.
    """
    return _ALPHA_RUN_RE.sub(lambda m: m.group(0).capitalize(), s or "")


def normalized_forms(s: str) -> NormalizedForms:
    original = (s or "").strip()
    normalized = normalize_candidate(original)
    return NormalizedForms(
        original=original,
        normalized=normalized,
        title_original=title_case_runs(original),
        title_normalized=title_case_runs(normalized),
    )
