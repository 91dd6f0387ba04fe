from __future__ import annotations

from datetime import date
from itertools import chain

from .compact import parse_compact
from .grammars import catalog_for
from .normalize import normalized_forms
from .scanners import general_candidates, keyword_candidates
from .types import DEFAULT_POLICY, Candidate, DateMatch, DatePolicy
from .window import is_reasonable


def resolve_candidate(c: Candidate, now: date, policy: DatePolicy = DEFAULT_POLICY) -> DateMatch | None:
    """Run one candidate through the catalog, then the compact parser.

    Grammars form the outer loop and the four normalized forms the inner one,
    so an early grammar on a later form beats a later grammar on the original.
    """

    forms = normalized_forms(c.text)
    if not forms.original:
        return None

    for grammar in catalog_for(policy.day_first):
        for form_name, s in forms.items():
            d = grammar.parse(s)
            if d and is_reasonable(d, now, policy):
                return DateMatch(d=d, candidate=c, grammar=grammar.name, form=form_name)

    for form_name, s in (("original", forms.original), ("normalized", forms.normalized)):
        d = parse_compact(s)
        if d and is_reasonable(d, now, policy):
            return DateMatch(d=d, candidate=c, grammar="compact", form=form_name)

    return None


def find_date(text: str, now: date, policy: DatePolicy = DEFAULT_POLICY) -> DateMatch | None:
    """Return the first validated date: keyword-anchored candidates, then a general sweep."""

    if not text or not text.strip():
        return None

    for c in chain(keyword_candidates(text), general_candidates(text)):
        m = resolve_candidate(c, now, policy)
        if m:
            return m
    return None


def parse_date_from_text(text: str, now: date, policy: DatePolicy = DEFAULT_POLICY) -> date | None:
    m = find_date(text, now, policy)
    return m.d if m else None
