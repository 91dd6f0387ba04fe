"""Date extraction from OCR'd packaging text.

Keyword-anchored candidates (EXP, BEST BEFORE, MFG, ...) are tried before a
general sweep for date-shaped substrings. Each candidate runs through an
ordered grammar catalog, then a compact-form fallback, and only dates inside
the reasonableness window relative to the caller's ``now`` are returned.
"""

from .types import Candidate, DateMatch, DatePolicy, DEFAULT_POLICY, NormalizedForms
from .grammars import CATALOG, DAY_FIRST, DateGrammar, build_catalog
from .parsers import find_date, parse_date_from_text, resolve_candidate
