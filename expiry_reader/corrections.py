from __future__ import annotations

import json
import re
from pathlib import Path

# Safe, label-specific OCR fixes applied before date parsing. Month tokens are
# only rewritten when they are not part of a longer word ("120CT2025" ->
# "12OCT2025").
GENERIC_FIXES: list[tuple[str, str]] = [
    (r"(?<![A-Za-z])0CT(?![A-Za-z])", "OCT"),
    (r"(?<![A-Za-z])N0V(?![A-Za-z])", "NOV"),
    (r"(?<![A-Za-z])J4N(?![A-Za-z])", "JAN"),
    (r"\bEXP[I1l|]RY\b", "EXPIRY"),
    (r"\bBEST\s*[8B]EF[O0]RE\b", "BEST BEFORE"),
    (r"\bU[S5]E\s*8Y\b", "USE BY"),
]


def apply_corrections(text: str, corrections_path: Path | None) -> str:
    """Apply OCR corrections to label text.

    Supports:
    1) JSON dict: {"wrong": "right"} (word-boundary, case-insensitive)
    2) JSON list: [["<regex>", "<replacement>"], ...] (applied in order)

    The generic label fixes above always run first. A missing file is a no-op.
    """
    out = text or ""

    for patt, repl in GENERIC_FIXES:
        out = re.sub(patt, repl, out, flags=re.IGNORECASE)

    if not corrections_path or not corrections_path.exists():
        return out

    obj = json.loads(corrections_path.read_text(encoding="utf-8"))

    if isinstance(obj, list):
        for item in obj:
            if not (isinstance(item, (list, tuple)) and len(item) == 2):
                continue
            patt, repl = item
            out = re.sub(str(patt), str(repl), out, flags=re.IGNORECASE)
        return out

    if isinstance(obj, dict):
        for wrong in sorted(obj.keys(), key=lambda s: len(str(s)), reverse=True):
            wrong_s = str(wrong).strip()
            if not wrong_s:
                continue
            patt = re.compile(rf"\b{re.escape(wrong_s)}\b", flags=re.IGNORECASE)
            out = patt.sub(str(obj[wrong]), out)
        return out

    raise ValueError(f"Unsupported corrections map (expected JSON object or list): {corrections_path}")
