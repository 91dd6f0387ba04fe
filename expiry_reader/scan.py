"""Label reading pipeline: OCR text -> product name, category and expiry date.

The date engine itself is pure; this module is where OCR, corrections and the
manufacture-date policy meet, and where logging happens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

from .corrections import apply_corrections
from .date import DEFAULT_POLICY, DatePolicy, find_date
from .ocr.base import OcrEngine
from .product import extract_product_name, suggest_category
from .reclassify import reclassify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelReading:
    raw_text: str
    product_name: str
    category: str
    found_date: date | None = None
    expiry_date: date | None = None
    is_manufacture_date: bool = False
    anchor: str | None = None  # keyword the date was found under, if any
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "product_name": self.product_name,
            "category": self.category,
            "found_date": self.found_date.isoformat() if self.found_date else None,
            "expiry_date": self.expiry_date.isoformat() if self.expiry_date else None,
            "is_manufacture_date": self.is_manufacture_date,
            "anchor": self.anchor,
            "note": self.note,
            "raw_text": self.raw_text,
        }


def read_label_text(
    text: str,
    *,
    today: date,
    policy: DatePolicy = DEFAULT_POLICY,
    corrections_map: Path | None = None,
) -> LabelReading:
    cleaned = apply_corrections(text or "", corrections_map)

    name = extract_product_name(cleaned, max_chars=policy.name_max_chars)
    category = suggest_category(cleaned)

    m = find_date(cleaned, today, policy)
    if not m:
        logger.info("No date found (name=%r)", name)
        return LabelReading(raw_text=cleaned, product_name=name, category=category)

    logger.debug("Date %s from %s candidate %r via %s/%s", m.d, m.candidate.origin, m.candidate.text, m.grammar, m.form)

    est = reclassify(cleaned, m.d, policy)
    return LabelReading(
        raw_text=cleaned,
        product_name=name,
        category=category,
        found_date=m.d,
        expiry_date=est.expiry if est else m.d,
        is_manufacture_date=bool(est and est.is_manufacture_date),
        anchor=m.candidate.keyword,
        note=est.note if est else None,
    )


def read_label_image(
    image_bytes: bytes,
    engine: OcrEngine,
    *,
    today: date,
    policy: DatePolicy = DEFAULT_POLICY,
    corrections_map: Path | None = None,
) -> LabelReading:
    """OCR an image and read the label. OcrError propagates to the caller."""
    text = engine.ocr_image_bytes(image_bytes)
    logger.debug("%s returned %d characters", engine.name, len(text))
    return read_label_text(text, today=today, policy=policy, corrections_map=corrections_map)
