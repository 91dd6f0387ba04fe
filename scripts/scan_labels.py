#!/usr/bin/env python3
"""Read product name and expiry date from packaging photos (or OCR text files).

Usage:
  python3 scripts/scan_labels.py milk.jpg yogurt.png --engine tesseract --out results.jsonl
  python3 scripts/scan_labels.py label.txt --text --today 2026-10-17

Env:
  TESSERACT_CMD, TESSDATA_PREFIX, OCR_LANGUAGE (tesseract)
  AZURE_VISION_ENDPOINT, AZURE_VISION_KEY (azure)
  (or put them in .env)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from expiry_reader.date import DatePolicy
from expiry_reader.ocr.base import OcrError
from expiry_reader.ocr.registry import ENGINE_NAMES, build_engine
from expiry_reader.scan import LabelReading, read_label_image, read_label_text


def summary(path: Path, r: LabelReading) -> str:
    when = r.expiry_date.isoformat() if r.expiry_date else "no date"
    if r.is_manufacture_date and r.found_date:
        when += f" (est. from MFG {r.found_date.isoformat()})"
    return f"OK: {path.name}: {r.product_name or '?'} [{r.category}] -> {when}"


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("inputs", nargs="+", help="Image file(s), or text file(s) with --text")
    ap.add_argument("--text", action="store_true", help="Inputs are OCR text files; skip OCR")
    ap.add_argument("--engine", default="tesseract", help=f"OCR engine ({'|'.join(ENGINE_NAMES)})")
    ap.add_argument("--azure-language", default="en", help="Azure Read language hint (default: en)")
    ap.add_argument("--ocr-timeout", type=int, default=60, help="OCR timeout seconds (default: 60)")
    ap.add_argument("--today", default=None, help="Reference date YYYY-MM-DD (default: today)")
    ap.add_argument("--month-first", action="store_true", help="Read 03/04/2026 as March 4 (US labels)")
    ap.add_argument("--shelf-life-months", type=int, default=6, help="Added to manufacture dates (default: 6)")
    ap.add_argument(
        "--corrections-map",
        default=None,
        help="Optional JSON corrections (dict map or regex list) applied post-OCR",
    )
    ap.add_argument("--out", default=None, help="Write results as JSON lines to this file")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        today = date.fromisoformat(args.today) if args.today else date.today()
    except ValueError:
        raise SystemExit(f"Bad --today (expected YYYY-MM-DD): {args.today}")

    policy = DatePolicy(day_first=not args.month_first, shelf_life_months=int(args.shelf_life_months))
    corr = Path(args.corrections_map).expanduser().resolve() if args.corrections_map else None

    engine = None
    if not args.text:
        try:
            engine = build_engine(args.engine, azure_language=args.azure_language, timeout_s=args.ocr_timeout)
        except (OcrError, ValueError) as e:
            raise SystemExit(str(e))

    records: list[dict] = []
    failures = 0
    for inp in args.inputs:
        path = Path(inp).expanduser().resolve()
        if not path.exists():
            print(f"Missing: {path}", file=sys.stderr)
            failures += 1
            continue

        try:
            if engine is None:
                text = path.read_text(encoding="utf-8", errors="replace")
                reading = read_label_text(text, today=today, policy=policy, corrections_map=corr)
            else:
                reading = read_label_image(
                    path.read_bytes(), engine, today=today, policy=policy, corrections_map=corr
                )
        except OcrError as e:
            print(f"FAIL: {path.name}: {e}", file=sys.stderr)
            failures += 1
            continue

        print(summary(path, reading))
        records.append({"source": str(path), **reading.to_dict()})

    if args.out:
        outp = Path(args.out)
        outp.parent.mkdir(parents=True, exist_ok=True)
        outp.write_text("".join(json.dumps(r, ensure_ascii=False) + "\n" for r in records), encoding="utf-8")
        print(f"DONE: wrote {outp} ({len(records)} labels)")

    if failures and not records:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
