from __future__ import annotations

import re

from .date.scanners import KEYWORDS, looks_like_date

NAME_MAX_CHARS = 100

# A line mentioning any of these ends the product-name block.
STOP_LINE_RE = re.compile(
    r".*(?<![A-Za-z])(?:" + "|".join(KEYWORDS + ("LOT", "BATCH")) + r")(?![A-Za-z]).*",
    re.IGNORECASE,
)

# Checked in order; the first category with a hit wins.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Dairy & Eggs", ("MILK", "DAIRY", "CHEESE", "YOGURT", "BUTTER", "CREAM", "EGG")),
    ("Meat & Poultry", ("MEAT", "CHICKEN", "BEEF", "PORK", "LAMB", "TURKEY", "SAUSAGE", "BACON")),
    ("Seafood", ("FISH", "SEAFOOD", "SALMON", "TUNA", "SHRIMP", "PRAWN")),
    ("Vegetables", ("VEGETABLE", "VEGGIE", "LETTUCE", "TOMATO", "CARROT", "SPINACH")),
    ("Fruits", ("FRUIT", "APPLE", "ORANGE", "BANANA", "BERRY", "BERRIES", "GRAPE")),
    ("Beverages", ("JUICE", "DRINK", "BEVERAGE", "SODA", "WATER", "TEA", "COFFEE")),
    ("Bread & Bakery", ("BREAD", "BAKERY", "CAKE", "PASTRY", "ROLL", "BAGEL")),
    ("Canned Goods", ("CANNED", "CAN", "TINNED")),
    ("Frozen Foods", ("FROZEN", "FREEZE")),
    ("Snacks & Sweets", ("SNACK", "CHIP", "CANDY", "CHOCOLATE", "COOKIE", "BISCUIT")),
    ("Condiments & Sauces", ("SAUCE", "KETCHUP", "MAYO", "MUSTARD", "DRESSING", "CONDIMENT")),
    ("Baby Food", ("BABY", "INFANT", "FORMULA")),
    ("Pet Food", ("PET", "DOG", "CAT", "ANIMAL")),
    ("Supplements & Vitamins", ("VITAMIN", "SUPPLEMENT", "MINERAL", "CAPSULE", "TABLET")),
)
DEFAULT_CATEGORY = "Other"


def _word_re(word: str) -> re.Pattern[str]:
    # Short words must stand alone (CAN vs CANDY, TEA vs STEAK); longer ones
    # may sit inside compounds (STRAWBERRY, BUTTERMILK).
    if len(word) <= 3:
        return re.compile(rf"\b{word}(?:S|ES)?\b")
    return re.compile(word)


_CATEGORY_RES = tuple((cat, tuple(_word_re(w) for w in words)) for cat, words in CATEGORY_KEYWORDS)


def extract_product_name(text: str, *, max_chars: int = NAME_MAX_CHARS) -> str:
    """Guess the product name: the lines above the first date/label line.

    Falls back to the first non-blank line when the label starts with a date.
    """
    if not text or not text.strip():
        return ""

    lines = [ln.strip() for ln in text.splitlines()]

    parts: list[str] = []
    size = 0
    for ln in lines:
        if not ln:
            continue
        if STOP_LINE_RE.fullmatch(ln) or looks_like_date(ln):
            break
        parts.append(ln)
        size += len(ln) + (1 if len(parts) > 1 else 0)
        if size >= max_chars:
            break

    name = " ".join(parts)[:max_chars].strip()
    if name:
        return name

    return next((ln for ln in lines if ln), "")


def suggest_category(text: str) -> str:
    up = (text or "").upper()
    for cat, patterns in _CATEGORY_RES:
        if any(p.search(up) for p in patterns):
            return cat
    return DEFAULT_CATEGORY
