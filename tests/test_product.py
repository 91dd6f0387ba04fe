from __future__ import annotations

import pytest

from expiry_reader.product import extract_product_name, suggest_category


def test_name_stops_at_expiry_line() -> None:
    name = extract_product_name("FRESH MILK 2L\nEXP 12/11/2025\nLOT 12345")
    assert name == "FRESH MILK 2L"
    assert "EXP" not in name
    assert "LOT" not in name


def test_name_joins_lines_above_the_date() -> None:
    text = "ORGANIC\nGREEK YOGURT\n500g\nBEST BEFORE 12 NOV 2026"
    assert extract_product_name(text) == "ORGANIC GREEK YOGURT 500g"


def test_name_stops_at_bare_date_line() -> None:
    assert extract_product_name("TOMATO SOUP\n12/11/2026\nSERVES 2") == "TOMATO SOUP"


def test_name_skips_blank_lines() -> None:
    assert extract_product_name("\n\n  CHEDDAR  \n\nLOT 55") == "CHEDDAR"


def test_keywords_inside_words_do_not_stop_the_name() -> None:
    text = "RUBBER DUCK BATH TOY\nEXP 12/11/2026"
    assert extract_product_name(text) == "RUBBER DUCK BATH TOY"


def test_name_falls_back_to_first_line() -> None:
    assert extract_product_name("EXP 12/11/2026\nFRESH MILK") == "EXP 12/11/2026"


def test_name_is_capped() -> None:
    text = ("A" * 60) + "\n" + ("B" * 60) + "\n" + ("C" * 10)
    name = extract_product_name(text)
    assert len(name) == 100
    assert name.startswith("A" * 60 + " B")
    assert "C" not in name


def test_name_of_empty_text() -> None:
    assert extract_product_name("") == ""
    assert extract_product_name("  \n ") == ""


@pytest.mark.parametrize(
    "text, category",
    [
        ("FRESH MILK 2L", "Dairy & Eggs"),
        ("FREE RANGE EGGS x12", "Dairy & Eggs"),
        ("STRAWBERRY JAM", "Fruits"),
        ("GREEN TEA", "Beverages"),
        ("CANDY BAR", "Snacks & Sweets"),
        ("DOG FOOD", "Pet Food"),
        ("STEAK SEASONING", "Other"),
        ("", "Other"),
    ],
)
def test_suggest_category(text: str, category: str) -> None:
    assert suggest_category(text) == category
