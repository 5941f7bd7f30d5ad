"""
Tests for medicine normalization, extraction and grouping.
"""

import pytest

from app.services.medicine_normalizer import (
    extract_medicines,
    group_medicines,
    medicine_grouping_key,
    normalize_medicine,
)


@pytest.mark.parametrize("raw, expected", [
    ("crocin 500mg", "Paracetamol 500mg"),
    ("Augmentin 625mg", "Amoxicillin + Clavulanic Acid 625mg"),
    ("DOLO", "Paracetamol"),
    ("combiflam 1 tab BD", "Ibuprofen + Paracetamol 1 tab bd"),
])
def test_normalize_resolves_brands(raw: str, expected: str):
    """Test brand names are replaced by their generic, dosage kept."""
    assert normalize_medicine(raw) == expected


def test_normalize_standardizes_case_and_spacing():
    """Test casing, hyphens and unit spacing are standardized."""
    assert normalize_medicine("  PARA-CETAMOL   500 MG ") == "Paracetamol 500 mg"


def test_normalize_splits_unknown_hyphenated_words():
    """Test hyphens in unknown names become spaces."""
    assert normalize_medicine("co-trimoxazole_forte") == "Co trimoxazole forte"


def test_normalize_spaces_standalone_units():
    """Test standalone unit tokens get single spaces, glued units stay glued."""
    assert normalize_medicine("Syrup 5   ML twice") == "Syrup 5 ml twice"
    assert normalize_medicine("Iron 100mg") == "Iron 100mg"


def test_normalize_leaves_unit_letters_inside_words():
    """Test unit letters inside a word are not treated as units."""
    assert normalize_medicine("augmentin") == "Amoxicillin + Clavulanic Acid"
    assert normalize_medicine("omeprazole 20 mg") == "Omeprazole 20 mg"


def test_normalize_brand_lookup_uses_first_token_only():
    """Test brand lookup is exact on the first token, not a substring."""
    assert normalize_medicine("crocinplus 500mg") == "Crocinplus 500mg"
    assert normalize_medicine("tab crocin") == "Tab crocin"


def test_normalize_is_idempotent_for_canonical_names():
    """Test normalizing twice gives the same result."""
    for raw in ["Paracetamol 500 mg", "Vitamin d3 60000 iu", "Iron 100mg"]:
        once = normalize_medicine(raw)
        assert normalize_medicine(once) == once


@pytest.mark.parametrize("raw", [None, "", "   ", "-", "_ -"])
def test_normalize_blank_input(raw):
    """Test blank input returns an empty string."""
    assert normalize_medicine(raw) == ""


def test_extract_preserves_order_and_drops_blanks():
    """Test extraction keeps line order and skips blank lines."""
    medicines = extract_medicines("Paracetamol 500mg\n\nCrocin\n")

    assert medicines == ["Paracetamol 500mg", "Paracetamol"]


def test_extract_keeps_duplicates():
    """Test duplicate mentions are kept for downstream counting."""
    medicines = extract_medicines("dolo 650\n  Dolo 650  \n-\n")

    assert medicines == ["Paracetamol 650", "Paracetamol 650"]


@pytest.mark.parametrize("blob", [None, "", "\n\n  \n"])
def test_extract_empty_input(blob):
    """Test missing medicines text yields no medicines."""
    assert extract_medicines(blob) == []


def test_grouping_key_strips_dosage():
    """Test grouping key is cut at the first whitespace-led digit."""
    assert medicine_grouping_key("Paracetamol 500mg") == "Paracetamol"
    assert medicine_grouping_key("Vitamin D3 60000 IU") == "Vitamin D3"
    assert medicine_grouping_key("Salbutamol Inhaler") == "Salbutamol Inhaler"


def test_group_collapses_dosage_variants():
    """Test dosage variants share one bucket."""
    grouped = group_medicines(["Paracetamol 500mg", "Paracetamol 650mg", "Paracetamol 500mg"])

    assert grouped == {"Paracetamol": 3}


def test_group_keeps_first_seen_order():
    """Test buckets appear in first-encountered order."""
    grouped = group_medicines(["Metformin 500mg", "Aspirin 75mg", "Metformin 850mg"])

    assert list(grouped) == ["Metformin", "Aspirin"]
    assert grouped == {"Metformin": 2, "Aspirin": 1}


def test_group_empty_input():
    """Test no mentions yields an empty table."""
    assert group_medicines([]) == {}
    assert group_medicines([""]) == {}
