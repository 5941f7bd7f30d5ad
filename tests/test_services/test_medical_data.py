"""
Tests for the medical vocabulary tables and autocomplete suggestions.
"""

import pytest

from app.core.exceptions import MedicalDataError
from app.services.medical_data import (
    BRAND_TO_GENERIC,
    COMMON_CONDITIONS,
    CONDITION_SYNONYMS,
    KNOWN_MEDICINE_NAMES,
    validate_tables,
)
from app.services.suggestions import (
    merge_medicine_names,
    suggest_conditions,
    suggest_medicines,
)


def test_shipped_tables_are_valid():
    """Test the built-in vocabulary passes validation."""
    validate_tables()

    for condition, synonyms in CONDITION_SYNONYMS.items():
        assert condition in COMMON_CONDITIONS
        assert condition.lower() in synonyms


def test_tables_are_read_only():
    """Test the lookup tables cannot be mutated at runtime."""
    with pytest.raises(TypeError):
        BRAND_TO_GENERIC["newbrand"] = "Generic"
    with pytest.raises(TypeError):
        CONDITION_SYNONYMS["Fever"] = ("fever",)


def test_known_medicine_names():
    """Test hyphen-rejoin vocabulary covers brands, generics and suggestions."""
    assert "crocin" in KNOWN_MEDICINE_NAMES
    assert "paracetamol" in KNOWN_MEDICINE_NAMES
    assert "levothyroxine" in KNOWN_MEDICINE_NAMES
    assert "amoxicillin + clavulanic acid" not in KNOWN_MEDICINE_NAMES


@pytest.mark.parametrize("synonyms, message", [
    ({"Fever": ()}, "no synonyms"),
    ({"Fever": ("Fever",)}, "lower-case"),
    ({"Fever": ("pyrexia",)}, "does not list itself"),
    ({"Gout": ("gout",)}, "not a canonical condition"),
])
def test_degenerate_synonyms_rejected(synonyms, message):
    """Test broken synonym tables fail validation."""
    with pytest.raises(MedicalDataError, match=message):
        validate_tables(synonyms=synonyms)


@pytest.mark.parametrize("brands", [
    {"Crocin": "Paracetamol"},
    {"dolo 650": "Paracetamol"},
    {"crocin": "  "},
])
def test_degenerate_brands_rejected(brands):
    """Test broken brand tables fail validation."""
    with pytest.raises(MedicalDataError):
        validate_tables(brands=brands)


def test_suggest_conditions_uses_last_word():
    """Test condition suggestions match the last typed word."""
    assert suggest_conditions("fever, back") == ["Back Pain"]
    assert suggest_conditions("Fev") == ["Fever", "Viral Fever"]
    assert suggest_conditions("cough, f") == []
    assert suggest_conditions(None) == []


def test_merge_medicine_names_prefers_custom_spelling():
    """Test custom names come first and duplicates collapse case-insensitively."""
    merged = merge_medicine_names(["Becocnx Plus", "paracetamol 500MG"])

    assert merged[:2] == ["Becocnx Plus", "paracetamol 500MG"]
    assert "Paracetamol 500mg" not in merged
    assert len(merged) == len(set(m.lower() for m in merged))


def test_suggest_medicines_matches_substring():
    """Test medicine suggestions match anywhere in the name."""
    suggestions = suggest_medicines("  AMLO ")

    assert suggestions == ["Amlodipine 5mg", "Amlodipine 10mg"]
    assert suggest_medicines("   ") == []
    assert suggest_medicines("becocnx", ["Becocnx Plus"])[0] == "Becocnx Plus"
