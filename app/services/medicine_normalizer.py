"""
Medicine Text Normalization

Turns free-text medicine mentions from visit notes into canonical names and
dosage-collapsed frequency tables for analytics.
"""

import re
from typing import Iterable, Optional

from app.services.medical_data import BRAND_TO_GENERIC, KNOWN_MEDICINE_NAMES

_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[-_]")
_HYPHENATED_WORD_RE = re.compile(r"[^\s\-_]+(?:[-_]+[^\s\-_]+)+")
_UNIT_TOKEN_RE = re.compile(r"\s*\b(mg|ml|gm)\b\s*", re.IGNORECASE)
_DOSAGE_SPLIT_RE = re.compile(r"\s+\d")


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _replace_separators(text: str) -> str:
    """Turn hyphens/underscores into spaces, rejoining split known names."""

    def _rejoin_or_split(match: re.Match) -> str:
        word = match.group(0)
        joined = _SEPARATOR_RE.sub("", word)
        if joined in KNOWN_MEDICINE_NAMES:
            return joined
        return _SEPARATOR_RE.sub(" ", word)

    text = _HYPHENATED_WORD_RE.sub(_rejoin_or_split, text)
    return _SEPARATOR_RE.sub(" ", text)


def normalize_medicine(medicine: Optional[str]) -> str:
    """
    Normalize a single medicine mention to its canonical form.

    Brand names are resolved to generics, unit spacing is standardized and the
    first letter is capitalized. Dosage text is preserved.

    Args:
        medicine: One medicine mention, e.g. "crocin 500mg".

    Returns:
        Normalized name, or an empty string for blank input.
    """
    if not medicine:
        return ""

    normalized = _collapse_whitespace(medicine.lower())
    normalized = _replace_separators(normalized)
    normalized = _UNIT_TOKEN_RE.sub(lambda m: f" {m.group(1).lower()} ", normalized)
    normalized = _collapse_whitespace(normalized)

    if not normalized:
        return ""

    base_name, _, dosage = normalized.partition(" ")
    generic = BRAND_TO_GENERIC.get(base_name)
    if generic is not None:
        normalized = f"{generic} {dosage}" if dosage else generic

    return normalized[:1].upper() + normalized[1:]


def extract_medicines(medicines_text: Optional[str]) -> list[str]:
    """
    Split a visit's medicines blob into normalized medicine names.

    One medicine per line; blank lines are dropped, order and duplicates kept.
    """
    if not medicines_text:
        return []

    medicines = []
    for line in medicines_text.split("\n"):
        line = line.strip()
        if not line:
            continue
        normalized = normalize_medicine(line)
        if normalized:
            medicines.append(normalized)

    return medicines


def medicine_grouping_key(medicine: str) -> str:
    """Strip the dosage suffix (from the first whitespace-led digit onwards)."""
    return _DOSAGE_SPLIT_RE.split(medicine, maxsplit=1)[0].strip()


def group_medicines(medicines: Iterable[str]) -> dict[str, int]:
    """
    Count medicine mentions per dosage-free name.

    Args:
        medicines: Normalized medicine names.

    Returns:
        Mapping of grouping key to occurrence count, in first-seen order.
    """
    grouped: dict[str, int] = {}

    for medicine in medicines:
        key = medicine_grouping_key(medicine)
        if not key:
            continue
        grouped[key] = grouped.get(key, 0) + 1

    return grouped
