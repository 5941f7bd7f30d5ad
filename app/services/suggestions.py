"""
Autocomplete suggestions for the visit form's condition and medicine inputs.
"""

import re
from typing import Iterable, Optional

from app.services.medical_data import COMMON_CONDITIONS, COMMON_MEDICINES

MIN_CONDITION_QUERY = 2

_WORD_SPLIT_RE = re.compile(r"[\s,]+")


def suggest_conditions(text: Optional[str]) -> list[str]:
    """Suggest canonical conditions containing the last word typed."""
    if not text:
        return []

    last_word = _WORD_SPLIT_RE.split(text)[-1].lower()
    if len(last_word) < MIN_CONDITION_QUERY:
        return []

    return [c for c in COMMON_CONDITIONS if last_word in c.lower()]


def merge_medicine_names(custom_names: Iterable[str] = ()) -> list[str]:
    """
    Merge clinic-specific medicine names ahead of the built-in list.

    Names are de-duplicated case-insensitively; the first spelling wins.
    """
    merged: dict[str, str] = {}
    for name in [*custom_names, *COMMON_MEDICINES]:
        key = name.lower().strip()
        if key and key not in merged:
            merged[key] = name
    return list(merged.values())


def suggest_medicines(line: Optional[str], custom_names: Iterable[str] = ()) -> list[str]:
    """Suggest medicine names containing the current input line."""
    if not line or not line.strip():
        return []

    query = line.strip().lower()
    return [m for m in merge_medicine_names(custom_names) if query in m.lower()]
