"""
Condition Detector

Scans free-text signs/symptoms for known condition synonyms, with a local
negation check ("no fever", "without cough").
"""

import re
from typing import Mapping, Optional

from app.core.logging import get_logger
from app.services.medical_data import CONDITION_SYNONYMS

logger = get_logger(__name__)

NEGATION_WORDS = ("no", "not", "without", "absent")

_NEGATION_PREFIX = r"\b(?:" + "|".join(NEGATION_WORDS) + r")\s+"

# (positive pattern, negated pattern) per synonym
SynonymPatterns = tuple[tuple[re.Pattern, re.Pattern], ...]


def compile_synonym_patterns(
    synonyms: Mapping[str, tuple[str, ...]],
) -> tuple[tuple[str, SynonymPatterns], ...]:
    """Compile whole-word and negated-phrase patterns for every synonym."""
    compiled = []
    for condition, phrases in synonyms.items():
        patterns = []
        for phrase in phrases:
            escaped = re.escape(phrase)
            patterns.append((
                re.compile(rf"\b{escaped}\b", re.IGNORECASE),
                re.compile(rf"{_NEGATION_PREFIX}{escaped}\b", re.IGNORECASE),
            ))
        compiled.append((condition, tuple(patterns)))
    return tuple(compiled)


_CONDITION_PATTERNS = compile_synonym_patterns(CONDITION_SYNONYMS)


def detect_conditions(signs_text: Optional[str]) -> list[str]:
    """
    Detect canonical conditions mentioned in a signs/symptoms note.

    A synonym counts when it appears as a whole word and is not also preceded
    by a negation word anywhere in the text. The first counting synonym wins
    for its condition; a negated synonym lets later synonyms still match.

    Known limitation: negation is a local pattern, not scope analysis.

    Args:
        signs_text: Raw signs/symptoms text.

    Returns:
        Detected conditions, each at most once, in synonym-table order.
    """
    if not signs_text:
        return []

    lower_text = signs_text.lower()
    detected = []

    for condition, patterns in _CONDITION_PATTERNS:
        for positive, negated in patterns:
            if positive.search(lower_text) and not negated.search(lower_text):
                detected.append(condition)
                break

    if detected:
        logger.debug("Detected conditions", extra={"conditions": detected})

    return detected
