"""Simple rule-based intent detection for LPI questions."""

from __future__ import annotations

import re
from typing import Dict

from .extractors import extract_region


def detect_intent(question: str) -> Dict[str, bool]:
    """Detect basic intents using keyword-based heuristics."""
    q = question.lower()

    is_top_n = bool(re.search(r"\b(top|best|highest)\b", q))
    is_average = bool(re.search(r"\b(average|avg)\b", q))
    is_above = bool(re.search(r"\babove\b", q))
    has_region = extract_region(q) is not None

    return {
        "is_top_n": is_top_n,
        "is_average": is_average,
        "is_above": is_above,
        "has_region": has_region,
    }
