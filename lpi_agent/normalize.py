"""Deterministic normalization of user questions to canonical intent markers."""

from __future__ import annotations

import re

# Phrases without word boundaries (CJK has no spaces between words).
CJK_PHRASE_MAP = {
    "前五": " top 5 ",
    "平均": " average ",
    "高於": " above ",
    "大於": " above ",
}

# "over" needs a number after it, "mean" needs "score".
PHRASE_PATTERNS = {
    r"\btop five\b": "top 5",
    r"\bmean(?= scores?\b)": "average",
    r"\bgreater than\b": "above",
    r"\bhigher than\b": "above",
    r"\bmore than\b": "above",
    r"\bover(?=\s+\d)": "above",
}


def normalize_question(question: str) -> str:
    """Rewrite human phrasings onto the markers ``detect_intent`` looks for."""
    normalized = question.lower()
    for phrase, marker in CJK_PHRASE_MAP.items():
        normalized = normalized.replace(phrase, marker)
    for pattern, marker in PHRASE_PATTERNS.items():
        normalized = re.sub(pattern, marker, normalized)
    return re.sub(r"\s+", " ", normalized).strip()
