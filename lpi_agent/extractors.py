"""Deterministic extractors for values mentioned in normalized questions."""

from __future__ import annotations

import re
from typing import Optional

from .numbers import NUMBER_WORDS

REGIONS = ("middle east", "asia", "europe", "africa", "americas", "oceania")


def extract_limit(question: str) -> Optional[int]:
    """Extract N from "top N", as digits or a number word."""
    match = re.search(r"\btop\s+(\d+)\b", question.lower())
    if match:
        return int(match.group(1))
    match = re.search(r"\btop\s+([a-z]+(?:[- ][a-z]+)?)", question.lower())
    if match:
        words = match.group(1)
        # "top twenty one" before "top twenty"
        for candidate in (words, words.split()[0]):
            if candidate in NUMBER_WORDS:
                return int(NUMBER_WORDS[candidate])
    return None


def extract_threshold(question: str) -> float:
    """Extract the first decimal number in the question, 0.0 if there is none."""
    match = re.search(r"\d+(\.\d+)?", question)
    if match:
        return float(match.group())
    return 0.0


def extract_region(question: str) -> Optional[str]:
    """Extract the first known region name, title-cased."""
    q = question.lower()
    for region in REGIONS:
        if re.search(rf"\b{region}\b", q):
            return region.title()
    return None
