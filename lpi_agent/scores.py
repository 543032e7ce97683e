"""Score normalization: literal numerals and English number-word phrases."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from .numbers import NUMBER_WORDS

POINT_MARKER = " point "
NUMERIC_SCORE_RE = re.compile(r"^[0-9.]+$")


def _parse_decimal_part(section: str) -> str:
    """Translate the words after "point" into digits.

    A section that is itself a table key ("fifteen") is used whole, so it can
    produce more than one digit. Anything else is read word by word
    ("six six" -> "66"); unknown words are skipped.
    """
    if not section:
        return ""
    if section in NUMBER_WORDS:
        return NUMBER_WORDS[section]
    return "".join(NUMBER_WORDS.get(word, "") for word in section.split(" "))


def parse_score(raw_value: Any) -> str:
    """Convert a raw score into a decimal string such as ``"3.66"``.

    ``None`` becomes ``""``. Phrases like ``"three point six six"`` are
    converted; every other value is returned lowercased and stripped, so
    callers must check the result against ``NUMERIC_SCORE_RE`` themselves.
    Never raises.
    """
    if raw_value is None:
        return ""
    normalized = str(raw_value).lower().strip()

    sections = normalized.split(POINT_MARKER)
    if len(sections) == 2:
        integer_part = NUMBER_WORDS.get(sections[0], "")
        decimal_part = _parse_decimal_part(sections[1])
        if integer_part and decimal_part:
            return f"{integer_part}.{decimal_part}"

    return normalized


def to_score(raw_value: Any) -> Optional[float]:
    """Return the raw score as a finite float, or ``None`` if it is unusable."""
    cleaned = parse_score(raw_value).strip()
    if not NUMERIC_SCORE_RE.match(cleaned):
        return None
    try:
        score = float(cleaned)
    except ValueError:
        # e.g. "1.2.3" passes the character check but is not a number
        return None
    if not math.isfinite(score):
        return None
    return score
