"""English number-word lookup table for 0-99."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

UNITS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

TENS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)


def build_number_words() -> Dict[str, str]:
    """Build the word -> decimal string table.

    Covers ``zero`` through ``nineteen`` verbatim, each tens word on its own,
    and every tens/units compound in both ``"thirty-two"`` and ``"thirty two"``
    spellings.
    """
    table: Dict[str, str] = {}
    for value, word in enumerate(UNITS):
        table[word] = str(value)

    for tens_digit in range(2, 10):
        tens_word = TENS[tens_digit]
        table[tens_word] = str(tens_digit * 10)
        for unit_digit in range(1, 10):
            value = str(tens_digit * 10 + unit_digit)
            table[f"{tens_word} {UNITS[unit_digit]}"] = value
            table[f"{tens_word}-{UNITS[unit_digit]}"] = value
    return table


NUMBER_WORDS: Mapping[str, str] = MappingProxyType(build_number_words())
