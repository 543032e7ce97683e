"""Deduplication, tie-inclusive ranking and region averages over raw LPI rows.

Raw rows come straight from the record store and are not trusted: names are
spelled inconsistently ("Viet Nam" / "VIETNAM") and scores may be words
("three point six"). Rows that cannot be interpreted are dropped silently.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .scores import to_score

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class CountryScore:
    """Best-known score for one country within a single call."""

    country_key: str
    display_name: str
    region: Any
    score: float


def canonical_country_key(country: str) -> str:
    """Return the deduplication identity: no whitespace, upper case."""
    return _WHITESPACE_RE.sub("", country).upper()


def collect_country_scores(
    rows: Optional[Iterable[Mapping[str, Any]]],
) -> List[CountryScore]:
    """Drop unusable rows and parse the rest into ``CountryScore`` entries."""
    scores: List[CountryScore] = []
    for row in rows or ():
        country = row.get("country")
        raw_score = row.get("lpi_score")
        if country is None or raw_score is None:
            continue

        display_name = str(country).strip()
        if not display_name:
            continue
        country_key = canonical_country_key(display_name)
        logging.debug("Country %r -> key %r", display_name, country_key)

        score = to_score(raw_score)
        if score is None:
            continue

        scores.append(
            CountryScore(
                country_key=country_key,
                display_name=display_name,
                region=row.get("region"),
                score=score,
            )
        )
    return scores


def best_by_country(scores: Iterable[CountryScore]) -> Dict[str, CountryScore]:
    """Keep the highest score per canonical key.

    A later entry replaces the kept one only if it scores strictly higher, so
    the first-seen entry wins exact ties. Keys stay in first-encounter order.
    """
    best: Dict[str, CountryScore] = {}
    for entry in scores:
        current = best.get(entry.country_key)
        if current is None or entry.score > current.score:
            best[entry.country_key] = entry
    return best


def _sorted_best(rows: Optional[Iterable[Mapping[str, Any]]]) -> List[CountryScore]:
    best = best_by_country(collect_country_scores(rows))
    # sorted() is stable: equal scores keep first-encounter order
    return sorted(best.values(), key=lambda entry: entry.score, reverse=True)


def _to_result_row(entry: CountryScore) -> Dict[str, Any]:
    return {
        "country": entry.display_name,
        "region": entry.region,
        "lpi_score": entry.score,
    }


def top_n(
    rows: Optional[Iterable[Mapping[str, Any]]], limit: Optional[int] = None
) -> List[Dict[str, Any]]:
    """Return one row per country, best score first, cut at rank ``limit``.

    The cutoff is inclusive: every country tied with the score at rank
    ``limit`` is kept, so the result can be longer than ``limit``. Without a
    usable limit (``None``, non-positive, or more than the number of distinct
    countries) every country is returned.
    """
    ranked = _sorted_best(rows)
    if not ranked:
        return []

    if limit is not None and 0 < limit <= len(ranked):
        threshold = ranked[limit - 1].score
    else:
        threshold = ranked[-1].score

    return [_to_result_row(entry) for entry in ranked if entry.score >= threshold]


def rows_above(
    rows: Optional[Iterable[Mapping[str, Any]]], threshold: float
) -> List[Dict[str, Any]]:
    """Return one row per country scoring strictly above ``threshold``."""
    return [
        _to_result_row(entry) for entry in _sorted_best(rows) if entry.score > threshold
    ]


def region_scores(rows: Optional[Iterable[Mapping[str, Any]]]) -> Dict[str, List[float]]:
    """Group the usable scores by region (regions upper-cased and stripped)."""
    totals: Dict[str, List[float]] = {}
    for row in rows or ():
        region = row.get("region")
        raw_score = row.get("lpi_score")
        if region is None or raw_score is None:
            continue

        score = to_score(raw_score)
        if score is None:
            continue
        totals.setdefault(str(region).upper().strip(), []).append(score)
    return totals


def region_averages(rows: Optional[Iterable[Mapping[str, Any]]]) -> Dict[str, float]:
    """Average the usable scores per region."""
    return {
        region: sum(values) / len(values) for region, values in region_scores(rows).items()
    }
