"""Deterministic record store paths for simple, single-table queries."""

from __future__ import annotations

from typing import Optional, Sequence

TABLE_PATH = "/rest/v1/countries_lpi"
RANKING_COLUMNS = ("country", "region", "lpi_score")
AVERAGE_COLUMNS = ("region", "lpi_score")


def build_countries_query(
    columns: Sequence[str],
    region: Optional[str] = None,
    order: Optional[str] = None,
    limit: Optional[int] = None,
) -> str:
    """Build a ``countries_lpi`` query path with PostgREST parameters."""
    params = [f"select={','.join(columns)}"]
    if region:
        params.append(f"region=ilike.*{region}*")
    if order:
        params.append(f"order={order}")
    if limit:
        params.append(f"limit={limit}")
    return f"{TABLE_PATH}?{'&'.join(params)}"


def build_ranking_query(region: Optional[str] = None) -> str:
    """Fetch every candidate row; ranking and thresholds are applied locally.

    Scores may be stored as words, so neither ordering nor ``gt.`` filters can
    be pushed down to the store.
    """
    return build_countries_query(RANKING_COLUMNS, region=region)


def build_average_query(region: Optional[str] = None) -> str:
    """Fetch region/score pairs for local averaging."""
    return build_countries_query(AVERAGE_COLUMNS, region=region)
