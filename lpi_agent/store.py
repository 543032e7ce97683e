"""Read-only client for the Supabase REST record store."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict, List, Optional

import httpx

from .path_builder import build_countries_query
from .settings import get_settings


class RecordStoreError(RuntimeError):
    """Raised when rows cannot be fetched from the record store."""


def get_headers() -> Dict[str, str]:
    """Return the auth headers the REST endpoint expects."""
    key = get_settings().supabase_anon_key
    return {
        "apikey": key,
        "Authorization": f"Bearer {key}",
        "Accept": "application/json",
    }


def get_client() -> httpx.Client:
    """Create an HTTP client bound to the configured store URL."""
    settings = get_settings()
    return httpx.Client(
        base_url=settings.supabase_url.rstrip("/"),
        headers=get_headers(),
        timeout=settings.store_timeout_seconds,
    )


def fetch_rows(path: str, client: Optional[httpx.Client] = None) -> List[Dict[str, Any]]:
    """Run a GET query path and return the decoded rows.

    Raises ``RecordStoreError`` on transport failures, non-2xx responses and
    bodies that are not a JSON list.
    """
    owns_client = client is None
    http = client or get_client()
    start = perf_counter()
    try:
        response = http.get(path)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as exc:
        logging.error(
            "Record store returned %s for %s", exc.response.status_code, path
        )
        raise RecordStoreError(
            f"Record store returned HTTP {exc.response.status_code}"
        ) from exc
    except (httpx.HTTPError, ValueError) as exc:
        logging.error("Record store request failed for %s: %s", path, exc)
        raise RecordStoreError("Record store request failed") from exc
    finally:
        if owns_client:
            http.close()
    duration_ms = (perf_counter() - start) * 1000

    if not isinstance(data, list):
        logging.error("Record store returned a non-list body for %s", path)
        raise RecordStoreError("Record store returned an unexpected payload")

    logging.info("Fetched %d rows in %.2f ms from %s", len(data), duration_ms, path)
    return [row for row in data if isinstance(row, dict)]


def fetch_sample(limit: int = 50, client: Optional[httpx.Client] = None) -> List[Dict[str, Any]]:
    """Fetch raw rows with every column, for probing the data source."""
    return fetch_rows(build_countries_query(["*"], limit=limit), client=client)
