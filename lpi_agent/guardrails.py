"""Query path safety, schema grounding, and validation utilities."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

ALLOWED_TABLE = "countries_lpi"
ALLOWED_COLUMNS = ("id", "country", "region", "lpi_score", "year")
PATH_PREFIX = "/rest/v1/"

FORBIDDEN_KEYWORDS = (
    "insert",
    "update",
    "delete",
    "drop",
    "upsert",
    "rpc",
)


def get_schema_context() -> str:
    """Return a human-readable schema outline for prompts."""
    return f"{ALLOWED_TABLE}({', '.join(ALLOWED_COLUMNS)})"


def clean_path(generated_text: str) -> str:
    """Strip code fences and explanations, keeping only the query path."""
    text = generated_text.strip()
    text = re.sub(r"```[a-z]*|```", "", text, flags=re.IGNORECASE).strip()
    match = re.search(r"(/rest/v1/\S+)", text)
    if match:
        return match.group(1).strip("`'\"")
    lines = text.splitlines()
    candidate = lines[0] if lines else text
    return candidate.strip().strip("`'\"")


def _blocked(reason: str) -> Dict[str, Optional[str]]:
    return {
        "status": "blocked",
        "path": None,
        "warnings": [],
        "reason": reason,
    }


def validate_path(path: Optional[str]) -> Dict[str, Optional[str]]:
    """Validate a query path for safety and schema compliance.

    Returns a unified contract:
    {
        "status": "success" | "blocked",
        "path": "possibly modified path",
        "warnings": [],
        "reason": str | None
    }
    """
    normalized = (path or "").strip()
    path_lower = normalized.lower()

    # Translators answer unrelated questions with free text
    if ALLOWED_TABLE not in path_lower:
        return _blocked("Question is not about country LPI data.")

    if not path_lower.startswith(PATH_PREFIX):
        return _blocked(f"Query path must start with {PATH_PREFIX}.")

    if re.search(r"\s", normalized):
        return _blocked("Query path must not contain whitespace.")

    table = path_lower[len(PATH_PREFIX):].split("?", 1)[0]
    if table != ALLOWED_TABLE:
        return _blocked("Query references tables outside the allowed schema.")

    for keyword in FORBIDDEN_KEYWORDS:
        if re.search(rf"\b{keyword}\b", path_lower):
            return _blocked(f"Query contains forbidden keyword: {keyword}.")

    warnings: List[str] = []
    if not re.search(r"[?&]limit=", path_lower):
        separator = "&" if "?" in normalized else "?"
        normalized = f"{normalized}{separator}limit=50"
        warnings.append("limit=50 was automatically applied for safety")

    return {
        "status": "success",
        "path": normalized,
        "warnings": warnings,
        "reason": None,
    }
