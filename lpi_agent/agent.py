"""Agent orchestration: question routing, record fetching, and result cleaning."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from . import store
from .extractors import extract_limit, extract_region, extract_threshold
from .guardrails import validate_path
from .intent import detect_intent
from .models import AskResponse
from .normalize import normalize_question
from .path_builder import build_average_query, build_ranking_query
from .ranking import region_averages, region_scores, rows_above, top_n
from .settings import get_settings
from .translator import TranslationError, translate_question

NOT_APPLICABLE_MESSAGE = (
    "I can only answer questions about country logistics performance (LPI) "
    "data, such as country scores or regional averages."
)


def _rows_response(
    path: str, rows: List[Dict[str, Any]], explanation: str, warnings: List[str]
) -> AskResponse:
    return AskResponse(
        type="rows",
        answer="Here are the results of your query.",
        path=path,
        rows=rows,
        explanation=explanation,
        warnings=warnings,
    )


def _error_response(path: str | None, explanation: str, warnings: List[str]) -> AskResponse:
    return AskResponse(
        type="error",
        answer="",
        path=path,
        explanation=explanation,
        warnings=warnings,
    )


def run_agent(question: str) -> AskResponse:
    """Process a user question end-to-end: route, fetch, clean, rank."""
    normalized_question = normalize_question(question)
    intent = detect_intent(normalized_question)
    region = extract_region(normalized_question)
    warnings: List[str] = []

    # Deterministic routing: these questions need local cleaning, so fetch the
    # raw columns and never trust the store to order or filter scores.
    if intent["is_average"]:
        path = build_average_query(region)
    elif intent["is_top_n"] or intent["is_above"]:
        path = build_ranking_query(region)
    else:
        try:
            proposed_path = translate_question(normalized_question)
        except TranslationError:
            return _error_response(
                None,
                "Failed to translate the question into a query.",
                ["Model generation failed; please try rephrasing your question."],
            )
        validation = validate_path(proposed_path)
        if validation["status"] == "blocked":
            logging.info("Blocked path %r: %s", proposed_path, validation["reason"])
            return AskResponse(
                type="text",
                answer=NOT_APPLICABLE_MESSAGE,
                explanation=validation["reason"],
                warnings=[],
            )
        path = validation["path"]
        warnings.extend(validation["warnings"])

    logging.info("Routing question %r to %s", normalized_question, path)

    try:
        data = store.fetch_rows(path)
    except store.RecordStoreError:
        warnings.append("Record store request failed.")
        return _error_response(
            path, "Failed to fetch records; please try again later.", warnings
        )

    if intent["is_average"]:
        used = region_scores(data)
        averages = region_averages(data)
        return AskResponse(
            type="averages",
            answer="Here is the average LPI score per region.",
            path=path,
            averages=averages,
            explanation=(
                f"Averaged {sum(len(s) for s in used.values())} rows "
                f"over {len(averages)} regions."
            ),
            warnings=warnings,
        )

    if not data:
        return _rows_response(path, [], "No matching records were found.", warnings)

    if intent["is_top_n"]:
        limit = extract_limit(normalized_question) or get_settings().default_top_n
        rows = top_n(data, limit)
        explanation = f"Top {limit} countries by LPI score, ties at the cutoff included."
        if len(rows) > limit:
            explanation += f" {len(rows) - limit} extra tied countries were kept."
        return _rows_response(path, rows, explanation, warnings)

    if intent["is_above"]:
        threshold = extract_threshold(normalized_question)
        rows = rows_above(data, threshold)
        return _rows_response(
            path, rows, f"Countries scoring above {threshold:g}, one row per country.", warnings
        )

    return _rows_response(path, data, f"Returned {len(data)} rows.", warnings)
