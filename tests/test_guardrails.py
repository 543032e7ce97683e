"""Tests for query path building, cleaning and validation."""
from __future__ import annotations

import pytest

from lpi_agent.guardrails import clean_path, get_schema_context, validate_path
from lpi_agent.path_builder import (
    build_average_query,
    build_countries_query,
    build_ranking_query,
)
from lpi_agent.prompts import build_path_prompt


# ---------------------------------------------------------------------------
# Path builders
# ---------------------------------------------------------------------------


def test_build_ranking_query():
    assert build_ranking_query() == "/rest/v1/countries_lpi?select=country,region,lpi_score"


def test_build_average_query_with_region():
    assert (
        build_average_query("Asia")
        == "/rest/v1/countries_lpi?select=region,lpi_score&region=ilike.*Asia*"
    )


def test_build_countries_query_all_parameters():
    path = build_countries_query(["*"], region="Europe", order="lpi_score.desc", limit=50)
    assert path == (
        "/rest/v1/countries_lpi?select=*&region=ilike.*Europe*"
        "&order=lpi_score.desc&limit=50"
    )


def test_built_paths_pass_validation():
    result = validate_path(build_ranking_query("Africa"))
    assert result["status"] == "success"


# ---------------------------------------------------------------------------
# clean_path
# ---------------------------------------------------------------------------


def test_clean_path_strips_fences_and_prose():
    text = "```\nHere you go: /rest/v1/countries_lpi?select=country&limit=5\n```"
    assert clean_path(text) == "/rest/v1/countries_lpi?select=country&limit=5"


def test_clean_path_strips_quotes():
    assert clean_path("'/rest/v1/countries_lpi?select=*'") == "/rest/v1/countries_lpi?select=*"


def test_clean_path_without_path_keeps_first_line():
    assert clean_path("not applicable\nsorry") == "not applicable"


# ---------------------------------------------------------------------------
# validate_path
# ---------------------------------------------------------------------------


def test_validate_path_appends_limit():
    result = validate_path("/rest/v1/countries_lpi?select=country,lpi_score")
    assert result["status"] == "success"
    assert result["path"] == "/rest/v1/countries_lpi?select=country,lpi_score&limit=50"
    assert result["warnings"] == ["limit=50 was automatically applied for safety"]


def test_validate_path_keeps_existing_limit():
    path = "/rest/v1/countries_lpi?select=*&order=lpi_score.desc&limit=10"
    result = validate_path(path)
    assert result == {"status": "success", "path": path, "warnings": [], "reason": None}


def test_validate_path_adds_query_string_when_missing():
    assert validate_path("/rest/v1/countries_lpi")["path"] == "/rest/v1/countries_lpi?limit=50"


@pytest.mark.parametrize(
    "path",
    [
        None,
        "",
        "not applicable",
        "Error: connection refused",
        "/rest/v1/users?select=*&note=countries_lpi",
        "https://evil.example/rest/v1/countries_lpi",
        "/rest/v1/countries_lpi?select=* limit 5",
        "/rest/v1/countries_lpi?delete=true",
    ],
)
def test_validate_path_blocks(path):
    result = validate_path(path)
    assert result["status"] == "blocked"
    assert result["path"] is None
    assert result["reason"]


def test_prompt_ends_with_question():
    prompt = build_path_prompt("top 5 in asia")
    assert get_schema_context() in prompt
    assert prompt.endswith("Question: top 5 in asia\nPath:")
