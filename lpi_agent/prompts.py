"""Schema-grounded prompt for question -> record store path generation."""

from __future__ import annotations

from .guardrails import get_schema_context

PATH_GENERATION_PROMPT = """You convert questions into Supabase REST API query paths.

Table: countries_lpi(id, country, region, lpi_score, year)

Rules:
- ONLY use the countries_lpi table and the columns listed above.
- For "above 3.0", use lpi_score=gt.3.0
- For a region such as "Asia", use region=ilike.*Asia*
- For "top 5", use order=lpi_score.desc&limit=50
- For "average by region", use select=region,lpi_score
- Output ONLY the path starting with /rest/v1/ (no explanations).
- If the question is not about logistics performance of countries, output: not applicable

Examples:

Question: Which countries in Europe score above 3.5
Path: /rest/v1/countries_lpi?select=country,region,lpi_score&region=ilike.*Europe*&lpi_score=gt.3.5

Question: Show the LPI score of Germany
Path: /rest/v1/countries_lpi?select=country,region,lpi_score&country=ilike.*Germany*

Question: List countries in Africa by score
Path: /rest/v1/countries_lpi?select=country,region,lpi_score&region=ilike.*Africa*&order=lpi_score.desc&limit=50

Question: What is the weather today
Path: not applicable
"""


def build_path_prompt(question: str) -> str:
    """Construct the full prompt by appending the user question at the end."""
    schema_context = get_schema_context()
    prompt = (
        PATH_GENERATION_PROMPT
        + "\n\nDatabase schema (for reference):\n"
        + schema_context
        + "\n\nQuestion: "
        + question
        + "\nPath:"
    )
    return prompt
