"""Pydantic models for request and response payloads."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """Incoming natural language question about LPI data."""

    question: str = Field(..., description="Natural language question to answer")


class AskResponse(BaseModel):
    """Structured response returned by the agent."""

    type: Literal["rows", "averages", "text", "error"] = Field(
        ..., description="Which kind of payload the response carries"
    )
    answer: str = Field(..., description="Human-friendly answer to the question")
    path: Optional[str] = Field(
        default=None, description="Record store query path, if one was run"
    )
    rows: List[Dict[str, Any]] = Field(
        default_factory=list, description="Row-level results when applicable"
    )
    averages: Optional[Dict[str, float]] = Field(
        default=None, description="Average score per region for average questions"
    )
    explanation: Optional[str] = Field(
        default=None, description="Explanation of how the answer was derived"
    )
    warnings: List[str] = Field(
        default_factory=list, description="Any safety or validation warnings"
    )
